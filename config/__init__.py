"""Модуль конфигурации WeatherAlertsUS.

Содержит настройки приложения и константы.
"""

from .settings import settings, Settings


def reload_config() -> Settings:
    """Перечитать переменные окружения и обновить глобальные настройки.

    Существующий объект обновляется на месте, чтобы модули,
    импортировавшие ``settings`` ранее, увидели новые значения.

    Returns:
        Settings: Обновленные настройки
    """
    fresh = Settings()
    settings.__dict__.update(fresh.__dict__)
    return settings


__all__ = ["settings", "Settings", "reload_config"]
