"""Конфигурация приложения WeatherAlertsUS.

Модуль содержит настройки приложения, переменные окружения
и конфигурацию клиента API погодных предупреждений.
"""

import os
from typing import Optional
from dotenv import load_dotenv
load_dotenv()


DEFAULT_API_URL = "https://api.weather.gov/alerts/active"
DEFAULT_USER_AGENT = "WeatherAlertsUS/1.0.0"


class Settings:
    """Класс настроек приложения с валидацией.

    Загружает переменные окружения и предоставляет
    значения по умолчанию с валидацией.
    """

    def __init__(self):
        """Инициализация настроек из переменных окружения."""
        # Настройки API api.weather.gov
        self.weather_api_url = os.getenv("WEATHER_API_URL", DEFAULT_API_URL).strip()
        self.user_agent = os.getenv("WEATHER_API_USER_AGENT", DEFAULT_USER_AGENT).strip()

        # Таймаут не задан по умолчанию - ждем столько, сколько позволяет транспорт
        timeout_env = os.getenv("REQUEST_TIMEOUT", "").strip()
        self.request_timeout: Optional[float] = float(timeout_env) if timeout_env else None

        # Настройки мониторинга
        self.sentry_dsn = os.getenv("SENTRY_DSN")

        # Настройки логирования
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE", "./logs/today.log")

        # Настройки rate limiting
        self.rate_limit = os.getenv("RATE_LIMIT", "100/10minutes")

        # Настройки порта
        self.port = int(os.getenv("PORT", "8500"))

        # CORS настройки
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        self.cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

        # Валидация настроек
        self._validate_settings()

    def _validate_settings(self):
        """Провести валидацию настроек."""
        if not self.weather_api_url.startswith(("http://", "https://")):
            raise ValueError('WEATHER_API_URL должен начинаться с http:// или https://')

        # api.weather.gov отклоняет запросы без User-Agent
        if not self.user_agent:
            raise ValueError('WEATHER_API_USER_AGENT не может быть пустым')

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError('REQUEST_TIMEOUT должен быть положительным числом')

        if self.log_level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f'Неизвестный уровень логирования: {self.log_level}')

        # Валидация порта
        if not (1 <= self.port <= 65535):
            raise ValueError('PORT должен быть в диапазоне 1-65535')

    @property
    def is_sentry_enabled(self) -> bool:
        """Проверяет, настроен ли Sentry.

        Returns:
            bool: True если DSN настроен
        """
        return bool(self.sentry_dsn and self.sentry_dsn.strip())

    @property
    def is_production(self) -> bool:
        """Production режим определяется ограниченным списком CORS origins."""
        return self.cors_origins != ["*"]


# Глобальный экземпляр настроек
settings = Settings()
