"""Конфигурация логирования для WeatherAlertsUS.

Предоставляет централизованную настройку логирования
с использованием loguru и различных output handlers.
"""

import sys
from pathlib import Path
from typing import Optional
from loguru import logger

from config import settings


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "1 day",
    retention: str = "10 days",
    enable_console: bool = True
) -> None:
    """Настроить логирование для приложения.

    Args:
        log_level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Путь к файлу логов
        rotation: Период ротации логов
        retention: Период хранения логов
        enable_console: Включить вывод в консоль
    """
    # Удаляем стандартный handler
    logger.remove()

    # Формат логов
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # Консольный вывод
    if enable_console:
        logger.add(
            sys.stdout,
            format=log_format,
            level=log_level,
            colorize=True,
            backtrace=True,
            diagnose=True
        )

    # Файловый вывод
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=log_format,
            level=log_level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True
        )

        # Отдельный файл для ошибок
        error_log_file = log_path.parent / f"{log_path.stem}_errors{log_path.suffix}"
        logger.add(
            error_log_file,
            format=log_format,
            level="ERROR",
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True
        )

    logger.info(f"Логирование настроено с уровнем: {log_level}")


def get_logger(name: str = None):
    """Получить логгер для конкретного модуля.

    Args:
        name: Имя модуля

    Returns:
        Logger: Экземпляр логгера
    """
    if name:
        return logger.bind(name=name)
    return logger


class ContextLogger:
    """Контекстный логгер для добавления контекста к сообщениям.

    Используется контроллером запросов: код штата и номер
    отправки добавляются ко всем сообщениям одного цикла.
    """

    def __init__(self, **context):
        self.context = context
        self.logger = logger.bind(**context)

    def _format(self, message: str) -> str:
        if not self.context:
            return message
        context_str = " ".join(f"{key}={value}" for key, value in self.context.items())
        return f"[{context_str}] {message}"

    def info(self, message: str, **kwargs):
        self.logger.info(self._format(message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._format(message), **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(self._format(message), **kwargs)

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._format(message), **kwargs)

    def bind(self, **kwargs):
        """Добавить новый контекст.

        Args:
            **kwargs: Новые контекстные параметры

        Returns:
            ContextLogger: Новый экземпляр с расширенным контекстом
        """
        new_context = {**self.context, **kwargs}
        return ContextLogger(**new_context)


def log_api_request(method: str, url: str, status_code: Optional[int], duration: float):
    """Логировать запрос к внешнему API.

    Args:
        method: HTTP метод
        url: URL запроса
        status_code: Код ответа, None если ответ не получен
        duration: Длительность запроса
    """
    ok = status_code is not None and 200 <= status_code < 300
    status_emoji = "✅" if ok else "❌"
    status_str = status_code if status_code is not None else "no response"
    logger.info(
        f"{status_emoji} {method} {url} -> {status_str} ({duration:.3f}s)"
    )


def log_error_with_context(error: Exception, context: dict = None):
    """Логировать ошибку с контекстом.

    Args:
        error: Исключение
        context: Контекстная информация
    """
    context_str = f" | Контекст: {context}" if context else ""
    logger.error(f"Ошибка: {type(error).__name__}: {error}{context_str}")


# Инициализация логирования по умолчанию
setup_logging(
    log_level=settings.log_level,
    log_file=settings.log_file or None,
    enable_console=True
)
