"""Утилиты WeatherAlertsUS.

Содержит вспомогательные функции и классы
для работы приложения.
"""

from .metrics import MetricsCollector, metrics_collector
from .logger import setup_logging, get_logger, ContextLogger, log_api_request, log_error_with_context

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "setup_logging",
    "get_logger",
    "ContextLogger",
    "log_api_request",
    "log_error_with_context"
]
