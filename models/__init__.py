"""Модели данных WeatherAlertsUS.

Содержит Pydantic модели для валидации ответа API,
результатов проверки ввода и состояния отображения.
"""

from .errors import AlertsError, ValidationError, NetworkError, ParseError
from .alert import (
    REGION_CODE_PATTERN,
    AlertProperties,
    AlertFeature,
    AlertResponse,
    ValidationResult,
    RenderedView,
    UIState,
    ApiError,
    HealthCheckResponse
)

__all__ = [
    "AlertsError",
    "ValidationError",
    "NetworkError",
    "ParseError",
    "REGION_CODE_PATTERN",
    "AlertProperties",
    "AlertFeature",
    "AlertResponse",
    "ValidationResult",
    "RenderedView",
    "UIState",
    "ApiError",
    "HealthCheckResponse"
]
