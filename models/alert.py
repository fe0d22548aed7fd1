"""Модели данных для виджета погодных предупреждений.

Содержит Pydantic модели для валидации и сериализации ответа
api.weather.gov, результатов проверки ввода и состояния отображения.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError


# Двухбуквенный код штата: всегда верхний регистр, ровно две латинские буквы
REGION_CODE_PATTERN = r"^[A-Z]{2}$"


class AlertProperties(BaseModel):
    """Свойства одного предупреждения.

    Используется только ``headline``, остальные поля
    сохраняются как есть.
    """

    model_config = ConfigDict(extra="allow")

    headline: Optional[str] = Field(default=None, description="Заголовок предупреждения")


class AlertFeature(BaseModel):
    """Одно активное предупреждение из ответа API."""

    model_config = ConfigDict(extra="allow")

    properties: AlertProperties = Field(default_factory=AlertProperties)

    @property
    def headline(self) -> str:
        """Заголовок предупреждения или пустая строка."""
        return self.properties.headline or ""


class AlertResponse(BaseModel):
    """Ответ эндпоинта активных предупреждений.

    Attributes:
        title: Заголовок выборки (например "current watches, warnings, and advisories for Texas")
        features: Предупреждения в порядке, заданном API
    """

    model_config = ConfigDict(extra="allow")

    title: str = Field(..., description="Заголовок ответа")
    features: List[AlertFeature] = Field(default_factory=list, description="Активные предупреждения")

    @property
    def count(self) -> int:
        return len(self.features)


class ValidationResult(BaseModel):
    """Результат проверки введенного кода штата.

    Либо ``valid=True`` и ``value`` содержит код,
    либо ``valid=False`` и ``error`` содержит текст для пользователя.
    """

    valid: bool
    value: Optional[str] = Field(default=None, pattern=REGION_CODE_PATTERN)
    error: Optional[str] = None

    @classmethod
    def valid_code(cls, code: str) -> "ValidationResult":
        return cls(valid=True, value=code)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, error=reason)

    def unwrap(self) -> str:
        """Вернуть код штата или выбросить ValidationError.

        Raises:
            ValidationError: Если ввод не прошел проверку
        """
        if not self.valid:
            raise ValidationError(self.error)
        return self.value


class RenderedView(BaseModel):
    """Модель отображения ответа: строка-сводка и список заголовков.

    Attributes:
        summary: Строка вида "<title>: <count>"
        no_alerts: Флаг пустого состояния (список не выводится)
        no_alerts_message: Текст пустого состояния
        headlines: Заголовки предупреждений в исходном порядке
    """

    summary: str
    no_alerts: bool
    no_alerts_message: Optional[str] = None
    headlines: List[str] = Field(default_factory=list)


class UIState(BaseModel):
    """Временное состояние интерфейса на время одного запроса."""

    loading: bool = False
    error_text: str = ""

    @property
    def has_error(self) -> bool:
        return bool(self.error_text)


class ApiError(BaseModel):
    """Модель ошибки обращения к API для логирования.

    Attributes:
        error_type: Тип ошибки
        message: Сообщение об ошибке
        status_code: HTTP статус ответа, если он был получен
        timestamp: Время возникновения ошибки
    """

    error_type: str = Field(..., description="Тип ошибки")
    message: str = Field(..., description="Сообщение об ошибке")
    status_code: Optional[int] = Field(default=None, description="HTTP статус")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Время возникновения ошибки"
    )


class HealthCheckResponse(BaseModel):
    """Модель ответа health check endpoint.

    Attributes:
        status: Статус сервиса
        timestamp: Время проверки
        version: Версия приложения
        dependencies: Статусы зависимостей
    """

    status: str = Field(..., description="Статус сервиса")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Время проверки"
    )
    version: str = Field(default="1.0.0", description="Версия приложения")
    dependencies: Dict[str, Any] = Field(
        default_factory=dict,
        description="Статусы зависимостей"
    )
