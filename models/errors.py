"""Исключения WeatherAlertsUS.

Все ошибки одного цикла запроса наследуются от AlertsError.
Пользователю показывается только текст сообщения.
"""

from typing import Optional


class AlertsError(Exception):
    """Базовая ошибка цикла проверка-запрос-отображение."""

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(AlertsError):
    """Введенный код штата не прошел проверку."""


class NetworkError(AlertsError):
    """Неуспешный HTTP статус или ошибка транспорта.

    Attributes:
        status_code: HTTP статус, None для ошибок транспорта
        reason: Текстовое описание статуса от сервера
    """

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(AlertsError):
    """Тело ответа не является JSON или имеет неожиданную структуру."""
