"""Сервисы WeatherAlertsUS.

Содержит бизнес-логику приложения: проверку ввода, запрос
к api.weather.gov, построение отображения и контроллер цикла.
"""

from .alerts_api import WeatherAlertsService
from .controller import RequestController
from .renderer import render_alerts, NO_ALERTS_MESSAGE
from .surfaces import InputSource, DisplaySurface, MemoryInputSource, MemoryDisplaySurface
from .validator import validate_state_input

__all__ = [
    "WeatherAlertsService",
    "RequestController",
    "render_alerts",
    "NO_ALERTS_MESSAGE",
    "InputSource",
    "DisplaySurface",
    "MemoryInputSource",
    "MemoryDisplaySurface",
    "validate_state_input"
]
