"""API роутеры WeatherAlertsUS.

Содержит FastAPI роутеры для HTML виджета, JSON API
и мониторинга с разделением ответственности.
"""

from .alerts import alerts_router, limiter, rate_limit_handler
from .monitoring import monitoring_router
from .widget import widget_router

__all__ = ["alerts_router", "monitoring_router", "widget_router", "limiter", "rate_limit_handler"]
