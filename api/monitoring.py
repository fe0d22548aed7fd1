"""API роутеры для мониторинга и метрик.

Предоставляет эндпоинты для мониторинга состояния приложения,
сбора Prometheus метрик и отладки.
"""

import time

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from utils import metrics_collector, get_logger
from config import settings

# Инициализация логгера
logger = get_logger(__name__)

# Создание роутера
monitoring_router = APIRouter(tags=["monitoring"])


@monitoring_router.get("/metrics", response_class=PlainTextResponse)
async def get_prometheus_metrics() -> str:
    """Получить метрики в формате Prometheus.

    Returns:
        str: Метрики в формате Prometheus
    """
    metrics_data = metrics_collector.get_metrics()

    if not metrics_data:
        logger.warning("Пустые метрики")
        return "# No metrics available\n"

    logger.debug("Запрошены Prometheus метрики")
    return metrics_data


@monitoring_router.get("/health/simple")
async def simple_health_check() -> dict:
    """Простая проверка здоровья сервиса.

    Возвращает минимальную информацию о статусе.
    Используется для базовых health checkов.
    """
    return {
        "status": "ok",
        "timestamp": time.time()
    }


@monitoring_router.get("/info")
async def get_app_info() -> dict:
    """Получить информацию о приложении.

    Returns:
        dict: Информация о приложении
    """
    return {
        "app_name": "WeatherAlertsUS",
        "version": "1.0.0",
        "description": "Active weather alerts by US state",
        "features": {
            "sentry_monitoring": settings.is_sentry_enabled,
            "prometheus_metrics": True,
            "rate_limiting": True
        },
        "configuration": {
            "upstream_url": settings.weather_api_url,
            "api_timeout": settings.request_timeout
        },
        "endpoints": {
            "widget": "/",
            "submit": "/alerts?state={code}",
            "alerts": "/api/v1/alerts/{state}",
            "validate": "/api/v1/validate/{state}",
            "health": "/api/v1/health",
            "metrics": "/metrics"
        }
    }


@monitoring_router.get("/ping")
async def ping() -> dict:
    """Простой ping endpoint."""
    return {"pong": True, "timestamp": time.time()}
