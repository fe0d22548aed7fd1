"""API роутеры для эндпоинтов погодных предупреждений.

Предоставляет JSON API поверх того же цикла проверка-запрос-отображение,
который использует HTML виджет.
"""

import time
from typing import Dict, Optional

from fastapi import APIRouter, Request, HTTPException, Depends
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi.responses import JSONResponse

from services import WeatherAlertsService, render_alerts, validate_state_input
from models import AlertsError, HealthCheckResponse, ValidationError
from utils import metrics_collector, get_logger, log_error_with_context
from config import settings

# Инициализация логгера
logger = get_logger(__name__)

# Инициализация limiter
limiter = Limiter(key_func=get_remote_address)

# Создание роутера
alerts_router = APIRouter(prefix="/api/v1", tags=["alerts"])

# Глобальная переменная для хранения сервиса
_alerts_service: Optional[WeatherAlertsService] = None


def get_alerts_service() -> WeatherAlertsService:
    """Dependency injection для сервиса API предупреждений.

    Returns:
        WeatherAlertsService: Экземпляр сервиса
    """
    global _alerts_service
    if _alerts_service is None:
        _alerts_service = WeatherAlertsService()
    return _alerts_service


def set_alerts_service(service: Optional[WeatherAlertsService]) -> None:
    """Установить общий экземпляр сервиса (вызывается из lifespan).

    Args:
        service: Сервис или None для сброса
    """
    global _alerts_service
    _alerts_service = service


@alerts_router.get("/alerts/{state}")
@limiter.limit(settings.rate_limit)
async def get_state_alerts(
    request: Request,
    state: str,
    service: WeatherAlertsService = Depends(get_alerts_service)
) -> Dict:
    """Получить сводку и заголовки активных предупреждений для штата.

    Args:
        request: FastAPI Request объект
        state: Код штата в любом регистре
        service: Сервис API предупреждений

    Returns:
        Dict: Сводка, флаг пустого состояния и заголовки

    Raises:
        HTTPException: 400 при ошибке ввода, 502 при ошибке внешнего API
    """
    start_time = time.time()
    endpoint = "/api/v1/alerts/{state}"

    try:
        code = validate_state_input(state).unwrap()
        data = await service.fetch_alerts(code)
        view = render_alerts(data)

    except ValidationError as e:
        duration = time.time() - start_time
        metrics_collector.record_http_request("GET", endpoint, 400, duration)
        metrics_collector.record_submission("invalid")
        logger.info(f"Отклонен код штата '{state}': {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except AlertsError as e:
        duration = time.time() - start_time
        metrics_collector.record_http_request("GET", endpoint, 502, duration)
        metrics_collector.record_submission("error")
        log_error_with_context(e, {"endpoint": endpoint, "state": state})
        raise HTTPException(status_code=502, detail=str(e))

    duration = time.time() - start_time
    metrics_collector.record_http_request("GET", endpoint, 200, duration)
    metrics_collector.record_submission("success")

    logger.info(f"Запрос предупреждений {code}: {view.summary}")

    return {
        "state": code,
        "summary": view.summary,
        "count": len(view.headlines),
        "no_alerts": view.no_alerts,
        "no_alerts_message": view.no_alerts_message,
        "headlines": view.headlines
    }


@alerts_router.get("/validate/{state}")
async def validate_state(state: str) -> Dict:
    """Проверить код штата без обращения к внешнему API.

    Args:
        state: Введенный текст

    Returns:
        Dict: valid, value и error
    """
    return validate_state_input(state).model_dump()


@alerts_router.get("/health")
async def health_check() -> HealthCheckResponse:
    """Проверить здоровье сервиса.

    Returns:
        HealthCheckResponse: Статус здоровья сервиса
    """
    try:
        service = get_alerts_service()

        dependencies = {
            "alerts_service": "ok" if service else "error",
            "upstream": service.base_url
        }

        is_healthy = service is not None
        response = HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            dependencies=dependencies
        )

        metrics_collector.update_system_status(is_healthy)
        logger.debug(f"Health check: {response.status}")

        return response

    except Exception as e:
        logger.error(f"Ошибка при health check: {e}")
        metrics_collector.update_system_status(False)

        return HealthCheckResponse(
            status="unhealthy",
            dependencies={"error": str(e)}
        )


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Обработчик превышения лимита запросов."""
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many requests",
            "error": "rate_limit_exceeded",
            "retry_after": "60"
        }
    )
