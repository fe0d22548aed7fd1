"""HTML виджет погодных предупреждений.

Страница с полем ввода кода штата, кнопкой, областью ошибки,
индикатором загрузки и областью результатов. Каждая отправка
формы выполняет один цикл RequestController с отдельными
поверхностями в памяти, после чего страница собирается из их состояния.
"""

import time
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.alerts import get_alerts_service
from services import (
    WeatherAlertsService,
    RequestController,
    MemoryDisplaySurface,
    MemoryInputSource
)
from utils import metrics_collector, get_logger

# Инициализация логгера
logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

widget_router = APIRouter(tags=["widget"])


def _render_page(request: Request, display: MemoryDisplaySurface, input_source: MemoryInputSource):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "input_value": input_source.get_value(),
            "view": display.view,
            "state": display.state
        }
    )


@widget_router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Пустая страница виджета."""
    return _render_page(request, MemoryDisplaySurface(), MemoryInputSource())


@widget_router.get("/alerts", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    state: Optional[str] = None,
    service: WeatherAlertsService = Depends(get_alerts_service)
):
    """Отправка формы: проверка, запрос и отображение результата.

    Args:
        request: FastAPI Request объект
        state: Текст из поля ввода
        service: Сервис API предупреждений
    """
    start_time = time.time()

    display = MemoryDisplaySurface()
    input_source = MemoryInputSource(state)
    controller = RequestController(service, display, input_source)

    await controller.submit()

    duration = time.time() - start_time
    metrics_collector.record_http_request("GET", "/alerts", 200, duration)
    logger.debug(f"Страница собрана за {duration:.3f}s, ошибка: {display.state.has_error}")

    return _render_page(request, display, input_source)
