"""Контроллер одного цикла: проверка ввода, запрос, отображение.

Обеспечивает управление временным состоянием интерфейса
(индикатор загрузки, сообщение об ошибке) и очистку поля ввода.
"""

import itertools
from typing import Optional, Protocol

from models import AlertResponse, AlertsError, RenderedView
from services.renderer import render_alerts
from services.surfaces import DisplaySurface, InputSource
from services.validator import validate_state_input
from utils import ContextLogger, log_error_with_context, metrics_collector


class AlertFetcher(Protocol):
    async def fetch_alerts(self, code: str) -> AlertResponse:
        ...


class RequestController:
    """Оркестрация validator -> fetcher -> renderer.

    Состояния одной отправки:
    - проверка ввода: при ошибке показываем сообщение и выходим,
      запрос не выполняется, загрузка не включается
    - запрос: очищаем ошибку и прошлый результат, включаем загрузку
    - успех: показываем результат и очищаем поле ввода
    - ошибка: показываем текст ошибки

    Индикатор загрузки выключается при любом выходе из запроса.
    Параллельные отправки не блокируются: на экране остается
    ответ, пришедший последним.
    """

    def __init__(
        self,
        fetcher: AlertFetcher,
        display: DisplaySurface,
        input_source: InputSource
    ):
        """Инициализация контроллера.

        Args:
            fetcher: Сервис получения предупреждений
            display: Область вывода
            input_source: Поле ввода
        """
        self.fetcher = fetcher
        self.display = display
        self.input_source = input_source
        self._submission_ids = itertools.count(1)

    async def submit(self, raw_input: Optional[str] = None) -> Optional[RenderedView]:
        """Обработать одну отправку формы.

        Args:
            raw_input: Текст ввода; если не передан, читается из input_source

        Returns:
            Optional[RenderedView]: Отображенный результат или None при ошибке
        """
        if raw_input is None:
            raw_input = self.input_source.get_value()

        submission = next(self._submission_ids)
        log = ContextLogger(submission=submission)

        validation = validate_state_input(raw_input)
        if not validation.valid:
            log.info(f"Ввод отклонен: {validation.error}")
            self.display.show_error(validation.error)
            metrics_collector.record_submission("invalid")
            return None

        code = validation.value
        log = log.bind(state=code)

        self.display.clear_error()
        self.display.clear_content()
        self.display.show_loading()

        try:
            data = await self.fetcher.fetch_alerts(code)
            view = render_alerts(data)
            self.display.show_view(view)
            self.input_source.clear()

            log.info(f"Отображено: {view.summary}")
            metrics_collector.record_submission("success")
            return view

        except AlertsError as e:
            log_error_with_context(e, {"submission": submission, "state": code})
            self.display.show_error(str(e))
            metrics_collector.record_submission("error")
            return None

        finally:
            self.display.hide_loading()
