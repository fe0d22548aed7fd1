"""Сервис для работы с API api.weather.gov.

Обеспечивает получение активных погодных предупреждений
для штата и разбор ответа. Повторных попыток и кэширования нет:
один вызов - один GET запрос.
"""

import time
import asyncio
import threading
from typing import Optional

import requests
import sentry_sdk
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from config import settings
from models import AlertResponse, ApiError, NetworkError, ParseError
from utils import metrics_collector, log_api_request


class WeatherAlertsService:
    """Сервис для получения активных предупреждений по коду штата.

    Блокирующий запрос requests выполняется в отдельном потоке,
    поэтому ожидание ответа - единственная точка приостановки
    для вызывающей корутины.
    """

    def __init__(self, base_url: Optional[str] = None):
        """Инициализация сервиса.

        Args:
            base_url: Базовый URL эндпоинта, по умолчанию из настроек
        """
        self.settings = settings
        self.base_url = base_url or self.settings.weather_api_url
        self.session = requests.Session()
        # Session не потокобезопасен, запросы из to_thread идут по одному
        self._session_lock = threading.Lock()
        self._setup_session()

    def _setup_session(self) -> None:
        """Настройка HTTP сессии."""
        self.session.headers.update({
            "Accept": "application/geo+json",
            "User-Agent": self.settings.user_agent
        })

    def _create_error_log(self, error: Exception, status_code: Optional[int] = None) -> ApiError:
        """Создание объекта ошибки для логирования.

        Args:
            error: Исключение
            status_code: HTTP статус, если ответ получен

        Returns:
            ApiError: Объект ошибки для логирования
        """
        return ApiError(
            error_type=type(error).__name__,
            message=str(error),
            status_code=status_code
        )

    def build_url(self, code: str) -> str:
        """Собрать URL запроса.

        Код уже проверен и состоит из двух латинских букв,
        экранирование не требуется.
        """
        return f"{self.base_url}?area={code}"

    def _get(self, url: str) -> requests.Response:
        with self._session_lock:
            return self.session.get(url, timeout=self.settings.request_timeout)

    async def _make_request(self, url: str) -> requests.Response:
        """Выполнение одного HTTP запроса.

        Args:
            url: URL запроса

        Returns:
            requests.Response: Успешный ответ от API

        Raises:
            NetworkError: При ошибке транспорта или неуспешном статусе
        """
        start_time = time.time()

        try:
            response = await asyncio.to_thread(self._get, url)

        except requests.exceptions.RequestException as e:
            duration = time.time() - start_time
            error_log = self._create_error_log(e)
            logger.error(f"Ошибка запроса к API: {error_log.message}")
            log_api_request("GET", url, None, duration)
            metrics_collector.record_api_request("network_error", duration)
            if self.settings.is_sentry_enabled:
                sentry_sdk.capture_exception(e)
            raise NetworkError(f"Failed to fetch alerts: {e}") from e

        duration = time.time() - start_time
        log_api_request("GET", url, response.status_code, duration)

        if not 200 <= response.status_code < 300:
            reason = response.reason or ""
            message = f"Failed to fetch alerts: {response.status_code} {reason}".rstrip()
            error = NetworkError(message, status_code=response.status_code, reason=reason or None)
            error_log = self._create_error_log(error, response.status_code)
            logger.warning(f"HTTP ошибка API: {error_log.message}")
            metrics_collector.record_api_request("http_error", duration)
            raise error

        metrics_collector.record_api_request("success", duration)
        return response

    def _parse_response(self, response: requests.Response) -> AlertResponse:
        """Разбор тела ответа.

        Raises:
            ParseError: Если тело не JSON или структура не совпадает
        """
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Ответ API не является JSON: {e}")
            raise ParseError(f"Failed to parse alerts response: {e}") from e

        if not isinstance(payload, dict):
            raise ParseError("Failed to parse alerts response: expected a JSON object")

        try:
            return AlertResponse.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning(f"Неожиданная структура ответа API: {e.error_count()} ошибок")
            raise ParseError("Failed to parse alerts response: unexpected structure") from e

    async def fetch_alerts(self, code: str) -> AlertResponse:
        """Получить активные предупреждения для штата.

        Args:
            code: Проверенный двухбуквенный код штата

        Returns:
            AlertResponse: Разобранный ответ API

        Raises:
            NetworkError: Неуспешный статус или ошибка транспорта
            ParseError: Тело ответа не удалось разобрать
        """
        url = self.build_url(code)
        logger.debug(f"Запрос предупреждений для {code}: {url}")

        response = await self._make_request(url)
        data = self._parse_response(response)

        metrics_collector.update_alert_count(code, data.count)
        logger.info(f"Получено {data.count} предупреждений для {code}")
        return data

    def close(self) -> None:
        """Закрыть HTTP сессию."""
        if self.session:
            self.session.close()
            logger.debug("HTTP сессия закрыта")
