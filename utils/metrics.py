"""Модуль для работы с Prometheus метриками.

Предоставляет инструменты для сбора и экспорта метрик
запросов к api.weather.gov и работы виджета.
"""

import time
from typing import Dict, Optional

from prometheus_client import Gauge, Counter, Histogram, generate_latest
from prometheus_client.core import CollectorRegistry
from loguru import logger


class MetricsCollector:
    """Коллектор Prometheus метрик для WeatherAlertsUS.

    Сбор метрик:
    - Количество запросов к API и время ответа
    - Результаты отправок формы (успех, ошибка ввода, ошибка запроса)
    - Количество активных предупреждений в последнем ответе по штату
    - HTTP запросы к самому приложению
    - Статус работы системы
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """Инициализация коллектора метрик.

        Args:
            registry: Реестр метрик Prometheus
        """
        self.registry = registry or CollectorRegistry()

        # Метрики API запросов
        self.api_requests_total = Counter(
            'weather_alerts_api_requests_total',
            'Общее количество запросов к API предупреждений',
            ['status'],
            registry=self.registry
        )

        self.api_request_duration = Histogram(
            'weather_alerts_api_request_duration_seconds',
            'Время выполнения запроса к API',
            registry=self.registry
        )

        # Метрики отправок формы
        self.submissions_total = Counter(
            'weather_alerts_submissions_total',
            'Количество отправок по результату',
            ['outcome'],
            registry=self.registry
        )

        self.active_alerts = Gauge(
            'weather_alerts_active_alerts',
            'Количество активных предупреждений в последнем ответе',
            ['state'],
            registry=self.registry
        )

        # Метрики HTTP endpoints
        self.http_requests_total = Counter(
            'weather_alerts_http_requests_total',
            'Общее количество HTTP запросов',
            ['method', 'endpoint', 'status'],
            registry=self.registry
        )

        self.http_request_duration = Histogram(
            'weather_alerts_http_request_duration_seconds',
            'Время выполнения HTTP запроса',
            ['method', 'endpoint'],
            registry=self.registry
        )

        # Метрики работы системы
        self.system_status = Gauge(
            'weather_alerts_system_status',
            'Статус работы системы (1 - работает, 0 - ошибка)',
            registry=self.registry
        )

        self.start_time = Gauge(
            'weather_alerts_start_time_timestamp',
            'Время запуска приложения в формате UNIX времени',
            registry=self.registry
        )

        self.start_time.set(time.time())

        logger.info("Коллектор Prometheus метрик инициализирован")

    def record_api_request(self, status: str, duration: float) -> None:
        """Записать метрику запроса к API.

        Args:
            status: Статус запроса (success, http_error, network_error)
            duration: Длительность запроса в секундах
        """
        try:
            self.api_requests_total.labels(status=status).inc()
            self.api_request_duration.observe(duration)

            logger.debug(f"Записана метрика API: статус={status}, длительность={duration:.3f}s")

        except Exception as e:
            logger.error(f"Ошибка при записи метрики API запроса: {e}")

    def record_submission(self, outcome: str) -> None:
        """Записать результат отправки формы.

        Args:
            outcome: success, invalid или error
        """
        try:
            self.submissions_total.labels(outcome=outcome).inc()
        except Exception as e:
            logger.error(f"Ошибка при записи метрики отправки: {e}")

    def update_alert_count(self, state: str, count: int) -> None:
        """Обновить количество активных предупреждений для штата.

        Args:
            state: Код штата
            count: Количество предупреждений в ответе
        """
        try:
            self.active_alerts.labels(state=state).set(count)
            logger.debug(f"Метрика предупреждений обновлена: {state}={count}")

        except Exception as e:
            logger.error(f"Ошибка при обновлении метрики предупреждений: {e}")

    def record_http_request(
        self,
        method: str,
        endpoint: str,
        status_code: int,
        duration: float
    ) -> None:
        """Записать метрику HTTP запроса.

        Args:
            method: HTTP метод
            endpoint: Эндпоинт
            status_code: Код статуса ответа
            duration: Длительность запроса в секундах
        """
        try:
            status_category = 'success' if 200 <= status_code < 300 else 'error'

            self.http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status=status_category
            ).inc()

            self.http_request_duration.labels(
                method=method,
                endpoint=endpoint
            ).observe(duration)

            logger.debug(
                f"Записана метрика HTTP: {method} {endpoint} -> {status_code} ({duration:.3f}s)"
            )

        except Exception as e:
            logger.error(f"Ошибка при записи метрики HTTP запроса: {e}")

    def update_system_status(self, is_healthy: bool) -> None:
        """Обновить метрику статуса системы.

        Args:
            is_healthy: True если система работает корректно
        """
        try:
            self.system_status.set(1 if is_healthy else 0)

            status_str = "здоров" if is_healthy else "ошибка"
            logger.debug(f"Статус системы обновлен: {status_str}")

        except Exception as e:
            logger.error(f"Ошибка при обновлении метрики статуса системы: {e}")

    def get_metrics(self) -> str:
        """Получить все метрики в формате Prometheus.

        Returns:
            str: Метрики в формате Prometheus
        """
        try:
            metrics_data = generate_latest(self.registry)
            return metrics_data.decode('utf-8')

        except Exception as e:
            logger.error(f"Ошибка при генерации метрик: {e}")
            return ""

    def get_sample_value(self, name: str, labels: Optional[Dict[str, str]] = None) -> Optional[float]:
        """Получить текущее значение метрики из реестра.

        Args:
            name: Имя сэмпла (например weather_alerts_submissions_total)
            labels: Метки сэмпла

        Returns:
            Optional[float]: Значение или None если сэмпла нет
        """
        return self.registry.get_sample_value(name, labels or {})


# Глобальный экземпляр коллектора метрик
metrics_collector = MetricsCollector()
