import pytest
from unittest.mock import patch
from prometheus_client import CollectorRegistry

from conftest import FakeFetcher, make_http_response
from models import NetworkError
from services import RequestController, MemoryDisplaySurface, MemoryInputSource
from services.alerts_api import WeatherAlertsService
from utils.metrics import MetricsCollector


@pytest.fixture
def collector():
    """Коллектор с отдельным реестром для каждого теста"""
    return MetricsCollector(registry=CollectorRegistry())


@pytest.mark.unit
class TestMetricsCollector:
    """Тесты коллектора Prometheus метрик"""

    def test_start_time_set(self, collector):
        """Тест времени запуска"""
        assert collector.get_sample_value("weather_alerts_start_time_timestamp") > 0

    def test_record_api_request(self, collector):
        """Тест метрики запроса к API"""
        collector.record_api_request("success", 0.2)
        collector.record_api_request("success", 0.4)
        collector.record_api_request("http_error", 0.1)

        assert collector.get_sample_value("weather_alerts_api_requests_total", {"status": "success"}) == 2
        assert collector.get_sample_value("weather_alerts_api_requests_total", {"status": "http_error"}) == 1
        assert collector.get_sample_value("weather_alerts_api_request_duration_seconds_count") == 3

    def test_record_submission(self, collector):
        """Тест метрики отправок"""
        collector.record_submission("invalid")
        collector.record_submission("invalid")

        assert collector.get_sample_value("weather_alerts_submissions_total", {"outcome": "invalid"}) == 2
        assert collector.get_sample_value("weather_alerts_submissions_total", {"outcome": "success"}) is None

    def test_update_alert_count(self, collector):
        """Тест количества предупреждений по штату"""
        collector.update_alert_count("TX", 4)
        collector.update_alert_count("TX", 1)

        assert collector.get_sample_value("weather_alerts_active_alerts", {"state": "TX"}) == 1

    def test_record_http_request_status_category(self, collector):
        """Тест категорий статуса HTTP"""
        collector.record_http_request("GET", "/alerts", 200, 0.01)
        collector.record_http_request("GET", "/alerts", 502, 0.01)

        labels = {"method": "GET", "endpoint": "/alerts"}
        assert collector.get_sample_value("weather_alerts_http_requests_total", {**labels, "status": "success"}) == 1
        assert collector.get_sample_value("weather_alerts_http_requests_total", {**labels, "status": "error"}) == 1

    def test_system_status(self, collector):
        """Тест статуса системы"""
        collector.update_system_status(False)
        assert collector.get_sample_value("weather_alerts_system_status") == 0

        collector.update_system_status(True)
        assert collector.get_sample_value("weather_alerts_system_status") == 1

    def test_get_metrics_text(self, collector):
        """Тест экспорта в формате Prometheus"""
        collector.record_submission("success")

        text = collector.get_metrics()

        assert 'weather_alerts_submissions_total{outcome="success"} 1.0' in text

    def test_invalid_label_does_not_raise(self, collector):
        """Тест: ошибка записи метрики логируется и не прерывает работу"""
        with patch.object(collector.api_requests_total, "labels", side_effect=ValueError("bad label")):
            collector.record_api_request("success", 0.1)


@pytest.mark.unit
class TestMetricsIntegration:
    """Тесты записи метрик из сервисов"""

    @pytest.mark.asyncio
    async def test_fetch_records_api_metrics(self, collector, tx_payload):
        """Тест метрик успешного запроса к API"""
        service = WeatherAlertsService()
        try:
            with patch("services.alerts_api.metrics_collector", collector), \
                    patch.object(service.session, "get", return_value=make_http_response(payload=tx_payload)):
                await service.fetch_alerts("TX")
        finally:
            service.close()

        assert collector.get_sample_value("weather_alerts_api_requests_total", {"status": "success"}) == 1
        assert collector.get_sample_value("weather_alerts_active_alerts", {"state": "TX"}) == 1

    @pytest.mark.asyncio
    async def test_fetch_records_http_error(self, collector):
        """Тест метрик неуспешного статуса"""
        service = WeatherAlertsService()
        try:
            with patch("services.alerts_api.metrics_collector", collector), \
                    patch.object(service.session, "get", return_value=make_http_response(503, reason="Service Unavailable")):
                with pytest.raises(NetworkError):
                    await service.fetch_alerts("TX")
        finally:
            service.close()

        assert collector.get_sample_value("weather_alerts_api_requests_total", {"status": "http_error"}) == 1

    @pytest.mark.asyncio
    async def test_controller_records_outcomes(self, collector, tx_payload):
        """Тест метрик отправок из контроллера"""
        controller = RequestController(FakeFetcher(payload=tx_payload), MemoryDisplaySurface(), MemoryInputSource())

        with patch("services.controller.metrics_collector", collector):
            await controller.submit("tx")
            await controller.submit("toolong")

        assert collector.get_sample_value("weather_alerts_submissions_total", {"outcome": "success"}) == 1
        assert collector.get_sample_value("weather_alerts_submissions_total", {"outcome": "invalid"}) == 1
