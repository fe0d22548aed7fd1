import pytest
import sys
import os
from unittest.mock import Mock

# Добавляем корневую директорию в path для импорта модулей
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Тесты не пишут файлы логов и не ходят в Sentry
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("SENTRY_DSN", "")

from models import AlertResponse, NetworkError
from services import MemoryDisplaySurface, MemoryInputSource


class FakeFetcher:
    """Фейковый сервис предупреждений: отдает заранее заданный ответ или ошибку."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    async def fetch_alerts(self, code):
        self.calls.append(code)
        if self.error is not None:
            raise self.error
        return AlertResponse.model_validate(self.payload)


def make_payload(title, headlines):
    """Собрать тело ответа в формате api.weather.gov."""
    return {
        "title": title,
        "type": "FeatureCollection",
        "features": [
            {"id": f"urn:oid:{i}", "type": "Feature", "properties": {"headline": headline, "event": "Test"}}
            for i, headline in enumerate(headlines)
        ]
    }


def make_http_response(status_code=200, payload=None, reason="OK", json_error=None):
    """Мок requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def tx_payload():
    """Фикстура с одним предупреждением для Техаса"""
    return make_payload("Alerts for TX", ["Flood Warning"])


@pytest.fixture
def empty_payload():
    """Фикстура с ответом без активных предупреждений"""
    return make_payload("current watches, warnings, and advisories for Vermont", [])


@pytest.fixture
def many_payload():
    """Фикстура с несколькими предупреждениями, включая дубликат"""
    return make_payload(
        "current watches, warnings, and advisories for Florida",
        [
            "Rip Current Statement issued by NWS Miami",
            "Heat Advisory issued by NWS Tampa Bay",
            "Rip Current Statement issued by NWS Miami",
        ]
    )


@pytest.fixture
def display():
    return MemoryDisplaySurface()


@pytest.fixture
def input_source():
    return MemoryInputSource()


@pytest.fixture
def fetcher_503():
    """Фикстура сервиса, отвечающего 503"""
    return FakeFetcher(error=NetworkError(
        "Failed to fetch alerts: 503 Service Unavailable",
        status_code=503,
        reason="Service Unavailable"
    ))
