import pytest
import pydantic

from models import AlertResponse, RenderedView
from services.renderer import render_alerts, format_summary, NO_ALERTS_MESSAGE
from services import MemoryDisplaySurface


@pytest.mark.unit
class TestRenderAlerts:
    """Тесты построения модели отображения"""

    def test_single_alert(self, tx_payload):
        """Тест ответа с одним предупреждением"""
        view = render_alerts(AlertResponse.model_validate(tx_payload))

        assert view.summary == "Alerts for TX: 1"
        assert view.no_alerts is False
        assert view.no_alerts_message is None
        assert view.headlines == ["Flood Warning"]

    def test_empty_response_has_marker_and_no_list(self, empty_payload):
        """Тест пустого ответа: сводка и маркер вместо списка"""
        view = render_alerts(AlertResponse.model_validate(empty_payload))

        assert view.summary == "current watches, warnings, and advisories for Vermont: 0"
        assert view.no_alerts is True
        assert view.no_alerts_message == NO_ALERTS_MESSAGE
        assert view.headlines == []

    def test_order_and_duplicates_preserved(self, many_payload):
        """Тест порядка заголовков: без сортировки и удаления дублей"""
        view = render_alerts(AlertResponse.model_validate(many_payload))

        assert view.summary.endswith(": 3")
        assert view.headlines == [
            "Rip Current Statement issued by NWS Miami",
            "Heat Advisory issued by NWS Tampa Bay",
            "Rip Current Statement issued by NWS Miami",
        ]

    def test_missing_headline_rendered_as_empty_string(self):
        """Тест предупреждения без headline"""
        data = AlertResponse.model_validate({
            "title": "Alerts for OK",
            "features": [{"properties": {"event": "Tornado Watch"}}, {"properties": {"headline": None}}]
        })

        view = render_alerts(data)

        assert view.headlines == ["", ""]
        assert view.summary == "Alerts for OK: 2"

    def test_render_is_idempotent(self, many_payload):
        """Тест повторного отображения одного ответа"""
        data = AlertResponse.model_validate(many_payload)

        assert render_alerts(data) == render_alerts(data)

    def test_format_summary(self, tx_payload):
        """Тест формата строки-сводки"""
        assert format_summary(AlertResponse.model_validate(tx_payload)) == "Alerts for TX: 1"


@pytest.mark.unit
class TestAlertResponseModel:
    """Тесты модели ответа API"""

    def test_extra_fields_pass_through(self, tx_payload):
        """Тест сохранения неиспользуемых полей"""
        data = AlertResponse.model_validate(tx_payload)

        dumped = data.model_dump()
        assert dumped["type"] == "FeatureCollection"
        assert dumped["features"][0]["properties"]["event"] == "Test"

    def test_title_required(self):
        """Тест обязательного title"""
        with pytest.raises(pydantic.ValidationError):
            AlertResponse.model_validate({"features": []})

    def test_features_must_be_list(self):
        """Тест неверного типа features"""
        with pytest.raises(pydantic.ValidationError):
            AlertResponse.model_validate({"title": "x", "features": "nope"})


@pytest.mark.unit
class TestDisplaySurfaceReplacement:
    """Тесты замены содержимого области вывода"""

    def test_new_view_replaces_previous(self, tx_payload, empty_payload):
        """Тест полной замены прошлого результата"""
        display = MemoryDisplaySurface()

        display.show_view(render_alerts(AlertResponse.model_validate(tx_payload)))
        display.show_view(render_alerts(AlertResponse.model_validate(empty_payload)))

        assert isinstance(display.view, RenderedView)
        assert display.view.no_alerts is True
        assert display.view.headlines == []
