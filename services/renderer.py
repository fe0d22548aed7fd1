"""Преобразование ответа API в модель отображения."""

from models import AlertResponse, RenderedView

NO_ALERTS_MESSAGE = "✅ No active alerts for this state!"


def format_summary(data: AlertResponse) -> str:
    return f"{data.title}: {data.count}"


def render_alerts(data: AlertResponse) -> RenderedView:
    """Построить сводку и список заголовков.

    Сводка выводится всегда. При отсутствии предупреждений вместо
    списка выставляется флаг пустого состояния. Заголовки идут в
    порядке ответа API, без сортировки и удаления дублей.

    Args:
        data: Разобранный ответ API

    Returns:
        RenderedView: Модель отображения, полностью заменяющая предыдущую
    """
    summary = format_summary(data)

    if data.count == 0:
        return RenderedView(
            summary=summary,
            no_alerts=True,
            no_alerts_message=NO_ALERTS_MESSAGE
        )

    return RenderedView(
        summary=summary,
        no_alerts=False,
        headlines=[feature.headline for feature in data.features]
    )
