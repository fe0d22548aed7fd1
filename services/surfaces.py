"""Поверхности ввода и отображения для контроллера запросов.

Контроллер не знает, где живут поле ввода и область вывода:
HTML страница, тест или консоль. Ему передаются два объекта
с интерфейсами InputSource и DisplaySurface.
"""

from typing import List, Optional, Protocol

from models import RenderedView, UIState


class InputSource(Protocol):
    """Поле ввода кода штата."""

    def get_value(self) -> str:
        ...

    def clear(self) -> None:
        ...


class DisplaySurface(Protocol):
    """Область вывода: результаты, сообщение об ошибке и индикатор загрузки."""

    def show_view(self, view: RenderedView) -> None:
        ...

    def clear_content(self) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...

    def clear_error(self) -> None:
        ...

    def show_loading(self) -> None:
        ...

    def hide_loading(self) -> None:
        ...


class MemoryInputSource:
    """Поле ввода, хранящее значение в памяти."""

    def __init__(self, value: Optional[str] = ""):
        self.value = value or ""

    def get_value(self) -> str:
        return self.value

    def clear(self) -> None:
        self.value = ""


class MemoryDisplaySurface:
    """Область вывода в памяти.

    Хранит последнюю модель отображения и UIState. Используется
    веб-слоем для сборки страницы и тестами для проверки переходов.
    Каждое изменение дописывается в ``events``.
    """

    def __init__(self):
        self.view: Optional[RenderedView] = None
        self.state = UIState()
        self.events: List[str] = []

    def show_view(self, view: RenderedView) -> None:
        # Новая модель полностью заменяет предыдущую
        self.view = view
        self.events.append("show_view")

    def clear_content(self) -> None:
        self.view = None
        self.events.append("clear_content")

    def show_error(self, message: str) -> None:
        self.state.error_text = message
        self.events.append("show_error")

    def clear_error(self) -> None:
        self.state.error_text = ""
        self.events.append("clear_error")

    def show_loading(self) -> None:
        self.state.loading = True
        self.events.append("show_loading")

    def hide_loading(self) -> None:
        self.state.loading = False
        self.events.append("hide_loading")
