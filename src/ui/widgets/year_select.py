"""Year select widget: a Select that forwards its interaction events."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Iterable

from textual import events, on
from textual.widgets import Select

from constants import EVENT_CHANGE, EVENT_CLICK, EVENT_FOCUS, EVENT_MOUSEDOWN
from model.year_range import YearOption


class YearSelect(Select[str]):
    """A Select over years whose events can be handled from outside.

    Listeners registered with listen() run before the event bubbles on,
    so a listener can stop() it.
    """

    DEFAULT_CSS = """
    YearSelect {
        width: 14;
    }
    """

    def __init__(self, options: Iterable[YearOption], classes: str | None = None) -> None:
        super().__init__(
            [(option.label, option.value) for option in options],
            prompt="Year",
            allow_blank=True,
            classes=classes,
        )
        self._listeners: dict[str, list[Callable]] = defaultdict(list)

    def listen(self, event_name: str, handler: Callable) -> None:
        """Call handler with the event whenever event_name happens on this select."""
        self._listeners[event_name].append(handler)

    def _emit(self, event_name: str, event: object) -> None:
        for handler in list(self._listeners.get(event_name, ())):
            handler(event)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._emit(EVENT_MOUSEDOWN, event)

    def on_click(self, event: events.Click) -> None:
        self._emit(EVENT_CLICK, event)

    def on_focus(self, event: events.Focus) -> None:
        self._emit(EVENT_FOCUS, event)

    @on(Select.Changed)
    def _on_value_changed(self, event: Select.Changed) -> None:
        self._emit(EVENT_CHANGE, event)
