"""Protocols the year plugin relies on.

The controller never imports a UI toolkit. It talks to the calendar through
CalendarHost and to the layout through RenderingSurface. The Textual
implementations live in ui/; tests use recording fakes.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, Protocol, Sequence

from model.year_range import YearOption

# Controls and layout nodes are opaque to the controller
Control = Any
Node = Any


class InteractionEvent(Protocol):
    """An input event delivered to a bound handler."""

    def stop(self) -> None:
        """Stop the event from reaching ancestor handlers."""


EventHandler = Callable[[InteractionEvent], None]


class HostOptions(Protocol):
    no_calendar: bool


class RenderingSurface(Protocol):
    """Layout operations available to a plugin."""

    def create_select(self, options: Sequence[YearOption], classes: Iterable[str]) -> Control:
        """Create a single-choice control with the given options and nothing selected."""

    def set_value(self, control: Control, value: str) -> None:
        """Show a value in the control without it counting as user input.

        A value with no matching option clears the selection.
        """

    def get_value(self, control: Control) -> str | None:
        """Return the control's value, or None if nothing is selected."""

    def wrap(self, control: Control, classes: Iterable[str]) -> Node:
        """Put a control inside a new container carrying the given classes."""

    def find_header(self) -> Node | None:
        """Return the month/year header of the calendar, if present."""

    def find_numeric_input_wrapper(self, header: Node) -> Node | None:
        """Return the first numeric-input wrapper inside the header, if present."""

    def replace_child(self, parent: Node, old: Node, new: Node) -> None:
        """Replace old with new among parent's children, keeping its position."""


class CalendarHost(Protocol):
    """The calendar widget a plugin is installed into."""

    options: HostOptions
    selected_dates: list[date]
    current_year: int
    current_month: int  # zero-based

    @property
    def surface(self) -> RenderingSurface: ...

    def change_year(self, year: int) -> None: ...

    def change_month(self, value: int, is_offset: bool = True) -> None: ...

    def bind(self, control: Control, event_names: str | Iterable[str], handler: EventHandler) -> None: ...
