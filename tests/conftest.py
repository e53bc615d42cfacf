"""Shared fixtures for yearpick tests."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from controller.hooks import ON_OPEN, ON_READY, ON_VALUE_UPDATE, ON_YEAR_CHANGE, PluginHooks
from model import YearRangeConfig


class FakeEvent:
    """An interaction event that remembers whether it was stopped."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


@dataclass
class FakeSelect:
    """Stand-in for a select control."""

    options: list
    classes: tuple
    value: str | None = None


@dataclass
class FakeNode:
    """Stand-in for a layout container."""

    classes: tuple
    children: list = field(default_factory=list)


class FakeSurface:
    """RenderingSurface that records calls instead of touching a screen."""

    def __init__(self, with_header: bool = True, with_wrapper: bool = True) -> None:
        self.calls: list[tuple] = []
        self.year_input_wrapper = FakeNode(classes=("num-input-wrapper",)) if with_wrapper else None
        self.header = None
        if with_header:
            children = [FakeNode(classes=("cur-month",))]
            if self.year_input_wrapper is not None:
                children.append(self.year_input_wrapper)
            self.header = FakeNode(classes=("current-month",), children=children)

    def create_select(self, options, classes):
        self.calls.append(("create_select", len(options)))
        return FakeSelect(options=list(options), classes=tuple(classes))

    def set_value(self, control, value):
        self.calls.append(("set_value", value))
        control.value = value if value in {o.value for o in control.options} else None

    def get_value(self, control):
        return control.value

    def wrap(self, control, classes):
        self.calls.append(("wrap", tuple(classes)))
        return FakeNode(classes=tuple(classes), children=[control])

    def find_header(self):
        return self.header

    def find_numeric_input_wrapper(self, header):
        for child in header.children:
            if "num-input-wrapper" in child.classes:
                return child
        return None

    def replace_child(self, parent, old, new):
        self.calls.append(("replace_child",))
        parent.children[parent.children.index(old)] = new


@dataclass
class FakeOptions:
    no_calendar: bool = False


class FakeHost:
    """CalendarHost with flatpickr-like year/month behaviour and event bubbling."""

    def __init__(
        self,
        selected_dates: list[date] | None = None,
        current_year: int = 2000,
        current_month: int = 0,
        no_calendar: bool = False,
        surface: FakeSurface | None = None,
    ) -> None:
        self.options = FakeOptions(no_calendar=no_calendar)
        self.selected_dates = list(selected_dates or [])
        self.current_year = current_year
        self.current_month = current_month
        self.surface = surface or FakeSurface()
        self.hooks: list[PluginHooks] = []
        self.handlers: dict[tuple[int, str], list] = {}
        # Events that reached the picker's own (outer container) handlers
        self.outer_events: list[str] = []
        self.calls: list[tuple] = []

    def install(self, plugin) -> PluginHooks:
        hooks = plugin(self)
        self.hooks.append(hooks)
        return hooks

    def fire(self, slot: str) -> None:
        for hooks in self.hooks:
            callback = hooks.get(slot)
            if callback is not None:
                callback()

    def ready(self) -> None:
        self.fire(ON_READY)

    def open(self) -> None:
        self.fire(ON_OPEN)

    def change_year(self, year: int) -> None:
        self.calls.append(("change_year", year))
        if year != self.current_year:
            self.current_year = year
            self.fire(ON_YEAR_CHANGE)

    def change_month(self, value: int, is_offset: bool = True) -> None:
        self.calls.append(("change_month", value, is_offset))
        delta = value if is_offset else value - self.current_month
        year_delta, self.current_month = divmod(self.current_month + delta, 12)
        if year_delta:
            self.current_year += year_delta
            self.fire(ON_YEAR_CHANGE)

    def set_date(self, value: date) -> None:
        self.selected_dates = [value]
        self.current_year = value.year
        self.current_month = value.month - 1
        self.fire(ON_VALUE_UPDATE)

    def bind(self, control, event_names, handler) -> None:
        names = [event_names] if isinstance(event_names, str) else list(event_names)
        for name in names:
            self.handlers.setdefault((id(control), name), []).append(handler)

    def dispatch(self, control, name: str) -> FakeEvent:
        """Deliver an event to the control's handlers, then bubble it to the picker."""
        event = FakeEvent(name)
        for handler in self.handlers.get((id(control), name), []):
            handler(event)
        if not event.stopped:
            self.outer_events.append(name)
        return event


@pytest.fixture
def fake_host():
    """Host showing January 2000 with nothing selected."""
    return FakeHost()


@pytest.fixture
def fake_host_factory():
    """Build FakeHost instances with custom state."""
    return FakeHost


@pytest.fixture
def fake_surface_factory():
    """Build FakeSurface instances, optionally without header or wrapper."""
    return FakeSurface


@pytest.fixture
def default_range():
    """The default 1900-2099 range."""
    return YearRangeConfig()


@pytest.fixture
def fixed_today():
    """A clock that always returns 2024-07-15."""
    return lambda: date(2024, 7, 15)
