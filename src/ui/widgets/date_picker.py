"""DatePicker: a compact calendar widget that hosts plugins."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import TYPE_CHECKING, Iterable, Sequence

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Button, Input, Label, Static

from controller.hooks import (
    ON_CHANGE,
    ON_CLOSE,
    ON_MONTH_CHANGE,
    ON_OPEN,
    ON_READY,
    ON_VALUE_UPDATE,
    ON_YEAR_CHANGE,
    Plugin,
    PluginHooks,
)
from controller.validators import parse_iso_date, parse_year
from ui.ids import cls
from ui.surface import TextualSurface
from ui.widgets.year_select import YearSelect
import ui.ids as ids

if TYPE_CHECKING:
    from controller.host import EventHandler

log = logging.getLogger(__name__)


@dataclass
class PickerOptions:
    """Behaviour switches for a DatePicker."""

    no_calendar: bool = False  # time entry only, no calendar panel
    mode: str = "single"  # "single" or "multiple"


def render_month(year: int, month: int, selected: Iterable[date] = ()) -> str:
    """Render a month view as markup, highlighting selected days.

    Args:
        year: Year to render
        month: Zero-based month
        selected: Dates to highlight (other months are ignored)
    """
    cal = calendar.Calendar(firstweekday=calendar.MONDAY)
    marked = {d.day for d in selected if d.year == year and d.month == month + 1}
    lines = [" ".join(calendar.day_abbr[weekday][:2] for weekday in cal.iterweekdays())]
    for week in cal.monthdayscalendar(year, month + 1):
        cells = []
        for day in week:
            if day == 0:
                cells.append("  ")
            elif day in marked:
                cells.append(f"[reverse]{day:2d}[/reverse]")
            else:
                cells.append(f"{day:2d}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


class DatePicker(Vertical):
    """A date input with a drop-down month calendar.

    Owns the displayed year/month and the selected dates. Plugins passed in
    are called once on mount with this picker and return PluginHooks, which
    the picker fires as it opens, closes, navigates and commits dates.
    """

    DEFAULT_CSS = """
    DatePicker {
        height: auto;
        width: auto;
    }
    DatePicker .hidden {
        display: none;
    }
    DatePicker .date-row, DatePicker .current-month, DatePicker .num-input-wrapper {
        height: auto;
        width: auto;
    }
    DatePicker .date-input {
        width: 18;
    }
    DatePicker .year-input {
        width: 10;
    }
    DatePicker .cur-month {
        padding: 1 1;
        width: 11;
    }
    DatePicker .days {
        padding: 0 1;
        width: auto;
    }
    """

    class DateSelected(Message):
        """Posted when a date is committed."""

        def __init__(self, picker: DatePicker, dates: list[date]) -> None:
            super().__init__()
            self.picker = picker
            self.dates = dates

        @property
        def control(self) -> DatePicker:
            return self.picker

    def __init__(
        self,
        plugins: Sequence[Plugin] = (),
        options: PickerOptions | None = None,
        default_date: date | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.options = options or PickerOptions()
        self._plugins = list(plugins)
        self._hooks: list[PluginHooks] = []
        self._surface = TextualSurface(self)
        self._open = False

        self.selected_dates: list[date] = [default_date] if default_date else []
        start = default_date or date.today()
        self.current_year = start.year
        self.current_month = start.month - 1

    @property
    def surface(self) -> TextualSurface:
        return self._surface

    @property
    def is_open(self) -> bool:
        return self._open

    def compose(self) -> ComposeResult:
        if self.options.no_calendar:
            yield Input(placeholder="HH:MM", classes=ids.TIME_INPUT)
            return

        yield Horizontal(
            Input(self._format_selection(), placeholder="YYYY-MM-DD", classes=ids.DATE_INPUT),
            Button("Calendar", classes=ids.CALENDAR_TOGGLE_BTN),
            classes=ids.DATE_ROW,
        )
        with Vertical(classes=f"{ids.CALENDAR} {ids.HIDDEN}"):
            yield Horizontal(
                Button("<", classes=ids.PREV_MONTH_BTN),
                Label(calendar.month_name[self.current_month + 1], classes=ids.MONTH_LABEL),
                Horizontal(
                    Input(str(self.current_year), type="integer", classes=ids.YEAR_INPUT),
                    classes=ids.YEAR_INPUT_WRAPPER,
                ),
                Button(">", classes=ids.NEXT_MONTH_BTN),
                classes=ids.HEADER,
            )
            yield Static(
                render_month(self.current_year, self.current_month, self.selected_dates),
                classes=ids.DAYS_VIEW,
            )

    # =========================================================================
    # Plugin lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        self._hooks = [plugin(self) for plugin in self._plugins]
        log.info(f"DatePicker {self.id or ''} ready with {len(self._hooks)} plugin(s)")
        self._fire(ON_READY)

    def _fire(self, slot: str) -> None:
        """Call one hook slot on every installed plugin."""
        for hooks in self._hooks:
            callback = hooks.get(slot)
            if callback is not None:
                callback()

    def bind(self, control: YearSelect, event_names: str | Iterable[str], handler: EventHandler) -> None:
        """Subscribe handler to named interaction events of a bindable widget.

        Args:
            control: The year select (anything with listen(event_name, handler))
            event_names: One event name or several
            handler: Called with the Textual event
        """
        names = [event_names] if isinstance(event_names, str) else list(event_names)
        for name in names:
            control.listen(name, handler)

    # =========================================================================
    # Open / close
    # =========================================================================

    def open(self) -> None:
        """Show the calendar panel."""
        self._open = True
        self._set_calendar_visible(True)
        self._fire(ON_OPEN)

    def close(self) -> None:
        """Hide the calendar panel."""
        self._open = False
        self._set_calendar_visible(False)
        self._fire(ON_CLOSE)

    def toggle(self) -> None:
        if self._open:
            self.close()
        else:
            self.open()

    def _set_calendar_visible(self, visible: bool) -> None:
        try:
            panel = self.query_one(cls(ids.CALENDAR))
        except NoMatches:
            return
        if visible:
            panel.remove_class(ids.HIDDEN)
        else:
            panel.add_class(ids.HIDDEN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def change_year(self, year: int) -> None:
        """Display another year, keeping the month."""
        if not MINYEAR <= year <= MAXYEAR:
            log.debug(f"Ignoring year outside {MINYEAR}-{MAXYEAR}: {year}")
            return
        if year == self.current_year:
            return
        self.current_year = year
        self._redraw()
        self._fire(ON_YEAR_CHANGE)

    def change_month(self, value: int, is_offset: bool = True) -> None:
        """Display another month.

        Args:
            value: Months to move by, or a zero-based month when is_offset is False
            is_offset: Treat value as relative to the current month
        """
        delta = value if is_offset else value - self.current_month
        year_delta, month = divmod(self.current_month + delta, 12)
        year = self.current_year + year_delta
        if not MINYEAR <= year <= MAXYEAR:
            log.debug(f"Ignoring month change past year {year}")
            return

        self.current_month = month
        if year_delta:
            self.current_year = year
            self._redraw()
            self._fire(ON_YEAR_CHANGE)
        self._redraw()
        self._fire(ON_MONTH_CHANGE)

    def jump_to_date(self, value: date) -> None:
        """Display the month containing value without firing navigation hooks."""
        self.current_year = value.year
        self.current_month = value.month - 1
        self._redraw()

    # =========================================================================
    # Selection
    # =========================================================================

    def set_date(self, value: date) -> None:
        """Commit a date and show its month."""
        if self.options.mode == "multiple":
            if value not in self.selected_dates:
                self.selected_dates.append(value)
        else:
            self.selected_dates = [value]
        self.jump_to_date(value)
        self._commit()

    def clear(self) -> None:
        """Remove all selected dates."""
        self.selected_dates = []
        self._redraw()
        self._commit()

    def _commit(self) -> None:
        self._fire(ON_CHANGE)
        self._update_date_input()
        self._fire(ON_VALUE_UPDATE)
        self.post_message(self.DateSelected(self, list(self.selected_dates)))

    def _format_selection(self) -> str:
        return ", ".join(d.isoformat() for d in self.selected_dates)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _redraw(self) -> None:
        """Bring header and month view in line with current_year/current_month."""
        try:
            self.query_one(cls(ids.MONTH_LABEL), Label).update(
                calendar.month_name[self.current_month + 1]
            )
            self.query_one(cls(ids.DAYS_VIEW), Static).update(
                render_month(self.current_year, self.current_month, self.selected_dates)
            )
        except NoMatches:
            return
        # The year input is gone once a plugin has replaced it
        try:
            year_input = self.query_one(cls(ids.YEAR_INPUT), Input)
        except NoMatches:
            return
        with year_input.prevent(Input.Changed):
            year_input.value = str(self.current_year)

    def _update_date_input(self) -> None:
        try:
            date_input = self.query_one(cls(ids.DATE_INPUT), Input)
        except NoMatches:
            return
        with date_input.prevent(Input.Changed):
            date_input.value = self._format_selection()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    @on(Button.Pressed, cls(ids.CALENDAR_TOGGLE_BTN))
    def on_toggle_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.toggle()

    @on(Button.Pressed, cls(ids.PREV_MONTH_BTN))
    def on_prev_month_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.change_month(-1)

    @on(Button.Pressed, cls(ids.NEXT_MONTH_BTN))
    def on_next_month_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.change_month(1)

    @on(Input.Submitted, cls(ids.DATE_INPUT))
    def on_date_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        value = parse_iso_date(event.value.split(",")[-1])
        if value is None:
            log.debug(f"Ignoring unparseable date: {event.value!r}")
            return
        self.set_date(value)

    @on(Input.Submitted, cls(ids.YEAR_INPUT))
    def on_year_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        year = parse_year(event.value)
        if year is not None:
            self.change_year(year)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Pressing on the picker outside its inputs returns focus to the date input."""
        if isinstance(event.widget, (Input, Button)):
            return
        self.focus_date_input()

    def focus_date_input(self) -> None:
        try:
            self.query_one(cls(ids.DATE_INPUT), Input).focus()
        except NoMatches:
            pass
