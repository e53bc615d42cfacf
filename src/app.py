"""Main TUI application for yearpick."""

import logging
import os
from datetime import date
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Footer, Label, Static

from controller import year_month_selection
from model import YearRangeConfig
from ui import DatePicker, PickerOptions
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)


def get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "yearpick"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "yearpick.log"


def configure_logging(level: int = logging.DEBUG) -> None:
    """Send log records to the XDG state log file (the TUI owns the terminal)."""
    logging.basicConfig(
        filename=str(get_log_path()),
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


APP_CSS = """
#header-container {
    height: 1;
    background: $primary;
}
#pickers-container {
    height: auto;
}
#pickers-container DatePicker {
    margin: 0 2 1 0;
}
#status-bar {
    dock: bottom;
    height: 1;
    margin-bottom: 1;
    padding: 0 1;
}
"""


class YearPickerApp(App):
    """TUI showing date pickers with the year select installed."""

    TITLE = "yearpick"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+o", "toggle_calendar", "Calendar", show=True),
        Binding("escape", "close_calendars", "Close", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        year_range: YearRangeConfig | None = None,
        options: PickerOptions | None = None,
        default_date: date | None = None,
        pickers: int = 1,
        version: str = "0.0",
    ) -> None:
        super().__init__()
        self.year_range = year_range or YearRangeConfig()
        self.picker_options = options or PickerOptions()
        self.default_date = default_date
        self.picker_count = max(1, pickers)
        self.version = version

    def compose(self) -> ComposeResult:
        log.info("compose() called")
        log.info(f"year range: {self.year_range}, options: {self.picker_options}")

        yield Horizontal(
            Label(f"yearpick {self.version}", id=ids.HEADER_TITLE),
            id=ids.HEADER_CONTAINER,
        )
        # Each picker gets its own controller (and year select) from the plugin
        plugin = year_month_selection(self.year_range)
        with Vertical(id=ids.PICKERS_CONTAINER):
            for index in range(self.picker_count):
                yield DatePicker(
                    plugins=[plugin],
                    options=self.picker_options,
                    default_date=self.default_date,
                    id=ids.picker_id(index),
                )
        yield Static("", id=ids.STATUS_BAR)
        yield Footer()

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _focused_picker(self) -> DatePicker:
        """The picker containing focus, or the first one."""
        focused = self.focused
        while focused is not None:
            if isinstance(focused, DatePicker):
                return focused
            focused = focused.parent
        return self.query_one(DatePicker)

    # =========================================================================
    # Actions and Event Handlers
    # =========================================================================

    def action_toggle_calendar(self) -> None:
        self._focused_picker().toggle()

    def action_close_calendars(self) -> None:
        for picker in self.query(DatePicker):
            if picker.is_open:
                picker.close()

    @on(DatePicker.DateSelected)
    def on_date_selected(self, event: DatePicker.DateSelected) -> None:
        """Show the committed selection in the status bar."""
        if event.dates:
            chosen = ", ".join(d.isoformat() for d in event.dates)
            self._set_status(f"{event.picker.id}: {chosen}")
        else:
            self._set_status(f"{event.picker.id}: no date selected")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self._set_status(f"Years {self.year_range.min_year}-{self.year_range.max_year}")
        self.query_one(DatePicker).focus_date_input()
