"""YearSyncController: keeps a year select in step with a calendar host."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Callable, Mapping

from constants import EVENT_CHANGE, ISOLATED_EVENTS, YEAR_SELECT_WRAPPER_CLASSES
from controller.factory import create_year_control
from controller.hooks import Plugin, PluginHooks
from controller.validators import parse_year
from model.year_range import YearRangeConfig

if TYPE_CHECKING:
    from controller.host import CalendarHost, Control, InteractionEvent

log = logging.getLogger(__name__)


class YearSyncController:
    """Manages two-way sync between a host's current year and a year select.

    One controller exists per host instance and owns that instance's control.
    It provides:

    1. **Setup** (on_ready): build the control, bind its events and swap it
       in for the header's free-text year input.

    2. **Host → Control** (on_open, sync_control_from_host): after the host
       moves to a new year, show that year in the control.

    3. **Control → Host** (on_control_commit): when the user picks a year,
       tell the host to display it.

    Clicks, mouse-downs and focus on the control are stopped at the control
    so the host's own gesture handling never sees them.

    Example usage:
        controller = YearSyncController(picker, YearRangeConfig())
        hooks = controller.hooks()
        hooks.on_ready()
    """

    def __init__(
        self,
        host: CalendarHost,
        config: YearRangeConfig,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.host = host
        self.config = config
        self._today = today
        self._control: Control | None = None

    @property
    def control(self) -> Control | None:
        """The year select, once on_ready has run."""
        return self._control

    def hooks(self) -> PluginHooks:
        """The hook slots this controller fills for its host."""
        return PluginHooks(
            on_ready=self.on_ready,
            on_open=self.on_open,
            on_year_change=self.sync_control_from_host,
            on_value_update=self.sync_control_from_host,
        )

    def reference_date(self) -> date:
        """First selected date, or today when nothing is selected."""
        selected = self.host.selected_dates
        if selected:
            return selected[0]
        return self._today()

    def on_ready(self) -> None:
        """Build the year select and put it where the year input was."""
        if self._control is not None:
            log.debug("Year select already built, ignoring repeated ready")
            return

        surface = self.host.surface
        control = create_year_control(surface, self.config.min_year, self.config.max_year)
        self._control = control
        container = surface.wrap(control, YEAR_SELECT_WRAPPER_CLASSES)

        self.host.bind(control, ISOLATED_EVENTS, self._stop_propagation)
        self.host.bind(control, EVENT_CHANGE, self.on_control_commit)

        header = surface.find_header()
        if header is None:
            log.debug("Calendar header not found, keeping default year input")
            return
        wrapper = surface.find_numeric_input_wrapper(header)
        if wrapper is None:
            log.debug("Year input wrapper not found, keeping default year input")
            return
        surface.replace_child(header, wrapper, container)
        log.info(f"Year select installed ({self.config.min_year}-{self.config.max_year})")

    def on_open(self) -> None:
        """Show the reference date's year and month when the calendar opens."""
        ref = self.reference_date()
        self.host.change_year(ref.year)
        # Absolute month so no rollover (and no second year change) happens
        self.host.change_month(ref.month - 1, is_offset=False)
        if self._control is not None:
            self._show_year(ref.year)

    def sync_control_from_host(self) -> None:
        """Show the host's current year in the control."""
        if self._control is None:
            return
        self._show_year(self.host.current_year)

    def on_control_commit(self, event: InteractionEvent | None = None) -> None:
        """Move the host to the year picked in the control."""
        if self._control is None:
            return
        value = self.host.surface.get_value(self._control)
        year = parse_year(value)
        if year is None:
            log.debug(f"Ignoring non-numeric year value: {value!r}")
            return
        if not self.config.contains(year):
            log.debug(f"Ignoring year outside {self.config.min_year}-{self.config.max_year}: {year}")
            return
        self.host.change_year(year)

    def _show_year(self, year: int) -> None:
        self.host.surface.set_value(self._control, str(year))

    @staticmethod
    def _stop_propagation(event: InteractionEvent) -> None:
        event.stop()


def year_month_selection(
    overrides: Mapping[str, Any] | YearRangeConfig | None = None,
    *,
    today: Callable[[], date] = date.today,
) -> Plugin:
    """Create the year select plugin.

    Args:
        overrides: min_year / max_year to merge over the defaults (1900, 2099),
            or a ready YearRangeConfig
        today: Clock used when nothing is selected on open

    Returns:
        A plugin: call it with a host to get that host's hooks
    """
    if isinstance(overrides, YearRangeConfig):
        config = overrides
    else:
        config = YearRangeConfig.resolve(overrides)

    def plugin(host: CalendarHost) -> PluginHooks:
        if host.options.no_calendar:
            log.debug("Picker has no calendar, year select plugin is inactive")
            return PluginHooks()
        return YearSyncController(host, config, today=today).hooks()

    return plugin
