"""Plugin hook contract between a calendar host and its plugins."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from controller.host import CalendarHost

Hook = Callable[[], None]

# Slot names, in the order a host typically fires them
ON_READY = "on_ready"
ON_OPEN = "on_open"
ON_CLOSE = "on_close"
ON_CHANGE = "on_change"
ON_MONTH_CHANGE = "on_month_change"
ON_YEAR_CHANGE = "on_year_change"
ON_VALUE_UPDATE = "on_value_update"


@dataclass(frozen=True)
class PluginHooks:
    """Named callbacks a plugin hands back to its host.

    Each slot is optional; the host calls the ones that are set at the
    matching point of its own processing. An empty PluginHooks() is a
    plugin that does nothing.
    """

    on_ready: Hook | None = None  # once, after the picker is mounted
    on_open: Hook | None = None  # each time the calendar becomes visible
    on_close: Hook | None = None
    on_change: Hook | None = None  # a date was committed
    on_month_change: Hook | None = None
    on_year_change: Hook | None = None  # current_year moved (incl. month rollover)
    on_value_update: Hook | None = None  # the committed value was written out

    def get(self, slot: str) -> Hook | None:
        """Return the callback for a slot name, or None if unset."""
        if slot not in HOOK_SLOTS:
            raise KeyError(slot)
        return getattr(self, slot)

    @property
    def is_empty(self) -> bool:
        return all(self.get(slot) is None for slot in HOOK_SLOTS)


HOOK_SLOTS: tuple[str, ...] = tuple(f.name for f in fields(PluginHooks))

# A plugin is called once per host instance and returns that instance's hooks
Plugin = Callable[["CalendarHost"], PluginHooks]
