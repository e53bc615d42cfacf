"""Controller layer: mediates between a calendar host and the year select.

This package contains:
- hooks: PluginHooks, the named callbacks a plugin hands to its host
- host: CalendarHost / RenderingSurface protocols the controller talks to
- factory: year select control factory
- year_sync: YearSyncController and the year_month_selection plugin
"""

from controller.factory import create_year_control
from controller.hooks import HOOK_SLOTS, Plugin, PluginHooks
from controller.year_sync import YearSyncController, year_month_selection

__all__ = [
    # Hooks
    "HOOK_SLOTS",
    "Plugin",
    "PluginHooks",
    # Year select
    "YearSyncController",
    "create_year_control",
    "year_month_selection",
]
