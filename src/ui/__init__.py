"""UI module containing the date picker widgets and their Textual surface."""

from ui.widgets import DatePicker, PickerOptions, YearSelect, render_month
from ui.surface import TextualSurface

__all__ = [
    # Widgets
    "DatePicker",
    "PickerOptions",
    "YearSelect",
    "render_month",
    # Surface
    "TextualSurface",
]
