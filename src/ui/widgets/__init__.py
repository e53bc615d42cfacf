"""Custom Textual widgets for yearpick."""

from ui.widgets.year_select import YearSelect
from ui.widgets.date_picker import DatePicker, PickerOptions, render_month

__all__ = [
    "DatePicker",
    "PickerOptions",
    "YearSelect",
    "render_month",
]
