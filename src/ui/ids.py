"""Widget ID and class constants for the TUI.

Using constants prevents typos and makes refactoring easier. Parts of a
DatePicker are addressed by class, not ID, so several pickers can share a
screen.
"""

from constants import CURRENT_MONTH_CLASS, NUM_INPUT_WRAPPER_CLASS


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def cls(class_name: str) -> str:
    """Return a CSS selector for a class name.

    Usage:
        picker.query_one(cls(MONTH_LABEL), Label)
    """
    return f".{class_name}"


# App-level IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
PICKERS_CONTAINER = "pickers-container"
STATUS_BAR = "status-bar"


def picker_id(index: int) -> str:
    """ID of the index-th DatePicker in the demo app."""
    return f"picker-{index}"


# DatePicker parts (classes)
DATE_ROW = "date-row"
DATE_INPUT = "date-input"
CALENDAR_TOGGLE_BTN = "calendar-toggle"
CALENDAR = "calendar"
HEADER = CURRENT_MONTH_CLASS
PREV_MONTH_BTN = "prev-month"
NEXT_MONTH_BTN = "next-month"
MONTH_LABEL = "cur-month"
YEAR_INPUT_WRAPPER = NUM_INPUT_WRAPPER_CLASS
YEAR_INPUT = "year-input"
DAYS_VIEW = "days"
TIME_INPUT = "time-input"

# Shared state classes
HIDDEN = "hidden"
