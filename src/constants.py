"""Shared constants for yearpick."""

# Default year range for the year select control
DEFAULT_MIN_YEAR = 1900
DEFAULT_MAX_YEAR = 2099

# CSS classes the year plugin looks for in the picker header
CURRENT_MONTH_CLASS = "current-month"
NUM_INPUT_WRAPPER_CLASS = "num-input-wrapper"

# CSS classes the year plugin puts on what it builds
YEAR_SELECT_CLASSES = ("year-select", "cur-year")
YEAR_SELECT_WRAPPER_CLASSES = ("year-select-wrapper", NUM_INPUT_WRAPPER_CLASS)

# Interaction event names understood by DatePicker.bind()
EVENT_CLICK = "click"
EVENT_MOUSEDOWN = "mousedown"
EVENT_FOCUS = "focus"
EVENT_CHANGE = "change"

# Events on the year select that must not reach the picker's own handlers
ISOLATED_EVENTS = (EVENT_CLICK, EVENT_MOUSEDOWN, EVENT_FOCUS)
