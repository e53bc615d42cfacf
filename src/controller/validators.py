"""Validation functions for values coming out of picker widgets."""

import re
from datetime import date


def parse_year(value: str | None) -> int | None:
    """Parse a year from a control or input value.

    Args:
        value: Text from the year select or the header year input

    Returns:
        The year as an integer, or None if the text is not a plain number
    """
    if value is None:
        return None
    stripped = value.strip()
    if not re.fullmatch(r"\d+", stripped, re.ASCII):
        return None
    return int(stripped)


def parse_iso_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD date typed into the picker's date input.

    Args:
        value: String value from input field

    Returns:
        The date, or None if empty or not a valid calendar date
    """
    if value is None:
        return None
    stripped = value.strip()
    if not re.fullmatch(r'\d{4}-\d{2}-\d{2}', stripped, re.ASCII):
        return None
    try:
        return date.fromisoformat(stripped)
    except ValueError:
        # Right shape, impossible day (e.g. 2023-02-30)
        return None
