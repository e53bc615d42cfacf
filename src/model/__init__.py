"""Model classes for yearpick."""

from model.year_range import YearOption, YearRangeConfig, year_options

__all__ = [
    "YearOption",
    "YearRangeConfig",
    "year_options",
]
