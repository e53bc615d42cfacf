"""Year range configuration for the year select plugin."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR


@dataclass(frozen=True)
class YearOption:
    """One entry of the year select: value and label are both the year as text."""

    value: str
    label: str


@dataclass(frozen=True)
class YearRangeConfig:
    """Inclusive year range offered by the year select.

    Either bound may be None, meaning "absent". An absent bound (or an
    inverted range) produces a control with no options.
    """

    min_year: int | None = DEFAULT_MIN_YEAR
    max_year: int | None = DEFAULT_MAX_YEAR

    @classmethod
    def resolve(cls, overrides: Mapping[str, Any] | None = None) -> YearRangeConfig:
        """Merge caller overrides over the defaults.

        Caller values win, including an explicit None. Unknown keys raise
        TypeError.
        """
        if not overrides:
            return cls()
        return replace(cls(), **dict(overrides))

    @property
    def is_empty(self) -> bool:
        """True when the range produces no options."""
        if self.min_year is None or self.max_year is None:
            return True
        return self.min_year > self.max_year

    def contains(self, year: int) -> bool:
        """Check whether a year is one of the offered options."""
        if self.is_empty:
            return False
        return self.min_year <= year <= self.max_year

    def options(self) -> list[YearOption]:
        """Options for this range, ascending."""
        return year_options(self.min_year, self.max_year)


def year_options(min_year: int | None, max_year: int | None) -> list[YearOption]:
    """Build one option per year from min_year to max_year inclusive.

    Returns an empty list if either bound is missing or min_year > max_year.
    """
    if min_year is None or max_year is None:
        return []
    return [YearOption(value=str(year), label=str(year)) for year in range(min_year, max_year + 1)]
