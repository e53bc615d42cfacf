"""Year select control factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from constants import YEAR_SELECT_CLASSES
from model.year_range import year_options

if TYPE_CHECKING:
    from controller.host import Control, RenderingSurface


def create_year_control(
    surface: RenderingSurface,
    min_year: int | None,
    max_year: int | None,
) -> Control:
    """Create a year select with one option per year in [min_year, max_year].

    Nothing is selected yet; the first sync from the host sets the value.
    A missing bound gives a control with no options.
    """
    return surface.create_select(year_options(min_year, max_year), YEAR_SELECT_CLASSES)
