"""TextualSurface: RenderingSurface backed by a widget's Textual DOM."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Select
from textual.widgets.select import InvalidSelectValueError

from ui.ids import cls
from ui.widgets.year_select import YearSelect
import ui.ids as ids

if TYPE_CHECKING:
    from textual.widget import Widget

    from model.year_range import YearOption

log = logging.getLogger(__name__)


class TextualSurface:
    """Creates and swaps widgets inside one picker.

    All lookups are scoped to the root widget, so two pickers on the same
    screen never see each other's header.
    """

    def __init__(self, root: Widget) -> None:
        self.root = root

    def create_select(self, options: Sequence[YearOption], classes: Iterable[str]) -> YearSelect:
        return YearSelect(options, classes=" ".join(classes))

    def set_value(self, control: YearSelect, value: str) -> None:
        """Show value in the select without posting Select.Changed."""
        with control.prevent(Select.Changed):
            try:
                control.value = value
            except InvalidSelectValueError:
                log.debug(f"No year option for {value!r}, clearing selection")
                control.clear()

    def get_value(self, control: YearSelect) -> str | None:
        return control.selection

    def wrap(self, control: YearSelect, classes: Iterable[str]) -> Horizontal:
        return Horizontal(control, classes=" ".join(classes))

    def find_header(self) -> Widget | None:
        try:
            return self.root.query_one(cls(ids.HEADER))
        except NoMatches:
            return None

    def find_numeric_input_wrapper(self, header: Widget) -> Widget | None:
        try:
            return header.query(cls(ids.YEAR_INPUT_WRAPPER)).first()
        except NoMatches:
            return None

    def replace_child(self, parent: Widget, old: Widget, new: Widget) -> None:
        parent.mount(new, before=old)
        old.remove()
