"""Context variants describing an element's position within a larger construct.

``Context`` is a closed union of frozen dataclasses.  Each variant carries the
two derived flags the synthesis pipeline consults as class-level constants:

- ``hides_button_trait``: the "Button." specifier is suppressed (tabs only).
- ``shows_tab_trait``:    the "Tab." specifier is announced (tabs and tab bar items).

Table cells signal a missing row or column with ``NOT_FOUND``.  Zero and
negative indices are never range checked; they are treated as real positions.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, ClassVar

from a11y_description.node import Node

__all__ = [
    "NOT_FOUND",
    "Context",
    "DataTableCell",
    "LandmarkEnd",
    "LandmarkStart",
    "ListEnd",
    "ListStart",
    "Series",
    "Tab",
    "TabBarItem",
]

# Matches the platform's NSNotFound (NSIntegerMax).
NOT_FOUND: int = sys.maxsize


@dataclass(frozen=True, slots=True)
class DataTableCell:
    """A cell of a data table.

    Attributes:
        row:             0-indexed row, or ``NOT_FOUND``.
        column:          0-indexed column, or ``NOT_FOUND``.
        row_span:        Number of rows the cell spans.
        column_span:     Number of columns the cell spans.
        is_first_in_row: Whether this is the first announced cell of its row.
        row_headers:     Header elements for the cell's row.
        column_headers:  Header elements for the cell's column.
    """

    row: int = NOT_FOUND
    column: int = NOT_FOUND
    row_span: int = 1
    column_span: int = 1
    is_first_in_row: bool = False
    row_headers: tuple[Node, ...] = ()
    column_headers: tuple[Node, ...] = ()

    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False

    @property
    def has_row(self) -> bool:
        return self.row != NOT_FOUND

    @property
    def has_column(self) -> bool:
        return self.column != NOT_FOUND


@dataclass(frozen=True, slots=True)
class Series:
    """An item in a series (e.g. a page of a paged scroll view)."""

    index: int
    count: int

    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Tab:
    """A tab within a tab group."""

    index: int
    count: int

    hides_button_trait: ClassVar[bool] = True
    shows_tab_trait: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class TabBarItem:
    """An item within a tab bar.  ``item`` is the platform object, opaque here."""

    index: int
    count: int
    item: Any = None

    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class ListStart:
    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class ListEnd:
    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class LandmarkStart:
    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class LandmarkEnd:
    hides_button_trait: ClassVar[bool] = False
    shows_tab_trait: ClassVar[bool] = False


Context = (
    DataTableCell
    | Series
    | Tab
    | TabBarItem
    | ListStart
    | ListEnd
    | LandmarkStart
    | LandmarkEnd
)
