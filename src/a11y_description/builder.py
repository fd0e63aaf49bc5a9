"""Builders converting plain mappings (e.g. decoded JSON) into Node and Context values.

Node mappings use the Node field names; ``traits`` is a list of trait names.
Context mappings carry a ``"kind"`` key naming the variant:

    {"kind": "series", "index": 2, "count": 5}
    {"kind": "data_table_cell", "row": 0, "column": null, "row_span": 2,
     "is_first_in_row": true, "row_headers": [{"label": "Name"}]}
    {"kind": "list_start"}

A missing or ``null`` table row/column maps to ``NOT_FOUND``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from a11y_description.context import (
    NOT_FOUND,
    Context,
    DataTableCell,
    LandmarkEnd,
    LandmarkStart,
    ListEnd,
    ListStart,
    Series,
    Tab,
    TabBarItem,
)
from a11y_description.node import Node
from a11y_description.traits import Trait, TraitSet

__all__ = ["context_from_dict", "node_from_dict"]

_TRAIT_NAMES: frozenset[str] = frozenset(str(trait) for trait in Trait)


def node_from_dict(data: Mapping[str, Any]) -> Node:
    """Build a Node from a mapping.

    Args:
        data: Mapping with any of ``label``, ``value``, ``hint``, ``traits``,
              ``locale``, ``custom_actions`` and ``custom_content``.

    Returns:
        The corresponding Node.

    Raises:
        TypeError:  If a field has the wrong type.
        ValueError: If ``traits`` names an unknown trait.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"Node data must be a mapping, got {type(data)!r}")

    traits = data.get("traits") or ()
    if not isinstance(traits, list | tuple | set | frozenset):
        raise TypeError(f"traits must be a list of names, got {type(traits)!r}")
    unknown = [name for name in traits if name not in _TRAIT_NAMES]
    if unknown:
        raise ValueError(f"Unknown trait name(s): {', '.join(map(repr, unknown))}")

    return Node(
        label=_optional_str(data, "label"),
        value=_optional_str(data, "value"),
        hint=_optional_str(data, "hint"),
        traits=TraitSet(traits),
        locale=_optional_str(data, "locale"),
        custom_actions=_str_tuple(data, "custom_actions"),
        custom_content=_str_tuple(data, "custom_content"),
    )


def context_from_dict(data: Mapping[str, Any] | None) -> Context | None:
    """Build a Context from a mapping, or return None for None.

    Raises:
        TypeError:  If a field has the wrong type.
        ValueError: If ``kind`` is missing or names no known context.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise TypeError(f"Context data must be a mapping, got {type(data)!r}")

    kind = data.get("kind")
    build = _CONTEXT_BUILDERS.get(kind) if isinstance(kind, str) else None
    if build is None:
        raise ValueError(f"Unknown context kind: {kind!r}")
    return build(data)


def _build_table_cell(data: Mapping[str, Any]) -> DataTableCell:
    return DataTableCell(
        row=_position(data, "row"),
        column=_position(data, "column"),
        row_span=_int(data, "row_span", default=1),
        column_span=_int(data, "column_span", default=1),
        is_first_in_row=_bool(data, "is_first_in_row"),
        row_headers=tuple(node_from_dict(h) for h in data.get("row_headers") or ()),
        column_headers=tuple(
            node_from_dict(h) for h in data.get("column_headers") or ()
        ),
    )


_CONTEXT_BUILDERS: dict[str, Callable[[Mapping[str, Any]], Context]] = {
    "data_table_cell": _build_table_cell,
    "series": lambda d: Series(index=_int(d, "index"), count=_int(d, "count")),
    "tab": lambda d: Tab(index=_int(d, "index"), count=_int(d, "count")),
    "tab_bar_item": lambda d: TabBarItem(
        index=_int(d, "index"), count=_int(d, "count"), item=d.get("item")
    ),
    "list_start": lambda d: ListStart(),
    "list_end": lambda d: ListEnd(),
    "landmark_start": lambda d: LandmarkStart(),
    "landmark_end": lambda d: LandmarkEnd(),
}


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{key} must be a string, got {type(value)!r}")


def _str_tuple(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    values = data.get(key) or ()
    if isinstance(values, str) or not all(isinstance(v, str) for v in values):
        raise TypeError(f"{key} must be a list of strings")
    return tuple(values)


def _int(data: Mapping[str, Any], key: str, default: int | None = None) -> int:
    value = data.get(key, default)
    # bool subclasses int; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {type(value)!r}")
    return value


def _position(data: Mapping[str, Any], key: str) -> int:
    if data.get(key) is None:
        return NOT_FOUND
    return _int(data, key)


def _bool(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a bool, got {type(value)!r}")
    return value
