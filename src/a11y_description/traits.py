"""Trait StrEnum and TraitSet for accessibility trait flags.

Traits are the named boolean properties of a UI element that influence how a
screen reader announces it (button, header, adjustable, ...).  TraitSet wraps a
frozenset of Trait members with named accessors so the synthesis pipeline can
test membership without committing to any platform bit layout.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum, auto

__all__ = ["Trait", "TraitSet"]


class Trait(StrEnum):
    """Enumeration of the recognised accessibility traits.

    StrEnum values are the lowercased member names, e.g.
    ``Trait.SWITCH_BUTTON == "switch_button"``.
    """

    SELECTED = auto()
    NOT_ENABLED = auto()
    BUTTON = auto()
    BACK_BUTTON = auto()
    SWITCH_BUTTON = auto()
    TAB_BAR_ITEM = auto()
    TEXT_ENTRY = auto()
    IS_EDITING = auto()
    HEADER = auto()
    LINK = auto()
    ADJUSTABLE = auto()
    IMAGE = auto()
    SEARCH_FIELD = auto()
    SCROLLABLE = auto()
    KEYBOARD_KEY = auto()


class TraitSet:
    """Immutable, hashable set of Trait flags.

    Flags are independent: any combination is accepted, including ones that
    cannot occur on a real element.

    Example::

        traits = TraitSet([Trait.BUTTON, Trait.SELECTED])
        traits.button          # True
        Trait.HEADER in traits # False
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[Trait | str] = ()) -> None:
        self._flags: frozenset[Trait] = frozenset(Trait(flag) for flag in flags)

    @classmethod
    def of(cls, *flags: Trait | str) -> TraitSet:
        """Build a TraitSet from positional flags."""
        return cls(flags)

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags

    def __iter__(self) -> Iterator[Trait]:
        # Declaration order keeps iteration deterministic.
        return (flag for flag in Trait if flag in self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraitSet):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"TraitSet({[str(flag) for flag in self]!r})"

    def __or__(self, other: TraitSet) -> TraitSet:
        return TraitSet(self._flags | other._flags)

    # ------------------------------------------------------------------
    # Named accessors
    # ------------------------------------------------------------------

    @property
    def selected(self) -> bool:
        return Trait.SELECTED in self._flags

    @property
    def not_enabled(self) -> bool:
        return Trait.NOT_ENABLED in self._flags

    @property
    def button(self) -> bool:
        return Trait.BUTTON in self._flags

    @property
    def back_button(self) -> bool:
        return Trait.BACK_BUTTON in self._flags

    @property
    def switch_button(self) -> bool:
        return Trait.SWITCH_BUTTON in self._flags

    @property
    def tab_bar_item(self) -> bool:
        return Trait.TAB_BAR_ITEM in self._flags

    @property
    def text_entry(self) -> bool:
        return Trait.TEXT_ENTRY in self._flags

    @property
    def is_editing(self) -> bool:
        return Trait.IS_EDITING in self._flags

    @property
    def header(self) -> bool:
        return Trait.HEADER in self._flags

    @property
    def link(self) -> bool:
        return Trait.LINK in self._flags

    @property
    def adjustable(self) -> bool:
        return Trait.ADJUSTABLE in self._flags

    @property
    def image(self) -> bool:
        return Trait.IMAGE in self._flags

    @property
    def search_field(self) -> bool:
        return Trait.SEARCH_FIELD in self._flags

    @property
    def scrollable(self) -> bool:
        return Trait.SCROLLABLE in self._flags

    @property
    def keyboard_key(self) -> bool:
        return Trait.KEYBOARD_KEY in self._flags
