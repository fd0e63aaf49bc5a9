"""Node dataclass: the already-extracted accessibility properties of one element."""

from __future__ import annotations

from dataclasses import dataclass, field

from a11y_description.traits import TraitSet

__all__ = ["Node"]


@dataclass(frozen=True, slots=True)
class Node:
    """Accessibility properties of a single UI element.

    Attributes:
        label:          Raw accessible label.  ``None`` and ``""`` both mean
                        "no label".
        value:          Raw accessible value, e.g. ``"1"``/``"0"``/``"2"`` for
                        tri-state controls, or arbitrary text.
        hint:           Raw supplementary hint text.
        traits:         The element's trait flags.
        locale:         Locale identifier used for number formatting only.
        custom_actions: Names of the custom actions the element exposes.
        custom_content: Custom content entries the element exposes.
    """

    label: str | None = None
    value: str | None = None
    hint: str | None = None
    traits: TraitSet = field(default_factory=TraitSet)
    locale: str | None = None
    custom_actions: tuple[str, ...] = ()
    custom_content: tuple[str, ...] = ()
