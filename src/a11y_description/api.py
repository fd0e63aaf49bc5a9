"""Public API functions for a11y-description.

Provides ``synthesize``, ``describe`` and ``availability_notes``.  Each call
creates a fresh ``DescriptionSynthesizer`` so no state carries over between
calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from a11y_description.config import SynthesisConfig
from a11y_description.node import Node
from a11y_description.result import Description
from a11y_description.strings import lookup
from a11y_description.synthesizer import DescriptionSynthesizer
from a11y_description.traits import Trait, TraitSet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from a11y_description.context import Context
    from a11y_description.protocols import NumberFormatter

__all__ = ["availability_notes", "describe", "synthesize"]


def synthesize(
    node: Node,
    context: Context | None = None,
    config: SynthesisConfig | None = None,
    formatter: NumberFormatter | None = None,
) -> Description:
    """Return the description and hint a screen reader announces for ``node``.

    Args:
        node:      The element's label, value, hint, traits and locale.
        context:   The element's structural context, or None.
        config:    Behaviour switches.  Defaults to ``SynthesisConfig()``.
        formatter: Number formatter.  Defaults to ``BabelNumberFormatter()``.

    Returns:
        A ``Description``; unpacks as ``(description, hint)``.
    """
    return DescriptionSynthesizer(formatter=formatter, config=config).synthesize(
        node, context
    )


def describe(
    label: str | None = None,
    value: str | None = None,
    hint: str | None = None,
    traits: Iterable[Trait | str] = (),
    *,
    locale: str | None = None,
    context: Context | None = None,
    config: SynthesisConfig | None = None,
) -> tuple[str, str | None]:
    """Convenience wrapper: build a Node from keyword arguments and synthesize it.

    Example::

        describe("Submit", traits=["button"])   # ("Submit. Button.", None)

    Raises:
        TypeError:  If ``traits`` is a bare string rather than a collection.
        ValueError: If ``traits`` names an unknown trait.
    """
    if isinstance(traits, str):
        raise TypeError(f"traits must be a collection of names, got {traits!r}")
    node = Node(
        label=label, value=value, hint=hint, traits=TraitSet(traits), locale=locale
    )
    result = synthesize(node, context, config=config)
    return result.description, result.hint


def availability_notes(node: Node) -> list[str]:
    """Return the extra notes announced for custom actions and custom content.

    Returns:
        ``"Actions Available"`` when the node exposes custom actions, then
        ``"More Content Available"`` when it exposes custom content.
    """
    strings = lookup(node.locale)
    notes: list[str] = []
    if node.custom_actions:
        notes.append(strings.actions_available)
    if node.custom_content:
        notes.append(strings.more_content_available)
    return notes
