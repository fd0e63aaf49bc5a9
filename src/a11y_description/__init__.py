"""a11y-description - screen reader description and hint synthesis for UI elements."""

from __future__ import annotations

from a11y_description.api import availability_notes, describe, synthesize
from a11y_description.builder import context_from_dict, node_from_dict
from a11y_description.config import SynthesisConfig
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
from a11y_description.formatting import BabelNumberFormatter
from a11y_description.node import Node
from a11y_description.protocols import NumberFormatter
from a11y_description.result import Description
from a11y_description.strings import StringSet, lookup
from a11y_description.synthesizer import DescriptionSynthesizer
from a11y_description.traits import Trait, TraitSet

__version__: str = "0.1.0"
__all__: list[str] = [
    "NOT_FOUND",
    "BabelNumberFormatter",
    "Context",
    "DataTableCell",
    "Description",
    "DescriptionSynthesizer",
    "LandmarkEnd",
    "LandmarkStart",
    "ListEnd",
    "ListStart",
    "Node",
    "NumberFormatter",
    "Series",
    "StringSet",
    "SynthesisConfig",
    "Tab",
    "TabBarItem",
    "Trait",
    "TraitSet",
    "availability_notes",
    "context_from_dict",
    "describe",
    "lookup",
    "node_from_dict",
    "synthesize",
]
