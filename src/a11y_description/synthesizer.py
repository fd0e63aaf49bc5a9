"""DescriptionSynthesizer: the ordered rule pipeline producing description and hint.

The pipeline mirrors what VoiceOver announces for a single element.  Stages run
in a fixed order and each may rewrite the running description and hint:

1. Base text: the label, dropped when a back button repeats the "Back" word.
2. Table cell expansion: header fragments, then span/row/column sentences.
3. Value merge (never for switch buttons).
4. Selection prefix.
5. Trait specifier accumulation.
6. Empty description falls back to the hint.
7. Specifiers appended.
8. Context suffix: "N of M." for series-like contexts, boundary sentences for
   lists and landmarks.
9. Hint derivation for switches, text entry and adjustable elements.

No stage raises.  Any combination of inputs, including contradictory traits and
an entirely empty node, yields a well-defined result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from a11y_description.config import SynthesisConfig
from a11y_description.context import (
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
from a11y_description.result import Description
from a11y_description.strings import StringSet, lookup
from a11y_description.text import non_empty, strip_trailing_period, terminal_period

if TYPE_CHECKING:
    from a11y_description.node import Node
    from a11y_description.protocols import NumberFormatter

__all__ = ["DescriptionSynthesizer"]

# Tri-state switch values and the StringSet field announcing each.
_SWITCH_STATES: dict[str, str] = {
    "1": "switch_button_on_state_name",
    "0": "switch_button_off_state_name",
    "2": "switch_button_mixed_state_name",
}


class DescriptionSynthesizer:
    """Turns a ``Node`` and optional ``Context`` into a ``Description``.

    Instances hold only immutable collaborators (a number formatter and a
    config), so one synthesizer can be shared freely across threads.

    Example::

        synthesizer = DescriptionSynthesizer()
        node = Node(label="Submit", traits=TraitSet.of(Trait.BUTTON))
        synthesizer.synthesize(node)
        # Description(description="Submit. Button.", hint=None)
    """

    def __init__(
        self,
        formatter: NumberFormatter | None = None,
        config: SynthesisConfig | None = None,
    ) -> None:
        """Initialise the synthesizer.

        Args:
            formatter: A NumberFormatter-conformant object used for every
                number in table and series sentences.  Defaults to
                ``BabelNumberFormatter()``.
            config:    Behaviour switches.  Defaults to ``SynthesisConfig()``.
        """
        self._formatter: NumberFormatter = (
            formatter if formatter is not None else BabelNumberFormatter()
        )
        self._config: SynthesisConfig = (
            config if config is not None else SynthesisConfig()
        )

    @property
    def config(self) -> SynthesisConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def synthesize(self, node: Node, context: Context | None = None) -> Description:
        """Run the full pipeline for one element.

        Args:
            node:    The element's label, value, hint, traits and locale.
            context: The element's structural context, or None.

        Returns:
            A ``Description`` holding the announced description and hint.
        """
        strings = lookup(node.locale)
        traits = node.traits

        description = self._base_text(node, context, strings)
        hint = non_empty(node.hint)

        contains_context = False
        if isinstance(context, DataTableCell):
            description = self._expand_table_cell(description, context, node, strings)
            contains_context = True

        description = self._merge_value(description, node, contains_context)

        if traits.selected:
            if description:
                description = strings.selected_trait_format.format(description)
            else:
                description = strings.selected_trait_name

        specifiers = self._trait_specifiers(node, context, strings)

        if not description:
            description = hint or ""
            hint = None

        if specifiers:
            joined = " ".join(specifiers)
            if description:
                description = f"{description}{terminal_period(description)} {joined}"
            else:
                description = joined

        description = self._wrap_context(description, context, node, strings)
        hint = self._derive_hint(hint, node, strings)

        return Description(description=description, hint=hint)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _base_text(
        self, node: Node, context: Context | None, strings: StringSet
    ) -> str:
        override = self._label_override(context)
        if override is not None:
            return override
        if self._hides_label(node, strings):
            return ""
        return node.label or ""

    @staticmethod
    def _label_override(context: Context | None) -> str | None:
        # No context currently replaces the label.
        return None

    @staticmethod
    def _hides_label(node: Node, strings: StringSet) -> bool:
        # Back buttons omit a label that just repeats the "Back" descriptor.
        if not node.traits.back_button or node.label is None:
            return False
        return node.label.lower() == strings.back_descriptor.lower()

    def _expand_table_cell(
        self,
        description: str,
        cell: DataTableCell,
        node: Node,
        strings: StringSet,
    ) -> str:
        headers = "".join(
            _header_fragment(header)
            for header in (*cell.row_headers, *cell.column_headers)
        )

        sentences: list[str] = []
        if cell.row_span > 1 and cell.has_row:
            sentences.append(
                strings.data_table_row_span_format.format(
                    self._format_number(cell.row_span, node)
                )
            )
        if cell.column_span > 1 and cell.has_column:
            sentences.append(
                strings.data_table_column_span_format.format(
                    self._format_number(cell.column_span, node)
                )
            )
        if cell.is_first_in_row and cell.has_row:
            sentences.append(
                strings.data_table_row_format.format(
                    self._format_number(cell.row + 1, node)
                )
            )
        if cell.has_column:
            sentences.append(
                strings.data_table_column_format.format(
                    self._format_number(cell.column + 1, node)
                )
            )

        return (
            headers
            + description
            + terminal_period(description)
            + "".join(f" {sentence}" for sentence in sentences)
        )

    def _merge_value(self, description: str, node: Node, contains_context: bool) -> str:
        value = non_empty(node.value)
        if value is None or self._hides_value(node):
            return description
        if not description:
            return value
        if contains_context:
            return f"{description} {value}"
        return f"{description}: {value}"

    @staticmethod
    def _hides_value(node: Node) -> bool:
        # Switch buttons announce their value as an on/off/mixed state instead.
        return node.traits.switch_button

    def _trait_specifiers(
        self, node: Node, context: Context | None, strings: StringSet
    ) -> list[str]:
        traits = node.traits
        specifiers: list[str] = []

        if traits.not_enabled:
            specifiers.append(strings.not_enabled_trait_name)

        hides_button = (
            traits.keyboard_key
            or traits.switch_button
            or traits.tab_bar_item
            or traits.back_button
            or (context is not None and context.hides_button_trait)
        )
        if traits.button and not hides_button:
            specifiers.append(strings.button_trait_name)

        if traits.back_button:
            specifiers.append(strings.back_button_trait_name)

        if traits.switch_button:
            # A switch that is not also a button (e.g. a container passing
            # through a switch's traits) announces its state but not its name.
            if traits.button:
                specifiers.append(strings.switch_button_trait_name)
            state = _SWITCH_STATES.get(node.value or "")
            if state is not None:
                specifiers.append(getattr(strings, state))
            elif node.value and self._config.emit_unrecognized_switch_value:
                specifiers.append(node.value)

        if traits.tab_bar_item or (context is not None and context.shows_tab_trait):
            specifiers.append(strings.tab_trait_name)

        if traits.text_entry:
            specifiers.append(strings.text_entry_trait_name)
            if traits.is_editing:
                specifiers.append(strings.is_editing_trait_name)

        if traits.header:
            specifiers.append(strings.header_trait_name)
        if traits.link:
            specifiers.append(strings.link_trait_name)
        if traits.adjustable:
            specifiers.append(strings.adjustable_trait_name)
        if traits.image:
            specifiers.append(strings.image_trait_name)
        if traits.search_field:
            specifiers.append(strings.search_field_trait_name)

        return specifiers

    def _wrap_context(
        self,
        description: str,
        context: Context | None,
        node: Node,
        strings: StringSet,
    ) -> str:
        match context:
            case (
                Series(index=index, count=count)
                | Tab(index=index, count=count)
                | TabBarItem(index=index, count=count)
            ):
                # The index is announced as supplied; callers pass the ordinal.
                return strings.series_context_format.format(
                    description,
                    self._format_number(index, node),
                    self._format_number(count, node),
                )
            case ListStart():
                boundary = strings.list_start_context
            case ListEnd():
                boundary = strings.list_end_context
            case LandmarkStart():
                boundary = strings.landmark_start_context
            case LandmarkEnd():
                boundary = strings.landmark_end_context
            case _:
                return description
        return f"{description}{terminal_period(description)} {boundary}"

    @staticmethod
    def _derive_hint(hint: str | None, node: Node, strings: StringSet) -> str | None:
        traits = node.traits

        if traits.switch_button and not traits.not_enabled:
            hint = _chain_hint(
                hint,
                strings.switch_button_trait_hint,
                strings.switch_button_trait_hint_format,
            )

        if traits.text_entry and not traits.not_enabled:
            if traits.is_editing:
                hint = strings.text_entry_is_editing_trait_hint
            elif traits.scrollable:
                hint = strings.scrollable_text_entry_trait_hint
            else:
                hint = strings.text_entry_trait_hint

        has_hint_only = (
            non_empty(node.hint) is not None
            and non_empty(node.label) is None
            and non_empty(node.value) is None
        )
        hides_adjustable_hint = (
            traits.not_enabled or traits.switch_button or has_hint_only
        )
        if traits.adjustable and not hides_adjustable_hint:
            hint = _chain_hint(
                hint,
                strings.adjustable_trait_hint,
                strings.adjustable_trait_hint_format,
            )

        return hint

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _format_number(self, number: int, node: Node) -> str:
        return self._formatter.format(number, node.locale)


def _header_fragment(header: Node) -> str:
    label = non_empty(header.label)
    value = non_empty(header.value)
    if label is not None and value is not None:
        return f"{label}: {value}. "
    if label is not None:
        return f"{label}. "
    if value is not None:
        return f"{value}. "
    return ""


def _chain_hint(existing: str | None, standalone: str, chained_format: str) -> str:
    if existing:
        return chained_format.format(strip_trailing_period(existing))
    return standalone
