"""Unit tests for the public API functions: synthesize, describe, availability_notes."""

from __future__ import annotations

import pytest

from a11y_description import (
    DataTableCell,
    Description,
    Node,
    Series,
    SynthesisConfig,
    Trait,
    TraitSet,
    availability_notes,
    describe,
    synthesize,
)


class TestSynthesize:
    def test_returns_description(self) -> None:
        result = synthesize(Node(label="Submit", traits=TraitSet.of(Trait.BUTTON)))
        assert isinstance(result, Description)
        assert result == Description("Submit. Button.", None)

    def test_context_passthrough(self) -> None:
        result = synthesize(Node(label="Photo"), Series(index=2, count=5))
        assert result.description == "Photo 2 of 5."

    def test_config_passthrough(self) -> None:
        node = Node(label="Mode", value="Auto", traits=TraitSet.of(Trait.SWITCH_BUTTON))
        on = synthesize(node)
        off = synthesize(node, config=SynthesisConfig(emit_unrecognized_switch_value=False))
        assert on.description == "Mode. Auto"
        assert off.description == "Mode"

    def test_formatter_passthrough(self) -> None:
        class Roman:
            def format(self, number: int, locale: str | None) -> str:
                return {1: "I", 2: "II", 5: "V"}[number]

        result = synthesize(Node(label="Photo"), Series(index=2, count=5), formatter=Roman())
        assert result.description == "Photo II of V."

    def test_spec_table_example(self) -> None:
        cell = DataTableCell(
            row=0, column=0, row_span=2, column_span=1, is_first_in_row=True
        )
        description, _ = synthesize(Node(label="Q1"), cell)
        assert "Spans 2 rows." in description
        assert "Row 1." in description
        assert "columns" not in description

    def test_no_state_between_calls(self) -> None:
        node = Node(label="Wi-Fi", value="1", traits=TraitSet.of(Trait.SWITCH_BUTTON))
        assert synthesize(node) == synthesize(node)


class TestDescribe:
    def test_returns_tuple(self) -> None:
        assert describe("Submit", traits=["button"]) == ("Submit. Button.", None)

    def test_switch_button(self) -> None:
        description, hint = describe("Wi-Fi", "1", traits=["switch_button", "button"])
        assert "Switch Button." in description
        assert "On." in description
        assert hint == "Double tap to toggle setting."

    def test_hint_only(self) -> None:
        assert describe(hint="Tap") == ("Tap", None)

    def test_bare_string_traits_rejected(self) -> None:
        with pytest.raises(TypeError, match="traits"):
            describe("A", traits="button")

    def test_locale_keyword(self) -> None:
        description, _ = describe(
            "Page", locale="de_DE", context=Series(index=1, count=2500)
        )
        assert description == "Page 1 of 2.500."


class TestAvailabilityNotes:
    def test_no_notes_by_default(self) -> None:
        assert availability_notes(Node(label="Plain")) == []

    def test_custom_actions(self) -> None:
        node = Node(label="Mail", custom_actions=("Delete", "Archive"))
        assert availability_notes(node) == ["Actions Available"]

    def test_custom_content(self) -> None:
        node = Node(label="Photo", custom_content=("Taken yesterday",))
        assert availability_notes(node) == ["More Content Available"]

    def test_both_in_order(self) -> None:
        node = Node(custom_actions=("Delete",), custom_content=("Size: 2 MB",))
        assert availability_notes(node) == ["Actions Available", "More Content Available"]
