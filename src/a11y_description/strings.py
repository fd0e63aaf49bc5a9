"""StringSet and lookup(): the locale-keyed table of announcement phrases.

Every locale currently resolves to the same English phrase set.  The table
exists so a localized set can be swapped in without touching the synthesizer.

Trait names always end in terminal punctuation.  Format templates use
``str.format`` positional placeholders (``{}``).

Lookups are memoised per locale in a lock-guarded ``LRUCache``, so concurrent
callers can share the table without further synchronisation.

Example::

    from a11y_description.strings import lookup

    strings = lookup("en_US")
    strings.button_trait_name                    # "Button."
    strings.series_context_format.format("Photo", "2", "5")  # "Photo 2 of 5."
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from cachetools import LRUCache, cached

__all__ = ["StringSet", "lookup"]


@dataclass(frozen=True, slots=True)
class StringSet:
    """Fully-populated, read-only record of phrases and templates for one locale."""

    # Traits
    selected_trait_name: str = "Selected."
    selected_trait_format: str = "Selected: {}"
    not_enabled_trait_name: str = "Dimmed."
    button_trait_name: str = "Button."
    back_button_trait_name: str = "Back Button."
    back_descriptor: str = "Back"
    tab_trait_name: str = "Tab."
    header_trait_name: str = "Heading."
    link_trait_name: str = "Link."
    adjustable_trait_name: str = "Adjustable."
    image_trait_name: str = "Image."
    search_field_trait_name: str = "Search Field."
    switch_button_trait_name: str = "Switch Button."
    switch_button_on_state_name: str = "On."
    switch_button_off_state_name: str = "Off."
    switch_button_mixed_state_name: str = "Mixed."
    text_entry_trait_name: str = "Text Field."
    is_editing_trait_name: str = "Is editing."

    # Hints
    adjustable_trait_hint: str = "Swipe up or down with one finger to adjust the value."
    adjustable_trait_hint_format: str = (
        "{}. Swipe up or down with one finger to adjust the value."
    )
    switch_button_trait_hint: str = "Double tap to toggle setting."
    switch_button_trait_hint_format: str = "{}. Double tap to toggle setting."
    text_entry_trait_hint: str = "Double tap to edit."
    text_entry_is_editing_trait_hint: str = "Use the rotor to access Misspelled Words"
    scrollable_text_entry_trait_hint: str = (
        "Double tap to edit., Use the rotor to access Misspelled Words"
    )

    # Context
    series_context_format: str = "{} {} of {}."
    data_table_row_span_format: str = "Spans {} rows."
    data_table_column_span_format: str = "Spans {} columns."
    data_table_row_format: str = "Row {}."
    data_table_column_format: str = "Column {}."
    list_start_context: str = "List Start."
    list_end_context: str = "List End."
    landmark_start_context: str = "Landmark."
    landmark_end_context: str = "End."

    # Availability notes
    actions_available: str = "Actions Available"
    more_content_available: str = "More Content Available"


@cached(cache=LRUCache(maxsize=64), lock=threading.Lock())
def lookup(locale: str | None) -> StringSet:
    """Return the phrase set for ``locale``.

    Args:
        locale: Locale identifier, or None for the default locale.

    Returns:
        The ``StringSet`` for the locale.  Currently the English set for every
        input.
    """
    return StringSet()
