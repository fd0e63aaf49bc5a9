"""BabelNumberFormatter: locale-aware integer formatting via Babel.

Satisfies the ``NumberFormatter`` Protocol structurally.  Locale identifiers
are accepted in either ``en_US`` or ``en-US`` form; ``None`` and identifiers
Babel cannot parse fall back to ``en_US``.
"""

from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

__all__ = ["DEFAULT_LOCALE", "BabelNumberFormatter"]

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


class BabelNumberFormatter:
    """Formats integers with grouping separators for the element's locale.

    Example::

        formatter = BabelNumberFormatter()
        formatter.format(1234, "en_US")   # "1,234"
        formatter.format(1234, "de-DE")   # "1.234"
    """

    def __init__(self, default_locale: str = DEFAULT_LOCALE) -> None:
        self._default: Locale = Locale.parse(default_locale)

    def format(self, number: int, locale: str | None) -> str:
        return format_decimal(number, locale=self._resolve(locale))

    def _resolve(self, identifier: str | None) -> Locale:
        if not identifier:
            return self._default
        try:
            return Locale.parse(identifier.replace("-", "_"))
        except (UnknownLocaleError, ValueError):
            logger.debug(
                "Unknown locale %r, formatting numbers with %s",
                identifier,
                self._default,
            )
            return self._default
