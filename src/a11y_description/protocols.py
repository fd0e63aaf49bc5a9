"""NumberFormatter Protocol for the number formatting extension point.

Defines the structural interface a number formatter must satisfy.  Any class
with a conformant ``format`` method passes ``isinstance`` checks, no
inheritance required.

Example::

    from a11y_description.protocols import NumberFormatter

    class PlainFormatter:
        def format(self, number: int, locale: str | None) -> str:
            return str(number)

    assert isinstance(PlainFormatter(), NumberFormatter)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberFormatter(Protocol):
    """Structural protocol for locale-aware integer formatters.

    ``format`` receives the integer to render and the element's locale
    identifier (possibly None) and returns the localized digits.
    """

    def format(self, number: int, locale: str | None) -> str: ...
