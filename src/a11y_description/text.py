"""Small string helpers shared by the synthesis stages.

Empty strings and None are interchangeable throughout: both mean "no content".
"""

from __future__ import annotations

__all__ = ["non_empty", "strip_trailing_period", "terminal_period"]


def non_empty(text: str | None) -> str | None:
    """Return ``text`` if it has content, otherwise None."""
    return text if text else None


def strip_trailing_period(text: str) -> str:
    """Drop a single trailing period, if present."""
    return text[:-1] if text.endswith(".") else text


def terminal_period(text: str) -> str:
    """Return the punctuation needed to end ``text`` with a period ("" or ".")."""
    return "" if text.endswith(".") else "."
