"""Description dataclass for synthesis output."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Description"]


@dataclass(frozen=True, slots=True)
class Description:
    """What a screen reader announces for one element.

    Attributes:
        description: The primary announcement.  May be empty.
        hint:        The secondary announcement read after the description, or
                     None when there is nothing to add.

    Unpacks like a pair::

        description, hint = synthesize(node)
    """

    description: str
    hint: str | None = None

    def __iter__(self) -> Iterator[str | None]:
        yield self.description
        yield self.hint
