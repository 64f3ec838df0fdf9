"""Character range covered by a markup node."""

from __future__ import annotations

from attrs import define


@define(slots=True, frozen=True)
class Span:
    """Half-open range of character offsets.

    Attributes:
        start: Offset of the first character.
        end: Offset just past the last character.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start
