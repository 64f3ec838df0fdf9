"""Map character offsets to line and column numbers."""

from __future__ import annotations

from bisect import bisect_right

from attrs import define, field


@define(slots=True)
class LineIndex:
    """Line start offsets of a text.

    Attributes:
        starts: Offset of the first character of every line.
    """

    starts: list[int] = field(factory=lambda: [0])

    @classmethod
    def from_text(cls, text: str) -> "LineIndex":
        starts = [0]
        for index, char in enumerate(text):
            if char == "\n":
                starts.append(index + 1)
        return cls(starts)

    def line_col(self, offset: int) -> tuple[int, int]:
        """Return the one-based line and column of ``offset``."""

        line = bisect_right(self.starts, offset) - 1
        return line + 1, offset - self.starts[line] + 1
