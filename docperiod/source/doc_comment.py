"""Documentation comment found in a source file."""

from __future__ import annotations

from attrs import define

from ..markup import Span, parse_markup
from ..markup.types import NodeTuple


@define(slots=True, frozen=True)
class DocComment:
    """Block of consecutive ``///`` lines.

    Attributes:
        span: Location of the block in the source file.
        markup: Text of the block with every ``///`` prefix replaced by
            spaces, so that ``markup[i]`` sits at ``span.start + i``.
    """

    span: Span
    markup: str

    def parse(self) -> NodeTuple:
        """Return the markup nodes with offsets absolute in the file.

        Throws:
            MarkupError: If the comment is not well formed.
        """

        return parse_markup(self.markup, self.span.start)
