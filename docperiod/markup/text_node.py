"""Text leaf of a markup tree."""

from __future__ import annotations

from attrs import define

from .span import Span


@define(slots=True, frozen=True)
class TextNode:
    """Run of character data between two tags.

    Attributes:
        content: Raw text as it appears in the source, entities undecoded.
        span: Location of ``content`` in the source text.
    """

    content: str
    span: Span
