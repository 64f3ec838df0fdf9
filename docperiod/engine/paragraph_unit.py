"""Run of prose that must end with a period."""

from __future__ import annotations

from attrs import define, evolve, field

from ..markup import ElementNode, TextNode
from ..markup.types import NodeTuple

# Line used between alternative conditions in exception descriptions.
ALTERNATIVE_SEPARATOR = "-or-"


@define(slots=True, frozen=True)
class ParagraphUnit:
    """Contiguous text and inline content bounded by block edges.

    Units are values: ``add_text`` and ``add_inline`` return a new unit.

    Attributes:
        nodes: Text and inline nodes of the unit in document order.
        text: Text of the unit's text nodes; inline content is excluded.
        end: Offset just after the last significant character or trailing
            inline element, ``None`` when the unit has no content.
        last_char: Last non-whitespace character, ``None`` when the unit
            has no content or ends on an inline element other than a
            formatting element ending in text.
        ends_with_inline: Whether the last significant node is inline.
        has_inline: Whether the unit contains any inline element.
        closing: Whether this is the last content of its section.
    """

    nodes: NodeTuple = field(default=(), repr=False)
    text: str = ""
    end: int | None = None
    last_char: str | None = None
    ends_with_inline: bool = False
    has_inline: bool = False
    closing: bool = False

    @property
    def trivial(self) -> bool:
        """Whether the unit is exempt from the terminator check."""

        if self.end is None:
            return True
        return (
            not self.has_inline
            and self.text.strip() == ALTERNATIVE_SEPARATOR
        )

    def add_text(self, node: TextNode) -> "ParagraphUnit":
        """Return the unit extended by a text node."""

        nodes = self.nodes + (node,)
        text = self.text + node.content
        significant = node.content.rstrip()

        # Trailing whitespace does not move the end marker.
        if not significant:
            return evolve(self, nodes=nodes, text=text)

        return evolve(
            self,
            nodes=nodes,
            text=text,
            end=node.span.start + len(significant),
            last_char=significant[-1],
            ends_with_inline=False,
        )

    def add_inline(
        self, node: ElementNode, last_char: str | None = None
    ) -> "ParagraphUnit":
        """Return the unit extended by an inline element.

        Args:
            node: Inline element appended to the unit.
            last_char: Last significant character of the element's own
                text when that text closes the sentence, else ``None``.
        """

        return evolve(
            self,
            nodes=self.nodes + (node,),
            end=node.span.end,
            last_char=last_char,
            ends_with_inline=True,
            has_inline=True,
        )
