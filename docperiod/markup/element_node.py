"""Element of a markup tree."""

from __future__ import annotations

from attrs import define, field

from .span import Span
from .text_node import TextNode
from .types import NodeTuple


@define(slots=True, frozen=True)
class ElementNode:
    """Markup element such as ``<summary>`` or ``<see cref="..."/>``.

    Attributes:
        tag: Element name, compared case-sensitively.
        span: Location of the element from ``<`` of the start tag to ``>``
            of the end tag (or of the self-closing tag).
        attributes: Attribute values with entities decoded.
        children: Child nodes in document order.
        is_self_closing: Whether the element was written as ``<tag/>``.
    """

    tag: str
    span: Span
    attributes: dict[str, str] = field(factory=dict)
    children: NodeTuple = field(default=(), converter=tuple)
    is_self_closing: bool = False

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name`` or ``default``."""

        return self.attributes.get(name, default)

    def elements(self) -> list["ElementNode"]:
        """Return the element children, skipping text."""

        return [c for c in self.children if isinstance(c, ElementNode)]

    def text(self) -> str:
        """Return the concatenated text of all descendants."""

        parts: list[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.content)
            else:
                parts.append(child.text())
        return "".join(parts)
