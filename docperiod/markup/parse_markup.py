"""Read documentation markup text into a node tree."""

from __future__ import annotations

import html
import logging
import re

from attrs import define, field

from ..errors import MarkupError
from .element_node import ElementNode
from .span import Span
from .text_node import TextNode
from .types import AttributeMap, MarkupNode, NodeTuple

logger = logging.getLogger(__name__)

_NAME = r"[A-Za-z_][\w:.\-]*"

# Comments, CDATA sections, processing instructions, end tags and start or
# self-closing tags. Anything else starting with ``<`` is malformed.
_TAG_RE = re.compile(
    r"<!--(?P<comment>.*?)-->"
    r"|<!\[CDATA\[(?P<cdata>.*?)\]\]>"
    r"|<\?(?P<pi>.*?)\?>"
    rf"|</(?P<end>{_NAME})\s*>"
    rf"|<(?P<start>{_NAME})"
    r"(?P<attrs>(?:\s+[^\s=/>]+\s*=\s*(?:\"[^\"]*\"|'[^']*'))*)"
    r"\s*(?P<close>/?)>",
    re.DOTALL,
)
_ATTR_RE = re.compile(r"([^\s=/>]+)\s*=\s*(?:\"([^\"]*)\"|'([^']*)')")


@define(slots=True)
class _OpenElement:
    """Element whose end tag has not been reached yet."""

    tag: str
    start: int
    attributes: AttributeMap
    children: list[MarkupNode] = field(factory=list)


def _parse_attributes(raw: str) -> AttributeMap:
    """Return the attribute mapping of a start tag.

    Args:
        raw: Attribute section of the tag, after the element name.

    Returns:
        Attribute names mapped to their entity-decoded values.
    """

    attributes: AttributeMap = {}
    for match in _ATTR_RE.finditer(raw):
        value = match.group(2)
        if value is None:
            value = match.group(3)
        attributes[match.group(1)] = html.unescape(value)
    return attributes


def parse_markup(text: str, offset: int = 0) -> NodeTuple:
    """Parse markup text into a tuple of top-level nodes.

    The reader is strict: every start tag must be matched by an end tag of
    the same name. Comments and processing instructions are dropped; CDATA
    sections become text nodes covering their inner content.

    Args:
        text: Markup to parse.
        offset: Absolute offset of ``text[0]``; added to every span so that
            nodes can be located in a larger document.

    Returns:
        Top-level nodes in document order.

    Throws:
        MarkupError: If a tag is malformed, mismatched or left open.
    """

    root: list[MarkupNode] = []
    stack: list[_OpenElement] = []
    pos = 0

    def _append(node: MarkupNode) -> None:
        # Attach to the innermost open element or to the top level.
        if stack:
            stack[-1].children.append(node)
        else:
            root.append(node)

    while pos < len(text):
        lt = text.find("<", pos)
        if lt == -1:
            lt = len(text)

        # Character data up to the next tag.
        if lt > pos:
            _append(TextNode(text[pos:lt], Span(offset + pos, offset + lt)))
        if lt == len(text):
            break

        match = _TAG_RE.match(text, lt)
        if match is None:
            raise MarkupError("Malformed tag", offset + lt)
        pos = match.end()

        if match.group("cdata") is not None:
            inner_start = match.start("cdata")
            _append(
                TextNode(
                    match.group("cdata"),
                    Span(offset + inner_start, offset + match.end("cdata")),
                )
            )
        elif match.group("end") is not None:
            tag = match.group("end")
            if not stack or stack[-1].tag != tag:
                raise MarkupError(f"Unexpected end tag </{tag}>", offset + lt)
            frame = stack.pop()
            _append(
                ElementNode(
                    tag=frame.tag,
                    span=Span(offset + frame.start, offset + pos),
                    attributes=frame.attributes,
                    children=frame.children,
                )
            )
        elif match.group("start") is not None:
            tag = match.group("start")
            attributes = _parse_attributes(match.group("attrs"))
            if match.group("close"):
                _append(
                    ElementNode(
                        tag=tag,
                        span=Span(offset + lt, offset + pos),
                        attributes=attributes,
                        is_self_closing=True,
                    )
                )
            else:
                stack.append(_OpenElement(tag, lt, attributes))
        # Comments and processing instructions carry no content.

    if stack:
        frame = stack[-1]
        raise MarkupError(
            f"Unclosed element <{frame.tag}>", offset + frame.start
        )

    logger.log(1, f"Parsed {len(root)} top-level nodes")
    return tuple(root)
