"""Split block elements into paragraph units."""

from __future__ import annotations

from typing import Union

from attrs import evolve

from ..markup import ElementNode, TextNode
from .classifier import DEFAULT_TAGS, ElementClass, TagTable, classify_element
from .paragraph_unit import ParagraphUnit

# Either a unit of prose or a non-prose element (opaque, exempt or
# reference) that ended the preceding unit.
Segment = Union[ParagraphUnit, ElementNode]
SegmentList = list[Segment]


def segment_block(
    element: ElementNode, tags: TagTable = DEFAULT_TAGS
) -> SegmentList:
    """Partition a block element into segments in document order.

    Nested blocks are segmented recursively and their segments are spliced
    in place. Empty units are kept; callers skip them via
    ``ParagraphUnit.trivial``.

    Args:
        element: Block element to segment.
        tags: Tag tables used to classify child elements.

    Returns:
        Units and non-prose elements in document order.
    """

    segments: SegmentList = []
    unit = ParagraphUnit()

    for child in element.children:
        if isinstance(child, TextNode):
            unit = unit.add_text(child)
            continue

        kind = classify_element(child, tags)
        if kind is ElementClass.INLINE:
            unit = unit.add_inline(child, _trailing_char(child, tags))
            continue

        # Every other element ends the current unit.
        segments.append(unit)
        unit = ParagraphUnit()

        if kind is ElementClass.BLOCK:
            segments.extend(segment_block(child, tags))
        elif kind is not ElementClass.PARAGRAPH_SEPARATOR:
            segments.append(child)

    segments.append(unit)
    return segments


def _trailing_char(element: ElementNode, tags: TagTable) -> str | None:
    """Return the character a formatting element's text ends with.

    ``None`` when ``element`` is not a formatting element, or when its
    content ends on another kind of inline element.
    """

    if element.tag not in tags.formatting:
        return None

    for child in reversed(element.children):
        if isinstance(child, TextNode):
            significant = child.content.rstrip()
            if significant:
                return significant[-1]
            continue
        return _trailing_char(child, tags)
    return None


def _is_content(segment: Segment) -> bool:
    """Return whether a segment counts as content for the colon rule."""

    if isinstance(segment, ParagraphUnit):
        return not segment.trivial
    return True


def segment_section(
    element: ElementNode, tags: TagTable = DEFAULT_TAGS
) -> SegmentList:
    """Segment a top-level block and mark its closing unit.

    Args:
        element: Top-level block such as ``<summary>``.
        tags: Tag tables used to classify child elements.

    Returns:
        Segments of the block where the last content segment, when it is a
        paragraph unit, has ``closing`` set.
    """

    segments = segment_block(element, tags)

    # Find the last segment carrying content.
    for index in range(len(segments) - 1, -1, -1):
        segment = segments[index]
        if not _is_content(segment):
            continue
        if isinstance(segment, ParagraphUnit):
            segments[index] = evolve(segment, closing=True)
        break

    return segments
