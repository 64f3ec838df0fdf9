"""Check a documentation comment for missing periods."""

from __future__ import annotations

from ..markup import ElementNode
from ..markup.types import NodeTuple
from .checker import check_unit
from .classifier import DEFAULT_TAGS, ElementClass, TagTable, classify_element
from .paragraph_unit import ParagraphUnit
from .references import ReferenceResolver, check_reference
from .segmenter import segment_section
from .violation import Violation

ViolationList = list[Violation]


def check_comment(
    nodes: NodeTuple,
    resolver: ReferenceResolver | None = None,
    tags: TagTable = DEFAULT_TAGS,
) -> ViolationList:
    """Return the violations of a documentation comment.

    Top-level block elements are checked as sections and top-level
    references through ``resolver``. Loose top-level text is not prose of
    any section and is ignored.

    Args:
        nodes: Top-level nodes of the comment.
        resolver: Resolver for ``include``/``inheritdoc`` elements.
        tags: Tag tables used to classify elements.

    Returns:
        Violations ordered by location.
    """

    def _analyze(content: NodeTuple, depth: int) -> ViolationList:
        violations: ViolationList = []

        for node in content:
            if not isinstance(node, ElementNode):
                continue

            kind = classify_element(node, tags)
            if kind is ElementClass.BLOCK:
                for segment in segment_section(node, tags):
                    violation = _check_segment(segment, depth)
                    if violation is not None:
                        violations.append(violation)
            elif kind is ElementClass.REFERENCE:
                violation = check_reference(node, resolver, _analyze, depth)
                if violation is not None:
                    violations.append(violation)

        return violations

    def _check_segment(
        segment: ParagraphUnit | ElementNode, depth: int
    ) -> Violation | None:
        if isinstance(segment, ParagraphUnit):
            return check_unit(segment)

        # Opaque and exempt elements are never checked.
        if classify_element(segment, tags) is ElementClass.REFERENCE:
            return check_reference(segment, resolver, _analyze, depth)
        return None

    return sorted(_analyze(nodes, 0), key=lambda v: v.location)
