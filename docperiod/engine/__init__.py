"""Rule engine for periods at the end of documentation text."""

from .analyze import check_comment
from .checker import check_unit
from .classifier import (
    DEFAULT_TAGS,
    ElementClass,
    TagTable,
    classify,
    classify_element,
)
from .fixes import TextEdit, apply_edits, synthesize_fixes
from .paragraph_unit import ParagraphUnit
from .references import (
    ReferenceLocator,
    ReferenceResolver,
    Resolution,
    Resolved,
    Unresolved,
)
from .segmenter import segment_block, segment_section
from .violation import MESSAGE_KEY, Violation

__all__ = [
    "DEFAULT_TAGS",
    "MESSAGE_KEY",
    "ElementClass",
    "ParagraphUnit",
    "ReferenceLocator",
    "ReferenceResolver",
    "Resolution",
    "Resolved",
    "TagTable",
    "TextEdit",
    "Unresolved",
    "Violation",
    "apply_edits",
    "check_comment",
    "check_unit",
    "classify",
    "classify_element",
    "segment_block",
    "segment_section",
    "synthesize_fixes",
]
