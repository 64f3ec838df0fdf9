"""Check that documentation comment text ends with a period."""

from .engine import (
    TextEdit,
    Violation,
    apply_edits,
    check_comment,
    synthesize_fixes,
)
from .markup import parse_markup
from .resolver import FileReferenceResolver, InMemoryResolver
from .source import check_source

__all__ = [
    "FileReferenceResolver",
    "InMemoryResolver",
    "TextEdit",
    "Violation",
    "apply_edits",
    "check_comment",
    "check_source",
    "parse_markup",
    "synthesize_fixes",
]
