"""Source file scanning for documentation comments."""

from .check_source import SourceResult, check_source
from .doc_comment import DocComment
from .extract import extract_doc_comments
from .line_index import LineIndex

__all__ = [
    "DocComment",
    "LineIndex",
    "SourceResult",
    "check_source",
    "extract_doc_comments",
]
