"""Find ``///`` documentation comments in source text."""

from __future__ import annotations

import re

from ..markup import Span
from .doc_comment import DocComment

# Leading whitespace and the comment marker; ``////`` is a plain comment.
_PREFIX_RE = re.compile(r"[ \t]*///(?!/)")

# Lines end at "\n" only, so "\r\n" stays with its line and offsets match
# ``LineIndex``.
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def extract_doc_comments(source: str) -> list[DocComment]:
    """Return the documentation comments of ``source`` in order.

    Consecutive lines starting with ``///`` form one comment. Anything else,
    including a blank line, ends the comment.

    Args:
        source: Full text of a source file.

    Returns:
        Comments with their prefixes masked out.
    """

    comments: list[DocComment] = []
    parts: list[str] = []
    start: int | None = None
    pos = 0

    for line in _LINE_RE.findall(source):
        match = _PREFIX_RE.match(line)
        if match:
            if start is None:
                start = pos
            # Mask the prefix so the markup keeps its absolute offsets.
            parts.append(" " * match.end() + line[match.end() :])
        elif start is not None:
            comments.append(DocComment(Span(start, pos), "".join(parts)))
            parts = []
            start = None
        pos += len(line)

    if start is not None:
        comments.append(DocComment(Span(start, pos), "".join(parts)))

    return comments
