"""Check every documentation comment of a source file."""

from __future__ import annotations

import logging

from attrs import define, field

from ..engine import (
    DEFAULT_TAGS,
    ReferenceResolver,
    TagTable,
    Violation,
    check_comment,
)
from ..errors import MarkupError
from .extract import extract_doc_comments

logger = logging.getLogger(__name__)


@define(slots=True)
class SourceResult:
    """Outcome of checking one source text.

    Attributes:
        violations: Violations of all comments ordered by location.
        comment_count: Number of documentation comments found.
        errors: Messages for comments skipped because of malformed markup.
    """

    violations: list[Violation] = field(factory=list)
    comment_count: int = 0
    errors: list[str] = field(factory=list)


def check_source(
    source: str,
    resolver: ReferenceResolver | None = None,
    tags: TagTable = DEFAULT_TAGS,
) -> SourceResult:
    """Check the documentation comments of a source text.

    A malformed comment is skipped with a warning; the remaining comments
    are still checked.

    Args:
        source: Full text of a source file.
        resolver: Resolver for ``include``/``inheritdoc`` elements.
        tags: Tag tables used to classify elements.

    Returns:
        Violations with offsets into ``source``.
    """

    result = SourceResult()

    for comment in extract_doc_comments(source):
        result.comment_count += 1
        try:
            nodes = comment.parse()
        except MarkupError as exc:
            logger.warning(f"Skipping malformed comment: {exc}")
            result.errors.append(str(exc))
            continue

        result.violations.extend(check_comment(nodes, resolver, tags))

    return result
