"""Text edits that insert missing periods."""

from __future__ import annotations

from collections.abc import Iterable

from attrs import define

from .checker import TERMINATOR
from .violation import Violation


@define(slots=True, frozen=True)
class TextEdit:
    """Insertion of ``text`` at ``offset``."""

    offset: int
    text: str = TERMINATOR


def synthesize_fixes(violations: Iterable[Violation]) -> list[TextEdit]:
    """Return one period insertion per fixable violation.

    Args:
        violations: Violations of one text.

    Returns:
        Edits ordered by offset, at most one per offset.
    """

    offsets = {v.location for v in violations if v.fixable}
    return [TextEdit(offset) for offset in sorted(offsets)]


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply insertions to ``text``.

    Args:
        text: Text the edit offsets refer to.
        edits: Edits to apply.

    Returns:
        The patched text.
    """

    # Apply from the end so that earlier offsets stay valid.
    for edit in sorted(edits, key=lambda e: e.offset, reverse=True):
        text = text[: edit.offset] + edit.text + text[edit.offset :]
    return text
