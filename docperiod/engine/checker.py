"""Check paragraph units for a closing period."""

from __future__ import annotations

from .paragraph_unit import ParagraphUnit
from .violation import Violation

TERMINATOR = "."
INTRODUCER = ":"


def check_unit(unit: ParagraphUnit) -> Violation | None:
    """Return the violation for ``unit`` or ``None`` when it is fine.

    A unit ending on an inline element needs a period after that element
    unless it is a formatting element whose own text ends with one. A colon
    is accepted only when more content of the same section follows the
    unit.

    Args:
        unit: Paragraph unit to check.

    Returns:
        Violation located where the period must be inserted, if any.
    """

    if unit.trivial or unit.end is None:
        return None

    if unit.last_char == TERMINATOR:
        return None
    if unit.last_char == INTRODUCER and not unit.closing:
        return None

    return Violation(location=unit.end)
