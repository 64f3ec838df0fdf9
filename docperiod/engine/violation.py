"""Missing terminator found in documentation text."""

from __future__ import annotations

from attrs import Factory, define, field

from ..markup import Span

MESSAGE_KEY = "documentation-text-must-end-with-period"


@define(slots=True, frozen=True)
class Violation:
    """Location where documentation text lacks its closing period.

    Attributes:
        location: Offset where the period belongs.
        fixable: Whether inserting a period at ``location`` repairs it.
            ``False`` for content pulled in through a reference.
        report_span: Range to highlight; the zero-width range at
            ``location`` unless the violation stands for a reference.
        message_key: Identifier of the diagnostic message.
    """

    location: int
    fixable: bool = True
    report_span: Span = field(
        default=Factory(
            lambda self: Span(self.location, self.location), takes_self=True
        )
    )
    message_key: str = MESSAGE_KEY
