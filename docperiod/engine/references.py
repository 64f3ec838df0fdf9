"""Check content pulled in through include and inheritdoc elements."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Union

from attrs import define, field

from ..markup import ElementNode
from ..markup.types import NodeTuple
from .violation import Violation

logger = logging.getLogger(__name__)

# Nesting limit for references found inside resolved content.
MAX_REFERENCE_DEPTH = 8


@define(slots=True, frozen=True)
class ReferenceLocator:
    """Identifies the content a reference element stands for.

    Attributes:
        kind: Tag of the reference element, ``include`` or ``inheritdoc``.
        file: External document named by an include.
        path: Selector of the content inside ``file``.
        cref: Member an inheritdoc element inherits from, if given.
    """

    kind: str
    file: str | None = None
    path: str | None = None
    cref: str | None = None

    @classmethod
    def from_element(cls, element: ElementNode) -> "ReferenceLocator":
        return cls(
            kind=element.tag,
            file=element.get("file"),
            path=element.get("path"),
            cref=element.get("cref"),
        )


@define(slots=True, frozen=True)
class Resolved:
    """Successful resolution.

    Attributes:
        nodes: Substitute top-level markup for the reference.
    """

    nodes: NodeTuple = field(converter=tuple)


@define(slots=True, frozen=True)
class Unresolved:
    """Failed resolution; the reference is not checked."""

    reason: str = ""


Resolution = Union[Resolved, Unresolved]


class ReferenceResolver(Protocol):
    """Source of substitute content for reference elements."""

    def resolve(self, locator: ReferenceLocator) -> Resolution:
        """Return the content ``locator`` refers to."""


# Analysis entry point used for resolved content: (nodes, depth).
Analyzer = Callable[[NodeTuple, int], list[Violation]]


def check_reference(
    element: ElementNode,
    resolver: ReferenceResolver | None,
    analyze: Analyzer,
    depth: int = 0,
) -> Violation | None:
    """Check the content behind a reference element.

    Any violation inside the resolved content is reported once, at the
    reference element, and cannot be fixed locally.

    Args:
        element: The ``include`` or ``inheritdoc`` element.
        resolver: Resolver for the locator, or ``None`` to skip references.
        analyze: Function checking top-level nodes at a nesting depth.
        depth: Nesting depth of ``element`` in resolved content.

    Returns:
        A single non-fixable violation, or ``None``.
    """

    locator = ReferenceLocator.from_element(element)

    if resolver is None:
        resolution: Resolution = Unresolved("no resolver configured")
    elif depth >= MAX_REFERENCE_DEPTH:
        resolution = Unresolved("reference nesting too deep")
    else:
        resolution = resolver.resolve(locator)

    if isinstance(resolution, Unresolved):
        logger.debug(f"Skipping <{element.tag}>: {resolution.reason}")
        return None

    if not analyze(resolution.nodes, depth + 1):
        return None

    return Violation(
        location=element.span.start, fixable=False, report_span=element.span
    )
