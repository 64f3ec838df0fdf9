"""Resolve ``<include>`` references against XML documents."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, Tuple

from attrs import define, field
from lxml import etree

from docperiod.engine.references import (
    ReferenceLocator,
    Resolution,
    Resolved,
    Unresolved,
)
from docperiod.markup import ElementNode, Span, TextNode
from docperiod.markup.types import ElementList, MarkupNode

logger = logging.getLogger(__name__)

# Types for cache storage.
CacheEntry = Tuple[float, "etree._Element"]
CacheStore = Dict[Path, CacheEntry]

# Global in-memory cache of parsed documents and its time-to-live in seconds.
_CACHE: CacheStore = {}
_TTL_SECONDS = 60

# Included documents never pull in entities or DTDs from elsewhere.
_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)

# Resolved content is only checked as a whole, so nodes taken from an
# external document share this placeholder span.
_NO_SPAN = Span(0, 0)


def parse_document(data: str | bytes) -> "etree._Element":
    """Parse an external XML document.

    Args:
        data: Document content. Text is encoded as UTF-8 first so that an
            XML declaration naming an encoding is accepted.

    Returns:
        Root element of the document.

    Throws:
        etree.XMLSyntaxError: If the document is not well formed.
    """

    if isinstance(data, str):
        data = data.encode("utf-8")
    return etree.fromstring(data, _PARSER)


def _text_node(content: str) -> TextNode:
    return TextNode(content, Span(0, len(content)))


def to_markup(element: "etree._Element") -> ElementNode:
    """Convert an lxml element into a markup tree.

    Comments and processing instructions are dropped; their tails are kept.
    An element without text or children counts as self-closing, since the
    parsed tree does not keep how it was written.
    """

    children: list[MarkupNode] = []
    if element.text:
        children.append(_text_node(element.text))

    for child in element:
        if isinstance(child.tag, str):
            children.append(to_markup(child))
        if child.tail:
            children.append(_text_node(child.tail))

    return ElementNode(
        tag=etree.QName(element).localname,
        span=_NO_SPAN,
        attributes={str(k): str(v) for k, v in element.attrib.items()},
        children=children,
        is_self_closing=not children,
    )


def select(root: "etree._Element", path: str) -> ElementList:
    """Return the elements of a document matched by the XPath ``path``.

    Args:
        root: Root element of the document.
        path: XPath expression, for example
            ``/doc/members/member[@name='M:Foo']/*``.

    Returns:
        Matched elements converted to markup, in document order. Results
        that are not elements (attributes, text, numbers) are ignored.

    Throws:
        etree.XPathError: If the expression is invalid.
    """

    result = root.xpath(path)
    if not isinstance(result, list):
        return []
    return [
        to_markup(item)
        for item in result
        if isinstance(item, etree._Element) and isinstance(item.tag, str)
    ]


def _select_resolution(
    root: "etree._Element", locator: ReferenceLocator
) -> Resolution:
    """Apply the locator's selector to a parsed document."""

    if not locator.path:
        return Unresolved("include without path")

    try:
        selected = select(root, locator.path)
    except etree.XPathError as exc:
        return Unresolved(f"{locator.path!r}: {exc}")

    if not selected:
        return Unresolved(f"{locator.path!r} matched nothing")
    return Resolved(selected)


def resolve_document(text: str, locator: ReferenceLocator) -> Resolution:
    """Resolve ``locator`` against the XML document ``text``.

    Args:
        text: Content of the external document.
        locator: Locator of an include element.

    Returns:
        ``Resolved`` with the selected elements, or ``Unresolved`` when the
        document is malformed or the selector matches nothing.
    """

    try:
        root = parse_document(text)
    except etree.XMLSyntaxError as exc:
        return Unresolved(f"{locator.file}: {exc}")
    return _select_resolution(root, locator)


@define(slots=True)
class InMemoryResolver:
    """Resolve includes against documents held in a mapping.

    Attributes:
        documents: XML text keyed by the ``file`` attribute value.
    """

    documents: dict[str, str] = field(factory=dict)

    def resolve(self, locator: ReferenceLocator) -> Resolution:
        if locator.kind != "include" or locator.file is None:
            return Unresolved(f"<{locator.kind}> is not resolved")

        text = self.documents.get(locator.file)
        if text is None:
            return Unresolved(f"{locator.file}: not found")
        return resolve_document(text, locator)


@define(slots=True)
class FileReferenceResolver:
    """Resolve includes against XML files on disk.

    Attributes:
        base_dir: Directory relative ``file`` attributes are resolved from.
    """

    base_dir: Path = field(converter=Path)

    def resolve(self, locator: ReferenceLocator) -> Resolution:
        if locator.kind != "include" or locator.file is None:
            return Unresolved(f"<{locator.kind}> is not resolved")

        path = self.base_dir / locator.file
        try:
            root = load_document_file(path)
        except (OSError, etree.XMLSyntaxError) as exc:
            logger.debug(f"Cannot load {path}: {exc}")
            return Unresolved(f"{path}: {exc}")

        return _select_resolution(root, locator)


def load_document_file(path: Path) -> "etree._Element":
    """Return the parsed document at ``path`` using a timed cache.

    Args:
        path: Location of the XML document.

    Returns:
        Root element of the document.

    Throws:
        OSError: If the file cannot be read.
        etree.XMLSyntaxError: If the file is not well formed.
    """
    now = time.time()
    key = path.resolve()
    cached = _CACHE.get(key)

    # Return cached entry when still valid.
    if cached and now - cached[0] < _TTL_SECONDS:
        return cached[1]

    # Bytes keep the document's own encoding declaration and BOM handling.
    root = parse_document(path.read_bytes())

    # Store fresh entry in the cache.
    _CACHE[key] = (now, root)
    return root
