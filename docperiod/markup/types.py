"""Common type aliases for markup structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .element_node import ElementNode  # noqa: F401
    from .text_node import TextNode  # noqa: F401


MarkupNode = Union["TextNode", "ElementNode"]
NodeTuple = tuple[MarkupNode, ...]
ElementList = list["ElementNode"]
AttributeMap = dict[str, str]
