"""Markup node model and reader for documentation comments."""

from .element_node import ElementNode
from .parse_markup import parse_markup
from .span import Span
from .text_node import TextNode
from .types import MarkupNode, NodeTuple

__all__ = [
    "ElementNode",
    "MarkupNode",
    "NodeTuple",
    "Span",
    "TextNode",
    "parse_markup",
]
