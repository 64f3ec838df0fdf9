"""Classification of documentation markup elements."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum

from attrs import define, evolve, field

from ..markup import ElementNode


class ElementClass(Enum):
    """Role an element plays in sentence segmentation."""

    INLINE = "inline"
    BLOCK = "block"
    PARAGRAPH_SEPARATOR = "paragraph_separator"
    EXEMPT = "exempt"
    OPAQUE = "opaque"
    REFERENCE = "reference"


# Inline elements whose own text ends the sentence they close.
FORMATTING_TAGS = frozenset({"b", "i", "u", "em", "strong"})
INLINE_TAGS = frozenset(
    {"see", "c", "paramref", "typeparamref", "a"} | FORMATTING_TAGS
)
BLOCK_TAGS = frozenset(
    {
        "summary",
        "remarks",
        "example",
        "returns",
        "value",
        "typeparam",
        "param",
        "para",
        "note",
        "exception",
        "permission",
    }
)
SEPARATOR_TAGS = frozenset({"para"})
EXEMPT_TAGS = frozenset(
    {
        "seealso",
        "list",
        "listheader",
        "item",
        "term",
        "description",
        "filterpriority",
        "completionlist",
    }
)
OPAQUE_TAGS = frozenset({"code"})
REFERENCE_TAGS = frozenset({"include", "inheritdoc"})

# Reference elements missing any of these attributes cannot be resolved.
REQUIRED_REFERENCE_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "include": ("file", "path"),
}


@define(slots=True, frozen=True)
class TagTable:
    """Tag names known to the classifier, grouped by element class.

    Attributes:
        inline: Elements that flow inside a sentence.
        block: Elements whose content must end with a period.
        separators: Elements acting as paragraph breaks when self-closing.
        exempt: Elements never checked.
        opaque: Elements holding non-prose content.
        references: Elements deferring content to another source.
        formatting: Inline elements whose trailing text is checked like
            the text of the unit.
    """

    inline: frozenset[str] = field(default=INLINE_TAGS, converter=frozenset)
    block: frozenset[str] = field(default=BLOCK_TAGS, converter=frozenset)
    separators: frozenset[str] = field(
        default=SEPARATOR_TAGS, converter=frozenset
    )
    exempt: frozenset[str] = field(default=EXEMPT_TAGS, converter=frozenset)
    opaque: frozenset[str] = field(default=OPAQUE_TAGS, converter=frozenset)
    references: frozenset[str] = field(
        default=REFERENCE_TAGS, converter=frozenset
    )
    formatting: frozenset[str] = field(
        default=FORMATTING_TAGS, converter=frozenset
    )

    def extend(
        self,
        inline: Iterable[str] = (),
        exempt: Iterable[str] = (),
        opaque: Iterable[str] = (),
    ) -> "TagTable":
        """Return a copy with additional inline, exempt and opaque tags."""

        return evolve(
            self,
            inline=self.inline | set(inline),
            exempt=self.exempt | set(exempt),
            opaque=self.opaque | set(opaque),
        )


DEFAULT_TAGS = TagTable()


def classify(
    tag: str,
    attributes: Mapping[str, str],
    is_self_closing: bool,
    tags: TagTable = DEFAULT_TAGS,
) -> ElementClass:
    """Return the element class for a tag.

    The mapping is total. Unknown tags are treated as blocks so that prose
    in unfamiliar elements is still checked, except when self-closing, where
    they cannot hold prose and behave like inline elements.

    Args:
        tag: Element name.
        attributes: Attributes of the element.
        is_self_closing: Whether the element was written as ``<tag/>``.
        tags: Tag tables to classify against.

    Returns:
        The element class.
    """

    if is_self_closing and tag in tags.separators:
        return ElementClass.PARAGRAPH_SEPARATOR

    if tag in tags.references:
        required = REQUIRED_REFERENCE_ATTRIBUTES.get(tag, ())
        # A reference without a locator has nothing to resolve or check.
        if any(name not in attributes for name in required):
            return ElementClass.EXEMPT
        return ElementClass.REFERENCE

    if tag in tags.opaque:
        return ElementClass.OPAQUE
    if tag in tags.exempt:
        return ElementClass.EXEMPT
    if tag in tags.inline:
        return ElementClass.INLINE
    if tag in tags.block:
        return ElementClass.BLOCK

    return ElementClass.INLINE if is_self_closing else ElementClass.BLOCK


def classify_element(
    element: ElementNode, tags: TagTable = DEFAULT_TAGS
) -> ElementClass:
    """Classify a parsed element."""

    return classify(
        element.tag, element.attributes, element.is_self_closing, tags
    )
