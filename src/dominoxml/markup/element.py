"""
Generic attributed element tree.

The document model never touches lxml directly: the reader converts lxml's
tree into these plain data classes and the writer converts them back. An
element keeps its attributes in insertion order, which is the order they are
written out in.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

AttributeValue = str | int | float


@dataclass
class XmlElement:
    """
    A named element with ordered attributes and ordered children.

    Params:
        name: Element tag
        attributes: Attribute values, coerced to int/float when parsed with coercion
        children: Child elements and raw text runs, in document order
        raw_attributes: Attribute text exactly as it appeared in the markup
            (empty for elements built in code)
    """

    name: str
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list["XmlElement | str"] = field(default_factory=list)
    raw_attributes: dict[str, str] = field(default_factory=dict)

    def elements(self) -> Iterator["XmlElement"]:
        """Iterate over element children, skipping text."""
        for child in self.children:
            if isinstance(child, XmlElement):
                yield child

    def text(self) -> str:
        """Return the concatenated text children (empty string if none)."""
        return "".join(child for child in self.children if isinstance(child, str))

    def find_all(self, name: str) -> list["XmlElement"]:
        """Return all element children with the given tag."""
        return [child for child in self.elements() if child.name == name]


@dataclass
class XmlDocument:
    """
    A parsed document: the XML declaration pseudo-attributes and the root.

    Params:
        declaration: Pseudo-attributes of ``<?xml ...?>``, or None when absent
        root: The single root element, or None for an empty document
    """

    declaration: dict[str, str] | None = None
    root: XmlElement | None = None
