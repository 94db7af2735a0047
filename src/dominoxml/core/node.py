"""
Core ModuleNode base class for the module data tree.

Every entity of a module data document derives from ModuleNode and follows
the same three-operation contract:

- ``check()`` raises on the first violated invariant,
- ``to_element()`` checks, then emits the entity's element,
- ``from_element()`` builds a fresh entity from an element, or raises.

Decoding never runs ``check()``: a document can be loaded and inspected even
if it would be refused on the way out.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from dominoxml.markup import AttributeValue, XmlElement

T = TypeVar("T")


def make_element(
    tag: str,
    attributes: Mapping[str, AttributeValue | None] | None = None,
    children: Iterable["XmlElement | str"] = (),
) -> XmlElement:
    """
    Build an element, dropping attributes whose value is None.

    Params:
        tag: Element name
        attributes: Attributes in emission order; None marks an absent value
        children: Child elements and text runs

    Returns:
        A new XmlElement
    """
    return XmlElement(
        name=tag,
        attributes={
            name: value for name, value in (attributes or {}).items() if value is not None
        },
        children=list(children),
    )


def text_element(tag: str, text: str) -> XmlElement:
    """Build an element whose only content is a text run (Memo, Data)."""
    return XmlElement(name=tag, children=[text] if text else [])


def decode_children(
    element: XmlElement, decoders: Mapping[str, Callable[[XmlElement], T]]
) -> list[T]:
    """
    Decode element children through a tag-to-decoder mapping.

    Children whose tag has no decoder are skipped, as are text runs.

    Params:
        element: Parent element
        decoders: Decoder per accepted child tag

    Returns:
        Decoded children in document order
    """
    return [
        decoders[child.name](child)
        for child in element.elements()
        if child.name in decoders
    ]


class ModuleNode(BaseModel):
    """
    Base class for all module data node types.

    Subclasses set ``tag`` and override ``_xml_attributes`` (ordered, None for
    absent values) and ``_xml_children``; the base class owns the
    check-then-emit sequence. Every concrete node must also override
    ``from_element``: the base version only raises NotImplementedError.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    tag: ClassVar[str]

    def check(self) -> None:
        """Raise a ModuleValidationError if an invariant is violated."""

    def to_element(self) -> XmlElement:
        """
        Validate this node and emit its element.

        Returns:
            The element for this node and its whole subtree

        Raises:
            ModuleValidationError: If this node or a descendant is invalid
        """
        self.check()
        return make_element(self.tag, self._xml_attributes(), self._xml_children())

    def _xml_attributes(self) -> dict[str, Any]:
        return {}

    def _xml_children(self) -> list["XmlElement | str"]:
        return []

    @classmethod
    def from_element(cls, element: XmlElement) -> "ModuleNode":
        """
        Build a node from its element. Overridden by every concrete node.

        Raises:
            DecodeError: If a required attribute or child is missing or malformed
        """
        raise NotImplementedError(f"{cls.__name__} does not implement from_element")
