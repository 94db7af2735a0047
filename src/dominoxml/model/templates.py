"""
Template subtree: reusable event snippets inserted from the sequencer's
template menu, grouped in nestable folders.
"""

from typing import Any

from pydantic import Field

from dominoxml.core import (
    ModuleNode,
    ProgramMode,
    decode_children,
    read_choice,
    read_int,
    read_text,
)
from dominoxml.exceptions import RangeValidationError
from dominoxml.markup import XmlElement


class Memo(ModuleNode):
    """Free-text note inside a template."""

    tag = "Memo"

    text: str = ""

    def _xml_children(self) -> list[XmlElement | str]:
        return [self.text] if self.text else []

    @classmethod
    def from_element(cls, element: XmlElement) -> "Memo":
        return cls(text=element.text())


class TemplateCC(ModuleNode):
    """Control change event inserted by a template (ID refers to a CCM)."""

    tag = "CC"

    id: int
    value: int | None = None
    gate: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id, "Value": self.value, "Gate": self.gate}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TemplateCC":
        return cls(
            id=read_int(element, "ID", required=True),
            value=read_int(element, "Value"),
            gate=read_int(element, "Gate"),
        )


class TemplatePC(ModuleNode):
    """Program change event inserted by a template."""

    tag = "PC"

    pc: int | None = None
    msb: int | None = None
    lsb: int | None = None
    mode: ProgramMode | None = None

    def check(self) -> None:
        if self.pc is not None and not 1 <= self.pc <= 128:
            raise RangeValidationError(self.tag, "PC", self.pc, 1, 128)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"PC": self.pc, "MSB": self.msb, "LSB": self.lsb, "Mode": self.mode}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TemplatePC":
        return cls(
            pc=read_int(element, "PC"),
            msb=read_int(element, "MSB"),
            lsb=read_int(element, "LSB"),
            mode=read_choice(element, "Mode", ("Drumset", "Auto")),
        )


class TemplateComment(ModuleNode):
    """Comment event inserted by a template."""

    tag = "Comment"

    text: str | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Text": self.text}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TemplateComment":
        return cls(text=read_text(element, "Text"))


TemplateEvent = Memo | TemplateCC | TemplatePC | TemplateComment

_TEMPLATE_DECODERS = {
    "Memo": Memo.from_element,
    "CC": TemplateCC.from_element,
    "PC": TemplatePC.from_element,
    "Comment": TemplateComment.from_element,
}


class Template(ModuleNode):
    """A named, optionally numbered sequence of template events."""

    tag = "Template"

    name: str
    id: int | None = None
    events: list[TemplateEvent] = Field(default_factory=list)

    def check(self) -> None:
        if self.id is not None and self.id < 0:
            raise RangeValidationError(self.tag, "ID", self.id, minimum=0)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id, "Name": self.name}

    def _xml_children(self) -> list[XmlElement | str]:
        return [event.to_element() for event in self.events]

    @classmethod
    def from_element(cls, element: XmlElement) -> "Template":
        return cls(
            name=read_text(element, "Name", required=True),
            id=read_int(element, "ID"),
            events=decode_children(element, _TEMPLATE_DECODERS),
        )


class TemplateFolder(ModuleNode):
    """A named folder of templates and further folders."""

    tag = "Folder"

    name: str
    items: list["TemplateFolder | Template"] = Field(default_factory=list)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name}

    def _xml_children(self) -> list[XmlElement | str]:
        return [item.to_element() for item in self.items]

    @classmethod
    def from_element(cls, element: XmlElement) -> "TemplateFolder":
        return cls(
            name=read_text(element, "Name", required=True),
            items=decode_children(element, _TEMPLATE_LIST_DECODERS),
        )


_TEMPLATE_LIST_DECODERS = {
    "Folder": TemplateFolder.from_element,
    "Template": Template.from_element,
}


class TemplateList(ModuleNode):
    """Top level of the template subtree."""

    tag = "TemplateList"

    items: list[TemplateFolder | Template] = Field(default_factory=list)

    def _xml_children(self) -> list[XmlElement | str]:
        return [item.to_element() for item in self.items]

    @classmethod
    def from_element(cls, element: XmlElement) -> "TemplateList":
        return cls(items=decode_children(element, _TEMPLATE_LIST_DECODERS))
