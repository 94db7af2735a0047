"""
Control change macro subtree.

A ControlChangeMacroList holds a recursive mix of folders, folder links,
macros (CCM), macro links and lookup tables. Folders may also hold free-text
memos, which are plain strings in ``CCMFolder.items`` rather than nodes.

Macro, folder and table IDs share no namespace with each other; duplicates
within one kind are reported by ``dominoxml.validation.check_consistency``.
"""

from collections.abc import Iterator
from typing import Any

from pydantic import Field

from dominoxml.core import (
    ModuleNode,
    SyncMode,
    ValueType,
    decode_children,
    make_element,
    read_choice,
    read_int,
    read_text,
    text_element,
)
from dominoxml.exceptions import EntryBoundsError, FormatValidationError, RangeValidationError
from dominoxml.markup import XmlElement

CCM_ID_MAX = 1300


class Entry(ModuleNode):
    """One label/value row of a value list or lookup table."""

    tag = "Entry"

    label: str
    value: int

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Label": self.label, "Value": self.value}

    @classmethod
    def from_element(cls, element: XmlElement) -> "Entry":
        return cls(
            label=read_text(element, "Label", required=True),
            value=read_int(element, "Value", required=True),
        )


class Value(ModuleNode):
    """
    Parameter description for a macro's value or gate slot.

    The same entity serves both slots; the owning macro picks the emitted
    tag ("Value" or "Gate"). Entries must respect Min and Max when given.
    """

    tag = "Value"

    default: int | None = None
    min: int | None = None
    max: int | None = None
    offset: int | None = None
    name: str | None = None
    type: ValueType | None = None
    table_id: int | None = None
    entries: list[Entry] = Field(default_factory=list)

    def check(self) -> None:
        for entry in self.entries:
            below = self.min is not None and entry.value < self.min
            above = self.max is not None and entry.value > self.max
            if below or above:
                raise EntryBoundsError(self.tag, entry.label, entry.value, self.min, self.max)

    def to_element(self, tag: str = "Value") -> XmlElement:
        """
        Validate and emit this value list under the given tag.

        Params:
            tag: "Value" or "Gate"
        """
        self.check()
        return make_element(tag, self._xml_attributes(), self._xml_children())

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "Default": self.default,
            "Min": self.min,
            "Max": self.max,
            "Offset": self.offset,
            "Name": self.name,
            "Type": self.type,
            "TableID": self.table_id,
        }

    def _xml_children(self) -> list[XmlElement | str]:
        return [entry.to_element() for entry in self.entries]

    @classmethod
    def from_element(cls, element: XmlElement) -> "Value":
        return cls(
            default=read_int(element, "Default"),
            min=read_int(element, "Min"),
            max=read_int(element, "Max"),
            offset=read_int(element, "Offset"),
            name=read_text(element, "Name"),
            type=read_choice(element, "Type", ("Key",)),
            table_id=read_int(element, "TableID"),
            entries=decode_children(element, {"Entry": Entry.from_element}),
        )


class Table(ModuleNode):
    """Lookup table referenced from a Value by TableID."""

    tag = "Table"

    id: int
    entries: list[Entry] = Field(default_factory=list)

    def check(self) -> None:
        if self.id < 0:
            raise RangeValidationError(self.tag, "ID", self.id, minimum=0)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id}

    def _xml_children(self) -> list[XmlElement | str]:
        return [entry.to_element() for entry in self.entries]

    @classmethod
    def from_element(cls, element: XmlElement) -> "Table":
        return cls(
            id=read_int(element, "ID", required=True),
            entries=decode_children(element, {"Entry": Entry.from_element}),
        )


class CCM(ModuleNode):
    """
    A control change macro.

    Params:
        id: Macro ID, 0 to 1300
        name: Display name
        color: Display color as "#RRGGBB"
        sync: Sync mode ("Last" or "LastEachGate")
        value: Value slot description
        gate: Gate slot description
        data: Event data template, e.g. "@CC 7 #VL"
        memo: Free-text note
    """

    tag = "CCM"

    id: int
    name: str
    color: str | None = None
    sync: SyncMode | None = None
    value: Value | None = None
    gate: Value | None = None
    data: str | None = None
    memo: str | None = None

    def check(self) -> None:
        if not 0 <= self.id <= CCM_ID_MAX:
            raise RangeValidationError(self.tag, "ID", self.id, 0, CCM_ID_MAX)
        if self.color is not None and not self.color.startswith("#"):
            raise FormatValidationError(self.tag, "Color", self.color, "must start with #")

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id, "Name": self.name, "Color": self.color, "Sync": self.sync}

    def _xml_children(self) -> list[XmlElement | str]:
        children: list[XmlElement | str] = []
        if self.value is not None:
            children.append(self.value.to_element("Value"))
        if self.gate is not None:
            children.append(self.gate.to_element("Gate"))
        if self.data is not None:
            children.append(text_element("Data", self.data))
        if self.memo is not None:
            children.append(text_element("Memo", self.memo))
        return children

    @classmethod
    def from_element(cls, element: XmlElement) -> "CCM":
        ccm_id = read_int(element, "ID", required=True)
        name = read_text(element, "Name", required=True)
        slots: dict[str, Any] = {}
        for child in element.elements():
            if child.name == "Value":
                slots["value"] = Value.from_element(child)
            elif child.name == "Gate":
                slots["gate"] = Value.from_element(child)
            elif child.name == "Data":
                slots["data"] = child.text()
            elif child.name == "Memo":
                slots["memo"] = child.text()
        return cls(
            id=ccm_id,
            name=name,
            color=read_text(element, "Color"),
            sync=read_choice(element, "Sync", ("Last", "LastEachGate")),
            **slots,
        )


class CCMLink(ModuleNode):
    """Reference to a macro defined elsewhere, with optional preset value/gate."""

    tag = "CCMLink"

    id: int
    value: int | None = None
    gate: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id, "Value": self.value, "Gate": self.gate}

    @classmethod
    def from_element(cls, element: XmlElement) -> "CCMLink":
        return cls(
            id=read_int(element, "ID", required=True),
            value=read_int(element, "Value"),
            gate=read_int(element, "Gate"),
        )


class CCMFolderLink(ModuleNode):
    """Reference to a macro folder defined elsewhere."""

    tag = "FolderLink"

    name: str
    id: int
    value: int | None = None
    gate: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "ID": self.id, "Value": self.value, "Gate": self.gate}

    @classmethod
    def from_element(cls, element: XmlElement) -> "CCMFolderLink":
        return cls(
            name=read_text(element, "Name", required=True),
            id=read_int(element, "ID", required=True),
            value=read_int(element, "Value"),
            gate=read_int(element, "Gate"),
        )


class CCMFolder(ModuleNode):
    """
    A named macro folder; folders nest arbitrarily.

    ``items`` keeps folders, links, macros, tables and memo strings in file
    order.
    """

    tag = "Folder"

    name: str
    id: int | None = None
    items: list["CCMFolder | CCMFolderLink | CCM | CCMLink | Table | str"] = Field(
        default_factory=list
    )

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "ID": self.id}

    def _xml_children(self) -> list[XmlElement | str]:
        return [
            text_element("Memo", item) if isinstance(item, str) else item.to_element()
            for item in self.items
        ]

    def walk(self) -> Iterator[ModuleNode]:
        """Yield this folder, then every node below it depth-first (memos excluded)."""
        yield self
        for item in self.items:
            if isinstance(item, CCMFolder):
                yield from item.walk()
            elif not isinstance(item, str):
                yield item

    @classmethod
    def from_element(cls, element: XmlElement) -> "CCMFolder":
        return cls(
            name=read_text(element, "Name", required=True),
            id=read_int(element, "ID"),
            items=decode_children(element, _FOLDER_DECODERS),
        )


MacroItem = CCMFolder | CCMFolderLink | CCM | CCMLink | Table

_LIST_DECODERS = {
    "Folder": CCMFolder.from_element,
    "FolderLink": CCMFolderLink.from_element,
    "CCM": CCM.from_element,
    "CCMLink": CCMLink.from_element,
    "Table": Table.from_element,
}

_FOLDER_DECODERS = {**_LIST_DECODERS, "Memo": XmlElement.text}


class ControlChangeMacroList(ModuleNode):
    """Top level of the macro subtree."""

    tag = "ControlChangeMacroList"

    items: list[MacroItem] = Field(default_factory=list)

    def _xml_children(self) -> list[XmlElement | str]:
        return [item.to_element() for item in self.items]

    def walk(self) -> Iterator[ModuleNode]:
        """Yield every node of the macro subtree depth-first (memos excluded)."""
        for item in self.items:
            if isinstance(item, CCMFolder):
                yield from item.walk()
            else:
                yield item

    @classmethod
    def from_element(cls, element: XmlElement) -> "ControlChangeMacroList":
        return cls(items=decode_children(element, _LIST_DECODERS))
