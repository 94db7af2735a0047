"""
ModuleData, the root element of a module data file.
"""

from collections.abc import Iterator
from typing import Any

from inflection import underscore

from dominoxml.core import ModuleNode, read_int, read_text
from dominoxml.exceptions import ListKindError
from dominoxml.markup import XmlElement
from dominoxml.model.default_data import DefaultData
from dominoxml.model.defaults import (
    ControlChangeEventDefault,
    ExclusiveEventDefault,
    ProgramChangeEventPropertyDlg,
    RhythmTrackDefault,
)
from dominoxml.model.instruments import MapList
from dominoxml.model.macros import ControlChangeMacroList
from dominoxml.model.templates import TemplateList
from dominoxml.validation.consistency import check_consistency

# Child tag -> node type, in emission order. The field holding each sub-tree
# is the underscored tag (e.g. "drum_set_list").
SUBTREE_TYPES: dict[str, type[ModuleNode]] = {
    "RhythmTrackDefault": RhythmTrackDefault,
    "ExclusiveEventDefault": ExclusiveEventDefault,
    "ProgramChangeEventPropertyDlg": ProgramChangeEventPropertyDlg,
    "ControlChangeEventDefault": ControlChangeEventDefault,
    "InstrumentList": MapList,
    "DrumSetList": MapList,
    "ControlChangeMacroList": ControlChangeMacroList,
    "TemplateList": TemplateList,
    "DefaultData": DefaultData,
}


class ModuleData(ModuleNode):
    """
    A complete module definition: metadata plus up to nine sections.

    Encoding runs ``check_consistency`` over the macro tree after the element
    is built; its findings are logged and never stop the encode.
    """

    tag = "ModuleData"

    name: str
    folder: str | None = None
    priority: int | None = None
    file_creator: str | None = None
    file_version: str | None = None
    website: str | None = None

    rhythm_track_default: RhythmTrackDefault | None = None
    exclusive_event_default: ExclusiveEventDefault | None = None
    program_change_event_property_dlg: ProgramChangeEventPropertyDlg | None = None
    control_change_event_default: ControlChangeEventDefault | None = None
    instrument_list: MapList | None = None
    drum_set_list: MapList | None = None
    control_change_macro_list: ControlChangeMacroList | None = None
    template_list: TemplateList | None = None
    default_data: DefaultData | None = None

    def check(self) -> None:
        for tag in ("InstrumentList", "DrumSetList"):
            slot = underscore(tag)
            map_list = getattr(self, slot)
            if map_list is not None and map_list.kind != tag:
                raise ListKindError(slot, map_list.kind, tag)

    def to_element(self) -> XmlElement:
        element = super().to_element()
        check_consistency(self)
        return element

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Folder": self.folder,
            "Priority": self.priority,
            "FileCreator": self.file_creator,
            "FileVersion": self.file_version,
            "WebSite": self.website,
        }

    def _xml_children(self) -> list[XmlElement | str]:
        children: list[XmlElement | str] = []
        for tag in SUBTREE_TYPES:
            subtree = getattr(self, underscore(tag))
            if subtree is not None:
                children.append(subtree.to_element())
        return children

    def iter_macro_nodes(self) -> Iterator[ModuleNode]:
        """Yield every folder, link, macro and table of the macro list depth-first."""
        if self.control_change_macro_list is not None:
            yield from self.control_change_macro_list.walk()

    @classmethod
    def from_element(cls, element: XmlElement) -> "ModuleData":
        """
        Build the module from its root element.

        Child elements are dispatched by tag; unknown tags are skipped and a
        repeated tag keeps its last occurrence.
        """
        subtrees: dict[str, ModuleNode] = {}
        for child in element.elements():
            node_type = SUBTREE_TYPES.get(child.name)
            if node_type is not None:
                subtrees[underscore(child.name)] = node_type.from_element(child)

        return cls(
            name=read_text(element, "Name", required=True),
            folder=read_text(element, "Folder"),
            priority=read_int(element, "Priority"),
            file_creator=read_text(element, "FileCreator"),
            file_version=read_text(element, "FileVersion"),
            website=read_text(element, "WebSite"),
            **subtrees,
        )
