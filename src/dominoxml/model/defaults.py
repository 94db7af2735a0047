"""
Single-attribute default settings stored at the top of a module data file.
"""

from typing import Any

from dominoxml.core import ModuleNode, read_int, read_text
from dominoxml.markup import XmlElement


class RhythmTrackDefault(ModuleNode):
    """Default gate time for notes entered on rhythm tracks."""

    tag = "RhythmTrackDefault"

    gate: int

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Gate": self.gate}

    @classmethod
    def from_element(cls, element: XmlElement) -> "RhythmTrackDefault":
        return cls(gate=read_int(element, "Gate", required=True))


class ExclusiveEventDefault(ModuleNode):
    """Default payload for new system exclusive events."""

    tag = "ExclusiveEventDefault"

    data: str

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Data": self.data}

    @classmethod
    def from_element(cls, element: XmlElement) -> "ExclusiveEventDefault":
        return cls(data=read_text(element, "Data", required=True))


class ProgramChangeEventPropertyDlg(ModuleNode):
    """Program change dialog settings (auto preview delay in milliseconds)."""

    tag = "ProgramChangeEventPropertyDlg"

    auto_preview_delay: int

    def _xml_attributes(self) -> dict[str, Any]:
        return {"AutoPreviewDelay": self.auto_preview_delay}

    @classmethod
    def from_element(cls, element: XmlElement) -> "ProgramChangeEventPropertyDlg":
        return cls(auto_preview_delay=read_int(element, "AutoPreviewDelay", required=True))


class ControlChangeEventDefault(ModuleNode):
    """Macro ID preselected for new control change events."""

    tag = "ControlChangeEventDefault"

    id: int

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id}

    @classmethod
    def from_element(cls, element: XmlElement) -> "ControlChangeEventDefault":
        return cls(id=read_int(element, "ID", required=True))
