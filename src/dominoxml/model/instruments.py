"""
Instrument and drum set maps.

An InstrumentList or DrumSetList holds named maps; each map lists program
changes, each program change lists the banks that select it, and drum set
banks additionally name the tone on every key.

Both lists are the same MapList entity: its ``kind`` decides the emitted tag
and whether Tone children are read.
"""

from typing import Any

from pydantic import Field

from dominoxml.core import MapListKind, ModuleNode, decode_children, read_int, read_text
from dominoxml.exceptions import EmptyBankListError, RangeValidationError
from dominoxml.markup import XmlElement


class Tone(ModuleNode):
    """Name of the drum sound on one key."""

    tag = "Tone"

    name: str
    key: int

    def check(self) -> None:
        if not 0 <= self.key <= 127:
            raise RangeValidationError(self.tag, "Key", self.key, 0, 127)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "Key": self.key}

    @classmethod
    def from_element(cls, element: XmlElement) -> "Tone":
        return cls(
            name=read_text(element, "Name", required=True),
            key=read_int(element, "Key", required=True),
        )


class Bank(ModuleNode):
    """
    Bank select pair for a program change.

    Banks of a drum set list carry the tone names of the drum kit; instrument
    banks leave ``tones`` empty.
    """

    tag = "Bank"

    name: str
    lsb: int | None = None
    msb: int | None = None
    tones: list[Tone] = Field(default_factory=list)

    def check(self) -> None:
        if self.lsb is not None and not 0 <= self.lsb <= 255:
            raise RangeValidationError(self.tag, "LSB", self.lsb, 0, 255)
        if self.msb is not None and not 0 <= self.msb <= 255:
            raise RangeValidationError(self.tag, "MSB", self.msb, 0, 255)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "LSB": self.lsb, "MSB": self.msb}

    def _xml_children(self) -> list[XmlElement | str]:
        return [tone.to_element() for tone in self.tones]

    @classmethod
    def from_element(cls, element: XmlElement, with_tones: bool = False) -> "Bank":
        """
        Build a bank from its element.

        Params:
            element: The Bank element
            with_tones: Read Tone children (drum set banks only)
        """
        tones = decode_children(element, {"Tone": Tone.from_element}) if with_tones else []
        return cls(
            name=read_text(element, "Name", required=True),
            lsb=read_int(element, "LSB"),
            msb=read_int(element, "MSB"),
            tones=tones,
        )


class ProgramChange(ModuleNode):
    """A program number and the banks available for it."""

    tag = "PC"

    name: str
    pc: int
    banks: list[Bank] = Field(min_length=1)

    def check(self) -> None:
        if not 1 <= self.pc <= 128:
            raise RangeValidationError(self.tag, "PC", self.pc, 1, 128)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "PC": self.pc}

    def _xml_children(self) -> list[XmlElement | str]:
        return [bank.to_element() for bank in self.banks]

    @classmethod
    def from_element(cls, element: XmlElement, with_tones: bool = False) -> "ProgramChange":
        name = read_text(element, "Name", required=True)
        pc = read_int(element, "PC", required=True)
        banks = decode_children(
            element, {"Bank": lambda e: Bank.from_element(e, with_tones=with_tones)}
        )
        if not banks:
            raise EmptyBankListError(name)
        return cls(name=name, pc=pc, banks=banks)


class InstrumentMap(ModuleNode):
    """A named group of program changes (one synthesizer mode, for example)."""

    tag = "Map"

    name: str
    pcs: list[ProgramChange] = Field(default_factory=list)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name}

    def _xml_children(self) -> list[XmlElement | str]:
        return [pc.to_element() for pc in self.pcs]

    @classmethod
    def from_element(cls, element: XmlElement, with_tones: bool = False) -> "InstrumentMap":
        return cls(
            name=read_text(element, "Name", required=True),
            pcs=decode_children(
                element, {"PC": lambda e: ProgramChange.from_element(e, with_tones=with_tones)}
            ),
        )


class MapList(ModuleNode):
    """
    Ordered list of maps, emitted as InstrumentList or DrumSetList.

    Params:
        kind: Which list this is; also the emitted tag
        maps: The maps, in file order
    """

    kind: MapListKind
    maps: list[InstrumentMap] = Field(default_factory=list)

    @property
    def tag(self) -> str:
        return self.kind

    @property
    def is_drum_set(self) -> bool:
        return self.kind == "DrumSetList"

    def _xml_children(self) -> list[XmlElement | str]:
        return [instrument_map.to_element() for instrument_map in self.maps]

    @classmethod
    def from_element(cls, element: XmlElement) -> "MapList":
        with_tones = element.name == "DrumSetList"
        return cls(
            kind="DrumSetList" if with_tones else "InstrumentList",
            maps=decode_children(
                element, {"Map": lambda e: InstrumentMap.from_element(e, with_tones=with_tones)}
            ),
        )


def instrument_list(maps: list[InstrumentMap] | None = None) -> MapList:
    """Create an InstrumentList."""
    return MapList(kind="InstrumentList", maps=maps or [])


def drum_set_list(maps: list[InstrumentMap] | None = None) -> MapList:
    """Create a DrumSetList."""
    return MapList(kind="DrumSetList", maps=maps or [])
