"""
Default song data applied when a new song is created with this module.

DefaultData holds measure marks and tracks. A track is a time-ordered event
stream: the order of ``Track.events`` is meaningful and is kept exactly as
read.
"""

import re
from typing import Any

from pydantic import Field

from dominoxml.core import (
    ModuleNode,
    ProgramMode,
    TrackMode,
    decode_children,
    read_choice,
    read_int,
    read_number,
    read_text,
)
from dominoxml.exceptions import FormatValidationError, RangeValidationError
from dominoxml.markup import XmlElement

_TIME_SIGNATURE = re.compile(r"[0-9]+(?:/[0-9]+)*")


class Mark(ModuleNode):
    """Named marker at the start of a measure."""

    tag = "Mark"

    meas: int
    name: str | None = None

    def check(self) -> None:
        if self.meas < 1:
            raise RangeValidationError(self.tag, "Meas", self.meas, minimum=1)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Meas": self.meas, "Name": self.name}

    @classmethod
    def from_element(cls, element: XmlElement) -> "Mark":
        return cls(
            meas=read_int(element, "Meas", required=True),
            name=read_text(element, "Name"),
        )


class TrackMark(ModuleNode):
    """Marker event inside a track."""

    tag = "Mark"

    name: str | None = None
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "Tick": self.tick, "Step": self.step}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TrackMark":
        return cls(
            name=read_text(element, "Name"),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class Tempo(ModuleNode):
    """
    Tempo change in beats per minute.

    The value is always written with three decimals, so a round trip
    quantizes it.
    """

    tag = "Tempo"

    tempo: float
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Tempo": f"{self.tempo:.3f}", "Tick": self.tick, "Step": self.step}

    @classmethod
    def from_element(cls, element: XmlElement) -> "Tempo":
        return cls(
            tempo=read_number(element, "Tempo", required=True),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class TimeSignature(ModuleNode):
    """Time signature change such as "4/4"."""

    tag = "TimeSignature"

    time_signature: str
    tick: int | None = None
    step: int | None = None

    def check(self) -> None:
        if not _TIME_SIGNATURE.fullmatch(self.time_signature):
            raise FormatValidationError(
                self.tag,
                "TimeSignature",
                self.time_signature,
                "must be numbers separated by '/'",
            )

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "TimeSignature": self.time_signature,
            "Tick": self.tick,
            "Step": self.step,
        }

    @classmethod
    def from_element(cls, element: XmlElement) -> "TimeSignature":
        return cls(
            time_signature=read_text(element, "TimeSignature", required=True),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class KeySignature(ModuleNode):
    """Key signature change such as "C" or "Am"."""

    tag = "KeySignature"

    key_signature: str
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "KeySignature": self.key_signature,
            "Tick": self.tick,
            "Step": self.step,
        }

    @classmethod
    def from_element(cls, element: XmlElement) -> "KeySignature":
        return cls(
            key_signature=read_text(element, "KeySignature", required=True),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class TrackCC(ModuleNode):
    """Control change event; ID refers to a CCM."""

    tag = "CC"

    id: int
    value: int | None = None
    gate: int | None = None
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "Value": self.value,
            "Gate": self.gate,
            "Tick": self.tick,
            "Step": self.step,
        }

    @classmethod
    def from_element(cls, element: XmlElement) -> "TrackCC":
        return cls(
            id=read_int(element, "ID", required=True),
            value=read_int(element, "Value"),
            gate=read_int(element, "Gate"),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class TrackPC(ModuleNode):
    """Program change event."""

    tag = "PC"

    pc: int | None = None
    msb: int | None = None
    lsb: int | None = None
    mode: ProgramMode | None = None
    tick: int | None = None
    step: int | None = None

    def check(self) -> None:
        if self.pc is not None and not 1 <= self.pc <= 128:
            raise RangeValidationError(self.tag, "PC", self.pc, 1, 128)

    def _xml_attributes(self) -> dict[str, Any]:
        return {
            "PC": self.pc,
            "MSB": self.msb,
            "LSB": self.lsb,
            "Mode": self.mode,
            "Tick": self.tick,
            "Step": self.step,
        }

    @classmethod
    def from_element(cls, element: XmlElement) -> "TrackPC":
        return cls(
            pc=read_int(element, "PC"),
            msb=read_int(element, "MSB"),
            lsb=read_int(element, "LSB"),
            mode=read_choice(element, "Mode", ("Drumset", "Auto")),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class TrackComment(ModuleNode):
    tag = "Comment"

    text: str | None = None
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Text": self.text, "Tick": self.tick, "Step": self.step}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TrackComment":
        return cls(
            text=read_text(element, "Text"),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class TrackTemplate(ModuleNode):
    """Reference to a Template by ID."""

    tag = "Template"

    id: int | None = None
    tick: int | None = None
    step: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"ID": self.id, "Tick": self.tick, "Step": self.step}

    @classmethod
    def from_element(cls, element: XmlElement) -> "TrackTemplate":
        return cls(
            id=read_int(element, "ID"),
            tick=read_int(element, "Tick"),
            step=read_int(element, "Step"),
        )


class EOT(ModuleNode):
    """End of track."""

    tag = "EOT"

    tick: int | None = None

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Tick": self.tick}

    @classmethod
    def from_element(cls, element: XmlElement) -> "EOT":
        return cls(tick=read_int(element, "Tick"))


TrackEvent = (
    TrackMark
    | Tempo
    | TimeSignature
    | KeySignature
    | TrackCC
    | TrackPC
    | TrackComment
    | TrackTemplate
    | EOT
)

_EVENT_DECODERS = {
    "Mark": TrackMark.from_element,
    "Tempo": Tempo.from_element,
    "TimeSignature": TimeSignature.from_element,
    "KeySignature": KeySignature.from_element,
    "CC": TrackCC.from_element,
    "PC": TrackPC.from_element,
    "Comment": TrackComment.from_element,
    "Template": TrackTemplate.from_element,
    "EOT": EOT.from_element,
}


class Track(ModuleNode):
    """
    One default track and its event stream.

    Params:
        name: Track name
        ch: MIDI channel, 1 to 16
        mode: "Conductor" or "Rhythm" for the special track kinds
        current: Non-zero if the track is selected when the song opens
        events: Events in stream order
    """

    tag = "Track"

    name: str | None = None
    ch: int | None = None
    mode: TrackMode | None = None
    current: int | None = None
    events: list[TrackEvent] = Field(default_factory=list)

    def check(self) -> None:
        if self.ch is not None and not 1 <= self.ch <= 16:
            raise RangeValidationError(self.tag, "Ch", self.ch, 1, 16)

    def _xml_attributes(self) -> dict[str, Any]:
        return {"Name": self.name, "Ch": self.ch, "Mode": self.mode, "Current": self.current}

    def _xml_children(self) -> list[XmlElement | str]:
        return [event.to_element() for event in self.events]

    @classmethod
    def from_element(cls, element: XmlElement) -> "Track":
        return cls(
            name=read_text(element, "Name"),
            ch=read_int(element, "Ch"),
            mode=read_choice(element, "Mode", ("Conductor", "Rhythm")),
            current=read_int(element, "Current"),
            events=decode_children(element, _EVENT_DECODERS),
        )


class DefaultData(ModuleNode):
    tag = "DefaultData"

    items: list[Mark | Track] = Field(default_factory=list)

    def _xml_children(self) -> list[XmlElement | str]:
        return [item.to_element() for item in self.items]

    @classmethod
    def from_element(cls, element: XmlElement) -> "DefaultData":
        return cls(
            items=decode_children(
                element, {"Mark": Mark.from_element, "Track": Track.from_element}
            )
        )
