"""
Module data document model.

This package provides one pydantic node class per element of a module data
file, from the ModuleData root down to individual track events.
"""

from dominoxml.model.default_data import (
    EOT,
    DefaultData,
    KeySignature,
    Mark,
    Tempo,
    TimeSignature,
    Track,
    TrackCC,
    TrackComment,
    TrackEvent,
    TrackMark,
    TrackPC,
    TrackTemplate,
)
from dominoxml.model.defaults import (
    ControlChangeEventDefault,
    ExclusiveEventDefault,
    ProgramChangeEventPropertyDlg,
    RhythmTrackDefault,
)
from dominoxml.model.instruments import (
    Bank,
    InstrumentMap,
    MapList,
    ProgramChange,
    Tone,
    drum_set_list,
    instrument_list,
)
from dominoxml.model.macros import (
    CCM,
    CCMFolder,
    CCMFolderLink,
    CCMLink,
    ControlChangeMacroList,
    Entry,
    MacroItem,
    Table,
    Value,
)
from dominoxml.model.module_data import ModuleData
from dominoxml.model.templates import (
    Memo,
    Template,
    TemplateCC,
    TemplateComment,
    TemplateEvent,
    TemplateFolder,
    TemplateList,
    TemplatePC,
)

__all__ = [
    "ModuleData",
    "RhythmTrackDefault",
    "ExclusiveEventDefault",
    "ProgramChangeEventPropertyDlg",
    "ControlChangeEventDefault",
    "MapList",
    "InstrumentMap",
    "ProgramChange",
    "Bank",
    "Tone",
    "instrument_list",
    "drum_set_list",
    "ControlChangeMacroList",
    "CCMFolder",
    "CCMFolderLink",
    "CCM",
    "CCMLink",
    "Value",
    "Entry",
    "Table",
    "MacroItem",
    "TemplateList",
    "TemplateFolder",
    "Template",
    "TemplateCC",
    "TemplatePC",
    "TemplateComment",
    "TemplateEvent",
    "Memo",
    "DefaultData",
    "Mark",
    "Track",
    "TrackEvent",
    "TrackMark",
    "Tempo",
    "TimeSignature",
    "KeySignature",
    "TrackCC",
    "TrackPC",
    "TrackComment",
    "TrackTemplate",
    "EOT",
]
