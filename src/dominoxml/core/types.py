"""
Core type definitions for the module data model.

This module contains type aliases shared by the markup layer and the
document model.
"""

from typing import Literal

from dominoxml.markup.element import AttributeValue

SyncMode = Literal["Last", "LastEachGate"]

ProgramMode = Literal["Drumset", "Auto"]

TrackMode = Literal["Conductor", "Rhythm"]

ValueType = Literal["Key"]

MapListKind = Literal["InstrumentList", "DrumSetList"]
