"""
Core module data components.

This package provides the node base class, the attribute readers shared by
all decoders, and type aliases.
"""

from dominoxml.core.attributes import read_choice, read_int, read_number, read_text
from dominoxml.core.node import ModuleNode, decode_children, make_element, text_element
from dominoxml.core.types import (
    AttributeValue,
    MapListKind,
    ProgramMode,
    SyncMode,
    TrackMode,
    ValueType,
)

__all__ = [
    "ModuleNode",
    "make_element",
    "text_element",
    "decode_children",
    "read_text",
    "read_int",
    "read_number",
    "read_choice",
    "AttributeValue",
    "MapListKind",
    "ProgramMode",
    "SyncMode",
    "TrackMode",
    "ValueType",
]
