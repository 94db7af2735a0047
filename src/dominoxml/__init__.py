"""
dominoxml - typed reader and writer for Domino module data files

dominoxml maps module data XML (instrument maps, control change macros,
templates and default song data) to validated pydantic models and back.
"""

from importlib.metadata import version

from dominoxml.document import EncodeOptions, ModuleFile
from dominoxml.model import ModuleData
from dominoxml.validation import ConsistencyReport, check_consistency

__version__ = version("dominoxml")

__all__ = [
    "__version__",
    "ModuleFile",
    "ModuleData",
    "EncodeOptions",
    "ConsistencyReport",
    "check_consistency",
]
