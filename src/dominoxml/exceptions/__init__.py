"""
Module data exception classes.

This package provides all exception types raised while decoding, validating
and encoding module data documents.
"""

from dominoxml.exceptions.core import (
    AttributeTypeError,
    BadEncodingError,
    DecodeError,
    DominoXMLError,
    EmptyBankListError,
    EntryBoundsError,
    ErrorContext,
    FormatValidationError,
    InvalidEnumError,
    ListKindError,
    MalformedDocumentError,
    MissingAttributeError,
    MissingDeclarationError,
    MissingRootError,
    ModuleValidationError,
    RangeValidationError,
)

__all__ = [
    "DominoXMLError",
    "ErrorContext",
    "DecodeError",
    "MalformedDocumentError",
    "MissingDeclarationError",
    "BadEncodingError",
    "MissingRootError",
    "MissingAttributeError",
    "AttributeTypeError",
    "InvalidEnumError",
    "EmptyBankListError",
    "ModuleValidationError",
    "RangeValidationError",
    "FormatValidationError",
    "EntryBoundsError",
    "ListKindError",
]
