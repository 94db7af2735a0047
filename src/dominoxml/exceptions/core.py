"""
Exception classes for module data decoding and validation.

This module defines the two disjoint error families raised by the document
model: decode errors (raised while turning markup into nodes) and validation
errors (raised by ``check()`` before a node is turned back into markup).
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorContext:
    """
    Location of an error inside the module data tree.

    Params:
        entity: Element tag of the node that failed (e.g., "CCM")
        field: Attribute or child name within that node
        value: The offending value, if one was received
    """

    entity: str
    field: str | None = None
    value: Any = None

    def format_location(self) -> str:
        """
        Format the location as a short human-readable suffix.

        Returns:
            String like "in CCM.ID (received: 1301)"
        """
        location = f"in {self.entity}"
        if self.field:
            location += f".{self.field}"
        if self.value is not None:
            location += f" (received: {self.value!r})"
        return location


class DominoXMLError(Exception):
    """Base exception for all module data errors."""

    pass


class DecodeError(DominoXMLError):
    """Base exception for errors raised while decoding markup into nodes."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Description of the decode failure
            context: Optional location of the failure in the tree
        """
        self.context = context
        if context:
            message = f"{message} {context.format_location()}"
        super().__init__(message)


class MalformedDocumentError(DecodeError):
    """Raised when the markup itself cannot be parsed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed XML document: {reason}")


class MissingDeclarationError(DecodeError):
    """Raised when the document has no XML declaration."""

    def __init__(self):
        super().__init__("Invalid XML: document has no XML declaration")


class BadEncodingError(DecodeError):
    """Raised when the declared character encoding is not Shift_JIS."""

    def __init__(self, encoding: Any, expected: str = "Shift_JIS"):
        """
        Initialize the exception.

        Params:
            encoding: The encoding label found in the declaration
            expected: The only accepted encoding label
        """
        self.encoding = encoding
        self.expected = expected
        super().__init__(
            f"Invalid encoding: expected '{expected}', declaration says {encoding!r}"
        )


class MissingRootError(DecodeError):
    """Raised when the document has no ModuleData root element."""

    def __init__(self, found: str | None = None):
        self.found = found
        message = "Invalid XML: ModuleData root element not found"
        if found is not None:
            message += f" (root element is '{found}')"
        super().__init__(message)


class MissingAttributeError(DecodeError):
    """Raised when a required attribute is absent."""

    def __init__(self, entity: str, attribute: str):
        """
        Initialize the exception.

        Params:
            entity: Tag of the element missing the attribute
            attribute: Name of the required attribute
        """
        self.entity = entity
        self.attribute = attribute
        super().__init__(
            "Invalid XML: required attribute not found",
            ErrorContext(entity=entity, field=attribute),
        )


class AttributeTypeError(DecodeError):
    """Raised when an attribute holds a value of the wrong kind."""

    def __init__(self, entity: str, attribute: str, value: Any, expected: str):
        """
        Initialize the exception.

        Params:
            entity: Tag of the element holding the attribute
            attribute: Name of the attribute
            value: The value received from the markup
            expected: Human-readable name of the expected kind (e.g., "integer")
        """
        self.entity = entity
        self.attribute = attribute
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid XML: attribute must be {expected}",
            ErrorContext(entity=entity, field=attribute, value=value),
        )


class InvalidEnumError(DecodeError):
    """Raised when an attribute value is not one of the allowed choices."""

    def __init__(self, entity: str, attribute: str, value: Any, allowed: tuple[str, ...]):
        self.entity = entity
        self.attribute = attribute
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid XML: attribute must be one of {', '.join(allowed)}",
            ErrorContext(entity=entity, field=attribute, value=value),
        )


class EmptyBankListError(DecodeError):
    """Raised when a program change element has no Bank children."""

    def __init__(self, program_name: str):
        self.program_name = program_name
        super().__init__(
            f"Invalid XML: program change '{program_name}' has no Bank element",
            ErrorContext(entity="PC", field="Bank"),
        )


class ModuleValidationError(DominoXMLError):
    """Base exception for invariant violations found by ``check()``."""

    def __init__(self, message: str, context: ErrorContext):
        """
        Initialize the exception.

        Params:
            message: Description of the violated invariant
            context: Location and offending value
        """
        self.context = context
        self.entity = context.entity
        self.field = context.field
        self.value = context.value
        super().__init__(f"{message} {context.format_location()}")


class RangeValidationError(ModuleValidationError):
    """Raised when a numeric field lies outside its allowed range."""

    def __init__(
        self,
        entity: str,
        field: str,
        value: int | float,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
    ):
        """
        Initialize the exception.

        Params:
            entity: Tag of the node holding the field
            field: Attribute name of the field
            value: The out-of-range value
            minimum: Inclusive lower bound, if any
            maximum: Inclusive upper bound, if any
        """
        self.minimum = minimum
        self.maximum = maximum
        if minimum is not None and maximum is not None:
            message = f"{field} must be between {minimum} and {maximum}"
        elif minimum is not None:
            message = f"{field} must be {minimum} or more"
        else:
            message = f"{field} must be {maximum} or less"
        super().__init__(message, ErrorContext(entity=entity, field=field, value=value))


class FormatValidationError(ModuleValidationError):
    """Raised when a text field does not follow its required format."""

    def __init__(self, entity: str, field: str, value: str, rule: str):
        self.rule = rule
        super().__init__(
            f"{field} {rule}", ErrorContext(entity=entity, field=field, value=value)
        )


class EntryBoundsError(ModuleValidationError):
    """Raised when a table entry falls outside its owning value's Min/Max."""

    def __init__(
        self,
        entity: str,
        label: str,
        value: int,
        minimum: int | None,
        maximum: int | None,
    ):
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Entry '{label}' must be between {minimum} and {maximum}",
            ErrorContext(entity=entity, field="Entry", value=value),
        )


class ListKindError(ModuleValidationError):
    """Raised when a map list is stored in the slot meant for the other kind."""

    def __init__(self, slot: str, kind: str, expected: str):
        self.slot = slot
        self.kind = kind
        self.expected = expected
        super().__init__(
            f"{slot} must hold a {expected}",
            ErrorContext(entity="ModuleData", field=slot, value=kind),
        )
