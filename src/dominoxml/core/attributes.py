"""
Typed attribute readers used by every ``from_element`` decoder.

Each reader raises a decode error naming the element and attribute when a
required attribute is missing or an attribute holds the wrong kind of value.
Numeric readers take the values the markup reader coerced, and also accept
non-canonical numeric text such as "007" or "1e2" that it left as text.
"""

import re
from collections.abc import Sequence

from dominoxml.exceptions import AttributeTypeError, InvalidEnumError, MissingAttributeError
from dominoxml.markup import XmlElement, format_attribute

_INTEGER_TEXT = re.compile(r"\s*[+-]?[0-9]+\s*")
_NUMBER_TEXT = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


def _lookup(element: XmlElement, name: str, required: bool):
    if name not in element.attributes:
        if required:
            raise MissingAttributeError(element.name, name)
        return None
    return element.attributes[name]


def read_text(element: XmlElement, name: str, required: bool = False) -> str | None:
    """
    Read an attribute as text.

    Numbers are accepted and turned back into their original spelling, so a
    name such as "1.10" survives coercion unchanged.

    Params:
        element: Element to read from
        name: Attribute name
        required: Raise if the attribute is absent

    Returns:
        The attribute text, or None when absent and not required

    Raises:
        MissingAttributeError: If required and absent
    """
    value = _lookup(element, name, required)
    if value is None:
        return None
    if name in element.raw_attributes:
        return element.raw_attributes[name]
    return format_attribute(value)


def read_int(element: XmlElement, name: str, required: bool = False) -> int | None:
    """
    Read an integer attribute.

    Text with leading zeros or an explicit sign ("007", "+5") is accepted.

    Raises:
        MissingAttributeError: If required and absent
        AttributeTypeError: If the value is not an integer
    """
    value = _lookup(element, name, required)
    if value is None:
        return None
    if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value):
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise AttributeTypeError(element.name, name, value, "an integer")
    return value


def read_number(element: XmlElement, name: str, required: bool = False) -> float | None:
    """
    Read a numeric attribute (integer or decimal).

    Decimal text in any spelling is accepted, exponents included ("1e2").

    Raises:
        MissingAttributeError: If required and absent
        AttributeTypeError: If the value is not a number
    """
    value = _lookup(element, name, required)
    if value is None:
        return None
    if isinstance(value, str) and _NUMBER_TEXT.fullmatch(value):
        return float(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AttributeTypeError(element.name, name, value, "a number")
    return float(value)


def read_choice(
    element: XmlElement, name: str, choices: Sequence[str], required: bool = False
) -> str | None:
    """
    Read an attribute restricted to a fixed set of values.

    Raises:
        MissingAttributeError: If required and absent
        InvalidEnumError: If the value is not one of ``choices``
    """
    value = _lookup(element, name, required)
    if value is None:
        return None
    if value not in choices:
        raise InvalidEnumError(element.name, name, value, tuple(choices))
    return value
