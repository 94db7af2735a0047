"""
Generic element tree used as the markup collaborator.

This package converts between markup text and a plain attributed element
tree. It knows nothing about module data.
"""

from dominoxml.markup.element import AttributeValue, XmlDocument, XmlElement
from dominoxml.markup.reader import coerce_attribute, parse, read_declaration
from dominoxml.markup.writer import format_attribute, format_declaration, serialize

__all__ = [
    "AttributeValue",
    "XmlDocument",
    "XmlElement",
    "coerce_attribute",
    "parse",
    "read_declaration",
    "format_attribute",
    "format_declaration",
    "serialize",
]
