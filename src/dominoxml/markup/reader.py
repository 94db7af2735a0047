"""
Markup reader: text or bytes to a generic element tree.

Parsing is delegated to lxml. The XML declaration is read separately so that
callers can vet the declared encoding before the body is parsed, and so that
a missing declaration can be told apart from a default one (lxml reports
"UTF-8" in both cases).
"""

import re

from lxml import etree

from dominoxml.exceptions import MalformedDocumentError
from dominoxml.markup.element import AttributeValue, XmlDocument, XmlElement

_DECLARATION = re.compile(r"^(?:\ufeff|\xef\xbb\xbf)?\s*<\?xml\s+(.*?)\?>", re.DOTALL)
_PSEUDO_ATTRIBUTE = re.compile(r"""([A-Za-z_][\w.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# Canonical numbers only: "007" or "1e3" stay text.
_INTEGER = re.compile(r"-?(?:0|[1-9][0-9]*)")
_DECIMAL = re.compile(r"-?(?:0|[1-9][0-9]*)\.[0-9]+")

# Long enough to hold any sane declaration.
_PROLOG_SIZE = 512

# Declared encoding (lowercased) -> codec used for byte input.
_BYTE_CODECS = {"shift_jis": "cp932"}


def coerce_attribute(value: str) -> AttributeValue:
    """
    Convert numeric-looking attribute text to a number.

    Params:
        value: Raw attribute text

    Returns:
        int for canonical integers, float for canonical decimals, else the text
    """
    if _INTEGER.fullmatch(value):
        return int(value)
    if _DECIMAL.fullmatch(value):
        return float(value)
    return value


def _prolog(data: str | bytes) -> str:
    head = data[:_PROLOG_SIZE]
    if isinstance(head, bytes):
        # The declaration itself is always ASCII.
        return head.decode("latin-1")
    return head


def read_declaration(data: str | bytes) -> dict[str, str] | None:
    """
    Read the pseudo-attributes of the XML declaration.

    Params:
        data: Document text or raw bytes

    Returns:
        Mapping such as {"version": "1.0", "encoding": "Shift_JIS"}, or None
        when the document does not start with a declaration
    """
    match = _DECLARATION.match(_prolog(data))
    if match is None:
        return None
    return {
        name: double if double is not None else single
        for name, double, single in _PSEUDO_ATTRIBUTE.findall(match.group(1))
    }


def _strip_declaration(text: str) -> str:
    match = _DECLARATION.match(text)
    if match is None:
        return text
    return text[match.end():]


def _convert(node: etree._Element, coerce_attributes: bool) -> XmlElement:
    raw = dict(node.attrib)
    element = XmlElement(
        name=node.tag,
        attributes={
            name: coerce_attribute(value) if coerce_attributes else value
            for name, value in raw.items()
        },
        raw_attributes=raw,
    )
    # Whitespace between child elements is indentation; in a leaf it is content
    is_leaf = not any(isinstance(child.tag, str) for child in node)
    if node.text and (is_leaf or node.text.strip()):
        element.children.append(node.text)
    for child in node:
        # Processing instructions and entities have non-string tags
        if isinstance(child.tag, str):
            element.children.append(_convert(child, coerce_attributes))
        if child.tail and child.tail.strip():
            element.children.append(child.tail)
    return element


def _decode_bytes(data: bytes, declaration: dict[str, str] | None) -> str | bytes:
    codec = _BYTE_CODECS.get((declaration or {}).get("encoding", "").lower())
    if codec is None:
        return data
    try:
        return data.decode(codec)
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(str(e)) from e


def parse(data: str | bytes, coerce_attributes: bool = True) -> XmlDocument:
    """
    Parse markup into a generic element tree.

    Comments are dropped, and so is whitespace-only text around child
    elements; the text of a leaf element is kept as-is. Shift_JIS bytes are
    decoded as cp932, the superset the writer emits; other bytes are decoded
    by lxml according to their own declaration.

    Params:
        data: Document text or raw bytes
        coerce_attributes: Convert numeric-looking attribute values to numbers

    Returns:
        XmlDocument with the declaration (if any) and the root (if any)

    Raises:
        MalformedDocumentError: If the bytes or the markup cannot be read
    """
    declaration = read_declaration(data)
    if isinstance(data, bytes):
        data = _decode_bytes(data, declaration)
    text = data.decode("latin-1") if isinstance(data, bytes) else data
    if not _strip_declaration(text).strip():
        return XmlDocument(declaration=declaration, root=None)
    # lxml refuses str input that carries an encoding declaration
    body = data if isinstance(data, bytes) else _strip_declaration(data)

    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError, LookupError) as e:
        raise MalformedDocumentError(str(e)) from e

    return XmlDocument(declaration=declaration, root=_convert(root, coerce_attributes))
