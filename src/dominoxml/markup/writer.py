"""
Markup writer: generic element tree to text.
"""

from lxml import etree

from dominoxml.markup.element import AttributeValue, XmlDocument, XmlElement


def format_attribute(value: AttributeValue) -> str:
    """Render an attribute value the way the sequencer writes it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_declaration(declaration: dict[str, str]) -> str:
    """
    Render an XML declaration with double-quoted pseudo-attributes.

    Params:
        declaration: Ordered pseudo-attributes, e.g. version then encoding

    Returns:
        String like '<?xml version="1.0" encoding="Shift_JIS"?>'
    """
    pairs = " ".join(f'{name}="{value}"' for name, value in declaration.items())
    return f"<?xml {pairs}?>"


def _build(element: XmlElement) -> etree._Element:
    node = etree.Element(element.name)
    for name, value in element.attributes.items():
        node.set(name, format_attribute(value))
    last: etree._Element | None = None
    for child in element.children:
        if isinstance(child, XmlElement):
            last = _build(child)
            node.append(last)
        elif last is None:
            node.text = (node.text or "") + child
        else:
            last.tail = (last.tail or "") + child
    return node


def serialize(document: XmlDocument, indent: str | None = "  ") -> str:
    """
    Serialize a document to text.

    Line endings in the result are plain LF; callers normalize them.

    Params:
        document: Declaration and root to write; the root must be present
        indent: Indentation unit for nested elements, or None for compact output

    Returns:
        The declaration (if any) followed by the root element, newline-terminated
    """
    if document.root is None:
        raise ValueError("Cannot serialize a document without a root element")

    root = _build(document.root)
    if indent:
        etree.indent(root, space=indent)
    body = etree.tostring(root, encoding="unicode")

    if document.declaration is None:
        return f"{body}\n"
    return f"{format_declaration(document.declaration)}\n{body}\n"
