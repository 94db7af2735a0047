"""
Document envelope: the XML declaration around a ModuleData root.

ModuleFile owns the fixed declaration (version "1.0", encoding "Shift_JIS")
and the top-level text conversions. Output always uses CRLF line endings.
"""

import re

from attrs import frozen
from pydantic import BaseModel

from dominoxml.exceptions import BadEncodingError, MissingDeclarationError, MissingRootError
from dominoxml.markup import XmlDocument, parse, read_declaration, serialize
from dominoxml.model.module_data import ModuleData

XML_VERSION = "1.0"
XML_ENCODING = "Shift_JIS"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@frozen
class EncodeOptions:
    """
    Output formatting options.

    Params:
        indent: Indentation unit for nested elements; None or "" for no indentation
    """

    indent: str | None = "  "

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "EncodeOptions":
        """Factory method to create options from a dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)


def to_crlf(text: str) -> str:
    """Normalize every line ending to CRLF."""
    return _LINE_BREAK.sub("\r\n", text)


class ModuleFile(BaseModel):
    """
    A complete module data document.

    Params:
        module_data: The root ModuleData node
    """

    module_data: ModuleData

    @property
    def xml_version(self) -> str:
        return XML_VERSION

    @property
    def xml_encoding(self) -> str:
        return XML_ENCODING

    def to_document(self) -> XmlDocument:
        """
        Build the generic tree, validating every node on the way.

        Raises:
            ModuleValidationError: If any node is invalid
        """
        return XmlDocument(
            declaration={"version": XML_VERSION, "encoding": XML_ENCODING},
            root=self.module_data.to_element(),
        )

    def to_xml(self, options: EncodeOptions | None = None) -> str:
        """
        Encode the document as text with CRLF line endings.

        Params:
            options: Formatting options (defaults to two-space indentation)

        Returns:
            The document text, starting with the Shift_JIS declaration

        Raises:
            ModuleValidationError: If any node is invalid
        """
        options = options or EncodeOptions()
        return to_crlf(serialize(self.to_document(), indent=options.indent))

    def to_bytes(self, options: EncodeOptions | None = None) -> bytes:
        """Encode the document as Shift_JIS bytes, ready to be written to disk."""
        # cp932 is the Windows flavour of Shift_JIS the sequencer writes
        return self.to_xml(options).encode("cp932")

    @classmethod
    def from_xml(cls, data: str | bytes) -> "ModuleFile":
        """
        Decode a document from text or raw file bytes.

        The declaration is vetted before the body is parsed, so a wrong
        encoding label is reported even if the body would not parse.

        Params:
            data: Document text, or the file's bytes

        Returns:
            The decoded document (not validated; see ``to_xml``)

        Raises:
            MissingDeclarationError: If there is no XML declaration
            BadEncodingError: If the declared encoding is not Shift_JIS
            MalformedDocumentError: If the markup does not parse
            MissingRootError: If the root element is absent or not ModuleData
            DecodeError: If any node below the root fails to decode
        """
        declaration = read_declaration(data)
        if declaration is None:
            raise MissingDeclarationError()
        encoding = declaration.get("encoding")
        if encoding != XML_ENCODING:
            raise BadEncodingError(encoding, XML_ENCODING)

        document = parse(data, coerce_attributes=True)
        if document.root is None:
            raise MissingRootError()
        if document.root.name != ModuleData.tag:
            raise MissingRootError(document.root.name)

        return cls(module_data=ModuleData.from_element(document.root))
