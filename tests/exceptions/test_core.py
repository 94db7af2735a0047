"""
Tests for the exception hierarchy and error messages.
"""

import pytest

from dominoxml.exceptions import (
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


class TestErrorContext:
    """Test location formatting."""

    def test_entity_only(self):
        assert ErrorContext(entity="CCM").format_location() == "in CCM"

    def test_entity_field_and_value(self):
        """The received value is shown with its repr."""
        context = ErrorContext(entity="CCM", field="Color", value="FF0000")
        assert context.format_location() == "in CCM.Color (received: 'FF0000')"


class TestHierarchy:
    """Test that the two error families are disjoint."""

    @pytest.mark.parametrize(
        "error",
        [
            MalformedDocumentError("bad"),
            MissingDeclarationError(),
            BadEncodingError("UTF-8"),
            MissingRootError(),
            MissingAttributeError("Map", "Name"),
            AttributeTypeError("PC", "PC", "x", "an integer"),
            InvalidEnumError("CCM", "Sync", "First", ("Last", "LastEachGate")),
            EmptyBankListError("Piano"),
        ],
    )
    def test_decode_errors(self, error):
        assert isinstance(error, DecodeError)
        assert isinstance(error, DominoXMLError)
        assert not isinstance(error, ModuleValidationError)

    @pytest.mark.parametrize(
        "error",
        [
            RangeValidationError("Tone", "Key", 128, 0, 127),
            FormatValidationError("CCM", "Color", "FF0000", "must start with #"),
            EntryBoundsError("Value", "Max", 200, 0, 127),
            ListKindError("instrument_list", "DrumSetList", "InstrumentList"),
        ],
    )
    def test_validation_errors(self, error):
        assert isinstance(error, ModuleValidationError)
        assert isinstance(error, DominoXMLError)
        assert not isinstance(error, DecodeError)


class TestMessages:
    """Test that errors name the entity, field and received value."""

    def test_range_error_with_both_bounds(self):
        error = RangeValidationError("CCM", "ID", 1301, 0, 1300)
        assert str(error) == "ID must be between 0 and 1300 in CCM.ID (received: 1301)"
        assert (error.entity, error.field, error.value) == ("CCM", "ID", 1301)

    def test_range_error_with_lower_bound(self):
        error = RangeValidationError("Mark", "Meas", 0, minimum=1)
        assert str(error).startswith("Meas must be 1 or more")

    def test_bad_encoding(self):
        error = BadEncodingError("UTF-8")
        assert error.encoding == "UTF-8"
        assert "Shift_JIS" in str(error)
        assert "'UTF-8'" in str(error)

    def test_missing_root_names_found_element(self):
        assert "'Other'" in str(MissingRootError("Other"))

    def test_empty_bank_list(self):
        error = EmptyBankListError("Piano")
        assert error.program_name == "Piano"
        assert "PC.Bank" in str(error)

    def test_entry_bounds(self):
        error = EntryBoundsError("Gate", "Loud", 200, 0, 127)
        assert error.label == "Loud"
        assert error.entity == "Gate"
        assert error.value == 200
