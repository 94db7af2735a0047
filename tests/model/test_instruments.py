"""
Tests for instrument and drum set maps.
"""

import pytest

from dominoxml.exceptions import EmptyBankListError, MissingAttributeError, RangeValidationError
from dominoxml.markup import parse
from dominoxml.model import Bank, InstrumentMap, MapList, ProgramChange, Tone, drum_set_list


class TestRanges:
    """Test range invariants of the map chain."""

    @pytest.mark.parametrize("pc", [0, 129])
    def test_program_change_out_of_range(self, pc):
        program = ProgramChange(name="P", pc=pc, banks=[Bank(name="B")])
        with pytest.raises(RangeValidationError) as exc_info:
            program.to_element()
        assert exc_info.value.field == "PC"
        assert exc_info.value.value == pc

    @pytest.mark.parametrize("pc", [1, 128])
    def test_program_change_in_range(self, pc):
        ProgramChange(name="P", pc=pc, banks=[Bank(name="B")]).to_element()

    @pytest.mark.parametrize("lsb, msb, field", [(256, 0, "LSB"), (0, -1, "MSB")])
    def test_bank_out_of_range(self, lsb, msb, field):
        with pytest.raises(RangeValidationError) as exc_info:
            Bank(name="B", lsb=lsb, msb=msb).check()
        assert exc_info.value.field == field

    def test_bank_bounds_are_inclusive(self):
        Bank(name="B", lsb=0, msb=255).check()

    def test_tone_key(self):
        """Keys 0 and 127 are valid, 128 is not."""
        Tone(name="Low", key=0).check()
        Tone(name="High", key=127).check()
        with pytest.raises(RangeValidationError):
            Tone(name="Over", key=128).check()

    def test_nested_violation_is_found_from_the_top(self):
        """Checking happens on every level of the emitted tree."""
        map_list = drum_set_list(
            [
                InstrumentMap(
                    name="Drums",
                    pcs=[ProgramChange(name="Kit", pc=1, banks=[Bank(name="B", tones=[Tone(name="X", key=200)])])],
                )
            ]
        )
        with pytest.raises(RangeValidationError):
            map_list.to_element()


class TestDecode:
    """Test decoding map lists."""

    def test_empty_bank_list(self):
        """A program change needs at least one bank."""
        element = parse('<PC Name="Piano" PC="1"/>').root
        with pytest.raises(EmptyBankListError) as exc_info:
            ProgramChange.from_element(element)
        assert exc_info.value.program_name == "Piano"

    def test_tones_are_read_for_drum_sets_only(self):
        """Instrument banks ignore Tone children; drum set banks keep them."""
        body = (
            '<Map Name="M"><PC Name="P" PC="1"><Bank Name="B">'
            '<Tone Name="Kick" Key="36"/></Bank></PC></Map>'
        )
        instruments = MapList.from_element(parse(f"<InstrumentList>{body}</InstrumentList>").root)
        drums = MapList.from_element(parse(f"<DrumSetList>{body}</DrumSetList>").root)

        assert instruments.kind == "InstrumentList"
        assert instruments.maps[0].pcs[0].banks[0].tones == []
        assert drums.kind == "DrumSetList"
        assert drums.is_drum_set
        assert drums.maps[0].pcs[0].banks[0].tones == [Tone(name="Kick", key=36)]

    def test_missing_map_name(self):
        with pytest.raises(MissingAttributeError):
            InstrumentMap.from_element(parse("<Map/>").root)

    def test_bank_numbers_are_optional(self):
        bank = Bank.from_element(parse('<Bank Name="B" MSB="8"/>').root)
        assert bank.lsb is None
        assert bank.msb == 8


class TestEncode:
    """Test emitted elements."""

    def test_kind_decides_the_tag(self):
        assert MapList(kind="InstrumentList").to_element().name == "InstrumentList"
        assert MapList(kind="DrumSetList").to_element().name == "DrumSetList"

    def test_bank_without_numbers(self):
        """Absent LSB and MSB are not written."""
        element = Bank(name="B").to_element()
        assert element.attributes == {"Name": "B"}

    def test_program_change_requires_a_bank(self):
        """Building a program change without banks is refused."""
        with pytest.raises(ValueError):
            ProgramChange(name="P", pc=1, banks=[])
