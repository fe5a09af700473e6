"""Tests for numeric and ASCII parameter descriptors."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sysexlib.models.parameter import AsciiParameter, NumericParameter
from sysexlib.utils.validation import FieldOutOfBoundsError, ValidationError


class TestNumericParameter:
    """Test bit-packed numeric fields."""

    # Byte 111 of a DX7 packed voice: 0000 SFFF
    SYNC = NumericParameter(0, "Oscillator sync", 0, 1, 1, 3)
    FEEDBACK = NumericParameter(0, "Feedback", 0, 7, 3, 0)

    def test_get_packed_values(self):
        """Test reading two fields sharing one byte."""
        data = bytes([0b0000_1101])
        assert self.SYNC.get_value(data) == 1
        assert self.FEEDBACK.get_value(data) == 5

    def test_set_preserves_other_bits(self):
        """Test that writing a field leaves other bits unchanged."""
        data = bytearray([0xFF])
        self.FEEDBACK.set_value(data, 0)
        assert data[0] == 0xF8

        data = bytearray([0b0000_0101])
        self.SYNC.set_value(data, 1)
        assert data[0] == 0b0000_1101
        assert self.FEEDBACK.get_value(data) == 5

    def test_set_then_get(self):
        """Test that every in-range value reads back unchanged."""
        parameter = NumericParameter(0, "Osc frequency coarse", 0, 31, 5, 1)
        for value in range(32):
            data = bytearray([0x01])
            parameter.set_value(data, value)
            assert parameter.get_value(data) == value
            assert data[0] & 0x01 == 0x01

    def test_set_masks_value(self):
        """Test that values wider than the field are masked."""
        data = bytearray(1)
        self.FEEDBACK.set_value(data, 9)
        assert data[0] == 1

    def test_offset(self):
        """Test that offsets are relative to the given base."""
        parameter = NumericParameter(1, "Algorithm", 0, 31)
        data = bytes([0, 0, 0, 17])
        assert parameter.get_value(data, offset=2) == 17

    def test_out_of_bounds(self):
        """Test reading or writing past the buffer."""
        parameter = NumericParameter(4, "Algorithm", 0, 31)
        with pytest.raises(FieldOutOfBoundsError):
            parameter.get_value(bytes(4))
        with pytest.raises(IndexError):
            parameter.set_value(bytearray(2), 1, offset=1)

    def test_invalid_bit_range(self):
        """Test that impossible bit ranges are rejected."""
        with pytest.raises(ValueError):
            NumericParameter(0, "x", bit_count=9)
        with pytest.raises(ValueError):
            NumericParameter(0, "x", bit_count=3, bit_offset=6)

    def test_validate(self):
        """Test range validation and suggested corrections."""
        parameter = NumericParameter(0, "Release Rate", 1, 15)
        assert parameter.validate(8).ok
        assert parameter.validate(1)
        below = parameter.validate(0)
        assert not below.ok
        assert below.corrected_value == 1
        above = parameter.validate(20)
        assert not above.ok
        assert above.corrected_value == 15

    def test_validate_rejects_non_integers(self):
        """Test that strings and booleans are not valid numbers."""
        parameter = NumericParameter(0, "Algorithm", 0, 31)
        assert not parameter.validate("3").ok
        assert not parameter.validate(True).ok

    def test_check_raises(self):
        """Test that check raises with the corrected value attached."""
        parameter = NumericParameter(0, "Algorithm", 0, 31)
        with pytest.raises(ValidationError) as exc_info:
            parameter.check(40)
        assert exc_info.value.parameter == "Algorithm"
        assert exc_info.value.value == 40
        assert exc_info.value.corrected_value == 31

    def test_validate_data(self):
        """Test validating the value currently in data."""
        parameter = NumericParameter(0, "Algorithm", 0, 31)
        assert parameter.validate_data(bytes([31])).ok
        assert not parameter.validate_data(bytes([32])).ok


class TestAsciiParameter:
    """Test fixed-length ASCII fields."""

    NAME = AsciiParameter(0, "Voice name", 10)

    def test_get_strips_padding(self):
        """Test that trailing spaces are removed, inner spaces kept."""
        assert self.NAME.get_value(b"BRASS   1 ") == "BRASS   1"

    def test_get_replaces_non_printable(self):
        """Test that non-printable bytes read as spaces."""
        assert self.NAME.get_value(b"AB\x01CD     ") == "AB CD"
        assert self.NAME.get_value(b"AB\xffCD     ") == "AB CD"

    def test_set_pads(self):
        """Test that short strings are space padded."""
        data = bytearray(12)
        self.NAME.set_value(data, "HI", offset=1)
        assert data == bytearray(b"\x00HI        \x00")

    def test_set_too_long(self):
        """Test that strings longer than the field are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            self.NAME.set_value(bytearray(10), "ABCDEFGHIJK")
        assert exc_info.value.corrected_value == "ABCDEFGHIJ"

    def test_set_past_end(self):
        """Test writing a field that extends past the buffer."""
        with pytest.raises(FieldOutOfBoundsError):
            self.NAME.set_value(bytearray(5), "abc")

    def test_size(self):
        """Test that the field spans its length."""
        assert self.NAME.size == 10
        assert NumericParameter(0, "x").size == 1

    def test_validate(self):
        """Test validation results and corrections."""
        assert self.NAME.validate("E.PIANO 1").ok
        bad_char = self.NAME.validate("E.PIANO\x011")
        assert not bad_char.ok
        assert bad_char.corrected_value == "E.PIANO 1"
        too_long = self.NAME.validate("ABCDEFGHIJK")
        assert not too_long.ok
        assert too_long.corrected_value == "ABCDEFGHIJ"
        assert not self.NAME.validate(5).ok


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
