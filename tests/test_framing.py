"""Tests for splitting and joining framed sysex messages."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import sysexlib
from sysexlib.framing import count_segments, join, segment_offsets, split_segments
from sysexlib.utils.validation import MalformedSysexError

FIRST = bytes([0xF0, 0x43, 0x10, 0x01, 0x02, 0x05, 0xF7])
SECOND = bytes([0xF0, 0x7E, 0x00, 0x7F, 0x00, 0xF7])


class TestSplit:
    """Test splitting byte streams into segments."""

    def test_single(self):
        """Test that one message is one segment."""
        assert split_segments(FIRST) == [FIRST]
        assert count_segments(FIRST) == 1

    def test_multiple(self):
        """Test splitting back-to-back messages."""
        data = FIRST + SECOND
        assert split_segments(data) == [FIRST, SECOND]
        assert count_segments(data) == 2
        assert segment_offsets(data) == [0, len(FIRST)]

    def test_split_join_roundtrip(self):
        """Test that joining the segments reproduces the input."""
        data = FIRST + SECOND + FIRST
        assert join(split_segments(data)) == data

    def test_bytes_between_segments(self):
        """Test that stray bytes between segments are rejected."""
        with pytest.raises(MalformedSysexError, match="segment 2"):
            split_segments(FIRST + b"\x00" + SECOND)

    def test_unterminated(self):
        """Test that a missing final F7 is rejected."""
        with pytest.raises(MalformedSysexError, match="not terminated"):
            split_segments(FIRST + SECOND[:-1])

    def test_f0_inside_segment_is_data(self):
        """Test that an F0 inside a segment does not start a new one."""
        data = bytes([0xF0, 0x01, 0xF0, 0x02, 0xF7])
        assert split_segments(data) == [data]
        assert count_segments(data) == 1


class TestJoin:
    """Test joining messages."""

    def test_join_messages(self):
        """Test that Sysex objects and raw bytes can be mixed."""
        assert join([sysexlib.parse(FIRST), SECOND]) == FIRST + SECOND

    def test_join_empty(self):
        """Test joining nothing."""
        assert join([]) == b""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
