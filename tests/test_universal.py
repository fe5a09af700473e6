"""Tests for universal (realtime and non-realtime) messages."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sysexlib import SysexKind, create
from sysexlib.manufacturers import universal
from sysexlib.utils.checksum import xor_7bit


class TestIdentify:
    """Test universal message types."""

    def test_sample_dump_request(self):
        """Test a sub-id 1 without subtypes."""
        sysex = create(bytes([0xF0, 0x7E, 0x00, 0x03, 0x00, 0x00, 0xF7]))
        assert sysex.kind == SysexKind.UNIVERSAL
        assert sysex.is_universal
        assert sysex.type == "Sample Dump Request"
        assert sysex.manufacturer_id == (0x7E,)
        assert sysex.manufacturer_name is None
        assert sysex.device is None
        assert sysex.describe() == "Sample Dump Request"

    def test_ack(self):
        """Test a handshake message."""
        sysex = create(bytes([0xF0, 0x7E, 0x00, 0x7F, 0x01, 0xF7]))
        assert sysex.type == "ACK"

    def test_identity_request(self):
        """Test a sub-id 2 lookup."""
        sysex = create(bytes([0xF0, 0x7E, 0x7F, 0x06, 0x01, 0xF7]))
        assert sysex.type == "General Information: Identity Request"
        assert sysex.is_known_type

    def test_realtime(self):
        """Test a realtime master volume message."""
        sysex = create(bytes([0xF0, 0x7F, 0x7F, 0x04, 0x01, 0x00, 0x7F, 0xF7]))
        assert sysex.kind == SysexKind.UNIVERSAL
        assert sysex.type == "Device Control: Master Volume"

    def test_unknown_sub_id(self):
        """Test an unassigned sub-id 1."""
        sysex = create(bytes([0xF0, 0x7E, 0x00, 0x20, 0x00, 0xF7]))
        assert sysex.type == "Universal Non-realtime: Unknown type"

    def test_too_short_for_sub_id(self):
        """Test a message with no sub-id 1."""
        sysex = create(bytes([0xF0, 0x7F, 0x00, 0xF7]))
        assert sysex.kind == SysexKind.UNIVERSAL
        assert sysex.type == "Universal Realtime: Unknown type"

    def test_missing_sub_id2(self):
        """Test a message that ends after sub-id 1."""
        sysex = create(bytes([0xF0, 0x7E, 0x00, 0x06, 0xF7]))
        assert sysex.type == "General Information: Unknown type"

    def test_parse_type(self):
        """Test type lookup without a message."""
        assert universal.parse_type(0x7E, 0x09, 0x01) == "General MIDI: General MIDI 1 System On"
        assert universal.parse_type(0x7F, 0x01, 0x7F) == "MIDI Time Code: Unknown type"
        assert universal.parse_type(0x7F, 0x60, None) == "Universal Realtime: Unknown type"

    def test_not_universal(self):
        """Test that other ids are rejected."""
        with pytest.raises(ValueError):
            universal.identify(bytes([0xF0, 0x43, 0x00, 0xF7]))


class TestSampleDataPacket:
    """Test the XOR checksum of sample data packets."""

    def packet(self, data_bytes):
        body = bytes([0xF0, 0x7E, 0x00, 0x02, 0x05]) + bytes(data_bytes)
        return body + bytes([xor_7bit(body[1:]), 0xF7])

    def test_checksum(self):
        """Test a valid packet."""
        data = self.packet([0x00] * 120)
        assert len(data) == universal.SAMPLE_DATA_PACKET_LENGTH
        assert data[-2] == 0x79
        sysex = create(data)
        assert sysex.type == "Sample Data Packet"
        assert sysex.checksum_valid is True

    def test_checksum_with_data(self):
        """Test that data bytes are included."""
        data = self.packet([0x05] + [0x00] * 119)
        assert data[-2] == 0x7C
        assert create(data).checksum_valid is True

    def test_corrupted(self):
        """Test a packet with a damaged data byte."""
        data = bytearray(self.packet([0x00] * 120))
        data[10] = 0x01
        sysex = create(data)
        assert sysex.checksum_valid is False
        assert not sysex.is_valid

    def test_other_messages_have_no_checksum(self):
        """Test that non-packets report no checksum."""
        assert create(bytes([0xF0, 0x7E, 0x00, 0x7F, 0x01, 0xF7])).checksum_valid is None
        # Wrong length for a data packet
        short = bytes([0xF0, 0x7E, 0x00, 0x02, 0x05, 0x00, 0x7B, 0xF7])
        assert universal.checksum_valid(short) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
