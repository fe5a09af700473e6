"""Tests for Roland message identification."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sysexlib import SysexKind, create
from sysexlib.manufacturers import roland


def message(*header, length=None):
    """Build a message starting with header, zero padded to length."""
    body = list(header)
    if length is not None:
        body += [0x00] * (length - len(body) - 1)
    return bytes(body + [0xF7])


class TestLegacy:
    """Test legacy (device specific) message formats."""

    def test_juno106_patch(self):
        """Test a Juno-106 patch dump."""
        sysex = create(message(0xF0, 0x41, 0x30, 0x00, 0x05, length=24))
        assert sysex.kind == SysexKind.ROLAND
        assert sysex.manufacturer_name == "Roland"
        assert sysex.device == "Juno-106"
        assert sysex.type == "Patch data"
        assert sysex.describe() == "Roland Juno-106 Patch data"
        assert sysex.checksum_valid is None

    def test_juno106_wrong_length(self):
        """Test that the length is part of a legacy match."""
        sysex = create(message(0xF0, 0x41, 0x30, 0x00))
        assert sysex.kind == SysexKind.ROLAND
        assert sysex.device is None
        assert sysex.type is None
        assert sysex.describe() == "Roland"

    def test_tr707(self):
        """Test a four-byte TR-707 handshake message."""
        sysex = create(bytes([0xF0, 0x41, 0x50, 0xF7]))
        assert sysex.device == "TR-707"
        assert sysex.type == "Want to send file"

    def test_jx10_acknowledge(self):
        """Test a JX-10 handshake message."""
        sysex = create(message(0xF0, 0x41, 0x43, 0x00, 0x24))
        assert sysex.device == "JX-10"
        assert sysex.type == "Acknowledge"

    def test_mks70_patch(self):
        """Test an MKS-70 patch data message."""
        sysex = create(message(0xF0, 0x41, 0x35, 0x00, 0x24, length=59))
        assert sysex.device == "MKS-70"
        assert sysex.type == "Patch data"

    def test_mks70_first_entry_wins(self):
        """Test that duplicate templates resolve to the first entry."""
        sysex = create(message(0xF0, 0x41, 0x34, 0x00, 0x24, length=11))
        assert sysex.type == "Program number (patch)"

    def test_jx8p(self):
        """Test JX-8P tone data, which has no fixed length."""
        sysex = create(message(0xF0, 0x41, 0x35, 0x00, 0x21, 0x20, 0x01, length=67))
        assert sysex.device == "JX-8P"
        assert sysex.type == "All tone parameters"

    def test_alpha_juno_lengths(self):
        """Test Alpha Juno tone data with and without the tone name."""
        header = (0xF0, 0x41, 0x35, 0x00, 0x23, 0x20, 0x01)
        assert create(message(*header, length=54)).type == "All tone parameters"
        assert (
            create(message(*header, length=44)).type
            == "All tone parameters (without tone name)"
        )

    def test_legacy_header_matches(self):
        """Test matching a legacy header directly."""
        header = roland.LegacyHeader((0xF0, 0x41, 0x30), 24, "Juno-106", "Patch data")
        assert header.matches(message(0xF0, 0x41, 0x30, length=24))
        assert not header.matches(message(0xF0, 0x41, 0x30, length=25))


class TestStandard:
    """Test the standard device id / model id / command layout."""

    def test_d50_data_set(self):
        """Test a single-byte model id."""
        sysex = create(message(0xF0, 0x41, 0x00, 0x14, 0x12, 0x00, 0x00, 0x00, 0x10))
        assert sysex.device == "D-50"
        assert sysex.type == "Data set"
        assert sysex.is_known_type

    def test_gs_reset(self):
        """Test a GS reset message."""
        data = bytes([0xF0, 0x41, 0x10, 0x42, 0x12, 0x40, 0x00, 0x7F, 0x00, 0x41, 0xF7])
        sysex = create(data)
        assert sysex.device == "GS"
        assert sysex.type == "Data set"

    def test_multi_byte_model_id(self):
        """Test a two-byte model id."""
        sysex = create(message(0xF0, 0x41, 0x10, 0x00, 0x06, 0x11, 0x01, 0x00))
        assert sysex.device == "JP-8000"
        assert sysex.type == "Data request"

    def test_four_byte_model_id(self):
        """Test a four-byte model id."""
        sysex = create(message(0xF0, 0x41, 0x10, 0x00, 0x00, 0x00, 0x65, 0x12, 0x01))
        assert sysex.device == "Jupiter-X"
        assert sysex.type == "Data set"

    def test_shared_model_id(self):
        """Test that the first device listed for a model id is used."""
        sysex = create(message(0xF0, 0x41, 0x10, 0x3D, 0x12, 0x00))
        assert sysex.device == "JD-800"

    def test_unknown_command(self):
        """Test a known model with an unknown command."""
        sysex = create(message(0xF0, 0x41, 0x10, 0x14, 0x20, 0x00))
        assert sysex.device == "D-50"
        assert sysex.type is None

    def test_unknown_model(self):
        """Test a standard header with an unknown model id."""
        sysex = create(message(0xF0, 0x41, 0x10, 0x7A, 0x12, 0x00))
        assert sysex.kind == SysexKind.ROLAND
        assert sysex.device is None
        assert not sysex.is_known_type


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
