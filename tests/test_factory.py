"""Tests for message identification, creation and file I/O."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import sysexlib
from sysexlib import MalformedSysexError, Sysex, SysexKind
from sysexlib.factory import combine, create, load, parse, read_data, save, split
from sysexlib.manufacturers.yamaha import dx_tx_data as dx
from sysexlib.models.sysex import check_sysex, is_sysex


class TestFraming:
    """Test that malformed data is rejected before identification."""

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            bytes([0xF0, 0x43, 0xF7]),
            bytes([0x90, 0x43, 0x00, 0xF7]),
            bytes([0xF0, 0x43, 0x00, 0x00]),
        ],
    )
    def test_malformed(self, data):
        """Test short data and missing start/end markers."""
        with pytest.raises(MalformedSysexError):
            create(data)
        assert not is_sysex(data)

    def test_none(self):
        """Test that None is malformed, not a TypeError."""
        with pytest.raises(MalformedSysexError):
            check_sysex(None)

    def test_expected_length(self):
        """Test constructing with an expected length."""
        data = bytes([0xF0, 0x01, 0x02, 0xF7])
        assert len(Sysex(data, expected_length=4)) == 4
        with pytest.raises(MalformedSysexError, match="Expected: 5"):
            Sysex(data, expected_length=5)

    def test_malformed_error_is_value_error(self):
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            create(bytes([0x00, 0x00, 0x00, 0x00]))


class TestGeneric:
    """Test messages with no specific type."""

    def test_known_manufacturer(self):
        """Test a Sequential Circuits message."""
        message = create(bytes([0xF0, 0x01, 0x02, 0x03, 0xF7]))
        assert message.kind == SysexKind.GENERIC
        assert message.manufacturer_id == (0x01,)
        assert message.manufacturer_name == "Sequential Circuits"
        assert message.device is None
        assert message.type is None
        assert not message.is_known_type
        assert message.checksum_valid is None
        assert message.describe() == "Sequential Circuits"

    def test_unknown_manufacturer(self):
        """Test an id missing from the table."""
        message = create(bytes([0xF0, 0x60, 0x00, 0xF7]))
        assert message.kind == SysexKind.GENERIC
        assert message.manufacturer_name is None
        assert message.describe() == "Unknown sysex"

    def test_manufacturer_without_rules(self):
        """Test that a known manufacturer without rules stays generic."""
        message = create(bytes([0xF0, 0x42, 0x30, 0x00, 0x01, 0xF7]))
        assert message.kind == SysexKind.GENERIC
        assert message.manufacturer_name == "Korg"

    def test_unknown_yamaha(self):
        """Test a Yamaha message matching no rule."""
        message = create(bytes([0xF0, 0x43, 0x10, 0x5F, 0x00, 0x00, 0x00, 0x01, 0xF7]))
        assert message.kind == SysexKind.GENERIC
        assert message.manufacturer_name == "Yamaha"
        assert not message.can_parse
        assert not message.is_container
        assert message.parameter_names == []
        assert message.to_dict() == {}
        assert message.validate() == []

    def test_generic_cannot_be_repaired(self):
        """Test that repair needs a known layout."""
        message = create(bytes([0xF0, 0x01, 0x02, 0x03, 0xF7]))
        with pytest.raises(NotImplementedError):
            message.repaired()
        with pytest.raises(NotImplementedError):
            message.get_item(0)


class TestBehringer:
    """Test Behringer identification."""

    def test_pro800(self):
        """Test a Pro-800 message with the three-byte id."""
        data = bytes([0xF0, 0x00, 0x20, 0x32, 0x00, 0x01, 0x24, 0x00, 0x78, 0x00, 0xF7])
        message = create(data)
        assert message.kind == SysexKind.BEHRINGER
        assert message.manufacturer_id == (0x00, 0x20, 0x32)
        assert message.manufacturer_name == "Behringer"
        assert message.device == "Pro-800"
        assert message.describe() == "Behringer Pro-800"

    def test_unknown_device(self):
        """Test a Behringer message for an unknown device."""
        message = create(bytes([0xF0, 0x00, 0x20, 0x32, 0x00, 0x01, 0x7F, 0xF7]))
        assert message.kind == SysexKind.BEHRINGER
        assert message.device is None


class TestMessageValue:
    """Test value semantics of messages."""

    def test_owns_copy(self):
        """Test that changing the input buffer does not change the message."""
        buffer = bytearray([0xF0, 0x01, 0x02, 0x03, 0xF7])
        message = create(buffer)
        buffer[2] = 0x7F
        assert message.data == bytes([0xF0, 0x01, 0x02, 0x03, 0xF7])
        assert isinstance(message.data, bytes)

    def test_equality(self):
        """Test that messages compare by data."""
        data = bytes([0xF0, 0x01, 0x02, 0x03, 0xF7])
        assert create(data) == create(bytearray(data))
        assert len({create(data), create(data)}) == 1
        assert create(data) != create(bytes([0xF0, 0x01, 0x02, 0x04, 0xF7]))

    def test_name(self):
        """Test explicit names."""
        message = create(bytes([0xF0, 0x01, 0x02, 0x03, 0xF7]), name="test")
        assert message.name == "test"
        assert create(bytes([0xF0, 0x01, 0x02, 0x03, 0xF7])).name is None

    def test_parse_alias(self):
        """Test that parse and create are the same operation."""
        assert parse is create
        assert sysexlib.parse is create


class TestComposite:
    """Test multi-part messages."""

    def test_generic_composite(self):
        """Test that unknown combinations are COMPOSITE."""
        first = bytes([0xF0, 0x01, 0x02, 0xF7])
        second = bytes([0xF0, 0x43, 0x10, 0x5F, 0xF7])
        message = create(first + second)
        assert message.kind == SysexKind.COMPOSITE
        assert message.is_composite
        assert [part.data for part in message.parts] == [first, second]
        assert message.manufacturer_name == "Sequential Circuits"
        assert not message.can_parse

    def test_split(self, dx7_voice_data):
        """Test splitting a stream into identified messages."""
        universal = bytes([0xF0, 0x7E, 0x00, 0x06, 0x01, 0xF7])
        messages = split(dx7_voice_data + universal)
        assert [m.kind for m in messages] == [SysexKind.DX7_VOICE, SysexKind.UNIVERSAL]
        assert messages[0].data == dx7_voice_data

    def test_combine(self, tx81z_voice_data):
        """Test that combining ACED and VCED gives a TX81Z voice."""
        aced, vced = split(tx81z_voice_data)
        assert aced.kind == SysexKind.TX81Z_ADDITIONAL_VOICE_DATA
        assert vced.kind == SysexKind.DX21_VOICE

        voice = combine([aced, vced], name="bass")
        assert voice.kind == SysexKind.TX81Z_VOICE
        assert voice.name == "bass"
        assert voice.data == tx81z_voice_data

    def test_malformed_composite(self):
        """Test that bytes between parts are rejected."""
        with pytest.raises(MalformedSysexError):
            create(bytes([0xF0, 0x01, 0xF7, 0x00, 0xF0, 0x01, 0xF7]))

    def test_interior_end_marker(self):
        """Test that an early F7 followed by stray data bytes is rejected."""
        data = bytes([0xF0, 0x43, 0x00, 0xF7, 0x01, 0x02, 0xF7])
        with pytest.raises(MalformedSysexError):
            create(data)
        with pytest.raises(MalformedSysexError):
            split(data)


class TestFiles:
    """Test loading and saving .syx files."""

    def test_load_binary(self, syx_file, dx7_bank_data):
        """Test loading a binary file, named after its stem."""
        path = syx_file(dx7_bank_data, "rom1a.syx")
        bank = load(path)
        assert bank.kind == SysexKind.DX7_BANK
        assert bank.name == "rom1a"
        assert sysexlib.load(str(path)) == bank

    def test_load_hex_text(self, syx_file):
        """Test loading a file of hex text."""
        path = syx_file(b"F0 43 10 01 02 05 F7\n", "change.syx")
        assert read_data(path) == bytes([0xF0, 0x43, 0x10, 0x01, 0x02, 0x05, 0xF7])
        message = load(path)
        assert message.kind == SysexKind.DX7_PARAMETER_CHANGE

    def test_load_garbage(self, syx_file):
        """Test that a file that is neither binary nor hex is malformed."""
        path = syx_file(b"not a sysex file", "garbage.syx")
        with pytest.raises(MalformedSysexError):
            load(path)

    def test_load_missing(self, tmp_path):
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            load(tmp_path / "missing.syx")

    def test_save_binary(self, tmp_path, dx7_voice_data):
        """Test writing a message as binary."""
        path = tmp_path / "voice.syx"
        save(create(dx7_voice_data), path)
        assert path.read_bytes() == dx7_voice_data

    def test_save_plain(self, tmp_path, dx7_voice_data):
        """Test writing hex text and reading it back."""
        path = tmp_path / "voice.txt"
        save(dx7_voice_data, path, plain=True)
        assert path.read_bytes()[:2] == b"F0"
        assert load(path).data == dx7_voice_data

    def test_save_plain_multiple(self, tmp_path, tx81z_voice_data):
        """Test that each part of a composite is written."""
        path = tmp_path / "tx81z.txt"
        save(create(tx81z_voice_data), path, plain=True)
        assert load(path).kind == SysexKind.TX81Z_VOICE

    def test_save_plain_rejects_status_bytes(self, tmp_path):
        """Test that a segment holding an F0 cannot be written as hex text."""
        message = create(bytes([0xF0, 0x01, 0xF0, 0x02, 0xF7]))
        path = tmp_path / "bad.txt"
        with pytest.raises(MalformedSysexError):
            save(message, path, plain=True)
        assert not path.exists()

        save(message, tmp_path / "bad.syx")
        assert (tmp_path / "bad.syx").read_bytes() == message.data


class TestProperties:
    """Test properties that hold for every message."""

    def test_parse_idempotence(self, dx7_bank_data, tx81z_voice_data):
        """Test that parsing a message's bytes again gives the same message."""
        samples = [
            dx7_bank_data,
            tx81z_voice_data,
            bytes([0xF0, 0x7E, 0x00, 0x03, 0x01, 0x05, 0xF7]),
            bytes([0xF0, 0x41, 0x10, 0x42, 0x12, 0x40, 0x00, 0x7F, 0x00, 0x41, 0xF7]),
        ]
        for data in samples:
            message = create(data)
            again = create(message.data)
            assert again.data == message.data == data
            assert again.kind == message.kind

    def test_bank_addressing(self):
        """Test that items are evenly spaced."""
        for bank in (dx.DX7_BANK, dx.DX21_BANK, dx.TX81Z_BANK):
            for i in range(bank.item_count - 1):
                assert bank.item_offset(i + 1) - bank.item_offset(i) == bank.item_size

    def test_dx7_bank_scenario(self):
        """Test that any 4104-byte DX7 bank header is a DX7 bank."""
        data = bytes([0xF0, 0x43, 0x00, 0x09, 0x20, 0x00]) + bytes(4096) + bytes([0x00, 0xF7])
        message = create(data)
        assert message.manufacturer_name == "Yamaha"
        assert message.device == "DX7"
        assert message.type == "32-voice bank"
        assert message.item_count == 32

    def test_sample_dump_request_scenario(self):
        """Test a universal message with no manufacturer."""
        message = create(bytes([0xF0, 0x7E, 0x00, 0x03, 0x01, 0x05, 0xF7]))
        assert message.kind == SysexKind.UNIVERSAL
        assert message.manufacturer_name is None
        assert message.type == "Sample Dump Request"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
