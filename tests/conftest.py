"""Test configuration and fixtures.

Device dumps are synthesized in memory from the parameter tables, with
every numeric parameter set to the middle of its range and voice names
taken from the DX7 ROM1A cartridge.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from sysexlib.manufacturers.yamaha import dx_tx_data as dx
from sysexlib.models.layout import BankFormat
from sysexlib.models.parameter import AsciiParameter, Parameter
from sysexlib.utils.checksum import two_complement_7bit
from sysexlib.utils.pattern import template_literals

DX7_ROM1A_NAMES = [
    "BRASS   1",
    "BRASS   2",
    "BRASS   3",
    "STRINGS 1",
    "STRINGS 2",
    "STRINGS 3",
    "ORCHESTRA",
    "PIANO   1",
    "PIANO   2",
    "PIANO   3",
    "E.PIANO 1",
    "GUITAR  1",
    "GUITAR  2",
    "SYN-LEAD 1",
    "BASS    1",
    "BASS    2",
    "E.ORGAN 1",
    "PIPES   1",
    "HARPSICH 1",
    "CLAV    1",
    "VIBE    1",
    "MARIMBA",
    "KOTO",
    "FLUTE   1",
    "ORCH-CHIME",
    "TUB BELLS",
    "STEEL DRUM",
    "TIMPANI",
    "REFS WHISL",
    "VOICE   1",
    "TRAIN",
    "TAKE OFF",
]


def sample_values(parameters: Sequence[Parameter], name: str = "TEST VOICE") -> Dict[str, Any]:
    """Valid values for every parameter: mid-range numbers and the given name."""
    values: Dict[str, Any] = {}
    for parameter in parameters:
        if isinstance(parameter, AsciiParameter):
            values[parameter.name] = name
        else:
            values[parameter.name] = (parameter.min_value + parameter.max_value) // 2
    return values


def build_bank(
    bank_format: BankFormat,
    names: List[str],
    fill_item: Optional[Callable[[bytearray, int], None]] = None,
    channel: int = 0,
) -> bytes:
    """Build a bank dump from sample values, one name per item."""
    data = bytearray(bank_format.total_length)
    data[: bank_format.header_length] = template_literals(bank_format.header, channel)

    for index, name in enumerate(names):
        offset = bank_format.item_offset(index)
        values = sample_values(bank_format.parameters, name)
        for parameter in bank_format.parameters:
            parameter.set_value(data, values[parameter.name], offset)
        if fill_item is not None:
            fill_item(data, offset)

    data[-2] = two_complement_7bit(data[bank_format.header_length : -2])
    data[-1] = 0xF7
    return bytes(data)


def fix_checksum(data: bytearray, start: int = 6) -> bytes:
    """Recompute the two's complement checksum of a single dump."""
    data[-2] = two_complement_7bit(data[start:-2])
    return bytes(data)


def _tx81z_fill(data: bytearray, offset: int) -> None:
    start = offset + dx.TX81Z_UNUSED_PITCH_EG_OFFSET
    data[start : start + len(dx.TX81Z_UNUSED_PITCH_EG)] = dx.TX81Z_UNUSED_PITCH_EG


@pytest.fixture
def dx7_bank_data():
    """Raw DX7 32-voice bank with the ROM1A voice names."""
    return build_bank(dx.DX7_BANK, DX7_ROM1A_NAMES)


@pytest.fixture
def dx7_voice_values():
    return sample_values(dx.DX7_VOICE.parameters, "E.PIANO 1")


@pytest.fixture
def dx7_voice_data(dx7_voice_values):
    """Raw DX7 single voice dump."""
    return dx.DX7_VOICE.build(dx7_voice_values)


@pytest.fixture
def dx21_voice_data():
    """Raw DX21 single voice dump."""
    return dx.DX21_VOICE.build(sample_values(dx.DX21_VOICE.parameters, "DX21 BASS"))


@pytest.fixture
def dx21_bank_data():
    """Raw DX21 32-voice bank."""
    return build_bank(dx.DX21_BANK, [f"DX21 {i + 1:02d}" for i in range(32)])


@pytest.fixture
def tx81z_bank_data():
    """Raw TX81Z 32-voice bank."""
    return build_bank(dx.TX81Z_BANK, [f"TX81Z {i + 1:02d}" for i in range(32)], _tx81z_fill)


@pytest.fixture
def tx81z_voice_values():
    values = sample_values(dx.TX81Z_ADDITIONAL_VOICE_DATA.parameters)
    values.update(sample_values(dx.TX81Z_VCED.parameters, "LatelyBass"))
    return values


@pytest.fixture
def tx81z_voice_data(tx81z_voice_values):
    """Raw TX81Z voice: ACED message followed by VCED message."""
    return dx.TX81Z_VOICE.build(tx81z_voice_values)


@pytest.fixture
def syx_file(tmp_path):
    """Factory writing bytes to a .syx file in a temp directory."""

    def write(data: bytes, name: str = "test.syx") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return write
