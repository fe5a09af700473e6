"""
Roland sysex identification.

Roland uses two families of message formats:

Legacy (1980s devices, each with its own layout), e.g.
    Juno-106 patch data:  F0 41 30 <channel> <patch> [data...] F7
    MKS-70 / JX-10:       F0 41 <op> <channel> 24 ...

Standard (most devices since the late 1980s):
    F0 41 <device id> <model id (1-4 bytes)> <command id> [address/data...] F7

Legacy headers are checked first, in table order. Some legacy entries
share a template and length with an earlier entry (device documentation
lists both); the first entry wins.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple, Union

from sysexlib.models.kind import Identity, SysexKind
from sysexlib.utils.pattern import Template, matches_pattern

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray]

ROLAND_ID = 0x41

STANDARD_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x41,  # Roland
    None,  # device id (usually 0x00-0x1F, 0x7F = broadcast)
    None,  # model id (may be several bytes)
    None,  # command id
)

# Model id starts after F0 41 <device id>
MODEL_ID_OFFSET = 3

STANDARD_COMMAND_IDS = MappingProxyType(
    {
        0x11: "Data request",  # one way transfer
        0x12: "Data set",  # one way transfer
        0x40: "Send request",
        0x41: "Data request",  # handshake mode
        0x42: "Data set",  # handshake mode
        0x43: "Acknowledge",
        0x45: "End-of-data",
        0x4E: "Communication error",
        0x4F: "Rejection",
    }
)

# Ordered (model id, device) pairs. 0x3D is shared by JD-800 and JX-1.
MODEL_IDS: Tuple[Tuple[Tuple[int, ...], str], ...] = (
    # Single-byte ids
    ((0x10,), "S-10"),  # also: S-220, MKS-100
    ((0x14,), "D-50"),
    ((0x16,), "D-20"),  # also: MT-32, D-10, D-110
    ((0x18,), "S-50"),
    ((0x1D,), "TR-626"),
    ((0x1E,), "S-550"),  # also: S-330
    ((0x28,), "R-8"),
    ((0x2B,), "U-110"),  # also: U-20, U-220
    ((0x34,), "S-770"),
    ((0x39,), "D-70"),
    ((0x3A,), "MC-307"),
    ((0x3D,), "JD-800"),
    ((0x3D,), "JX-1"),
    ((0x42,), "GS"),  # used by several devices in GS mode
    ((0x45,), "Display Data"),  # SC-55, SC-88 screen contents
    ((0x46,), "JV-1000"),  # also: JV-80, JV-90, JV-880
    ((0x4D,), "JV-30"),
    ((0x50,), "R-70"),
    ((0x53,), "DJ-70"),
    ((0x57,), "JD-990"),
    ((0x5E,), "R-8 MKII"),
    ((0x6A,), "JV-1080"),  # also: JV-1010, JV-2080, XP-30, XP-50, XP-60, XP-80
    ((0x7B,), "XP-10"),
    # Multi-byte ids
    ((0x00, 0x03), "MC-303"),
    ((0x00, 0x06), "JP-8000"),  # also: JP-8080
    ((0x00, 0x0B), "JX-305"),  # also: MC-307, MC-505
    ((0x00, 0x0D), "D2"),
    ((0x00, 0x10), "XV-3080"),  # also: XV-5050, XV-5080
    ((0x00, 0x18), "EG-101"),
    ((0x00, 0x1D), "VP-9000"),
    ((0x00, 0x4A), "SH-32"),
    ((0x00, 0x4F), "MC-09"),
    ((0x00, 0x53), "V-Synth"),
    ((0x00, 0x59), "MC-909"),
    ((0x00, 0x64), "Juno-D"),  # also: RS-50, RS-70
    ((0x00, 0x6B), "Fantom-S"),  # also: Fantom-S88, Fantom-X6/X7/X8
    ((0x00, 0x00, 0x14), "MC-808"),
    ((0x00, 0x00, 0x15), "Juno-G"),
    ((0x00, 0x00, 0x16), "SH-201"),
    ((0x00, 0x00, 0x25), "Juno-Stage"),  # also: SonicCell
    ((0x00, 0x00, 0x3A), "Juno-Di"),  # also: Juno-DS61, Juno-DS88
    ((0x00, 0x00, 0x3B), "VP-770"),
    ((0x00, 0x00, 0x41), "Gaia SH-01"),
    ((0x00, 0x00, 0x55), "Jupiter-80"),
    ((0x00, 0x00, 0x00, 0x0F), "JD-XA"),
    ((0x00, 0x00, 0x00, 0x65), "Jupiter-X"),  # also: Jupiter-Xm
)


@dataclass(frozen=True)
class LegacyHeader:
    """A legacy message template with an optional exact message length."""

    pattern: Template
    length: Optional[int]
    device: str
    type: str

    def matches(self, data: BytesLike) -> bool:
        if not matches_pattern(data, self.pattern):
            return False
        return self.length is None or self.length == len(data)


LEGACY_HEADERS: Tuple[LegacyHeader, ...] = (
    # TR-707 (also: TR-727, TR-909)
    LegacyHeader((0xF0, 0x41, 0x50, 0xF7), 4, "TR-707", "Want to send file"),  # WSF
    LegacyHeader((0xF0, 0x41, 0x51, 0xF7), 4, "TR-707", "Request file"),  # RQF
    LegacyHeader((0xF0, 0x41, 0x52, 0x01), 519, "TR-909", "Data"),  # DAT, format 01 = 909
    LegacyHeader((0xF0, 0x41, 0x52, 0x02), 519, "TR-707", "Data"),  # DAT, format 02 = 707/727
    LegacyHeader((0xF0, 0x41, 0x53, 0xF7), 4, "TR-707", "Acknowledge"),  # PAS
    LegacyHeader((0xF0, 0x41, 0x54, 0xF7), 4, "TR-707", "Continue"),  # CNT
    LegacyHeader((0xF0, 0x41, 0x70, 0xF7), 4, "TR-909", "Abort"),
    LegacyHeader((0xF0, 0x41, 0x71, 0xF7), 4, "TR-909", "Error"),
    # Juno-106 (also HS-60, MKS-7)
    LegacyHeader((0xF0, 0x41, 0x30), 24, "Juno-106", "Patch data"),
    LegacyHeader((0xF0, 0x41, 0x31), 24, "Juno-106", "Manual mode"),
    LegacyHeader((0xF0, 0x41, 0x32), 7, "Juno-106", "Control change"),
    # JX-8P: F0 41 <op> <unit> 21 <level> <group>
    LegacyHeader((0xF0, 0x41, 0x34, None, 0x21, 0x20, 0x01), None, "JX-8P", "Program number"),
    LegacyHeader((0xF0, 0x41, 0x35, None, 0x21, 0x20, 0x01), None, "JX-8P", "All tone parameters"),
    LegacyHeader(
        (0xF0, 0x41, 0x36, None, 0x21, 0x20, 0x01), None, "JX-8P", "Individual tone parameter"
    ),
    LegacyHeader(
        (0xF0, 0x41, 0x35, None, 0x21, 0x30, 0x01), None, "JX-8P", "All patch parameters"
    ),
    LegacyHeader(
        (0xF0, 0x41, 0x36, None, 0x21, 0x30, 0x01), None, "JX-8P", "Individual patch parameter"
    ),
    # JX-10
    LegacyHeader((0xF0, 0x41, 0x40, None, 0x24), None, "JX-10", "Send request"),
    LegacyHeader((0xF0, 0x41, 0x41, None, 0x24), None, "JX-10", "Data request"),
    LegacyHeader((0xF0, 0x41, 0x42, None, 0x24), 135, "JX-10", "Data"),
    LegacyHeader((0xF0, 0x41, 0x43, None, 0x24), 6, "JX-10", "Acknowledge"),
    LegacyHeader((0xF0, 0x41, 0x45, None, 0x24), 6, "JX-10", "End-of-file"),
    LegacyHeader((0xF0, 0x41, 0x4E, None, 0x24), 6, "JX-10", "Communication error"),
    LegacyHeader((0xF0, 0x41, 0x4F, None, 0x24), 6, "JX-10", "Rejection"),
    # Alpha Juno-1 (also Alpha Juno-2): F0 41 <op> <unit> 23 <level> <group>
    LegacyHeader(
        (0xF0, 0x41, 0x35, None, 0x23, 0x20, 0x01), 54, "Alpha Juno-1", "All tone parameters"
    ),
    LegacyHeader(
        (0xF0, 0x41, 0x35, None, 0x23, 0x20, 0x01),
        44,
        "Alpha Juno-1",
        "All tone parameters (without tone name)",
    ),
    LegacyHeader(
        (0xF0, 0x41, 0x36, None, 0x23, 0x20, 0x01),
        None,
        "Alpha Juno-1",
        "Individual tone parameter",
    ),
    LegacyHeader((0xF0, 0x41, 0x37, None, 0x23, 0x20, 0x01), None, "Alpha Juno-1", "Bulk dump"),
    # MKS-70
    LegacyHeader((0xF0, 0x41, 0x34, None, 0x24), 11, "MKS-70", "Program number (patch)"),
    LegacyHeader((0xF0, 0x41, 0x34, None, 0x24), 11, "MKS-70", "Program number (tone)"),
    LegacyHeader((0xF0, 0x41, 0x35, None, 0x24), 59, "MKS-70", "Patch data"),
    LegacyHeader((0xF0, 0x41, 0x35, None, 0x24), 67, "MKS-70", "Tone data"),
    LegacyHeader((0xF0, 0x41, 0x36, None, 0x24), 10, "MKS-70", "Patch parameter"),
    LegacyHeader((0xF0, 0x41, 0x36, None, 0x24), 10, "MKS-70", "Tone parameter"),
    LegacyHeader((0xF0, 0x41, 0x37, None, 0x24), 106, "MKS-70", "Patch bulk dump"),
    LegacyHeader((0xF0, 0x41, 0x37, None, 0x24), 69, "MKS-70", "Tone bulk dump"),
    # MKS-80
    LegacyHeader(
        (0xF0, 0x41, 0x36, None, 0x20, 0x20), None, "MKS-80", "Individual tone parameter(s)"
    ),
    LegacyHeader(
        (0xF0, 0x41, 0x36, None, 0x20, 0x30), None, "MKS-80", "Individual patch parameter(s)"
    ),
    LegacyHeader((0xF0, 0x41, 0x35, None, 0x20, 0x20), 56, "MKS-80", "All tone parameters"),
    LegacyHeader((0xF0, 0x41, 0x35, None, 0x20, 0x30), 23, "MKS-80", "All patch parameters"),
    LegacyHeader((0xF0, 0x41, 0x34, None, 0x20, 0x30), 11, "MKS-80", "Program number"),
)


def identify(data: BytesLike) -> Identity:
    """
    Identify a Roland message.

    Returns:
        Identity of kind ROLAND; device and type are None when unknown
    """
    for header in LEGACY_HEADERS:
        if header.matches(data):
            logger.debug("Roland legacy header: %s %s", header.device, header.type)
            return Identity(SysexKind.ROLAND, header.device, header.type)

    if not matches_pattern(data, STANDARD_HEADER):
        return Identity(SysexKind.ROLAND)

    for model_id, device in MODEL_IDS:
        if not matches_pattern(data, model_id, MODEL_ID_OFFSET):
            continue
        command_offset = MODEL_ID_OFFSET + len(model_id)
        command = STANDARD_COMMAND_IDS.get(data[command_offset])
        logger.debug("Roland model id %s: %s", model_id, device)
        return Identity(SysexKind.ROLAND, device, command)

    return Identity(SysexKind.ROLAND)
