"""
Behringer sysex identification.

Behringer uses the three-byte manufacturer id 00 20 32:
    F0 00 20 32 <device id> <model...> [data...] F7
"""

from typing import Tuple

from sysexlib.models.kind import Identity, SysexKind
from sysexlib.utils.pattern import BytesLike, Template, matches_pattern

DEVICE_HEADERS: Tuple[Tuple[Template, str], ...] = (
    ((0xF0, 0x00, 0x20, 0x32, 0x00, 0x01, 0x24, 0x00), "Pro-800"),
)


def identify(data: BytesLike) -> Identity:
    for header, device in DEVICE_HEADERS:
        if matches_pattern(data, header):
            return Identity(SysexKind.BEHRINGER, device)
    return Identity(SysexKind.BEHRINGER)
