"""
Byte pattern matching and text helpers.

Patterns (templates) are sequences of optional byte values. A ``None``
entry is a wildcard that matches any byte, used for channel numbers,
device ids and other bytes that vary between dumps of the same type.

Example:
    DX21 single voice header: F0 43 <channel> 03 00 5D
    pattern = (0xF0, 0x43, None, 0x03, 0x00, 0x5D)
"""

from typing import Optional, Sequence, Tuple, Union

Template = Tuple[Optional[int], ...]

BytesLike = Union[bytes, bytearray]


def matches_pattern(data: BytesLike, pattern: Sequence[Optional[int]], offset: int = 0) -> bool:
    """
    Check if data contains the pattern starting at offset.

    Args:
        data: Actual sysex bytes
        pattern: Expected values, None matches any byte
        offset: Offset in data where the pattern is expected to start

    Returns:
        True if the pattern matches at offset
    """
    if len(data) < len(pattern) + offset:
        return False

    for i, expected in enumerate(pattern):
        if expected is None:
            continue
        if data[i + offset] != expected:
            return False

    return True


def are_zero(data: BytesLike, offset: int, length: int) -> bool:
    """
    Check that length bytes starting at offset are all zero.

    Returns False if the range extends past the end of data.
    """
    if offset < 0 or offset + length > len(data):
        return False
    return not any(data[offset : offset + length])


def is_printable(char: str) -> bool:
    """Check if a character is in the printable ASCII range (0x20-0x7E)."""
    return 0x20 <= ord(char) <= 0x7E


def has_non_printable(text: str) -> bool:
    """Return True if text has any character outside printable ASCII."""
    return any(not is_printable(c) for c in text)


def replace_non_printable(text: str, replacement: str = " ") -> str:
    """Replace characters outside printable ASCII with replacement."""
    return "".join(c if is_printable(c) else replacement for c in text)


def template_literals(pattern: Sequence[Optional[int]], fill: int = 0x00) -> bytes:
    """
    Materialize a template as bytes, substituting fill for wildcards.

    Args:
        pattern: Template to materialize
        fill: Value used for wildcard positions (e.g. a MIDI channel)
    """
    return bytes(fill if b is None else b for b in pattern)


def format_pattern(pattern: Sequence[Optional[int]]) -> str:
    """Format a template as hex, with ``??`` for wildcards."""
    return " ".join("??" if b is None else f"{b:02X}" for b in pattern)
