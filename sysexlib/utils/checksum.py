"""
Sysex checksum calculation utilities.

Two algorithms are in common use:

Two's complement (Yamaha DX/TX bulk dumps):
1. Sum all bytes of the checksummed range
2. Take the lower 7 bits of the sum
3. Subtract from 128 (0x80)
4. Mask to 7 bits, so a result of 128 becomes 0

XOR (MIDI Sample Dump Standard data packets):
1. XOR all bytes of the checksummed range, starting from an initial value
2. Mask to 7 bits

Checksums are always recomputed when a message is built from parameter
values; a caller-supplied checksum is never reused.
"""

from typing import List, Union


def two_complement_7bit(data: Union[bytes, bytearray, List[int]]) -> int:
    """
    Calculate the 7-bit two's complement checksum of data.

    Args:
        data: Bytes to calculate checksum over (the checksummed range only,
            not F0, header bytes, the checksum itself or F7)

    Returns:
        Checksum value (0-127)

    Example:
        >>> two_complement_7bit(bytes([0x01, 0x02, 0x03]))
        122
    """
    if isinstance(data, list):
        data = bytes(data)

    total_7bit = sum(data) & 0x7F

    return (128 - total_7bit) & 0x7F


def xor_7bit(
    data: Union[bytes, bytearray, List[int]], offset: int = 0, start_value: int = 0x00
) -> int:
    """
    Calculate the 7-bit XOR checksum of data.

    Args:
        data: Bytes to calculate checksum over
        offset: Bytes before this index are ignored
        start_value: Initial value

    Returns:
        Checksum value (0-127)
    """
    if isinstance(data, list):
        data = bytes(data)

    value = start_value
    for byte in data[offset:]:
        value ^= byte
    return value & 0x7F


def verify_checksum(data: Union[bytes, bytearray, List[int]], expected_checksum: int) -> bool:
    """
    Verify a two's complement checksum.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return two_complement_7bit(data) == expected_checksum


def verify_xor_checksum(
    data: Union[bytes, bytearray, List[int]], expected_checksum: int, start_value: int = 0x00
) -> bool:
    """Verify an XOR checksum."""
    return xor_7bit(data, start_value=start_value) == expected_checksum


def add_checksum(data: Union[bytes, bytearray, List[int]]) -> bytes:
    """
    Calculate and append a two's complement checksum to data.

    Args:
        data: Checksummed range

    Returns:
        Original data with checksum appended
    """
    if isinstance(data, list):
        data = bytes(data)

    return bytes(data) + bytes([two_complement_7bit(data)])
