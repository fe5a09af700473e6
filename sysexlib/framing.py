"""
Sysex framing: splitting a byte stream into messages and joining them.

A stream (or composite message) is a sequence of framed segments:
    [F0 ... F7][F0 ... F7] ...

Each segment starts at an F0 and ends at the next F7 (inclusive). Bytes
between segments are not allowed.
"""

import logging
from typing import Any, Iterable, List, Union

from sysexlib.constants import END_OF_SYSEX, START_OF_SYSEX
from sysexlib.utils.validation import MalformedSysexError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray]


def segment_offsets(data: BytesLike) -> List[int]:
    """
    Find the start offset of every segment.

    Only F0 bytes found outside a segment count as a start; an F0 inside
    a segment is treated as data.

    Returns:
        Offsets of each segment's F0
    """
    offsets = []
    inside = False
    for i, byte in enumerate(data):
        if not inside and byte == START_OF_SYSEX:
            offsets.append(i)
            inside = True
        elif inside and byte == END_OF_SYSEX:
            inside = False
    return offsets


def count_segments(data: BytesLike) -> int:
    """Count the framed segments in data, without validating framing."""
    return len(segment_offsets(data))


def split_segments(data: BytesLike) -> List[bytes]:
    """
    Split data into framed segments.

    Args:
        data: One or more sysex messages back to back

    Returns:
        List of segments, each starting with F0 and ending with F7

    Raises:
        MalformedSysexError: If a byte outside a segment is not F0, or the
            last segment is not terminated by F7
    """
    segments = []
    start = None

    for i, byte in enumerate(data):
        if start is None:
            if byte != START_OF_SYSEX:
                raise MalformedSysexError(
                    f"Expected start-of-exclusive (0xF0) at offset {i} "
                    f"(segment {len(segments) + 1}), found 0x{byte:02X}"
                )
            start = i
        elif byte == END_OF_SYSEX:
            segments.append(bytes(data[start : i + 1]))
            start = None

    if start is not None:
        raise MalformedSysexError(
            f"Segment {len(segments) + 1} starting at offset {start} "
            f"is not terminated by end-of-exclusive (0xF7)"
        )

    logger.debug("Split %d bytes into %d segment(s)", len(data), len(segments))
    return segments


def join(messages: Iterable[Any]) -> bytes:
    """
    Concatenate messages into a single byte string.

    Accepts raw byte strings or objects with a ``data`` attribute
    (e.g. Sysex instances).
    """
    chunks = []
    for message in messages:
        chunks.append(bytes(getattr(message, "data", message)))
    return b"".join(chunks)
