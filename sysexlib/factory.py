"""
Sysex factory: identifies raw data and creates Sysex messages.

Dispatch order:
1. Framing check (F0 ... F7, minimum length)
2. Multiple segments: each segment is created on its own, then the
   composite rules of the first part's manufacturer are tried. Unknown
   combinations become a generic COMPOSITE message.
3. Universal messages (0x7E / 0x7F)
4. Manufacturer rules (Yamaha, Roland, Behringer), first match wins
5. Anything else is a GENERIC message with device and type unset
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

import mido

from sysexlib.constants import START_OF_SYSEX, UNIVERSAL_IDS
from sysexlib.framing import join, split_segments
from sysexlib.manufacturers import behringer, roland, universal, yamaha
from sysexlib.manufacturers.ids import ManufacturerId, get_id
from sysexlib.models.kind import Identity, SysexKind
from sysexlib.models.sysex import Sysex, check_sysex
from sysexlib.utils.validation import MalformedSysexError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray]

IDENTIFIERS: Dict[ManufacturerId, Callable[[BytesLike], Identity]] = {
    (0x41,): roland.identify,
    (0x43,): yamaha.identify,
    (0x00, 0x20, 0x32): behringer.identify,
}

COMPOSITE_IDENTIFIERS: Dict[
    ManufacturerId, Callable[[Sequence[SysexKind]], Optional[Identity]]
] = {
    (0x43,): yamaha.identify_composite,
}


def identify(data: BytesLike) -> Identity:
    """
    Identify a single (non-composite) message.

    Args:
        data: Framed sysex data

    Returns:
        Identity; GENERIC with device and type unset if nothing matches
    """
    if data[1] in UNIVERSAL_IDS:
        return universal.identify(data)

    identifier = IDENTIFIERS.get(get_id(data))
    if identifier is None:
        return Identity(SysexKind.GENERIC)
    return identifier(data)


def create(data: BytesLike, name: Optional[str] = None) -> Sysex:
    """
    Create an identified Sysex from raw data.

    Args:
        data: One sysex message, or several back to back
        name: Optional display name (e.g. file name)

    Returns:
        Sysex of the most specific known kind

    Raises:
        MalformedSysexError: If the data is not well-formed sysex
    """
    check_sysex(data)

    # An interior F7 must end a complete part, never a stray run of bytes
    segments = split_segments(data)
    if len(segments) > 1:
        return _create_composite(segments, data, name)

    identity = identify(data)
    logger.debug(
        "Identified %d bytes as %s (%s / %s)",
        len(data),
        identity.kind.name,
        identity.device,
        identity.type,
    )
    return Sysex(data, name, identity=identity)


# Alias used by callers that think in terms of parsing
parse = create


def _create_composite(
    segments: Sequence[bytes], data: BytesLike, name: Optional[str]
) -> Sysex:
    parts = [create(segment) for segment in segments]
    logger.debug("Composite message with %d parts", len(parts))

    identity = None
    composite_identifier = COMPOSITE_IDENTIFIERS.get(parts[0].manufacturer_id)
    if composite_identifier is not None:
        identity = composite_identifier([part.kind for part in parts])

    if identity is None:
        identity = Identity(SysexKind.COMPOSITE)

    return Sysex(data, name, identity=identity, parts=parts)


def split(data: BytesLike) -> List[Sysex]:
    """Split a stream into individually identified messages."""
    return [create(segment) for segment in split_segments(data)]


def combine(messages: Iterable[Union[Sysex, BytesLike]], name: Optional[str] = None) -> Sysex:
    """Join messages into one (composite) message and identify it."""
    return create(join(messages), name)


def read_data(path: Union[str, Path]) -> bytes:
    """
    Read sysex bytes from a .syx file.

    Binary files are read as-is. Files that do not start with F0 are read
    as hex text (e.g. "F0 43 00 ... F7"), one or more messages.
    """
    path = Path(path)
    data = path.read_bytes()
    if data and data[0] != START_OF_SYSEX:
        logger.debug("%s does not start with F0, reading as hex text", path)
        try:
            messages = mido.read_syx_file(str(path))
        except ValueError as e:
            raise MalformedSysexError(f"{path} is neither binary nor hex text sysex") from e
        data = b"".join(bytes(message.bin()) for message in messages)
    return data


def load(path: Union[str, Path]) -> Sysex:
    """
    Load and identify a .syx file.

    The file's stem is used as the message name.

    Raises:
        OSError: If the file cannot be read
        MalformedSysexError: If the file does not hold sysex data
    """
    path = Path(path)
    return create(read_data(path), name=path.stem)


def save(message: Union[Sysex, BytesLike], path: Union[str, Path], plain: bool = False) -> None:
    """
    Write a message to a .syx file.

    Args:
        message: Sysex (or raw bytes) to write
        path: Output path
        plain: Write hex text instead of binary

    Raises:
        MalformedSysexError: If plain is set and a segment holds bytes
            that are not 7-bit data
    """
    data = bytes(getattr(message, "data", message))
    if plain:
        segments = split_segments(data)
        try:
            mido_messages = [mido.Message("sysex", data=segment[1:-1]) for segment in segments]
        except ValueError as e:
            raise MalformedSysexError(f"Cannot write {path} as hex text: {e}") from e
        mido.write_syx_file(str(path), mido_messages, plaintext=True)
    else:
        Path(path).write_bytes(data)
