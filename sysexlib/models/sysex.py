"""
Sysex message model.

One class covers every message type. What a message is (DX7 bank, Roland
data set, unknown, ...) is carried by its ``kind`` tag; how its bytes are
laid out is carried by its ``layout``:

    VoiceFormat      single parseable message (parameters by name)
    BankFormat       container of fixed-size items
    CompositeFormat  several framed messages forming one logical message

Messages own an immutable copy of their bytes. Every operation that
changes data (item extraction, repair, build from values) produces a new
message.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from sysexlib.constants import (
    END_OF_SYSEX,
    MIN_SYSEX_LENGTH,
    START_OF_SYSEX,
    UNIVERSAL_IDS,
)
from sysexlib.manufacturers import universal
from sysexlib.manufacturers.ids import ManufacturerId, get_id, get_name
from sysexlib.models.kind import Identity, SysexKind
from sysexlib.models.layout import BankFormat, CompositeFormat, VoiceFormat
from sysexlib.utils.validation import MalformedSysexError, ValidationError

BytesLike = Union[bytes, bytearray]


def check_sysex(data: BytesLike, expected_length: Optional[int] = None) -> None:
    """
    Check basic sysex framing.

    Raises:
        MalformedSysexError: If data is too short, does not start with F0,
            does not end with F7, or does not have the expected length
    """
    if data is None:
        raise MalformedSysexError("Data is None.")
    if len(data) < MIN_SYSEX_LENGTH:
        raise MalformedSysexError(
            f"Data is too short to be a sysex message ({len(data)} bytes)."
        )
    if data[0] != START_OF_SYSEX:
        raise MalformedSysexError(
            f"Data does not start with start-of-exclusive (0xF0), found 0x{data[0]:02X}."
        )
    if data[-1] != END_OF_SYSEX:
        raise MalformedSysexError(
            f"Data does not end with end-of-exclusive (0xF7), found 0x{data[-1]:02X}."
        )
    if expected_length is not None and len(data) != expected_length:
        raise MalformedSysexError(
            f"Data was not of the expected length. "
            f"Expected: {expected_length}, actual: {len(data)}."
        )


def is_sysex(data: BytesLike) -> bool:
    """True if data passes the basic framing check."""
    try:
        check_sysex(data)
    except MalformedSysexError:
        return False
    return True


class Sysex:
    """
    A sysex message.

    Use ``sysexlib.parse`` (or ``sysexlib.load``) to create identified
    messages; constructing a Sysex directly only checks framing and yields
    a GENERIC message unless an identity is supplied.

    Attributes:
        name: Display name (file name or voice name), may be None
        kind: Variant tag
        layout: VoiceFormat, BankFormat or CompositeFormat, or None
        parts: Component messages of a composite (empty otherwise)
    """

    def __init__(
        self,
        data: BytesLike,
        name: Optional[str] = None,
        expected_length: Optional[int] = None,
        identity: Optional[Identity] = None,
        parts: Sequence["Sysex"] = (),
    ):
        check_sysex(data, expected_length)
        self._data = bytes(data)
        self._identity = identity if identity is not None else Identity(SysexKind.GENERIC)
        self.parts = tuple(parts)
        self._name = name

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def name(self) -> Optional[str]:
        if self._name is not None:
            return self._name
        if self.can_parse:
            return self.layout.voice_name(self._data)
        return None

    @property
    def length(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def kind(self) -> SysexKind:
        return self._identity.kind

    @property
    def layout(self) -> Optional[Any]:
        return self._identity.layout

    @property
    def device(self) -> Optional[str]:
        return self._identity.device

    @property
    def type(self) -> Optional[str]:
        return self._identity.type

    @property
    def manufacturer_id(self) -> ManufacturerId:
        return get_id(self._data)

    @property
    def manufacturer_name(self) -> Optional[str]:
        if self._data[1] in UNIVERSAL_IDS:
            return None
        return get_name(self.manufacturer_id)

    @property
    def is_universal(self) -> bool:
        return self._data[1] in UNIVERSAL_IDS

    @property
    def is_known_type(self) -> bool:
        return self.device is not None or self.type is not None

    @property
    def can_parse(self) -> bool:
        """True if parameters can be read by name."""
        return isinstance(self.layout, (VoiceFormat, CompositeFormat))

    @property
    def is_container(self) -> bool:
        """True if the message holds extractable items."""
        return isinstance(self.layout, BankFormat)

    @property
    def is_composite(self) -> bool:
        return len(self.parts) > 1

    @property
    def checksum_valid(self) -> Optional[bool]:
        """
        Whether the embedded checksum matches the data.

        None for messages without a known checksum.
        """
        if self.layout is not None:
            return self.layout.checksum_valid(self._data)
        if self.is_universal:
            return universal.checksum_valid(self._data)
        return None

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @property
    def item_count(self) -> int:
        return self.layout.item_count if self.is_container else 0

    def item_names(self) -> Optional[List[str]]:
        if not self.is_container:
            return None
        return self.layout.item_names(self._data)

    def get_item(self, index: int) -> "Sysex":
        """
        Extract an item as a new, standalone message.

        Raises:
            NotImplementedError: If this message has no items
            IndexError: If index is out of range
        """
        if not self.is_container:
            raise NotImplementedError(f"{self.describe()} has no items")
        item_data = self.layout.extract_item(self._data, index, self._channel())

        # Deferred: the factory imports this module
        from sysexlib.factory import create

        return create(item_data)

    def set_item(self, index: int, item: "Sysex") -> "Sysex":
        raise NotImplementedError("Replacing bank items is not supported")

    def _channel(self) -> int:
        # Channel is the first wildcard header byte, if the header has one
        header = getattr(self.layout, "header", ())
        for position, expected in enumerate(header):
            if expected is None:
                return self._data[position] & 0x0F
        return 0

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def parameter_names(self) -> List[str]:
        return self.layout.parameter_names() if self.can_parse else []

    def get_value(self, parameter_name: str) -> Any:
        """
        Read a parameter value by name.

        Raises:
            KeyError: If the message has no parameter with that name
        """
        if not self.can_parse or parameter_name not in self.parameter_names:
            raise KeyError(parameter_name)
        return self.layout.get_value(self._data, parameter_name)

    def to_dict(self) -> Dict[str, Any]:
        if not self.can_parse:
            return {}
        return self.layout.to_dict(self._data)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> List[ValidationError]:
        """Return one ValidationError per invalid parameter value."""
        if self.layout is None:
            return []
        return self.layout.validate(self._data)

    @property
    def is_valid(self) -> bool:
        return not self.validate() and self.checksum_valid is not False

    def repaired(self) -> "Sysex":
        """
        Return a copy with invalid values replaced by their suggested
        corrections and checksums recomputed.

        Values are corrected in place; every other byte is kept, so a
        valid message comes back byte-identical.

        Raises:
            NotImplementedError: If the message has no known layout
        """
        if self.layout is None:
            raise NotImplementedError(f"{self.describe()} cannot be repaired")
        new_data = self.layout.repair(self._data)

        from sysexlib.factory import create

        return create(new_data, name=self._name)

    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Short label, e.g. "Yamaha DX7 32-voice bank"."""
        words = [self.manufacturer_name, self.device, self.type]
        label = " ".join(w for w in words if w)
        return label or "Unknown sysex"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sysex):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return (
            f"Sysex(kind={self.kind.name}, device={self.device!r}, "
            f"type={self.type!r}, length={len(self._data)})"
        )
