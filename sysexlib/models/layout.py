"""
Message layouts: where headers, parameter data, items and checksums live.

Layouts are static, read-only descriptions shared by every message of a
type. They carry offsets and parameter tables, not behaviour that depends
on a particular message; the same layout parses existing data and builds
new data from parameter values.

Voice layout (single message):
    [header][parameter data ...][checksum][F7]
    Parameter offsets are relative to the end of the header.

Bank layout (container of fixed-size items):
    [header][item 0][item 1] ... [item N-1][checksum][F7]
    item_offset(i) = header_length + item_size * i
    Parameter offsets are relative to the start of the item.

Composite layout (several framed messages, one logical voice):
    [part 0: F0 ... F7][part 1: F0 ... F7] ...
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from types import MappingProxyType

from sysexlib.constants import END_OF_SYSEX
from sysexlib.models.parameter import Parameter
from sysexlib.utils.checksum import two_complement_7bit
from sysexlib.utils.pattern import BytesLike, Template, matches_pattern, template_literals
from sysexlib.utils.validation import (
    MalformedSysexError,
    MissingParameterError,
    ValidationError,
    validate_channel,
    validate_item_index,
)

logger = logging.getLogger(__name__)

# Checksum byte + end-of-exclusive
TRAILER_LENGTH = 2


def index_by_name(parameters: Tuple[Parameter, ...]) -> Dict[str, Parameter]:
    """Index a parameter table by name, rejecting duplicates."""
    by_name: Dict[str, Parameter] = {}
    for parameter in parameters:
        if parameter.name in by_name:
            raise ValueError(f"Duplicate parameter name: {parameter.name}")
        by_name[parameter.name] = parameter
    return by_name


@dataclass(frozen=True)
class VoiceFormat:
    """
    Layout of a single parseable message (e.g. a DX7 single voice).

    Attributes:
        device: Device name, e.g. "DX7"
        type: Message type label, e.g. "Single voice"
        header: Header template (wildcards for channel bytes)
        parameter_data_length: Bytes between header and checksum
        parameters: Parameter table, offsets relative to end of header
        name_parameter: Parameter holding the voice name, if any
        checksum_start: Offset where checksummed data begins; defaults to
            the header length. Some TX81Z messages also checksum a fixed
            ASCII string at the end of the header.
        filler: Optional (offset, bytes) written before parameters when
            building, for data bytes no parameter describes
    """

    device: str
    type: str
    header: Template
    parameter_data_length: int
    parameters: Tuple[Parameter, ...]
    name_parameter: Optional[str] = None
    checksum_start: Optional[int] = None
    filler: Optional[Tuple[int, bytes]] = None
    by_name: Mapping[str, Parameter] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_name", MappingProxyType(index_by_name(self.parameters)))

    @property
    def header_length(self) -> int:
        return len(self.header)

    @property
    def total_length(self) -> int:
        return self.header_length + self.parameter_data_length + TRAILER_LENGTH

    @property
    def checksum_offset(self) -> int:
        return self.checksum_start if self.checksum_start is not None else self.header_length

    def matches(self, data: BytesLike) -> bool:
        """True if data has this layout's header and exact length."""
        return len(data) == self.total_length and matches_pattern(data, self.header)

    def parameter_names(self) -> List[str]:
        return [p.name for p in self.parameters]

    def get_value(self, data: BytesLike, name: str) -> Any:
        return self.by_name[name].get_value(data, self.header_length)

    def to_dict(self, data: BytesLike) -> Dict[str, Any]:
        return {p.name: p.get_value(data, self.header_length) for p in self.parameters}

    def voice_name(self, data: BytesLike) -> Optional[str]:
        if self.name_parameter is None:
            return None
        return self.get_value(data, self.name_parameter)

    def checksum_range(self, data: BytesLike) -> bytes:
        return bytes(data[self.checksum_offset : len(data) - TRAILER_LENGTH])

    def checksum_valid(self, data: BytesLike) -> bool:
        return two_complement_7bit(self.checksum_range(data)) == data[-TRAILER_LENGTH]

    def build(
        self, values: Mapping[str, Any], channel: int = 0, validate: bool = False
    ) -> bytes:
        """
        Build message data from parameter values.

        Args:
            values: Value for every parameter of this layout (extra keys are
                ignored)
            channel: Value written to wildcard header bytes
            validate: Validate each value before writing it

        Returns:
            Complete message bytes with a freshly computed checksum

        Raises:
            MissingParameterError: If a parameter value is missing
            ValidationError: If validate is set and a value is invalid
        """
        validate_channel(channel)

        data = bytearray(self.total_length)
        data[: self.header_length] = template_literals(self.header, channel)

        if self.filler is not None:
            filler_offset, filler_bytes = self.filler
            start = self.header_length + filler_offset
            data[start : start + len(filler_bytes)] = filler_bytes

        for parameter in self.parameters:
            if parameter.name not in values:
                raise MissingParameterError(parameter.name)
            value = values[parameter.name]
            if validate:
                parameter.check(value)
            parameter.set_value(data, value, self.header_length)

        data[-TRAILER_LENGTH] = two_complement_7bit(self.checksum_range(data))
        data[-1] = END_OF_SYSEX
        return bytes(data)

    def validate(self, data: BytesLike) -> List[ValidationError]:
        """Return a ValidationError for every invalid parameter value."""
        return _collect_errors(self.parameters, data, self.header_length)

    def repair(self, data: BytesLike) -> bytes:
        """
        Return a copy of data with invalid values replaced by their
        suggested corrections and the checksum recomputed.

        Bytes no parameter describes are left untouched.
        """
        repaired = bytearray(data)
        _correct_values(self.parameters, repaired, self.header_length)
        repaired[-TRAILER_LENGTH] = two_complement_7bit(self.checksum_range(repaired))
        return bytes(repaired)


@dataclass(frozen=True)
class BankFormat:
    """
    Layout of a container message holding fixed-size items.

    Attributes:
        device: Device name
        type: Message type label, e.g. "32-voice bank"
        header: Header template
        item_count: Number of items
        item_size: Size of each item in bytes
        parameters: Per-item parameters, offsets relative to item start
        name_parameter: Per-item name parameter, if any
        item_format: Layout used to materialize an extracted item
        predicate: Extra test applied after header and length match
    """

    device: str
    type: str
    header: Template
    item_count: int
    item_size: int
    parameters: Tuple[Parameter, ...]
    name_parameter: Optional[str] = None
    item_format: Optional[Any] = None
    predicate: Optional[Callable[[BytesLike], bool]] = field(default=None, compare=False)
    by_name: Mapping[str, Parameter] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_name", MappingProxyType(index_by_name(self.parameters)))

    @property
    def header_length(self) -> int:
        return len(self.header)

    @property
    def bank_data_length(self) -> int:
        return self.item_count * self.item_size

    @property
    def total_length(self) -> int:
        return self.header_length + self.bank_data_length + TRAILER_LENGTH

    @property
    def checksum_offset(self) -> int:
        return self.header_length

    def matches(self, data: BytesLike) -> bool:
        if len(data) != self.total_length or not matches_pattern(data, self.header):
            return False
        return self.predicate is None or self.predicate(data)

    def item_offset(self, index: int) -> int:
        """Byte offset of an item's data within the bank message."""
        return self.header_length + self.item_size * index

    def item_data(self, data: BytesLike, index: int) -> bytes:
        validate_item_index(index, self.item_count)
        start = self.item_offset(index)
        return bytes(data[start : start + self.item_size])

    def item_to_dict(self, data: BytesLike, index: int) -> Dict[str, Any]:
        validate_item_index(index, self.item_count)
        offset = self.item_offset(index)
        return {p.name: p.get_value(data, offset) for p in self.parameters}

    def item_name(self, data: BytesLike, index: int) -> Optional[str]:
        if self.name_parameter is None:
            return None
        validate_item_index(index, self.item_count)
        return self.by_name[self.name_parameter].get_value(data, self.item_offset(index))

    def item_names(self, data: BytesLike) -> Optional[List[str]]:
        if self.name_parameter is None:
            return None
        return [self.item_name(data, i) for i in range(self.item_count)]

    def extract_item(self, data: BytesLike, index: int, channel: int = 0) -> bytes:
        """
        Materialize one item as a standalone message.

        The item's values are decoded with the bank's parameter table and
        re-encoded with item_format, producing a new header, data and
        checksum. Nothing is shared with the bank's buffer.
        """
        if self.item_format is None:
            raise NotImplementedError(f"{self.device} {self.type} items cannot be extracted")
        values = self.item_to_dict(data, index)
        logger.debug("Extracting item %d from %s %s", index, self.device, self.type)
        return self.item_format.build(values, channel=channel)

    def checksum_range(self, data: BytesLike) -> bytes:
        return bytes(data[self.checksum_offset : len(data) - TRAILER_LENGTH])

    def checksum_valid(self, data: BytesLike) -> bool:
        return two_complement_7bit(self.checksum_range(data)) == data[-TRAILER_LENGTH]

    def validate(self, data: BytesLike) -> List[ValidationError]:
        errors: List[ValidationError] = []
        for index in range(self.item_count):
            for error in _collect_errors(self.parameters, data, self.item_offset(index)):
                error.parameter = f"Item {index + 1} {error.parameter}"
                errors.append(error)
        return errors

    def repair(self, data: BytesLike) -> bytes:
        """
        Return a copy of data with every invalid item value replaced by its
        suggested correction and the checksum recomputed.
        """
        repaired = bytearray(data)
        for index in range(self.item_count):
            _correct_values(self.parameters, repaired, self.item_offset(index))
        repaired[-TRAILER_LENGTH] = two_complement_7bit(self.checksum_range(repaired))
        return bytes(repaired)


@dataclass(frozen=True)
class CompositeFormat:
    """
    Layout of a logical message sent as several framed messages.

    Each part has its own VoiceFormat. Parameter names must be unique
    across parts; a value is read from the part that declares it.
    """

    device: str
    type: str
    parts: Tuple[VoiceFormat, ...]
    name_part: Optional[int] = None
    owners: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        owners: Dict[str, int] = {}
        for index, part in enumerate(self.parts):
            for name in part.by_name:
                if name in owners:
                    raise ValueError(f"Parameter {name} is declared by more than one part")
                owners[name] = index
        object.__setattr__(self, "owners", MappingProxyType(owners))

    @property
    def total_length(self) -> int:
        return sum(part.total_length for part in self.parts)

    def parameter_names(self) -> List[str]:
        names: List[str] = []
        for part in self.parts:
            names.extend(part.parameter_names())
        return names

    def split_parts(self, data: BytesLike) -> List[bytes]:
        """Cut composite data into per-part byte strings."""
        if len(data) != self.total_length:
            raise MalformedSysexError(
                f"Data was not of the expected length. "
                f"Expected: {self.total_length}, actual: {len(data)}."
            )
        chunks = []
        start = 0
        for part in self.parts:
            chunks.append(bytes(data[start : start + part.total_length]))
            start += part.total_length
        return chunks

    def get_value(self, data: BytesLike, name: str) -> Any:
        index = self.owners[name]
        return self.parts[index].get_value(self.split_parts(data)[index], name)

    def to_dict(self, data: BytesLike) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for part, chunk in zip(self.parts, self.split_parts(data)):
            values.update(part.to_dict(chunk))
        return values

    def voice_name(self, data: BytesLike) -> Optional[str]:
        if self.name_part is None:
            return None
        chunk = self.split_parts(data)[self.name_part]
        return self.parts[self.name_part].voice_name(chunk)

    def checksum_valid(self, data: BytesLike) -> bool:
        return all(
            part.checksum_valid(chunk) for part, chunk in zip(self.parts, self.split_parts(data))
        )

    def build(
        self, values: Mapping[str, Any], channel: int = 0, validate: bool = False
    ) -> bytes:
        """Build every part from the same value mapping and join them."""
        return b"".join(part.build(values, channel, validate) for part in self.parts)

    def validate(self, data: BytesLike) -> List[ValidationError]:
        errors: List[ValidationError] = []
        for part, chunk in zip(self.parts, self.split_parts(data)):
            errors.extend(part.validate(chunk))
        return errors

    def repair(self, data: BytesLike) -> bytes:
        """Repair each part on its own, keeping its header and checksum range."""
        return b"".join(
            part.repair(chunk) for part, chunk in zip(self.parts, self.split_parts(data))
        )


def _collect_errors(
    parameters: Tuple[Parameter, ...], data: BytesLike, offset: int
) -> List[ValidationError]:
    errors = []
    for parameter in parameters:
        value = parameter.get_value(data, offset)
        result = parameter.validate(value)
        if not result.ok:
            errors.append(ValidationError.from_result(parameter.name, value, result))
    return errors


def _correct_values(parameters: Tuple[Parameter, ...], data: bytearray, offset: int) -> None:
    for parameter in parameters:
        result = parameter.validate_data(data, offset)
        if not result.ok:
            parameter.set_value(data, result.corrected_value, offset)
