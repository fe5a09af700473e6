"""
Parameter (field) descriptors.

A parameter describes where one named value lives inside a message's
parameter data: a byte offset plus, for numeric values, a bit range
within that byte. Descriptors never own data; the same descriptor is
reused for every message of a type, and for every item of a bank by
passing the item's start as ``offset``.

Packed data:
    Several numeric parameters can share one byte at disjoint bit ranges.
    For example, byte 111 of a DX7 packed voice holds:

        bit:  7 6 5 4 3 2 1 0
              0 0 0 0 S F F F
        Oscillator sync: bit_count=1, bit_offset=3
        Feedback:        bit_count=3, bit_offset=0
"""

from dataclasses import dataclass
from typing import Any, Union

from sysexlib.utils.pattern import has_non_printable, replace_non_printable
from sysexlib.utils.validation import (
    FieldOutOfBoundsError,
    ValidationError,
    ValidationResult,
)

BytesLike = Union[bytes, bytearray]


@dataclass(frozen=True)
class Parameter:
    """Base class for parameter descriptors."""

    offset: int
    name: str

    @property
    def size(self) -> int:
        """Number of bytes spanned by this parameter."""
        return 1

    def get_value(self, data: BytesLike, offset: int = 0) -> Any:
        raise NotImplementedError

    def set_value(self, data: bytearray, value: Any, offset: int = 0) -> None:
        raise NotImplementedError

    def validate(self, value: Any) -> ValidationResult:
        raise NotImplementedError

    def validate_data(self, data: BytesLike, offset: int = 0) -> ValidationResult:
        """Validate this parameter's current value in data."""
        return self.validate(self.get_value(data, offset))

    def check(self, value: Any) -> None:
        """
        Validate value, raising on failure.

        Raises:
            ValidationError: With the suggested corrected value attached
        """
        result = self.validate(value)
        if not result.ok:
            raise ValidationError.from_result(self.name, value, result)

    def _absolute_offset(self, data: BytesLike, offset: int) -> int:
        position = self.offset + offset
        if position < 0 or position + self.size > len(data):
            raise FieldOutOfBoundsError(
                f'Parameter "{self.name}" at offset {position} '
                f"({self.size} bytes) is outside data of length {len(data)}"
            )
        return position


@dataclass(frozen=True)
class NumericParameter(Parameter):
    """
    Numeric (integer) parameter, optionally packed into part of a byte.

    Attributes:
        offset: Byte offset, relative to the start of the parameter data
        name: Parameter name (used for display and serialization)
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive)
        bit_count: Number of bits (1-8)
        bit_offset: Position of the lowest bit, counted from the right
    """

    min_value: int = 0
    max_value: int = 127
    bit_count: int = 7
    bit_offset: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.bit_count <= 8:
            raise ValueError(f"bit_count must be 1-8, got {self.bit_count}")
        if not 0 <= self.bit_offset <= 8 - self.bit_count:
            raise ValueError(
                f"bit_offset {self.bit_offset} does not fit {self.bit_count} bits in a byte"
            )

    @property
    def mask(self) -> int:
        return (1 << self.bit_count) - 1

    def get_value(self, data: BytesLike, offset: int = 0) -> int:
        position = self._absolute_offset(data, offset)
        return (data[position] >> self.bit_offset) & self.mask

    def set_value(self, data: bytearray, value: int, offset: int = 0) -> None:
        position = self._absolute_offset(data, offset)
        mask = self.mask
        # Keep every bit outside this parameter's range
        cleared = data[position] & ~(mask << self.bit_offset) & 0xFF
        data[position] = cleared | ((int(value) & mask) << self.bit_offset)

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, int):
            return ValidationResult.failure(
                f"expected an integer, got {type(value).__name__}", self.min_value
            )
        if value < self.min_value:
            return ValidationResult.failure(
                f"value {value} is below minimum {self.min_value}", self.min_value
            )
        if value > self.max_value:
            return ValidationResult.failure(
                f"value {value} is above maximum {self.max_value}", self.max_value
            )
        return ValidationResult.success()


@dataclass(frozen=True)
class AsciiParameter(Parameter):
    """
    Fixed-length ASCII string parameter, space (0x20) padded.

    Attributes:
        offset: Offset of the first character
        name: Parameter name
        length: String length in bytes/characters
    """

    length: int = 10

    @property
    def size(self) -> int:
        return self.length

    def get_value(self, data: BytesLike, offset: int = 0) -> str:
        position = self._absolute_offset(data, offset)
        raw = bytes(data[position : position + self.length])
        text = raw.decode("ascii", errors="replace")
        return replace_non_printable(text).rstrip(" ")

    def set_value(self, data: bytearray, value: str, offset: int = 0) -> None:
        if value is None:
            raise TypeError(f'Value for "{self.name}" must be a string, not None')
        if len(value) > self.length:
            raise ValidationError(
                self.name,
                value,
                f"string is longer than {self.length} characters",
                value[: self.length],
            )
        position = self._absolute_offset(data, offset)
        encoded = value.ljust(self.length).encode("ascii", errors="replace")
        data[position : position + self.length] = encoded

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return ValidationResult.failure(
                f"expected a string, got {type(value).__name__}", ""
            )
        if has_non_printable(value):
            corrected = replace_non_printable(value)[: self.length]
            return ValidationResult.failure("string has non-printable characters", corrected)
        if len(value) > self.length:
            return ValidationResult.failure(
                f"string is longer than {self.length} characters", value[: self.length]
            )
        return ValidationResult.success()
