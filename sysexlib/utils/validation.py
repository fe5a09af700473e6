"""
Error types and validation results for sysex data.

Failure taxonomy:
- MalformedSysexError: the buffer is not a valid sysex (too short, missing
  start/end markers, wrong length, bad composite framing). Raised at
  construction; no partially built message is ever returned.
- FieldOutOfBoundsError: a parameter offset points past the buffer, so the
  buffer does not match the type it is being read as.
- ValidationError: a value is outside its parameter's domain. Always
  carries a suggested corrected value.
- MissingParameterError: a build from parameter values omitted a name.

An unknown message type is not an error: it is a generic message with
device and type unset.
"""

from dataclasses import dataclass
from typing import Any


class SysexError(Exception):
    """Base class for all sysex errors."""

    pass


class MalformedSysexError(SysexError, ValueError):
    """Raised when data is not a well-formed sysex message."""

    pass


class FieldOutOfBoundsError(SysexError, IndexError):
    """Raised when a parameter's offset lies outside the sysex data."""

    pass


class MissingParameterError(SysexError, KeyError):
    """Raised when building from values and a parameter value is missing."""

    def __init__(self, parameter: str):
        super().__init__(parameter)
        self.parameter = parameter

    def __str__(self) -> str:
        return f'Value for parameter "{self.parameter}" not found'


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a single parameter value.

    Attributes:
        ok: True if the value is valid
        reason: Why the value is invalid (empty when ok)
        corrected_value: Suggested replacement (None when ok)
    """

    ok: bool
    reason: str = ""
    corrected_value: Any = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str, corrected_value: Any) -> "ValidationResult":
        return cls(ok=False, reason=reason, corrected_value=corrected_value)

    def __bool__(self) -> bool:
        return self.ok


class ValidationError(SysexError, ValueError):
    """
    Raised when a parameter value is outside its allowed domain.

    Attributes:
        parameter: Parameter name
        value: The offending value
        reason: Human-readable description
        corrected_value: Suggested replacement value
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        reason: str,
        corrected_value: Any = None,
    ):
        super().__init__(f"{parameter}: {reason}")
        self.parameter = parameter
        self.value = value
        self.reason = reason
        self.corrected_value = corrected_value

    @classmethod
    def from_result(cls, parameter: str, value: Any, result: ValidationResult) -> "ValidationError":
        return cls(parameter, value, result.reason, result.corrected_value)


def validate_channel(channel: int) -> None:
    """
    Validate a sysex channel / device number (0-15).

    Args:
        channel: Channel number

    Raises:
        ValidationError: If channel is out of range
    """
    if not 0 <= channel <= 15:
        raise ValidationError(
            "channel", channel, f"must be 0-15, got {channel}", max(0, min(channel, 15))
        )


def validate_item_index(index: int, item_count: int) -> None:
    """
    Validate a bank item index.

    Raises:
        IndexError: If index is outside 0..item_count-1
    """
    if not 0 <= index < item_count:
        raise IndexError(f"Item index must be 0-{item_count - 1}, got {index}")
