"""Utility functions for sysex parsing."""

from sysexlib.utils.checksum import (
    add_checksum,
    two_complement_7bit,
    verify_checksum,
    verify_xor_checksum,
    xor_7bit,
)
from sysexlib.utils.pattern import (
    are_zero,
    format_pattern,
    has_non_printable,
    matches_pattern,
    replace_non_printable,
)
from sysexlib.utils.validation import (
    FieldOutOfBoundsError,
    MalformedSysexError,
    MissingParameterError,
    SysexError,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "add_checksum",
    "two_complement_7bit",
    "verify_checksum",
    "verify_xor_checksum",
    "xor_7bit",
    "are_zero",
    "format_pattern",
    "has_non_printable",
    "matches_pattern",
    "replace_non_printable",
    "FieldOutOfBoundsError",
    "MalformedSysexError",
    "MissingParameterError",
    "SysexError",
    "ValidationError",
    "ValidationResult",
]
