"""Data models for sysex messages: parameters, layouts and kinds."""

from sysexlib.models.kind import Identity, SysexKind
from sysexlib.models.layout import BankFormat, CompositeFormat, VoiceFormat
from sysexlib.models.parameter import AsciiParameter, NumericParameter, Parameter

__all__ = [
    "AsciiParameter",
    "BankFormat",
    "CompositeFormat",
    "Identity",
    "NumericParameter",
    "Parameter",
    "SysexKind",
    "VoiceFormat",
]
