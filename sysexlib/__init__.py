"""
sysexlib - Identify, parse, validate and rebuild MIDI System Exclusive messages.

This library provides tools to:
- Identify the manufacturer, device and type of a sysex message
- Read and write named parameters (including bit-packed fields)
- Extract voices from bank dumps (Yamaha DX7, DX21, TX81Z)
- Split and join multi-part messages
- Validate parameter values and repair them

Example usage:
    import sysexlib

    bank = sysexlib.load("rom1a.syx")
    print(bank.device, bank.type)          # DX7 32-voice bank
    print(bank.item_names()[:2])           # ['BRASS   1', 'BRASS   2']

    voice = bank.get_item(0)
    print(voice.get_value("Algorithm"))
    sysexlib.save(voice, "brass1.syx")
"""

__version__ = "0.1.0"
__author__ = "sysexlib Contributors"

from sysexlib.factory import combine, create, identify, load, parse, save, split
from sysexlib.models.kind import Identity, SysexKind
from sysexlib.models.sysex import Sysex
from sysexlib.utils.validation import (
    FieldOutOfBoundsError,
    MalformedSysexError,
    MissingParameterError,
    SysexError,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "combine",
    "create",
    "identify",
    "load",
    "parse",
    "save",
    "split",
    "Identity",
    "Sysex",
    "SysexKind",
    "FieldOutOfBoundsError",
    "MalformedSysexError",
    "MissingParameterError",
    "SysexError",
    "ValidationError",
    "ValidationResult",
]
