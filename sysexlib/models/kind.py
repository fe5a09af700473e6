"""
Sysex message kinds and identification results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SysexKind(Enum):
    """Tag identifying which variant a Sysex message is."""

    GENERIC = "generic"
    UNIVERSAL = "universal"
    ROLAND = "roland"
    BEHRINGER = "behringer"
    COMPOSITE = "composite"
    DX7_PARAMETER_CHANGE = "dx7_parameter_change"
    DX7_VOICE = "dx7_voice"
    DX7_BANK = "dx7_bank"
    DX21_VOICE = "dx21_voice"
    DX21_BANK = "dx21_bank"
    TX81Z_ADDITIONAL_VOICE_DATA = "tx81z_additional_voice_data"
    TX81Z_VOICE = "tx81z_voice"
    TX81Z_BANK = "tx81z_bank"


@dataclass(frozen=True)
class Identity:
    """
    Result of identifying a message.

    Attributes:
        kind: Variant tag
        device: Device name, None if unknown
        type: Message type label, None if unknown
        layout: VoiceFormat, BankFormat or CompositeFormat for parseable
            kinds, None otherwise
    """

    kind: SysexKind
    device: Optional[str] = None
    type: Optional[str] = None
    layout: Optional[Any] = None
