"""
Yamaha message identification.

Rules are tried in order and the first match wins. The DX21 and TX81Z
banks share a header and length; they are told apart by bytes each
device leaves unused in every voice.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple

from sysexlib.manufacturers.yamaha import dx_tx_data as dx
from sysexlib.models.kind import Identity, SysexKind
from sysexlib.utils.pattern import BytesLike, matches_pattern

logger = logging.getLogger(__name__)


def _dx7_parameter_change(data: BytesLike) -> Optional[Identity]:
    if len(data) != dx.DX7_PARAMETER_CHANGE_LENGTH:
        return None
    if not matches_pattern(data, dx.DX7_PARAMETER_CHANGE_TEMPLATE):
        return None
    label = dx.DX7_PARAMETER_CHANGE_GROUPS.get(dx.dx7_parameter_change_group(data))
    if label is None:
        return None
    return Identity(SysexKind.DX7_PARAMETER_CHANGE, "DX7", label)


def _layout_rule(kind: SysexKind, layout) -> Callable[[BytesLike], Optional[Identity]]:
    def rule(data: BytesLike) -> Optional[Identity]:
        if layout.matches(data):
            return Identity(kind, layout.device, layout.type, layout)
        return None

    return rule


RULES: Tuple[Callable[[BytesLike], Optional[Identity]], ...] = (
    # DX7
    _layout_rule(SysexKind.DX7_BANK, dx.DX7_BANK),
    _layout_rule(SysexKind.DX7_VOICE, dx.DX7_VOICE),
    _dx7_parameter_change,
    # DX21
    _layout_rule(SysexKind.DX21_VOICE, dx.DX21_VOICE),
    _layout_rule(SysexKind.DX21_BANK, dx.DX21_BANK),
    # TX81Z
    _layout_rule(SysexKind.TX81Z_BANK, dx.TX81Z_BANK),
    _layout_rule(SysexKind.TX81Z_ADDITIONAL_VOICE_DATA, dx.TX81Z_ADDITIONAL_VOICE_DATA),
)

# Known multi-part messages: ordered part kinds -> composite identity
COMPOSITE_RULES: Tuple[Tuple[Tuple[SysexKind, ...], Identity], ...] = (
    # TX81Z voice = additional voice data (ACED) + DX21 voice (VCED)
    (
        (SysexKind.TX81Z_ADDITIONAL_VOICE_DATA, SysexKind.DX21_VOICE),
        Identity(
            SysexKind.TX81Z_VOICE, dx.TX81Z_VOICE.device, dx.TX81Z_VOICE.type, dx.TX81Z_VOICE
        ),
    ),
)


def identify(data: BytesLike) -> Identity:
    """
    Identify a single Yamaha message.

    Returns:
        Identity of the first matching rule, or a GENERIC identity with
        device and type unset
    """
    for rule in RULES:
        identity = rule(data)
        if identity is not None:
            logger.debug("Yamaha message identified as %s", identity.kind.name)
            return identity
    return Identity(SysexKind.GENERIC)


def identify_composite(part_kinds: Sequence[SysexKind]) -> Optional[Identity]:
    """
    Identify a known multi-part message from the kinds of its parts.

    Returns:
        Composite identity, None if no composite rule matches
    """
    kinds = tuple(part_kinds)
    for expected, identity in COMPOSITE_RULES:
        if kinds == expected:
            return identity
    return None
