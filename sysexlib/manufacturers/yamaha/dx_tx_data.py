"""
Yamaha DX/TX series message layouts.

DX7 single voice (VCED):
    F0 43 00 00 01 1B [155 bytes] <checksum> F7             (163 bytes)

DX7 32-voice bank (VMEM, packed):
    F0 43 00 09 20 00 [32 x 128 bytes] <checksum> F7        (4104 bytes)

DX7 parameter change:
    F0 43 10 <group/parameter> <parameter> <value> F7        (7 bytes)
    group = byte 3 >> 2: 0 = voice parameter, 2 = function parameter

DX21/DX27/DX100 single voice (VCED):
    F0 43 <ch> 03 00 5D [93 bytes] <checksum> F7            (101 bytes)

DX21 and TX81Z 32-voice bank (VMEM, packed):
    F0 43 <ch> 04 20 00 [32 x 128 bytes] <checksum> F7      (4104 bytes)
    DX21:  item bytes 73-127 are zero
    TX81Z: item bytes 67-72 are 63 63 63 32 32 32, bytes 84-127 are zero

TX81Z additional voice data (ACED):
    F0 43 <ch> 7E 00 21 "LM  8976AE" [23 bytes] <checksum> F7  (41 bytes)
    The ASCII signature is included in the checksum.

TX81Z single voice:
    ACED message followed by a DX21 VCED message

Operators are stored in reverse order (OP 6 first on the DX7, OP 4 first
on the DX21/TX81Z).
"""

from typing import List, Tuple

from sysexlib.models.layout import BankFormat, CompositeFormat, VoiceFormat
from sysexlib.models.parameter import AsciiParameter, NumericParameter, Parameter
from sysexlib.utils.pattern import BytesLike, Template, are_zero, matches_pattern

BANK_ITEM_COUNT = 32
PACKED_VOICE_SIZE = 128

# ============================================================================
# DX7
# ============================================================================

DX7_PARAMETER_CHANGE_TEMPLATE: Template = (0xF0, 0x43, 0x10, None, None, None, 0xF7)
DX7_PARAMETER_CHANGE_LENGTH = 7

DX7_PARAMETER_CHANGE_GROUPS = {
    0x00: "Parameter change (voice)",
    0x02: "Parameter change (function)",
}

DX7_VOICE_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x43,  # Yamaha
    0x00,  # sub-status / channel
    0x00,  # format 0 (single voice)
    0x01,  # byte count MSB
    0x1B,  # byte count LSB (155)
)

DX7_BANK_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x43,  # Yamaha
    0x00,  # sub-status / channel
    0x09,  # format 9 (32 voices)
    0x20,  # byte count MSB
    0x00,  # byte count LSB (4096)
)


def dx7_parameter_change_group(data: BytesLike) -> int:
    return data[3] >> 2


def _dx7_voice_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    for op in range(6, 0, -1):
        offset = (6 - op) * 21
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "EG Rate 1", 0, 99),
            NumericParameter(offset + 1, prefix + "EG Rate 2", 0, 99),
            NumericParameter(offset + 2, prefix + "EG Rate 3", 0, 99),
            NumericParameter(offset + 3, prefix + "EG Rate 4", 0, 99),
            NumericParameter(offset + 4, prefix + "EG Level 1", 0, 99),
            NumericParameter(offset + 5, prefix + "EG Level 2", 0, 99),
            NumericParameter(offset + 6, prefix + "EG Level 3", 0, 99),
            NumericParameter(offset + 7, prefix + "EG Level 4", 0, 99),
            NumericParameter(offset + 8, prefix + "Keyboard level scale break point", 0, 99),
            NumericParameter(offset + 9, prefix + "Keyboard level scale left depth", 0, 99),
            NumericParameter(offset + 10, prefix + "Keyboard level scale right depth", 0, 99),
            NumericParameter(offset + 11, prefix + "Keyboard level scale left curve", 0, 3),
            NumericParameter(offset + 12, prefix + "Keyboard level scale right curve", 0, 3),
            NumericParameter(offset + 13, prefix + "Keyboard rate scaling", 0, 7),
            NumericParameter(offset + 14, prefix + "Amp mod sensitivity", 0, 3),
            NumericParameter(offset + 15, prefix + "Keyboard velocity sensitivity", 0, 7),
            NumericParameter(offset + 16, prefix + "Output level", 0, 99),
            NumericParameter(offset + 17, prefix + "Osc mode", 0, 1),
            NumericParameter(offset + 18, prefix + "Osc frequency coarse", 0, 31),
            NumericParameter(offset + 19, prefix + "Osc frequency fine", 0, 99),
            NumericParameter(offset + 20, prefix + "Osc detune", 0, 14),  # center = 7
        ]

    parameters += [
        NumericParameter(126, "Pitch EG Rate 1", 0, 99),
        NumericParameter(127, "Pitch EG Rate 2", 0, 99),
        NumericParameter(128, "Pitch EG Rate 3", 0, 99),
        NumericParameter(129, "Pitch EG Rate 4", 0, 99),
        NumericParameter(130, "Pitch EG Level 1", 0, 99),
        NumericParameter(131, "Pitch EG Level 2", 0, 99),
        NumericParameter(132, "Pitch EG Level 3", 0, 99),
        NumericParameter(133, "Pitch EG Level 4", 0, 99),
        NumericParameter(134, "Algorithm", 0, 31),
        NumericParameter(135, "Feedback", 0, 7),
        NumericParameter(136, "Oscillator sync", 0, 1),
        NumericParameter(137, "LFO Speed", 0, 99),
        NumericParameter(138, "LFO Delay", 0, 99),
        NumericParameter(139, "LFO Pitch mod depth", 0, 99),
        NumericParameter(140, "LFO Amp mod depth", 0, 99),
        NumericParameter(141, "LFO Sync", 0, 1),
        NumericParameter(142, "LFO Waveform", 0, 5),
        NumericParameter(143, "Pitch mod sensitivity", 0, 7),
        NumericParameter(144, "Transpose", 0, 48),  # 24 = C3
        AsciiParameter(145, "Voice name", 10),
    ]
    return tuple(parameters)


def _dx7_packed_voice_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    for op in range(6, 0, -1):
        offset = (6 - op) * 17
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "EG Rate 1", 0, 99),
            NumericParameter(offset + 1, prefix + "EG Rate 2", 0, 99),
            NumericParameter(offset + 2, prefix + "EG Rate 3", 0, 99),
            NumericParameter(offset + 3, prefix + "EG Rate 4", 0, 99),
            NumericParameter(offset + 4, prefix + "EG Level 1", 0, 99),
            NumericParameter(offset + 5, prefix + "EG Level 2", 0, 99),
            NumericParameter(offset + 6, prefix + "EG Level 3", 0, 99),
            NumericParameter(offset + 7, prefix + "EG Level 4", 0, 99),
            NumericParameter(offset + 8, prefix + "Keyboard level scale break point", 0, 99),
            NumericParameter(offset + 9, prefix + "Keyboard level scale left depth", 0, 99),
            NumericParameter(offset + 10, prefix + "Keyboard level scale right depth", 0, 99),
            NumericParameter(offset + 11, prefix + "Keyboard level scale left curve", 0, 3, 2, 2),
            NumericParameter(offset + 11, prefix + "Keyboard level scale right curve", 0, 3, 2, 0),
            NumericParameter(offset + 12, prefix + "Osc detune", 0, 14, 4, 3),
            NumericParameter(offset + 12, prefix + "Keyboard rate scaling", 0, 7, 3, 0),
            NumericParameter(offset + 13, prefix + "Keyboard velocity sensitivity", 0, 7, 3, 2),
            NumericParameter(offset + 13, prefix + "Amp mod sensitivity", 0, 3, 2, 0),
            NumericParameter(offset + 14, prefix + "Output level", 0, 99),
            NumericParameter(offset + 15, prefix + "Osc frequency coarse", 0, 31, 5, 1),
            NumericParameter(offset + 15, prefix + "Osc mode", 0, 1, 1, 0),
            NumericParameter(offset + 16, prefix + "Osc frequency fine", 0, 99),
        ]

    parameters += [
        NumericParameter(102, "Pitch EG Rate 1", 0, 99),
        NumericParameter(103, "Pitch EG Rate 2", 0, 99),
        NumericParameter(104, "Pitch EG Rate 3", 0, 99),
        NumericParameter(105, "Pitch EG Rate 4", 0, 99),
        NumericParameter(106, "Pitch EG Level 1", 0, 99),
        NumericParameter(107, "Pitch EG Level 2", 0, 99),
        NumericParameter(108, "Pitch EG Level 3", 0, 99),
        NumericParameter(109, "Pitch EG Level 4", 0, 99),
        NumericParameter(110, "Algorithm", 0, 31, 5, 0),
        NumericParameter(111, "Oscillator sync", 0, 1, 1, 3),
        NumericParameter(111, "Feedback", 0, 7, 3, 0),
        NumericParameter(112, "LFO Speed", 0, 99),
        NumericParameter(113, "LFO Delay", 0, 99),
        NumericParameter(114, "LFO Pitch mod depth", 0, 99),
        NumericParameter(115, "LFO Amp mod depth", 0, 99),
        NumericParameter(116, "Pitch mod sensitivity", 0, 7, 3, 4),
        NumericParameter(116, "LFO Waveform", 0, 5, 3, 1),
        NumericParameter(116, "LFO Sync", 0, 1, 1, 0),
        NumericParameter(117, "Transpose", 0, 48),
        AsciiParameter(118, "Voice name", 10),
    ]
    return tuple(parameters)


DX7_VOICE = VoiceFormat(
    device="DX7",
    type="Single voice",
    header=DX7_VOICE_HEADER,
    parameter_data_length=155,
    parameters=_dx7_voice_parameters(),
    name_parameter="Voice name",
)

DX7_BANK = BankFormat(
    device="DX7",
    type="32-voice bank",
    header=DX7_BANK_HEADER,
    item_count=BANK_ITEM_COUNT,
    item_size=PACKED_VOICE_SIZE,
    parameters=_dx7_packed_voice_parameters(),
    name_parameter="Voice name",
    item_format=DX7_VOICE,
)

# ============================================================================
# DX21 / DX27 / DX100 / TX81Z
# ============================================================================

DX21_VOICE_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x43,  # Yamaha
    None,  # channel (0-15)
    0x03,  # format 3 (single voice)
    0x00,  # byte count MSB
    0x5D,  # byte count LSB (93)
)

DX21_TX81Z_BANK_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x43,  # Yamaha
    None,  # channel (0-15)
    0x04,  # format 4 (32 voices)
    0x20,  # byte count MSB
    0x00,  # byte count LSB (4096)
)

TX81Z_ACED_SIGNATURE = b"LM  8976AE"

TX81Z_ACED_HEADER: Template = (
    0xF0,  # start-of-exclusive
    0x43,  # Yamaha
    None,  # channel (0-15)
    0x7E,  # format 126 (universal bulk dump)
    0x00,  # byte count MSB
    0x21,  # byte count LSB (33, signature + data)
) + tuple(TX81Z_ACED_SIGNATURE)

# Checksum covers the ASCII signature
TX81Z_ACED_CHECKSUM_START = 6

# Unused pitch EG bytes of a TX81Z voice: rates 99, levels 50
TX81Z_UNUSED_PITCH_EG = bytes([0x63, 0x63, 0x63, 0x32, 0x32, 0x32])
TX81Z_UNUSED_PITCH_EG_OFFSET = 67

DX21_VOICE_USED_LENGTH = 73
TX81Z_VOICE_USED_LENGTH = 84


def _dx21_common_voice_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    for op in range(4, 0, -1):
        offset = (4 - op) * 13
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "Attack Rate", 0, 31),
            NumericParameter(offset + 1, prefix + "Decay 1 Rate", 0, 31),
            NumericParameter(offset + 2, prefix + "Decay 2 Rate", 0, 31),
            NumericParameter(offset + 3, prefix + "Release Rate", 1, 15),
            NumericParameter(offset + 4, prefix + "Decay 1 Level", 0, 15),
            NumericParameter(offset + 5, prefix + "Level Scaling", 0, 99),
            NumericParameter(offset + 6, prefix + "Rate Scaling", 0, 3),
            NumericParameter(offset + 7, prefix + "EG Bias Sensitivity", 0, 7),
            NumericParameter(offset + 8, prefix + "Amplitude Modulation Enable", 0, 1),
            NumericParameter(offset + 9, prefix + "Key Velocity Sensitivity", 0, 7),
            NumericParameter(offset + 10, prefix + "Operator Output Level", 0, 99),
            NumericParameter(offset + 11, prefix + "Frequency", 0, 63),
            NumericParameter(offset + 12, prefix + "Detune", 0, 6),  # center = 3
        ]

    parameters += [
        NumericParameter(52, "Algorithm", 0, 7),
        NumericParameter(53, "Feedback", 0, 7),
        NumericParameter(54, "LFO Speed", 0, 99),
        NumericParameter(55, "LFO Delay", 0, 99),
        NumericParameter(56, "Pitch Modulation Depth", 0, 99),
        NumericParameter(57, "Amplitude Modulation Depth", 0, 99),
        NumericParameter(58, "LFO Sync", 0, 1),
        NumericParameter(59, "LFO Wave", 0, 3),
        NumericParameter(60, "Pitch Modulation Sensitivity", 0, 7),
        NumericParameter(61, "Amplitude Modulation Sensitivity", 0, 3),
        NumericParameter(62, "Transpose", 0, 48),  # center = 24
        NumericParameter(63, "Poly/Mono", 0, 1),
        NumericParameter(64, "Pitch Bend Range", 0, 12),
        NumericParameter(65, "Portamento Mode", 0, 1),
        NumericParameter(66, "Portamento Time", 0, 99),
        NumericParameter(67, "Foot Control Volume", 0, 99),
        NumericParameter(68, "Sustain", 0, 1),
        NumericParameter(69, "Portamento", 0, 1),
        NumericParameter(70, "Chorus", 0, 1),
        NumericParameter(71, "Modulation Wheel Pitch", 0, 99),
        NumericParameter(72, "Modulation Wheel Amplitude", 0, 99),
        NumericParameter(73, "Breath Control Pitch", 0, 99),
        NumericParameter(74, "Breath Control Amplitude", 0, 99),
        NumericParameter(75, "Breath Control Pitch Bias", 0, 99),  # center = 50
        NumericParameter(76, "Breath Control EG Bias", 0, 99),
        AsciiParameter(77, "Voice name", 10),
    ]
    return tuple(parameters)


# Pitch EG exists on the DX21 only; the TX81Z ignores these bytes
DX21_ONLY_VOICE_PARAMETERS: Tuple[Parameter, ...] = (
    NumericParameter(87, "Pitch EG Rate 1", 0, 99),
    NumericParameter(88, "Pitch EG Rate 2", 0, 99),
    NumericParameter(89, "Pitch EG Rate 3", 0, 99),
    NumericParameter(90, "Pitch EG Level 1", 0, 99),
    NumericParameter(91, "Pitch EG Level 2", 0, 99),
    NumericParameter(92, "Pitch EG Level 3", 0, 99),
)


def _tx81z_aced_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    for op in range(4, 0, -1):
        offset = (4 - op) * 5
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "Fixed Frequency", 0, 1),
            NumericParameter(offset + 1, prefix + "Fixed Frequency Range", 0, 7),
            NumericParameter(offset + 2, prefix + "Frequency Range Fine", 0, 15),
            NumericParameter(offset + 3, prefix + "Operator Waveform", 0, 7),
            NumericParameter(offset + 4, prefix + "EG Shift", 0, 3),
        ]

    parameters += [
        NumericParameter(20, "Reverb Rate", 0, 7),
        NumericParameter(21, "Foot Controller Pitch", 0, 99),
        NumericParameter(22, "Foot Controller Amplitude", 0, 99),
    ]
    return tuple(parameters)


def _dx21_tx81z_common_packed_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    for op in range(4, 0, -1):
        offset = (4 - op) * 10
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "Attack Rate", 0, 31, 5, 0),
            NumericParameter(offset + 1, prefix + "Decay 1 Rate", 0, 31, 5, 0),
            NumericParameter(offset + 2, prefix + "Decay 2 Rate", 0, 31, 5, 0),
            NumericParameter(offset + 3, prefix + "Release Rate", 0, 15, 4, 0),
            NumericParameter(offset + 4, prefix + "Decay 1 Level", 0, 15, 4, 0),
            NumericParameter(offset + 5, prefix + "Level Scaling", 0, 99, 7, 0),
            NumericParameter(offset + 6, prefix + "Amplitude Modulation Enable", 0, 1, 1, 6),
            NumericParameter(offset + 6, prefix + "EG Bias Sensitivity", 0, 7, 3, 3),
            NumericParameter(offset + 6, prefix + "Key Velocity Sensitivity", 0, 7, 3, 0),
            NumericParameter(offset + 7, prefix + "Operator Output Level", 0, 99, 7, 0),
            NumericParameter(offset + 8, prefix + "Frequency", 0, 63, 6, 0),
            NumericParameter(offset + 9, prefix + "Rate Scaling", 0, 3, 2, 3),
            NumericParameter(offset + 9, prefix + "Detune", 0, 6, 3, 0),
        ]

    parameters += [
        NumericParameter(40, "LFO Sync", 0, 1, 1, 6),
        NumericParameter(40, "Feedback", 0, 7, 3, 3),
        NumericParameter(40, "Algorithm", 0, 7, 3, 0),
        NumericParameter(41, "LFO Speed", 0, 99),
        NumericParameter(42, "LFO Delay", 0, 99),
        NumericParameter(43, "Pitch Modulation Depth", 0, 99),
        NumericParameter(44, "Amplitude Modulation Depth", 0, 99),
        NumericParameter(45, "Pitch Modulation Sensitivity", 0, 7, 3, 4),
        NumericParameter(45, "Amplitude Modulation Sensitivity", 0, 3, 2, 2),
        NumericParameter(45, "LFO Wave", 0, 3, 2, 0),
        NumericParameter(46, "Transpose", 0, 48, 6, 0),
        NumericParameter(47, "Pitch Bend Range", 0, 12, 4, 0),
        NumericParameter(48, "Chorus", 0, 1, 1, 4),
        NumericParameter(48, "Poly/Mono", 0, 1, 1, 3),
        NumericParameter(48, "Sustain", 0, 1, 1, 2),
        NumericParameter(48, "Portamento", 0, 1, 1, 1),
        NumericParameter(48, "Portamento Mode", 0, 1, 1, 0),
        NumericParameter(49, "Portamento Time", 0, 99),
        NumericParameter(50, "Foot Control Volume", 0, 99),
        NumericParameter(51, "Modulation Wheel Pitch", 0, 99),
        NumericParameter(52, "Modulation Wheel Amplitude", 0, 99),
        NumericParameter(53, "Breath Control Pitch", 0, 99),
        NumericParameter(54, "Breath Control Amplitude", 0, 99),
        NumericParameter(55, "Breath Control Pitch Bias", 0, 99),
        NumericParameter(56, "Breath Control EG Bias", 0, 99),
        AsciiParameter(57, "Voice name", 10),
    ]
    return tuple(parameters)


DX21_ONLY_PACKED_PARAMETERS: Tuple[Parameter, ...] = (
    NumericParameter(67, "Pitch EG Rate 1", 0, 99),
    NumericParameter(68, "Pitch EG Rate 2", 0, 99),
    NumericParameter(69, "Pitch EG Rate 3", 0, 99),
    NumericParameter(70, "Pitch EG Level 1", 0, 99),
    NumericParameter(71, "Pitch EG Level 2", 0, 99),
    NumericParameter(72, "Pitch EG Level 3", 0, 99),
)


def _tx81z_only_packed_parameters() -> Tuple[Parameter, ...]:
    parameters: List[Parameter] = []

    # Two bytes per operator, OP 4 first
    for op in range(4, 0, -1):
        offset = 73 + (4 - op) * 2
        prefix = f"OP {op} "
        parameters += [
            NumericParameter(offset + 0, prefix + "EG Shift", 0, 3, 2, 4),
            NumericParameter(offset + 0, prefix + "Fixed Frequency", 0, 1, 1, 3),
            NumericParameter(offset + 0, prefix + "Fixed Frequency Range", 0, 7, 3, 0),
            NumericParameter(offset + 1, prefix + "Operator Waveform", 0, 7, 3, 4),
            NumericParameter(offset + 1, prefix + "Frequency Range Fine", 0, 15, 4, 0),
        ]

    parameters += [
        NumericParameter(81, "Reverb Rate", 0, 7, 3, 0),
        NumericParameter(82, "Foot Controller Pitch", 0, 99),
        NumericParameter(83, "Foot Controller Amplitude", 0, 99),
    ]
    return tuple(parameters)


DX21_COMMON_VOICE_PARAMETERS = _dx21_common_voice_parameters()
DX21_TX81Z_COMMON_PACKED_PARAMETERS = _dx21_tx81z_common_packed_parameters()

DX21_VOICE = VoiceFormat(
    device="DX21/DX27/DX100",
    type="Single voice",
    header=DX21_VOICE_HEADER,
    parameter_data_length=93,
    parameters=DX21_COMMON_VOICE_PARAMETERS + DX21_ONLY_VOICE_PARAMETERS,
    name_parameter="Voice name",
)

TX81Z_ADDITIONAL_VOICE_DATA = VoiceFormat(
    device="TX81Z",
    type="Additional voice data",
    header=TX81Z_ACED_HEADER,
    parameter_data_length=23,
    parameters=_tx81z_aced_parameters(),
    checksum_start=TX81Z_ACED_CHECKSUM_START,
)

# VCED part of a TX81Z voice: DX21 layout without the pitch EG, which the
# TX81Z always transmits as rates 99 / levels 50
TX81Z_VCED = VoiceFormat(
    device="TX81Z",
    type="Single voice (VCED)",
    header=DX21_VOICE_HEADER,
    parameter_data_length=93,
    parameters=DX21_COMMON_VOICE_PARAMETERS,
    name_parameter="Voice name",
    filler=(87, TX81Z_UNUSED_PITCH_EG),
)

TX81Z_VOICE = CompositeFormat(
    device="TX81Z",
    type="Single voice",
    parts=(TX81Z_ADDITIONAL_VOICE_DATA, TX81Z_VCED),
    name_part=1,
)


def _item_start(header_length: int, index: int) -> int:
    return header_length + PACKED_VOICE_SIZE * index


def is_dx21_bank_data(data: BytesLike) -> bool:
    """Every voice leaves bytes 73-127 zero."""
    unused = PACKED_VOICE_SIZE - DX21_VOICE_USED_LENGTH
    return all(
        are_zero(data, _item_start(len(DX21_TX81Z_BANK_HEADER), i) + DX21_VOICE_USED_LENGTH, unused)
        for i in range(BANK_ITEM_COUNT)
    )


def is_tx81z_bank_data(data: BytesLike) -> bool:
    """Every voice has the fixed unused pitch EG and zeros after byte 83."""
    unused = PACKED_VOICE_SIZE - TX81Z_VOICE_USED_LENGTH
    for i in range(BANK_ITEM_COUNT):
        start = _item_start(len(DX21_TX81Z_BANK_HEADER), i)
        if not matches_pattern(data, TX81Z_UNUSED_PITCH_EG, start + TX81Z_UNUSED_PITCH_EG_OFFSET):
            return False
        if not are_zero(data, start + TX81Z_VOICE_USED_LENGTH, unused):
            return False
    return True


DX21_BANK = BankFormat(
    device="DX21/DX27/DX100",
    type="32-voice bank",
    header=DX21_TX81Z_BANK_HEADER,
    item_count=BANK_ITEM_COUNT,
    item_size=PACKED_VOICE_SIZE,
    parameters=DX21_TX81Z_COMMON_PACKED_PARAMETERS + DX21_ONLY_PACKED_PARAMETERS,
    name_parameter="Voice name",
    item_format=DX21_VOICE,
    predicate=is_dx21_bank_data,
)

TX81Z_BANK = BankFormat(
    device="TX81Z",
    type="32-voice bank",
    header=DX21_TX81Z_BANK_HEADER,
    item_count=BANK_ITEM_COUNT,
    item_size=PACKED_VOICE_SIZE,
    parameters=DX21_TX81Z_COMMON_PACKED_PARAMETERS + _tx81z_only_packed_parameters(),
    name_parameter="Voice name",
    item_format=TX81Z_VOICE,
    predicate=is_tx81z_bank_data,
)
