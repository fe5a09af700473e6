"""
Universal (non manufacturer-exclusive) sysex messages.

Defined by the MIDI Association, identified by id 0x7E (non-realtime)
or 0x7F (realtime) in place of a manufacturer id.

Format:
    F0 7E <channel> <sub-id 1> <sub-id 2> [data...] F7   (Non-realtime)
    F0 7F <channel> <sub-id 1> <sub-id 2> [data...] F7   (Realtime)

Sample Dump Standard data packets carry an XOR checksum:
    F0 7E <channel> 02 <packet> [120 data bytes] <checksum> F7
    checksum = XOR of 7E, channel, 02, packet and data, masked to 7 bits
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

from sysexlib.constants import UNIVERSAL_NON_REALTIME, UNIVERSAL_REALTIME
from sysexlib.models.kind import Identity, SysexKind
from sysexlib.utils.checksum import xor_7bit

BytesLike = Union[bytes, bytearray]


@dataclass(frozen=True)
class UniversalMessageId:
    """One sub-id 1 entry, with optional sub-id 2 subtypes."""

    sub_id1: int
    type: str
    subtypes: Optional[Mapping[int, str]] = None


def _index(*entries: UniversalMessageId) -> Mapping[int, UniversalMessageId]:
    return MappingProxyType({e.sub_id1: e for e in entries})


NON_REALTIME_MESSAGES = _index(
    UniversalMessageId(0x01, "Sample Dump Header"),
    UniversalMessageId(0x02, "Sample Data Packet"),
    UniversalMessageId(0x03, "Sample Dump Request"),
    UniversalMessageId(
        0x04,
        "MIDI Time Code",
        {
            0x00: "Special",
            0x01: "Punch In Points",
            0x02: "Punch Out Points",
            0x03: "Delete Punch In Point",
            0x04: "Delete Punch Out Point",
            0x05: "Event Start Point",
            0x06: "Event Stop Point",
            0x07: "Event Start Points with additional info",
            0x08: "Event Stop Points with additional info",
            0x09: "Delete Event Start Point",
            0x0A: "Delete Event Stop Point",
            0x0B: "Cue Points",
            0x0C: "Cue Points with Additional Info",
            0x0D: "Delete Cue Point",
            0x0E: "Event Name in Additional Info",
        },
    ),
    UniversalMessageId(
        0x05,
        "Sample Dump Extensions",
        {
            0x01: "Loop Points Transmission",
            0x02: "Loop Points Request",
            0x03: "Sample Name Transmission",
            0x04: "Sample Name Request",
            0x05: "Extended Dump Header",
            0x06: "Extended Loop Points Transmission",
            0x07: "Extended Loop Points Request",
        },
    ),
    UniversalMessageId(
        0x06,
        "General Information",
        {
            0x01: "Identity Request",
            0x02: "Identity Reply",
        },
    ),
    UniversalMessageId(
        0x07,
        "File Dump",
        {
            0x01: "Header",
            0x02: "Data Packet",
            0x03: "Request",
        },
    ),
    UniversalMessageId(
        0x08,
        "MIDI Tuning Standard",
        {
            0x00: "Bulk Dump Request",
            0x01: "Bulk Dump Reply",
            0x03: "Tuning Dump Request",
            0x04: "Key-Based Tuning Dump",
            0x05: "Scale/Octave Tuning Dump, 1 byte format",
            0x06: "Scale/Octave Tuning Dump, 2 byte format",
            0x07: "Single Note Tuning Change with Bank Select",
            0x08: "Scale/Octave Tuning, 1 byte format",
            0x09: "Scale/Octave Tuning, 2 byte format",
        },
    ),
    UniversalMessageId(
        0x09,
        "General MIDI",
        {
            0x01: "General MIDI 1 System On",
            0x02: "General MIDI System Off",
            0x03: "General MIDI 2 System On",
        },
    ),
    UniversalMessageId(
        0x0A,
        "Downloadable Sounds",
        {
            0x01: "Turn DLS On",
            0x02: "Turn DLS Off",
            0x03: "Turn DLS Voice Allocation Off",
            0x04: "Turn DLS Voice Allocation On",
        },
    ),
    UniversalMessageId(
        0x0B,
        "File Reference Message",
        {
            0x01: "Open File",
            0x02: "Select or Reselect Contents",
            0x03: "Open File and Select Contents",
            0x04: "Close File",
        },
    ),
    UniversalMessageId(0x0C, "MIDI Visual Control"),
    UniversalMessageId(0x0D, "MIDI Capability Inquiry"),
    UniversalMessageId(0x7B, "End of File"),
    UniversalMessageId(0x7C, "Wait"),
    UniversalMessageId(0x7D, "Cancel"),
    UniversalMessageId(0x7E, "NAK"),
    UniversalMessageId(0x7F, "ACK"),
)

REALTIME_MESSAGES = _index(
    UniversalMessageId(
        0x01,
        "MIDI Time Code",
        {
            0x01: "Full Message",
            0x02: "User Bits",
        },
    ),
    UniversalMessageId(0x02, "MIDI Show Control"),
    UniversalMessageId(
        0x03,
        "Notation Information",
        {
            0x01: "Bar Number",
            0x02: "Time Signature (Immediate)",
            0x42: "Time Signature (Delayed)",
        },
    ),
    UniversalMessageId(
        0x04,
        "Device Control",
        {
            0x01: "Master Volume",
            0x02: "Master Balance",
            0x03: "Master Fine Tuning",
            0x04: "Master Coarse Tuning",
            0x05: "Global Parameter Control",
        },
    ),
    UniversalMessageId(
        0x05,
        "Real Time MTC Cueing",
        {
            0x00: "Special",
            0x01: "Punch In Points",
            0x02: "Punch Out Points",
            0x05: "Event Start Points",
            0x06: "Event Stop Points",
            0x07: "Event Start Points with additional info",
            0x08: "Event Stop Points with additional info",
            0x0B: "Cue Points",
            0x0C: "Cue Points with Additional Info",
            0x0E: "Event Name in Additional Info",
        },
    ),
    UniversalMessageId(0x06, "MIDI Machine Control Commands"),
    UniversalMessageId(0x07, "MIDI Machine Control Responses"),
)

CATEGORIES = {
    UNIVERSAL_NON_REALTIME: ("Non-realtime", NON_REALTIME_MESSAGES),
    UNIVERSAL_REALTIME: ("Realtime", REALTIME_MESSAGES),
}

SAMPLE_DATA_PACKET = 0x02
# F0 7E ch 02 packet [120 data] checksum F7
SAMPLE_DATA_PACKET_LENGTH = 127


def parse_type(universal_marker: int, sub_id1: int, sub_id2: Optional[int]) -> str:
    """
    Describe a universal message type.

    Args:
        universal_marker: 0x7E or 0x7F
        sub_id1: Sub-id 1 byte
        sub_id2: Sub-id 2 byte, None if the message has none

    Returns:
        Type label, e.g. "General Information: Identity Request"
    """
    category, messages = CATEGORIES[universal_marker]

    entry = messages.get(sub_id1)
    if entry is None:
        return f"Universal {category}: Unknown type"

    if entry.subtypes is None:
        return entry.type

    subtype = entry.subtypes.get(sub_id2, "Unknown type") if sub_id2 is not None else "Unknown type"
    return f"{entry.type}: {subtype}"


def identify(data: BytesLike) -> Identity:
    """Identify a universal message; data[1] must be 0x7E or 0x7F."""
    universal_marker = data[1]
    if universal_marker not in CATEGORIES:
        raise ValueError(f"Not a universal sysex marker: 0x{universal_marker:02X}")

    # F0 7x <channel> <sub-id 1> ... F7; sub-id 1 must precede F7
    if len(data) < 5:
        category = CATEGORIES[universal_marker][0]
        return Identity(SysexKind.UNIVERSAL, type=f"Universal {category}: Unknown type")

    sub_id1 = data[3]
    sub_id2 = data[4] if len(data) > 5 else None
    return Identity(SysexKind.UNIVERSAL, type=parse_type(universal_marker, sub_id1, sub_id2))


def is_sample_data_packet(data: BytesLike) -> bool:
    return (
        len(data) == SAMPLE_DATA_PACKET_LENGTH
        and data[1] == UNIVERSAL_NON_REALTIME
        and data[3] == SAMPLE_DATA_PACKET
    )


def checksum_valid(data: BytesLike) -> Optional[bool]:
    """
    Verify the XOR checksum of a sample data packet.

    Returns:
        True/False for sample data packets, None for messages that carry
        no checksum
    """
    if not is_sample_data_packet(data):
        return None
    return xor_7bit(data[1:-2]) == data[-2]
