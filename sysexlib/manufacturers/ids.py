"""
MIDI manufacturer id lookup table.

Manufacturer ids follow the start-of-exclusive byte. Most are a single
byte (0x01-0x7D). A leading 0x00 marks a three-byte id (0x00 0xNN 0xNN).
0x7E and 0x7F are reserved for universal messages and have no
manufacturer name.

Reference: MIDI Association manufacturer id list
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from sysexlib.constants import EXTENDED_ID_PREFIX

ManufacturerId = Tuple[int, ...]

_MANUFACTURERS = {
    # American group (0x01-0x1F)
    (0x01,): "Sequential Circuits",
    (0x02,): "Big Briar",
    (0x03,): "Octave / Plateau",
    (0x04,): "Moog",
    (0x05,): "Passport Designs",
    (0x06,): "Lexicon",
    (0x07,): "Kurzweil",
    (0x08,): "Fender",
    (0x09,): "Gulbransen",
    (0x0A,): "AKG Acoustics",
    (0x0B,): "Voyce Music",
    (0x0C,): "Waveframe",
    (0x0D,): "ADA",
    (0x0E,): "Garfield Electronics",
    (0x0F,): "Ensoniq",
    (0x10,): "Oberheim",
    (0x11,): "Apple",
    (0x12,): "Grey Matter Response",
    (0x13,): "Digidesign",
    (0x14,): "Palmtree Instruments",
    (0x15,): "JLCooper Electronics",
    (0x16,): "Lowrey",
    (0x17,): "Adams-Smith",
    (0x18,): "E-mu",
    (0x19,): "Harmony Systems",
    (0x1A,): "ART",
    (0x1B,): "Baldwin",
    (0x1C,): "Eventide",
    (0x1D,): "Inventronics",
    (0x1F,): "Clarity",
    # European group (0x20-0x3F)
    (0x20,): "Passac",
    (0x21,): "SIEL",
    (0x22,): "Synthaxe",
    (0x24,): "Hohner",
    (0x25,): "Twister",
    (0x26,): "Solton",
    (0x27,): "Jellinghaus",
    (0x28,): "Southworth Music Systems",
    (0x29,): "PPG",
    (0x2A,): "JEN",
    (0x2B,): "Solid State Logic",
    (0x2C,): "Audio Veritrieb",
    (0x2F,): "Elka",
    (0x30,): "Dynacord",
    (0x31,): "Viscount",
    (0x33,): "Clavia",
    (0x36,): "Cheetah",
    (0x3E,): "Waldorf",
    # Japanese group (0x40-0x5F)
    (0x40,): "Kawai",
    (0x41,): "Roland",
    (0x42,): "Korg",
    (0x43,): "Yamaha",
    (0x44,): "Casio",
    (0x46,): "Kamiya Studio",
    (0x47,): "Akai",
    (0x48,): "Victor",
    (0x4B,): "Fujitsu",
    (0x4C,): "Sony",
    (0x4E,): "Teac",
    (0x50,): "Matsushita Electric",
    (0x51,): "Fostex",
    (0x52,): "Zoom",
    (0x54,): "Matsushita Communication",
    (0x55,): "Suzuki",
    (0x56,): "Fuji Sound",
    (0x57,): "Acoustic Technical Laboratory",
    # Other
    (0x7D,): "Non-commercial",
    # Three-byte ids
    (0x00, 0x00, 0x0E): "Alesis",
    (0x00, 0x20, 0x1F): "TC Electronic",
    (0x00, 0x20, 0x29): "Novation",
    (0x00, 0x20, 0x32): "Behringer",
    (0x00, 0x20, 0x33): "Access Music",
    (0x00, 0x20, 0x3C): "Elektron",
    (0x00, 0x20, 0x6B): "Arturia",
    (0x00, 0x21, 0x09): "Native Instruments",
}

MANUFACTURERS: Mapping[ManufacturerId, str] = MappingProxyType(_MANUFACTURERS)


def get_id(data: Union[bytes, bytearray]) -> ManufacturerId:
    """
    Read the manufacturer id of a sysex message.

    Args:
        data: Sysex data, starting with F0

    Returns:
        One- or three-byte id as a tuple
    """
    if len(data) < 2:
        return ()
    if data[1] == EXTENDED_ID_PREFIX:
        return tuple(data[1:4])
    return (data[1],)


def get_name(manufacturer_id: ManufacturerId) -> Optional[str]:
    """Look up a manufacturer name, None if the id is unknown."""
    return MANUFACTURERS.get(tuple(manufacturer_id))


def format_id(manufacturer_id: ManufacturerId) -> str:
    """Format an id as hex, e.g. "43" or "00 20 32"."""
    return " ".join(f"{b:02X}" for b in manufacturer_id)
