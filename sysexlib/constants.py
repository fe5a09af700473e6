"""
Constants shared across sysex parsing.
"""

START_OF_SYSEX = 0xF0  # a.k.a. start-of-exclusive (SOX)
END_OF_SYSEX = 0xF7  # a.k.a. end-of-exclusive (EOX)

# Smallest well-formed message: F0, one id byte, one data byte, F7
MIN_SYSEX_LENGTH = 4

# Manufacturer ids reserved for universal (non manufacturer-exclusive) messages
UNIVERSAL_NON_REALTIME = 0x7E
UNIVERSAL_REALTIME = 0x7F
UNIVERSAL_IDS = (UNIVERSAL_NON_REALTIME, UNIVERSAL_REALTIME)

# A leading 0x00 id byte means the id is three bytes long
EXTENDED_ID_PREFIX = 0x00
