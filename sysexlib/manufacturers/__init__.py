"""
Manufacturer id lookup and per-manufacturer identification rules.

Each manufacturer module exposes ``identify(data) -> Identity`` (and, for
manufacturers with multi-part message types, ``identify_composite``).
"""

from sysexlib.manufacturers.ids import MANUFACTURERS, format_id, get_id, get_name

__all__ = [
    "MANUFACTURERS",
    "format_id",
    "get_id",
    "get_name",
]
