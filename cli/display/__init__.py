"""
CLI display modules.
"""

from cli.display.tables import (
    display_item_names,
    display_parameters,
    display_syx_info,
    display_validation,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_item_names",
    "display_parameters",
    "display_syx_info",
    "display_validation",
    "display_hex_dump",
]
