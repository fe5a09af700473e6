"""Yamaha DX/TX series message support."""

from sysexlib.manufacturers.yamaha.factory import identify, identify_composite

__all__ = ["identify", "identify_composite"]
