"""Analysis tools for sysex files."""

from sysexlib.analysis.syx_analyzer import MessageInfo, Region, SyxAnalysis, SyxAnalyzer

__all__ = ["MessageInfo", "Region", "SyxAnalysis", "SyxAnalyzer"]
