"""
Sysex file analyzer.

Collects everything the command-line tool displays about a file:
- File and message statistics
- Identification (manufacturer, device, type) of the message and its parts
- Checksum validation results
- Byte regions (header, data, checksum, end) for annotated hex dumps
- Bank item names and parameter validation failures
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from sysexlib.factory import create, read_data
from sysexlib.manufacturers.ids import format_id
from sysexlib.models.layout import TRAILER_LENGTH, BankFormat, VoiceFormat
from sysexlib.models.sysex import Sysex
from sysexlib.utils.validation import ValidationError


@dataclass
class MessageInfo:
    """Information about a single framed message."""

    index: int
    offset: int
    size: int
    manufacturer_id: str
    manufacturer: Optional[str]
    device: Optional[str]
    type: Optional[str]
    kind: str
    checksum_valid: Optional[bool]


@dataclass
class Region:
    """A labelled byte range, end exclusive."""

    name: str
    start: int
    end: int
    style: str

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass
class SyxAnalysis:
    """Complete sysex file analysis result."""

    filepath: str
    filesize: int
    name: Optional[str]
    manufacturer_id: str
    manufacturer: Optional[str]
    device: Optional[str]
    type: Optional[str]
    kind: str
    known: bool
    checksum_valid: Optional[bool]

    messages: List[MessageInfo] = field(default_factory=list)
    regions: List[Region] = field(default_factory=list)

    item_count: int = 0
    item_names: List[str] = field(default_factory=list)

    parameter_count: int = 0
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors and self.checksum_valid is not False


class SyxAnalyzer:
    """Analyzer for sysex files and in-memory messages."""

    def __init__(self):
        self.message: Optional[Sysex] = None
        self.data: bytes = b""

    def analyze_file(self, filepath: Union[str, Path]) -> SyxAnalysis:
        """Analyze a .syx file (binary or hex text)."""
        path = Path(filepath)
        self.data = read_data(path)
        self.message = create(self.data, name=path.stem)
        return self._analyze(str(path))

    def analyze_bytes(self, data: bytes, name: str = "memory") -> SyxAnalysis:
        """Analyze sysex data from bytes."""
        self.data = bytes(data)
        self.message = create(self.data, name=name)
        return self._analyze(name)

    def analyze_message(self, message: Sysex, name: str = "memory") -> SyxAnalysis:
        self.data = message.data
        self.message = message
        return self._analyze(name)

    def _analyze(self, filepath: str) -> SyxAnalysis:
        message = self.message

        analysis = SyxAnalysis(
            filepath=filepath,
            filesize=len(self.data),
            name=message.name,
            manufacturer_id=format_id(message.manufacturer_id),
            manufacturer=message.manufacturer_name,
            device=message.device,
            type=message.type,
            kind=message.kind.name,
            known=message.is_known_type,
            checksum_valid=message.checksum_valid,
        )

        parts = message.parts if message.parts else (message,)
        offset = 0
        for index, part in enumerate(parts):
            analysis.messages.append(
                MessageInfo(
                    index=index,
                    offset=offset,
                    size=len(part),
                    manufacturer_id=format_id(part.manufacturer_id),
                    manufacturer=part.manufacturer_name,
                    device=part.device,
                    type=part.type,
                    kind=part.kind.name,
                    checksum_valid=part.checksum_valid,
                )
            )
            analysis.regions.extend(self._regions(part, offset, len(parts) > 1, index))
            offset += len(part)

        if message.is_container:
            analysis.item_count = message.item_count
            analysis.item_names = message.item_names() or []

        analysis.parameter_count = len(message.parameter_names)
        analysis.errors = message.validate()
        return analysis

    @staticmethod
    def _regions(part: Sysex, offset: int, numbered: bool, index: int) -> List[Region]:
        """Split one framed message into header / data / checksum / end."""
        prefix = f"Part {index + 1} " if numbered else ""
        size = len(part)
        layout = part.layout

        header_length = 0
        has_checksum = False
        if isinstance(layout, (VoiceFormat, BankFormat)):
            header_length = layout.header_length
            has_checksum = True
        elif part.checksum_valid is not None:
            # Universal sample data packet: F0 7E ch 02 packet
            header_length = 5
            has_checksum = True

        if header_length == 0:
            header_length = min(2 if part.data[1] else 4, size - 1)

        spans: List[Tuple[str, int, int, str]] = [
            ("Header", 0, header_length, "cyan"),
        ]
        data_end = size - (TRAILER_LENGTH if has_checksum else 1)
        if data_end > header_length:
            spans.append(("Data", header_length, data_end, "white"))
        if has_checksum:
            spans.append(("Checksum", data_end, size - 1, "yellow"))
        spans.append(("End", size - 1, size, "magenta"))

        return [
            Region(prefix + name, offset + start, offset + end, style)
            for name, start, end, style in spans
        ]
