"""
Hex dump display utilities.
"""

from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box
from rich.markup import escape

from sysexlib.analysis.syx_analyzer import Region

console = Console()


def get_region_for_offset(regions: Sequence[Region], offset: int) -> Optional[Region]:
    """Find the region containing offset."""
    for region in regions:
        if region.start <= offset < region.end:
            return region
    return None


def format_hex_line(
    data: bytes, offset: int, regions: Sequence[Region], bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump, coloring each byte by region.

    Returns Rich Text object with colored output.
    """
    text = Text()

    # Offset
    text.append(f"0x{offset:04X} ", style="dim")

    # Hex bytes
    for i, byte in enumerate(data):
        region = get_region_for_offset(regions, offset + i)
        style = region.style if region is not None else "white"
        if byte in (0xF0, 0xF7):
            style = "bold " + style
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    # Pad if less than full line
    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    # ASCII representation
    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        elif byte == 0x00:
            text.append(".", style="dim")
        else:
            text.append(".", style="yellow")

    return text


def create_legend(regions: Sequence[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=20)
    table.add_column("Description", width=30)

    for region in regions:
        table.add_row(
            Text(region.name, style=region.style),
            f"{region.size} bytes, 0x{region.start:04X}-0x{region.end - 1:04X}",
        )

    return table


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display formatted hex dump with Rich."""

    lines: List[str] = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        hex_str = " ".join(f"{b:02X}" for b in chunk)
        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        addr = start_offset + offset

        lines.append(
            f"[dim]{addr:08X}[/dim]  {hex_str:<{bytes_per_line * 3}}  [cyan]{escape(ascii_str)}[/cyan]"
        )

    if len(data) > end:
        remaining = len(data) - end
        lines.append(f"[dim]... {remaining} more bytes ...[/dim]")

    content = "\n".join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
