"""
Dump command - annotated hex dump of a sysex file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cli.display.hex_view import create_legend, format_hex_line
from sysexlib.analysis.syx_analyzer import SyxAnalyzer
from sysexlib.utils.validation import SysexError

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Sysex file to dump (.syx)"),
    start: int = typer.Option(0, "--start", "-s", help="Start offset"),
    length: int = typer.Option(0, "--length", "-l", help="Number of bytes (0=all)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
    region: str = typer.Option(
        "", "--region", "-r", help="Show only one region (e.g. Header, Data, Checksum)"
    ),
) -> None:
    """
    Annotated hex dump of a sysex file.

    Bytes are color-coded by region:
    header, parameter data, checksum and end-of-exclusive.

    Examples:

        sysex dump voice.syx

        sysex dump rom1a.syx --region Data --length 128

        sysex dump voice.syx --start 6 --length 32
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    analyzer = SyxAnalyzer()
    try:
        analysis = analyzer.analyze_file(file)
    except (SysexError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    data = analyzer.data
    regions = analysis.regions

    if region:
        matches = [r for r in regions if r.name.lower() == region.lower()]
        if not matches:
            console.print(f"[red]Unknown region: {region}[/red]")
            console.print("Available regions: " + ", ".join(r.name for r in regions))
            raise typer.Exit(1)
        selected = matches[0]
        start = selected.start
        length = length or selected.size
        console.print(
            f"[{selected.style}]Showing region: {selected.name}[/{selected.style}] "
            f"[dim]({selected.size} bytes)[/dim]\n"
        )

    if length == 0:
        length = len(data) - start

    end = min(start + length, len(data))

    if not no_legend and not region:
        console.print(create_legend(regions))
        console.print()

    title = " ".join(w for w in (analysis.manufacturer, analysis.device, analysis.type) if w)
    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Message:[/bold] {title or 'Unknown'}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Showing:[/bold] 0x{start:04X} - 0x{max(end - 1, start):04X} ({end - start} bytes)",
            title="[bold]Sysex Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    header = Text()
    header.append("OFFSET ", style="dim")
    header.append(" ".join(f"{i:02X}" for i in range(width)), style="dim")
    header.append("  ASCII", style="dim")
    console.print(header)
    console.print("─" * (7 + width * 3 + 2 + width))

    lines_shown = 0
    for offset in range(start, end, width):
        chunk = data[offset : min(offset + width, end)]
        console.print(format_hex_line(chunk, offset, regions, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
