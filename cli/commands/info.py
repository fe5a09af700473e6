"""
Info command - identify a sysex file and summarize its contents.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console

from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_syx_info
from sysexlib.analysis.syx_analyzer import SyxAnalyzer
from sysexlib.utils.validation import SysexError

logger = logging.getLogger(__name__)

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="Sysex file to analyze (.syx)"),
    messages: bool = typer.Option(
        True, "--messages/--no-messages", "-m", help="Show individual messages of multi-part files"
    ),
    hex: bool = typer.Option(False, "--hex", "-x", help="Show a hex dump of the first bytes"),
) -> None:
    """
    Display sysex file information.

    Shows:

    - Manufacturer, device and message type
    - File size and checksum status
    - Parts of multi-message files
    - Item (voice) names of banks

    Examples:

        sysex info rom1a.syx

        sysex info voice.syx --hex
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

    logger.debug("Analyzed %s as %s", file, analysis.kind)
    display_syx_info(analysis, show_messages=messages)

    if hex:
        display_hex_dump(analyzer.data, title=f"{file.name} ({analysis.filesize} bytes)")


if __name__ == "__main__":
    app()
