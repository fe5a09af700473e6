"""
Rich table displays for sysex information.

Provides formatted output for file analysis, bank items, parameters and
validation results.
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from sysexlib.analysis.syx_analyzer import SyxAnalysis
from sysexlib.utils.validation import ValidationError

console = Console()


def checksum_to_string(valid: Optional[bool]) -> str:
    """Convert a checksum result to a colored label."""
    if valid is None:
        return "[dim]n/a[/dim]"
    return "[green]OK[/green]" if valid else "[red]Invalid[/red]"


def display_syx_info(analysis: SyxAnalysis, show_messages: bool = True) -> None:
    """Display sysex file information with Rich formatting."""

    status = "[green]Valid[/green]" if analysis.valid else "[red]Invalid[/red]"
    manufacturer = analysis.manufacturer or "[dim]Unknown[/dim]"

    header_content = f"""[bold]File:[/bold] {escape(analysis.filepath)}
[bold]Size:[/bold] {analysis.filesize} bytes
[bold]Manufacturer:[/bold] {manufacturer} ({analysis.manufacturer_id})
[bold]Device:[/bold] {analysis.device or "N/A"}
[bold]Type:[/bold] {analysis.type or "N/A"}
[bold]Name:[/bold] {escape(analysis.name or "N/A")}
[bold]Checksum:[/bold] {checksum_to_string(analysis.checksum_valid)}
[bold]Status:[/bold] {status}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]Sysex Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if show_messages and len(analysis.messages) > 1:
        table = Table(
            title="Messages",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Size", width=6)
        table.add_column("Manufacturer", style="cyan")
        table.add_column("Device")
        table.add_column("Type")
        table.add_column("Checksum", width=8)

        for msg in analysis.messages:
            table.add_row(
                str(msg.index + 1),
                f"0x{msg.offset:04X}",
                str(msg.size),
                msg.manufacturer or msg.manufacturer_id,
                msg.device or "",
                msg.type or "",
                checksum_to_string(msg.checksum_valid),
            )

        console.print(table)

    if analysis.item_names:
        display_item_names(analysis.item_names)

    if analysis.errors:
        console.print(
            f"[yellow]{len(analysis.errors)} parameter value(s) out of range. "
            f"Run 'sysex validate' for details.[/yellow]"
        )


def display_item_names(names: List[str], title: str = "Items") -> None:
    """Display bank item names in a numbered table."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="white")

    for index, name in enumerate(names):
        table.add_row(str(index + 1), escape(name))

    console.print(table)


def display_parameters(values: Dict[str, Any], title: str = "Parameters") -> None:
    """Display parameter names and values."""
    table = Table(title=title, box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", justify="right")

    for name, value in values.items():
        shown = escape(f'"{value}"') if isinstance(value, str) else str(value)
        table.add_row(name, shown)

    console.print(table)


def display_validation(filepath: str, errors: List[ValidationError], checksum_valid: Optional[bool]) -> None:
    """Display validation result with Rich formatting."""
    valid = not errors and checksum_valid is not False
    if valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Checksum: {checksum_to_string(checksum_valid)}  "
            f"Invalid values: [red]{len(errors)}[/red]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if errors:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Parameter", style="cyan")
        table.add_column("Value", width=12)
        table.add_column("Problem")
        table.add_column("Suggested", style="green", width=12)

        for error in errors:
            table.add_row(
                error.parameter,
                escape(repr(error.value)),
                error.reason,
                escape(repr(error.corrected_value)),
            )

        console.print(table)
