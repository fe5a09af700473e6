"""
Params command - list parameter values of a voice (or a bank item).
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

import sysexlib
from cli.display.tables import display_parameters
from sysexlib.utils.validation import SysexError

console = Console()
app = typer.Typer()


@app.command()
def params(
    file: Path = typer.Argument(..., help="Sysex file (.syx)"),
    item: Optional[int] = typer.Option(
        None, "--item", "-i", help="Bank item number (1-based) to show"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """
    Show the parameters of a voice.

    For banks, select a voice with --item.

    Examples:

        sysex params voice.syx

        sysex params rom1a.syx --item 26

        sysex params voice.syx --json
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        message = sysexlib.load(file)
        if item is not None:
            if not message.is_container:
                console.print(f"[red]Error: {message.describe()} has no items[/red]")
                raise typer.Exit(1)
            message = message.get_item(item - 1)
    except IndexError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except (SysexError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if message.is_container:
        console.print(
            f"[yellow]{message.describe()} holds {message.item_count} items. "
            f"Select one with --item.[/yellow]"
        )
        raise typer.Exit(1)

    if not message.can_parse:
        console.print(f"[red]Error: Parameters of {message.describe()} are not known[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(message.to_json())
    else:
        title = f"{message.describe()}: {message.name}" if message.name else message.describe()
        display_parameters(message.to_dict(), title=title)


if __name__ == "__main__":
    app()
