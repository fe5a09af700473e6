"""
Validate command - check parameter ranges and checksums of a sysex file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

import sysexlib
from cli.display.tables import display_validation
from sysexlib.utils.validation import SysexError

console = Console()
app = typer.Typer()


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Sysex file to validate (.syx)"),
    fix: Optional[Path] = typer.Option(
        None, "--fix", "-f", help="Write a repaired copy to this file"
    ),
) -> None:
    """
    Validate a sysex file.

    Checks for:

    - Correct framing (F0 ... F7)
    - Parameter values within their allowed ranges
    - Matching checksums

    With --fix, out-of-range values are replaced by the nearest valid
    value, checksums are recomputed and the result is written to a new
    file.

    Examples:

        sysex validate voice.syx

        sysex validate voice.syx --fix voice-fixed.syx
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        message = sysexlib.load(file)
    except (SysexError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    errors = message.validate()
    checksum_valid = message.checksum_valid
    display_validation(str(file), errors, checksum_valid)

    if fix is not None:
        try:
            repaired = message.repaired()
            sysexlib.save(repaired, fix)
        except NotImplementedError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
        except OSError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Repaired copy written to {fix}[/green]")
        return

    if errors or checksum_valid is False:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
