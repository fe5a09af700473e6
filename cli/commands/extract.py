"""
Extract command - write each item of a bank to its own .syx file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

import sysexlib
from sysexlib.utils.pattern import replace_non_printable
from sysexlib.utils.validation import SysexError

console = Console()
app = typer.Typer()

# Characters not allowed in file names on common filesystems
UNSAFE_FILENAME_CHARS = '<>:"/\\|?*'


def safe_filename(name: str) -> str:
    """Make an item name usable as part of a file name."""
    cleaned = replace_non_printable(name)
    for char in UNSAFE_FILENAME_CHARS:
        cleaned = cleaned.replace(char, "_")
    return cleaned.strip()


def item_filename(bank_name: str, index: int, item_name: Optional[str]) -> str:
    """File name for an extracted item: '<bank> - <n> - <item>.syx'."""
    label = safe_filename(item_name) if item_name else "Unnamed"
    return f"{bank_name} - {index + 1} - {label}.syx"


@app.command()
def extract(
    file: Path = typer.Argument(..., help="Bank file to extract items from (.syx)"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for extracted files (default: next to input)"
    ),
) -> None:
    """
    Extract every item (voice) of a bank into separate .syx files.

    Files are named '<bank> - <n> - <voice name>.syx'.

    Examples:

        sysex extract rom1a.syx

        sysex extract rom1a.syx --output-dir voices/
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        bank = sysexlib.load(file)
    except (SysexError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not bank.is_container:
        console.print(f"[red]Error: {bank.describe()} has no items to extract[/red]")
        raise typer.Exit(1)

    target = output_dir if output_dir is not None else file.parent
    target.mkdir(parents=True, exist_ok=True)

    names = bank.item_names() or []
    for index in range(bank.item_count):
        item_name = names[index] if index < len(names) else None
        item = bank.get_item(index)
        path = target / item_filename(file.stem, index, item_name)
        try:
            sysexlib.save(item, path)
        except OSError as e:
            console.print(f"[red]Error writing {path}: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"[dim]{index + 1:3d}[/dim] {path.name}")

    console.print(f"[green]Extracted {bank.item_count} items to {target}[/green]")


if __name__ == "__main__":
    app()
