"""
sysex - Identify, inspect and extract MIDI System Exclusive files.

A modern CLI tool for analyzing synthesizer sysex dumps.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.info import info
from cli.commands.extract import extract
from cli.commands.params import params
from cli.commands.validate import validate
from cli.commands.dump import dump
from sysexlib import __version__

console = Console()

# Main app
app = typer.Typer(
    name="sysex",
    help="Identify, inspect and extract MIDI System Exclusive (sysex) files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="extract")(extract)
app.command(name="params")(params)
app.command(name="validate")(validate)
app.command(name="dump")(dump)


def setup_logging(verbose: bool) -> None:
    """Send library debug logging to the console when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]sysex[/bold] version {__version__}")
    console.print("[dim]MIDI System Exclusive file toolkit[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    sysex - Inspect MIDI System Exclusive dumps.

    Recognizes:

    - [cyan]Yamaha[/cyan] DX7, DX21/DX27/DX100 and TX81Z voices and banks
    - [cyan]Roland[/cyan] legacy and standard (data set / request) messages
    - [cyan]Universal[/cyan] realtime and non-realtime messages
    - [cyan]Behringer[/cyan] Pro-800

    [bold]Quick Start:[/bold]

        sysex info rom1a.syx            # Identify and list voices
        sysex params voice.syx          # Show voice parameters

    [bold]Commands:[/bold]

        sysex extract rom1a.syx         # One file per voice
        sysex params rom1a.syx -i 3     # Parameters of voice 3
        sysex validate voice.syx        # Check ranges and checksum
        sysex dump voice.syx            # Annotated hex dump

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
