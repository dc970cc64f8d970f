#!/usr/bin/env python3
"""
validstate CLI - validated reducer tooling

Main entrypoint for the validstate command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from validstate.core import DEFAULT_ERROR_KEY
from validstate_cli.commands import replay
from validstate_cli.logging_config import setup_logging

app = typer.Typer(
    name="validstate",
    help="Validated reducer tooling",
    add_completion=False,
)

console = Console()

app.command(name="replay")(replay.replay_command)


@app.command()
def version():
    """Show version information."""
    from validstate_cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]validstate[/bold]", f"v{__version__}")
    table.add_row("Default error key", DEFAULT_ERROR_KEY)

    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
