#!/usr/bin/env python3
"""
fntoolbox CLI

Main entrypoint for the fntoolbox command-line tool.
"""

import typer
from typing import Optional
from rich.console import Console
from rich.table import Table

from fntoolbox.core.logging_config import setup_logging
from fntoolbox_cli.commands import replay

app = typer.Typer(
    name="fntoolbox",
    help="Functional toolkit: replay action logs through reducers",
    add_completion=False,
)

console = Console()

app.command("replay")(replay.replay_command)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override FNTOOLBOX_LOG_LEVEL"),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="Override FNTOOLBOX_LOG_FORMAT (json, text)"),
):
    """Configure logging before any command runs."""
    setup_logging(level=log_level, fmt=log_format)


@app.command()
def version():
    """Show version information."""
    from fntoolbox_cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]fntoolbox[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
