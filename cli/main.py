#!/usr/bin/env python3
"""
fsrs-history CLI - Historical retention analytics for review logs

Main entrypoint for the fsrs-history command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import log, replay
from fsrs_history.logging_config import setup_logging

app = typer.Typer(
    name="fsrs-history",
    help="Replay spaced-repetition review logs against FSRS",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Review log operations")

app.command(name="replay")(replay.replay_command)


@app.callback()
def configure():
    """Configure logging from FSRS_HISTORY_LOG_LEVEL / FSRS_HISTORY_LOG_FORMAT."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from fsrs_history.model.fsrs_model import fsrs_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]fsrs-history[/bold]", f"v{__version__}")
    table.add_row("fsrs", fsrs_version())

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
