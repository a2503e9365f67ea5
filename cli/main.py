#!/usr/bin/env python3
"""
recsort CLI - Order-independent comparison of JSON documents

Main entrypoint for the recsort command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from recursive_sort.logging_config import setup_logging
from cli.commands import canonical, compare

# Initialize Typer app
app = typer.Typer(
    name="recsort",
    help="Order-independent canonicalization and comparison of JSON documents",
    add_completion=False,
)

console = Console()

app.command("equal")(compare.equal_command)
app.command("canonicalize")(canonical.canonicalize_command)


@app.callback()
def configure():
    """Configure logging from RECSORT_LOG_LEVEL / RECSORT_LOG_FORMAT."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from recursive_sort import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]recsort CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"recursive-sort v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
