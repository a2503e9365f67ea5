"""
Compare command: order-insensitive equality of two JSON documents
"""

import json
import typer
from typing import Optional
from rich.console import Console
from rich.table import Table

from recursive_sort import RecursiveSortError, compare_documents
from ._common import build_sorter, read_document

console = Console()


def equal_command(
    first: str = typer.Argument(..., help="First JSON document (path, or - for stdin)"),
    second: str = typer.Argument(..., help="Second JSON document (path, or - for stdin)"),
    map_key: Optional[str] = typer.Option(
        None, "--map-key", "-k", help="Object key used to order objects inside arrays"
    ),
    record_field: Optional[str] = typer.Option(
        None, "--record-field", "-f", help="Field used to order records inside arrays"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when an object lacks the configured key"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Compare two JSON documents, ignoring the order of array elements.

    Exit codes: 0 equal, 1 different, 2 error.

    Examples:
        recsort equal a.json b.json
        recsort equal a.json b.json --map-key id --strict
        cat a.json | recsort equal - b.json --json
    """
    try:
        if first == "-" and second == "-":
            raise typer.BadParameter("only one document can be read from stdin")

        sorter = build_sorter(map_key, record_field, strict)
        result = compare_documents(
            read_document(first, "first"), read_document(second, "second"), sorter
        )

        if json_output:
            print(json.dumps({
                "equal": result.equal,
                "differences": [
                    {"path": d.path, "reason": d.reason, "left": repr(d.left), "right": repr(d.right)}
                    for d in result.differences
                ],
            }, indent=2))
        elif result.equal:
            console.print("[bold green]✓ Documents are equal[/bold green] (ignoring order)")
        else:
            console.print("[bold red]✗ Documents differ[/bold red]")
            table = Table(title="Differences")
            table.add_column("Path", style="cyan")
            table.add_column("Reason", style="yellow")
            table.add_column("First", style="dim")
            table.add_column("Second", style="dim")
            for d in result.differences:
                table.add_row(d.path, d.reason, repr(d.left), repr(d.right))
            console.print(table)

        raise typer.Exit(0 if result.equal else 1)

    except (OSError, RecursiveSortError, typer.BadParameter) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
