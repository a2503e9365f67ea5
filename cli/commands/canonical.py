"""
Canonicalize command: print the canonical form of a JSON document
"""

import json
import typer
from typing import Optional
from rich.console import Console
from rich.syntax import Syntax

from recursive_sort import RecursiveSortError, canonical_json_str, fingerprint
from recursive_sort.compare import decode_document
from ._common import build_sorter, read_document

console = Console()


def canonicalize_command(
    path: str = typer.Argument(..., help="JSON document (path, or - for stdin)"),
    map_key: Optional[str] = typer.Option(
        None, "--map-key", "-k", help="Object key used to order objects inside arrays"
    ),
    record_field: Optional[str] = typer.Option(
        None, "--record-field", "-f", help="Field used to order records inside arrays"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when an object lacks the configured key"
    ),
    show_fingerprint: bool = typer.Option(
        False, "--fingerprint", help="Print the SHA-256 fingerprint instead of the document"
    ),
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Indent and highlight output"),
):
    """
    Print the canonical (order-independent) form of a JSON document.

    Examples:
        recsort canonicalize doc.json
        recsort canonicalize doc.json --map-key id --pretty
        recsort canonicalize doc.json --fingerprint
    """
    try:
        sorter = build_sorter(map_key, record_field, strict)
        value = decode_document(read_document(path, "input"), "input")

        if show_fingerprint:
            print(fingerprint(value, sorter))
            raise typer.Exit(0)

        canonical = canonical_json_str(value, sorter)
        if pretty:
            indented = json.dumps(json.loads(canonical), indent=2, ensure_ascii=False)
            console.print(Syntax(indented, "json", theme="monokai"))
        else:
            print(canonical)
        raise typer.Exit(0)

    except (OSError, RecursiveSortError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
