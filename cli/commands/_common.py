"""
Helpers shared by CLI commands.
"""

import sys
from typing import Optional

from recursive_sort import DecodeError, RecursiveSort, SortConfig


def read_document(path: str, side: str) -> str:
    """
    Read a document from a file path, or from stdin when path is "-".

    Raises:
        DecodeError: naming `side` when the file is not valid UTF-8
    """
    try:
        if path == "-":
            return sys.stdin.read()
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DecodeError(side, f"not valid UTF-8: {e}") from e


def build_sorter(map_key: Optional[str], record_field: Optional[str], strict: bool) -> RecursiveSort:
    """
    Build a sorter from CLI options, defaulting to RECSORT_* environment variables.
    """
    env = SortConfig.from_env()
    return RecursiveSort(
        SortConfig(
            map_sort_key=map_key if map_key is not None else env.map_sort_key,
            record_sort_field=record_field if record_field is not None else env.record_sort_field,
            strict=strict or env.strict,
        )
    )
