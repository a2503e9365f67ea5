"""
Order-insensitive equality for values and JSON documents.
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..core.errors import DecodeError
from ..core.sorter import RecursiveSort
from ..logging_config import get_logger
from .diff import Difference, diff_values, structurally_equal

logger = get_logger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of comparing two values after canonicalization.

    Fields:
        equal: True when both canonical forms are structurally equal
        differences: Structural differences between the canonical forms
    """
    equal: bool
    differences: List[Difference] = field(default_factory=list)


def decode_document(text: str, side: str) -> Any:
    """
    Decode one JSON document.

    Raises:
        DecodeError: naming `side` ("first" or "second") on invalid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(side, str(e)) from e


def values_equal(a: Any, b: Any, sorter: Optional[RecursiveSort] = None) -> bool:
    """
    Check whether two values are equal, ignoring the order of sequence elements.

    Both values are canonicalized into fresh trees (the inputs are left
    untouched) and compared with structurally_equal.

    Raises:
        CanonicalizationError: If either value cannot be canonicalized
    """
    sorter = sorter or RecursiveSort()
    return structurally_equal(sorter.canonicalize(a), sorter.canonicalize(b))


def compare_values(a: Any, b: Any, sorter: Optional[RecursiveSort] = None) -> ComparisonResult:
    """Like values_equal, but also reports where the canonical forms differ."""
    sorter = sorter or RecursiveSort()
    differences = diff_values(sorter.canonicalize(a), sorter.canonicalize(b))
    if differences:
        logger.info("Values differ at %d path(s), first: %s", len(differences), differences[0])
    return ComparisonResult(equal=not differences, differences=differences)


def documents_equal_ignoring_order(a: str, b: str, sorter: Optional[RecursiveSort] = None) -> bool:
    """
    Check whether two JSON documents are equal, ignoring the order of array elements.

    Documents are decoded with the json module, recursively sorted and
    compared structurally. Object key order never matters.

    Raises:
        DecodeError: If either document is not valid JSON (side names which one)
        CanonicalizationError: If either document cannot be canonicalized
    """
    return values_equal(decode_document(a, "first"), decode_document(b, "second"), sorter)


def compare_documents(a: str, b: str, sorter: Optional[RecursiveSort] = None) -> ComparisonResult:
    """Like documents_equal_ignoring_order, but also reports the differences."""
    return compare_values(decode_document(a, "first"), decode_document(b, "second"), sorter)
