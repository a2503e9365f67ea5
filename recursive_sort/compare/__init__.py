"""
Equality helpers built on the recursive sort engine.
"""

from .diff import Difference, diff_values, structurally_equal
from .equal import (
    ComparisonResult,
    compare_documents,
    compare_values,
    decode_document,
    documents_equal_ignoring_order,
    values_equal,
)

__all__ = [
    "Difference",
    "diff_values",
    "structurally_equal",
    "ComparisonResult",
    "compare_documents",
    "compare_values",
    "decode_document",
    "documents_equal_ignoring_order",
    "values_equal",
]
