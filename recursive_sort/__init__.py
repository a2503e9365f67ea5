"""
Recursive Sort

Order-independent canonicalization of nested sequences, mappings and records.

Two values that differ only in the order of their sequence elements or
mapping keys have the same canonical form:

    from recursive_sort import documents_equal_ignoring_order

    documents_equal_ignoring_order('{"test": ["a", "c", "b"]}', '{"test": ["c", "a", "b"]}')
    # True
"""

__version__ = "0.1.0"

from .core import (
    Kind,
    TypePriorityLookup,
    SortConfig,
    RecursiveSort,
    canonicalize,
    canonical_json_bytes,
    canonical_json_str,
    fingerprint,
    RecursiveSortError,
    ConfigError,
    CanonicalizationError,
    MissingConfiguredKey,
    MissingConfiguredField,
    EmptyComparableRecord,
    UnsupportedComparison,
    DecodeError,
)
from .compare import (
    Difference,
    ComparisonResult,
    values_equal,
    compare_values,
    documents_equal_ignoring_order,
    compare_documents,
    diff_values,
    structurally_equal,
)

__all__ = [
    "__version__",
    "Kind",
    "TypePriorityLookup",
    "SortConfig",
    "RecursiveSort",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "fingerprint",
    "RecursiveSortError",
    "ConfigError",
    "CanonicalizationError",
    "MissingConfiguredKey",
    "MissingConfiguredField",
    "EmptyComparableRecord",
    "UnsupportedComparison",
    "DecodeError",
    "Difference",
    "ComparisonResult",
    "values_equal",
    "compare_values",
    "documents_equal_ignoring_order",
    "compare_documents",
    "diff_values",
    "structurally_equal",
]
