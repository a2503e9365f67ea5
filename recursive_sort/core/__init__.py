"""
Core canonicalization primitives.

This module provides the recursive sort engine and its collaborators:
- Kind: Classification of values into the engine's closed set of kinds
- TypePriorityLookup: Ordering of values of different types
- SortConfig: Immutable engine configuration
- RecursiveSort: Bottom-up canonicalizer
- Canonical: Order-independent JSON serialization and fingerprints
"""

from .kinds import Kind, kind_of, type_name, visible_fields
from .priority import TypePriorityLookup
from .config import SortConfig
from .sorter import RecursiveSort, canonicalize
from .canonical import canonical_json_bytes, canonical_json_str, fingerprint
from .errors import (
    RecursiveSortError,
    ConfigError,
    CanonicalizationError,
    MissingConfiguredKey,
    MissingConfiguredField,
    EmptyComparableRecord,
    UnsupportedComparison,
    DecodeError,
)

__all__ = [
    "Kind",
    "kind_of",
    "type_name",
    "visible_fields",
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
]
