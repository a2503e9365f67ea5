"""
Canonical serialization for order-independent hashing.

Values are canonicalized by the recursive sort engine first, then encoded
as compact JSON with sorted keys, so two documents that differ only in
element or key order produce identical bytes.
"""

import hashlib
import json
from typing import Any, Optional

from .kinds import Kind, kind_of, visible_fields
from .sorter import RecursiveSort


def _to_json_compatible(value: Any) -> Any:
    """Records become objects of their visible fields; tuples become lists."""
    kind = kind_of(value)
    if kind is Kind.RECORD:
        return {name: _to_json_compatible(v) for name, v in visible_fields(value)}
    if kind is Kind.SEQUENCE:
        return [_to_json_compatible(item) for item in value]
    if kind is Kind.MAPPING:
        return {k: _to_json_compatible(v) for k, v in value.items()}
    return value


def canonical_json_bytes(value: Any, sorter: Optional[RecursiveSort] = None) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Guarantees:
    - sequence elements in canonical order (recursive sort)
    - sort_keys=True for mapping keys
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable

    Raises:
        CanonicalizationError: If the value cannot be canonicalized
        TypeError: If the canonical value is not JSON serializable
    """
    sorter = sorter or RecursiveSort()
    canon = _to_json_compatible(sorter.canonicalize(value))
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(value: Any, sorter: Optional[RecursiveSort] = None) -> str:
    """
    Deterministic JSON string (for display or storage).

    Same guarantees as canonical_json_bytes but returns string.
    """
    return canonical_json_bytes(value, sorter).decode("utf-8")


def fingerprint(value: Any, sorter: Optional[RecursiveSort] = None) -> str:
    """
    SHA-256 hex digest of the canonical JSON encoding.

    Example:
        fingerprint({"tags": ["b", "a"]}) == fingerprint({"tags": ["a", "b"]})
    """
    return hashlib.sha256(canonical_json_bytes(value, sorter)).hexdigest()
