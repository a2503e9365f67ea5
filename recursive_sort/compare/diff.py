"""
Structural equality and difference reporting for canonical value trees.

Mapping pair order is insignificant; sequence element order is
significant. Types must match exactly, so True != 1 and 1 != 1.0.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List

from ..core.kinds import Kind, kind_of, record_fields

ROOT = "$"


@dataclass(frozen=True)
class Difference:
    """
    One structural difference between two values.

    Fields:
        path: Location in the tree, e.g. "$.test[2]"
        reason: "type", "value", "length", "missing key" or "extra key"
        left: Value on the first side (None when absent)
        right: Value on the second side (None when absent)
    """
    path: str
    reason: str
    left: Any = None
    right: Any = None

    def __str__(self) -> str:
        return f"{self.path}: {self.reason} ({self.left!r} != {self.right!r})"


def _key_path(path: str, key: Any) -> str:
    if isinstance(key, str) and key.isidentifier():
        return f"{path}.{key}"
    return f"{path}[{key!r}]"


def _primitive_equal(a: Any, b: Any) -> bool:
    # NaN equals NaN in canonical form
    return a == b or (a != a and b != b)


def _iter_differences(a: Any, b: Any, path: str) -> Iterator[Difference]:
    if type(a) is not type(b):
        yield Difference(path, "type", type(a).__name__, type(b).__name__)
        return

    kind = kind_of(a)
    if kind is Kind.SEQUENCE:
        if len(a) != len(b):
            yield Difference(path, "length", len(a), len(b))
        for idx, (x, y) in enumerate(zip(a, b)):
            yield from _iter_differences(x, y, f"{path}[{idx}]")
    elif kind is Kind.MAPPING:
        for key, x in a.items():
            if key not in b:
                yield Difference(_key_path(path, key), "missing key", x, None)
            else:
                yield from _iter_differences(x, b[key], _key_path(path, key))
        for key, y in b.items():
            if key not in a:
                yield Difference(_key_path(path, key), "extra key", None, y)
    elif kind is Kind.RECORD:
        # hidden fields are part of the value even though they are never sorted
        for (name, x), (_, y) in zip(record_fields(a), record_fields(b)):
            yield from _iter_differences(x, y, f"{path}.{name}")
    elif kind is Kind.PRIMITIVE:
        if not _primitive_equal(a, b):
            yield Difference(path, "value", a, b)
    elif kind is Kind.OPAQUE:
        if a != b:
            yield Difference(path, "value", a, b)


def diff_values(a: Any, b: Any) -> List[Difference]:
    """
    List every structural difference between two value trees.

    Values are compared as given; canonicalize them first to ignore
    element order.
    """
    return list(_iter_differences(a, b, ROOT))


def structurally_equal(a: Any, b: Any) -> bool:
    """True when diff_values(a, b) would be empty; stops at the first difference."""
    return next(_iter_differences(a, b, ROOT), None) is None
