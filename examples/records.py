"""
Canonicalize nested dataclasses.

Fields starting with an underscore are private: they are never sorted,
but still take part in equality.

Example:
  python examples/records.py
"""

import sys
from dataclasses import dataclass, field
from typing import Dict, List

from recursive_sort import RecursiveSort, values_equal


@dataclass
class Common:
    values: Dict[str, List[str]]
    _will_not_be_sorted: List[str] = field(default_factory=list)


@dataclass
class Struct:
    a: str
    b: str
    c: List[str]
    common: Common


def main() -> int:
    first = Struct(
        a="a",
        b="b",
        c=["a", "b", "c"],
        common=Common(
            values={"a": ["a", "b", "c"], "b": ["a", "b", "c"]},
            _will_not_be_sorted=["a", "b"],
        ),
    )
    second = Struct(
        a="a",
        b="b",
        c=["c", "b", "a"],
        common=Common(
            values={"b": ["c", "b", "a"], "a": ["c", "b", "a"]},
            _will_not_be_sorted=["a", "b"],
        ),
    )

    sorter = RecursiveSort()
    if not values_equal(first, second, sorter):
        print(f"expected {first} == {second}", file=sys.stderr)
        return 1
    print(sorter.canonicalize(second))
    return 0


if __name__ == "__main__":
    sys.exit(main())
