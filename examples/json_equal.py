"""
Compare two JSON documents whose arrays are ordered differently.

Example:
  python examples/json_equal.py
"""

import sys

from recursive_sort import documents_equal_ignoring_order


def main() -> int:
    a = '{"test": ["a", "c", "b"]}'
    b = '{"test": ["c", "a", "b"]}'
    if not documents_equal_ignoring_order(a, b):
        print(f"expected {a} == {b}", file=sys.stderr)
        return 1
    print("equal")
    return 0


if __name__ == "__main__":
    sys.exit(main())
