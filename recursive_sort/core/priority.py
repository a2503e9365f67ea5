"""
Type priority lookup.

Orders values of different types. Registered types compare by rank
(position in the list the table was built from); anything unregistered
falls back to ordering by type display name, so a total order exists even
for an empty table.
"""

from typing import Any, Dict, Iterable, Optional

from .kinds import type_name


class TypePriorityLookup:
    """
    Immutable mapping of type -> rank.

    Usage:
        lookup = TypePriorityLookup.from_values("", 0, 0.0)
        lookup.compare_types("a", 1)   # True: str ranks before int
    """

    __slots__ = ("_priorities",)

    def __init__(self, priorities: Optional[Dict[type, int]] = None) -> None:
        self._priorities: Dict[type, int] = dict(priorities or {})

    @classmethod
    def from_types(cls, *order: type) -> "TypePriorityLookup":
        """
        Build a table where each type's rank is its position in `order`.

        A type listed twice keeps its last position.
        """
        return cls({typ: idx for idx, typ in enumerate(order)})

    @classmethod
    def from_values(cls, *order: Any) -> "TypePriorityLookup":
        """Build a table from example values, using each value's type."""
        return cls.from_types(*(type(value) for value in order))

    @property
    def types(self) -> Iterable[type]:
        return sorted(self._priorities, key=self._priorities.__getitem__)

    def priority_of(self, typ: type) -> Optional[int]:
        return self._priorities.get(typ)

    def compare_types(self, a: Any, b: Any) -> bool:
        """
        True when the type of `a` ranks strictly before the type of `b`.

        Both types must be registered for ranks to apply; otherwise the
        comparison falls back to compare_unknown_types.
        """
        a_rank = self._priorities.get(type(a))
        b_rank = self._priorities.get(type(b))
        if a_rank is None or b_rank is None:
            return self.compare_unknown_types(a, b)
        return a_rank < b_rank

    def compare_unknown_types(self, a: Any, b: Any) -> bool:
        # order based on the type name
        a_type, b_type = type(a), type(b)
        a_name, b_name = type_name(a_type), type_name(b_type)
        if a_name != b_name:
            return a_name < b_name
        # distinct types sharing a name: order by identity within this process
        return a_type is not b_type and id(a_type) < id(b_type)

    def __len__(self) -> int:
        return len(self._priorities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypePriorityLookup):
            return NotImplemented
        return self._priorities == other._priorities

    def __hash__(self) -> int:
        return hash(frozenset(self._priorities.items()))

    def __repr__(self) -> str:
        names = ", ".join(type_name(t) for t in self.types)
        return f"TypePriorityLookup([{names}])"
