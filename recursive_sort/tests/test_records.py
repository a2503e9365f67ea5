"""
Tests for record (dataclass / named tuple / pydantic model) canonicalization and ordering.
"""

from collections import namedtuple
from dataclasses import dataclass, field
from typing import List, NamedTuple, Tuple

import pytest
from pydantic import BaseModel, ConfigDict

from recursive_sort.core import (
    EmptyComparableRecord,
    Kind,
    MissingConfiguredField,
    RecursiveSort,
    SortConfig,
    canonicalize,
    kind_of,
    visible_fields,
)


@dataclass
class Item:
    name: str
    rank: int


@dataclass
class Nested:
    values: List[str]


@dataclass
class Common:
    values: List[str]
    _will_not_be_sorted: List[str] = field(default_factory=list)


@dataclass
class Secretive:
    _token: str
    label: str


@dataclass
class Empty:
    pass


@dataclass
class OnlyHidden:
    _x: int = 0


@dataclass(frozen=True)
class Frozen:
    tags: Tuple[str, ...]


class Point(NamedTuple):
    x: int
    y: List[str]


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    roles: List[str] = []


def test_records_are_classified():
    assert kind_of(Item("a", 1)) is Kind.RECORD
    assert kind_of(Point(1, [])) is Kind.RECORD
    assert kind_of(Item) is Kind.OPAQUE
    assert kind_of((1, 2)) is Kind.SEQUENCE


def test_visible_fields_skip_underscore_names():
    assert visible_fields(Secretive("t", "l")) == [("label", "l")]
    assert visible_fields(Point(1, ["a"])) == [("x", 1), ("y", ["a"])]


def test_record_fields_are_canonicalized():
    assert canonicalize(Nested(values=["a", "c", "b"])) == Nested(values=["a", "b", "c"])


def test_hidden_fields_are_not_canonicalized():
    result = canonicalize(Common(values=["b", "a"], _will_not_be_sorted=["b", "a"]))

    assert result.values == ["a", "b"]
    assert result._will_not_be_sorted == ["b", "a"]


def test_frozen_records_are_rebuilt():
    original = Frozen(tags=("b", "a"))

    result = canonicalize(original)

    assert result == Frozen(tags=("a", "b"))
    assert original.tags == ("b", "a")


def test_named_tuple_fields_are_canonicalized():
    result = canonicalize(Point(1, ["b", "a"]))

    assert result == Point(1, ["a", "b"])
    assert type(result) is Point


def test_renamed_named_tuple_fields_stay_hidden():
    Pair = namedtuple("Pair", ["a", "def"], rename=True)

    result = canonicalize(Pair(["b", "a"], ["b", "a"]))

    assert result.a == ["a", "b"]
    assert result._1 == ["b", "a"]
    assert type(result) is Pair


def test_records_without_sort_field_use_first_field():
    data = [Item("b", 1), Item("a", 2)]

    assert canonicalize(data) == [Item("a", 2), Item("b", 1)]


def test_record_sort_field_orders_records():
    data = [Item("a", 2), Item("b", 1)]

    assert canonicalize(data, record_sort_field="rank") == [Item("b", 1), Item("a", 2)]


def test_named_tuples_ordered_by_sort_field():
    data = [Point(2, ["z"]), Point(1, ["y"])]

    assert canonicalize(data, record_sort_field="x") == [Point(1, ["y"]), Point(2, ["z"])]


def test_missing_sort_field_falls_back_to_first_field():
    data = [Item("b", 1), Item("a", 2)]

    assert canonicalize(data, record_sort_field="missing") == [Item("a", 2), Item("b", 1)]


def test_missing_sort_field_strict_raises():
    with pytest.raises(MissingConfiguredField, match="missing") as exc_info:
        canonicalize([Item("b", 1), Item("a", 2)], record_sort_field="missing", strict=True)

    assert exc_info.value.field_name == "missing"
    assert exc_info.value.value_type is Item


def test_hidden_field_is_not_a_sort_field():
    data = [Secretive("z", "b"), Secretive("a", "a")]

    with pytest.raises(MissingConfiguredField):
        canonicalize(data, record_sort_field="_token", strict=True)


def test_first_visible_field_skips_hidden_fields():
    data = [Secretive("a", "b"), Secretive("z", "a")]

    assert canonicalize(data) == [Secretive("z", "a"), Secretive("a", "b")]


def test_empty_records_cannot_be_compared():
    with pytest.raises(EmptyComparableRecord, match="Empty"):
        canonicalize([Empty(), Empty()])


def test_records_with_only_hidden_fields_cannot_be_compared():
    """Raised regardless of strict mode."""
    with pytest.raises(EmptyComparableRecord):
        canonicalize([OnlyHidden(1), OnlyHidden(2)], record_sort_field="x")


def test_single_empty_record_is_fine():
    assert canonicalize([Empty()]) == [Empty()]


def test_records_of_different_types_use_priority():
    """Different record types never look at fields."""
    data = [Item("a", 1), Empty()]

    result = RecursiveSort(SortConfig()).canonicalize(data)

    # "...test_records.Empty" < "...test_records.Item"
    assert result == [Empty(), Item("a", 1)]


def test_struct_example_equal_after_sort():
    """Two records with differently ordered nested lists canonicalize equally."""
    @dataclass
    class Outer:
        a: str
        c: List[str]
        common: Common

    first = Outer("a", ["a", "b", "c"], Common(["a", "b", "c"], ["a", "b"]))
    second = Outer("a", ["c", "b", "a"], Common(["c", "b", "a"], ["a", "b"]))

    sorter = RecursiveSort()
    assert sorter.canonicalize(first) == sorter.canonicalize(second)


def test_pydantic_models_are_records():
    user = User(name="a", roles=["b", "a"])

    assert kind_of(user) is Kind.RECORD
    assert visible_fields(user) == [("name", "a"), ("roles", ["b", "a"])]


def test_pydantic_model_fields_are_canonicalized():
    original = User(name="a", roles=["write", "admin"])

    result = canonicalize(original)

    assert result == User(name="a", roles=["admin", "write"])
    assert type(result) is User
    assert original.roles == ["write", "admin"]


def test_pydantic_models_ordered_by_sort_field():
    data = [User(name="zoe"), User(name="adam")]

    result = canonicalize(data, record_sort_field="name", strict=True)

    assert [user.name for user in result] == ["adam", "zoe"]
