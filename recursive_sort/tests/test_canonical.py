"""
Tests for canonical serialization.

Critical: These tests verify determinism guarantees.
"""

from dataclasses import dataclass

import pytest

from recursive_sort.core import RecursiveSort, SortConfig
from recursive_sort.core.canonical import canonical_json_bytes, canonical_json_str, fingerprint


@dataclass
class Item:
    name: str
    rank: int
    _cache: str = ""


def test_canonical_dict_key_order():
    """Dict key order must not affect canonical output."""
    d1 = {"z": 1, "a": 2, "m": 3}
    d2 = {"a": 2, "m": 3, "z": 1}

    assert canonical_json_str(d1) == canonical_json_str(d2)


def test_canonical_array_order():
    """Array element order must not affect canonical output."""
    s = canonical_json_str({"b": ["y", "x"], "a": 1})

    assert s == '{"a":1,"b":["x","y"]}'  # Keys sorted, arrays sorted, no whitespace


def test_canonical_json_bytes_determinism():
    """Same object must produce identical bytes."""
    obj = {"b": [2, 1], "a": 1, "c": {"x": 10, "y": [20, 10]}}

    b1 = canonical_json_bytes(obj)
    b2 = canonical_json_bytes(obj)

    assert b1 == b2
    assert isinstance(b1, bytes)


def test_canonical_handles_unicode():
    """Unicode strings must be handled consistently."""
    obj = {"key": ["語", "日本"]}

    s = canonical_json_str(obj)

    assert "日本" in s  # ensure_ascii=False preserves unicode
    assert s == '{"key":["日本","語"]}'


def test_canonical_records_serialize_visible_fields():
    s = canonical_json_str([Item("b", 1, "x"), Item("a", 2, "y")])

    assert s == '[{"name":"a","rank":2},{"name":"b","rank":1}]'


def test_canonical_uses_given_sorter():
    sorter = RecursiveSort(SortConfig(map_sort_key="id"))

    s = canonical_json_str([{"id": 2}, {"id": 1}], sorter)

    assert s == '[{"id":1},{"id":2}]'


def test_fingerprint_ignores_order():
    f1 = fingerprint({"tags": ["b", "a"], "n": 1})
    f2 = fingerprint({"n": 1, "tags": ["a", "b"]})

    assert f1 == f2
    assert len(f1) == 64


def test_fingerprint_differs_for_different_content():
    assert fingerprint({"tags": ["a"]}) != fingerprint({"tags": ["A"]})


def test_non_json_values_are_rejected():
    with pytest.raises(TypeError):
        canonical_json_str({"c": 1 + 2j})
