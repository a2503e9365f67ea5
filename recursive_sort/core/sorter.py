"""
Recursive sort engine.

Canonicalizes a value tree bottom-up: every nested composite is
canonicalized first, then the elements of each sequence are stably sorted
with a comparator built from the engine's SortConfig. The result is
independent of the input order of sequence elements and mapping keys.

The input is never mutated; a fresh tree is returned, so a failed call
leaves the caller's value untouched. Cyclic value graphs are not supported
and exhaust the interpreter's recursion limit (RecursionError).
"""

import copy
import math
from collections.abc import MutableMapping
from functools import cmp_to_key
from typing import Any, List, Optional, Tuple

from .config import SortConfig
from .errors import (
    EmptyComparableRecord,
    MissingConfiguredField,
    MissingConfiguredKey,
    UnsupportedComparison,
)
from .kinds import Kind, is_model, is_namedtuple, kind_of, visible_fields
from ..logging_config import get_logger

logger = get_logger(__name__)

_MISSING = object()


def _less_float(a: float, b: float) -> bool:
    # NaN sorts after every number and ties with NaN
    if math.isnan(a):
        return False
    if math.isnan(b):
        return True
    return a < b


def _less_primitive(x: Any, y: Any) -> bool:
    if isinstance(x, complex):
        if _less_float(x.real, y.real):
            return True
        if _less_float(y.real, x.real):
            return False
        return _less_float(x.imag, y.imag)
    if isinstance(x, float):
        return _less_float(x, y)
    return x < y


class RecursiveSort:
    """
    Canonicalizer for nested sequences, mappings and records.

    Usage:
        sorter = RecursiveSort(SortConfig(map_sort_key="id"))
        canonical = sorter.canonicalize([{"id": 2}, {"id": 1}])
        # [{"id": 1}, {"id": 2}]

    A RecursiveSort holds no per-call state, so one instance may be shared
    across threads as long as each call works on its own value tree.
    """

    def __init__(self, config: Optional[SortConfig] = None) -> None:
        self.config = config if config is not None else SortConfig()

    def canonicalize(self, value: Any) -> Any:
        """
        Return the canonical form of `value`.

        Raises:
            MissingConfiguredKey: strict mode and a mapping lacks map_sort_key
            MissingConfiguredField: strict mode and a record lacks record_sort_field
            EmptyComparableRecord: a record with no visible fields had to be compared
            UnsupportedComparison: two elements have no defined order
        """
        kind = kind_of(value)
        if kind is Kind.SEQUENCE:
            return self._canonicalize_sequence(value)
        if kind is Kind.MAPPING:
            return self._canonicalize_mapping(value)
        if kind is Kind.RECORD:
            return self._canonicalize_record(value)
        # absent, primitive and opaque values are leaves
        return value

    def _canonicalize_sequence(self, value: Any) -> Any:
        items = [self.canonicalize(item) for item in value]
        items.sort(key=cmp_to_key(self.compare))
        logger.debug("Sorted %s of %d elements", type(value).__name__, len(items))

        if isinstance(value, list):
            result = copy.copy(value)
            result[:] = items
            return result
        if type(value) is tuple:
            return tuple(items)
        return type(value)(items)

    def _canonicalize_mapping(self, value: Any) -> Any:
        canonical = {k: self.canonicalize(v) for k, v in value.items()}
        if not isinstance(value, MutableMapping):
            # read-only mappings come back as plain dicts
            return canonical
        result = copy.copy(value)
        for k, v in canonical.items():
            result[k] = v
        return result

    def _canonicalize_record(self, value: Any) -> Any:
        if is_model(value):
            return value.model_copy(
                update={name: self.canonicalize(v) for name, v in visible_fields(value)}
            )
        if is_namedtuple(value):
            # hidden fields (e.g. renamed _1) are copied through
            return value._replace(
                **{name: self.canonicalize(v) for name, v in visible_fields(value)}
            )
        result = copy.copy(value)
        for name, v in visible_fields(value):
            # bypass frozen dataclass __setattr__
            object.__setattr__(result, name, self.canonicalize(v))
        return result

    def compare(self, x: Any, y: Any) -> int:
        """Three-way comparison derived from less()."""
        if self.less(x, y):
            return -1
        if self.less(y, x):
            return 1
        return 0

    def less(self, x: Any, y: Any) -> bool:
        """
        True when `x` orders strictly before `y`.

        Values of different types are ordered by the type priority table;
        values of the same type by their kind's rule.
        """
        if type(x) is not type(y):
            return self.config.type_priority.compare_types(x, y)

        kind = kind_of(x)
        if kind is Kind.PRIMITIVE:
            return _less_primitive(x, y)
        if kind is Kind.MAPPING:
            return self._less_mapping(x, y)
        if kind is Kind.RECORD:
            return self._less_record(x, y)
        if kind is Kind.ABSENT:
            return False
        raise UnsupportedComparison(
            type(x), type(y), f"{kind.value} values have no defined order"
        )

    def _less_mapping(self, x: Any, y: Any) -> bool:
        key = self.config.map_sort_key
        if key is None:
            # compare by type
            return self.config.type_priority.compare_types(x, y)

        x_value = x.get(key, _MISSING)
        y_value = y.get(key, _MISSING)
        if x_value is _MISSING or y_value is _MISSING:
            if self.config.strict:
                offender = x if x_value is _MISSING else y
                raise MissingConfiguredKey(key, type(offender))
            logger.debug("Mapping sort key %r missing, comparing by type", key)
            return self.config.type_priority.compare_types(x, y)
        return self.less(x_value, y_value)

    def _less_record(self, x: Any, y: Any) -> bool:
        field_name = self.config.record_sort_field
        if field_name is not None:
            x_value = self._visible_field(x, field_name)
            y_value = self._visible_field(y, field_name)
            if x_value is not _MISSING and y_value is not _MISSING:
                return self.less(x_value, y_value)
            if self.config.strict:
                offender = x if x_value is _MISSING else y
                raise MissingConfiguredField(field_name, type(offender))
            logger.debug("Record sort field %r missing, comparing first fields", field_name)

        return self.less(self._first_field(x), self._first_field(y))

    @staticmethod
    def _visible_field(record: Any, name: str) -> Any:
        for field_name, value in visible_fields(record):
            if field_name == name:
                return value
        return _MISSING

    @staticmethod
    def _first_field(record: Any) -> Any:
        fields: List[Tuple[str, Any]] = visible_fields(record)
        if not fields:
            raise EmptyComparableRecord(type(record))
        return fields[0][1]


def canonicalize(value: Any, config: Optional[SortConfig] = None, **options: Any) -> Any:
    """
    Canonicalize `value` with a one-off RecursiveSort.

    Either pass a SortConfig or its fields as keyword arguments:
        canonicalize(data, map_sort_key="id", strict=True)
    """
    if config is None:
        config = SortConfig(**options)
    elif options:
        raise TypeError("pass either a SortConfig or keyword options, not both")
    return RecursiveSort(config).canonicalize(value)
