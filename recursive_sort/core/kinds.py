"""
Value kinds: the boundary between caller objects and the sort engine.

Every value handed to the engine is classified into exactly one Kind. The
engine never inspects concrete types beyond this classification, so any
caller type maps onto one of:

- ABSENT: None (an absent reference)
- PRIMITIVE: bool, int, float, complex, str, bytes
- SEQUENCE: list, tuple
- MAPPING: any collections.abc.Mapping
- RECORD: dataclass instances, named tuples and pydantic models
- OPAQUE: everything else (leaf, never traversed)
"""

import builtins
import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel

PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes)


class Kind(Enum):
    ABSENT = "absent"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    OPAQUE = "opaque"


def is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_model(value: Any) -> bool:
    return isinstance(value, BaseModel)


def is_record(value: Any) -> bool:
    """Dataclass instances (not dataclass types), named tuples and pydantic models are records."""
    if is_model(value):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return is_namedtuple(value)


def kind_of(value: Any) -> Kind:
    """Classify a value. Records are checked before sequences so named tuples stay records."""
    if value is None:
        return Kind.ABSENT
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    if is_record(value):
        return Kind.RECORD
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(value, Mapping):
        return Kind.MAPPING
    return Kind.OPAQUE


def type_name(typ: type) -> str:
    """
    Stable display name of a type.

    Builtins use their bare name ("int", "str", "dict"); everything else is
    qualified by module ("myapp.models.User").
    """
    if typ.__module__ == builtins.__name__:
        return typ.__qualname__
    return f"{typ.__module__}.{typ.__qualname__}"


def _field_names(record: Any) -> List[str]:
    if is_model(record):
        return list(type(record).model_fields)
    if is_namedtuple(record):
        return list(type(record)._fields)
    return [f.name for f in dataclasses.fields(record)]


def is_visible(name: str) -> bool:
    return not name.startswith("_")


def record_fields(record: Any) -> List[Tuple[str, Any]]:
    """All (name, value) pairs of a record, hidden fields included."""
    return [(name, getattr(record, name)) for name in _field_names(record)]


def visible_fields(record: Any) -> List[Tuple[str, Any]]:
    """
    (name, value) pairs of a record's visible fields, in declared order.

    Fields whose name starts with an underscore are private and skipped.
    """
    return [
        (name, getattr(record, name))
        for name in _field_names(record)
        if is_visible(name)
    ]
