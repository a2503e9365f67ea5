"""
Sort engine configuration.

Environment Variables (SortConfig.from_env):
    RECSORT_MAP_SORT_KEY: Key extracted from mappings before comparing them
    RECSORT_RECORD_SORT_FIELD: Field extracted from records before comparing them
    RECSORT_STRICT: Fail instead of falling back when the key/field is missing
                    (1, true, yes, on / 0, false, no, off) - default: off
"""

import os
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import ConfigError
from .priority import TypePriorityLookup

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class SortConfig:
    """
    Immutable engine configuration.

    Fields:
        map_sort_key: Key whose value orders mappings of the same type (None = unset)
        record_sort_field: Field whose value orders records of the same type
        strict: Raise when the configured key/field is missing instead of falling back
        type_priority: Ranking used to order values of different types
    """
    map_sort_key: Optional[Any] = None
    record_sort_field: Optional[str] = None
    strict: bool = False
    type_priority: TypePriorityLookup = field(default_factory=TypePriorityLookup)

    def __post_init__(self) -> None:
        try:
            hash(self.map_sort_key)
        except TypeError as e:
            raise ConfigError(f"map_sort_key must be hashable: {self.map_sort_key!r}") from e
        if self.record_sort_field is not None and not isinstance(self.record_sort_field, str):
            raise ConfigError(
                f"record_sort_field must be a string: {self.record_sort_field!r}"
            )
        if not isinstance(self.type_priority, TypePriorityLookup):
            raise ConfigError("type_priority must be a TypePriorityLookup")

    @staticmethod
    def from_env(type_priority: Optional[TypePriorityLookup] = None) -> "SortConfig":
        """
        Build configuration from RECSORT_* environment variables.

        Empty values count as unset.

        Raises:
            ConfigError: RECSORT_STRICT is not a recognized boolean
        """
        map_sort_key = os.getenv("RECSORT_MAP_SORT_KEY") or None
        record_sort_field = os.getenv("RECSORT_RECORD_SORT_FIELD") or None
        strict_value = os.getenv("RECSORT_STRICT", "").strip().lower()
        if strict_value not in _TRUTHY | _FALSY:
            raise ConfigError(f"RECSORT_STRICT must be a boolean: {strict_value!r}")
        strict = strict_value in _TRUTHY
        return SortConfig(
            map_sort_key=map_sort_key,
            record_sort_field=record_sort_field,
            strict=strict,
            type_priority=type_priority if type_priority is not None else TypePriorityLookup(),
        )
