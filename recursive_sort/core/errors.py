"""
Exception types for the recursive sort engine.
"""

from typing import Any, Optional


class RecursiveSortError(Exception):
    """Base class for all recursive sort errors."""
    pass


class ConfigError(RecursiveSortError):
    """Raised when a sort configuration is invalid."""
    pass


class CanonicalizationError(RecursiveSortError):
    """Raised when a value tree cannot be canonicalized."""
    pass


class MissingConfiguredKey(CanonicalizationError):
    """Raised in strict mode when a mapping lacks the configured sort key."""

    def __init__(self, key: Any, value_type: type) -> None:
        self.key = key
        self.value_type = value_type
        super().__init__(
            f"mapping of type {value_type.__name__} has no configured sort key {key!r}"
        )


class MissingConfiguredField(CanonicalizationError):
    """Raised in strict mode when a record lacks the configured sort field."""

    def __init__(self, field_name: str, value_type: type) -> None:
        self.field_name = field_name
        self.value_type = value_type
        super().__init__(
            f"record of type {value_type.__name__} has no visible field {field_name!r}"
        )


class EmptyComparableRecord(CanonicalizationError):
    """Raised when a record with no visible fields must be compared by its first field."""

    def __init__(self, value_type: type) -> None:
        self.value_type = value_type
        super().__init__(
            f"cannot compare empty record of type {value_type.__name__}: no visible fields"
        )


class UnsupportedComparison(CanonicalizationError):
    """Raised when two sequence elements cannot be ordered at all."""

    def __init__(self, left_type: type, right_type: type, reason: Optional[str] = None) -> None:
        self.left_type = left_type
        self.right_type = right_type
        message = f"cannot compare {left_type.__name__} with {right_type.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(RecursiveSortError):
    """
    Raised when one side of a document comparison is not valid JSON.

    The original decoder exception is chained as __cause__.
    """

    def __init__(self, side: str, detail: str) -> None:
        self.side = side
        self.detail = detail
        super().__init__(f"failed to decode {side} document: {detail}")
