"""Runtime type tagging and the sentinel for absent values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Undefined:
    """Marker for an absent value, distinct from an explicit ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_undefined(value: Any) -> bool:
    """Return True iff *value* is the ``UNDEFINED`` sentinel."""
    return value is UNDEFINED


def type_tag(value: Any) -> str:
    """Return the descriptor-style type name of *value*.

    Tags follow the vocabulary used in error ``expected_type`` fields, so a
    mismatch reads naturally: expected "object", received "array".
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool is an int subclass, so it must be tested first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__
