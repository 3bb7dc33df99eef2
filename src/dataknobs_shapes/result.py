"""Validation error and result types.

Every validation call resolves to a ``ValidationResult``: either a success
carrying the validated data, or a failure carrying an ordered list of
``ValidationError`` values. Errors are plain data; nothing here raises
except ``ValidationResult.into_error`` which *builds* (not raises) the
exception used by ``Schema.parse``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from .exceptions import ValidationAggregateError
from .types import UNDEFINED

PathKey = str | int
"""One segment of an error path: an object key or an array index."""


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure.

    ``path`` is always relative to the root of the top-level call, so the
    same schema reports different paths depending on where it is nested.
    """

    path: tuple[PathKey, ...]
    message: str
    code: str
    expected_type: str | None = None
    received_type: str | None = None
    received_value: Any = None
    root_value: Any = None

    def with_prefix(self, key: PathKey, base: Sequence[PathKey] = ()) -> ValidationError:
        """Return a copy with *key* inserted after the leading *base* segments.

        Composites validate children in branches, and a branch keeps its
        parent's path, so every child error path starts with *base*: the
        context path both were validated at. Those segments are replaced by
        ``(*base, key)`` unconditionally. With an empty *base* this is plain
        prepending.

        Args:
            key: Property name or array index to insert
            base: The context path both parent and child were validated at

        Returns:
            New ValidationError with the rewritten path
        """
        base = tuple(base)
        return replace(self, path=(*base, key, *self.path[len(base):]))

    def to_dict(self) -> dict[str, Any]:
        """Render the error as a JSON-compatible dictionary."""
        return {
            "path": list(self.path),
            "message": self.message,
            "code": self.code,
            "expectedType": self.expected_type,
            "receivedType": self.received_type,
            "receivedValue": None if self.received_value is UNDEFINED else self.received_value,
            "rootValue": None if self.root_value is UNDEFINED else self.root_value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of a validation call.

    Use the ``ok`` and ``fail`` constructors rather than building instances
    directly, so a success never carries errors and a failure never carries
    data.
    """

    success: bool
    data: Any = None
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check success."""
        return self.success

    @classmethod
    def ok(cls, data: Any) -> ValidationResult:
        """Create a successful result.

        Args:
            data: The validated (possibly defaulted) value

        Returns:
            Successful ValidationResult
        """
        return cls(success=True, data=data, errors=())

    @classmethod
    def fail(cls, errors: Sequence[ValidationError]) -> ValidationResult:
        """Create a failed result.

        Args:
            errors: The errors, in report order

        Returns:
            Failed ValidationResult
        """
        return cls(success=False, data=None, errors=tuple(errors))

    def map_errors(self, key: PathKey, base: Sequence[PathKey] = ()) -> ValidationResult:
        """Return a copy whose errors have *key* inserted into their paths."""
        return replace(self, errors=tuple(e.with_prefix(key, base) for e in self.errors))

    def into_error(self) -> ValidationAggregateError:
        """Build the exception that ``Schema.parse`` raises for this result."""
        return ValidationAggregateError(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Render the result as a JSON-compatible dictionary."""
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "errors": [e.to_dict() for e in self.errors]}
