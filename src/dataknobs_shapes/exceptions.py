"""Custom exceptions for the dataknobs_shapes package.

This module defines exception types for the shapes package, built on the
common exception framework from dataknobs_common.

Validation failures are never raised while validating; they are returned as
data inside a ``ValidationResult``. Exceptions are reserved for two cases:

- A schema is constructed with an invalid definition
  (``SchemaDefinitionError``).
- A caller explicitly asks for raising behavior through ``Schema.parse``
  (``ValidationAggregateError``).

Example:
    ```python
    from dataknobs_shapes import NumberSchema, ValidationAggregateError

    try:
        NumberSchema(minimum=0).parse(-1)
    except ValidationAggregateError as e:
        for error in e.errors:
            print(error.path, error.code)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from dataknobs_common import DataknobsError
from dataknobs_common import ValidationError as BaseValidationError

if TYPE_CHECKING:
    from .result import ValidationError


class ShapesError(DataknobsError):
    """Base exception for the shapes package.

    Inherits ``context`` handling from ``DataknobsError``, so every shapes
    exception can be caught as a dataknobs exception.
    """

    pass


class SchemaDefinitionError(ShapesError, BaseValidationError):
    """Raised when a schema is constructed with an invalid definition.

    Common scenarios include:
    - A non-schema value in an object shape or union candidate list
    - Negative or inverted length/range bounds
    - An enum with no allowed values

    Example:
        ```python
        raise SchemaDefinitionError(
            "Shape values must be schemas",
            context={"key": "age", "received": "int"}
        )
        ```
    """

    pass


class ValidationAggregateError(ShapesError, BaseValidationError):
    """Raised by ``Schema.parse`` when validation fails.

    Carries every error the validation produced, in order.

    Attributes:
        errors: The validation errors, in the order they were reported
    """

    def __init__(self, errors: Sequence[ValidationError]):
        self.errors = list(errors)
        super().__init__(
            self.compile(self.errors),
            context={"error_count": len(self.errors)},
        )

    @staticmethod
    def compile(errors: Sequence[ValidationError]) -> str:
        """Render errors as a multi-line summary."""
        lines = [f"Validation failed with {len(errors)} error(s)"]
        for error in errors:
            path = ".".join(str(key) for key in error.path) if error.path else "(root)"
            lines.append(f"- {path}: {error.message}")
        return "\n".join(lines)


__all__ = [
    "ShapesError",
    "SchemaDefinitionError",
    "ValidationAggregateError",
]
