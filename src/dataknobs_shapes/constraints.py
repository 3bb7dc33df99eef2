"""Constraint checks applied by leaf schemas after their type check.

A constraint inspects an already type-checked value and reports every
violation it finds as ``ValidationError`` values located at the context's
current path. Constraints never raise for bad input.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from re import Pattern as RegexPattern
from typing import TYPE_CHECKING, Any

from .exceptions import SchemaDefinitionError
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .context import ValidationContext


class Constraint(ABC):
    """Base class for all constraints."""

    @abstractmethod
    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Validate a value against this constraint.

        Args:
            value: Value to validate, already known to have the right type
            ctx: Context used to locate any reported error

        Returns:
            ValidationResult with validation outcome
        """

    def describe(self) -> dict[str, Any]:
        """Descriptor attributes contributed by this constraint."""
        return {}


class Range(Constraint):
    """Numeric value must be in specified range."""

    def __init__(
        self,
        min: float | None = None,
        max: float | None = None,
        min_message: str | None = None,
        max_message: str | None = None,
    ):
        """Initialize range constraint.

        Args:
            min: Minimum value (inclusive)
            max: Maximum value (inclusive)
            min_message: Message reported when the value is below ``min``
            max_message: Message reported when the value is above ``max``
        """
        if min is not None and max is not None and min > max:
            raise SchemaDefinitionError(
                f"min ({min}) cannot be greater than max ({max})",
                context={"min": min, "max": max},
            )
        self.min = min
        self.max = max
        self.min_message = min_message or f"Number must be greater than or equal to {min}"
        self.max_message = max_message or f"Number must be less than or equal to {max}"

    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Check if value is in range."""
        errors = []
        if self.min is not None and value < self.min:
            errors.append(ctx.new_error(self.min_message, "too_small", value, "number", "number"))
        if self.max is not None and value > self.max:
            errors.append(ctx.new_error(self.max_message, "too_big", value, "number", "number"))

        if errors:
            return ValidationResult.fail(errors)
        return ValidationResult.ok(value)

    def describe(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.min is not None:
            out["min"] = self.min
        if self.max is not None:
            out["max"] = self.max
        return out


class Length(Constraint):
    """String/collection length must be in specified range."""

    def __init__(
        self,
        min: int | None = None,
        max: int | None = None,
        subject: str = "string",
        min_message: str | None = None,
        max_message: str | None = None,
    ):
        """Initialize length constraint.

        Args:
            min: Minimum length (inclusive)
            max: Maximum length (inclusive)
            subject: Type tag of the measured value, used in errors
            min_message: Message reported when the value is too short
            max_message: Message reported when the value is too long
        """
        if min is not None and min < 0:
            raise SchemaDefinitionError(f"min length cannot be negative: {min}")
        if max is not None and max < 0:
            raise SchemaDefinitionError(f"max length cannot be negative: {max}")
        if min is not None and max is not None and min > max:
            raise SchemaDefinitionError(
                f"min length ({min}) cannot be greater than max ({max})",
                context={"min": min, "max": max},
            )
        self.min = min
        self.max = max
        self.subject = subject
        self.min_message = min_message or f"Length must be at least {min}"
        self.max_message = max_message or f"Length must be at most {max}"

    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Check if value length is in range."""
        length = len(value)
        errors = []

        if self.min is not None and length < self.min:
            errors.append(ctx.new_error(self.min_message, "too_small", value, self.subject, self.subject))
        if self.max is not None and length > self.max:
            errors.append(ctx.new_error(self.max_message, "too_big", value, self.subject, self.subject))

        if errors:
            return ValidationResult.fail(errors)
        return ValidationResult.ok(value)

    def describe(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.min is not None:
            out["minLength"] = self.min
        if self.max is not None:
            out["maxLength"] = self.max
        return out


class Pattern(Constraint):
    """String value must match regex pattern."""

    def __init__(self, pattern: str | RegexPattern, message: str | None = None):
        """Initialize pattern constraint.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Message reported on mismatch
        """
        if isinstance(pattern, str):
            try:
                self.regex = re.compile(pattern)
            except re.error as e:
                raise SchemaDefinitionError(
                    f"Invalid pattern: {e}", context={"pattern": pattern}
                ) from e
        else:
            self.regex = pattern
        self.pattern_str = self.regex.pattern
        self.message = message or f"Value does not match pattern '{self.pattern_str}'"

    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Check if value matches pattern."""
        if not self.regex.search(value):
            return ValidationResult.fail(
                [ctx.new_error(self.message, "invalid_string", value, "string", "string")]
            )
        return ValidationResult.ok(value)

    def describe(self) -> dict[str, Any]:
        return {"pattern": self.pattern_str, "title": self.message}


class OneOf(Constraint):
    """Value must be in allowed set."""

    def __init__(self, values: Sequence[Any], message: str | None = None):
        """Initialize membership constraint.

        Args:
            values: Allowed values, in display order
            message: Message reported when the value is not allowed
        """
        if not values:
            raise SchemaDefinitionError("OneOf constraint requires at least one allowed value")
        self.values = tuple(values)
        self.allowed_str = ", ".join(repr(v) for v in self.values)
        self.message = message or f"Value must be one of: {self.allowed_str}"

    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Check if value is in allowed set."""
        # Linear scan so unhashable values are compared rather than rejected
        if not any(value == allowed and type(value) is type(allowed) for allowed in self.values):
            return ValidationResult.fail(
                [ctx.new_error(self.message, "invalid_enum_value", value, "enum", "invalid_value")]
            )
        return ValidationResult.ok(value)

    def describe(self) -> dict[str, Any]:
        return {"options": list(self.values)}


class Custom(Constraint):
    """Custom constraint using a predicate."""

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        message: str = "Custom validation failed",
        code: str = "custom",
    ):
        """Initialize custom constraint.

        Args:
            predicate: Callable returning True when the value is acceptable
            message: Error message if validation fails
            code: Error code reported on failure
        """
        if not callable(predicate):
            raise SchemaDefinitionError(
                "Custom constraint requires a callable",
                context={"received": type(predicate).__name__},
            )
        self.predicate = predicate
        self.message = message
        self.code = code

    def check(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        """Check using the predicate; a raising predicate counts as a failure."""
        try:
            passed = self.predicate(value)
        except Exception as e:
            return ValidationResult.fail(
                [ctx.new_error(f"Custom validation error: {e!s}", self.code, value)]
            )
        if not passed:
            return ValidationResult.fail([ctx.new_error(self.message, self.code, value)])
        return ValidationResult.ok(value)
