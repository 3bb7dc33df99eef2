"""Leaf schemas for scalar values.

Each leaf performs a type check first and stops there on a mismatch; the
configured constraints then all run, so one call reports every violated
bound.
"""

from __future__ import annotations

import math
from re import Pattern as RegexPattern
from typing import Any, Sequence

from .constraints import Constraint, Length, OneOf, Pattern, Range
from .context import ValidationContext
from .result import ValidationResult
from .schema import Schema
from .types import UNDEFINED


class ConstrainedSchema(Schema):
    """Leaf schema holding named constraints.

    Constraints are keyed by name so that calling e.g. ``min_length`` twice
    replaces the earlier bound instead of stacking both.
    """

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._constraints: dict[str, Constraint] = {}

    def _with_constraint(self, name: str, constraint: Constraint) -> ConstrainedSchema:
        return self._copy(_constraints={**self._constraints, name: constraint})

    def _check_constraints(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        errors = []
        for constraint in self._constraints.values():
            errors.extend(constraint.check(value, ctx).errors)
        if errors:
            ctx.add_errors(errors)
            return ValidationResult.fail(errors)
        return ValidationResult.ok(value)

    def _constraint_descriptor(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for constraint in self._constraints.values():
            out.update(constraint.describe())
        return out


class StringSchema(ConstrainedSchema):
    """Validates ``str`` values with optional length and pattern bounds.

    Besides constraints, a string schema carries form hints that only affect
    its descriptor: the input type, a placeholder and an autocomplete list.
    """

    input_type = "text"

    def __init__(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: str | RegexPattern | None = None,
        **kwargs: Any,
    ):
        """Initialize string schema.

        Args:
            min_length: Minimum length (inclusive)
            max_length: Maximum length (inclusive)
            pattern: Regex the value must contain a match for
            **kwargs: Common schema flags (required, default, ...)
        """
        super().__init__(**kwargs)
        if min_length is not None:
            self._constraints["min_length"] = self._length(min=min_length)
        if max_length is not None:
            self._constraints["max_length"] = self._length(max=max_length)
        if pattern is not None:
            self._constraints["pattern"] = Pattern(pattern)
        self._placeholder: str | None = None
        self._list_id: str | None = None
        self._datalist: tuple[str, ...] = ()

    @staticmethod
    def _length(min: int | None = None, max: int | None = None, message: str | None = None) -> Length:
        return Length(
            min=min,
            max=max,
            subject="string",
            min_message=message or "String is too short",
            max_message=message or "String is too long",
        )

    def min_length(self, value: int, message: str | None = None) -> StringSchema:
        return self._with_constraint("min_length", self._length(min=value, message=message))

    def max_length(self, value: int, message: str | None = None) -> StringSchema:
        return self._with_constraint("max_length", self._length(max=value, message=message))

    def pattern(self, value: str | RegexPattern, message: str | None = None) -> StringSchema:
        return self._with_constraint("pattern", Pattern(value, message))

    def placeholder(self, value: str) -> StringSchema:
        """Return a copy whose descriptor carries placeholder text."""
        return self._copy(_placeholder=value)

    def datalist(self, list_id: str, options: Sequence[str]) -> StringSchema:
        """Return a copy with autocomplete suggestions.

        Suggestions are descriptor metadata only; values outside *options*
        still validate.

        Args:
            list_id: Identifier of the suggestion list
            options: Suggested values, in display order
        """
        return self._copy(_list_id=list_id, _datalist=tuple(options))

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if data is UNDEFINED:
            return self._missing(ctx, "string")
        if not isinstance(data, str):
            return self._invalid_type(ctx, data, "string", "Invalid string")
        return self._check_constraints(data, ctx)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor(self.input_type)
        out.update(self._constraint_descriptor())
        if self._placeholder is not None:
            out["placeholder"] = self._placeholder
        if self._list_id is not None:
            out["list"] = self._list_id
            out["dataList"] = list(self._datalist)
        return out


class NumberSchema(ConstrainedSchema):
    """Validates ``int``/``float`` values (never ``bool`` or NaN)."""

    def __init__(
        self,
        minimum: float | None = None,
        maximum: float | None = None,
        integer: bool = False,
        **kwargs: Any,
    ):
        """Initialize number schema.

        Args:
            minimum: Minimum value (inclusive)
            maximum: Maximum value (inclusive)
            integer: If True, only integral values are accepted
            **kwargs: Common schema flags (required, default, ...)
        """
        super().__init__(**kwargs)
        self._integer = integer
        if minimum is not None:
            self._constraints["min"] = Range(min=minimum)
        if maximum is not None:
            self._constraints["max"] = Range(max=maximum)

    def min(self, value: float, message: str | None = None) -> NumberSchema:
        return self._with_constraint("min", Range(min=value, min_message=message))

    def max(self, value: float, message: str | None = None) -> NumberSchema:
        return self._with_constraint("max", Range(max=value, max_message=message))

    def integer(self) -> NumberSchema:
        return self._copy(_integer=True)

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if data is UNDEFINED:
            return self._missing(ctx, "number")
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            return self._invalid_type(ctx, data, "number", "Invalid number")
        # Never convert ints to float: arbitrarily large ints overflow
        if isinstance(data, float) and math.isnan(data):
            return self._invalid_type(ctx, data, "number", "Invalid number")
        if self._integer and isinstance(data, float) and not data.is_integer():
            return self._invalid_type(ctx, data, "integer", "Expected an integer")
        return self._check_constraints(data, ctx)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor("number")
        out.update(self._constraint_descriptor())
        if self._integer:
            out["step"] = 1
        return out


class BooleanSchema(Schema):
    """Validates ``bool`` values."""

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if data is UNDEFINED:
            return self._missing(ctx, "boolean")
        if not isinstance(data, bool):
            return self._invalid_type(ctx, data, "boolean", "Invalid boolean")
        return ValidationResult.ok(data)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor("checkbox")
        out["checked"] = bool(self.default_value)
        return out


class EnumSchema(ConstrainedSchema):
    """Validates that a value is one of a fixed set of options."""

    def __init__(self, values: Sequence[Any], message: str | None = None, **kwargs: Any):
        """Initialize enum schema.

        Args:
            values: Allowed values, in display order
            message: Message reported for a value outside the set
            **kwargs: Common schema flags (required, default, ...)
        """
        super().__init__(**kwargs)
        self._constraints["options"] = OneOf(values, message or "Invalid enum value")

    @property
    def options(self) -> tuple[Any, ...]:
        """Allowed values, in display order."""
        return self._constraints["options"].values  # type: ignore[attr-defined]

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if data is UNDEFINED:
            return self._missing(ctx, "enum")
        return self._check_constraints(data, ctx)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor("select")
        out.update(self._constraint_descriptor())
        return out
