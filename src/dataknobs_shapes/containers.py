"""Array and record schemas.

Both validate every element in a branch context and prefix child errors
with the element's index or key, the same way ``ObjectSchema`` prefixes
property names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constraints import Length
from .context import ValidationContext
from .exceptions import SchemaDefinitionError
from .leaves import StringSchema
from .result import ValidationError, ValidationResult
from .schema import Schema


class ArraySchema(Schema):
    """Validates a list (or tuple) whose items all match one schema."""

    def __init__(
        self,
        items: Schema,
        min_length: int | None = None,
        max_length: int | None = None,
        **kwargs: Any,
    ):
        """Initialize array schema.

        Args:
            items: Schema every item must satisfy
            min_length: Minimum number of items (inclusive)
            max_length: Maximum number of items (inclusive)
            **kwargs: Common schema flags (required, default, ...)
        """
        super().__init__(**kwargs)
        self._items = _require_schema(items, "items")
        self._length = self._make_length(min_length, max_length)

    @staticmethod
    def _make_length(min: int | None, max: int | None) -> Length | None:
        if min is None and max is None:
            return None
        return Length(
            min=min,
            max=max,
            subject="array",
            min_message=f"Array must have at least {min} items",
            max_message=f"Array must have at most {max} items",
        )

    @property
    def items(self) -> Schema:
        """Schema every item must satisfy."""
        return self._items

    def min_length(self, value: int) -> ArraySchema:
        current_max = self._length.max if self._length else None
        return self._copy(_length=self._make_length(value, current_max))

    def max_length(self, value: int) -> ArraySchema:
        current_min = self._length.min if self._length else None
        return self._copy(_length=self._make_length(current_min, value))

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if not isinstance(data, (list, tuple)):
            return self._invalid_type(ctx, data, "array", "Invalid array")

        path = ctx.get_path()
        errors: list[ValidationError] = []
        if self._length is not None:
            errors.extend(self._length.check(data, ctx).errors)

        output = []
        for index, item in enumerate(data):
            result = self._items.safe_parse(item, ctx.branch())
            if result.success:
                output.append(result.data)
            else:
                errors.extend(result.map_errors(index, path).errors)

        if errors:
            ctx.add_errors(errors)
            return ValidationResult.fail(errors)
        return ValidationResult.ok(output)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor("array")
        out["items"] = [self._items.to_dict()]
        if self._length is not None:
            out.update(self._length.describe())
        return out


class RecordSchema(Schema):
    """Validates a mapping with arbitrary keys and uniformly typed values."""

    def __init__(self, values: Schema, keys: Schema | None = None, **kwargs: Any):
        """Initialize record schema.

        Args:
            values: Schema every value must satisfy
            keys: Schema every key must satisfy (default: any string)
            **kwargs: Common schema flags (required, default, ...)
        """
        super().__init__(**kwargs)
        self._values = _require_schema(values, "values")
        self._keys = _require_schema(keys, "keys") if keys is not None else StringSchema()

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        if not isinstance(data, Mapping):
            return self._invalid_type(ctx, data, "object", "Invalid record type")

        path = ctx.get_path()
        errors: list[ValidationError] = []
        output: dict[Any, Any] = {}

        for key, value in data.items():
            key_result = self._keys.safe_parse(key, ctx.branch())
            if not key_result.success:
                errors.extend(key_result.map_errors(key, path).errors)
                continue

            value_result = self._values.safe_parse(value, ctx.branch())
            if value_result.success:
                output[key_result.data] = value_result.data
            else:
                errors.extend(value_result.map_errors(key, path).errors)

        if errors:
            ctx.add_errors(errors)
            return ValidationResult.fail(errors)
        return ValidationResult.ok(output)

    def to_dict(self) -> dict[str, Any]:
        out = self._base_descriptor("record")
        out["keySchema"] = self._keys.to_dict()
        out["valueSchema"] = self._values.to_dict()
        return out


def _require_schema(value: Any, role: str) -> Schema:
    if not isinstance(value, Schema):
        raise SchemaDefinitionError(
            f"{role} must be a schema",
            context={"role": role, "received": type(value).__name__},
        )
    return value
