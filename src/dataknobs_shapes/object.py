"""Object schema: validates named-property structures against a shape.

Validation surfaces every problem in one pass. The only early exit is a
top-level type mismatch, since per-property checks on a non-mapping input
would be meaningless.

Example:
    ```python
    from dataknobs_shapes import NumberSchema, ObjectSchema, StringSchema

    user = ObjectSchema({
        "id": StringSchema(min_length=1),
        "age": NumberSchema(minimum=0),
    })
    result = user.safe_parse({"id": "a", "age": -1, "extra": True})
    [(e.path, e.code) for e in result.errors]
    # [(('extra',), 'unexpected_property'), (('age',), 'too_small')]
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .context import ValidationContext
from .exceptions import SchemaDefinitionError
from .result import ValidationError, ValidationResult
from .schema import Schema
from .types import UNDEFINED

logger = logging.getLogger(__name__)


class ObjectSchema(Schema):
    """Validates a mapping with exactly the properties of its shape.

    The shape is an ordered mapping from property name to child schema.
    Its insertion order fixes both the order in which properties are
    validated and the order of the descriptor's properties.
    """

    def __init__(self, shape: Mapping[str, Schema] | None = None, **kwargs: Any):
        """Initialize object schema.

        Args:
            shape: Property name to child schema, in validation order
            **kwargs: Common schema flags (required, default, ...)

        Raises:
            SchemaDefinitionError: If a shape value is not a schema
        """
        super().__init__(**kwargs)
        self._shape: Mapping[str, Schema] = _freeze_shape(shape or {})

    @property
    def shape(self) -> Mapping[str, Schema]:
        """Read-only view of the shape."""
        return self._shape

    def keys(self) -> list[str]:
        """Property names, in shape order."""
        return list(self._shape)

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        """Validate *data* against the shape.

        Args:
            data: Input value
            ctx: Context for this call

        Returns:
            Success with a new dict of exactly the shape's keys, or failure
            with unexpected-property errors followed by property errors
        """
        if not isinstance(data, Mapping):
            return self._invalid_type(ctx, data, "object", "Invalid object")

        path = ctx.get_path()
        errors: list[ValidationError] = []

        unexpected = [key for key in data if key not in self._shape]
        if unexpected:
            logger.debug(f"Unexpected properties at {list(path)}: {unexpected}")
        for key in unexpected:
            errors.append(
                ValidationError(
                    path=(*path, key),
                    message=f"Unexpected property '{key}'",
                    code="unexpected_property",
                    received_value=data[key],
                    root_value=ctx.get_root_data(),
                )
            )

        output: dict[str, Any] = {}
        for key, child in self._shape.items():
            result = child.safe_parse(data.get(key, UNDEFINED), ctx.branch())
            if result.success:
                output[key] = result.data
            else:
                errors.extend(result.map_errors(key, path).errors)

        if errors:
            ctx.add_errors(errors)
            return ValidationResult.fail(errors)
        return ValidationResult.ok(output)

    def extend(self, *others: ObjectSchema | Mapping[str, Schema]) -> ObjectSchema:
        """Return a schema with the properties of *others* added.

        Later arguments win on name collision. Neither the receiver nor any
        argument is modified.
        """
        shape = dict(self._shape)
        for other in others:
            shape.update(other.shape if isinstance(other, ObjectSchema) else other)
        return self._with_shape(shape)

    def omit(self, *keys: str) -> ObjectSchema:
        """Return a schema without *keys*; absent keys are ignored."""
        return self._with_shape({k: v for k, v in self._shape.items() if k not in keys})

    def pick(self, *keys: str) -> ObjectSchema:
        """Return a schema with only *keys*; absent keys are ignored."""
        return self._with_shape({k: v for k, v in self._shape.items() if k in keys})

    def _with_shape(self, shape: Mapping[str, Schema]) -> ObjectSchema:
        return self._copy(_shape=_freeze_shape(shape))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": "object",
            "properties": {key: child.to_dict() for key, child in self._shape.items()},
            "defaultValue": self.default_value,
        }
        if not self._required:
            out["required"] = False
        if self._nullable:
            out["nullable"] = True
        if self._read_only:
            out["readOnly"] = True
        if self._description is not None:
            out["description"] = self._description
        return out


def _freeze_shape(shape: Mapping[str, Schema]) -> Mapping[str, Schema]:
    """Copy *shape* into a read-only mapping, checking every value is a schema."""
    for key, child in shape.items():
        if not isinstance(child, Schema):
            raise SchemaDefinitionError(
                f"Shape value for '{key}' must be a schema",
                context={"key": key, "received": type(child).__name__},
            )
    return MappingProxyType(dict(shape))
