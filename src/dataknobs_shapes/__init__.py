"""Composable schemas for validating structured data.

This package validates arbitrary input against declaratively composed
schemas and derives form-oriented descriptor metadata from the same
definitions:

- **Results**: ``ValidationResult`` (success with data, or an ordered list
  of path-annotated ``ValidationError`` values)
- **Context**: ``ValidationContext`` per-call state with branch isolation
- **Composites**: ``ObjectSchema``, ``UnionSchema``, ``ArraySchema``,
  ``RecordSchema``
- **Leaves**: ``StringSchema``, ``NumberSchema``, ``BooleanSchema``,
  ``EnumSchema``, ``AnySchema``, ``UnknownSchema``, ``NeverSchema``
- **String formats**: ``EmailSchema``, ``UrlSchema``, ``UUIDSchema``,
  ``IPAddressSchema``, ``JSONSchema`` and other ``FormatSchema`` subclasses

Example:
    ```python
    from dataknobs_shapes import (
        NumberSchema, ObjectSchema, StringSchema, UnionSchema,
    )

    contact = ObjectSchema({
        "name": StringSchema(min_length=1),
        "id": UnionSchema([StringSchema(), NumberSchema()]),
    })

    result = contact.safe_parse({"name": "", "id": 7})
    if not result:
        for error in result.errors:
            print(error.path, error.code, error.message)

    contact.to_dict()["properties"]["id"]["type"]
    # 'union'
    ```
"""

from dataknobs_shapes.constraints import Constraint, Custom, Length, OneOf, Pattern, Range
from dataknobs_shapes.containers import ArraySchema, RecordSchema
from dataknobs_shapes.context import ValidationContext
from dataknobs_shapes.exceptions import (
    SchemaDefinitionError,
    ShapesError,
    ValidationAggregateError,
)
from dataknobs_shapes.formats import (
    DateSchema,
    DatetimeLocalSchema,
    EmailSchema,
    FormatSchema,
    GUIDSchema,
    HexColorSchema,
    HTMLSchema,
    IPAddressSchema,
    ISODateSchema,
    JSONSchema,
    MacAddressSchema,
    PasswordSchema,
    PhoneNumberSchema,
    StreetAddressSchema,
    StringNumberSchema,
    UrlSchema,
    UUIDSchema,
    XMLSchema,
    ZipCodeSchema,
)
from dataknobs_shapes.leaves import BooleanSchema, EnumSchema, NumberSchema, StringSchema
from dataknobs_shapes.object import ObjectSchema
from dataknobs_shapes.result import ValidationError, ValidationResult
from dataknobs_shapes.schema import AnySchema, NeverSchema, Schema, UnknownSchema
from dataknobs_shapes.types import UNDEFINED, is_undefined, type_tag
from dataknobs_shapes.union import UnionSchema

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Results and context
    "ValidationError",
    "ValidationResult",
    "ValidationContext",
    # Exceptions
    "ShapesError",
    "SchemaDefinitionError",
    "ValidationAggregateError",
    # Schemas
    "Schema",
    "ObjectSchema",
    "UnionSchema",
    "ArraySchema",
    "RecordSchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "AnySchema",
    "UnknownSchema",
    "NeverSchema",
    # String formats
    "FormatSchema",
    "PasswordSchema",
    "EmailSchema",
    "UrlSchema",
    "ZipCodeSchema",
    "UUIDSchema",
    "GUIDSchema",
    "PhoneNumberSchema",
    "HexColorSchema",
    "MacAddressSchema",
    "StringNumberSchema",
    "StreetAddressSchema",
    "DateSchema",
    "DatetimeLocalSchema",
    "ISODateSchema",
    "HTMLSchema",
    "XMLSchema",
    "IPAddressSchema",
    "JSONSchema",
    # Constraints
    "Constraint",
    "Range",
    "Length",
    "Pattern",
    "OneOf",
    "Custom",
    # Sentinel and type tags
    "UNDEFINED",
    "is_undefined",
    "type_tag",
]
