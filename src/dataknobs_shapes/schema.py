"""Schema contract shared by every schema variant.

A schema is an immutable validation rule. Variants implement ``validate``
(the variant-specific algorithm) and ``to_dict`` (static descriptor
metadata). Callers use ``safe_parse``, which owns context creation, default
substitution and the optional/nullable short-circuits, or ``parse`` which
raises on failure.

Modifiers such as ``optional()`` or ``default()`` never change the receiver;
they return a modified copy, so one schema instance can be shared freely,
including across threads.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .constraints import Constraint, Custom
from .context import ValidationContext
from .result import ValidationResult
from .types import UNDEFINED, type_tag

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_MESSAGE = "This field is required"
DEFAULT_READ_ONLY_MESSAGE = "Value is read-only"


class Schema(ABC):
    """Base class for all schemas."""

    def __init__(
        self,
        *,
        required: bool = True,
        default: Any = UNDEFINED,
        nullable: bool = False,
        description: str | None = None,
        required_message: str | None = None,
    ):
        """Initialize the flags shared by every schema.

        Args:
            required: If False, absent or None input validates as None
            default: Value substituted when input is absent
            nullable: If True, None validates as None
            description: Human-readable description for descriptors
            required_message: Message reported when required input is absent
        """
        self._required = required
        self._default = default
        self._nullable = nullable
        self._description = description
        self._required_message = required_message or DEFAULT_REQUIRED_MESSAGE
        self._read_only = False
        self._read_only_message = DEFAULT_READ_ONLY_MESSAGE
        self._refinements: tuple[Constraint, ...] = ()

    @abstractmethod
    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        """Run the variant-specific validation algorithm.

        Args:
            data: Input value (already default-substituted)
            ctx: Context for this call; errors are recorded here and
                returned in the result

        Returns:
            ValidationResult with the validated value or errors
        """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the descriptor for this schema.

        Descriptors are static metadata with a ``type`` discriminant,
        independent of any input.
        """

    @property
    def is_required(self) -> bool:
        """Whether absent or None input is an error."""
        return self._required

    @property
    def has_default(self) -> bool:
        """Whether absent input is replaced by a default."""
        return self._default is not UNDEFINED

    @property
    def default_value(self) -> Any:
        """A copy of the configured default, or None when there is none.

        The stored default is never handed out, so editing the returned
        value (or a descriptor holding it) cannot change later validations.
        """
        return None if self._default is UNDEFINED else copy.deepcopy(self._default)

    @property
    def is_nullable(self) -> bool:
        """Whether None validates as None."""
        return self._nullable

    @property
    def is_read_only(self) -> bool:
        """Whether only the default value is accepted."""
        return self._read_only

    @property
    def description(self) -> str | None:
        """Human-readable description, if any."""
        return self._description

    def safe_parse(self, data: Any = UNDEFINED, ctx: ValidationContext | None = None) -> ValidationResult:
        """Validate *data* and return the outcome without raising.

        Without *ctx* a fresh top-level context is created over *data*; this
        is the only way to start a validation. Composite schemas pass a
        branch of their own context when validating children.

        Args:
            data: Input value; ``UNDEFINED`` means absent
            ctx: Context supplied by a parent schema

        Returns:
            ValidationResult with outcome
        """
        if ctx is None:
            logger.debug(f"Validating {type_tag(data)} input with {type(self).__name__}")
            ctx = ValidationContext(data)

        if data is UNDEFINED and self.has_default:
            data = copy.deepcopy(self._default)

        if data is None and self._nullable:
            return ValidationResult.ok(None)

        if not self._required and (data is UNDEFINED or data is None):
            return ValidationResult.ok(None)

        result = self.validate(data, ctx)
        if result.success and self._read_only:
            result = self._check_read_only(result.data, ctx)
        if result.success and self._refinements:
            result = self._apply_refinements(result.data, ctx)
        return result

    def parse(self, data: Any = UNDEFINED) -> Any:
        """Validate *data* and return the validated value.

        Raises:
            ValidationAggregateError: If validation fails
        """
        result = self.safe_parse(data)
        if not result.success:
            raise result.into_error()
        return result.data

    def is_valid(self, data: Any = UNDEFINED) -> bool:
        return self.safe_parse(data).success

    def required(self, required: bool = True, message: str | None = None) -> Schema:
        """Return a copy with the required flag (and optionally its message) set."""
        return self._copy(
            _required=required,
            _required_message=message or self._required_message,
        )

    def optional(self) -> Schema:
        """Return a copy that accepts absent or None input."""
        return self._copy(_required=False)

    def nullable(self) -> Schema:
        """Return a copy that accepts None."""
        return self._copy(_nullable=True)

    def default(self, value: Any) -> Schema:
        """Return a copy that substitutes *value* for absent input."""
        return self._copy(_default=value)

    def describe(self, description: str) -> Schema:
        """Return a copy carrying *description* in its descriptor."""
        return self._copy(_description=description)

    def read_only(self, message: str | None = None) -> Schema:
        """Return a copy that only accepts its default value.

        A read-only field is displayed but not edited: absent input takes
        the default, and any other supplied value is rejected. Without a
        default every present value is rejected.
        """
        return self._copy(
            _read_only=True,
            _read_only_message=message or DEFAULT_READ_ONLY_MESSAGE,
        )

    def refine(
        self,
        check: Callable[[Any], bool],
        message: str = "Custom validation failed",
        code: str = "custom",
    ) -> Schema:
        """Return a copy with an extra predicate on successfully validated values.

        Every refinement runs, so all failing predicates are reported.
        """
        return self._copy(_refinements=(*self._refinements, Custom(check, message, code)))

    def _apply_refinements(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        errors = []
        for refinement in self._refinements:
            errors.extend(refinement.check(value, ctx).errors)
        if errors:
            ctx.add_errors(errors)
            return ValidationResult.fail(errors)
        return ValidationResult.ok(value)

    def _check_read_only(self, value: Any, ctx: ValidationContext) -> ValidationResult:
        if self.has_default and value == self._default:
            return ValidationResult.ok(value)
        return self._fail(ctx, self._read_only_message, "read_only", value)

    def _copy(self, **attrs: Any) -> Schema:
        """Shallow-copy this schema with *attrs* replaced."""
        clone = copy.copy(self)
        clone.__dict__.update(attrs)
        return clone

    def _fail(
        self,
        ctx: ValidationContext,
        message: str,
        code: str,
        data: Any,
        expected_type: str | None = None,
        received_type: str | None = None,
    ) -> ValidationResult:
        """Record a single error at the current path and return failure."""
        error = ctx.new_error(message, code, data, expected_type, received_type)
        ctx.add_error(error)
        return ValidationResult.fail([error])

    def _missing(self, ctx: ValidationContext, expected_type: str) -> ValidationResult:
        """Failure for required input that is absent."""
        return self._fail(
            ctx,
            self._required_message,
            "required",
            UNDEFINED,
            expected_type=expected_type,
            received_type="undefined",
        )

    def _invalid_type(self, ctx: ValidationContext, data: Any, expected_type: str, message: str) -> ValidationResult:
        return self._fail(
            ctx,
            message,
            "invalid_type",
            data,
            expected_type=expected_type,
            received_type=type_tag(data),
        )

    def _base_descriptor(self, type_name: str) -> dict[str, Any]:
        """Descriptor keys common to leaf schemas."""
        out: dict[str, Any] = {"type": type_name, "required": self._required}
        if self.has_default:
            out["defaultValue"] = self.default_value
        if self._nullable:
            out["nullable"] = True
        if self._read_only:
            out["readOnly"] = True
        if self._description is not None:
            out["description"] = self._description
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class AnySchema(Schema):
    """Accepts any value, including absent input."""

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        return ValidationResult.ok(None if data is UNDEFINED else data)

    def to_dict(self) -> dict[str, Any]:
        return self._base_descriptor("any")


class UnknownSchema(AnySchema):
    """Accepts any value; use where the value is opaque to the schema."""

    def to_dict(self) -> dict[str, Any]:
        return self._base_descriptor("unknown")


class NeverSchema(Schema):
    """Rejects every value."""

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        return self._fail(
            ctx,
            "Value is not allowed",
            "never_valid",
            data,
            expected_type="never",
            received_type=type_tag(data),
        )

    def to_dict(self) -> dict[str, Any]:
        return self._base_descriptor("never")
