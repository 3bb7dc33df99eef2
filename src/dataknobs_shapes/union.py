"""Union schema: first candidate to succeed wins."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .context import ValidationContext
from .exceptions import SchemaDefinitionError
from .result import ValidationError, ValidationResult
from .schema import Schema
from .types import type_tag

logger = logging.getLogger(__name__)


class UnionSchema(Schema):
    """Validates input against an ordered list of candidate schemas.

    Candidates are tried in declared order, each in its own branch context,
    and the first success is returned as-is. There is no best-match
    heuristic: ordering is the caller's to control. Errors from failed
    candidates are only surfaced when every candidate fails.
    """

    def __init__(self, candidates: Sequence[Schema], **kwargs: Any):
        """Initialize union schema.

        Args:
            candidates: Alternative schemas, in the order they are tried
            **kwargs: Common schema flags (required, default, ...)

        Raises:
            SchemaDefinitionError: If a candidate is not a schema
        """
        super().__init__(**kwargs)
        for index, candidate in enumerate(candidates):
            if not isinstance(candidate, Schema):
                raise SchemaDefinitionError(
                    f"Union candidate {index} must be a schema",
                    context={"index": index, "received": type(candidate).__name__},
                )
        self._candidates: tuple[Schema, ...] = tuple(candidates)

    @property
    def candidates(self) -> tuple[Schema, ...]:
        """Candidate schemas, in the order they are tried."""
        return self._candidates

    def validate(self, data: Any, ctx: ValidationContext) -> ValidationResult:
        collected: list[ValidationError] = []

        for candidate in self._candidates:
            branch = ctx.branch()
            result = candidate.safe_parse(data, branch)
            if result.success:
                return ValidationResult.ok(result.data)
            collected.extend(result.errors)

        if not collected:
            logger.debug(f"No union candidate reported errors at {list(ctx.get_path())}")
            collected.append(
                ctx.new_error(
                    "Invalid union input",
                    "invalid_union",
                    data,
                    expected_type="union",
                    received_type=type_tag(data),
                )
            )
        else:
            logger.debug(
                f"All {len(self._candidates)} union candidates failed at "
                f"{list(ctx.get_path())} with {len(collected)} error(s)"
            )

        ctx.add_errors(collected)
        return ValidationResult.fail(collected)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": "union",
            "required": self._required,
            "anyOf": [candidate.to_dict() for candidate in self._candidates],
        }
        if self.has_default:
            out["defaultValue"] = self.default_value
        if self._read_only:
            out["readOnly"] = True
        if self._description is not None:
            out["description"] = self._description
        return out
