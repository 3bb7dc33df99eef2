"""Per-call validation state.

A ``ValidationContext`` is created by the top-level ``Schema.safe_parse``
call and threaded explicitly through every nested call. It is the only
mutable state involved in validation and never outlives the call that
created it.
"""

from __future__ import annotations

from typing import Any, Iterable

from .result import PathKey, ValidationError


class ValidationContext:
    """Root data, current path and error log for one validation call.

    Composite schemas never hand their own context to a child. They hand a
    branch: a new context sharing the root data and path but starting with
    an empty error log. What a child reports is therefore only visible to
    the parent through the child's result, and the parent decides what to
    surface.
    """

    def __init__(self, root_data: Any, path: Iterable[PathKey] = ()):
        """Initialize context.

        Args:
            root_data: The original top-level input
            path: Position of this context relative to the root
        """
        self._root_data = root_data
        self._path: tuple[PathKey, ...] = tuple(path)
        self._errors: list[ValidationError] = []

    def get_root_data(self) -> Any:
        """Return the original top-level input."""
        return self._root_data

    def get_path(self) -> tuple[PathKey, ...]:
        """Return the current path (immutable)."""
        return self._path

    def add_error(self, error: ValidationError) -> None:
        """Append an error to the log."""
        self._errors.append(error)

    def add_errors(self, errors: Iterable[ValidationError]) -> None:
        """Append errors to the log, preserving their order."""
        self._errors.extend(errors)

    def get_errors(self) -> list[ValidationError]:
        """Return a copy of the error log."""
        return list(self._errors)

    def has_errors(self) -> bool:
        """Return True if any error has been recorded."""
        return bool(self._errors)

    def branch(self) -> ValidationContext:
        """Fork an isolated context for speculative evaluation.

        Returns:
            New context with the same root data and path and an empty
            error log
        """
        return ValidationContext(self._root_data, self._path)

    def new_error(
        self,
        message: str,
        code: str,
        value: Any,
        expected_type: str | None = None,
        received_type: str | None = None,
    ) -> ValidationError:
        """Build an error located at the current path.

        The error is returned, not recorded; callers decide whether it
        goes into this log.
        """
        return ValidationError(
            path=self._path,
            message=message,
            code=code,
            expected_type=expected_type,
            received_type=received_type,
            received_value=value,
            root_value=self._root_data,
        )

    def __repr__(self) -> str:
        return f"ValidationContext(path={list(self._path)!r}, errors={len(self._errors)})"
