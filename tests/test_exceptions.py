"""Tests for the exception hierarchy."""

import pytest
from dataknobs_common import DataknobsError
from dataknobs_common import ValidationError as BaseValidationError

from dataknobs_shapes import (
    SchemaDefinitionError,
    ShapesError,
    ValidationAggregateError,
    ValidationError,
)


class TestShapesError:
    """Test the base ShapesError class."""

    def test_basic_exception(self):
        """Test basic exception without context."""
        error = ShapesError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.context == {}

    def test_exception_with_context(self):
        """Test exception with context dictionary."""
        error = SchemaDefinitionError("Bad shape", context={"key": "age"})
        assert str(error) == "Bad shape"
        assert error.context == {"key": "age"}

    def test_catchable_as_base(self):
        """Test that specific exceptions can be caught as base."""
        with pytest.raises(ShapesError):
            raise SchemaDefinitionError("Invalid definition")

    def test_dataknobs_hierarchy(self):
        """Test that shapes exceptions join the dataknobs hierarchy."""
        assert issubclass(ShapesError, DataknobsError)
        assert issubclass(SchemaDefinitionError, BaseValidationError)
        assert issubclass(ValidationAggregateError, BaseValidationError)

        with pytest.raises(DataknobsError) as exc_info:
            raise SchemaDefinitionError("Bad bound", context={"min": 3})
        assert exc_info.value.context == {"min": 3}


class TestValidationAggregateError:
    """Test ValidationAggregateError rendering."""

    def test_message_lists_errors(self):
        """Test the multi-line summary."""
        errors = [
            ValidationError(path=(), message="Invalid object", code="invalid_type"),
            ValidationError(path=("items", 0, "sku"), message="String is too short", code="too_small"),
        ]
        error = ValidationAggregateError(errors)
        assert str(error).splitlines() == [
            "Validation failed with 2 error(s)",
            "- (root): Invalid object",
            "- items.0.sku: String is too short",
        ]
        assert error.errors == errors
        assert isinstance(error, ShapesError)
