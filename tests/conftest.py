"""Pytest configuration for dataknobs_shapes tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_shapes import (  # noqa: E402
    NumberSchema,
    ObjectSchema,
    StringSchema,
    UnionSchema,
)


@pytest.fixture
def user_schema():
    """Object schema with a non-empty id and a non-negative age."""
    return ObjectSchema({
        "id": StringSchema(min_length=1),
        "age": NumberSchema(minimum=0),
    })


@pytest.fixture
def address_schema():
    """Object schema with a five-digit zip code."""
    return ObjectSchema({
        "street": StringSchema(),
        "zip": StringSchema(pattern=r"^\d{5}$"),
    })


@pytest.fixture
def string_or_number():
    """Union of a string and a number, string first."""
    return UnionSchema([StringSchema(), NumberSchema()])
