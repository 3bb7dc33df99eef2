"""Tests for ObjectSchema validation, derivation and descriptors."""

import pytest

from dataknobs_shapes import (
    UNDEFINED,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaDefinitionError,
    StringSchema,
    ValidationContext,
)


class TestObjectTypeGuard:
    """Test the early exit on non-object input."""

    @pytest.mark.parametrize(
        "data,received",
        [
            (None, "null"),
            ([], "array"),
            ([{"id": "a"}], "array"),
            ((1, 2), "array"),
            ("text", "string"),
            (42, "number"),
            (True, "boolean"),
            (UNDEFINED, "undefined"),
        ],
    )
    def test_single_invalid_type_error(self, user_schema, data, received):
        """Test that non-object input yields exactly one invalid_type error."""
        result = user_schema.safe_parse(data)
        assert not result.success
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == "invalid_type"
        assert error.path == ()
        assert error.expected_type == "object"
        assert error.received_type == received

    def test_absent_input_without_arguments(self, user_schema):
        """Test calling safe_parse with no input at all."""
        result = user_schema.safe_parse()
        assert [e.code for e in result.errors] == ["invalid_type"]

    def test_default_substituted_for_absent_input(self):
        """Test that a configured default is validated in place of absent input."""
        schema = ObjectSchema({"enabled": BooleanSchema()}, default={"enabled": False})
        result = schema.safe_parse()
        assert result.success
        assert result.data == {"enabled": False}

    def test_default_is_copied(self):
        """Test that a mutable default is not shared between results."""
        default = {"enabled": False}
        schema = ObjectSchema({"enabled": BooleanSchema()}, default=default)
        first = schema.parse()
        first["enabled"] = True
        assert schema.parse() == {"enabled": False}
        assert default == {"enabled": False}

    def test_optional_object_accepts_absent(self):
        """Test that an optional object short-circuits on absent or None input."""
        schema = ObjectSchema({"id": StringSchema()}).optional()
        assert schema.safe_parse().data is None
        assert schema.safe_parse(None).data is None


class TestObjectProperties:
    """Test property validation and error aggregation."""

    def test_valid_object(self, user_schema):
        """Test a fully valid input."""
        result = user_schema.safe_parse({"id": "a", "age": 3})
        assert result.success
        assert result.data == {"id": "a", "age": 3}
        assert result.errors == ()

    def test_output_follows_shape_order(self, user_schema):
        """Test that output keys follow shape order, not input order."""
        result = user_schema.safe_parse({"age": 3, "id": "a"})
        assert list(result.data) == ["id", "age"]

    def test_unexpected_then_property_errors(self, user_schema):
        """Test the combined scenario: extra key plus a bound violation."""
        result = user_schema.safe_parse({"id": "a", "age": -1, "extra": True})
        assert not result.success
        assert [(e.path, e.code) for e in result.errors] == [
            (("extra",), "unexpected_property"),
            (("age",), "too_small"),
        ]

    def test_empty_shape_rejects_any_key(self):
        """Test that an empty shape reports every key as unexpected."""
        result = ObjectSchema({}).safe_parse({"a": 1})
        assert len(result.errors) == 1
        assert result.errors[0].code == "unexpected_property"
        assert result.errors[0].path == ("a",)

    def test_empty_shape_accepts_empty_dict(self):
        """Test the trivial valid case."""
        assert ObjectSchema({}).safe_parse({}).data == {}

    def test_unexpected_scan_does_not_short_circuit(self, user_schema):
        """Test that every unexpected key is reported, in input order."""
        result = user_schema.safe_parse({"z": 1, "id": "a", "y": 2, "age": 1})
        assert [e.path for e in result.errors] == [("z",), ("y",)]

    def test_missing_required_properties(self, user_schema):
        """Test that absent required properties are reported in shape order."""
        result = user_schema.safe_parse({})
        assert [(e.path, e.code) for e in result.errors] == [
            (("id",), "required"),
            (("age",), "required"),
        ]

    def test_all_property_errors_reported(self, user_schema):
        """Test there is no fail-fast across properties."""
        result = user_schema.safe_parse({"id": "", "age": "old"})
        assert [(e.path, e.code) for e in result.errors] == [
            (("id",), "too_small"),
            (("age",), "invalid_type"),
        ]

    def test_no_partial_object_on_failure(self, user_schema):
        """Test that failure carries no data."""
        result = user_schema.safe_parse({"id": "a", "age": -1})
        assert result.data is None

    def test_optional_property_installed_as_none(self):
        """Test that output contains exactly the shape keys."""
        schema = ObjectSchema({"id": StringSchema(), "nick": StringSchema().optional()})
        result = schema.safe_parse({"id": "a"})
        assert result.data == {"id": "a", "nick": None}

    def test_property_default_installed(self):
        """Test that a child's default ends up in the output."""
        schema = ObjectSchema({"retries": NumberSchema(default=3)})
        assert schema.parse({}) == {"retries": 3}

    def test_errors_recorded_in_supplied_context(self, user_schema):
        """Test that errors are written to the context as well as returned."""
        data = {"id": "a", "age": -1}
        ctx = ValidationContext(data)
        result = user_schema.safe_parse(data, ctx)
        assert ctx.get_errors() == list(result.errors)

    def test_input_not_mutated(self, user_schema):
        """Test that validation leaves the input untouched."""
        data = {"id": "a", "age": 1, "extra": 1}
        user_schema.safe_parse(data)
        assert data == {"id": "a", "age": 1, "extra": 1}


class TestNestedObjects:
    """Test path composition through nested objects."""

    def test_child_path_prefixed(self, address_schema):
        """Test that a child's own path surfaces under the parent key."""
        bad = {"street": "Main", "zip": "abc"}
        own = address_schema.safe_parse(bad)
        assert [e.path for e in own.errors] == [("zip",)]

        parent = ObjectSchema({"address": address_schema})
        nested = parent.safe_parse({"address": bad})
        assert [e.path for e in nested.errors] == [("address", "zip")]

    def test_deeply_nested_paths(self, address_schema):
        """Test several levels of prefixing, including unexpected keys."""
        schema = ObjectSchema({
            "user": ObjectSchema({"home": address_schema}),
        })
        data = {"user": {"home": {"street": 1, "zip": "12345", "apt": "4"}}}
        result = schema.safe_parse(data)
        assert [(e.path, e.code) for e in result.errors] == [
            (("user", "home", "apt"), "unexpected_property"),
            (("user", "home", "street"), "invalid_type"),
        ]

    def test_nested_type_guard_path(self, address_schema):
        """Test that a nested non-object reports at the property path."""
        schema = ObjectSchema({"address": address_schema})
        result = schema.safe_parse({"address": "nowhere"})
        assert [(e.path, e.code) for e in result.errors] == [(("address",), "invalid_type")]

    def test_root_value_is_top_level_input(self, address_schema):
        """Test that every error reports the original input as root value."""
        data = {"address": {"street": "Main", "zip": "x"}}
        result = ObjectSchema({"address": address_schema}).safe_parse(data)
        assert result.errors[0].root_value is data
        assert result.errors[0].received_value == "x"

    def test_context_with_initial_path(self, address_schema):
        """Test composition when validation starts below the root."""
        schema = ObjectSchema({"address": address_schema})
        ctx = ValidationContext({"outer": {}}, path=("outer",))
        result = schema.safe_parse({"address": {"street": "Main", "zip": "x", "n": 1}}, ctx)
        assert [e.path for e in result.errors] == [
            ("outer", "address", "n"),
            ("outer", "address", "zip"),
        ]


class TestObjectDerivation:
    """Test extend, omit and pick."""

    def test_extend_later_wins(self):
        """Test that the last argument defines a colliding property."""
        id_string = StringSchema()
        id_number = NumberSchema()
        base = ObjectSchema({"id": id_string, "name": StringSchema()})
        other = ObjectSchema({"id": id_number})

        extended = base.extend(other)
        assert extended.shape["id"] is id_number
        assert base.shape["id"] is id_string
        assert list(extended.shape) == ["id", "name"]

    def test_extend_multiple_arguments(self):
        """Test argument order and mapping arguments."""
        first = NumberSchema()
        second = BooleanSchema()
        base = ObjectSchema({"a": StringSchema()})
        extended = base.extend(ObjectSchema({"b": first}), {"b": second, "c": StringSchema()})
        assert list(extended.shape) == ["a", "b", "c"]
        assert extended.shape["b"] is second

    def test_derivations_do_not_mutate(self):
        """Test receiver and arguments are structurally unchanged."""
        base = ObjectSchema({"a": StringSchema(), "b": NumberSchema()})
        other = ObjectSchema({"b": BooleanSchema(), "c": StringSchema()})
        base_before, other_before = base.to_dict(), other.to_dict()

        base.extend(other)
        base.omit("a", "missing")
        base.pick("b", "missing")

        assert base.to_dict() == base_before
        assert other.to_dict() == other_before

    def test_omit(self):
        """Test removing keys, ignoring absent ones."""
        schema = ObjectSchema({"a": StringSchema(), "b": NumberSchema()})
        assert schema.omit("a", "zzz").keys() == ["b"]

    def test_pick(self):
        """Test keeping keys, ignoring absent ones."""
        schema = ObjectSchema({"a": StringSchema(), "b": NumberSchema(), "c": StringSchema()})
        assert schema.pick("c", "a", "zzz").keys() == ["a", "c"]

    def test_derived_schema_validates(self, user_schema):
        """Test that a picked schema treats dropped keys as unexpected."""
        picked = user_schema.pick("id")
        result = picked.safe_parse({"id": "a", "age": 1})
        assert [(e.path, e.code) for e in result.errors] == [(("age",), "unexpected_property")]

    def test_shape_is_read_only(self, user_schema):
        """Test that the exposed shape cannot be modified."""
        with pytest.raises(TypeError):
            user_schema.shape["new"] = StringSchema()  # type: ignore[index]

    def test_non_schema_rejected(self):
        """Test invalid shape definitions."""
        with pytest.raises(SchemaDefinitionError) as exc_info:
            ObjectSchema({"a": int})  # type: ignore[dict-item]
        assert exc_info.value.context["key"] == "a"

        with pytest.raises(SchemaDefinitionError):
            ObjectSchema({}).extend({"a": "string"})  # type: ignore[dict-item]


class TestObjectDescriptor:
    """Test descriptor export."""

    def test_descriptor(self, user_schema):
        """Test properties in shape order and the default value slot."""
        assert user_schema.to_dict() == {
            "type": "object",
            "properties": {
                "id": {"type": "text", "required": True, "minLength": 1},
                "age": {"type": "number", "required": True, "min": 0},
            },
            "defaultValue": None,
        }
        assert list(user_schema.to_dict()["properties"]) == ["id", "age"]

    def test_descriptor_with_default_and_description(self):
        """Test optional descriptor keys."""
        schema = ObjectSchema({}, default={}).describe("Settings").optional()
        assert schema.to_dict() == {
            "type": "object",
            "properties": {},
            "defaultValue": {},
            "required": False,
            "description": "Settings",
        }


    def test_descriptor_default_is_a_copy(self):
        """Test that editing an exported default leaves the schema unchanged."""
        schema = ObjectSchema({"tags": StringSchema().optional()}).default({"tags": "a"})
        schema.to_dict()["defaultValue"]["tags"] = 5
        schema.default_value["tags"] = 6

        result = schema.safe_parse()
        assert result.success
        assert result.data == {"tags": "a"}
        assert schema.to_dict()["defaultValue"] == {"tags": "a"}

    def test_read_only_descriptor(self):
        """Test the readOnly flag on object descriptors."""
        assert ObjectSchema({}).read_only().to_dict()["readOnly"] is True
        assert "readOnly" not in ObjectSchema({}).to_dict()


class TestObjectIdempotence:
    """Test re-validating successful output."""

    def test_revalidate_output(self, user_schema, address_schema):
        """Test that validated output validates to an equal value."""
        schema = user_schema.extend({
            "address": address_schema,
            "nick": StringSchema().optional(),
            "retries": NumberSchema(default=2),
        })
        first = schema.parse({"id": "a", "age": 1, "address": {"street": "Main", "zip": "12345"}})
        second = schema.parse(first)
        assert first == second
