"""Tests for schema builders, factories and the polymorphic additionalProperties field."""

from __future__ import annotations

import pytest
from jsonschema import Draft202012Validator
from jsonschema.validators import validator_for
from pydantic import ValidationError

from openapi_builder import (
    AdditionalProperties,
    AdditionalPropertiesDecodeError,
    DecodeError,
    Document,
    Schema,
    date_time_schema,
    decode_additional_properties,
    email_schema,
    id_schema,
    int64_schema,
    new_array_schema,
    new_integer_schema,
    new_object_schema,
    new_string_schema,
    pagination_schema,
    schema_ref,
    string_schema,
    uuid_schema,
)
from openapi_builder.serialize import from_json, to_dict


def test_additional_properties_true_encodes_as_bare_boolean() -> None:
    schema = new_object_schema().with_additional_properties(True)
    assert to_dict(schema) == {"type": "object", "additionalProperties": True}


def test_additional_properties_false_is_emitted() -> None:
    """An explicit ``false`` is meaningful and must not be dropped."""
    schema = new_object_schema().with_additional_properties(False)
    assert to_dict(schema) == {"type": "object", "additionalProperties": False}


def test_additional_properties_schema_encodes_as_nested_object() -> None:
    schema = new_object_schema().with_additional_properties(new_string_schema())
    assert to_dict(schema) == {
        "type": "object",
        "additionalProperties": {"type": "string"},
    }


def test_additional_properties_with_neither_alternative_encodes_false() -> None:
    assert AdditionalProperties().model_dump(mode="json", by_alias=True) is False


def test_additional_properties_rejects_both_alternatives() -> None:
    with pytest.raises(ValidationError, match="both a boolean and a schema"):
        AdditionalProperties(allowed=True, schema=new_string_schema())


@pytest.mark.parametrize("raw", [True, False])
def test_decode_additional_properties_boolean(raw: bool) -> None:
    decoded = decode_additional_properties(raw)
    assert decoded.allowed is raw
    assert decoded.schema_ is None


def test_decode_additional_properties_schema() -> None:
    decoded = decode_additional_properties({"type": "integer", "format": "int64"})
    assert decoded.allowed is None
    assert decoded.schema_ == int64_schema()


@pytest.mark.parametrize("raw", [1, "true", ["string"]])
def test_decode_additional_properties_rejects_other_shapes(raw: object) -> None:
    """Neither a boolean nor an object fails, reporting the boolean failure."""
    with pytest.raises(AdditionalPropertiesDecodeError) as exc_info:
        decode_additional_properties(raw)
    assert "valid boolean" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert exc_info.value.value == raw


def test_document_with_invalid_additional_properties_fails_to_decode() -> None:
    payload = {
        "openapi": "3.0.3",
        "info": {"title": "Broken", "version": "1"},
        "paths": {},
        "components": {
            "schemas": {"Bad": {"type": "object", "additionalProperties": 42}},
        },
    }
    with pytest.raises(DecodeError, match="additionalProperties must be a boolean"):
        Document.from_dict(payload)


def test_additional_properties_survive_json_round_trip() -> None:
    schema = new_object_schema().with_additional_properties(
        new_object_schema().with_additional_properties(False)
    )
    text = (
        '{"type": "object", "additionalProperties":'
        ' {"type": "object", "additionalProperties": false}}'
    )
    assert from_json(Schema, text) == schema


def test_builders_leave_receiver_unchanged() -> None:
    base = new_string_schema()
    derived = base.with_format("email").with_min_length(3)

    assert base.format is None
    assert base.min_length is None
    assert derived.format == "email"
    assert derived.min_length == 3


def test_collection_builders_copy_their_collections() -> None:
    base = new_object_schema().with_required_property("id", id_schema())
    extended = base.with_required_property("name", new_string_schema())

    assert base.required == ["id"]
    assert list(base.properties) == ["id"]
    assert extended.required == ["id", "name"]
    assert list(extended.properties) == ["id", "name"]


def test_schemas_are_frozen() -> None:
    schema = new_string_schema()
    with pytest.raises(ValidationError):
        schema.format = "email"  # type: ignore[misc]


def test_explicit_zero_constraints_are_emitted() -> None:
    schema = new_integer_schema().with_minimum(0).with_max_length(0)
    assert to_dict(schema) == {"type": "integer", "minimum": 0, "maxLength": 0}


def test_falsy_default_and_example_are_emitted() -> None:
    schema = new_integer_schema().with_default(0).with_example(False)
    assert to_dict(schema) == {"type": "integer", "default": 0, "example": False}


def test_unset_flags_are_omitted_and_set_flags_emitted() -> None:
    schema = new_string_schema().with_read_only(True).with_deprecated(False)
    assert to_dict(schema) == {"type": "string", "readOnly": True}


def test_schema_ref_points_at_components() -> None:
    assert to_dict(schema_ref("Pet")) == {"$ref": "#/components/schemas/Pet"}


@pytest.mark.parametrize(
    ("factory", "expected"),
    [
        (email_schema, {"type": "string", "format": "email"}),
        (date_time_schema, {"type": "string", "format": "date-time"}),
        (uuid_schema, {"type": "string", "format": "uuid"}),
        (int64_schema, {"type": "integer", "format": "int64"}),
        (
            id_schema,
            {"type": "integer", "format": "int64", "description": "Unique identifier"},
        ),
    ],
)
def test_format_factories(factory, expected) -> None:
    assert to_dict(factory()) == expected


def test_string_schema_without_format() -> None:
    assert to_dict(string_schema()) == {"type": "string"}


def test_array_schema_wraps_items() -> None:
    schema = new_array_schema(schema_ref("Pet")).with_min_items(1).with_unique_items(True)
    assert to_dict(schema) == {
        "type": "array",
        "items": {"$ref": "#/components/schemas/Pet"},
        "minItems": 1,
        "uniqueItems": True,
    }


def test_composition_and_discriminator() -> None:
    schema = (
        Schema()
        .with_one_of(schema_ref("Cat"), schema_ref("Dog"))
        .with_discriminator("petType", {"cat": "#/components/schemas/Cat"})
        .with_not(new_string_schema())
    )
    assert to_dict(schema) == {
        "oneOf": [
            {"$ref": "#/components/schemas/Cat"},
            {"$ref": "#/components/schemas/Dog"},
        ],
        "not": {"type": "string"},
        "discriminator": {
            "propertyName": "petType",
            "mapping": {"cat": "#/components/schemas/Cat"},
        },
    }


def test_pagination_schema_is_valid_json_schema() -> None:
    """The emitted pagination schema is accepted by a JSON Schema validator."""
    rendered = to_dict(pagination_schema())

    assert rendered["required"] == ["page", "limit", "total"]
    assert list(rendered["properties"]) == ["page", "limit", "total", "hasNext"]

    validator_type = validator_for(rendered, default=Draft202012Validator)
    validator_type.check_schema(rendered)
    validator = validator_type(rendered)
    assert validator.is_valid({"page": 1, "limit": 20, "total": 41, "hasNext": True})
    assert not validator.is_valid({"page": 1, "limit": 20})
