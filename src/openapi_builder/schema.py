"""Schema objects, the polymorphic ``additionalProperties`` field and schema factories."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from .base import SpecValue
from .info import ExternalDocs

_COMPONENT_SCHEMA_PREFIX = "#/components/schemas/"
_STRICT_BOOL: TypeAdapter[bool] = TypeAdapter(StrictBool)


class AdditionalPropertiesDecodeError(ValueError):
    """Raised when an ``additionalProperties`` value is neither a boolean nor a schema."""

    def __init__(self, value: Any, bool_error: ValidationError) -> None:
        super().__init__(
            f"additionalProperties must be a boolean or a schema object, got {value!r}: "
            f"{bool_error}"
        )
        self.value = value
        self.bool_error = bool_error


class Discriminator(SpecValue):
    """Selects a schema alternative based on a property value."""

    emit_always = frozenset({"property_name"})

    property_name: str
    mapping: dict[str, str] = Field(default_factory=dict)


class XML(SpecValue):
    """XML representation metadata for a schema."""

    name: Optional[str] = None
    namespace: Optional[str] = None
    prefix: Optional[str] = None
    attribute: bool = False
    wrapped: bool = False


class Schema(SpecValue):
    """A JSON-Schema shaped type descriptor.

    Unset numeric and length constraints are ``None`` so that an explicit zero is
    still serialized. A schema may carry a ``$ref`` instead of an inline
    definition; references are stored verbatim and never resolved.
    """

    emit_unless_none = frozenset({"default", "example"})

    ref: Optional[str] = Field(default=None, alias="$ref")
    title: Optional[str] = None
    multiple_of: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    exclusive_maximum: bool = False
    minimum: Optional[Union[int, float]] = None
    exclusive_minimum: bool = False
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    pattern: Optional[str] = None
    max_items: Optional[int] = None
    min_items: Optional[int] = None
    unique_items: bool = False
    max_properties: Optional[int] = None
    min_properties: Optional[int] = None
    required: list[str] = Field(default_factory=list)
    enum: list[Any] = Field(default_factory=list)
    type: Optional[str] = None
    all_of: list[Schema] = Field(default_factory=list)
    one_of: list[Schema] = Field(default_factory=list)
    any_of: list[Schema] = Field(default_factory=list)
    not_: Optional[Schema] = Field(default=None, alias="not")
    items: Optional[Schema] = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    additional_properties: Optional[AdditionalProperties] = None
    description: Optional[str] = None
    format: Optional[str] = None
    default: Any = None
    nullable: bool = False
    discriminator: Optional[Discriminator] = None
    read_only: bool = False
    write_only: bool = False
    xml: Optional[XML] = None
    external_docs: Optional[ExternalDocs] = None
    example: Any = None
    deprecated: bool = False

    @field_validator("additional_properties", mode="before")
    @classmethod
    def _decode_additional_properties(cls, value: Any) -> Any:
        if value is None or isinstance(value, AdditionalProperties):
            return value
        return decode_additional_properties(value)

    def with_format(self, format_: str) -> Schema:
        """Return a copy with the format set."""
        return self._with(format=format_)

    def with_description(self, description: str) -> Schema:
        """Return a copy with the description set."""
        return self._with(description=description)

    def with_title(self, title: str) -> Schema:
        """Return a copy with the title set."""
        return self._with(title=title)

    def with_example(self, example: Any) -> Schema:
        """Return a copy with the example value set."""
        return self._with(example=example)

    def with_default(self, default: Any) -> Schema:
        """Return a copy with the default value set."""
        return self._with(default=default)

    def with_enum(self, *values: Any) -> Schema:
        """Return a copy whose allowed values are exactly ``values``."""
        return self._with(enum=list(values))

    def with_min_length(self, min_length: int) -> Schema:
        return self._with(min_length=min_length)

    def with_max_length(self, max_length: int) -> Schema:
        return self._with(max_length=max_length)

    def with_pattern(self, pattern: str) -> Schema:
        return self._with(pattern=pattern)

    def with_minimum(self, minimum: float) -> Schema:
        return self._with(minimum=minimum)

    def with_maximum(self, maximum: float) -> Schema:
        return self._with(maximum=maximum)

    def with_exclusive_minimum(self, exclusive: bool) -> Schema:
        return self._with(exclusive_minimum=exclusive)

    def with_exclusive_maximum(self, exclusive: bool) -> Schema:
        return self._with(exclusive_maximum=exclusive)

    def with_multiple_of(self, multiple_of: float) -> Schema:
        return self._with(multiple_of=multiple_of)

    def with_min_items(self, min_items: int) -> Schema:
        return self._with(min_items=min_items)

    def with_max_items(self, max_items: int) -> Schema:
        return self._with(max_items=max_items)

    def with_unique_items(self, unique: bool) -> Schema:
        return self._with(unique_items=unique)

    def with_min_properties(self, min_properties: int) -> Schema:
        return self._with(min_properties=min_properties)

    def with_max_properties(self, max_properties: int) -> Schema:
        return self._with(max_properties=max_properties)

    def with_property(self, name: str, schema: Schema) -> Schema:
        """Return a copy with a property schema added or replaced."""
        return self._with(properties={**self.properties, name: schema})

    def with_required_property(self, name: str, schema: Schema) -> Schema:
        """Return a copy with a property added and listed as required."""
        return self.with_property(name, schema).with_required(name)

    def with_required(self, *names: str) -> Schema:
        """Return a copy with ``names`` appended to the required list."""
        return self._with(required=[*self.required, *names])

    def with_items(self, items: Schema) -> Schema:
        return self._with(items=items)

    def with_additional_properties(self, value: Union[bool, Schema]) -> Schema:
        """Return a copy whose extra properties are allowed, forbidden or typed.

        Args:
            value (Union[bool, Schema]): ``True``/``False`` to allow or forbid
                extra properties, or a schema every extra property must match.

        Returns:
            Schema: Modified copy of this schema.
        """
        if isinstance(value, bool):
            additional = AdditionalProperties(allowed=value)
        else:
            additional = AdditionalProperties(schema=value)
        return self._with(additional_properties=additional)

    def with_all_of(self, *schemas: Schema) -> Schema:
        return self._with(all_of=[*self.all_of, *schemas])

    def with_one_of(self, *schemas: Schema) -> Schema:
        return self._with(one_of=[*self.one_of, *schemas])

    def with_any_of(self, *schemas: Schema) -> Schema:
        return self._with(any_of=[*self.any_of, *schemas])

    def with_not(self, schema: Schema) -> Schema:
        return self._with(not_=schema)

    def with_discriminator(
        self,
        property_name: str,
        mapping: Optional[dict[str, str]] = None,
    ) -> Schema:
        """Return a copy with a discriminator on ``property_name``."""
        discriminator = Discriminator(property_name=property_name, mapping=dict(mapping or {}))
        return self._with(discriminator=discriminator)

    def with_nullable(self, nullable: bool) -> Schema:
        return self._with(nullable=nullable)

    def with_read_only(self, read_only: bool) -> Schema:
        return self._with(read_only=read_only)

    def with_write_only(self, write_only: bool) -> Schema:
        return self._with(write_only=write_only)

    def with_deprecated(self, deprecated: bool) -> Schema:
        return self._with(deprecated=deprecated)


class AdditionalProperties(BaseModel):
    """Either a boolean or a nested schema, never both.

    Serializes as a bare boolean or as the nested schema. When neither
    alternative is populated it serializes as ``false``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    allowed: Optional[bool] = None
    schema_: Optional[Schema] = Field(default=None, alias="schema")

    @model_validator(mode="after")
    def _check_single_alternative(self) -> AdditionalProperties:
        if self.allowed is not None and self.schema_ is not None:
            raise ValueError("additionalProperties cannot be both a boolean and a schema")
        return self

    @model_serializer(mode="plain")
    def _encode(self, info: SerializationInfo) -> Any:
        if self.allowed is not None:
            return self.allowed
        if self.schema_ is not None:
            return self.schema_.model_dump(mode=info.mode, by_alias=info.by_alias)
        return False


def decode_additional_properties(value: Any) -> AdditionalProperties:
    """Decode a raw ``additionalProperties`` value.

    A strict boolean is tried first, then a schema object.

    Args:
        value (Any): Raw JSON value.

    Returns:
        AdditionalProperties: The populated alternative.

    Raises:
        AdditionalPropertiesDecodeError: If the value is neither shape. The
            boolean decode failure is chained as the cause.
    """
    try:
        allowed = _STRICT_BOOL.validate_python(value)
    except ValidationError as bool_error:
        try:
            nested = Schema.model_validate(value)
        except ValidationError:
            raise AdditionalPropertiesDecodeError(value, bool_error) from bool_error
        return AdditionalProperties(schema=nested)
    return AdditionalProperties(allowed=allowed)


def new_string_schema() -> Schema:
    return Schema(type="string")


def new_integer_schema() -> Schema:
    return Schema(type="integer")


def new_number_schema() -> Schema:
    return Schema(type="number")


def new_boolean_schema() -> Schema:
    return Schema(type="boolean")


def new_array_schema(items: Schema) -> Schema:
    """Create an array schema whose elements match ``items``."""
    return Schema(type="array", items=items)


def new_object_schema() -> Schema:
    """Create an object schema with no properties yet."""
    return Schema(type="object")


def schema_ref(name: str) -> Schema:
    """Create a schema referencing ``#/components/schemas/<name>``."""
    return Schema(ref=f"{_COMPONENT_SCHEMA_PREFIX}{name}")


def string_schema(format_: str = "") -> Schema:
    """Create a string schema, with ``format_`` applied when non-empty."""
    schema = new_string_schema()
    if format_:
        schema = schema.with_format(format_)
    return schema


def email_schema() -> Schema:
    return string_schema("email")


def date_time_schema() -> Schema:
    return string_schema("date-time")


def date_schema() -> Schema:
    return string_schema("date")


def uuid_schema() -> Schema:
    return string_schema("uuid")


def password_schema() -> Schema:
    return string_schema("password")


def int32_schema() -> Schema:
    return new_integer_schema().with_format("int32")


def int64_schema() -> Schema:
    return new_integer_schema().with_format("int64")


def float_schema() -> Schema:
    return new_number_schema().with_format("float")


def double_schema() -> Schema:
    return new_number_schema().with_format("double")


def id_schema() -> Schema:
    """Create the common identifier schema: an int64 with a description."""
    return int64_schema().with_description("Unique identifier")


def pagination_schema() -> Schema:
    """Create the common page/limit/total/hasNext pagination object schema."""
    return (
        new_object_schema()
        .with_required_property("page", int32_schema().with_description("Current page number"))
        .with_required_property(
            "limit", int32_schema().with_description("Number of items per page")
        )
        .with_required_property("total", int32_schema().with_description("Total number of items"))
        .with_property(
            "hasNext", new_boolean_schema().with_description("Whether there are more pages")
        )
    )


Schema.model_rebuild()
