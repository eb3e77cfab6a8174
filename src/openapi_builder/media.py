"""Media type, encoding, header and example objects."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import SpecValue
from .schema import Schema

JSON_MEDIA_TYPE = "application/json"


class Example(SpecValue):
    """A named example value, inline or external."""

    emit_unless_none = frozenset({"value"})

    summary: Optional[str] = None
    description: Optional[str] = None
    value: Any = None
    external_value: Optional[str] = None

    def with_summary(self, summary: str) -> Example:
        return self._with(summary=summary)

    def with_description(self, description: str) -> Example:
        return self._with(description=description)

    def with_value(self, value: Any) -> Example:
        return self._with(value=value)

    def with_external_value(self, url: str) -> Example:
        return self._with(external_value=url)


class Header(SpecValue):
    """A response or encoding header."""

    emit_unless_none = frozenset({"example", "explode"})

    description: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    allow_empty_value: bool = False
    style: Optional[str] = None
    explode: Optional[bool] = None
    allow_reserved: bool = False
    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)

    def with_description(self, description: str) -> Header:
        return self._with(description=description)

    def with_required(self, required: bool) -> Header:
        return self._with(required=required)

    def with_deprecated(self, deprecated: bool) -> Header:
        return self._with(deprecated=deprecated)

    def with_allow_empty_value(self, allow: bool) -> Header:
        return self._with(allow_empty_value=allow)

    def with_style(self, style: str) -> Header:
        return self._with(style=style)

    def with_explode(self, explode: bool) -> Header:
        return self._with(explode=explode)

    def with_allow_reserved(self, allow: bool) -> Header:
        return self._with(allow_reserved=allow)

    def with_schema(self, schema: Schema) -> Header:
        return self._with(schema_=schema)

    def with_example(self, example: Any) -> Header:
        return self._with(example=example)

    def with_examples(self, name: str, example: Example) -> Header:
        """Return a copy with a named example added."""
        return self._with(examples={**self.examples, name: example})


class Encoding(SpecValue):
    """Serialization details for one property of a multipart or form body.

    ``explode`` is ``None`` when unset so an explicit ``False`` is serialized.
    """

    emit_unless_none = frozenset({"explode"})

    content_type: Optional[str] = None
    headers: dict[str, Header] = Field(default_factory=dict)
    style: Optional[str] = None
    explode: Optional[bool] = None
    allow_reserved: bool = False

    def with_content_type(self, content_type: str) -> Encoding:
        return self._with(content_type=content_type)

    def with_header(self, name: str, header: Header) -> Encoding:
        return self._with(headers={**self.headers, name: header})

    def with_style(self, style: str) -> Encoding:
        return self._with(style=style)

    def with_explode(self, explode: bool) -> Encoding:
        return self._with(explode=explode)

    def with_allow_reserved(self, allow: bool) -> Encoding:
        return self._with(allow_reserved=allow)


class MediaType(SpecValue):
    """The schema and examples for one content type."""

    emit_unless_none = frozenset({"example"})

    schema_: Optional[Schema] = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example] = Field(default_factory=dict)
    encoding: dict[str, Encoding] = Field(default_factory=dict)

    def with_schema(self, schema: Schema) -> MediaType:
        return self._with(schema_=schema)

    def with_example(self, example: Any) -> MediaType:
        return self._with(example=example)

    def with_examples(self, name: str, example: Example) -> MediaType:
        """Return a copy with a named example added."""
        return self._with(examples={**self.examples, name: example})

    def with_encoding(self, property_name: str, encoding: Encoding) -> MediaType:
        """Return a copy with the encoding for ``property_name`` set."""
        return self._with(encoding={**self.encoding, property_name: encoding})


def new_example() -> Example:
    return Example()


def new_header() -> Header:
    return Header()


def new_encoding() -> Encoding:
    return Encoding()


def new_media_type() -> MediaType:
    return MediaType()


def new_json_media_type(schema: Schema) -> MediaType:
    """Create a media type carrying ``schema``."""
    return MediaType(schema=schema)


def json_content(schema: Schema) -> dict[str, MediaType]:
    """Build a content mapping with a single ``application/json`` entry."""
    return {JSON_MEDIA_TYPE: new_json_media_type(schema)}


Header.model_rebuild()
Encoding.model_rebuild()
MediaType.model_rebuild()
