"""Operation parameter objects."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field

from .base import SpecValue
from .media import Example, MediaType
from .schema import Schema

ParameterLocation = Literal["path", "query", "header", "cookie"]


class Parameter(SpecValue):
    """A single path, query, header or cookie parameter.

    ``explode`` is ``None`` when unset so an explicit ``False`` is serialized.
    """

    emit_always = frozenset({"name", "in_"})
    emit_unless_none = frozenset({"example", "explode"})

    name: str
    in_: ParameterLocation = Field(alias="in")
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

    def with_required(self, required: bool) -> Parameter:
        return self._with(required=required)

    def with_deprecated(self, deprecated: bool) -> Parameter:
        return self._with(deprecated=deprecated)

    def with_allow_empty_value(self, allow: bool) -> Parameter:
        return self._with(allow_empty_value=allow)

    def with_style(self, style: str) -> Parameter:
        return self._with(style=style)

    def with_explode(self, explode: bool) -> Parameter:
        return self._with(explode=explode)

    def with_allow_reserved(self, allow: bool) -> Parameter:
        return self._with(allow_reserved=allow)

    def with_example(self, example: Any) -> Parameter:
        return self._with(example=example)

    def with_schema(self, schema: Schema) -> Parameter:
        return self._with(schema_=schema)

    def with_examples(self, name: str, example: Example) -> Parameter:
        """Return a copy with a named example added."""
        return self._with(examples={**self.examples, name: example})

    def with_content(self, media_type: str, content: MediaType) -> Parameter:
        """Return a copy describing the parameter through ``media_type`` content."""
        return self._with(content={**self.content, media_type: content})


def new_parameter(
    name: str,
    location: ParameterLocation,
    description: Optional[str] = None,
) -> Parameter:
    """Create an optional parameter with no schema."""
    return Parameter(name=name, in_=location, description=description)


def new_path_parameter(
    name: str,
    description: Optional[str],
    schema: Optional[Schema],
) -> Parameter:
    """Create a path parameter. Path parameters are always required."""
    return Parameter(name=name, in_="path", description=description, required=True, schema_=schema)


def new_query_parameter(
    name: str,
    description: Optional[str],
    required: bool,
    schema: Optional[Schema],
) -> Parameter:
    return Parameter(
        name=name, in_="query", description=description, required=required, schema_=schema
    )


def new_header_parameter(
    name: str,
    description: Optional[str],
    required: bool,
    schema: Optional[Schema],
) -> Parameter:
    return Parameter(
        name=name, in_="header", description=description, required=required, schema_=schema
    )


def new_cookie_parameter(
    name: str,
    description: Optional[str],
    required: bool,
    schema: Optional[Schema],
) -> Parameter:
    return Parameter(
        name=name, in_="cookie", description=description, required=required, schema_=schema
    )
