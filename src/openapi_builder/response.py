"""Request body, response and link objects."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import SpecValue
from .info import Server
from .media import JSON_MEDIA_TYPE, Header, MediaType, json_content, new_json_media_type
from .schema import Schema


class Link(SpecValue):
    """A design-time link from a response to another operation."""

    emit_unless_none = frozenset({"request_body"})

    operation_ref: Optional[str] = None
    operation_id: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    request_body: Any = None
    description: Optional[str] = None
    server: Optional[Server] = None

    def with_operation_ref(self, ref: str) -> Link:
        return self._with(operation_ref=ref)

    def with_operation_id(self, operation_id: str) -> Link:
        return self._with(operation_id=operation_id)

    def with_parameter(self, name: str, value: Any) -> Link:
        """Return a copy passing ``value`` (a constant or runtime expression) as ``name``."""
        return self._with(parameters={**self.parameters, name: value})

    def with_request_body(self, body: Any) -> Link:
        return self._with(request_body=body)

    def with_description(self, description: str) -> Link:
        return self._with(description=description)

    def with_server(self, server: Server) -> Link:
        return self._with(server=server)


class Response(SpecValue):
    """A single response from an operation.

    ``description`` is always serialized; empty headers, content and links are
    left out entirely.
    """

    emit_always = frozenset({"description"})

    description: str
    headers: dict[str, Header] = Field(default_factory=dict)
    content: dict[str, MediaType] = Field(default_factory=dict)
    links: dict[str, Link] = Field(default_factory=dict)

    def with_header(self, name: str, header: Header) -> Response:
        return self._with(headers={**self.headers, name: header})

    def with_content(self, media_type: str, content: MediaType) -> Response:
        return self._with(content={**self.content, media_type: content})

    def with_json_content(self, schema: Schema) -> Response:
        return self.with_content(JSON_MEDIA_TYPE, new_json_media_type(schema))

    def with_link(self, name: str, link: Link) -> Response:
        return self._with(links={**self.links, name: link})


class RequestBody(SpecValue):
    """The body accepted by an operation.

    ``content`` is always serialized unless the body is a ``$ref``.
    """

    emit_always = frozenset({"content"})

    ref: Optional[str] = Field(default=None, alias="$ref")
    description: Optional[str] = None
    content: dict[str, MediaType] = Field(default_factory=dict)
    required: bool = False

    def _always_emitted(self) -> frozenset[str]:
        # A $ref object has no sibling keys.
        if self.ref is not None:
            return frozenset()
        return self.emit_always

    def with_content(self, media_type: str, content: MediaType) -> RequestBody:
        return self._with(content={**self.content, media_type: content})

    def with_json_content(self, schema: Schema) -> RequestBody:
        return self.with_content(JSON_MEDIA_TYPE, new_json_media_type(schema))

    def with_required(self, required: bool) -> RequestBody:
        return self._with(required=required)

    def with_description(self, description: str) -> RequestBody:
        return self._with(description=description)


def new_link() -> Link:
    return Link()


def new_response(description: str) -> Response:
    """Create a response with no headers, content or links."""
    return Response(description=description)


def new_json_response(description: str, schema: Schema) -> Response:
    """Create a response whose ``application/json`` content is ``schema``."""
    return Response(description=description, content=json_content(schema))


def new_request_body(description: Optional[str], required: bool) -> RequestBody:
    return RequestBody(description=description, required=required)


def new_json_request_body(
    description: Optional[str],
    required: bool,
    schema: Schema,
) -> RequestBody:
    """Create a request body whose ``application/json`` content is ``schema``."""
    return RequestBody(description=description, required=required, content=json_content(schema))
