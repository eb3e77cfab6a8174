"""The registry of reusable, named objects."""

from __future__ import annotations

from pydantic import Field

from .base import SpecValue
from .media import Example, Header
from .parameter import Parameter
from .paths import Callback
from .response import Link, RequestBody, Response
from .schema import Schema
from .security import SecurityScheme


class Components(SpecValue):
    """Reusable objects, one mapping per kind.

    Entries are referenced elsewhere through ``$ref`` strings such as
    ``#/components/schemas/Pet``; references are never resolved.
    """

    schemas: dict[str, Schema] = Field(default_factory=dict)
    responses: dict[str, Response] = Field(default_factory=dict)
    parameters: dict[str, Parameter] = Field(default_factory=dict)
    examples: dict[str, Example] = Field(default_factory=dict)
    request_bodies: dict[str, RequestBody] = Field(default_factory=dict)
    headers: dict[str, Header] = Field(default_factory=dict)
    security_schemes: dict[str, SecurityScheme] = Field(default_factory=dict)
    links: dict[str, Link] = Field(default_factory=dict)
    callbacks: dict[str, Callback] = Field(default_factory=dict)

    def with_schema(self, name: str, schema: Schema) -> Components:
        return self._with(schemas={**self.schemas, name: schema})

    def with_response(self, name: str, response: Response) -> Components:
        return self._with(responses={**self.responses, name: response})

    def with_parameter(self, name: str, parameter: Parameter) -> Components:
        return self._with(parameters={**self.parameters, name: parameter})

    def with_example(self, name: str, example: Example) -> Components:
        return self._with(examples={**self.examples, name: example})

    def with_request_body(self, name: str, request_body: RequestBody) -> Components:
        return self._with(request_bodies={**self.request_bodies, name: request_body})

    def with_header(self, name: str, header: Header) -> Components:
        return self._with(headers={**self.headers, name: header})

    def with_security_scheme(self, name: str, scheme: SecurityScheme) -> Components:
        return self._with(security_schemes={**self.security_schemes, name: scheme})

    def with_link(self, name: str, link: Link) -> Components:
        return self._with(links={**self.links, name: link})

    def with_callback(self, name: str, callback: Callback) -> Components:
        return self._with(callbacks={**self.callbacks, name: callback})


def new_components() -> Components:
    """Create a registry with every mapping empty."""
    return Components()
