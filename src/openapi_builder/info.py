"""Document metadata objects: info, contact, license, servers, tags and external docs."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import SpecValue


class ExternalDocs(SpecValue):
    """A reference to external documentation."""

    emit_always = frozenset({"url"})

    description: Optional[str] = None
    url: str


class Contact(SpecValue):
    """Contact information for the exposed API."""

    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class License(SpecValue):
    """License information for the exposed API."""

    emit_always = frozenset({"name"})

    name: str
    url: Optional[str] = None


class Info(SpecValue):
    """Metadata about the API."""

    emit_always = frozenset({"title", "version"})

    title: str
    description: Optional[str] = None
    terms_of_service: Optional[str] = None
    contact: Optional[Contact] = None
    license: Optional[License] = None
    version: str


class ServerVariable(SpecValue):
    """A variable for server URL template substitution."""

    emit_always = frozenset({"default"})

    enum: list[str] = Field(default_factory=list)
    default: str
    description: Optional[str] = None


class Server(SpecValue):
    """A server hosting the API."""

    emit_always = frozenset({"url"})

    url: str
    description: Optional[str] = None
    variables: dict[str, ServerVariable] = Field(default_factory=dict)

    def with_variable(
        self,
        name: str,
        default: str,
        description: Optional[str] = None,
        enum: tuple[str, ...] = (),
    ) -> Server:
        """Return a copy with a URL template variable added."""
        variable = ServerVariable(enum=list(enum), default=default, description=description)
        return self._with(variables={**self.variables, name: variable})


class Tag(SpecValue):
    """A tag used to group operations."""

    emit_always = frozenset({"name"})

    name: str
    description: Optional[str] = None
    external_docs: Optional[ExternalDocs] = None


def new_server(url: str, description: Optional[str] = None) -> Server:
    """Create a server with no variables."""
    return Server(url=url, description=description)
