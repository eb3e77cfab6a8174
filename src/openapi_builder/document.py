"""The root OpenAPI document and its in-place builders."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Optional, Self

from pydantic import Field

from . import serialize
from .base import SpecModel
from .components import Components, new_components
from .info import Contact, ExternalDocs, Info, License, Server, Tag, new_server
from .json_types import JSONObject, RawJSON
from .paths import HTTP_METHODS, Operation, PathItem, method_slot
from .schema import Schema
from .security import SecurityRequirement, SecurityScheme

logger = logging.getLogger(__name__)

DEFAULT_OPENAPI_VERSION = "3.0.3"


class Document(SpecModel):
    """The root of an OpenAPI description.

    Unlike every nested object, a document is mutable: its builders update the
    instance in place and return it so calls can be chained. Nested objects are
    frozen and are replaced, never edited, when the document changes.
    """

    emit_always = frozenset({"openapi", "info", "paths"})

    openapi: str = DEFAULT_OPENAPI_VERSION
    info: Info
    servers: list[Server] = Field(default_factory=list)
    paths: dict[str, PathItem] = Field(default_factory=dict)
    components: Optional[Components] = None
    security: list[SecurityRequirement] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    external_docs: Optional[ExternalDocs] = None

    def with_info(self, description: Optional[str], terms_of_service: Optional[str]) -> Self:
        """Set the API description and terms-of-service URL."""
        self.info = self.info.model_copy(
            update={"description": description, "terms_of_service": terms_of_service}
        )
        return self

    def with_contact(self, name: str, url: str, email: str) -> Self:
        self.info = self.info.model_copy(
            update={"contact": Contact(name=name, url=url, email=email)}
        )
        return self

    def with_license(self, name: str, url: Optional[str] = None) -> Self:
        self.info = self.info.model_copy(update={"license": License(name=name, url=url)})
        return self

    def add_server(self, url: str, description: Optional[str] = None) -> Self:
        self.servers.append(new_server(url, description))
        return self

    def add_tag(self, name: str, description: Optional[str] = None) -> Self:
        self.tags.append(Tag(name=name, description=description))
        return self

    def add_tag_with_docs(
        self,
        name: str,
        description: Optional[str],
        docs_url: str,
        docs_description: Optional[str] = None,
    ) -> Self:
        """Add a tag that links to external documentation."""
        docs = ExternalDocs(url=docs_url, description=docs_description)
        self.tags.append(Tag(name=name, description=description, external_docs=docs))
        return self

    def set_external_docs(self, url: str, description: Optional[str] = None) -> Self:
        self.external_docs = ExternalDocs(url=url, description=description)
        return self

    def add_path(self, path: str) -> PathItem:
        """Store a fresh, empty path item under ``path`` and return it.

        An existing item for the same path is replaced.
        """
        path_item = PathItem()
        self.paths[path] = path_item
        logger.debug("Created path item for %s", path)
        return path_item

    def get_path(self, path: str) -> PathItem:
        """Return the path item for ``path``, creating an empty one when missing."""
        existing = self.paths.get(path)
        if existing is not None:
            return existing
        return self.add_path(path)

    def set_path(self, path: str, path_item: PathItem) -> Self:
        self.paths[path] = path_item
        return self

    def add_operation(self, path: str, method: str, operation: Operation) -> Self:
        """Place ``operation`` in the ``method`` slot of the path item for ``path``.

        The path item is created on first use. Other method slots of the same
        path are left untouched.

        Args:
            path (str): URL path template such as ``/pets/{petId}``.
            method (str): HTTP method name, case-insensitive.
            operation (Operation): Operation to place.

        Returns:
            Self: This document.

        Raises:
            UnsupportedMethodError: If ``method`` is not an HTTP method a path
                item can hold. The document is not modified.
        """
        slot = method_slot(method)
        self.paths[path] = self.get_path(path).with_operation(slot, operation)
        logger.debug(
            "Placed operation %s at %s %s",
            operation.operation_id or "<unnamed>",
            slot.upper(),
            path,
        )
        return self

    def iter_operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield ``(path, method, operation)`` for every populated method slot."""
        for path, path_item in self.paths.items():
            for method in HTTP_METHODS:
                operation = path_item.get_operation(method)
                if operation is not None:
                    yield path, method, operation

    def add_components(self) -> Components:
        """Return the components registry, creating an empty one when missing."""
        if self.components is None:
            self.components = new_components()
        return self.components

    def with_components(self, components: Components) -> Self:
        self.components = components
        return self

    def add_schema(self, name: str, schema: Schema) -> Self:
        """Register ``schema`` as ``#/components/schemas/<name>``."""
        self.components = self.add_components().with_schema(name, schema)
        logger.debug("Registered schema component %s", name)
        return self

    def add_security_scheme(self, name: str, scheme: SecurityScheme) -> Self:
        self.components = self.add_components().with_security_scheme(name, scheme)
        logger.debug("Registered security scheme %s", name)
        return self

    def add_security_requirement(self, requirement: SecurityRequirement) -> Self:
        """Append a document-wide alternative security requirement."""
        self.security.append(dict(requirement))
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the document as a JSON-compatible mapping."""
        return serialize.to_dict(self)

    def to_json(self, *, indent: Optional[int] = serialize.DEFAULT_INDENT) -> str:
        """Render the document as JSON text."""
        return serialize.to_json(self, indent=indent)

    def to_json_bytes(self, *, indent: Optional[int] = serialize.DEFAULT_INDENT) -> bytes:
        return serialize.to_json_bytes(self, indent=indent)

    @classmethod
    def from_json(cls, data: RawJSON) -> Document:
        """Decode a document from JSON text or bytes."""
        return serialize.from_json(cls, data)

    @classmethod
    def from_dict(cls, payload: JSONObject) -> Document:
        """Decode a document from an already-parsed mapping."""
        return serialize.from_dict(cls, payload)


def new_document(
    title: str,
    version: str,
    *,
    openapi_version: str = DEFAULT_OPENAPI_VERSION,
) -> Document:
    """Create a document with empty paths and tags.

    Args:
        title (str): API title.
        version (str): API version, unrelated to the OpenAPI version.
        openapi_version (str): Value of the ``openapi`` key.

    Returns:
        Document: New document ready for chained builder calls.
    """
    return Document(openapi=openapi_version, info=Info(title=title, version=version))
