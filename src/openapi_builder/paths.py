"""Operations, path items, callbacks and HTTP method placement."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field, RootModel

from .base import SpecValue
from .info import ExternalDocs, Server, new_server
from .media import MediaType, json_content
from .parameter import (
    Parameter,
    new_cookie_parameter,
    new_header_parameter,
    new_path_parameter,
    new_query_parameter,
)
from .response import RequestBody, Response, new_json_response, new_response
from .schema import Schema
from .security import SecurityRequirement

HTTP_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)


class UnsupportedMethodError(ValueError):
    """Raised when an operation is placed under an unknown HTTP method."""

    def __init__(self, method: str) -> None:
        supported = ", ".join(method_name.upper() for method_name in HTTP_METHODS)
        super().__init__(f"Unsupported HTTP method {method!r}; expected one of {supported}")
        self.method = method


def method_slot(method: str) -> str:
    """Return the PathItem field name for an HTTP method, case-insensitively.

    Args:
        method (str): HTTP method name such as ``"GET"`` or ``"post"``.

    Returns:
        str: The matching PathItem field name.

    Raises:
        UnsupportedMethodError: If ``method`` is not one of the eight HTTP
            methods a PathItem can hold.
    """
    slot = method.strip().lower()
    if slot not in HTTP_METHODS:
        raise UnsupportedMethodError(method)
    return slot


class Operation(SpecValue):
    """One HTTP method on one path. ``responses`` is always serialized."""

    emit_always = frozenset({"responses"})

    tags: list[str] = Field(default_factory=list)
    summary: Optional[str] = None
    description: Optional[str] = None
    external_docs: Optional[ExternalDocs] = None
    operation_id: Optional[str] = None
    parameters: list[Parameter] = Field(default_factory=list)
    request_body: Optional[RequestBody] = None
    responses: dict[str, Response] = Field(default_factory=dict)
    callbacks: dict[str, Callback] = Field(default_factory=dict)
    deprecated: bool = False
    security: list[SecurityRequirement] = Field(default_factory=list)
    servers: list[Server] = Field(default_factory=list)

    def with_tags(self, *tags: str) -> Operation:
        return self._with(tags=[*self.tags, *tags])

    def with_tag(self, tag: str) -> Operation:
        return self.with_tags(tag)

    def with_deprecated(self) -> Operation:
        return self._with(deprecated=True)

    def with_parameter(self, parameter: Parameter) -> Operation:
        return self._with(parameters=[*self.parameters, parameter])

    def with_path_parameter(
        self,
        name: str,
        description: Optional[str],
        schema: Optional[Schema],
    ) -> Operation:
        return self.with_parameter(new_path_parameter(name, description, schema))

    def with_query_parameter(
        self,
        name: str,
        description: Optional[str],
        required: bool,
        schema: Optional[Schema],
    ) -> Operation:
        return self.with_parameter(new_query_parameter(name, description, required, schema))

    def with_header_parameter(
        self,
        name: str,
        description: Optional[str],
        required: bool,
        schema: Optional[Schema],
    ) -> Operation:
        return self.with_parameter(new_header_parameter(name, description, required, schema))

    def with_cookie_parameter(
        self,
        name: str,
        description: Optional[str],
        required: bool,
        schema: Optional[Schema],
    ) -> Operation:
        return self.with_parameter(new_cookie_parameter(name, description, required, schema))

    def with_request_body(
        self,
        description: Optional[str],
        required: bool,
        content: dict[str, MediaType],
    ) -> Operation:
        body = RequestBody(description=description, required=required, content=dict(content))
        return self._with(request_body=body)

    def with_json_request_body(
        self,
        description: Optional[str],
        required: bool,
        schema: Schema,
    ) -> Operation:
        return self.with_request_body(description, required, json_content(schema))

    def with_response(self, code: str, response: Response) -> Operation:
        """Return a copy with ``response`` registered under status ``code``."""
        return self._with(responses={**self.responses, code: response})

    def with_json_response(self, code: str, description: str, schema: Schema) -> Operation:
        return self.with_response(code, new_json_response(description, schema))

    def with_ok_response(self, description: str, schema: Schema) -> Operation:
        return self.with_json_response("200", description, schema)

    def with_created_response(self, description: str, schema: Schema) -> Operation:
        return self.with_json_response("201", description, schema)

    def with_no_content_response(self) -> Operation:
        return self.with_response("204", new_response("No Content"))

    def with_bad_request_response(self, description: str) -> Operation:
        return self.with_response("400", new_response(description))

    def with_unauthorized_response(self, description: str) -> Operation:
        return self.with_response("401", new_response(description))

    def with_forbidden_response(self, description: str) -> Operation:
        return self.with_response("403", new_response(description))

    def with_not_found_response(self, description: str) -> Operation:
        return self.with_response("404", new_response(description))

    def with_internal_server_error_response(self, description: str) -> Operation:
        return self.with_response("500", new_response(description))

    def with_external_docs(self, url: str, description: Optional[str] = None) -> Operation:
        return self._with(external_docs=ExternalDocs(url=url, description=description))

    def with_security(self, *requirements: SecurityRequirement) -> Operation:
        """Return a copy with alternative security requirements appended."""
        copied = [dict(requirement) for requirement in requirements]
        return self._with(security=[*self.security, *copied])

    def with_server(self, url: str, description: Optional[str] = None) -> Operation:
        """Return a copy that overrides the servers for this operation."""
        return self._with(servers=[*self.servers, new_server(url, description)])

    def with_callback(self, name: str, callback: Callback) -> Operation:
        return self._with(callbacks={**self.callbacks, name: callback})


class PathItem(SpecValue):
    """The operations available on a single path, one slot per HTTP method."""

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = None
    description: Optional[str] = None
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None
    servers: list[Server] = Field(default_factory=list)
    parameters: list[Parameter] = Field(default_factory=list)

    def with_operation(self, method: str, operation: Operation) -> PathItem:
        """Return a copy with ``operation`` placed in the slot for ``method``.

        Only the named slot changes; the other seven are carried over as-is.

        Raises:
            UnsupportedMethodError: If ``method`` is not a PathItem method.
        """
        return self._with(**{method_slot(method): operation})

    def get_operation(self, method: str) -> Optional[Operation]:
        """Return the operation in the slot for ``method``, if any."""
        operation: Optional[Operation] = getattr(self, method_slot(method))
        return operation

    def operations(self) -> dict[str, Operation]:
        """Return the populated slots keyed by lowercase method, in canonical order."""
        populated: dict[str, Operation] = {}
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                populated[method] = operation
        return populated

    def with_summary(self, summary: str) -> PathItem:
        return self._with(summary=summary)

    def with_description(self, description: str) -> PathItem:
        return self._with(description=description)

    def with_parameter(self, parameter: Parameter) -> PathItem:
        """Return a copy with a parameter shared by every operation on the path."""
        return self._with(parameters=[*self.parameters, parameter])

    def with_server(self, url: str, description: Optional[str] = None) -> PathItem:
        return self._with(servers=[*self.servers, new_server(url, description)])


class Callback(RootModel[dict[str, PathItem]]):
    """Out-of-band requests keyed by runtime expression."""

    model_config = ConfigDict(frozen=True)

    root: dict[str, PathItem] = Field(default_factory=dict)

    def with_path(self, expression: str, path_item: PathItem) -> Callback:
        """Return a copy with ``path_item`` registered under ``expression``."""
        return Callback({**self.root, expression: path_item})


def new_operation(
    operation_id: Optional[str],
    summary: Optional[str],
    description: Optional[str],
) -> Operation:
    """Create an operation with empty tags, parameters and responses."""
    return Operation(operation_id=operation_id, summary=summary, description=description)


def new_path_item() -> PathItem:
    return PathItem()


def new_callback() -> Callback:
    return Callback()


Operation.model_rebuild()
PathItem.model_rebuild()
Callback.model_rebuild()
