"""Fluent builders for OpenAPI 3.x documents with JSON serialization."""

from __future__ import annotations

from .components import Components, new_components
from .document import DEFAULT_OPENAPI_VERSION, Document, new_document
from .info import Contact, ExternalDocs, Info, License, Server, ServerVariable, Tag, new_server
from .media import (
    JSON_MEDIA_TYPE,
    Encoding,
    Example,
    Header,
    MediaType,
    new_encoding,
    new_example,
    new_header,
    new_json_media_type,
    new_media_type,
)
from .parameter import (
    Parameter,
    new_cookie_parameter,
    new_header_parameter,
    new_parameter,
    new_path_parameter,
    new_query_parameter,
)
from .paths import (
    HTTP_METHODS,
    Callback,
    Operation,
    PathItem,
    UnsupportedMethodError,
    new_callback,
    new_operation,
    new_path_item,
)
from .response import (
    Link,
    RequestBody,
    Response,
    new_json_request_body,
    new_json_response,
    new_link,
    new_request_body,
    new_response,
)
from .schema import (
    XML,
    AdditionalProperties,
    AdditionalPropertiesDecodeError,
    Discriminator,
    Schema,
    date_schema,
    date_time_schema,
    decode_additional_properties,
    double_schema,
    email_schema,
    float_schema,
    id_schema,
    int32_schema,
    int64_schema,
    new_array_schema,
    new_boolean_schema,
    new_integer_schema,
    new_number_schema,
    new_object_schema,
    new_string_schema,
    pagination_schema,
    password_schema,
    schema_ref,
    string_schema,
    uuid_schema,
)
from .security import (
    OAuthFlow,
    OAuthFlows,
    SecurityRequirement,
    SecurityScheme,
    api_key_in_cookie,
    api_key_in_header,
    api_key_in_query,
    jwt_auth,
    new_api_key_security_scheme,
    new_bearer_security_scheme,
    new_http_security_scheme,
    new_oauth2_security_scheme,
    new_oauth_flow,
    new_oauth_flows,
    new_open_id_connect_security_scheme,
    new_security_scheme,
    require_api_key,
    require_bearer,
    require_oauth,
)
from .serialize import DEFAULT_INDENT, DecodeError, EncodeError

__all__ = [
    "AdditionalProperties",
    "AdditionalPropertiesDecodeError",
    "Callback",
    "Components",
    "Contact",
    "DEFAULT_INDENT",
    "DEFAULT_OPENAPI_VERSION",
    "DecodeError",
    "Discriminator",
    "Document",
    "EncodeError",
    "Encoding",
    "Example",
    "ExternalDocs",
    "HTTP_METHODS",
    "Header",
    "Info",
    "JSON_MEDIA_TYPE",
    "License",
    "Link",
    "MediaType",
    "OAuthFlow",
    "OAuthFlows",
    "Operation",
    "Parameter",
    "PathItem",
    "RequestBody",
    "Response",
    "Schema",
    "SecurityRequirement",
    "SecurityScheme",
    "Server",
    "ServerVariable",
    "Tag",
    "UnsupportedMethodError",
    "XML",
    "api_key_in_cookie",
    "api_key_in_header",
    "api_key_in_query",
    "date_schema",
    "date_time_schema",
    "decode_additional_properties",
    "double_schema",
    "email_schema",
    "float_schema",
    "id_schema",
    "int32_schema",
    "int64_schema",
    "jwt_auth",
    "new_api_key_security_scheme",
    "new_array_schema",
    "new_bearer_security_scheme",
    "new_boolean_schema",
    "new_callback",
    "new_components",
    "new_cookie_parameter",
    "new_document",
    "new_encoding",
    "new_example",
    "new_header",
    "new_header_parameter",
    "new_http_security_scheme",
    "new_integer_schema",
    "new_json_media_type",
    "new_json_request_body",
    "new_json_response",
    "new_link",
    "new_media_type",
    "new_number_schema",
    "new_oauth2_security_scheme",
    "new_oauth_flow",
    "new_oauth_flows",
    "new_object_schema",
    "new_open_id_connect_security_scheme",
    "new_operation",
    "new_parameter",
    "new_path_item",
    "new_path_parameter",
    "new_query_parameter",
    "new_request_body",
    "new_response",
    "new_security_scheme",
    "new_server",
    "new_string_schema",
    "pagination_schema",
    "password_schema",
    "require_api_key",
    "require_bearer",
    "require_oauth",
    "schema_ref",
    "string_schema",
    "uuid_schema",
]
