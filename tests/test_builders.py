"""Tests for the copy-returning builders on nested OpenAPI objects."""

from __future__ import annotations

import pytest

from openapi_builder import (
    Callback,
    Encoding,
    Header,
    RequestBody,
    UnsupportedMethodError,
    api_key_in_cookie,
    api_key_in_header,
    api_key_in_query,
    jwt_auth,
    new_callback,
    new_components,
    new_encoding,
    new_example,
    new_header,
    new_json_media_type,
    new_json_request_body,
    new_link,
    new_media_type,
    new_oauth2_security_scheme,
    new_oauth_flow,
    new_oauth_flows,
    new_open_id_connect_security_scheme,
    new_operation,
    new_parameter,
    new_path_item,
    new_path_parameter,
    new_request_body,
    new_response,
    new_server,
    new_string_schema,
    require_api_key,
    require_oauth,
    schema_ref,
)
from openapi_builder.serialize import from_dict, to_dict


def test_operation_builders_return_copies() -> None:
    base = new_operation("getPet", "Get a pet", None)
    with_ok = base.with_ok_response("A pet", schema_ref("Pet"))
    with_missing = with_ok.with_not_found_response("No such pet")

    assert base.responses == {}
    assert list(with_ok.responses) == ["200"]
    assert list(with_missing.responses) == ["200", "404"]


def test_operation_renders_all_builder_fields() -> None:
    operation = (
        new_operation("updatePet", "Update a pet", "Replaces a pet")
        .with_tags("pets", "admin")
        .with_path_parameter("petId", "Pet id", new_string_schema())
        .with_query_parameter("dryRun", None, False, None)
        .with_header_parameter("X-Request-Id", None, True, new_string_schema())
        .with_cookie_parameter("session", None, False, None)
        .with_json_request_body("Replacement pet", True, schema_ref("Pet"))
        .with_no_content_response()
        .with_unauthorized_response("Unauthorized")
        .with_forbidden_response("Forbidden")
        .with_internal_server_error_response("Boom")
        .with_external_docs("https://example.com/pets")
        .with_server("https://eu.example.com")
        .with_deprecated()
    )

    assert to_dict(operation) == {
        "tags": ["pets", "admin"],
        "summary": "Update a pet",
        "description": "Replaces a pet",
        "externalDocs": {"url": "https://example.com/pets"},
        "operationId": "updatePet",
        "parameters": [
            {
                "name": "petId",
                "in": "path",
                "description": "Pet id",
                "required": True,
                "schema": {"type": "string"},
            },
            {"name": "dryRun", "in": "query"},
            {
                "name": "X-Request-Id",
                "in": "header",
                "required": True,
                "schema": {"type": "string"},
            },
            {"name": "session", "in": "cookie"},
        ],
        "requestBody": {
            "description": "Replacement pet",
            "content": {
                "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
            },
            "required": True,
        },
        "responses": {
            "204": {"description": "No Content"},
            "401": {"description": "Unauthorized"},
            "403": {"description": "Forbidden"},
            "500": {"description": "Boom"},
        },
        "deprecated": True,
        "servers": [{"url": "https://eu.example.com"}],
    }


def test_with_security_copies_requirements() -> None:
    requirement = require_oauth("petstore_auth", "read:pets")
    operation = new_operation("listPets", None, None).with_security(
        requirement, require_api_key("api_key")
    )
    requirement["petstore_auth"].append("write:pets")

    assert operation.security == [{"petstore_auth": ["read:pets"]}, {"api_key": []}]


def test_path_item_operation_slots() -> None:
    item = (
        new_path_item()
        .with_summary("Pets")
        .with_operation("PATCH", new_operation("patchPet", None, None))
        .with_operation("get", new_operation("getPet", None, None))
        .with_parameter(new_path_parameter("petId", None, new_string_schema()))
    )

    assert list(item.operations()) == ["get", "patch"]
    assert item.get_operation("Patch") is item.patch
    assert item.get_operation("delete") is None
    assert to_dict(item)["parameters"][0]["in"] == "path"


def test_path_item_rejects_unknown_method() -> None:
    item = new_path_item()
    with pytest.raises(UnsupportedMethodError, match="LINK"):
        item.with_operation("LINK", new_operation(None, None, None))
    with pytest.raises(UnsupportedMethodError):
        item.get_operation("connect")


def test_callback_with_path() -> None:
    item = new_path_item().with_operation(
        "post", new_operation(None, None, None).with_response("200", new_response("OK"))
    )
    empty = new_callback()
    callback = empty.with_path("{$request.body#/callbackUrl}", item)

    assert empty.root == {}
    assert isinstance(callback, Callback)
    assert callback.model_dump(mode="json", by_alias=True) == {
        "{$request.body#/callbackUrl}": {
            "post": {"responses": {"200": {"description": "OK"}}},
        },
    }


def test_operation_with_callback_renders_under_name() -> None:
    callback = new_callback().with_path("{$url}", new_path_item())
    operation = new_operation("subscribe", None, None).with_callback("onEvent", callback)
    assert to_dict(operation)["callbacks"] == {"onEvent": {"{$url}": {}}}


def test_response_headers_links_and_content() -> None:
    response = (
        new_response("A page of pets")
        .with_header("X-Rate-Limit", new_header().with_schema(new_string_schema()).with_example(0))
        .with_json_content(schema_ref("Pets"))
        .with_link(
            "Next",
            new_link().with_operation_id("listPets").with_parameter("page", "$response.body#/next"),
        )
    )

    assert to_dict(response) == {
        "description": "A page of pets",
        "headers": {"X-Rate-Limit": {"schema": {"type": "string"}, "example": 0}},
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pets"}}},
        "links": {
            "Next": {"operationId": "listPets", "parameters": {"page": "$response.body#/next"}},
        },
    }


def test_request_body_content_is_always_emitted() -> None:
    assert to_dict(new_request_body(None, False)) == {"content": {}}
    body = new_json_request_body("Pet", True, schema_ref("Pet"))
    assert to_dict(body)["content"] == {
        "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
    }


def test_media_type_examples_and_encoding() -> None:
    media = (
        new_media_type()
        .with_schema(new_string_schema())
        .with_examples("empty", new_example().with_summary("Empty").with_value(""))
        .with_encoding(
            "avatar",
            new_encoding().with_content_type("image/png").with_explode(True),
        )
    )

    assert to_dict(media) == {
        "schema": {"type": "string"},
        "examples": {"empty": {"summary": "Empty", "value": ""}},
        "encoding": {"avatar": {"contentType": "image/png", "explode": True}},
    }
    assert to_dict(Encoding()) == {}


def test_json_media_type_carries_schema() -> None:
    assert to_dict(new_json_media_type(schema_ref("Pet"))) == {
        "schema": {"$ref": "#/components/schemas/Pet"},
    }


def test_parameter_location_is_validated() -> None:
    assert to_dict(new_parameter("limit", "query")) == {"name": "limit", "in": "query"}
    with pytest.raises(ValueError):
        new_parameter("limit", "body")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("factory", "location"),
    [(api_key_in_header, "header"), (api_key_in_query, "query"), (api_key_in_cookie, "cookie")],
)
def test_api_key_helpers(factory, location: str) -> None:
    assert to_dict(factory("X-API-Key")) == {"type": "apiKey", "name": "X-API-Key", "in": location}


def test_jwt_auth_scheme() -> None:
    assert to_dict(jwt_auth()) == {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}


def test_oauth2_scheme_with_flows() -> None:
    scheme = new_oauth2_security_scheme().with_flows(
        new_oauth_flows()
        .with_implicit(
            new_oauth_flow()
            .with_authorization_url("https://example.com/authorize")
            .with_scope("read:pets", "Read pets")
        )
        .with_client_credentials(new_oauth_flow().with_token_url("https://example.com/token"))
    )

    assert to_dict(scheme) == {
        "type": "oauth2",
        "flows": {
            "implicit": {
                "authorizationUrl": "https://example.com/authorize",
                "scopes": {"read:pets": "Read pets"},
            },
            "clientCredentials": {"tokenUrl": "https://example.com/token", "scopes": {}},
        },
    }


def test_open_id_connect_scheme() -> None:
    scheme = new_open_id_connect_security_scheme("https://example.com/.well-known/openid")
    assert to_dict(scheme) == {
        "type": "openIdConnect",
        "openIdConnectUrl": "https://example.com/.well-known/openid",
    }


def test_server_variables() -> None:
    server = new_server("https://{region}.example.com", "Regional").with_variable(
        "region", "eu", "Deployment region", enum=("eu", "us")
    )
    assert to_dict(server) == {
        "url": "https://{region}.example.com",
        "description": "Regional",
        "variables": {
            "region": {"enum": ["eu", "us"], "default": "eu", "description": "Deployment region"},
        },
    }


def test_components_builders_return_copies() -> None:
    base = new_components()
    extended = (
        base.with_schema("Pet", new_string_schema())
        .with_response("NotFound", new_response("Not found"))
        .with_security_scheme("api_key", api_key_in_header("X-API-Key"))
    )

    assert to_dict(base) == {}
    assert to_dict(extended) == {
        "schemas": {"Pet": {"type": "string"}},
        "responses": {"NotFound": {"description": "Not found"}},
        "securitySchemes": {"api_key": {"type": "apiKey", "name": "X-API-Key", "in": "header"}},
    }


def test_encoding_explicit_false_explode_survives_round_trip() -> None:
    encoding = new_encoding().with_style("form").with_explode(False)
    rendered = to_dict(encoding)

    assert rendered == {"style": "form", "explode": False}
    assert from_dict(Encoding, rendered).explode is False
    assert new_encoding().explode is None


def test_header_explicit_false_explode_is_emitted() -> None:
    header = new_header().with_style("simple").with_explode(False)
    rendered = to_dict(header)

    assert rendered == {"style": "simple", "explode": False}
    assert from_dict(Header, rendered).explode is False
    assert to_dict(new_header()) == {}


def test_request_body_reference_has_no_content_key() -> None:
    body = RequestBody(ref="#/components/requestBodies/Pet")
    rendered = to_dict(body)

    assert rendered == {"$ref": "#/components/requestBodies/Pet"}
    assert from_dict(RequestBody, rendered) == body


def test_copies_do_not_share_untouched_collections() -> None:
    base = (
        new_operation("listPets", None, None)
        .with_tag("pets")
        .with_response("200", new_response("OK"))
    )
    derived = base.with_deprecated()

    assert derived.tags == base.tags
    assert derived.tags is not base.tags
    assert derived.responses is not base.responses

    derived.tags.append("admin")
    assert base.tags == ["pets"]


def test_values_compare_by_content_but_are_unhashable() -> None:
    assert new_string_schema() == new_string_schema()
    with pytest.raises(TypeError, match="unhashable"):
        hash(new_string_schema())
    with pytest.raises(TypeError, match="unhashable"):
        hash(new_components())
