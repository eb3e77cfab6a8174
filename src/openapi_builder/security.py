"""Security schemes, OAuth flows and security requirements."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from .base import SpecValue

SecuritySchemeType = Literal["apiKey", "http", "oauth2", "openIdConnect"]
ApiKeyLocation = Literal["query", "header", "cookie"]

# Maps a security scheme name to the scopes required from it.
SecurityRequirement = dict[str, list[str]]


class OAuthFlow(SpecValue):
    """Configuration for one OAuth 2 flow. ``scopes`` is always serialized."""

    emit_always = frozenset({"scopes"})

    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    refresh_url: Optional[str] = None
    scopes: dict[str, str] = Field(default_factory=dict)

    def with_authorization_url(self, url: str) -> OAuthFlow:
        return self._with(authorization_url=url)

    def with_token_url(self, url: str) -> OAuthFlow:
        return self._with(token_url=url)

    def with_refresh_url(self, url: str) -> OAuthFlow:
        return self._with(refresh_url=url)

    def with_scope(self, scope: str, description: str) -> OAuthFlow:
        return self._with(scopes={**self.scopes, scope: description})


class OAuthFlows(SpecValue):
    """The OAuth 2 flows supported by a scheme."""

    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    client_credentials: Optional[OAuthFlow] = None
    authorization_code: Optional[OAuthFlow] = None

    def with_implicit(self, flow: OAuthFlow) -> OAuthFlows:
        return self._with(implicit=flow)

    def with_password(self, flow: OAuthFlow) -> OAuthFlows:
        return self._with(password=flow)

    def with_client_credentials(self, flow: OAuthFlow) -> OAuthFlows:
        return self._with(client_credentials=flow)

    def with_authorization_code(self, flow: OAuthFlow) -> OAuthFlows:
        return self._with(authorization_code=flow)


class SecurityScheme(SpecValue):
    """A security scheme that operations can require by name."""

    emit_always = frozenset({"type"})

    type: SecuritySchemeType
    description: Optional[str] = None
    name: Optional[str] = None
    in_: Optional[ApiKeyLocation] = Field(default=None, alias="in")
    scheme: Optional[str] = None
    bearer_format: Optional[str] = None
    flows: Optional[OAuthFlows] = None
    open_id_connect_url: Optional[str] = None

    def with_description(self, description: str) -> SecurityScheme:
        return self._with(description=description)

    def with_name(self, name: str) -> SecurityScheme:
        return self._with(name=name)

    def with_in(self, location: ApiKeyLocation) -> SecurityScheme:
        return self._with(in_=location)

    def with_scheme(self, scheme: str) -> SecurityScheme:
        return self._with(scheme=scheme)

    def with_bearer_format(self, bearer_format: str) -> SecurityScheme:
        return self._with(bearer_format=bearer_format)

    def with_flows(self, flows: OAuthFlows) -> SecurityScheme:
        return self._with(flows=flows)

    def with_open_id_connect_url(self, url: str) -> SecurityScheme:
        return self._with(open_id_connect_url=url)


def new_security_scheme(scheme_type: SecuritySchemeType) -> SecurityScheme:
    return SecurityScheme(type=scheme_type)


def new_api_key_security_scheme(name: str, location: ApiKeyLocation) -> SecurityScheme:
    return SecurityScheme(type="apiKey", name=name, in_=location)


def new_http_security_scheme(scheme: str) -> SecurityScheme:
    return SecurityScheme(type="http", scheme=scheme)


def new_bearer_security_scheme() -> SecurityScheme:
    return new_http_security_scheme("bearer")


def new_oauth2_security_scheme() -> SecurityScheme:
    return SecurityScheme(type="oauth2")


def new_open_id_connect_security_scheme(url: str) -> SecurityScheme:
    return SecurityScheme(type="openIdConnect", open_id_connect_url=url)


def new_oauth_flows() -> OAuthFlows:
    return OAuthFlows()


def new_oauth_flow() -> OAuthFlow:
    return OAuthFlow()


def jwt_auth() -> SecurityScheme:
    """Create an HTTP bearer scheme for JWT tokens."""
    return new_bearer_security_scheme().with_bearer_format("JWT")


def api_key_in_header(name: str) -> SecurityScheme:
    return new_api_key_security_scheme(name, "header")


def api_key_in_query(name: str) -> SecurityScheme:
    return new_api_key_security_scheme(name, "query")


def api_key_in_cookie(name: str) -> SecurityScheme:
    return new_api_key_security_scheme(name, "cookie")


def require_bearer(scheme_name: str) -> SecurityRequirement:
    """Require the bearer scheme registered as ``scheme_name``."""
    return {scheme_name: []}


def require_api_key(scheme_name: str) -> SecurityRequirement:
    """Require the API key scheme registered as ``scheme_name``."""
    return {scheme_name: []}


def require_oauth(scheme_name: str, *scopes: str) -> SecurityRequirement:
    """Require ``scopes`` from the OAuth 2 scheme registered as ``scheme_name``."""
    return {scheme_name: list(scopes)}
