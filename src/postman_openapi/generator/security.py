"""Translate Postman auth declarations into OpenAPI security schemes.

Each supported auth type maps to one scheme with a fixed name, so requests
sharing an auth type share one entry in ``components.securitySchemes``.
"""

import logging

from postman_openapi.generator.objects import Operation, SecurityScheme, SecuritySchemes
from postman_openapi.parser.base import Auth

logger = logging.getLogger(__name__)

Requirement = dict[str, list[str]]

SCHEME_NAMES = {
    "apikey": "apikeyAuth",
    "basic": "basicAuth",
    "bearer": "bearerAuth",
    "jwt": "jwtAuth",
    "digest": "digestAuth",
    "oauth2": "oauth2Auth",
}

# Postman grant types -> OpenAPI flow names
_OAUTH2_FLOWS = {
    "authorization_code": "authorizationCode",
    "authorization_code_with_pkce": "authorizationCode",
    "implicit": "implicit",
    "password_credentials": "password",
    "client_credentials": "clientCredentials",
}


def _scopes(attrs: dict) -> list[str]:
    scope = attrs.get("scope")
    if not isinstance(scope, str):
        return []
    return [s for s in scope.replace(",", " ").split() if s]


def _oauth2_scheme(attrs: dict) -> SecurityScheme:
    flow_name = _OAUTH2_FLOWS.get(attrs.get("grant_type") or "authorization_code", "authorizationCode")
    flow: dict = {"scopes": {scope: "" for scope in _scopes(attrs)}}
    if flow_name in ("authorizationCode", "implicit"):
        flow["authorizationUrl"] = attrs.get("authUrl") or ""
    if flow_name != "implicit":
        flow["tokenUrl"] = attrs.get("accessTokenUrl") or ""
    return SecurityScheme(type="oauth2", flows={flow_name: flow})


def _scheme_for(auth: Auth) -> SecurityScheme | None:
    attrs = auth.attributes()
    if auth.type == "apikey":
        location = attrs.get("in") or "header"
        if location not in ("header", "query", "cookie"):
            location = "header"
        return SecurityScheme(type="apiKey", name=attrs.get("key") or "api_key", location=location)
    if auth.type == "basic":
        return SecurityScheme(type="http", scheme="basic")
    if auth.type == "bearer":
        return SecurityScheme(type="http", scheme="bearer")
    if auth.type == "jwt":
        return SecurityScheme(type="http", scheme="bearer", bearer_format="JWT")
    if auth.type == "digest":
        return SecurityScheme(type="http", scheme="digest")
    if auth.type == "oauth2":
        return _oauth2_scheme(attrs)
    return None


def process_auth(auth: Auth) -> tuple[SecuritySchemes, list[Requirement]]:
    """Return the schemes to register and the requirements for ``auth``.

    ``noauth`` and unrecognized types produce neither.
    """
    if auth.type == "noauth":
        return {}, []
    scheme = _scheme_for(auth)
    if scheme is None:
        logger.warning("Unsupported auth type %r, no security scheme emitted", auth.type)
        return {}, []

    name = SCHEME_NAMES[auth.type]
    scopes = _scopes(auth.attributes()) if auth.type == "oauth2" else []
    return {name: scheme}, [{name: scopes}]


def apply_security(operation: Operation, auth: Auth, registry: SecuritySchemes) -> None:
    """Register ``auth``'s schemes in ``registry`` and add its requirement to ``operation``."""
    schemes, requirements = process_auth(auth)
    if operation.security is None:
        operation.security = []
    registry.update(schemes)
    operation.security.extend(requirements)
