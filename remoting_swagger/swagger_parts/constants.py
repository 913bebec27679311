"""Centralized constants for the Swagger document builder.

The OAuth and batch declarations describe endpoints implemented elsewhere, so
their content is hand-authored here rather than derived from route metadata.
The builder deep-copies everything it takes from this module.
"""
from typing import Any, Dict, List

SWAGGER_VERSION = "1.2"

WILDCARD_SCOPE: Dict[str, str] = {"description": "Allow everything", "scope": "*"}

# Attached to every operation that requires authorization
OPERATION_AUTHORIZATIONS: Dict[str, Any] = {"oauth2": [WILDCARD_SCOPE]}

# Authorization schemes advertised by the resource listing
RESOURCE_AUTHORIZATIONS: Dict[str, Any] = {
    "oauth2": {
        "grantTypes": {
            "implicit": {
                "loginEndpoint": {"url": "/oauth/authorize"},
                "tokenName": "access_token",
            }
        },
        "scopes": [WILDCARD_SCOPE],
        "type": "oauth2",
    }
}

TOKEN_MODEL: Dict[str, Any] = {
    "id": "token",
    "required": ["access_token", "token_type"],
    "properties": {
        "access_token": {"type": "string", "required": True},
        "token_type": {"type": "string", "required": True},
        "expires_in": {"type": "double", "required": False},
        "refresh_token": {"type": "string", "required": False},
        "scope": {"type": "string", "required": False},
    },
}

TOKENINFO_MODEL: Dict[str, Any] = {
    "id": "tokeninfo",
    "required": ["client_id", "scope"],
    "properties": {
        "client_id": {"type": "string", "required": True},
        "user_id": {"type": "string", "required": False},
        "scope": {"type": "string", "required": True},
        "expires_in": {"type": "double", "required": False},
    },
}


def _query(name: str, description: str, required: bool, **extra: Any) -> Dict[str, Any]:
    return {
        "paramType": "query",
        "name": name,
        "description": description,
        "dataType": "string",
        "required": required,
        "allowMultiple": False,
        **extra,
    }


def _form(name: str, description: str, required: bool, **extra: Any) -> Dict[str, Any]:
    return {**_query(name, description, required, **extra), "paramType": "form"}


AUTHORIZE_NOTES = (
    "<p>OAuth 2.0 specifies a framework that allows users to grant client "
    "applications limited access to their protected resources. It does "
    "this through a process of the user granting access, and the client "
    "exchanging the grant for an access token.</p>"
    "<p>We support three grant types: <u>authorization codes</u>, "
    "<u>implicit</u> and <u>resource owner password credentials</u>.</p>"
    '<p>For detailed description see <a href="http://tools.ietf.org/html/rfc6749#section-1.3">'
    "Section 1.3 of RFC 6749</a></p>"
    "<p>This endpoint is used for <u>authorization code</u> and <u>implicit</u> "
    "grant types.</p>"
)

TOKEN_NOTES = (
    "<p>This endpoint is used for <u>authorization code</u> and <u>password</u> "
    "grant types.</p>"
    "<p>For <u>authorization code</u> grant type you can exchange authorization "
    "code received from authorization endpoint for an access token</p>"
    "<p>For <u>resource owner password credentials</u> grant type you exchange "
    "user credentials for an access token</p>"
    "<p>Client credentials can be provided either via form arguments or via HTTP "
    "Basic authorization</p>"
)

TOKENINFO_NOTES = (
    "<p>Returns the client, user and scope an access token was issued for. "
    "Use it to validate tokens received from the implicit grant.</p>"
)

OAUTH_APIS: List[Dict[str, Any]] = [
    {
        "path": "/oauth/authorize",
        "operations": [{
            "httpMethod": "GET",
            "nickname": "oauth_authorize",
            "responseClass": "void",
            "parameters": [
                _query("response_type", "Response type", True, enum=["code", "token"]),
                _query("client_id", "Client ID", True),
                _query("redirect_uri", "Client redirect URI", True),
                _query("scope", "Scope of access", False),
                _query("state", "Opaque value returned to the client", False),
            ],
            "errorResponses": [],
            "summary": "OAuth 2.0 authorization endpoint",
            "notes": AUTHORIZE_NOTES,
        }],
    },
    {
        "path": "/oauth/token",
        "operations": [{
            "httpMethod": "POST",
            "nickname": "oauth_token",
            "responseClass": "token",
            "parameters": [
                _form("grant_type", "Token grant type", True, enum=["authorization_code", "password"]),
                _form("client_id", "Client ID", True),
                _form("client_secret", "Client secret", True),
                _form("redirect_uri", "Client redirect URI", False),
                _form("username", "User login", False),
                _form("password", "User password", False),
                _form("code", "Authorization code", False),
                _form("scope", "Scope of access", False),
            ],
            "errorResponses": [],
            "summary": "OAuth 2.0 token endpoint",
            "notes": TOKEN_NOTES,
        }],
    },
    {
        "path": "/oauth/tokeninfo",
        "operations": [{
            "httpMethod": "GET",
            "nickname": "oauth_tokeninfo",
            "responseClass": "tokeninfo",
            "parameters": [
                _query("access_token", "Access token to inspect", True),
            ],
            "errorResponses": [],
            "summary": "OAuth 2.0 token information endpoint",
            "notes": TOKENINFO_NOTES,
        }],
    },
]

BATCH_APIS: List[Dict[str, Any]] = [
    {
        "path": "/batch",
        "operations": [{
            "httpMethod": "POST",
            "nickname": "batch",
            "responseClass": "object",
            "parameters": [
                {
                    "paramType": "body",
                    "name": "data",
                    "description": "Batch request object",
                    "dataType": "object",
                    "required": True,
                    "allowMultiple": False,
                },
            ],
            "errorResponses": [],
            "summary": "Batch request",
            "notes": "",
            "authorizations": OPERATION_AUTHORIZATIONS,
        }],
    },
]

__all__ = [
    "SWAGGER_VERSION",
    "WILDCARD_SCOPE",
    "OPERATION_AUTHORIZATIONS",
    "RESOURCE_AUTHORIZATIONS",
    "TOKEN_MODEL",
    "TOKENINFO_MODEL",
    "OAUTH_APIS",
    "BATCH_APIS",
]
