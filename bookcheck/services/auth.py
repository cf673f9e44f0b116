"""
Authentication Service

authenticate() logs in and hands back the bearer token alongside the raw
outcome. Scenarios pass the token explicitly into later calls; nothing is
stored between calls.
"""

import logging
from dataclasses import dataclass
from typing import Any

from bookcheck.clients.auth import AuthClient
from bookcheck.clients.http import JSONValue, Transport
from bookcheck.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a login attempt."""

    status: int
    ok: bool
    body: dict[str, JSONValue]
    token: str | None = None


def authenticate(transport: Transport, payload: Any) -> AuthResult:
    """
    Log in with the given credentials.

    A 401 or 400 is returned like any other outcome. A body that is missing
    or not a JSON object is different: there is nothing to read a token
    from, whatever the status code says.

    Args:
        transport: Transport bound to the service
        payload: {username, password} mapping or LoginRequest

    Returns:
        AuthResult; token is None unless the body carries a non-empty string

    Raises:
        AuthenticationError: If the body is not a JSON object
        TransportError: If the request got no response
    """
    response = AuthClient.login(transport, payload)
    body = response.body

    if not isinstance(body, dict):
        logger.error(f"Login returned {response.status} with a non-object body")
        raise AuthenticationError("Login failed: response body is not valid JSON")

    token = body.get("token")
    if not isinstance(token, str) or not token:
        token = None

    logger.debug(f"Login returned {response.status}, token issued: {token is not None}")

    return AuthResult(
        status=response.status,
        ok=response.ok,
        body=body,
        token=token,
    )
