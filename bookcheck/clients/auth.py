"""HTTP client for the authentication endpoints."""

from typing import Any

from bookcheck.clients.http import (
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
    serialize_payload,
)


class AuthClient:
    """Request builders for /auth/*."""

    @staticmethod
    def login(transport: Transport, payload: Any) -> ResponseEnvelope:
        """
        POST /auth/login with a {username, password} payload.

        The payload may be a LoginRequest or a plain mapping; scenarios send
        incomplete mappings on purpose.
        """
        return transport.send(
            RequestDescriptor("POST", "/auth/login", json=serialize_payload(payload))
        )
