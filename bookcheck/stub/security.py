"""
Stub Security

Issues HS256 JWTs on login and checks them on protected routes. Failures are
reported with the same messages the real service's JWT library produces
("jwt malformed", "jwt expired", "invalid signature").
"""

import logging
import secrets
from datetime import UTC, datetime, timedelta

from fastapi import Request, status
from jose import ExpiredSignatureError, JWTError, jwt

from bookcheck.stub.errors import ServiceError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60


def generate_secret_key() -> str:
    """Random signing key; each stub app gets its own."""
    return secrets.token_hex(32)


def create_access_token(
    username: str,
    secret_key: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token for username.

    Example:
        >>> token = create_access_token("admin", generate_secret_key())
        >>> token.count(".") == 2
        True
    """
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": username, "role": "admin", "exp": expire}
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)


def decode_token(token: str, secret_key: str) -> dict:
    """
    Decode and verify a token.

    Raises:
        ServiceError: 401 "Invalid or expired token" with the failure reason
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        reason = "jwt expired"
    except JWTError:
        reason = "jwt malformed" if token.count(".") != 2 else "invalid signature"

    logger.warning(f"Rejected bearer token: {reason}")
    raise ServiceError(
        status.HTTP_401_UNAUTHORIZED,
        error="Invalid or expired token",
        message=reason,
    )


def require_token(request: Request) -> dict:
    """
    Dependency for protected routes.

    Returns:
        The decoded token payload

    Raises:
        ServiceError: 401 when the header is missing or the token is invalid
    """
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")

    if scheme.lower() != "bearer" or not token:
        raise ServiceError(
            status.HTTP_401_UNAUTHORIZED,
            error="Access denied. No token provided.",
            message="Authorization header with Bearer token is required",
        )

    return decode_token(token, request.app.state.secret_key)
