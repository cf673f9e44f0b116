"""
Auth Router

POST /auth/login checks the configured admin credentials and returns a JWT.
"""

import logging
import secrets

from fastapi import APIRouter, Request, status

from bookcheck.stub.errors import ServiceError
from bookcheck.stub.routers.common import read_json_object
from bookcheck.stub.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login")
async def login(request: Request) -> dict:
    """
    Authenticate and return a bearer token.

    Responses:
    - 200 {message, token, user}
    - 400 when username or password is missing
    - 401 when the credentials are wrong
    """
    body = await read_json_object(request)
    username = body.get("username")
    password = body.get("password")

    if not username or not password:
        raise ServiceError(
            status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message="Username and password are required",
        )

    settings = request.app.state.settings
    valid = (
        isinstance(username, str)
        and isinstance(password, str)
        and username == settings.auth_username
        and secrets.compare_digest(password.encode(), settings.auth_password.encode())
    )
    if not valid:
        logger.warning(f"Login failed for {username!r}")
        raise ServiceError(
            status.HTTP_401_UNAUTHORIZED,
            error="Unauthorized",
            message="Invalid username or password",
        )

    token = create_access_token(username, request.app.state.secret_key)
    logger.info(f"Login successful for {username!r}")

    return {
        "message": "Login successful",
        "token": token,
        "user": {"username": username, "role": "admin"},
    }
