"""
pytest Fixtures for Book Library Scenarios

Import these into a conftest.py:

    from bookcheck.fixtures import api_transport, settings, token  # noqa: F401

FIXTURE SCOPES:
- settings: session (environment is read once)
- api_transport: function (each scenario owns its connection)
- token: function (each scenario logs in for itself)

With API_TARGET=stub (the default) the transport talks to a fresh in-process
stand-in service per test. With API_TARGET=live it talks to BASE_URL.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from bookcheck.clients.http import Transport
from bookcheck.config import Settings, get_settings
from bookcheck.exceptions import AuthenticationError
from bookcheck.schemas import LoginRequest
from bookcheck.services.auth import authenticate
from bookcheck.stub import create_app


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Test-run settings, read once from the environment."""
    return get_settings()


@pytest.fixture
def api_transport(settings: Settings) -> Generator[Transport, None, None]:
    """
    Transport bound to the service under test.

    Stub target: a TestClient around a new stub app, so the store starts
    empty for every test.
    Live target: an httpx.Client on settings.base_url.
    """
    if settings.is_live:
        with Transport.from_settings(settings) as transport:
            yield transport
        return

    with TestClient(create_app(settings)) as client:
        yield Transport(client)


@pytest.fixture
def token(api_transport: Transport, settings: Settings) -> str:
    """
    Bearer token for the configured admin account.

    Raises:
        AuthenticationError: If login returns no token
    """
    result = authenticate(
        api_transport,
        LoginRequest(username=settings.auth_username, password=settings.auth_password),
    )
    if not result.token:
        raise AuthenticationError(
            f"Authentication failed: no token returned from /auth/login (status {result.status})"
        )
    return result.token
