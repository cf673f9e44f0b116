"""
pytest Fixtures for Book Library Tests

The transport and token fixtures come from bookcheck.fixtures. This file adds
the test-data helpers the scenarios share.

Scenarios create their own books and delete them when done, so they never
depend on what else is in the service.
"""

import itertools
import time
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from bookcheck.clients.http import Transport
from bookcheck.config import get_settings
from bookcheck.fixtures import api_transport, settings, token  # noqa: F401
from bookcheck.schemas import Book, BookResponse
from bookcheck.services.books import create_book, delete_book
from bookcheck.utils.log import configure_logging
from bookcheck.validation import validate_or_raise

_counter = itertools.count(1)


def pytest_configure(config):
    configure_logging(get_settings())


# =============================================================================
# TEST DATA FIXTURES
# =============================================================================


@pytest.fixture
def unique_title() -> Callable[[str], str]:
    """Return a function that makes titles unique across runs and tests."""

    def make(prefix: str) -> str:
        return f"{prefix} - {time.time_ns()}-{next(_counter)}"

    return make


@pytest.fixture
def book_payload(unique_title) -> dict[str, Any]:
    """A complete, valid create payload."""
    return {
        "title": unique_title("Pragmatic Programmer"),
        "author": "Andy Hunt and Dave Thomas",
        "isbn": "978-0135957059",
        "publishedYear": 2019,
        "available": True,
    }


@pytest.fixture
def created_book(
    api_transport: Transport,
    token: str,
    book_payload: dict[str, Any],
) -> Generator[Book, None, None]:
    """
    Create a book for the test and delete it afterwards.

    The delete is best effort: tests that delete the book themselves leave
    nothing to clean up, and the cleanup's 404 is ignored.
    """
    result = create_book(api_transport, book_payload, token)
    assert result.status == 201, result.body
    book = validate_or_raise(BookResponse, result.body, "createBook response").data

    yield book

    delete_book(api_transport, book.id, token)


# =============================================================================
# MOCK TRANSPORT FIXTURES
# =============================================================================


@pytest.fixture
def mock_transport() -> Generator[Callable[..., Transport], None, None]:
    """
    Build a Transport whose requests are answered by a handler function.

    Used by unit tests that need exact control over the response, including
    network failures (the handler raises an httpx exception).
    """
    clients: list[httpx.Client] = []

    def make(handler: Callable[[httpx.Request], httpx.Response]) -> Transport:
        client = httpx.Client(
            transport=httpx.MockTransport(handler),
            base_url="http://library.test",
        )
        clients.append(client)
        return Transport(client)

    yield make

    for client in clients:
        client.close()
