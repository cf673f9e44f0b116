"""
HTTP client for the book endpoints.

Every method returns the raw ResponseEnvelope. Mutations take an optional
bearer token; leaving it out is how the auth-gating scenarios are written.
"""

from collections.abc import Mapping
from typing import Any

from bookcheck.clients.http import (
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
    serialize_payload,
)

SUPPORTED_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"}


class BooksClient:
    """Request builders for /books/*."""

    @staticmethod
    def create_book(
        transport: Transport,
        payload: Any,
        token: str | None = None,
    ) -> ResponseEnvelope:
        """POST /books. Requires a token on the real service."""
        return transport.send(
            RequestDescriptor("POST", "/books", json=serialize_payload(payload), token=token)
        )

    @staticmethod
    def get_book(transport: Transport, book_id: str | int) -> ResponseEnvelope:
        """GET /books/{id}. Public."""
        return transport.send(RequestDescriptor("GET", f"/books/{book_id}"))

    @staticmethod
    def list_books(transport: Transport) -> ResponseEnvelope:
        """GET /books. Public."""
        return transport.send(RequestDescriptor("GET", "/books"))

    @staticmethod
    def update_book(
        transport: Transport,
        book_id: str | int,
        payload: Any,
        token: str | None = None,
    ) -> ResponseEnvelope:
        """PUT /books/{id} with a partial payload."""
        return transport.send(
            RequestDescriptor(
                "PUT",
                f"/books/{book_id}",
                json=serialize_payload(payload),
                token=token,
            )
        )

    @staticmethod
    def delete_book(
        transport: Transport,
        book_id: str | int,
        token: str | None = None,
    ) -> ResponseEnvelope:
        """DELETE /books/{id}."""
        return transport.send(RequestDescriptor("DELETE", f"/books/{book_id}", token=token))

    @staticmethod
    def patch_book(
        transport: Transport,
        book_id: str | int,
        payload: Any = None,
        token: str | None = None,
    ) -> ResponseEnvelope:
        """PATCH /books/{id}. The service does not support PATCH."""
        return transport.send(
            RequestDescriptor(
                "PATCH",
                f"/books/{book_id}",
                json=serialize_payload(payload),
                token=token,
            )
        )

    @staticmethod
    def request_raw(
        transport: Transport,
        method: str,
        path: str,
        data: Any = None,
        token: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope:
        """
        Send an arbitrary request.

        For endpoints without a dedicated method, or requests that need
        custom headers.

        Raises:
            ValueError: If method is not a supported HTTP method
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        return transport.send(
            RequestDescriptor(
                method,
                path,
                json=serialize_payload(data),
                token=token,
                headers=dict(headers or {}),
            )
        )
