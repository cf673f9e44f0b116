"""
Books Service

One function per book operation. Each returns an OperationResult carrying the
status, the ok flag, the decoded body and, when the body's data field matches
the expected contract, the typed entity.

An absent entity is not an error: failure-path scenarios (400, 401, 404)
have no book to extract.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bookcheck.clients.books import BooksClient
from bookcheck.clients.http import JSONValue, ResponseEnvelope, Transport
from bookcheck.schemas import Book, ContractModel, PartialBook
from bookcheck.validation import validate


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a book operation.

    entity is a Book (PartialBook for updates, list of Book for listings)
    or None.
    """

    status: int
    ok: bool
    body: JSONValue
    entity: Any = None


def _extract(body: JSONValue, contract: type[ContractModel]) -> ContractModel | None:
    if not isinstance(body, dict) or "data" not in body:
        return None
    result = validate(contract, body["data"])
    return result.value if result.ok else None


def _extract_list(body: JSONValue) -> list[Book] | None:
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        return None
    results = [validate(Book, item) for item in body["data"]]
    if not all(result.ok for result in results):
        return None
    return [result.value for result in results]


def _result(response: ResponseEnvelope, contract: type[ContractModel] | None = Book) -> OperationResult:
    entity = _extract(response.body, contract) if contract is not None else None
    return OperationResult(
        status=response.status,
        ok=response.ok,
        body=response.body,
        entity=entity,
    )


def create_book(transport: Transport, payload: Any, token: str | None = None) -> OperationResult:
    """Create a book. payload may be a BookCreate or any mapping."""
    return _result(BooksClient.create_book(transport, payload, token))


def get_book_by_id(transport: Transport, book_id: str | int) -> OperationResult:
    """Fetch one book."""
    return _result(BooksClient.get_book(transport, book_id))


def list_books(transport: Transport) -> OperationResult:
    """Fetch every book; entity is the list of books."""
    response = BooksClient.list_books(transport)
    return OperationResult(
        status=response.status,
        ok=response.ok,
        body=response.body,
        entity=_extract_list(response.body),
    )


def update_book(
    transport: Transport,
    book_id: str | int,
    payload: Any,
    token: str | None = None,
) -> OperationResult:
    """Update some fields of a book; entity is a PartialBook."""
    return _result(BooksClient.update_book(transport, book_id, payload, token), PartialBook)


def delete_book(transport: Transport, book_id: str | int, token: str | None = None) -> OperationResult:
    """Delete a book. The 200 body has deletedId and no data, so entity is None."""
    return _result(BooksClient.delete_book(transport, book_id, token), None)


def patch_book(
    transport: Transport,
    book_id: str | int,
    payload: Any = None,
    token: str | None = None,
) -> OperationResult:
    """Send PATCH, which the service answers with 404."""
    return _result(BooksClient.patch_book(transport, book_id, payload, token))


def raw_request(
    transport: Transport,
    method: str,
    path: str,
    data: Any = None,
    token: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> OperationResult:
    """Send an arbitrary request; no entity is extracted."""
    response = BooksClient.request_raw(transport, method, path, data=data, token=token, headers=headers)
    return _result(response, None)
