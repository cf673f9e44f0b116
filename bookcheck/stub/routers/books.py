"""
Books Router

CRUD endpoints for books, answering with the service's envelopes:
- GET    /books        public   {success, count, data}
- GET    /books/{id}   public   {success, data}
- POST   /books        token    201 {success, message, data}
- PUT    /books/{id}   token    {success, message, data}
- DELETE /books/{id}   token    {success, message, deletedId}

PATCH is deliberately not routed; app.py answers it with 404.
"""

import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from bookcheck.stub.errors import ServiceError
from bookcheck.stub.routers.common import read_json_object
from bookcheck.stub.security import require_token
from bookcheck.stub.store import BookStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])

REQUIRED_FIELDS = ("title", "author", "isbn")

MISSING_FIELDS_MESSAGE = "Missing required fields: title, author, and isbn are required"
INVALID_ISBN_MESSAGE = (
    "Invalid ISBN format. ISBN should be 10 or 13 digits (hyphens and spaces allowed)"
)


# =============================================================================
# Helper Functions
# =============================================================================
def is_valid_isbn(isbn: Any) -> bool:
    """ISBN-10 or ISBN-13 digits, with hyphens and spaces allowed anywhere."""
    if not isinstance(isbn, str):
        return False
    cleaned = re.sub(r"[-\s]", "", isbn)
    return bool(re.fullmatch(r"\d{10}|\d{13}", cleaned))


def get_store(request: Request) -> BookStore:
    return request.app.state.store


def not_found(book_id: str) -> ServiceError:
    return ServiceError(
        status.HTTP_404_NOT_FOUND,
        error="Not Found",
        message=f"Book with ID {book_id} not found",
    )


def check_isbn(body: dict) -> None:
    if "isbn" in body and not is_valid_isbn(body["isbn"]):
        raise ServiceError(
            status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message=INVALID_ISBN_MESSAGE,
        )


# =============================================================================
# Endpoints
# =============================================================================
@router.get("")
def list_books(request: Request) -> dict:
    books = get_store(request).list()
    return {"success": True, "count": len(books), "data": books}


@router.get("/{book_id}")
def get_book(book_id: str, request: Request) -> dict:
    book = get_store(request).get(book_id)
    if book is None:
        raise not_found(book_id)
    return {"success": True, "data": book}


@router.post("", dependencies=[Depends(require_token)])
async def create_book(request: Request) -> JSONResponse:
    """
    Create a book.

    title, author and isbn are required; publishedYear and available are
    stored as sent (publishedYear defaults to the current year, available
    to true).
    """
    body = await read_json_object(request)

    if any(not body.get(field) for field in REQUIRED_FIELDS):
        raise ServiceError(
            status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message=MISSING_FIELDS_MESSAGE,
        )
    check_isbn(body)

    book = get_store(request).create(body)
    logger.info(f"Created book {book['id']}: {book['title']!r}")

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"success": True, "message": "Book created successfully", "data": book},
    )


@router.put("/{book_id}", dependencies=[Depends(require_token)])
async def update_book(book_id: str, request: Request) -> dict:
    """Merge the sent fields into an existing book."""
    body = await read_json_object(request)

    store = get_store(request)
    if store.get(book_id) is None:
        raise not_found(book_id)
    check_isbn(body)

    book = store.update(book_id, body)
    if book is None:
        raise not_found(book_id)
    logger.info(f"Updated book {book_id}: {sorted(body)}")

    return {"success": True, "message": "Book updated successfully", "data": book}


@router.delete("/{book_id}", dependencies=[Depends(require_token)])
def delete_book(book_id: str, request: Request) -> dict:
    if not get_store(request).delete(book_id):
        raise not_found(book_id)
    logger.info(f"Deleted book {book_id}")

    # deletedId echoes the path parameter, so it is a string
    return {"success": True, "message": "Book deleted successfully", "deletedId": book_id}
