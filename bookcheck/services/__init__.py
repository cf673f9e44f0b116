"""
Services Package

Domain operations the scenarios call. Each one is a fixed composition:
build the request, send it, normalize the body, and pull out the part the
scenario cares about (the book, the token).

Current services:
- auth.py: authenticate() and the bearer token it yields
- books.py: Book create/read/update/delete plus raw requests
"""

from bookcheck.services.auth import AuthResult, authenticate
from bookcheck.services.books import (
    OperationResult,
    create_book,
    delete_book,
    get_book_by_id,
    list_books,
    patch_book,
    raw_request,
    update_book,
)

__all__ = [
    "AuthResult",
    "authenticate",
    "OperationResult",
    "create_book",
    "get_book_by_id",
    "list_books",
    "update_book",
    "delete_book",
    "patch_book",
    "raw_request",
]
