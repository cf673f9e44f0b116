"""
In-memory book store.

Books are plain dicts in the service's JSON shape (camelCase keys, integer
ids). A book created without publishedYear gets the current year, so every
stored book has the full Book shape. A lock guards every access because
TestClient serves requests from a worker thread.
"""

import threading
from collections.abc import Mapping
from datetime import date
from typing import Any

UPDATABLE_FIELDS = ("title", "author", "isbn", "publishedYear", "available")


def _parse_id(book_id: str | int) -> int | None:
    text = str(book_id)
    if not (text.isascii() and text.isdigit()):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int-string conversion limit
        return None


class BookStore:
    """Server-assigned ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self._books: dict[int, dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        with self._lock:
            book = {
                "id": self._next_id,
                "title": fields["title"],
                "author": fields["author"],
                "isbn": fields["isbn"],
                "publishedYear": fields.get("publishedYear", date.today().year),
                "available": fields.get("available", True),
            }
            self._books[self._next_id] = book
            self._next_id += 1
            return dict(book)

    def get(self, book_id: str | int) -> dict[str, Any] | None:
        key = _parse_id(book_id)
        with self._lock:
            book = self._books.get(key)
            return dict(book) if book is not None else None

    def list(self) -> list[dict[str, Any]]:
        with self._lock:
            return [dict(book) for book in self._books.values()]

    def update(self, book_id: str | int, fields: Mapping[str, Any]) -> dict[str, Any] | None:
        """Merge the updatable fields present in `fields`; others stay as they are."""
        key = _parse_id(book_id)
        with self._lock:
            book = self._books.get(key)
            if book is None:
                return None
            for name in UPDATABLE_FIELDS:
                if name in fields:
                    book[name] = fields[name]
            return dict(book)

    def delete(self, book_id: str | int) -> bool:
        key = _parse_id(book_id)
        with self._lock:
            return self._books.pop(key, None) is not None
