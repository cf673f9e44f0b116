"""
Tests for the stand-in service internals (store, ISBN rule, tokens).
"""

from datetime import date

import pytest

from bookcheck.stub.errors import ServiceError
from bookcheck.stub.routers.books import is_valid_isbn
from bookcheck.stub.security import create_access_token, decode_token, generate_secret_key
from bookcheck.stub.store import BookStore

FIELDS = {
    "title": "Domain-Driven Design",
    "author": "Eric Evans",
    "isbn": "978-0321125217",
    "publishedYear": 2003,
    "available": True,
}


class TestBookStore:
    """Tests for BookStore."""

    def test_ids_are_sequential_and_not_reused(self):
        """Ids count up from 1 and survive deletes."""
        store = BookStore()

        first = store.create(FIELDS)
        second = store.create(FIELDS)
        store.delete(second["id"])
        third = store.create(FIELDS)

        assert [first["id"], second["id"], third["id"]] == [1, 2, 3]

    def test_get_by_string_id(self):
        """Books are found by string id."""
        store = BookStore()
        book = store.create(FIELDS)

        assert store.get(str(book["id"])) == book
        assert store.get("abc") is None

    def test_available_defaults_to_true(self):
        """available defaults to true."""
        store = BookStore()
        fields = {key: value for key, value in FIELDS.items() if key != "available"}

        assert store.create(fields)["available"] is True

    def test_published_year_defaults_to_current_year(self):
        """A book created without publishedYear gets the current year."""
        store = BookStore()
        fields = {key: value for key, value in FIELDS.items() if key != "publishedYear"}

        assert store.create(fields)["publishedYear"] == date.today().year

    @pytest.mark.parametrize(
        "book_id",
        ["²", "١", "-1", "1.0", " 1", "9" * 5000, ""],
        ids=["superscript", "arabic-indic", "negative", "decimal", "padded", "past-int-limit", "empty"],
    )
    def test_ids_that_are_not_plain_integers_are_not_found(self, book_id):
        """Ids that do not parse as a plain decimal integer match no book."""
        store = BookStore()
        store.create(FIELDS)

        assert store.get(book_id) is None
        assert store.update(book_id, {"title": "x"}) is None
        assert store.delete(book_id) is False
        assert len(store.list()) == 1

    def test_update_merges_known_fields_only(self):
        """Only updatable fields are merged."""
        store = BookStore()
        book = store.create(FIELDS)

        updated = store.update(book["id"], {"available": False, "id": 99, "color": "red"})

        assert updated == {**book, "available": False}

    def test_update_missing(self):
        """Updating a missing book returns None."""
        assert BookStore().update(1, {"title": "x"}) is None

    def test_returned_books_are_copies(self):
        """Callers cannot mutate stored books."""
        store = BookStore()
        book = store.create(FIELDS)
        book["title"] = "Mutated"

        assert store.get(1)["title"] == FIELDS["title"]

    def test_delete(self):
        """A book can be deleted once."""
        store = BookStore()
        store.create(FIELDS)

        assert store.delete("1") is True
        assert store.delete("1") is False
        assert store.list() == []


class TestIsbnRule:
    """The service accepts 10 or 13 digits with hyphens and spaces."""

    @pytest.mark.parametrize(
        "isbn",
        ["0321125215", "978-0321125217", "978 0 321 12521 7", "0-321-12521-5"],
    )
    def test_valid(self, isbn):
        """Accepted ISBN formats."""
        assert is_valid_isbn(isbn)

    @pytest.mark.parametrize("isbn", ["978", "97803211252", "032112521X", "", None, 9780321125217])
    def test_invalid(self, isbn):
        """Rejected ISBN formats."""
        assert not is_valid_isbn(isbn)


class TestTokens:
    """Tests for stub JWT handling."""

    def test_round_trip(self):
        """A token decodes with the key that signed it."""
        secret_key = generate_secret_key()
        token = create_access_token("admin", secret_key)

        payload = decode_token(token, secret_key)

        assert payload["sub"] == "admin"

    @pytest.mark.parametrize("token", ["invalid-token", "a.b", ""])
    def test_malformed(self, token):
        """Strings that are not JWTs are reported as malformed."""
        with pytest.raises(ServiceError) as exc_info:
            decode_token(token, generate_secret_key())

        assert exc_info.value.status_code == 401
        assert exc_info.value.to_body() == {
            "error": "Invalid or expired token",
            "message": "jwt malformed",
        }
