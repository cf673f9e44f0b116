"""
Book Contracts

The Book as the service exposes it, plus the request payloads the scenarios
send. ISBNs are checked against the loose shape the service guarantees in its
responses: 10 to 17 characters of digits, hyphens and spaces.

Example response body:
{
    "success": true,
    "message": "Book created successfully",
    "data": {
        "id": 7,
        "title": "The Pragmatic Programmer",
        "author": "Andy Hunt and Dave Thomas",
        "isbn": "978-0135957059",
        "publishedYear": 2019,
        "available": true
    }
}
"""

from pydantic import Field, StrictBool, StrictInt, StrictStr

from bookcheck.schemas.common import (
    CanonicalId,
    ContractModel,
    envelope_of,
    list_envelope_of,
    message_envelope_of,
    partial,
)

ISBN_PATTERN = r"^[0-9\s-]{10,17}$"


class Book(ContractModel):
    """A book resource."""

    id: CanonicalId
    title: StrictStr = Field(min_length=1)
    author: StrictStr = Field(min_length=1)
    isbn: StrictStr = Field(pattern=ISBN_PATTERN)
    published_year: StrictInt = Field(alias="publishedYear")
    available: StrictBool


PartialBook = partial(Book)

BookResponse = message_envelope_of(Book)
PartialBookResponse = partial(BookResponse)
BookUpdateResponse = message_envelope_of(PartialBook)
BookFetchResponse = envelope_of(Book)
BookListResponse = list_envelope_of(Book)


class BookDeleteResponse(ContractModel):
    """200 body for DELETE /books/{id}."""

    success: StrictBool
    message: StrictStr
    deleted_id: CanonicalId = Field(alias="deletedId")


# =============================================================================
# Request payloads
# =============================================================================


class BookCreate(ContractModel):
    """
    Payload for POST /books.

    Only set fields are sent (see clients.http.serialize_payload).
    """

    title: StrictStr
    author: StrictStr
    isbn: StrictStr
    published_year: StrictInt | None = Field(default=None, alias="publishedYear")
    available: StrictBool | None = None


class BookUpdate(ContractModel):
    """Payload for PUT /books/{id}. Every field is optional."""

    title: StrictStr | None = None
    author: StrictStr | None = None
    isbn: StrictStr | None = None
    published_year: StrictInt | None = Field(default=None, alias="publishedYear")
    available: StrictBool | None = None
