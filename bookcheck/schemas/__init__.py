"""
Contracts Package

Pydantic models describing the JSON the Book Library service sends and the
payloads the scenarios send to it.

Naming Convention:
- Xxx: The resource as returned by the service
- PartialXxx: Same fields, all optional, constraints kept
- XxxResponse / XxxFetchResponse / XxxListResponse: Envelopes around Xxx
- XxxCreate / XxxUpdate: Request payloads
"""

from bookcheck.schemas.auth import LoginRequest, LoginResponse, LoginUser
from bookcheck.schemas.book import (
    ISBN_PATTERN,
    Book,
    BookCreate,
    BookDeleteResponse,
    BookFetchResponse,
    BookListResponse,
    BookResponse,
    BookUpdate,
    BookUpdateResponse,
    PartialBook,
    PartialBookResponse,
)
from bookcheck.schemas.common import (
    ContractModel,
    Envelope,
    ErrorBody,
    ListEnvelope,
    MessageEnvelope,
    RouteNotFoundBody,
    envelope_of,
    list_envelope_of,
    message_envelope_of,
    partial,
)

__all__ = [
    # Building blocks
    "ContractModel",
    "Envelope",
    "MessageEnvelope",
    "ListEnvelope",
    "ErrorBody",
    "RouteNotFoundBody",
    "partial",
    "envelope_of",
    "message_envelope_of",
    "list_envelope_of",
    # Book contracts
    "ISBN_PATTERN",
    "Book",
    "PartialBook",
    "BookResponse",
    "PartialBookResponse",
    "BookUpdateResponse",
    "BookFetchResponse",
    "BookListResponse",
    "BookDeleteResponse",
    "BookCreate",
    "BookUpdate",
    # Auth contracts
    "LoginRequest",
    "LoginUser",
    "LoginResponse",
]
