"""
Clients Package

Thin request builders over the HTTP transport. Each method maps one endpoint
of the Book Library service to a RequestDescriptor and returns the raw
ResponseEnvelope. Nothing here inspects status codes or bodies.

- http.py: Transport, RequestDescriptor, ResponseEnvelope, parse_body
- auth.py: /auth/* endpoints
- books.py: /books/* endpoints
"""

from bookcheck.clients.auth import AuthClient
from bookcheck.clients.books import BooksClient
from bookcheck.clients.http import (
    JSONValue,
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
    build_headers,
    parse_body,
)

__all__ = [
    "AuthClient",
    "BooksClient",
    "JSONValue",
    "RequestDescriptor",
    "ResponseEnvelope",
    "Transport",
    "build_headers",
    "parse_body",
]
