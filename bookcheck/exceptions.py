"""
Exceptions raised by the check pipeline.

Only three things are treated as errors here:
- the network failed (TransportError)
- a body did not match its contract (ContractViolationError)
- a login body could not yield a token (AuthenticationError)

HTTP error statuses and non-JSON bodies are normal outcomes and are returned,
not raised.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookcheck.validation import Violation


class BookcheckError(Exception):
    """Base class for all bookcheck errors."""


class TransportError(BookcheckError):
    """
    The request never produced an HTTP response.

    Raised for connection refused, DNS failures and timeouts. The original
    httpx exception is available as __cause__.
    """

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class ContractViolationError(BookcheckError, AssertionError):
    """
    A JSON body did not match its contract.

    Subclasses AssertionError so pytest reports it as a failed check rather
    than an error in the test itself.
    """

    def __init__(self, message: str, violations: Sequence["Violation"], context: str = ""):
        self.violations = tuple(violations)
        self.context = context
        super().__init__(message)


class AuthenticationError(BookcheckError):
    """Login produced no usable token (distinct from an HTTP 401)."""
