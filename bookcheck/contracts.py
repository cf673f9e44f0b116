"""
Contract Registry

Named contracts, registered once at import time and shared read-only by every
validation in the run.

PATTERN: Define once, never rebind
==================================
A name can be registered again with the same contract (a no-op), but never
bound to a different one. A contract that changed shape halfway through a run
would make results depend on test order.

Usage:
    from bookcheck.contracts import CONTRACTS

    CONTRACTS.get("book.response")

    # or let the validator resolve the name
    validate("book.response", body)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from bookcheck.schemas import (
    Book,
    BookDeleteResponse,
    BookFetchResponse,
    BookListResponse,
    BookResponse,
    BookUpdateResponse,
    ContractModel,
    ErrorBody,
    LoginResponse,
    PartialBook,
    PartialBookResponse,
    RouteNotFoundBody,
    envelope_of,
    list_envelope_of,
    message_envelope_of,
    partial,
)

Contract = type[ContractModel]


class ContractRegistry:
    """A name -> contract mapping that only grows."""

    def __init__(self) -> None:
        self._contracts: dict[str, Contract] = {}

    def define(self, name: str, contract: Contract) -> Contract:
        """
        Register a contract under a name.

        Args:
            name: Registry key, e.g. "book.response"
            contract: A ContractModel subclass

        Returns:
            The registered contract

        Raises:
            ValueError: If the name is already bound to a different contract,
                or contract is not a ContractModel subclass
        """
        if not (isinstance(contract, type) and issubclass(contract, ContractModel)):
            raise ValueError(f"Contract {name!r} must be a ContractModel subclass, got {contract!r}")

        existing = self._contracts.get(name)
        if existing is not None and existing is not contract:
            raise ValueError(
                f"Contract {name!r} is already defined as {existing.__name__}; "
                f"refusing to rebind it to {contract.__name__}"
            )

        self._contracts[name] = contract
        return contract

    def get(self, name: str) -> Contract:
        """
        Look up a contract by name.

        Raises:
            KeyError: If no contract has that name
        """
        try:
            return self._contracts[name]
        except KeyError:
            known = ", ".join(sorted(self._contracts)) or "none"
            raise KeyError(f"Unknown contract {name!r} (known: {known})") from None

    def names(self) -> list[str]:
        return sorted(self._contracts)

    def as_mapping(self) -> Mapping[str, Contract]:
        """Read-only view of the registered contracts."""
        return MappingProxyType(self._contracts)

    def __contains__(self, name: object) -> bool:
        return name in self._contracts

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._contracts)


# =============================================================================
# Default registry
# =============================================================================

CONTRACTS = ContractRegistry()

CONTRACTS.define("book", Book)
CONTRACTS.define("book.partial", PartialBook)
CONTRACTS.define("book.response", BookResponse)
CONTRACTS.define("book.partial_response", PartialBookResponse)
CONTRACTS.define("book.update_response", BookUpdateResponse)
CONTRACTS.define("book.fetch_response", BookFetchResponse)
CONTRACTS.define("book.list_response", BookListResponse)
CONTRACTS.define("book.delete_response", BookDeleteResponse)
CONTRACTS.define("auth.login_response", LoginResponse)
CONTRACTS.define("error", ErrorBody)
CONTRACTS.define("error.route_not_found", RouteNotFoundBody)

__all__ = [
    "CONTRACTS",
    "Contract",
    "ContractRegistry",
    "envelope_of",
    "list_envelope_of",
    "message_envelope_of",
    "partial",
]
