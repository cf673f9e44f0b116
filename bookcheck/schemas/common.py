"""
Shared contract building blocks.

WHY Pydantic for Contracts?
===========================
A contract is a description of the JSON shape the service promises. Pydantic
models give us that description, a validator that reports every failing field
at once, and a typed, immutable value on success.

Conventions:
- ContractModel is the base of every contract: frozen, extra fields ignored
- Primitive fields use Strict* types so "2015" is not accepted as an integer
- Python attributes are snake_case, JSON names are camelCase aliases
- Identifiers accept strings or integers and are stored as strings

The composition helpers at the bottom build new contracts from existing ones.
They are pure and memoized: the same input always yields the same class.
"""

from functools import lru_cache
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr, create_model
from pydantic_core import PydanticCustomError

T = TypeVar("T")


def json_type_name(value: Any) -> str:
    """Name a Python value by its JSON type ("string", "integer", "null"...)."""
    if value is None:
        return "null"
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def canonical_id(value: Any) -> str:
    """
    Normalize a resource identifier to text.

    The service returns numeric ids in bodies and string ids in deletedId, so
    ids are only ever compared as strings.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise PydanticCustomError(
            "id_type",
            "expected string or integer, got {actual}",
            {"actual": json_type_name(value)},
        )
    return str(value)


CanonicalId = Annotated[str, BeforeValidator(canonical_id)]


class ContractModel(BaseModel):
    """Base class for all contracts."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


# =============================================================================
# Envelopes
# =============================================================================


class Envelope(ContractModel, Generic[T]):
    """{success, data} wrapper used by GET /books/{id}."""

    success: StrictBool
    data: T


class MessageEnvelope(Envelope[T], Generic[T]):
    """{success, message, data} wrapper used by create and update."""

    message: StrictStr


class ListEnvelope(ContractModel, Generic[T]):
    """{success, count, data: [...]} wrapper used by GET /books."""

    success: StrictBool
    count: StrictInt
    data: list[T]


class ErrorBody(ContractModel):
    """{error, message} body the service sends with every 4xx."""

    error: StrictStr
    message: StrictStr


class RouteNotFoundBody(ErrorBody):
    """404 body for unknown paths."""

    available_endpoints: list[StrictStr] = Field(alias="availableEndpoints")


# =============================================================================
# Composition
# =============================================================================


@lru_cache(maxsize=None)
def partial(contract: type[ContractModel]) -> type[ContractModel]:
    """
    Make every field of a contract optional.

    Fields that are present keep their type and format constraints, so
    {"isbn": "978"} still fails and {"title": null} is still a type error.
    Missing fields come back as None on the validated value.
    """
    fields: dict[str, Any] = {}
    for name, info in contract.model_fields.items():
        fields[name] = (
            info.rebuild_annotation(),
            Field(default=None, alias=info.alias),
        )

    return create_model(
        f"Partial{contract.__name__}",
        __base__=ContractModel,
        __module__=contract.__module__,
        **fields,
    )


@lru_cache(maxsize=None)
def envelope_of(contract: type[ContractModel]) -> type[ContractModel]:
    """Wrap a contract as {success, data}."""
    return Envelope[contract]


@lru_cache(maxsize=None)
def message_envelope_of(contract: type[ContractModel]) -> type[ContractModel]:
    """Wrap a contract as {success, message, data}."""
    return MessageEnvelope[contract]


@lru_cache(maxsize=None)
def list_envelope_of(contract: type[ContractModel]) -> type[ContractModel]:
    """Wrap a contract as {success, count, data: [...]}."""
    return ListEnvelope[contract]
