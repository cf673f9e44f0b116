"""
Contract Validation

Checks a decoded JSON body against a contract and reports every problem in one
go. A body missing two required fields produces two violations, not one.

Violation messages:
- missing required field   -> "required field missing"
- wrong primitive type     -> "expected <type>, got <actual>" (JSON type names)
- failed constraint        -> the constraint's own message
- extra fields             -> ignored; contracts are a lower bound

Usage:
    result = validate("book.response", body)
    if not result.ok:
        print(result.violations)

    # or, inside a test
    book = validate_or_raise(BookResponse, body, "createBook response").data
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from bookcheck.contracts import CONTRACTS, Contract
from bookcheck.exceptions import ContractViolationError
from bookcheck.schemas.common import ContractModel, json_type_name

M = TypeVar("M", bound=ContractModel)

ROOT_PATH = "<root>"
MISSING_MESSAGE = "required field missing"

# pydantic error type -> JSON type the contract expected
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "list_type": "array",
}


@dataclass(frozen=True)
class Violation:
    """One failed check: where it failed and why."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    """
    Outcome of validate().

    Exactly one of `value` and `violations` is populated: a typed value on
    success, a non-empty tuple of violations on failure.
    """

    value: M | None = None
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self, context: str = "") -> M:
        """
        Return the validated value.

        Raises:
            ContractViolationError: If validation failed
        """
        if self.violations:
            raise ContractViolationError(
                format_violations(self.violations, context),
                self.violations,
                context,
            )
        return self.value


def format_violations(violations: Sequence[Violation], context: str = "") -> str:
    """
    Render violations as a failure report, one per line.

        Validation failed (createBook response):
        - data.isbn: String should match pattern '^[0-9\\s-]{10,17}$'
        - data.publishedYear: required field missing
    """
    header = f"Validation failed ({context}):" if context else "Validation failed:"
    return "\n".join([header, *(f"- {violation}" for violation in violations)])


def resolve_contract(contract: Contract | str) -> Contract:
    """Accept either a contract class or a registry name."""
    if isinstance(contract, str):
        return CONTRACTS.get(contract)
    return contract


def _path(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc) or ROOT_PATH


def _message(error: dict[str, Any]) -> str:
    error_type = error["type"]
    if error_type == "missing":
        return MISSING_MESSAGE
    expected = _EXPECTED_TYPES.get(error_type)
    if expected is not None:
        return f"expected {expected}, got {json_type_name(error.get('input'))}"
    return error["msg"]


def violations_from_error(exc: ValidationError) -> tuple[Violation, ...]:
    """Translate a pydantic ValidationError into Violations, in order."""
    return tuple(
        Violation(path=_path(error["loc"]), message=_message(error))
        for error in exc.errors(include_url=False)
    )


def validate(contract: type[M] | str, value: Any) -> ValidationResult[M]:
    """
    Validate a decoded JSON value against a contract.

    Args:
        contract: Contract class or registry name
        value: Decoded JSON (dict, list, str, number, bool or None)

    Returns:
        ValidationResult with the typed value or every violation found
    """
    model = resolve_contract(contract)
    try:
        return ValidationResult(value=model.model_validate(value))
    except ValidationError as exc:
        return ValidationResult(violations=violations_from_error(exc))


def validate_or_raise(contract: type[M] | str, value: Any, context: str = "") -> M:
    """
    Validate and return the typed value, or fail with a full report.

    Args:
        contract: Contract class or registry name
        value: Decoded JSON
        context: Label for the call that produced the value, shown in the
            failure header

    Raises:
        ContractViolationError: Listing every violated path
    """
    return validate(contract, value).unwrap(context)
