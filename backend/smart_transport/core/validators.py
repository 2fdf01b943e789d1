"""Validators: required-field and identifier checks for every write endpoint.

Invariants:
    - A field is present only if its key exists, its value is not None,
      and (for strings) it is not blank after stripping
    - Missing fields are reported in the order of the required tuple
    - Identifier syntax is decided by the store (is_well_formed_id), never here
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from smart_transport.core.errors import MalformedIdentifierError, MissingFieldsError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a required-field check."""
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def check_required(
    payload: Mapping[str, Any], required: tuple[str, ...],
) -> ValidationResult:
    """Pass/fail plus the list of absent or empty required fields."""
    return ValidationResult(
        missing=[name for name in required if not is_present(payload.get(name))],
    )


def require_fields(payload: Mapping[str, Any], required: tuple[str, ...]) -> None:
    """Raise MissingFieldsError unless every required field is present."""
    result = check_required(payload, required)
    if not result.ok:
        raise MissingFieldsError(result.missing)


def require_well_formed_id(
    document_id: str, is_well_formed_id: Callable[[str], bool],
) -> str:
    """Return the id unchanged, or raise MalformedIdentifierError."""
    if not is_well_formed_id(document_id):
        raise MalformedIdentifierError(document_id)
    return document_id
