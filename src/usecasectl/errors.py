"""Typed failures raised by the use-case core.

Three failure kinds, each with a stable ``code`` for machine output:

- Validation: methodology rules rejected a document (accumulated errors).
- Serialization: malformed JSON, schema violation, decode or encode failure.
- Storage: record not found, or an underlying I/O failure.

INVARIANT: None of these are recovered inside the core. They propagate
to the caller, which decides whether to re-prompt, report, or abort.
Plain argument errors (``None`` or blank where a value is required) are
``ValueError`` and are not part of this hierarchy.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from usecasectl.domain.validation import ValidationError


class UseCaseError(Exception):
    """Base class for every failure raised by usecasectl."""

    code = "USECASE_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for machine-readable output."""
        return {}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationFailedError(UseCaseError):
    """A document failed methodology validation."""

    code = "VALIDATION_FAILED"

    def __init__(self, message: str, errors: Iterable[ValidationError] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.errors: tuple[ValidationError, ...] = tuple(errors)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        lines = [f"{self.message}:"]
        lines.extend(f"  - {err.field}: {err.message}" for err in self.errors)
        return "\n".join(lines)

    def detail(self) -> dict[str, Any]:
        return {"errors": [err.model_dump() for err in self.errors]}


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class SerializationError(UseCaseError):
    """Converting a use case to or from JSON failed."""

    code = "SERIALIZATION_ERROR"


class MalformedJsonError(SerializationError):
    """The text is not syntactically valid JSON."""

    code = "MALFORMED_JSON"


class SchemaValidationError(SerializationError):
    """The JSON is well-formed but does not conform to the record schema."""

    code = "SCHEMA_INVALID"

    def __init__(self, message: str, violations: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.violations: tuple[str, ...] = tuple(violations)

    def detail(self) -> dict[str, Any]:
        return {"violations": list(self.violations)}


class DecodeError(SerializationError):
    """Schema-conformant JSON could not be turned into a domain value."""

    code = "DECODE_ERROR"


class EncodeError(SerializationError):
    """A domain value could not be written as UTF-8 JSON text."""

    code = "ENCODE_ERROR"


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageError(UseCaseError):
    """A repository operation failed at the filesystem level."""

    code = "STORAGE_ERROR"

    def __init__(self, message: str, *, op: str, target: str) -> None:
        super().__init__(message)
        self.op = op
        self.target = target

    def detail(self) -> dict[str, Any]:
        return {"op": self.op, "target": self.target}


class UseCaseNotFoundError(StorageError):
    """No record exists for the requested identifier."""

    code = "NOT_FOUND"

    def __init__(self, use_case_id: str, *, op: str) -> None:
        super().__init__(f"Use case not found: {use_case_id}", op=op, target=use_case_id)
        self.use_case_id = use_case_id
