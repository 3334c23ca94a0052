"""ServiceResult and ServiceError — the envelope adapters emit.

Services raise typed failures; the CLI wraps each outcome in a
ServiceResult so human and ``--json`` output share one shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from usecasectl.errors import UseCaseError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: Exception) -> ServiceError:
        """Typed failures keep their code and detail; anything else is an argument error."""
        if isinstance(exc, UseCaseError):
            return cls(code=exc.code, message=str(exc), detail=exc.detail())
        return cls(code="INVALID_ARGUMENT", message=str(exc))


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: Exception) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
