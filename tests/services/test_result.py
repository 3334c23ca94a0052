"""Tests for the ServiceResult envelope."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from usecasectl.domain.validation import ValidationError
from usecasectl.errors import (
    EncodeError,
    StorageError,
    UseCaseNotFoundError,
    ValidationFailedError,
)
from usecasectl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="list")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="list")
        with pytest.raises(PydanticValidationError):
            result.ok = False  # type: ignore[misc]

    def test_failure_from_not_found(self) -> None:
        result = ServiceResult.failure("show", UseCaseNotFoundError("uc-9", op="load"))
        assert not result.ok
        assert result.op == "show"
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "Use case not found: uc-9"
        assert result.error.detail == {"op": "load", "target": "uc-9"}


class TestServiceError:
    def test_validation_failure_carries_errors(self) -> None:
        exc = ValidationFailedError(
            "Use case validation failed",
            [ValidationError(field="title", message="Title cannot be empty", example="Example")],
        )
        err = ServiceError.from_exception(exc)
        assert err.code == "VALIDATION_FAILED"
        assert err.detail == {
            "errors": [{"field": "title", "message": "Title cannot be empty", "example": "Example"}]
        }

    def test_storage_failure(self) -> None:
        err = ServiceError.from_exception(StorageError("boom", op="save", target="/x.json"))
        assert err.code == "STORAGE_ERROR"
        assert err.detail["target"] == "/x.json"

    def test_encode_failure(self) -> None:
        err = ServiceError.from_exception(EncodeError("Failed to encode use case 'uc-1'"))
        assert err.code == "ENCODE_ERROR"
        assert "uc-1" in err.message

    def test_argument_error(self) -> None:
        err = ServiceError.from_exception(ValueError("Use case ID cannot be None or empty"))
        assert err.code == "INVALID_ARGUMENT"
        assert err.detail == {}
