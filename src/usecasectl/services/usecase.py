"""UseCaseService — create, edit, list, and delete use cases.

Pipeline for writes: VALIDATE -> ASSIGN ID (create only) -> PERSIST.

Operations return domain values and raise the typed failures from
:mod:`usecasectl.errors`. Nothing is recovered here; adapters (the CLI)
decide how to present a failure.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from usecasectl.domain.models import UseCaseBuilder
from usecasectl.domain.validation import ValidationResult, validate_use_case
from usecasectl.errors import UseCaseNotFoundError, ValidationFailedError

if TYPE_CHECKING:
    from usecasectl.domain.models import UseCase
    from usecasectl.infrastructure.repository import UseCaseRepository

logger = logging.getLogger(__name__)


def _require_id(use_case_id: str) -> None:
    if use_case_id is None or not use_case_id.strip():
        msg = "Use case ID cannot be None or empty"
        raise ValueError(msg)


class UseCaseService:
    """Coordinates the validation engine and the repository.

    Usage::

        svc = UseCaseService(UseCaseRepository(tmp_dir))
        created = svc.create_use_case(draft)
        svc.update_use_case(UseCaseBuilder.from_use_case(created).title("Buy Items").build())
    """

    def __init__(self, repository: UseCaseRepository) -> None:
        self._repository = repository

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_use_case(self, use_case: UseCase) -> UseCase:
        """Validate and persist a new use case.

        A blank ``id`` is replaced with a fresh UUID. Returns the value
        that was stored.
        """
        if use_case is None:
            msg = "use_case cannot be None"
            raise ValueError(msg)
        self._ensure_valid(use_case)

        stored = use_case
        if not use_case.id.strip():
            stored = UseCaseBuilder.from_use_case(use_case).id(str(uuid.uuid4())).build()

        self._repository.save(stored)
        logger.info("Created use case %s", stored.id)
        return stored

    def update_use_case(self, use_case: UseCase) -> UseCase:
        """Validate and replace the stored record with the same ``id``."""
        if use_case is None:
            msg = "use_case cannot be None"
            raise ValueError(msg)
        _require_id(use_case.id)

        if not self._repository.exists(use_case.id):
            raise UseCaseNotFoundError(use_case.id, op="update")
        self._ensure_valid(use_case)

        self._repository.save(use_case)
        logger.info("Updated use case %s", use_case.id)
        return use_case

    def delete_use_case(self, use_case_id: str) -> None:
        """Delete a stored use case. Confirmation belongs to the caller."""
        _require_id(use_case_id)
        self._repository.delete(use_case_id)
        logger.info("Deleted use case %s", use_case_id)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load_use_case(self, use_case_id: str) -> UseCase:
        _require_id(use_case_id)
        return self._repository.load(use_case_id)

    def list_use_cases(self) -> list[UseCase]:
        """All stored use cases, ordered case-insensitively by title."""
        return sorted(self._repository.load_all(), key=lambda uc: uc.title.casefold())

    def exists(self, use_case_id: str) -> bool:
        if use_case_id is None or not use_case_id.strip():
            return False
        return self._repository.exists(use_case_id)

    def validate_use_case(self, use_case: UseCase) -> ValidationResult:
        return validate_use_case(use_case)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_valid(self, use_case: UseCase) -> None:
        result = validate_use_case(use_case)
        if not result.valid:
            raise ValidationFailedError("Use case validation failed", result.errors)
