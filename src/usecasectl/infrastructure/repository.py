"""UseCaseRepository — one JSON file per use case.

Maps an identifier to ``<storage_dir>/<id>.json``. The repository owns
the storage directory exclusively; nothing else writes to it.

Failure semantics:

- Missing record on ``load``/``delete``: :class:`UseCaseNotFoundError`.
- OS-level failure: :class:`StorageError` naming the operation and path.
- Encoding/decoding failure: the serializer's
  :class:`~usecasectl.errors.SerializationError` propagates unchanged.

There is no locking. Two writers racing on the same identifier resolve
to whichever ``os.replace`` lands last.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from usecasectl.errors import MalformedJsonError, StorageError, UseCaseNotFoundError
from usecasectl.infrastructure.filesystem import (
    atomic_write_text,
    find_record_files,
    read_record_file,
    resolve_record_path,
)
from usecasectl.infrastructure.serializer import Serializer

if TYPE_CHECKING:
    from usecasectl.domain.models import UseCase

logger = logging.getLogger(__name__)


def default_storage_directory() -> Path:
    """Per-user storage location: ``~/.usecase-assistant/use-cases``."""
    return Path.home() / ".usecase-assistant" / "use-cases"


class UseCaseRepository:
    """File-backed store for :class:`UseCase` records.

    The storage directory (with parents) is created on construction.
    """

    def __init__(
        self,
        directory: Path | None = None,
        serializer: Serializer | None = None,
    ) -> None:
        self._directory = directory if directory is not None else default_storage_directory()
        self._serializer = serializer if serializer is not None else Serializer()
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Failed to create storage directory: {self._directory}"
            raise StorageError(msg, op="init", target=str(self._directory)) from exc

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, use_case_id: str) -> Path:
        """Record path for *use_case_id* (``ValueError`` if malformed)."""
        return resolve_record_path(self._directory, use_case_id)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def save(self, use_case: UseCase) -> None:
        """Persist *use_case*, replacing any existing record atomically.

        Serialization happens before anything touches the directory, so a
        serialization failure leaves the previous record (if any) and the
        directory contents exactly as they were.
        """
        if use_case is None:
            msg = "use_case cannot be None"
            raise ValueError(msg)

        path = self.path_for(use_case.id)
        text = self._serializer.serialize(use_case)
        try:
            atomic_write_text(path, text)
        except OSError as exc:
            msg = f"Failed to save use case to file: {path}"
            raise StorageError(msg, op="save", target=str(path)) from exc
        logger.debug("Saved use case %s to %s", use_case.id, path)

    def load(self, use_case_id: str) -> UseCase:
        """Read and decode the record for *use_case_id*."""
        path = self.path_for(use_case_id)
        if not path.exists():
            raise UseCaseNotFoundError(use_case_id, op="load")
        use_case = self._load_path(path, op="load")
        logger.debug("Loaded use case %s", use_case_id)
        return use_case

    def load_all(self) -> list[UseCase]:
        """Decode every record in the directory, in file-name order.

        All-or-nothing: the first unreadable or undecodable record aborts
        the whole call.
        """
        try:
            paths = find_record_files(self._directory)
        except OSError as exc:
            msg = f"Failed to list use cases in directory: {self._directory}"
            raise StorageError(msg, op="load_all", target=str(self._directory)) from exc

        use_cases = [self._load_path(path, op="load_all") for path in paths]
        logger.debug("Loaded %d use cases from %s", len(use_cases), self._directory)
        return use_cases

    def delete(self, use_case_id: str) -> None:
        """Remove the record for *use_case_id*."""
        path = self.path_for(use_case_id)
        if not path.exists():
            raise UseCaseNotFoundError(use_case_id, op="delete")
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise UseCaseNotFoundError(use_case_id, op="delete") from exc
        except OSError as exc:
            msg = f"Failed to delete use case file: {path}"
            raise StorageError(msg, op="delete", target=str(path)) from exc
        logger.debug("Deleted use case %s", use_case_id)

    def exists(self, use_case_id: str) -> bool:
        """Whether a record exists for *use_case_id*. Never raises."""
        try:
            return self.path_for(use_case_id).is_file()
        except (ValueError, OSError):
            return False

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_path(self, path: Path, *, op: str) -> UseCase:
        try:
            text = read_record_file(path)
        except OSError as exc:
            msg = f"Failed to read use case file: {path}"
            raise StorageError(msg, op=op, target=str(path)) from exc
        if not text.strip():
            # Empty record files are corrupt data, not a caller argument error.
            msg = f"Invalid JSON format: record file is empty: {path}"
            raise MalformedJsonError(msg)
        return self._serializer.deserialize(text)
