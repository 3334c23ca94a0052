"""Filesystem operations for the use-case store.

INVARIANT: A record file is only ever replaced whole. Writes go to a
temporary file in the same directory and are moved into place with
``os.replace``, so a reader sees the old content or the new content,
never a truncated mix. An interrupted write leaves a stray temp file at
worst, never a damaged record.

This module handles path resolution, discovery, and raw text I/O only.
Encoding lives in :mod:`usecasectl.infrastructure.serializer`.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

RECORD_SUFFIX = ".json"
TEMP_PREFIX = "usecase-"
TEMP_SUFFIX = ".tmp"


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def resolve_record_path(storage_dir: Path, use_case_id: str) -> Path:
    """Resolve ``{storage_dir}/{use_case_id}.json``.

    Raises ``ValueError`` for blank identifiers and for identifiers that
    would place the file anywhere other than directly inside
    *storage_dir*.
    """
    if use_case_id is None or not use_case_id.strip():
        msg = "Use case ID cannot be None or empty"
        raise ValueError(msg)

    result = storage_dir / f"{use_case_id}{RECORD_SUFFIX}"

    # Guard against path traversal via a crafted identifier
    if result.resolve().parent != storage_dir.resolve():
        msg = f"Use case ID escapes storage directory: {use_case_id!r}"
        raise ValueError(msg)

    return result


def find_record_files(storage_dir: Path) -> list[Path]:
    """Discover every record file directly inside *storage_dir*.

    Temporary files from in-flight or interrupted writes are skipped.
    Results are sorted by file name.
    """
    if not storage_dir.exists():
        return []
    return sorted(
        path for path in storage_dir.iterdir() if path.is_file() and path.suffix == RECORD_SUFFIX
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_record_file(path: Path) -> str:
    """Read a record file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, content: str) -> None:
    """Write *content* to *path* via temp file + ``os.replace``.

    The temp file is created in ``path.parent`` so the final rename never
    crosses a filesystem boundary. On any failure the temp file is
    removed and the exception propagates; an existing file at *path* is
    left untouched.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
