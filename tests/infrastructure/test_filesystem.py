"""Tests for filesystem operations: path resolution, discovery, atomic writes."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from usecasectl.infrastructure import filesystem
from usecasectl.infrastructure.filesystem import (
    atomic_write_text,
    find_record_files,
    read_record_file,
    resolve_record_path,
)


class TestResolveRecordPath:
    def test_joins_id_and_suffix(self, tmp_path: Path) -> None:
        assert resolve_record_path(tmp_path, "uc-1") == tmp_path / "uc-1.json"

    @pytest.mark.parametrize("use_case_id", [None, "", "   "])
    def test_blank_id(self, tmp_path: Path, use_case_id: str | None) -> None:
        with pytest.raises(ValueError, match="cannot be None or empty"):
            resolve_record_path(tmp_path, use_case_id)  # type: ignore[arg-type]

    @pytest.mark.parametrize("use_case_id", ["../escape", "nested/uc-1", "/etc/passwd"])
    def test_traversal_rejected(self, tmp_path: Path, use_case_id: str) -> None:
        with pytest.raises(ValueError, match="escapes storage directory"):
            resolve_record_path(tmp_path, use_case_id)


class TestFindRecordFiles:
    def test_missing_directory(self, tmp_path: Path) -> None:
        assert find_record_files(tmp_path / "absent") == []

    def test_sorted_and_filtered(self, tmp_path: Path) -> None:
        (tmp_path / "b.json").write_text("{}")
        (tmp_path / "a.json").write_text("{}")
        (tmp_path / "usecase-x.tmp").write_text("partial")
        (tmp_path / "notes.txt").write_text("hello")
        (tmp_path / "sub.json").mkdir()
        assert [p.name for p in find_record_files(tmp_path)] == ["a.json", "b.json"]


class TestAtomicWrite:
    def test_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "uc-1.json"
        atomic_write_text(target, '{"id": "uc-1"}')
        assert read_record_file(target) == '{"id": "uc-1"}'
        assert [p.name for p in tmp_path.iterdir()] == ["uc-1.json"]

    def test_replaces_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "uc-1.json"
        target.write_text("old", encoding="utf-8")
        atomic_write_text(target, "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_failed_replace_keeps_old_content(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "uc-1.json"
        target.write_text("old", encoding="utf-8")

        def broken_replace(src: os.PathLike[str], dst: os.PathLike[str]) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(filesystem.os, "replace", broken_replace)
        with pytest.raises(OSError, match="disk full"):
            atomic_write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["uc-1.json"]

    def test_missing_parent_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            atomic_write_text(tmp_path / "absent" / "uc-1.json", "x")
