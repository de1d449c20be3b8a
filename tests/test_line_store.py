# tests/test_line_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpad.errors import StorageError
from taskpad.tasks.line_store import FileLineStore


def test_missing_file_is_created_empty(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "tasks.txt"
    store = FileLineStore(path)

    assert store.read_lines() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_write_then_read(tmp_path: Path) -> None:
    store = FileLineStore(tmp_path / "tasks.txt")
    store.write_lines(["T | 0 | café", "T | 1 | b"])

    assert store.read_lines() == ["T | 0 | café", "T | 1 | b"]
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_write_replaces_previous_content(tmp_path: Path) -> None:
    store = FileLineStore(tmp_path / "tasks.txt")
    store.write_lines(["one", "two", "three"])
    store.write_lines(["four"])
    assert store.read_lines() == ["four"]


def test_unusable_path_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", "utf-8")
    store = FileLineStore(blocker / "tasks.txt")

    with pytest.raises(StorageError) as exc:
        store.read_lines()
    assert exc.value.message == "Unable to initialize save file"

    with pytest.raises(StorageError):
        store.write_lines(["T | 0 | a"])


def test_only_newline_separates_records(tmp_path: Path) -> None:
    store = FileLineStore(tmp_path / "tasks.txt")
    records = [
        "E | 0 | trip | mon\u2028am | tue",
        "T | 0 | page\x0cbreak \x85\x0b\x1c\x1d\x1e",
        "T | 1 | carriage\rreturn",
    ]
    store.write_lines(records)

    assert store.read_lines() == records


def test_crlf_line_endings_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | a\r\nT | 1 | b\r\n")

    assert FileLineStore(path).read_lines() == ["T | 0 | a", "T | 1 | b"]
