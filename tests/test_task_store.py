# tests/test_task_store.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from taskpad.errors import (
    CorruptedDeadlineDateError,
    CorruptedDeadlineEntryError,
    CorruptedEventEntryError,
    CorruptedSaveEntryError,
    InvalidCompletionFlagError,
    StorageError,
    UnknownTaskTypeError,
)
from taskpad.tasks.line_store import FileLineStore
from taskpad.tasks.task_list import TaskList
from taskpad.tasks.task_models import Deadline, Event, Todo
from taskpad.tasks.task_store import TaskStore, decode_task, encode_task

from .fakes import FakeLineStore


@pytest.mark.parametrize(
    "task",
    [
        Todo("read book"),
        Todo("read book", done=True, tags={"fun"}),
        Deadline("submit report", date(2024, 12, 31)),
        Deadline("pay rent", date(2025, 2, 1), done=True, tags={"home", "money"}),
        Event("trip", "mon 9am", "tue"),
        Event("conf", "2024-05-01", "2024-05-03", tags={"work"}),
    ],
)
def test_decode_restores_encoded_task(task) -> None:
    assert decode_task(encode_task(task)) == task


def test_encoded_lines() -> None:
    assert encode_task(Deadline("submit report", date(2024, 12, 31))) == (
        "D | 0 | submit report | 2024-12-31"
    )
    assert encode_task(Todo("read", done=True, tags={"b", "a"})) == "T | 1 | read | a,b"
    assert encode_task(Event("trip", "mon", "tue", tags={"x"})) == "E | 0 | trip | mon | tue | x"


def test_decode_trims_fields_and_skips_bad_stored_tags() -> None:
    task = decode_task("T|1|  read book  | fun, bad tag ,,Work")
    assert task == Todo("read book", done=True, tags={"fun", "work"})


@pytest.mark.parametrize(
    "line, error",
    [
        ("T | 0", CorruptedSaveEntryError),
        ("X | 0 | something", UnknownTaskTypeError),
        ("T | 2 | something", InvalidCompletionFlagError),
        ("D | 0 | return book", CorruptedDeadlineEntryError),
        ("D | 0 | return book | not-a-date", CorruptedDeadlineDateError),
        ("D | 0 | return book | 2024-13-01", CorruptedDeadlineDateError),
        ("E | 0 | trip | 2026-01-01", CorruptedEventEntryError),
    ],
)
def test_decode_corrupted_lines(line: str, error: type[StorageError]) -> None:
    with pytest.raises(error):
        decode_task(line)


def test_unknown_type_message() -> None:
    with pytest.raises(UnknownTaskTypeError) as exc:
        decode_task("X | 0 | something")
    assert exc.value.message == "Unknown task type in save: X"


def test_load_skips_blank_lines() -> None:
    store = TaskStore(FakeLineStore(lines=["", "   ", "T | 0 | a", ""]))
    assert store.load() == [Todo("a")]


def test_save_rewrites_whole_snapshot() -> None:
    lines = FakeLineStore(lines=["T | 0 | stale"])
    store = TaskStore(lines)
    store.save(TaskList([Todo("fresh")]))
    assert lines.lines == ["T | 0 | fresh"]
    store.save(TaskList())
    assert lines.lines == []


def test_deadline_survives_file_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.txt"
    store = TaskStore(FileLineStore(path))
    store.save(TaskList([Deadline("submit report", date(2024, 12, 31), done=True)]))

    assert path.read_text("utf-8") == "D | 1 | submit report | 2024-12-31\n"
    loaded = TaskStore(FileLineStore(path)).load()
    assert [str(t) for t in loaded] == ["[D][X] submit report (by: Dec 31 2024)"]


def test_iso_date_on_disk_must_use_ascii_digits() -> None:
    with pytest.raises(CorruptedDeadlineDateError):
        decode_task("D | 0 | return book | ２０２４-１２-３１")
