# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_list import TaskList
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeLineStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_file_path=tmp_path / "data" / "taskpad.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def line_store() -> FakeLineStore:
    return FakeLineStore()


@pytest.fixture()
def state(settings: SimpleNamespace, line_store: FakeLineStore) -> AppState:
    """AppState wired with an in-memory line store and an empty list."""
    return AppState(
        settings=settings,
        task_store=TaskStore(line_store),
        tasks=TaskList(),
    )
