# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings once,
- wires the file line store and the task codec into AppState,
- loads the previous session's tasks, falling back to an empty list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import LineStore
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.line_store import FileLineStore
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

LOAD_ERROR_PREFIX = "Unable to load previous tasks, starting with an empty list."


def load_tasks(task_store: TaskStore) -> tuple[TaskList, str | None]:
    """Load saved tasks; on failure return an empty list plus the reason."""
    try:
        return TaskList(task_store.load()), None
    except StorageError as e:
        logger.warning("Failed to load saved tasks: %s", e)
        return TaskList(), f"{LOAD_ERROR_PREFIX}\n{e.message}"


def create_initial_state(*, settings=None, line_store: LineStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the line store) injectable makes the app easier to
    test. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if line_store is None:
        line_store = FileLineStore(settings.tasks_file_path)

    task_store = TaskStore(line_store)
    tasks, load_error = load_tasks(task_store)

    logger.info("Session ready file=%s tasks=%d", settings.tasks_file_path, len(tasks))
    return AppState(
        settings=settings,
        task_store=task_store,
        tasks=tasks,
        load_error=load_error,
    )
