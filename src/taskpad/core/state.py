# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one session needs, built once in cli.bootstrap and passed
    explicitly to every command handler.
    """

    # Settings (or a SimpleNamespace in tests)
    settings: Any

    task_store: TaskStore
    tasks: TaskList = field(default_factory=TaskList)

    # Set by the "bye" command; front ends stop reading input once it is True.
    is_exit: bool = False

    # Message from a failed startup load (None when loading went fine).
    load_error: str | None = None
