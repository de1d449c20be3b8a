# tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

from ..errors import InvalidTagError

TAG_MARKER = "#"
TAG_RE = re.compile(r"[a-z0-9_-]+")


class TaskKind(StrEnum):
    """Single-letter type code used both in the display prefix and on disk."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_code(cls, raw: str) -> TaskKind | None:
        try:
            return cls(raw)
        except ValueError:
            return None


def normalize_tag(raw: str, *, require_marker: bool = True) -> str:
    """
    Turn a user-supplied tag token into its stored form.

    "#Fun" -> "fun". With require_marker=False the leading '#' is optional,
    which is what the save file needs (tags are stored without it).
    Raises InvalidTagError for anything that does not match [a-z0-9_-]+.
    """
    token = raw.strip()
    if token.startswith(TAG_MARKER):
        token = token[len(TAG_MARKER) :]
    elif require_marker:
        raise InvalidTagError(raw)

    token = token.lower()
    if not TAG_RE.fullmatch(token):
        raise InvalidTagError(raw)
    return token


@dataclass(slots=True)
class TaskBase:
    description: str
    done: bool = field(default=False, kw_only=True)
    tags: set[str] = field(default_factory=set, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        self.description = self.description.strip()
        self.tags = {normalize_tag(t, require_marker=False) for t in self.tags}

    # ---- completion ----

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    # ---- tags ----

    def add_tag(self, raw: str) -> None:
        self.tags.add(normalize_tag(raw))

    def remove_tag(self, raw: str) -> None:
        self.tags.discard(normalize_tag(raw))

    def has_tag(self, raw: str) -> bool:
        try:
            return normalize_tag(raw, require_marker=False) in self.tags
        except InvalidTagError:
            return False

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)

    # ---- search / display ----

    def contains_keyword(self, keyword: str) -> bool:
        return bool(keyword) and keyword in self.description

    def __str__(self) -> str:
        return format_task(self)  # type: ignore[arg-type]


@dataclass(slots=True)
class Todo(TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(TaskBase):
    due_date: date
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE


@dataclass(slots=True)
class Event(TaskBase):
    start: str
    end: str
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        super(Event, self).__post_init__()
        self.start = self.start.strip()
        self.end = self.end.strip()


Task = Todo | Deadline | Event

DISPLAY_DATE_FORMAT = "%b %d %Y"


def format_task(task: Task) -> str:
    """Display form, e.g. "[D][ ] submit report (by: Dec 31 2024) [#work]"."""
    text = f"[{task.kind.value}][{task.status_icon}] {task.description}"

    if isinstance(task, Deadline):
        text += f" (by: {task.due_date.strftime(DISPLAY_DATE_FORMAT)})"
    elif isinstance(task, Event):
        text += f" (from: {task.start} to: {task.end})"
    elif not isinstance(task, Todo):
        raise TypeError(f"Unsupported task type: {type(task).__name__}")

    if task.tags:
        text += " [" + " ".join(TAG_MARKER + t for t in task.sorted_tags()) + "]"
    return text
