# tasks/task_store.py

from __future__ import annotations

import logging
import re
from datetime import date

from ..core.ports import LineStore
from ..errors import (
    CorruptedDeadlineDateError,
    CorruptedDeadlineEntryError,
    CorruptedEventEntryError,
    CorruptedSaveEntryError,
    InvalidCompletionFlagError,
    InvalidTagError,
    UnknownTaskTypeError,
)
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, Todo, normalize_tag

logger = logging.getLogger(__name__)

FIELD_SEP = " | "
TAG_SEP = ","
ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ---- encoding ----


def _tags_to_str(task: Task) -> str:
    return TAG_SEP.join(task.sorted_tags())


def encode_task(task: Task) -> str:
    """
    One save-file record:

        T | 0 | read book [| tags]
        D | 1 | submit report | 2024-12-31 [| tags]
        E | 0 | trip | mon | tue [| tags]

    The tags field is left out entirely when the task has none.
    """
    fields = [task.kind.value, "1" if task.done else "0", task.description]

    if isinstance(task, Deadline):
        fields.append(task.due_date.isoformat())
    elif isinstance(task, Event):
        fields.extend([task.start, task.end])
    elif not isinstance(task, Todo):
        raise TypeError(f"Unsupported task type: {type(task).__name__}")

    if task.tags:
        fields.append(_tags_to_str(task))
    return FIELD_SEP.join(fields)


# ---- decoding ----


def _str_to_tags(raw: str) -> set[str]:
    tags: set[str] = set()
    for token in raw.split(TAG_SEP):
        if not token.strip():
            continue
        try:
            tags.add(normalize_tag(token, require_marker=False))
        except InvalidTagError:
            logger.debug("Skipping unparseable stored tag %r", token)
    return tags


def _parse_done(value: str, line: str) -> bool:
    if value == "1":
        return True
    if value == "0":
        return False
    raise InvalidCompletionFlagError(line)


def _parse_stored_date(value: str, line: str) -> date:
    if not ISO_DATE_RE.fullmatch(value):
        raise CorruptedDeadlineDateError(line)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise CorruptedDeadlineDateError(line) from e


def decode_task(line: str) -> Task:
    parts = [p.strip() for p in line.split("|")]
    if len(parts) < 3:
        raise CorruptedSaveEntryError(line)

    code, done_raw, description = parts[0], parts[1], parts[2]
    kind = TaskKind.from_code(code)
    if kind is None:
        raise UnknownTaskTypeError(code)
    done = _parse_done(done_raw, line)
    if not description:
        raise CorruptedSaveEntryError(line)

    task: Task
    if kind is TaskKind.TODO:
        extra = parts[3:]
        task = Todo(description, done=done)
    elif kind is TaskKind.DEADLINE:
        if len(parts) < 4:
            raise CorruptedDeadlineEntryError(line)
        task = Deadline(description, _parse_stored_date(parts[3], line), done=done)
        extra = parts[4:]
    else:
        if len(parts) < 5:
            raise CorruptedEventEntryError(line)
        task = Event(description, parts[3], parts[4], done=done)
        extra = parts[5:]

    if extra:
        task.tags = _str_to_tags(extra[0])
    return task


class TaskStore:
    """
    Line-store codec.

    Maps the in-memory TaskList to save-file records and back. Raw I/O is
    delegated to a LineStore; every save rewrites the whole snapshot.
    """

    def __init__(self, lines: LineStore) -> None:
        self._lines = lines

    def load(self) -> list[Task]:
        tasks: list[Task] = []
        for line in self._lines.read_lines():
            if not line.strip():
                continue
            tasks.append(decode_task(line))
        logger.info("TaskStore loaded %d tasks", len(tasks))
        return tasks

    def save(self, task_list: TaskList) -> None:
        self._lines.write_lines(task_list.serialize())
        logger.debug("TaskStore saved %d tasks", len(task_list))
