# tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from ..errors import IndexOutOfBoundsError, NoTagsProvidedError
from .task_models import Task, normalize_tag

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "You have no tasks in your list."


class TaskList:
    """
    Ordered task collection.

    The list is the only owner of its tasks: callers address tasks by
    0-based index and ask the list to perform the mutation, they never keep
    a task around to change it later. Every index operation is bounds-checked
    and leaves the list untouched when the index is out of range.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    # ---- read access ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._get(index)

    def is_empty(self) -> bool:
        return not self._tasks

    def _get(self, index: int) -> Task:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfBoundsError(len(self._tasks))
        return self._tasks[index]

    # ---- mutations ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind, len(self._tasks))

    def delete(self, index: int) -> Task:
        task = self._get(index)
        del self._tasks[index]
        logger.debug("Task deleted index=%d size=%d", index, len(self._tasks))
        return task

    def mark(self, index: int) -> Task:
        task = self._get(index)
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        task = self._get(index)
        task.mark_undone()
        return task

    def tag(self, index: int, tags: list[str]) -> Task:
        return self._apply_tags(index, tags, lambda task, tag: task.add_tag(tag))

    def untag(self, index: int, tags: list[str]) -> Task:
        return self._apply_tags(index, tags, lambda task, tag: task.remove_tag(tag))

    def _apply_tags(self, index: int, tags: list[str], op: Callable[[Task, str], None]) -> Task:
        task = self._get(index)
        if not tags:
            raise NoTagsProvidedError()
        # Validate the whole batch first so a bad token leaves the task as it was.
        for tag in tags:
            normalize_tag(tag)
        for tag in tags:
            op(task, tag)
        return task

    # ---- search ----

    def find_tasks(self, keyword: str) -> TaskList:
        """Tasks whose description contains `keyword` (case-sensitive)."""
        return TaskList(t for t in self._tasks if t.contains_keyword(keyword))

    def find_tasks_by_tag(self, tag: str) -> TaskList:
        """Tasks carrying `tag`; accepts "#Work" as well as "work"."""
        wanted = normalize_tag(tag, require_marker=False)
        return TaskList(t for t in self._tasks if wanted in t.tags)

    # ---- output ----

    def serialize(self) -> list[str]:
        from .task_store import encode_task  # local import to avoid cycle

        return [encode_task(t) for t in self._tasks]

    def render(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "\n".join(f"{i}. {task}" for i, task in enumerate(self._tasks, start=1))

    def __str__(self) -> str:
        return self.render()
