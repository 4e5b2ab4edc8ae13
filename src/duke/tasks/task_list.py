# src/duke/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered in-memory task list.

    Indices are zero-based here; user-facing messages add 1.

    Thread-safety:
    - none; the console loop is the only writer
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> None:
        # Negative indices must not wrap around like list indexing does.
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    # ---- public API ----

    def size(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added index=%s kind=%s", len(self._tasks) - 1, task.kind)

    def delete(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%s kind=%s", index, task.kind)
        return task

    def mark_done(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        task.mark_as_done()
        logger.debug("Task marked done index=%s", index)
        return task

    def find(self, keyword: str) -> Iterator[Task]:
        """Yield tasks whose description contains `keyword` (case-sensitive)."""
        return (t for t in list(self._tasks) if keyword in t.description)
