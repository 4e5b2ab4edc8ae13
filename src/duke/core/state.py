# src/duke/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a command cycle needs, created once by the bootstrap.

    There is exactly one TaskList per process and it has no locking: a host
    that shares this state between threads must serialize command cycles.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_list: TaskList
    task_store: TaskStore
    save_on_mutation: bool = True

    def save(self) -> None:
        self.task_store.save_tasks(self.task_list)
