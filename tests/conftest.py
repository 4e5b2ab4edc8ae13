# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from duke.core.state import AppState
from duke.tasks.task_list import TaskList
from duke.tasks.task_models import DeadlineTask, EventTask, TodoTask
from duke.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="duke",
        log_level="WARNING",
        log_to_file=False,
        save_on_mutation=True,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
    )


@pytest.fixture()
def task_list() -> TaskList:
    """Two tasks: an open todo and a done deadline."""
    return TaskList(
        [
            TodoTask("read book", False),
            DeadlineTask("return book", True, by=datetime(2021, 8, 4, 23, 59)),
        ]
    )


@pytest.fixture()
def mixed_tasks() -> list:
    return [
        TodoTask("read book", False),
        DeadlineTask("return book", True, by=datetime(2021, 8, 4, 23, 59)),
        EventTask("project meeting", False, at=datetime(2021, 8, 6, 14, 0)),
    ]


@pytest.fixture()
def state(settings: SimpleNamespace, task_list: TaskList) -> AppState:
    """AppState with a real SQLite TaskStore in tmp_path."""
    return AppState(
        settings=settings,
        task_list=task_list,
        task_store=TaskStore(settings.tasks_db_path),
        save_on_mutation=True,
    )
