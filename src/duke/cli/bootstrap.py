# src/duke/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- opens the task store and loads the saved list,
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_db_path)
    task_list = TaskList(store.load_tasks())

    return AppState(
        settings=settings,
        task_list=task_list,
        task_store=store,
        save_on_mutation=bool(getattr(settings, "save_on_mutation", True)),
    )
