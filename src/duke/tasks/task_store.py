# src/duke/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterable
from pathlib import Path

from .task_models import (
    Task,
    TaskKind,
    build_task,
    format_date_time,
    parse_date_time,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite persistence for the task list.

    The list is small and ordered, so a save rewrites the whole table in one
    transaction; `position` keeps the user-visible order.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    position INTEGER PRIMARY KEY,
                    kind TEXT NOT NULL DEFAULT 'T',
                    description TEXT NOT NULL,
                    is_done INTEGER NOT NULL DEFAULT 0,
                    at TEXT
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("kind", "TEXT NOT NULL DEFAULT 'T'")
            add_col("is_done", "INTEGER NOT NULL DEFAULT 0")
            add_col("at", "TEXT")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _task_to_row(position: int, task: Task) -> tuple[int, str, str, int, str | None]:
        when = task.when
        return (
            position,
            task.kind.value,
            task.description,
            1 if task.is_done else 0,
            format_date_time(when) if when is not None else None,
        )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task | None:
        kind = TaskKind.from_db(row["kind"])
        if kind is None:
            logger.warning("Skipping stored task position=%s: unknown kind %r", row["position"], row["kind"])
            return None

        when = None
        if kind is not TaskKind.TODO:
            try:
                when = parse_date_time(str(row["at"] or ""))
            except ValueError:
                logger.warning("Skipping stored task position=%s: bad date %r", row["position"], row["at"])
                return None

        return build_task(kind, str(row["description"] or ""), bool(row["is_done"]), when)

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def load_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT * FROM tasks ORDER BY position ASC")
            tasks = [t for t in (self._row_to_task(r) for r in cur.fetchall()) if t is not None]
        finally:
            conn.close()
        logger.info("Loaded %d tasks from %s", len(tasks), self._db_path)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        rows = [self._task_to_row(i, t) for i, t in enumerate(tasks)]
        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    "INSERT INTO tasks(position, kind, description, is_done, at) VALUES (?, ?, ?, ?, ?)",
                    rows,
                )
            logger.debug("Saved %d tasks to %s", len(rows), self._db_path)
        finally:
            conn.close()
