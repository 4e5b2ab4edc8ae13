# src/duke/errors.py

"""
Error taxonomy.

Every error that reaches the console loop carries a message that is shown
to the user verbatim.
"""

from __future__ import annotations

TASK_NOT_FOUND = "404 Task not found!"


class DukeError(Exception):
    """Base class for user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(DukeError):
    """Command text is malformed or not recognized."""


class TaskIndexError(DukeError, IndexError):
    """Index outside the current task list bounds."""

    def __init__(self, index: int, size: int, message: str = TASK_NOT_FOUND) -> None:
        super().__init__(message)
        self.index = index
        self.size = size
