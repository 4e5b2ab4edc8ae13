# src/duke/commands/parser.py

"""
Raw text -> command value.

Dispatch is by literal prefix, checked in a fixed order (first match wins),
so "listing" is a list command and "todos" adds a todo named "s".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from ..errors import ParseError
from ..tasks.task_list import TaskList
from ..tasks.task_models import DeadlineTask, EventTask, TodoTask, parse_date_time
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkDoneCommand,
)

logger = logging.getLogger(__name__)

EXIT_PREFIX = "bye"
LIST_PREFIX = "list"
TODO_PREFIX = "todo"
DEADLINE_PREFIX = "deadline"
EVENT_PREFIX = "event"
DONE_PREFIX = "done"
DELETE_PREFIX = "delete"
FIND_PREFIX = "find"
HELP_PREFIX = "help"

DEADLINE_SEPARATOR = "/by"
EVENT_SEPARATOR = "/at"

UNKNOWN_COMMAND = "Sorry, I don't understand that command..."
DATE_TIME_ERROR = "Please provide date time in the format yyyy-MM-dd HHmm, e.g. 2021-08-04 2359"

_INT_RE = re.compile(r"[+-]?[0-9]+")
# Task numbers are 32-bit signed; anything wider is not a number at all.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def is_exit(text: str) -> bool:
    return text.startswith(EXIT_PREFIX)


def _payload(text: str, prefix: str) -> str:
    return text[len(prefix) :].strip()


def _task_number(payload: str, *, empty_msg: str, invalid_msg: str) -> int:
    """1-based task number in `payload` -> zero-based index."""
    if not payload:
        raise ParseError(empty_msg)
    if not _INT_RE.fullmatch(payload):
        raise ParseError(invalid_msg)
    number = int(payload)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ParseError(invalid_msg)
    return number - 1


def _split_dated(
    payload: str,
    separator: str,
    usage: str,
    empty_content_msg: str,
    empty_date_msg: str,
) -> tuple[str, datetime]:
    # Search from the right so "/by" inside the description is kept.
    idx = payload.rfind(separator)
    if idx < 0:
        raise ParseError(f"Please indicate in this format: {usage} [description] {separator} [due date].")

    content = payload[:idx].strip()
    date_text = payload[idx + len(separator) :].strip()
    if not content:
        raise ParseError(empty_content_msg)
    if not date_text:
        raise ParseError(empty_date_msg)

    try:
        when = parse_date_time(date_text)
    except ValueError as e:
        raise ParseError(DATE_TIME_ERROR) from e
    return content, when


def _parse_list(text: str, task_list: TaskList) -> Command:
    return ListCommand()


def _parse_done(text: str, task_list: TaskList) -> Command:
    # Bounds are checked when the command runs, not here.
    index = _task_number(
        _payload(text, DONE_PREFIX),
        empty_msg="Please indicate a task number to mark as done!",
        invalid_msg="Please indicate a valid task number to mark as done!",
    )
    return MarkDoneCommand(index)


def _parse_todo(text: str, task_list: TaskList) -> Command:
    payload = _payload(text, TODO_PREFIX)
    if not payload:
        raise ParseError("Todo description cannot be empty!")
    return AddCommand(TodoTask(payload, False))


def _parse_deadline(text: str, task_list: TaskList) -> Command:
    content, by = _split_dated(
        _payload(text, DEADLINE_PREFIX),
        DEADLINE_SEPARATOR,
        DEADLINE_PREFIX,
        "Please indicate the deadline description!",
        "Please indicate the due date!",
    )
    return AddCommand(DeadlineTask(content, False, by=by))


def _parse_event(text: str, task_list: TaskList) -> Command:
    content, at = _split_dated(
        _payload(text, EVENT_PREFIX),
        EVENT_SEPARATOR,
        EVENT_PREFIX,
        "Please indicate the event description!",
        "Please indicate the event date!",
    )
    return AddCommand(EventTask(content, False, at=at))


def _parse_delete(text: str, task_list: TaskList) -> Command:
    index = _task_number(
        _payload(text, DELETE_PREFIX),
        empty_msg="Please indicate a task number to delete!",
        invalid_msg="Please indicate a valid task number to delete!",
    )
    # Unlike done, delete checks bounds against the live list right away.
    if not 0 <= index < task_list.size():
        raise ParseError("404 Task not found")
    return DeleteCommand(index)


def _parse_find(text: str, task_list: TaskList) -> Command:
    payload = _payload(text, FIND_PREFIX)
    if not payload:
        raise ParseError("Please indicate a keyword to find tasks!")
    return FindCommand(payload)


def _parse_exit(text: str, task_list: TaskList) -> Command:
    return ExitCommand()


def _parse_help(text: str, task_list: TaskList) -> Command:
    return HelpCommand(_payload(text, HELP_PREFIX))


_DISPATCH: tuple[tuple[str, Callable[[str, TaskList], Command]], ...] = (
    (LIST_PREFIX, _parse_list),
    (DONE_PREFIX, _parse_done),
    (TODO_PREFIX, _parse_todo),
    (DEADLINE_PREFIX, _parse_deadline),
    (EVENT_PREFIX, _parse_event),
    (DELETE_PREFIX, _parse_delete),
    (FIND_PREFIX, _parse_find),
    (EXIT_PREFIX, _parse_exit),
    (HELP_PREFIX, _parse_help),
)


def parse(text: str, task_list: TaskList) -> Command:
    """
    Parse one line of user input.

    `task_list` is the live list; only `delete` consults it.
    Raises ParseError with a user-facing message.
    """
    for prefix, handler in _DISPATCH:
        if text.startswith(prefix):
            command = handler(text, task_list)
            logger.debug("Parsed %r as %s", text, type(command).__name__)
            return command
    raise ParseError(UNKNOWN_COMMAND)
