# src/duke/commands/commands.py

"""
Command values and their execution.

Commands are immutable values produced by the parser. `execute_command`
applies one of them to the task list and returns a CommandResult; it is the
only place that mutates the list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import DukeError, TaskIndexError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .help import help_text

logger = logging.getLogger(__name__)

EXIT_MESSAGE = "Bye. Hope to see you again soon!"


@dataclass(frozen=True, slots=True)
class AddCommand:
    task: Task


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class MarkDoneCommand:
    index: int


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class HelpCommand:
    topic: str = ""


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


Command = (
    AddCommand
    | DeleteCommand
    | MarkDoneCommand
    | ListCommand
    | FindCommand
    | HelpCommand
    | ExitCommand
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str
    mutated: bool = False
    is_exit: bool = False


def _count_line(task_list: TaskList) -> str:
    n = task_list.size()
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{i}.{t}" for i, t in enumerate(tasks, start=1)]


def _add(command: AddCommand, task_list: TaskList) -> CommandResult:
    task_list.add(command.task)
    return CommandResult(
        f"Got it. I've added this task:\n  {command.task}\n{_count_line(task_list)}",
        mutated=True,
    )


def _delete(command: DeleteCommand, task_list: TaskList) -> CommandResult:
    try:
        task = task_list.delete(command.index)
    except TaskIndexError as e:
        raise DukeError("404 Task not found") from e
    return CommandResult(
        f"Noted. I've removed this task:\n  {task}\n{_count_line(task_list)}",
        mutated=True,
    )


def _mark_done(command: MarkDoneCommand, task_list: TaskList) -> CommandResult:
    try:
        task = task_list.mark_done(command.index)
    except TaskIndexError as e:
        raise DukeError("404 Task not found!") from e
    return CommandResult(f"Nice! I've marked this task as done:\n  {task}", mutated=True)


def _list(command: ListCommand, task_list: TaskList) -> CommandResult:
    tasks = task_list.tasks()
    if not tasks:
        return CommandResult("You have no tasks in your list.")
    return CommandResult("\n".join(["Here are the tasks in your list:", *_numbered(tasks)]))


def _find(command: FindCommand, task_list: TaskList) -> CommandResult:
    matches = list(task_list.find(command.keyword))
    if not matches:
        return CommandResult("No matching tasks found.")
    return CommandResult("\n".join(["Here are the matching tasks in your list:", *_numbered(matches)]))


def _help(command: HelpCommand, task_list: TaskList) -> CommandResult:
    return CommandResult(help_text(command.topic))


def _exit(command: ExitCommand, task_list: TaskList) -> CommandResult:
    return CommandResult(EXIT_MESSAGE, is_exit=True)


_HANDLERS = {
    AddCommand: _add,
    DeleteCommand: _delete,
    MarkDoneCommand: _mark_done,
    ListCommand: _list,
    FindCommand: _find,
    HelpCommand: _help,
    ExitCommand: _exit,
}


def execute_command(command: Command, task_list: TaskList) -> CommandResult:
    """
    Apply `command` to `task_list`.

    Raises DukeError when the command cannot be applied (e.g. a `done` index
    that turns out to be out of range).
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command: {command!r}")
    logger.debug("Executing %s", type(command).__name__)
    return handler(command, task_list)  # type: ignore[arg-type]
