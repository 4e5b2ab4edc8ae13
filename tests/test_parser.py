# tests/test_parser.py

from __future__ import annotations

from datetime import datetime

import pytest

from duke.commands.commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkDoneCommand,
)
from duke.commands.parser import is_exit, parse
from duke.errors import ParseError
from duke.tasks.task_list import TaskList
from duke.tasks.task_models import DeadlineTask, EventTask, TodoTask

DATE_ERROR = "Please provide date time in the format yyyy-MM-dd HHmm, e.g. 2021-08-04 2359"


def _error(text: str, task_list: TaskList) -> str:
    with pytest.raises(ParseError) as exc:
        parse(text, task_list)
    return exc.value.message


def test_is_exit_matches_prefix_only() -> None:
    assert is_exit("bye")
    assert is_exit("bye now")
    assert is_exit("byebye")
    assert not is_exit(" bye")
    assert not is_exit("list")


@pytest.mark.parametrize("text", ["list", "list all", "listing"])
def test_list_ignores_payload(text: str, task_list: TaskList) -> None:
    assert parse(text, task_list) == ListCommand()


def test_bye_and_help(task_list: TaskList) -> None:
    assert parse("bye", task_list) == ExitCommand()
    assert parse("bye whatever", task_list) == ExitCommand()
    assert parse("help", task_list) == HelpCommand("")
    assert parse("help   ", task_list) == HelpCommand("")
    assert parse("help  deadline ", task_list) == HelpCommand("deadline")


def test_unknown_command(task_list: TaskList) -> None:
    assert _error("hello", task_list) == "Sorry, I don't understand that command..."
    assert _error("", task_list) == "Sorry, I don't understand that command..."
    # prefixes are case-sensitive
    assert _error("LIST", task_list) == "Sorry, I don't understand that command..."


def test_todo_trims_description(task_list: TaskList) -> None:
    cmd = parse("todo   read book  ", task_list)
    assert cmd == AddCommand(TodoTask("read book", False))


@pytest.mark.parametrize("text", ["todo", "todo ", "todo \t  "])
def test_todo_empty(text: str, task_list: TaskList) -> None:
    assert _error(text, task_list) == "Todo description cannot be empty!"


def test_deadline(task_list: TaskList) -> None:
    cmd = parse("deadline return book /by 2021-08-04 2359", task_list)
    assert isinstance(cmd, AddCommand)
    assert cmd.task == DeadlineTask("return book", False, by=datetime(2021, 8, 4, 23, 59))


def test_deadline_uses_last_separator(task_list: TaskList) -> None:
    cmd = parse("deadline buy /by milk /by 2021-08-04 2359", task_list)
    assert isinstance(cmd, AddCommand)
    assert cmd.task.description == "buy /by milk"
    assert cmd.task.when == datetime(2021, 8, 4, 23, 59)


def test_deadline_errors(task_list: TaskList) -> None:
    assert _error("deadline return book", task_list) == (
        "Please indicate in this format: deadline [description] /by [due date]."
    )
    assert _error("deadline /by 2021-08-04 2359", task_list) == "Please indicate the deadline description!"
    assert _error("deadline return book /by  ", task_list) == "Please indicate the due date!"
    assert _error("deadline return book /by tomorrow", task_list) == DATE_ERROR


@pytest.mark.parametrize(
    "date_text",
    [
        "2021-8-4 2359",
        "2021-08-04 23:59",
        "2021-08-04",
        "2021-08-32 1200",
        "2021-13-01 1200",
        "2021-08-04 2460",
        "2021-08-04 2401",
        "2021-08-04 2500",
        "04-08-2021 2359",
    ],
)
def test_deadline_rejects_other_date_formats(date_text: str, task_list: TaskList) -> None:
    assert _error(f"deadline x /by {date_text}", task_list) == DATE_ERROR


@pytest.mark.parametrize(
    ("date_text", "expected"),
    [
        ("2021-02-30 1200", datetime(2021, 2, 28, 12, 0)),
        ("2020-02-31 0800", datetime(2020, 2, 29, 8, 0)),
        ("2021-04-31 2359", datetime(2021, 4, 30, 23, 59)),
    ],
)
def test_deadline_clamps_day_to_end_of_month(date_text: str, expected: datetime, task_list: TaskList) -> None:
    cmd = parse(f"deadline x /by {date_text}", task_list)
    assert isinstance(cmd, AddCommand)
    assert cmd.task.when == expected


def test_event_2400_is_next_midnight(task_list: TaskList) -> None:
    cmd = parse("event x /at 2021-08-04 2400", task_list)
    assert isinstance(cmd, AddCommand)
    assert cmd.task.when == datetime(2021, 8, 5, 0, 0)

    year_end = parse("event party /at 2021-12-31 2400", task_list)
    assert isinstance(year_end, AddCommand)
    assert year_end.task.when == datetime(2022, 1, 1, 0, 0)


def test_event(task_list: TaskList) -> None:
    cmd = parse("event project meeting /at 2021-08-06 1400", task_list)
    assert cmd == AddCommand(EventTask("project meeting", False, at=datetime(2021, 8, 6, 14, 0)))


def test_event_uses_last_separator(task_list: TaskList) -> None:
    cmd = parse("event meet /at home /at 2021-08-06 1400", task_list)
    assert isinstance(cmd, AddCommand)
    assert cmd.task.description == "meet /at home"


def test_event_errors(task_list: TaskList) -> None:
    assert _error("event party", task_list) == "Please indicate in this format: event [description] /at [due date]."
    # "/by" is not the event separator
    assert _error("event party /by 2021-08-06 1400", task_list) == (
        "Please indicate in this format: event [description] /at [due date]."
    )
    assert _error("event /at 2021-08-06 1400", task_list) == "Please indicate the event description!"
    assert _error("event party /at", task_list) == "Please indicate the event date!"
    assert _error("event party /at soon", task_list) == DATE_ERROR


def test_done(task_list: TaskList) -> None:
    assert parse("done 1", task_list) == MarkDoneCommand(0)
    assert parse("done   2 ", task_list) == MarkDoneCommand(1)


def test_done_defers_bounds_check(task_list: TaskList) -> None:
    # Two tasks in the list; index 4 is accepted here and rejected on execution.
    assert parse("done 5", task_list) == MarkDoneCommand(4)
    assert parse("done 0", task_list) == MarkDoneCommand(-1)


def test_done_errors(task_list: TaskList) -> None:
    assert _error("done", task_list) == "Please indicate a task number to mark as done!"
    assert _error("done ", task_list) == "Please indicate a task number to mark as done!"
    assert _error("done abc", task_list) == "Please indicate a valid task number to mark as done!"
    assert _error("done 1.5", task_list) == "Please indicate a valid task number to mark as done!"
    assert _error("done 1 2", task_list) == "Please indicate a valid task number to mark as done!"


def test_delete(task_list: TaskList) -> None:
    assert parse("delete 2", task_list) == DeleteCommand(1)


def test_delete_checks_bounds_at_parse_time(task_list: TaskList) -> None:
    assert _error("delete 5", task_list) == "404 Task not found"
    assert _error("delete 0", task_list) == "404 Task not found"
    assert _error("delete -1", task_list) == "404 Task not found"
    assert _error("delete 1", TaskList()) == "404 Task not found"


def test_delete_errors(task_list: TaskList) -> None:
    assert _error("delete", task_list) == "Please indicate a task number to delete!"
    assert _error("delete two", task_list) == "Please indicate a valid task number to delete!"


def test_task_numbers_must_fit_32_bits(task_list: TaskList) -> None:
    assert _error("done 99999999999", task_list) == "Please indicate a valid task number to mark as done!"
    assert _error("done 2147483648", task_list) == "Please indicate a valid task number to mark as done!"
    assert _error("done -2147483649", task_list) == "Please indicate a valid task number to mark as done!"
    assert parse("done 2147483647", task_list) == MarkDoneCommand(2147483646)

    assert _error("delete 99999999999", task_list) == "Please indicate a valid task number to delete!"
    assert _error("delete -2147483649", task_list) == "Please indicate a valid task number to delete!"
    # in range but past the end of the list
    assert _error("delete 2147483647", task_list) == "404 Task not found"


def test_find(task_list: TaskList) -> None:
    assert parse("find book", task_list) == FindCommand("book")
    assert parse("find  read book ", task_list) == FindCommand("read book")
    assert _error("find", task_list) == "Please indicate a keyword to find tasks!"
    assert _error("find   ", task_list) == "Please indicate a keyword to find tasks!"


def test_prefix_order_is_first_match(task_list: TaskList) -> None:
    # "todos" starts with "todo", "doneness" with "done"
    assert parse("todos", task_list) == AddCommand(TodoTask("s", False))
    assert _error("doneness", task_list) == "Please indicate a valid task number to mark as done!"
    assert parse("helpme", task_list) == HelpCommand("me")


def test_parse_does_not_mutate(task_list: TaskList) -> None:
    before = task_list.tasks()
    parse("todo something", task_list)
    parse("delete 1", task_list)
    parse("done 1", task_list)
    assert task_list.tasks() == before
    assert task_list.get(0).is_done is False
