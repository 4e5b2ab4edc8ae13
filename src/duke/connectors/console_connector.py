# src/duke/connectors/console_connector.py

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable

from ..commands.commands import CommandResult, ExitCommand, execute_command
from ..commands.parser import is_exit, parse
from ..core.state import AppState
from ..errors import DukeError

logger = logging.getLogger(__name__)

PROMPT = "> "
GREETING = "Hello! I'm {name}\nWhat can I do for you?"
INTERNAL_ERROR = "Internal error while handling a command."
SAVE_ERROR = "Warning: your tasks could not be saved."

LineReader = Callable[[str], str]
LineWriter = Callable[[str], None]


def _persist(state: AppState, write: LineWriter) -> None:
    try:
        state.save()
    except sqlite3.Error:
        logger.exception("Failed to save tasks.")
        write(SAVE_ERROR)


def handle_line(state: AppState, line: str) -> CommandResult:
    """
    Run one command cycle for `line` (parse + execute).

    Raises DukeError for anything the user should see as an error message.
    """
    if is_exit(line):
        return execute_command(ExitCommand(), state.task_list)
    command = parse(line, state.task_list)
    return execute_command(command, state.task_list)


def run_console_loop(
    state: AppState,
    read_line: LineReader = input,
    write: LineWriter = print,
) -> None:
    app_name = str(getattr(state.settings, "app_name", "duke")).capitalize()
    logger.info("Console connector started (tasks=%s).", state.task_list.size())
    write(GREETING.format(name=app_name))

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        # Blank lines are skipped; anything else reaches the parser as typed.
        if not line.strip():
            continue

        try:
            result = handle_line(state, line)
        except DukeError as e:
            logger.debug("Command rejected: %s", e.message)
            write(e.message)
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            write(INTERNAL_ERROR)
            continue

        write(result.message)

        if result.mutated and state.save_on_mutation:
            _persist(state, write)

        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
