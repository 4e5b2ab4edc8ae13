# src/duke/commands/help.py

from __future__ import annotations

from ..tasks.task_models import DATE_TIME_PATTERN

# Ordered like the parser's prefix checks.
TOPICS: dict[str, tuple[str, str]] = {
    "list": ("list", "Show all tasks."),
    "done": ("done [task number]", "Mark a task as done."),
    "todo": ("todo [description]", "Add a todo."),
    "deadline": (
        f"deadline [description] /by [{DATE_TIME_PATTERN}]",
        "Add a task with a due date.",
    ),
    "event": (
        f"event [description] /at [{DATE_TIME_PATTERN}]",
        "Add an event happening at a date.",
    ),
    "delete": ("delete [task number]", "Remove a task."),
    "find": ("find [keyword]", "Show tasks whose description contains the keyword."),
    "bye": ("bye", "Save and quit."),
    "help": ("help [command]", "Show this overview or the usage of one command."),
}


def build_overview() -> str:
    lines = ["Available commands:"]
    for usage, summary in TOPICS.values():
        lines.append(f"  {usage} - {summary}")
    return "\n".join(lines)


def help_text(topic: str) -> str:
    topic = topic.strip()
    if not topic:
        return build_overview()

    entry = TOPICS.get(topic.lower())
    if entry is None:
        return f"Sorry, there is no help for '{topic}'. Type help to list available commands."

    usage, summary = entry
    return f"{summary}\nUsage: {usage}"
