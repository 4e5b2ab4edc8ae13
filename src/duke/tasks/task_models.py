# src/duke/tasks/task_models.py

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum
from typing import ClassVar

# Wire format for both command input and storage: "2021-08-04 2359".
DATE_TIME_PATTERN = "yyyy-MM-dd HHmm"
DISPLAY_FORMAT = "%b %d %Y %H:%M"

_DATE_TIME_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2})([0-9]{2})")


def parse_date_time(text: str) -> datetime:
    """
    Parse the wire format. Raises ValueError on anything else.

    Lenient in two places:
    - a day past the end of the month becomes its last day (2021-02-30 -> 2021-02-28)
    - 2400 is midnight of the following day
    Fields outside their absolute ranges (month 13, day 32, minute 60, 2401) are errors.
    """
    m = _DATE_TIME_RE.fullmatch(text)
    if not m:
        raise ValueError(f"not in {DATE_TIME_PATTERN} format: {text!r}")

    year, month, day, hour, minute = (int(g) for g in m.groups())
    if year < 1 or not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"date out of range: {text!r}")
    if minute > 59 or hour > 24 or (hour == 24 and minute != 0):
        raise ValueError(f"time out of range: {text!r}")

    day = min(day, calendar.monthrange(year, month)[1])
    if hour == 24:
        try:
            return datetime(year, month, day) + timedelta(days=1)
        except OverflowError as e:
            raise ValueError(f"date out of range: {text!r}") from e
    return datetime(year, month, day, hour, minute)


def format_date_time(value: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d} {value.hour:02d}{value.minute:02d}"


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the one-letter marker in rendered tasks and as the
    `kind` column in storage.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskKind | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind]

    @property
    def when(self) -> datetime | None:
        return None

    def mark_as_done(self) -> None:
        self.is_done = True

    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def __str__(self) -> str:
        return f"[{self.kind.value}][{self.status_icon()}] {self.description}"


@dataclass(slots=True)
class TodoTask(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class DeadlineTask(Task):
    by: datetime | None = None

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    @property
    def when(self) -> datetime | None:
        return self.by

    def __str__(self) -> str:
        base = Task.__str__(self)
        if self.by is None:
            return base
        return f"{base} (by: {self.by.strftime(DISPLAY_FORMAT)})"


@dataclass(slots=True)
class EventTask(Task):
    at: datetime | None = None

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    @property
    def when(self) -> datetime | None:
        return self.at

    def __str__(self) -> str:
        base = Task.__str__(self)
        if self.at is None:
            return base
        return f"{base} (at: {self.at.strftime(DISPLAY_FORMAT)})"


def build_task(
    kind: TaskKind,
    description: str,
    is_done: bool = False,
    when: datetime | None = None,
) -> Task:
    """Construct the variant for `kind` (used when loading from storage)."""
    if kind is TaskKind.DEADLINE:
        return DeadlineTask(description, is_done, by=when)
    if kind is TaskKind.EVENT:
        return EventTask(description, is_done, at=when)
    return TodoTask(description, is_done)
