# src/chatterbox/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, TypeAlias

# Persisted form: unambiguous, 24h, zero-padded (e.g. "2023-06-06 1800").
FILE_DATE_FORMAT = "%Y-%m-%d %H%M"
_FILE_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")

# Month names are spelled out here so rendering does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TaskType(StrEnum):
    """Task variant discriminator; the value is the code used in the task file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_code(cls, raw: str) -> TaskType:
        try:
            return cls(raw.strip())
        except ValueError:
            raise ValueError(f"Unknown task type: {raw!r}") from None


def format_display_date(dt: datetime) -> str:
    """Render as 'Jun 06 2023, 6:00 pm'."""
    hour12 = dt.hour % 12 or 12
    meridiem = "am" if dt.hour < 12 else "pm"
    return f"{_MONTHS[dt.month - 1]} {dt.day:02d} {dt.year}, {hour12}:{dt.minute:02d} {meridiem}"


def format_file_date(dt: datetime) -> str:
    return dt.strftime(FILE_DATE_FORMAT)


def parse_file_date(raw: str) -> datetime:
    text = raw.strip()
    if not _FILE_DATE_SHAPE.fullmatch(text):
        raise ValueError(f"Not a yyyy-MM-dd HHmm date: {text!r}")
    return datetime.strptime(text, FILE_DATE_FORMAT)


class _TaskBehavior:
    """Shared behaviour of all variants. Only `done` is ever mutated."""

    __slots__ = ()

    kind: ClassVar[TaskType]
    description: str
    done: bool

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "[X]" if self.done else "[ ]"

    @property
    def type_icon(self) -> str:
        return f"[{self.kind.value}]"

    def __str__(self) -> str:
        return format_task(self)  # type: ignore[arg-type]


@dataclass(slots=True)
class ToDo(_TaskBehavior):
    description: str
    done: bool = False

    kind: ClassVar[TaskType] = TaskType.TODO


@dataclass(slots=True)
class Deadline(_TaskBehavior):
    description: str
    by: datetime
    done: bool = False

    kind: ClassVar[TaskType] = TaskType.DEADLINE


@dataclass(slots=True)
class Event(_TaskBehavior):
    # end >= start is checked when the command is parsed, not here: legacy
    # records loaded from disk may violate it and are kept as-is.
    description: str
    start: datetime
    end: datetime
    done: bool = False

    kind: ClassVar[TaskType] = TaskType.EVENT


Task: TypeAlias = ToDo | Deadline | Event


def format_task(task: Task) -> str:
    """
    Display form used by the console, e.g.:
      [T][ ] read book
      [D][X] return book (by: Jun 06 2023, 6:00 pm)
      [E][ ] trip (from: Aug 05 2023, 2:00 pm to: Aug 06 2023, 4:00 pm)
    """
    head = f"{task.type_icon}{task.status_icon} {task.description}"
    if isinstance(task, ToDo):
        return head
    if isinstance(task, Deadline):
        return f"{head} (by: {format_display_date(task.by)})"
    if isinstance(task, Event):
        return (
            f"{head} (from: {format_display_date(task.start)}"
            f" to: {format_display_date(task.end)})"
        )
    raise TypeError(f"Not a task: {task!r}")
