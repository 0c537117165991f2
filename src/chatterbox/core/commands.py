# src/chatterbox/core/commands.py

"""
Command and outcome variants.

Commands carry only validated, typed data. Outcomes carry what the display
layer needs to render a result; neither has behaviour of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeAlias

from ..tasks.task_models import Task


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int  # 0-based
    done: bool


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int  # 0-based


@dataclass(frozen=True, slots=True)
class AddTodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadlineCommand:
    description: str
    by: datetime


@dataclass(frozen=True, slots=True)
class AddEventCommand:
    description: str
    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class FindDateCommand:
    day: date


Command: TypeAlias = (
    ExitCommand
    | ListCommand
    | MarkCommand
    | DeleteCommand
    | AddTodoCommand
    | AddDeadlineCommand
    | AddEventCommand
    | FindDateCommand
)



# ---- outcomes ----


@dataclass(frozen=True, slots=True)
class Farewell:
    pass


@dataclass(frozen=True, slots=True)
class Listing:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class TaskAdded:
    task: Task
    total: int


@dataclass(frozen=True, slots=True)
class TaskRemoved:
    task: Task
    total: int


@dataclass(frozen=True, slots=True)
class TaskMarked:
    task: Task
    done: bool


@dataclass(frozen=True, slots=True)
class DateMatches:
    day: date
    tasks: tuple[Task, ...]


Outcome: TypeAlias = Farewell | Listing | TaskAdded | TaskRemoved | TaskMarked | DateMatches
