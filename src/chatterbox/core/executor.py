# src/chatterbox/core/executor.py

from __future__ import annotations

import logging

from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, ToDo
from .commands import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    Command,
    DateMatches,
    DeleteCommand,
    ExitCommand,
    Farewell,
    FindDateCommand,
    Listing,
    ListCommand,
    MarkCommand,
    Outcome,
    TaskAdded,
    TaskMarked,
    TaskRemoved,
)
from .errors import StorageError
from .ports import TaskRepo

logger = logging.getLogger(__name__)


def _new_task(command: AddTodoCommand | AddDeadlineCommand | AddEventCommand) -> Task:
    if isinstance(command, AddTodoCommand):
        return ToDo(command.description)
    if isinstance(command, AddDeadlineCommand):
        return Deadline(command.description, command.by)
    return Event(command.description, command.start, command.end)


def apply(command: Command, tasks: TaskList) -> Outcome:
    """
    Apply a command to the collection without touching storage.

    Raises TaskNotFoundError (collection unchanged) for a bad index.
    """
    if isinstance(command, ExitCommand):
        return Farewell()

    if isinstance(command, ListCommand):
        return Listing(tuple(tasks))

    if isinstance(command, FindDateCommand):
        return DateMatches(command.day, tuple(tasks.find_on_date(command.day)))

    if isinstance(command, MarkCommand):
        task = tasks.set_done(command.index, command.done)
        return TaskMarked(task, command.done)

    if isinstance(command, DeleteCommand):
        task = tasks.remove(command.index)
        return TaskRemoved(task, tasks.size())

    if isinstance(command, (AddTodoCommand, AddDeadlineCommand, AddEventCommand)):
        task = _new_task(command)
        tasks.add(task)
        return TaskAdded(task, tasks.size())

    raise TypeError(f"Unknown command: {command!r}")


def changes_state(outcome: Outcome) -> bool:
    return isinstance(outcome, (TaskAdded, TaskRemoved, TaskMarked))


def execute(command: Command, tasks: TaskList, store: TaskRepo) -> Outcome:
    """
    Apply `command`, then persist the whole collection if it changed.

    A failed save raises StorageError with `outcome` set, so the caller can
    still report what happened in memory. The change is not rolled back.
    """
    outcome = apply(command, tasks)
    if not changes_state(outcome):
        return outcome

    logger.debug("Saving after %s", type(command).__name__)
    try:
        store.save(tasks.all())
    except StorageError as e:
        logger.error("Save failed after %s: %s", type(command).__name__, e)
        e.outcome = outcome
        raise
    return outcome
