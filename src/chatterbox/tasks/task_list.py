# src/chatterbox/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

from ..core.errors import TaskNotFoundError
from .task_models import Deadline, Event, Task


class TaskList:
    """
    In-memory, ordered task collection.

    Insertion order is display order and persisted order. Indices are 0-based
    here; the parser converts from the 1-based numbers users type.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskNotFoundError(index)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def set_done(self, index: int, done: bool) -> Task:
        task = self.get(index)
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        return task

    def size(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        """Snapshot copy; mutating it does not touch the collection."""
        return list(self._tasks)

    def find_on_date(self, day: date) -> list[Task]:
        """Deadlines due on `day` and events whose day range covers it. ToDos never match."""
        found: list[Task] = []
        for task in self._tasks:
            if isinstance(task, Deadline):
                if task.by.date() == day:
                    found.append(task)
            elif isinstance(task, Event):
                if task.start.date() <= day <= task.end.date():
                    found.append(task)
        return found
