# src/chatterbox/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..core.errors import StorageError
from .task_models import (
    Deadline,
    Event,
    Task,
    TaskType,
    ToDo,
    format_file_date,
    parse_file_date,
)

logger = logging.getLogger(__name__)

SEPARATOR = " | "


class RecordError(ValueError):
    """A single line of the task file could not be turned into a task."""


def format_record(task: Task) -> str:
    """Serialize one task as `type | done | description [| date ...]`."""
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    if isinstance(task, Deadline):
        fields.append(format_file_date(task.by))
    elif isinstance(task, Event):
        fields.extend((format_file_date(task.start), format_file_date(task.end)))
    elif not isinstance(task, ToDo):
        raise TypeError(f"Not a task: {task!r}")
    return SEPARATOR.join(fields)


def parse_record(line: str) -> Task:
    """
    Parse one record line.

    Raises RecordError for unknown type codes, missing fields and dates that do
    not match the file date format. Event chronology is not re-checked.
    """
    parts = [p.strip() for p in line.split(SEPARATOR)]
    if len(parts) < 3:
        raise RecordError(f"Invalid format: expected at least 3 fields, got {len(parts)}")

    try:
        kind = TaskType.from_code(parts[0])
    except ValueError as e:
        raise RecordError(str(e)) from None

    done = parts[1] == "1"
    description = parts[2]

    if kind is TaskType.TODO:
        return ToDo(description, done=done)

    if kind is TaskType.DEADLINE:
        if len(parts) < 4:
            raise RecordError("Deadline missing 'by' field")
        return Deadline(description, _record_date(parts[3]), done=done)

    if len(parts) < 5:
        raise RecordError("Event missing 'from' or 'to' field")
    return Event(description, _record_date(parts[3]), _record_date(parts[4]), done=done)


def _record_date(raw: str) -> datetime:
    try:
        return parse_file_date(raw)
    except ValueError:
        raise RecordError(f"Invalid date format: {raw!r}") from None


class TaskStore:
    """
    Flat-file task store: one record per line, rewritten in full on every save.

    A corrupted line never fails the whole load; it is logged and skipped.
    """

    def __init__(self, path: str | Path = "data/chatterbox.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_dir(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[Task]:
        try:
            self._ensure_dir()
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
                return []
            # records end at \n only (\r\n and \r are folded into it on read);
            # descriptions may contain \x0c, \x85 or \u2028
            with self._path.open("r", encoding="utf-8") as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error loading tasks: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(parse_record(line))
            except RecordError as e:
                logger.warning(
                    "Skipping corrupted line %d in %s: %r (%s)", lineno, self._path, line, e
                )

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._ensure_dir()
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                count = 0
                for task in tasks:
                    f.write(format_record(task) + "\n")
                    count += 1
            os.replace(tmp, self._path)
        except (OSError, UnicodeEncodeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Error saving tasks: {e}") from e

        logger.debug("Saved %d tasks to %s", count, self._path)
