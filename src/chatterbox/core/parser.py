# src/chatterbox/core/parser.py

"""
Command interpreter: raw input line -> Command.

Pure text processing: no I/O and no access to the task collection. Every
failure is a CommandError with a message ready to show the user.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .commands import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindDateCommand,
    ListCommand,
    MarkCommand,
)
from .dates import parse_date_only, parse_flexible_datetime
from .errors import CommandError

ArgumentParser = Callable[[str], Command]

_INDEX_RE = re.compile(r"[+-]?\d+")

BY_MARKER = "/by "
FROM_MARKER = "/from "
TO_MARKER = "/to "


class CommandParser:
    """Keyword -> argument-parser registry."""

    def __init__(self) -> None:
        self._parsers: dict[str, ArgumentParser] = {}

    def register(self, keyword: str, parse_args: ArgumentParser) -> None:
        self._parsers[keyword.lower()] = parse_args

    @property
    def keywords(self) -> list[str]:
        return list(self._parsers)

    def parse(self, line: str) -> Command:
        text = line.strip()
        if not text:
            raise CommandError("Please enter a command.")

        parts = text.split(None, 1)
        keyword = parts[0].lower()
        arguments = parts[1] if len(parts) > 1 else ""

        parse_args = self._parsers.get(keyword)
        if parse_args is None:
            raise CommandError(
                "Hmm, I don't recognize that command! "
                "Try 'todo', 'deadline', 'event', 'list', or 'finddate'!"
            )
        return parse_args(arguments)


def _parse_task_number(arguments: str, verb: str) -> int:
    """1-based number typed by the user -> 0-based index. Range is checked on execution."""
    raw = arguments.strip()
    if not raw:
        raise CommandError(f"Please specify which task to {verb}.")
    if not _INDEX_RE.fullmatch(raw):
        raise CommandError("Please provide a valid task number.")
    return int(raw) - 1


def parse_exit(arguments: str) -> Command:
    return ExitCommand()


def parse_list(arguments: str) -> Command:
    return ListCommand()


def parse_mark(arguments: str) -> Command:
    return MarkCommand(_parse_task_number(arguments, "mark"), done=True)


def parse_unmark(arguments: str) -> Command:
    return MarkCommand(_parse_task_number(arguments, "unmark"), done=False)


def parse_delete(arguments: str) -> Command:
    return DeleteCommand(_parse_task_number(arguments, "delete"))


def parse_todo(arguments: str) -> Command:
    description = arguments.strip()
    if not description:
        raise CommandError("The description of a todo cannot be empty.")
    return AddTodoCommand(description)


def parse_deadline(arguments: str) -> Command:
    empty_description = "The description of a deadline cannot be empty."
    if not arguments.strip():
        raise CommandError(empty_description)

    description, sep, by_raw = arguments.partition(BY_MARKER)
    if not sep:
        raise CommandError("Please specify the deadline with /by")

    description = description.strip()
    by_raw = by_raw.strip()
    if not description:
        raise CommandError(empty_description)
    if not by_raw:
        raise CommandError("The deadline date/time cannot be empty.")

    return AddDeadlineCommand(description, parse_flexible_datetime(by_raw))


def parse_event(arguments: str) -> Command:
    empty_description = "The description of an event cannot be empty."
    missing_markers = "Please specify the event time with /from and /to"
    if not arguments.strip():
        raise CommandError(empty_description)

    description, sep, rest = arguments.partition(FROM_MARKER)
    if not sep:
        raise CommandError(missing_markers)
    # /to is searched for only after /from
    start_raw, sep, end_raw = rest.partition(TO_MARKER)
    if not sep:
        raise CommandError(missing_markers)

    description = description.strip()
    start_raw = start_raw.strip()
    end_raw = end_raw.strip()
    if not description:
        raise CommandError(empty_description)
    if not start_raw or not end_raw:
        raise CommandError("The event time cannot be empty.")

    start = parse_flexible_datetime(start_raw)
    end = parse_flexible_datetime(end_raw)
    if end < start:
        raise CommandError("The 'to' time must be after the 'from' time.")

    return AddEventCommand(description, start, end)


def parse_find_date(arguments: str) -> Command:
    raw = arguments.strip()
    if not raw:
        raise CommandError("Please specify a date (yyyy-MM-dd).")
    return FindDateCommand(parse_date_only(raw).date())


parser = CommandParser()
parser.register("bye", parse_exit)
parser.register("list", parse_list)
parser.register("mark", parse_mark)
parser.register("unmark", parse_unmark)
parser.register("delete", parse_delete)
parser.register("todo", parse_todo)
parser.register("deadline", parse_deadline)
parser.register("event", parse_event)
parser.register("finddate", parse_find_date)


def parse(line: str) -> Command:
    return parser.parse(line)
