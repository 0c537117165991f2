# src/chatterbox/core/errors.py

"""
Exception hierarchy.

Every error the user can see carries a ready-to-print message; the console
connector prints str(err) and keeps the session alive.
"""

from __future__ import annotations


class ChatterboxError(Exception):
    """Base class for all user-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CommandError(ChatterboxError):
    """Bad syntax, missing argument or a command that cannot be applied."""


class DateParseError(CommandError):
    """A date string matched none of the accepted formats."""

    def __init__(self, message: str, accepted_formats: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.accepted_formats = accepted_formats


class TaskNotFoundError(CommandError):
    def __init__(self, index: int) -> None:
        # index is 0-based; users count from 1
        super().__init__(f"Task number {index + 1} does not exist.")
        self.index = index


class StorageError(ChatterboxError):
    """
    I/O failure while reading or writing the task file.

    When raised by a save that followed a successful change, `outcome` holds
    the result of that change.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.outcome: object | None = None
