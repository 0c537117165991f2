# src/chatterbox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The executor depends on a Protocol rather than the concrete file store, so
tests can swap in an in-memory repo.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable copy of the whole task collection."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
