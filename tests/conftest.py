# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from chatterbox.core.state import AppState
from chatterbox.tasks.task_list import TaskList
from chatterbox.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    A SimpleNamespace rather than the real Settings keeps tests independent of
    the process environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Chatterbox",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_file=data_dir / "chatterbox.txt",
        log_file=data_dir / "chatterbox.log",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState backed by a real file store under tmp_path."""
    return AppState(settings=settings, tasks=TaskList(), store=store)
