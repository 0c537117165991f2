# src/chatterbox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings, builds the
file store and loads the task collection into an AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store=None) -> AppState:
    """
    Create AppState from the provided settings.

    A store that cannot be read degrades to an empty collection; the session
    still starts and later saves retry the same path.
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = TaskStore(settings.tasks_file)

    try:
        tasks = TaskList(store.load())
    except StorageError as e:
        logger.error("%s", e)
        tasks = TaskList()

    return AppState(settings=settings, tasks=tasks, store=store)
