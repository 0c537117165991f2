# src/chatterbox/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so connectors don't read config globals.
    settings: object

    tasks: TaskList
    store: TaskRepo
