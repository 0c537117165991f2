# src/chatterbox/tasks/__init__.py

from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskType, ToDo
from .task_store import TaskStore

__all__ = ["Deadline", "Event", "Task", "TaskList", "TaskStore", "TaskType", "ToDo"]
