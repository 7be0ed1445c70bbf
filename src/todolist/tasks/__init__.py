# src/todolist/tasks/__init__.py

from .task_models import Task
from .task_store import TaskStore

__all__ = ["Task", "TaskStore"]
