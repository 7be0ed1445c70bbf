# src/todolist/cli/formatting.py

"""User-facing text. Everything printed to stdout is built here."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

NO_TASKS = "No tasks available."
INVALID_INDEX = "Invalid task index."
INVALID_COMMAND = "Invalid command."
NO_SAVED_TASKS = "No saved tasks found."


def format_task(position: int, task: Task) -> str:
    mark = "X" if task.completed else " "
    return f"{position}. [{mark}] {task.description}"


def format_task_list(tasks: Iterable[Task]) -> str:
    lines = [format_task(i, t) for i, t in enumerate(tasks, start=1)]
    if not lines:
        return NO_TASKS
    return "\n".join(lines)
