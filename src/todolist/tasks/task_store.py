# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .task_models import COMPLETED_TOKENS, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task list persisted as one line per task.

    The whole file is rewritten on every save. There is no locking and no
    atomic replace: concurrent invocations against the same file race and
    the last writer wins.
    """

    def __init__(self, path: str | Path = "todo.txt") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- persistence ----

    def load(self) -> bool:
        """
        Replace the in-memory list with the file contents.

        Returns False (and keeps the current list) when the file is missing
        or cannot be read.
        """
        try:
            with self._path.open("r", encoding="utf-8", errors="surrogateescape") as f:
                lines = list(f)
        except OSError:
            logger.debug("Cannot read task file %s", self._path, exc_info=True)
            return False

        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            if line.split(None, 1)[0] not in COMPLETED_TOKENS:
                logger.info("Malformed line %d in %s; loaded as open task.", lineno, self._path)
            tasks.append(Task.from_line(line))

        self._tasks = tasks
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return True

    def save(self) -> bool:
        """Truncate and rewrite the file. Returns False if it is not writable."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", errors="surrogateescape") as f:
                for task in self._tasks:
                    f.write(task.to_line() + "\n")
        except OSError:
            logger.debug("Cannot write task file %s", self._path, exc_info=True)
            return False

        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)
        return True

    # ---- operations ----

    def _valid(self, index: int) -> bool:
        return 1 <= index <= len(self._tasks)

    def add(self, description: str) -> Task:
        task = Task(description=description)
        self._tasks.append(task)
        return task

    def remove(self, index: int) -> bool:
        """Delete the task at 1-based `index`; False if out of range."""
        if not self._valid(index):
            return False
        del self._tasks[index - 1]
        return True

    def mark_done(self, index: int) -> bool:
        """Mark the task at 1-based `index` completed; False if out of range."""
        if not self._valid(index):
            return False
        self._tasks[index - 1].completed = True
        return True

    def reset(self) -> None:
        self._tasks.clear()
