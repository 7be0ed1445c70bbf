# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

COMPLETED_TOKENS = {"0": False, "1": True}


@dataclass(slots=True)
class Task:
    """
    One entry of the task list.

    Notes:
    - there is no id field: a task is addressed by its 1-based position,
      which shifts whenever an earlier task is removed.
    """

    description: str
    completed: bool = False

    @classmethod
    def from_line(cls, line: str) -> Task:
        """
        Parse one stored line: "<0|1> <description>".

        A line without a leading 0/1 token loads as an incomplete task whose
        description is the whole trimmed line.
        """
        text = line.strip()
        parts = text.split(None, 1)
        if not parts or parts[0] not in COMPLETED_TOKENS:
            return cls(description=text, completed=False)
        description = parts[1].strip() if len(parts) > 1 else ""
        return cls(description=description, completed=COMPLETED_TOKENS[parts[0]])

    def to_line(self) -> str:
        return f"{int(self.completed)} {self.description}"
