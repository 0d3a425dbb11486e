# src/taskman/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_CREATION_DATE = "2025-11-14"


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The value is the literal text written to the tasks file.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def from_text(cls, raw: str | None) -> TaskStatus:
        # Anything but an exact "Completed" degrades to pending.
        if raw == cls.COMPLETED.value:
            return cls.COMPLETED
        return cls.PENDING


class TaskFilter(StrEnum):
    ALL = "All"
    PENDING = "Pending"
    COMPLETED = "Completed"

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ALL:
            return True
        return task.status.value == self.value


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus = TaskStatus.PENDING
    date: str = DEFAULT_CREATION_DATE

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED
