# src/taskman/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .task_models import DEFAULT_CREATION_DATE, Task, TaskFilter, TaskStatus

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
FIELD_COUNT = 3


class InvalidIndexError(IndexError):
    """A user-supplied position is not a number or falls outside [1, size]."""

    def __init__(self, position: int | str, size: int | None = None) -> None:
        detail = f" (have {size} tasks)" if size is not None else ""
        super().__init__(f"Invalid task number {position!r}{detail}")
        self.position = position
        self.size = size


# ---- file format ----


def parse_task_line(line: str) -> Task | None:
    """
    Parse one `status|description|date` line.

    Returns None when the line does not split into exactly three fields.
    Description and date are kept verbatim.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEP)
    if len(parts) != FIELD_COUNT:
        return None
    status, description, date = parts
    return Task(description=description, status=TaskStatus.from_text(status), date=date)


def format_task_line(task: Task) -> str:
    return f"{task.status.value}{FIELD_SEP}{task.description}{FIELD_SEP}{task.date}\n"


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read tasks from `path`.

    A missing file is an empty collection. Other OSErrors propagate.
    Lines split on LF only, and each is decoded on its own: a line that is
    not valid UTF-8 is skipped like any other malformed record.
    """
    path = Path(path)
    tasks: list[Task] = []
    try:
        with open(path, "rb") as f:
            for raw in f:
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    continue
                task = parse_task_line(line)
                if task is not None:
                    tasks.append(task)
    except FileNotFoundError:
        logger.info("Tasks file %s not found, starting empty.", path)
        return []
    return tasks


def save_tasks(path: str | Path, tasks: list[Task]) -> None:
    """Rewrite `path` with one line per task (truncates prior content)."""
    with open(Path(path), "w", encoding="utf-8", newline="\n") as f:
        for task in tasks:
            f.write(format_task_line(task))


def parse_position(raw: str) -> int:
    """Turn user input into a 1-based position (bounds are not checked here)."""
    text = raw.strip()
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidIndexError(text)
    return int(text)


# ---- collection ----


class TaskStore:
    """
    Ordered in-memory task collection bound to a tasks file.

    The file is touched only by load() and save(); every other method mutates
    or reads the list in memory. Positions are 1-based and always refer to the
    full collection, including in filter() and search() results.
    """

    def __init__(
        self,
        path: str | Path = "tasks.txt",
        tasks: list[Task] | None = None,
        *,
        default_date: str = DEFAULT_CREATION_DATE,
    ) -> None:
        self.path = Path(path)
        self.tasks: list[Task] = list(tasks) if tasks else []
        self.default_date = default_date

    @classmethod
    def load(cls, path: str | Path, *, default_date: str = DEFAULT_CREATION_DATE) -> TaskStore:
        store = cls(path, load_tasks(path), default_date=default_date)
        logger.info("TaskStore loaded path=%s total=%s", store.path, len(store))
        return store

    def save(self) -> None:
        save_tasks(self.path, self.tasks)
        logger.info("TaskStore saved path=%s total=%s", self.path, len(self))

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def _check_position(self, position: int) -> int:
        if position < 1 or position > len(self.tasks):
            raise InvalidIndexError(position, len(self.tasks))
        return position - 1

    # ---- mutations ----

    def add(self, description: str, date: str | None = None) -> Task:
        task = Task(
            description=description,
            status=TaskStatus.PENDING,
            date=self.default_date if date is None else date,
        )
        self.tasks.append(task)
        logger.debug("Task added position=%s description=%r", len(self.tasks), description)
        return task

    def mark_completed(self, position: int) -> Task:
        task = self.tasks[self._check_position(position)]
        task.status = TaskStatus.COMPLETED
        logger.debug("Task completed position=%s", position)
        return task

    def delete(self, position: int) -> Task:
        task = self.tasks.pop(self._check_position(position))
        logger.debug("Task deleted position=%s", position)
        return task

    def clear_completed(self) -> int:
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if not t.is_completed]
        removed = before - len(self.tasks)
        logger.debug("Cleared %d completed tasks", removed)
        return removed

    # ---- queries ----

    def filter(self, predicate: TaskFilter | str) -> Iterator[tuple[int, Task]]:
        try:
            wanted = TaskFilter(predicate)
        except ValueError:
            return
        for position, task in enumerate(self.tasks, start=1):
            if wanted.matches(task):
                yield position, task

    def search(self, query: str) -> Iterator[tuple[int, Task]]:
        needle = query.lower()
        for position, task in enumerate(self.tasks, start=1):
            if needle in task.description.lower():
                yield position, task
