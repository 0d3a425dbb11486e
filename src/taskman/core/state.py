# src/taskman/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class AppState:
    """
    Everything a session needs, passed explicitly to command handlers.

    There is exactly one TaskStore per process; it is created by the
    bootstrap and saved by the console loop on quit.
    """

    # Settings object (config.Settings or a test stand-in).
    settings: object
    task_store: TaskStore
