# src/taskman/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local directories exist,
- performs the single startup load of the tasks file into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import DEFAULT_CREATION_DATE
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.tasks_file).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises OSError if the tasks file exists but cannot be read; a missing
    file yields an empty store. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore.load(
        settings.tasks_file,
        default_date=getattr(settings, "creation_date", None) or DEFAULT_CREATION_DATE,
    )
    logger.debug("Initial state ready tasks_file=%s tasks=%d", settings.tasks_file, len(task_store))
    return AppState(settings=settings, task_store=task_store)
