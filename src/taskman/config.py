# src/taskman/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default; nothing is required to start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_models import DEFAULT_CREATION_DATE

ENV_PREFIX = "TASKMAN"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_file: Path

    # ---- Task defaults ----
    creation_date: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskman").strip() or "taskman"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskman"))
        tasks_file = _env_path(_k("TASKS_FILE"), Path("tasks.txt"))

        # Stamped verbatim on new tasks; the clock is never read.
        creation_date = _env(_k("CREATION_DATE"), DEFAULT_CREATION_DATE).strip() or DEFAULT_CREATION_DATE

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_file=tasks_file,
            creation_date=creation_date,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
