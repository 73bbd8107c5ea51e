# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.

Environment variables (prefix TASKBOARD_):
- TASKBOARD_APP_NAME             display name (default: taskboard)
- TASKBOARD_LOG_LEVEL            console log level (default: INFO)
- TASKBOARD_DATA_DIR             local data dir, holds the log file (default: .local/taskboard)
- TASKBOARD_LOG_TO_FILE          write taskboard.log under the data dir (default: true)
- TASKBOARD_SEED_SAMPLE_TASKS    start with the demo board (default: true)
- TASKBOARD_DUE_SOON_DAYS        "due soon" window in days (default: 7)
- TASKBOARD_COMMENT_DATE_FORMAT  strftime format for comment dates (default: %d/%m/%Y)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Board behaviour ----
    seed_sample_tasks: bool
    due_soon_days: int
    comment_date_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))

        seed_sample_tasks = _env_bool(_k("SEED_SAMPLE_TASKS"), True)
        due_soon_days = max(0, _env_int(_k("DUE_SOON_DAYS"), 7))
        comment_date_format = _env(_k("COMMENT_DATE_FORMAT"), "%d/%m/%Y") or "%d/%m/%Y"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            seed_sample_tasks=seed_sample_tasks,
            due_soon_days=due_soon_days,
            comment_date_format=comment_date_format,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
