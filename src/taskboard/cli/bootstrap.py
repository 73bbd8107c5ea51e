# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore into AppState,
- optionally seeds the demo board,
- tears the state down at exit.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import seed_sample_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(
        comment_date_format=getattr(settings, "comment_date_format", "%d/%m/%Y"),
    )
    if getattr(settings, "seed_sample_tasks", False):
        seed_sample_tasks(store)

    return AppState(settings=settings, task_store=store)


def shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        close = getattr(state.task_store, "close", None)
        if close is not None:
            close()
    except Exception:
        logger.exception("TaskStore close failed.")
