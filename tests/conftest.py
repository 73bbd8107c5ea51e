# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from typing import Any

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        seed_sample_tasks=False,
        due_soon_days=7,
        comment_date_format="%d/%m/%Y",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def task_fields() -> dict[str, Any]:
    """Valid create() arguments; tests override single fields."""
    return {
        "name": "Design the logo",
        "description": "Colour and black/white versions",
        "responsible": "self",
        "priority": "high",
        "status": "pending",
        "project": "Branding",
        "due_date": date(2025, 1, 10),
    }
