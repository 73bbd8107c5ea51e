# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskboard.config import Settings

ENV_NAMES = (
    "TASKBOARD_APP_NAME",
    "TASKBOARD_LOG_LEVEL",
    "TASKBOARD_LOG_TO_FILE",
    "TASKBOARD_DATA_DIR",
    "TASKBOARD_SEED_SAMPLE_TASKS",
    "TASKBOARD_DUE_SOON_DAYS",
    "TASKBOARD_COMMENT_DATE_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskboard"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/taskboard")
    assert s.seed_sample_tasks is True
    assert s.due_soon_days == 7
    assert s.comment_date_format == "%d/%m/%Y"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOARD_APP_NAME", "board")
    monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKBOARD_LOG_TO_FILE", "no")
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKBOARD_SEED_SAMPLE_TASKS", "0")
    monkeypatch.setenv("TASKBOARD_DUE_SOON_DAYS", "3")
    monkeypatch.setenv("TASKBOARD_COMMENT_DATE_FORMAT", "%Y-%m-%d")

    s = Settings.from_env()
    assert s.app_name == "board"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
    assert s.seed_sample_tasks is False
    assert s.due_soon_days == 3
    assert s.comment_date_format == "%Y-%m-%d"


def test_malformed_int_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOARD_DUE_SOON_DAYS", "soon")
    assert Settings.from_env().due_soon_days == 7

    monkeypatch.setenv("TASKBOARD_DUE_SOON_DAYS", "-4")
    assert Settings.from_env().due_soon_days == 0
