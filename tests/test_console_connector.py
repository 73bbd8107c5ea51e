# tests/test_console_connector.py

from __future__ import annotations

import pytest

from taskboard.cli.bootstrap import create_initial_state, shutdown
from taskboard.connectors.console_connector import run_console_loop
from taskboard.core.state import AppState


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    queue = list(lines)

    def fake_input(prompt: str = "") -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_runs_commands_and_rerenders_after_mutations(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(
        monkeypatch,
        [
            "",
            "/add name=Logo description=Draft responsible=self priority=high project=Branding",
            "/filter status=complete",
            "hello",
            "/exit",
            "/stats",
        ],
    )

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task created" in out
    assert "All tasks (1)" in out
    assert "Filters: status=complete" in out
    assert "Commands start with '/'" in out
    # /exit stops the loop before /stats runs
    assert "Dashboard" not in out
    assert state.task_store.count() == 1


def test_console_unsubscribes_on_exit(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, [])
    run_console_loop(state)

    # no listeners should be left behind
    assert state.task_store._listeners == []  # type: ignore[attr-defined]


def test_bootstrap_seeds_and_shuts_down(settings) -> None:
    settings.seed_sample_tasks = True
    state = create_initial_state(settings=settings)
    assert state.task_store.count() == 5
    assert state.settings is settings

    shutdown(state)
    assert state.task_store.count() == 0


def test_bootstrap_without_seed(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.task_store.count() == 0
