# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from taskboard.tasks.task_models import TaskChange


class FakeClock:
    """
    Deterministic clock for store tests.

    Every call returns the current instant and then advances by `step`, so
    consecutive mutations get strictly increasing timestamps.
    """

    def __init__(
        self,
        start: datetime = datetime(2025, 1, 1, 12, 0, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        self.calls += 1
        return current

    def rewind(self, delta: timedelta) -> None:
        self.now = self.now - delta


@dataclass(slots=True)
class RecordingListener:
    """Change listener that records every TaskChange it receives."""

    changes: list[TaskChange] = field(default_factory=list)

    def __call__(self, change: TaskChange) -> None:
        self.changes.append(change)
