# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Commands and connectors depend on these Protocols instead of the concrete
TaskStore, which keeps the store swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Any, Protocol

from ..tasks.task_models import Comment, Task, TaskChange, TaskFilters, TaskStats


class ChangeListener(Protocol):
    def __call__(self, change: TaskChange) -> None: ...


class TaskRepo(Protocol):
    # Reads
    def count(self) -> int: ...
    def get(self, task_id: str) -> Task: ...
    def get_all(self) -> list[Task]: ...
    def get_filtered(self, criteria: TaskFilters | None = None) -> list[Task]: ...
    def get_stats(self) -> TaskStats: ...

    # Writes
    def create(self, **fields: Any) -> Task: ...
    def update_status(self, task_id: str, new_status: Any) -> Task: ...
    def update(self, task_id: str, **fields: Any) -> Task: ...
    def add_comment(self, task_id: str, text: str) -> Comment: ...
    def delete(self, task_id: str) -> None: ...

    # Change notification
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...
    def unsubscribe(self, listener: ChangeListener) -> None: ...
