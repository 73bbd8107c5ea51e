# src/taskboard/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task store errors."""


class ValidationError(TaskError, ValueError):
    """Malformed or missing input (create/update/add_comment)."""


class NotFoundError(TaskError, LookupError):
    """An operation referenced a task id that is not in the store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
