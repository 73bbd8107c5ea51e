# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from .errors import NotFoundError, ValidationError
from .task_filters import filter_tasks
from ..core.ports import ChangeListener
from .task_models import (
    ChangeKind,
    Comment,
    Task,
    TaskChange,
    TaskFilters,
    TaskPriority,
    TaskResponsible,
    TaskStats,
    TaskStatus,
    parse_due_date,
    require_text,
)
from .task_stats import compute_stats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

REQUIRED_FIELDS = (
    "name",
    "description",
    "responsible",
    "priority",
    "status",
    "project",
    "due_date",
)
MUTABLE_FIELDS = frozenset(REQUIRED_FIELDS)
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at", "comments"})


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return uuid.uuid4().hex


def _clean_field(name: str, raw: Any) -> Any:
    if name == "status":
        return TaskStatus.parse(raw)
    if name == "priority":
        return TaskPriority.parse(raw)
    if name == "responsible":
        return TaskResponsible.parse(raw)
    if name == "due_date":
        return parse_due_date(raw)
    return require_text(raw, name)


class TaskStore:
    """
    In-memory task store (the single source of truth for the session).

    - tasks are kept most-recent first
    - Task values are frozen; a mutation replaces the stored instance
    - every committed mutation bumps updated_at and notifies listeners

    Thread-safety:
    - reads and mutations are serialized by an RLock; listeners run after the
      lock is released, on the mutating thread
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        comment_date_format: str = "%d/%m/%Y",
    ) -> None:
        self._clock: Clock = clock or _utc_now
        self._comment_date_format = comment_date_format
        self._tasks: list[Task] = []
        self._listeners: list[ChangeListener] = []
        self._lock = threading.RLock()
        logger.info("TaskStore ready (in-memory)")

    def close(self) -> None:
        with self._lock:
            total = len(self._tasks)
            self._tasks.clear()
            self._listeners.clear()
        logger.info("TaskStore closed (dropped %d tasks)", total)

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    def _touch(self, task: Task) -> datetime:
        # updated_at never goes backwards, even if the clock does.
        return max(self._clock(), task.updated_at)

    def _notify(self, kind: ChangeKind, task_id: str) -> None:
        change = TaskChange(kind=kind, task_id=task_id)
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.exception("Change listener failed kind=%s task_id=%s", kind, task_id)

    # ---- subscriptions ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register an on-change hook. Returns a callable that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # ---- reads ----

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get(self, task_id: str) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def get_all(self) -> list[Task]:
        """All tasks, most-recent first. The list is a copy; tasks are immutable."""
        with self._lock:
            return list(self._tasks)

    def get_filtered(self, criteria: TaskFilters | None = None) -> list[Task]:
        return filter_tasks(self.get_all(), criteria)

    def get_stats(self) -> TaskStats:
        return compute_stats(self.get_all())

    # ---- mutations ----

    def load(self, tasks: Iterable[Task]) -> None:
        """
        Append already-built tasks (e.g. sample data) in the given order.

        No listeners are notified; this is a bootstrap path.
        """
        incoming = list(tasks)
        with self._lock:
            seen = {t.id for t in self._tasks}
            for t in incoming:
                if t.id in seen:
                    raise ValidationError(f"Duplicate task id: {t.id}")
                seen.add(t.id)
            self._tasks.extend(incoming)
        logger.debug("Loaded %d tasks", len(incoming))

    def create(self, **fields: Any) -> Task:
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        clean = {name: _clean_field(name, fields[name]) for name in REQUIRED_FIELDS}

        with self._lock:
            now = self._clock()
            task = Task(
                id=_new_id(),
                comments=(),
                created_at=now,
                updated_at=now,
                **clean,
            )
            self._tasks.insert(0, task)

        logger.debug(
            "Task created id=%s status=%s priority=%s responsible=%s",
            task.id,
            task.status.value,
            task.priority.value,
            task.responsible.value,
        )
        self._notify(ChangeKind.CREATED, task.id)
        return task

    def update_status(self, task_id: str, new_status: TaskStatus | str) -> Task:
        # Any status may move to any other; no transition graph is enforced.
        status = TaskStatus.parse(new_status)
        with self._lock:
            idx = self._index_of(task_id)
            old = self._tasks[idx]
            task = replace(old, status=status, updated_at=self._touch(old))
            self._tasks[idx] = task

        logger.debug("Task status id=%s %s -> %s", task_id, old.status.value, status.value)
        self._notify(ChangeKind.STATUS_CHANGED, task_id)
        return task

    def update(self, task_id: str, **fields: Any) -> Task:
        immutable = set(fields) & IMMUTABLE_FIELDS
        if immutable:
            raise ValidationError(f"Fields cannot be changed: {', '.join(sorted(immutable))}")
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

        clean = {name: _clean_field(name, value) for name, value in fields.items()}

        with self._lock:
            idx = self._index_of(task_id)
            old = self._tasks[idx]
            task = replace(old, updated_at=self._touch(old), **clean)
            self._tasks[idx] = task

        logger.debug("Task updated id=%s fields=%s", task_id, sorted(clean))
        self._notify(ChangeKind.UPDATED, task_id)
        return task

    def add_comment(self, task_id: str, text: str) -> Comment:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("comment text is required")

        with self._lock:
            idx = self._index_of(task_id)
            old = self._tasks[idx]
            now = self._touch(old)
            comment = Comment(
                id=_new_id(),
                date=now.astimezone().strftime(self._comment_date_format),
                text=text.strip(),
                created_at=now,
            )
            self._tasks[idx] = replace(old, comments=(*old.comments, comment), updated_at=now)

        logger.debug("Comment added task_id=%s comment_id=%s", task_id, comment.id)
        self._notify(ChangeKind.COMMENT_ADDED, task_id)
        return comment

    def delete(self, task_id: str) -> None:
        with self._lock:
            idx = self._index_of(task_id)
            del self._tasks[idx]

        logger.debug("Task deleted id=%s", task_id)
        self._notify(ChangeKind.DELETED, task_id)
