# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any

from .errors import ValidationError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - transitions are free: any status may move to any other (including
      "complete" back to "pending").
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        return _parse_enum(cls, raw, "status")


class TaskPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, raw: Any) -> TaskPriority:
        return _parse_enum(cls, raw, "priority")


class TaskResponsible(StrEnum):
    SELF = "self"
    PARTNER = "partner"

    @classmethod
    def parse(cls, raw: Any) -> TaskResponsible:
        return _parse_enum(cls, raw, "responsible")


class ChangeKind(StrEnum):
    CREATED = "created"
    STATUS_CHANGED = "status_changed"
    UPDATED = "updated"
    COMMENT_ADDED = "comment_added"
    DELETED = "deleted"


def _parse_enum(enum_cls, raw: Any, field_name: str):
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str):
        try:
            return enum_cls(raw.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Invalid {field_name}: {raw!r} (expected one of: {allowed})")


def parse_due_date(raw: Any) -> date:
    """Accept a date (not a datetime) or a YYYY-MM-DD string."""
    if isinstance(raw, date) and not isinstance(raw, datetime):
        return raw
    if isinstance(raw, str):
        try:
            return date.fromisoformat(raw.strip())
        except ValueError:
            pass
    raise ValidationError(f"Invalid due_date: {raw!r} (expected YYYY-MM-DD)")


def require_text(raw: Any, field_name: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(f"{field_name} is required")
    return raw.strip()


@dataclass(frozen=True, slots=True)
class Comment:
    id: str
    date: str
    text: str
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    name: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    responsible: TaskResponsible
    project: str
    due_date: date
    comments: tuple[Comment, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class TaskFilters:
    """
    Filter criteria.

    None and an empty set both mean "no constraint" on that dimension.
    Project is a case-insensitive substring; None or "" means no constraint.
    """

    status: frozenset[TaskStatus] | None = None
    responsible: frozenset[TaskResponsible] | None = None
    priority: frozenset[TaskPriority] | None = None
    project: str | None = None


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    pending: int
    in_progress: int
    in_review: int
    completed: int
    mine: int
    partner: int

    @property
    def open(self) -> int:
        return self.pending + self.in_progress + self.in_review

    def by_status(self) -> dict[TaskStatus, int]:
        return {
            TaskStatus.PENDING: self.pending,
            TaskStatus.IN_PROGRESS: self.in_progress,
            TaskStatus.IN_REVIEW: self.in_review,
            TaskStatus.COMPLETE: self.completed,
        }


@dataclass(frozen=True, slots=True)
class TaskChange:
    kind: ChangeKind
    task_id: str


# ---- serialization ----


def _instant_to_str(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _str_to_instant(raw: Any) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        value = raw
    else:
        try:
            value = datetime.fromisoformat(str(raw))
        except ValueError as e:
            raise ValidationError(f"Invalid timestamp: {raw!r}") from e
    # Timestamps without an offset are read as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    return {
        "id": comment.id,
        "date": comment.date,
        "text": comment.text,
        "created_at": _instant_to_str(comment.created_at),
    }


def comment_from_dict(data: dict[str, Any]) -> Comment:
    return Comment(
        id=require_text(data.get("id"), "comment id"),
        date=str(data.get("date") or ""),
        text=require_text(data.get("text"), "comment text"),
        created_at=_str_to_instant(data.get("created_at")),
    )


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "name": task.name,
        "description": task.description,
        "status": task.status.value,
        "priority": task.priority.value,
        "responsible": task.responsible.value,
        "project": task.project,
        "due_date": task.due_date.isoformat(),
        "comments": [comment_to_dict(c) for c in task.comments],
        "created_at": _instant_to_str(task.created_at),
        "updated_at": _instant_to_str(task.updated_at),
    }


def task_from_dict(data: dict[str, Any]) -> Task:
    created_at = _str_to_instant(data.get("created_at"))
    updated_at = _str_to_instant(data.get("updated_at"))
    if created_at is None:
        raise ValidationError("created_at is required")
    if updated_at is None or updated_at < created_at:
        updated_at = created_at

    return Task(
        id=require_text(data.get("id"), "id"),
        name=require_text(data.get("name"), "name"),
        description=require_text(data.get("description"), "description"),
        status=TaskStatus.parse(data.get("status")),
        priority=TaskPriority.parse(data.get("priority")),
        responsible=TaskResponsible.parse(data.get("responsible")),
        project=require_text(data.get("project"), "project"),
        due_date=parse_due_date(data.get("due_date")),
        comments=tuple(comment_from_dict(c) for c in data.get("comments") or []),
        created_at=created_at,
        updated_at=updated_at,
    )
