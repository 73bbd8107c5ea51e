# src/taskboard/tasks/task_filters.py

"""
Filter engine.

Pure functions over task sequences and TaskFilters values. Nothing here keeps
state: the filtered view is recomputed from the canonical collection on every
read.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import StrEnum

from .errors import ValidationError
from .task_models import (
    Task,
    TaskFilters,
    TaskPriority,
    TaskResponsible,
    TaskStats,
    TaskStatus,
)

NO_FILTERS = TaskFilters()


def matches(task: Task, criteria: TaskFilters) -> bool:
    # Empty sets behave exactly like absent constraints.
    if criteria.status and task.status not in criteria.status:
        return False
    if criteria.responsible and task.responsible not in criteria.responsible:
        return False
    if criteria.priority and task.priority not in criteria.priority:
        return False
    if criteria.project and criteria.project.lower() not in task.project.lower():
        return False
    return True


def filter_tasks(tasks: Iterable[Task], criteria: TaskFilters | None = None) -> list[Task]:
    """Return the matching tasks, preserving input order."""
    if criteria is None:
        return list(tasks)
    return [t for t in tasks if matches(t, criteria)]


def has_active_filters(criteria: TaskFilters) -> bool:
    return bool(criteria.status or criteria.responsible or criteria.priority or criteria.project)


def _toggled(current: frozenset | None, value: StrEnum) -> frozenset | None:
    values = set(current or ())
    if value in values:
        values.remove(value)
    else:
        values.add(value)
    return frozenset(values) if values else None


def toggle_status(criteria: TaskFilters, value: TaskStatus | str) -> TaskFilters:
    return replace(criteria, status=_toggled(criteria.status, TaskStatus.parse(value)))


def toggle_responsible(criteria: TaskFilters, value: TaskResponsible | str) -> TaskFilters:
    return replace(
        criteria, responsible=_toggled(criteria.responsible, TaskResponsible.parse(value))
    )


def toggle_priority(criteria: TaskFilters, value: TaskPriority | str) -> TaskFilters:
    return replace(criteria, priority=_toggled(criteria.priority, TaskPriority.parse(value)))


def with_project(criteria: TaskFilters, text: str | None) -> TaskFilters:
    text = (text or "").strip()
    return replace(criteria, project=text or None)


# ---- quick filters ----


@dataclass(frozen=True, slots=True)
class QuickFilter:
    name: str
    label: str
    apply: Callable[[TaskFilters], TaskFilters]
    count: Callable[[TaskStats], int]


QUICK_FILTERS: dict[str, QuickFilter] = {
    q.name: q
    for q in (
        QuickFilter(
            name="mine",
            label="My tasks",
            apply=lambda f: replace(f, responsible=frozenset({TaskResponsible.SELF})),
            count=lambda s: s.mine,
        ),
        QuickFilter(
            name="open",
            label="Open",
            apply=lambda f: replace(
                f,
                status=frozenset(
                    {TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.IN_REVIEW}
                ),
            ),
            count=lambda s: s.open,
        ),
        QuickFilter(
            name="in_progress",
            label="In progress",
            apply=lambda f: replace(f, status=frozenset({TaskStatus.IN_PROGRESS})),
            count=lambda s: s.in_progress,
        ),
        QuickFilter(
            name="completed",
            label="Completed",
            apply=lambda f: replace(f, status=frozenset({TaskStatus.COMPLETE})),
            count=lambda s: s.completed,
        ),
    )
}


def apply_quick_filter(name: str, criteria: TaskFilters) -> TaskFilters:
    """Merge a quick filter into the criteria, replacing only its own dimension."""
    quick = QUICK_FILTERS.get(name.strip().lower())
    if quick is None:
        allowed = ", ".join(QUICK_FILTERS)
        raise ValidationError(f"Unknown quick filter: {name!r} (expected one of: {allowed})")
    return quick.apply(criteria)


def quick_filter_counts(stats: TaskStats) -> list[tuple[QuickFilter, int]]:
    return [(q, q.count(stats)) for q in QUICK_FILTERS.values()]
