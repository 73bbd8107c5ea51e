# src/taskboard/tasks/task_stats.py

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .task_models import Task, TaskResponsible, TaskStats, TaskStatus


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    """
    Summary counts over the full (unfiltered) collection.

    These numbers drive the quick-filter badges, so callers must pass the
    canonical collection, never a filtered view.
    """
    by_status: Counter[TaskStatus] = Counter()
    by_responsible: Counter[TaskResponsible] = Counter()
    total = 0
    for t in tasks:
        total += 1
        by_status[t.status] += 1
        by_responsible[t.responsible] += 1

    return TaskStats(
        total=total,
        pending=by_status[TaskStatus.PENDING],
        in_progress=by_status[TaskStatus.IN_PROGRESS],
        in_review=by_status[TaskStatus.IN_REVIEW],
        completed=by_status[TaskStatus.COMPLETE],
        mine=by_responsible[TaskResponsible.SELF],
        partner=by_responsible[TaskResponsible.PARTNER],
    )
