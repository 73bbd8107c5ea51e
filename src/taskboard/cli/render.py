# src/taskboard/cli/render.py

"""Plain-text rendering of cards, boards and the stats panel."""

from __future__ import annotations

from datetime import date

from ..tasks.task_api import DueState, due_state, latest_comments
from ..tasks.task_filters import has_active_filters, quick_filter_counts
from ..tasks.task_models import (
    Task,
    TaskFilters,
    TaskPriority,
    TaskResponsible,
    TaskStats,
    TaskStatus,
)

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "⚪ Pending",
    TaskStatus.IN_PROGRESS: "🟡 In progress",
    TaskStatus.IN_REVIEW: "🔵 In review",
    TaskStatus.COMPLETE: "✅ Complete",
}

PRIORITY_LABELS: dict[TaskPriority, str] = {
    TaskPriority.HIGH: "🔥 High",
    TaskPriority.MEDIUM: "⭐ Medium",
    TaskPriority.LOW: "❄️ Low",
}

RESPONSIBLE_LABELS: dict[TaskResponsible, str] = {
    TaskResponsible.SELF: "Me",
    TaskResponsible.PARTNER: "Partner",
}

DUE_MARKERS: dict[DueState, str] = {
    DueState.OVERDUE: " (overdue)",
    DueState.DUE_SOON: " (due soon)",
    DueState.ON_TRACK: "",
    DueState.DONE: "",
}

ID_PREVIEW_LEN = 8


def short_id(task_id: str) -> str:
    return task_id[:ID_PREVIEW_LEN]


def render_card(task: Task, *, today: date, soon_days: int = 7, full: bool = False) -> str:
    due = due_state(task, today, soon_days=soon_days)
    lines = [
        f"[{short_id(task.id)}] {task.name}",
        f"  {STATUS_LABELS[task.status]} | {PRIORITY_LABELS[task.priority]} | "
        f"{RESPONSIBLE_LABELS[task.responsible]} | {task.project}",
        f"  Due: {task.due_date.strftime('%d/%m/%Y')}{DUE_MARKERS[due]}",
    ]
    if full:
        lines.append(f"  {task.description}")
        lines.append(f"  Created: {task.created_at.isoformat()}  Updated: {task.updated_at.isoformat()}")

    if task.comments:
        shown = task.comments if full else latest_comments(task)
        lines.append(f"  Comments ({len(task.comments)}):")
        for c in shown:
            lines.append(f"    {c.date}: {c.text}")
    return "\n".join(lines)


def render_header(shown: int, total: int) -> str:
    if shown == total:
        return f"All tasks ({total})"
    return f"Filtered tasks ({shown} of {total})"


def render_board(
    tasks: list[Task],
    total: int,
    *,
    today: date,
    soon_days: int = 7,
) -> str:
    lines = [render_header(len(tasks), total)]
    if not tasks:
        lines.append("  No tasks yet." if total == 0 else "  No tasks match the filters.")
        return "\n".join(lines)
    for t in tasks:
        lines.append(render_card(t, today=today, soon_days=soon_days))
    return "\n\n".join(lines)


def render_filters(criteria: TaskFilters) -> str:
    if not has_active_filters(criteria):
        return "Filters: none"

    parts: list[str] = []
    if criteria.status:
        parts.append("status=" + ",".join(sorted(s.value for s in criteria.status)))
    if criteria.responsible:
        parts.append("responsible=" + ",".join(sorted(r.value for r in criteria.responsible)))
    if criteria.priority:
        parts.append("priority=" + ",".join(sorted(p.value for p in criteria.priority)))
    if criteria.project:
        parts.append(f"project~{criteria.project}")
    return "Filters: " + " ".join(parts)


def render_stats(stats: TaskStats) -> str:
    lines = [f"Dashboard: {stats.total} tasks"]
    for status, n in stats.by_status().items():
        lines.append(f"  {STATUS_LABELS[status]}: {n}")
    lines.append(f"  Me: {stats.mine}  Partner: {stats.partner}")
    lines.append("Quick filters:")
    for quick, n in quick_filter_counts(stats):
        lines.append(f"  /quick {quick.name:<12} {quick.label} ({n})")
    return "\n".join(lines)
