# tests/test_task_filters.py

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from taskboard.tasks.errors import ValidationError
from taskboard.tasks.task_filters import (
    NO_FILTERS,
    apply_quick_filter,
    filter_tasks,
    has_active_filters,
    quick_filter_counts,
    toggle_priority,
    toggle_responsible,
    toggle_status,
    with_project,
)
from taskboard.tasks.task_models import (
    Task,
    TaskFilters,
    TaskPriority,
    TaskResponsible,
    TaskStatus,
)
from taskboard.tasks.task_stats import compute_stats

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def make_task(
    task_id: str,
    *,
    status: TaskStatus = TaskStatus.PENDING,
    priority: TaskPriority = TaskPriority.MEDIUM,
    responsible: TaskResponsible = TaskResponsible.SELF,
    project: str = "General",
) -> Task:
    return Task(
        id=task_id,
        name=f"Task {task_id}",
        description="desc",
        status=status,
        priority=priority,
        responsible=responsible,
        project=project,
        due_date=date(2025, 1, 31),
        comments=(),
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        make_task("a", status=TaskStatus.PENDING, priority=TaskPriority.HIGH, project="Branding"),
        make_task(
            "b",
            status=TaskStatus.COMPLETE,
            responsible=TaskResponsible.PARTNER,
            project="Marketing",
        ),
        make_task("c", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.LOW, project="Brand book"),
        make_task(
            "d",
            status=TaskStatus.COMPLETE,
            priority=TaskPriority.HIGH,
            project="Infrastructure",
        ),
        make_task("e", status=TaskStatus.IN_REVIEW, responsible=TaskResponsible.PARTNER),
    ]


def ids(items: list[Task]) -> list[str]:
    return [t.id for t in items]


def test_no_criteria_returns_everything_in_order(tasks) -> None:
    assert ids(filter_tasks(tasks, NO_FILTERS)) == ["a", "b", "c", "d", "e"]
    assert ids(filter_tasks(tasks, None)) == ["a", "b", "c", "d", "e"]


def test_status_filter_keeps_relative_order(tasks) -> None:
    result = filter_tasks(tasks, TaskFilters(status=frozenset({TaskStatus.COMPLETE})))
    assert ids(result) == ["b", "d"]


def test_empty_sets_match_everything(tasks) -> None:
    criteria = TaskFilters(
        status=frozenset(), responsible=frozenset(), priority=frozenset(), project=""
    )
    assert ids(filter_tasks(tasks, criteria)) == ["a", "b", "c", "d", "e"]
    assert not has_active_filters(criteria)


def test_dimensions_combine_with_and(tasks) -> None:
    criteria = TaskFilters(
        status=frozenset({TaskStatus.COMPLETE, TaskStatus.PENDING}),
        priority=frozenset({TaskPriority.HIGH}),
        responsible=frozenset({TaskResponsible.SELF}),
    )
    assert ids(filter_tasks(tasks, criteria)) == ["a", "d"]


def test_project_is_case_insensitive_substring(tasks) -> None:
    assert ids(filter_tasks(tasks, TaskFilters(project="BRAND"))) == ["a", "c"]
    assert ids(filter_tasks(tasks, TaskFilters(project="nothing"))) == []


def test_filter_does_not_mutate_input(tasks) -> None:
    before = list(tasks)
    filter_tasks(tasks, TaskFilters(status=frozenset({TaskStatus.PENDING})))
    assert tasks == before


def test_toggle_adds_and_removes_collapsing_to_none() -> None:
    criteria = toggle_status(NO_FILTERS, "pending")
    assert criteria.status == frozenset({TaskStatus.PENDING})
    assert has_active_filters(criteria)

    criteria = toggle_status(criteria, TaskStatus.COMPLETE)
    assert criteria.status == frozenset({TaskStatus.PENDING, TaskStatus.COMPLETE})

    criteria = toggle_status(toggle_status(criteria, "pending"), "complete")
    assert criteria.status is None
    assert not has_active_filters(criteria)


def test_toggle_other_dimensions() -> None:
    criteria = toggle_priority(toggle_responsible(NO_FILTERS, "partner"), "low")
    assert criteria.responsible == frozenset({TaskResponsible.PARTNER})
    assert criteria.priority == frozenset({TaskPriority.LOW})

    with pytest.raises(ValidationError):
        toggle_priority(criteria, "urgent")


def test_with_project_sets_and_clears() -> None:
    criteria = with_project(NO_FILTERS, "  brand ")
    assert criteria.project == "brand"
    assert with_project(criteria, "").project is None
    assert with_project(criteria, None).project is None


def test_quick_filters_replace_only_their_dimension() -> None:
    base = TaskFilters(priority=frozenset({TaskPriority.HIGH}), status=frozenset({TaskStatus.COMPLETE}))

    mine = apply_quick_filter("mine", base)
    assert mine.responsible == frozenset({TaskResponsible.SELF})
    assert mine.priority == base.priority
    assert mine.status == base.status

    opened = apply_quick_filter("open", base)
    assert opened.status == frozenset(
        {TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.IN_REVIEW}
    )
    assert opened.priority == base.priority

    assert apply_quick_filter("in_progress", base).status == frozenset({TaskStatus.IN_PROGRESS})
    assert apply_quick_filter("Completed", NO_FILTERS).status == frozenset({TaskStatus.COMPLETE})

    with pytest.raises(ValidationError):
        apply_quick_filter("overdue", base)


def test_quick_filter_counts_come_from_stats(tasks) -> None:
    counts = {q.name: n for q, n in quick_filter_counts(compute_stats(tasks))}
    assert counts == {"mine": 3, "open": 3, "in_progress": 1, "completed": 2}
