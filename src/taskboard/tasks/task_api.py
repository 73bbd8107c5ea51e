# src/taskboard/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import date, timedelta
from enum import StrEnum
from typing import Any

from .task_models import Comment, Task, TaskStatus, task_from_dict
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class DueState(StrEnum):
    DONE = "done"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    ON_TRACK = "on_track"


def due_state(task: Task, today: date, *, soon_days: int = 7) -> DueState:
    """
    Classify a task's due date relative to `today`.

    Completed tasks are never overdue or due soon.
    """
    if task.status == TaskStatus.COMPLETE:
        return DueState.DONE
    if task.due_date < today:
        return DueState.OVERDUE
    if task.due_date < today + timedelta(days=max(0, soon_days)):
        return DueState.DUE_SOON
    return DueState.ON_TRACK


def latest_comments(task: Task, limit: int = 2) -> tuple[Comment, ...]:
    """Last `limit` comments, oldest first (card preview)."""
    if limit <= 0:
        return ()
    return task.comments[-limit:]


SAMPLE_TASKS: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Design the company logo",
        "status": "in_progress",
        "description": (
            "Create a professional logo for the company identity, with colour and "
            "black/white versions that scale to every use."
        ),
        "responsible": "self",
        "priority": "high",
        "due_date": "2024-12-30",
        "project": "Branding",
        "comments": [
            {
                "id": "c1",
                "date": "15/12/2024",
                "text": "Started on the first concept drafts. Exploring minimal styles.",
            }
        ],
        "created_at": "2024-12-15T10:00:00Z",
        "updated_at": "2024-12-15T14:30:00Z",
    },
    {
        "id": "2",
        "name": "Set up the production server",
        "status": "pending",
        "description": (
            "Configure the EC2 instance for deploying the web app, including SSL, "
            "domain and database."
        ),
        "responsible": "partner",
        "priority": "high",
        "due_date": "2024-12-28",
        "project": "Infrastructure",
        "comments": [],
        "created_at": "2024-12-14T09:00:00Z",
        "updated_at": "2024-12-14T09:00:00Z",
    },
    {
        "id": "3",
        "name": "Review supplier contracts",
        "status": "in_review",
        "description": "Review and renegotiate terms with our main software and service suppliers.",
        "responsible": "self",
        "priority": "medium",
        "due_date": "2024-12-25",
        "project": "Administration",
        "comments": [
            {
                "id": "c2",
                "date": "14/12/2024",
                "text": "Supplier A contract reviewed. Discount negotiation pending.",
            },
            {
                "id": "c3",
                "date": "15/12/2024",
                "text": "Meeting with the legal team booked for 20/12.",
            },
        ],
        "created_at": "2024-12-13T11:00:00Z",
        "updated_at": "2024-12-15T16:00:00Z",
    },
    {
        "id": "4",
        "name": "Holiday marketing campaign",
        "status": "complete",
        "description": "Launch the holiday promotion across email, social media and online ads.",
        "responsible": "partner",
        "priority": "medium",
        "due_date": "2024-12-20",
        "project": "Marketing",
        "comments": [
            {
                "id": "c4",
                "date": "12/12/2024",
                "text": "Campaign launched. Initial CTR of 3.2%.",
            }
        ],
        "created_at": "2024-12-10T08:00:00Z",
        "updated_at": "2024-12-20T18:00:00Z",
    },
    {
        "id": "5",
        "name": "Update the API documentation",
        "status": "pending",
        "description": "Document the new REST endpoints and the changes to existing ones.",
        "responsible": "self",
        "priority": "low",
        "due_date": "2025-01-05",
        "project": "Development",
        "comments": [],
        "created_at": "2024-12-16T15:00:00Z",
        "updated_at": "2024-12-16T15:00:00Z",
    },
]


def seed_sample_tasks(store: TaskStore) -> int:
    """Load the built-in demo board. Returns the number of tasks loaded."""
    tasks = [task_from_dict(raw) for raw in SAMPLE_TASKS]
    store.load(tasks)
    logger.info("Seeded %d sample tasks", len(tasks))
    return len(tasks)
