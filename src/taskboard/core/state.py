# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_filters import NO_FILTERS
from ..tasks.task_models import TaskFilters
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are stored on the state so commands can read them without a global lookup.
    settings: object

    task_store: TaskRepo

    # Transient UI state
    filters: TaskFilters = NO_FILTERS
