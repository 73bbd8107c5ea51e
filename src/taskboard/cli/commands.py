# src/taskboard/cli/commands.py

from __future__ import annotations

import json
import logging
import shlex
from collections.abc import Callable
from dataclasses import replace
from datetime import date
from typing import Any

from ..core.state import AppState
from ..tasks.errors import NotFoundError, TaskError, ValidationError
from ..tasks.task_filters import (
    NO_FILTERS,
    QUICK_FILTERS,
    apply_quick_filter,
    toggle_priority,
    toggle_responsible,
    toggle_status,
    with_project,
)
from ..tasks.task_models import (
    TaskFilters,
    TaskPriority,
    TaskResponsible,
    TaskStatus,
    task_to_dict,
)
from . import render

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

FIELD_ALIASES = {"due": "due_date", "owner": "responsible"}


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except NotFoundError as e:
            return f"No task with id {e.task_id}."
        except TaskError as e:
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _parse_assignments(args: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValidationError(f"Expected key=value, got {arg!r}")
        key = key.strip().lower()
        fields[FIELD_ALIASES.get(key, key)] = value
    return fields


def resolve_task_id(state: AppState, token: str) -> str:
    """Accept a full task id or a unique prefix of one."""
    token = token.strip()
    ids = [t.id for t in state.task_store.get_all()]
    if token in ids:
        return token
    hits = [i for i in ids if i.startswith(token)] if token else []
    if len(hits) == 1:
        return hits[0]
    if len(hits) > 1:
        raise ValidationError(f"Ambiguous task id prefix: {token!r} ({len(hits)} matches)")
    raise NotFoundError(token)


def _today() -> date:
    return date.today()


def _soon_days(state: AppState) -> int:
    return int(getattr(state.settings, "due_soon_days", 7))


def _parse_filter_values(enum_cls, raw: str) -> frozenset | None:
    values = [v for v in raw.replace(" ", ",").split(",") if v]
    return frozenset(enum_cls.parse(v) for v in values) or None


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    store = state.task_store
    tasks = store.get_filtered(state.filters)
    board = render.render_board(tasks, store.count(), today=_today(), soon_days=_soon_days(state))
    return f"{render.render_filters(state.filters)}\n{board}"


def cmd_show(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /show <id>"
    task = state.task_store.get(resolve_task_id(state, args[0]))
    return render.render_card(task, today=_today(), soon_days=_soon_days(state), full=True)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add name="..." description="..." responsible=self|partner
         priority=high|medium|low status=pending|in_progress|in_review|complete
         project="..." due=YYYY-MM-DD
    """
    if not args:
        return (
            "Usage: /add name=... description=... responsible=self|partner "
            "priority=high|medium|low status=pending|in_progress|in_review|complete "
            "project=... due=YYYY-MM-DD"
        )
    fields: dict[str, Any] = _parse_assignments(args)
    fields.setdefault("status", TaskStatus.PENDING)
    fields.setdefault("due_date", _today())
    task = state.task_store.create(**fields)
    return f"Task created [{render.short_id(task.id)}] {task.name}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /edit <id> key=value ..."
    task_id = resolve_task_id(state, args[0])
    task = state.task_store.update(task_id, **_parse_assignments(args[1:]))
    return f"Task updated [{render.short_id(task.id)}] {task.name}"


def cmd_status(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        allowed = "|".join(s.value for s in TaskStatus)
        return f"Usage: /status <id> {allowed}"
    task_id = resolve_task_id(state, args[0])
    task = state.task_store.update_status(task_id, args[1])
    return f"Status of [{render.short_id(task.id)}] is now {render.STATUS_LABELS[task.status]}"


def cmd_comment(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /comment <id> <text>"
    task_id = resolve_task_id(state, args[0])
    comment = state.task_store.add_comment(task_id, " ".join(args[1:]))
    return f"Comment added to [{render.short_id(task_id)}] on {comment.date}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>"
    task_id = resolve_task_id(state, args[0])
    state.task_store.delete(task_id)
    return f"Task [{render.short_id(task_id)}] deleted"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                          -> show active filters
    /filter status=pending,in_review -> replace the status constraint
    /filter project=brand            -> case-insensitive project substring
    /filter status=                  -> drop one constraint
    """
    if not args:
        return render.render_filters(state.filters)

    criteria: TaskFilters = state.filters
    for key, raw in _parse_assignments(args).items():
        if key == "status":
            criteria = replace(criteria, status=_parse_filter_values(TaskStatus, raw))
        elif key == "responsible":
            criteria = replace(criteria, responsible=_parse_filter_values(TaskResponsible, raw))
        elif key == "priority":
            criteria = replace(criteria, priority=_parse_filter_values(TaskPriority, raw))
        elif key == "project":
            criteria = with_project(criteria, raw)
        else:
            return f"Unknown filter: {key}. Use status, responsible, priority or project."

    state.filters = criteria
    return render.render_filters(criteria)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /toggle status|responsible|priority <value>"
    dimension, value = args[0].lower(), args[1]
    toggles = {
        "status": toggle_status,
        "responsible": toggle_responsible,
        "priority": toggle_priority,
    }
    toggle = toggles.get(dimension)
    if toggle is None:
        return "Usage: /toggle status|responsible|priority <value>"
    state.filters = toggle(state.filters, value)
    return render.render_filters(state.filters)


def cmd_quick(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return f"Usage: /quick {'|'.join(QUICK_FILTERS)}"
    state.filters = apply_quick_filter(args[0], state.filters)
    return cmd_list(state, [])


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.filters = NO_FILTERS
    return render.render_filters(state.filters)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render.render_stats(state.task_store.get_stats())


def cmd_export(state: AppState, args: list[str]) -> str:
    data = [task_to_dict(t) for t in state.task_store.get_all()]
    return json.dumps(data, ensure_ascii=False, indent=2)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks matching the active filters.", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show one task with its comments: /show <id>.")
registry.register("add", cmd_add, help_text="Create a task: /add name=... description=... ...")
registry.register("edit", cmd_edit, help_text="Edit task fields: /edit <id> key=value ...")
registry.register("status", cmd_status, help_text="Change status: /status <id> <status>.")
registry.register("comment", cmd_comment, help_text="Add a comment: /comment <id> <text>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("filter", cmd_filter, help_text="Set filters: /filter status=a,b project=x.")
registry.register("toggle", cmd_toggle, help_text="Toggle a filter value: /toggle status pending.")
registry.register("quick", cmd_quick, help_text="Quick filter: /quick mine|open|in_progress|completed.")
registry.register("clear", cmd_clear, help_text="Clear all filters.")
registry.register("stats", cmd_stats, help_text="Show the dashboard counts.")
registry.register("export", cmd_export, help_text="Dump all tasks as JSON.")
