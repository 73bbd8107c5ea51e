# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli import render
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import TaskChange

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskboard"))
    logger.info("Console connector started (tasks=%d).", state.task_store.count())
    _print_ts(f"[{app_name}] Use /help for commands, /list to see the board, /exit to quit.\n")

    changes: list[TaskChange] = []
    unsubscribe = state.task_store.subscribe(changes.append)

    try:
        while True:
            try:
                user_input = input(f"{app_name}> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                response = command_registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response is None:
                response = "Commands start with '/'. Use /help to list available commands."
            _print_ts(response)

            # Re-render the board header after committed mutations.
            if changes:
                store = state.task_store
                shown = len(store.get_filtered(state.filters))
                _print_ts(render.render_header(shown, store.count()))
                changes.clear()
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
