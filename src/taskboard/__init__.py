# src/taskboard/__init__.py

"""Single-user task board: in-memory task store, filters and stats."""

__version__ = "0.1.0"
