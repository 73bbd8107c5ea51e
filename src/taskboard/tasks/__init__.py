"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Comment, TaskFilters, TaskStats) + serialization
- task_store.py: in-memory canonical store with change notifications
- task_filters.py: pure filter engine and quick filters
- task_stats.py: summary counts over the full collection
- task_api.py: small high-level helpers (due dates, previews, demo data)
"""
