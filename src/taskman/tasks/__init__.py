"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskFilter)
- task_store.py: pipe-delimited file format + in-memory collection operations
"""
