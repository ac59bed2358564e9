"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Category, TaskStatus, Priority) and date parsing
- task_store.py: ordered in-memory collection with an on-commit hook
- task_api.py: create / upsert / remove / editor field rules
- derive.py: dashboard aggregates and timeline grouping
- seed.py: deterministic mock data for an empty or unreachable backend
"""
