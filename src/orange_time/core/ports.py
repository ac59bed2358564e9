# src/orange_time/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Background sync depends on a Protocol instead of the concrete HTTP client,
so tests can drive it with an in-memory source.
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from ..tasks.task_models import Task


class TaskSource(Protocol):
    """Async read/write of the whole task collection."""

    async def fetch_all(self, today: date | None = None) -> list[Task]: ...

    async def push_all(self, tasks: Sequence[Task]) -> bool: ...
