# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from orange_time.tasks.task_models import Category, Task, TaskStatus

FIXED_TODAY = date(2026, 3, 1)


def make_task(
    task_id: str,
    date_str: str,
    *,
    category: str = Category.PERSONAL,
    status: TaskStatus = TaskStatus.TODO,
    title: str | None = None,
    end_date_str: str | None = None,
) -> Task:
    return Task(
        id=task_id,
        title=title or f"Task {task_id}",
        category=category,
        date_str=date_str,
        description=f"About {task_id}",
        status=status,
        end_date_str=end_date_str,
    )


class RecordingSync:
    """
    Stand-in for BackgroundSync.on_commit.

    Records every committed snapshot instead of pushing it anywhere.
    """

    def __init__(self) -> None:
        self.snapshots: list[tuple[Task, ...]] = []

    def on_commit(self, snapshot: Sequence[Task]) -> None:
        self.snapshots.append(tuple(snapshot))

    @property
    def last(self) -> tuple[Task, ...]:
        return self.snapshots[-1]


class FakeTaskSource:
    """
    In-memory TaskSource used by BackgroundSync / bootstrap tests.

    - fetch_all returns the configured tasks (or raises fetch_error)
    - push_all records payloads and returns push_result
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        *,
        fetch_error: Exception | None = None,
        push_result: bool = True,
    ) -> None:
        self.tasks = list(tasks or [])
        self.fetch_error = fetch_error
        self.push_result = push_result
        self.pushed: list[tuple[Task, ...]] = []
        self.base_url = "memory://"

    async def fetch_all(self, today: date | None = None) -> list[Task]:
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.tasks)

    async def push_all(self, tasks: Sequence[Task]) -> bool:
        self.pushed.append(tuple(tasks))
        return self.push_result
