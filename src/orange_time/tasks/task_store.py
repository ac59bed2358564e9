# src/orange_time/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date

from .task_models import Task

logger = logging.getLogger(__name__)

CommitHook = Callable[[tuple[Task, ...]], object]


def sort_key(task: Task) -> tuple[bool, date]:
    """Ascending by parsed date; unparseable dates go last."""
    return (task.date is None, task.date or date.min)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable: equal dates keep their relative order.
    return sorted(tasks, key=sort_key)


class TaskStore:
    """
    Authoritative in-memory collection of tasks for one session.

    Invariants:
    - ids are unique (put() replaces by id)
    - the sequence is always sorted by date (see sort_key)

    Every put()/delete() calls on_commit with an immutable snapshot of the whole
    collection. The hook is expected to return immediately (fire-and-forget push);
    its failures are logged and never undo the in-memory change.
    """

    def __init__(self, on_commit: CommitHook | None = None) -> None:
        self._tasks: list[Task] = []
        self._on_commit = on_commit

    def set_commit_hook(self, on_commit: CommitHook | None) -> None:
        self._on_commit = on_commit

    def __len__(self) -> int:
        return len(self._tasks)

    def load(self, tasks: Iterable[Task]) -> None:
        """Replace the contents wholesale. Does not trigger a push."""
        self._tasks = sort_tasks(tasks)
        unscheduled = sum(1 for t in self._tasks if t.date is None)
        if unscheduled:
            logger.warning("Loaded %d task(s) with unparseable dates; they sort last.", unscheduled)
        logger.info("TaskStore loaded total=%d", len(self._tasks))

    def all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def put(self, task: Task) -> Task:
        """Replace the task with the same id, or append it. Re-sorts and commits."""
        for i, t in enumerate(self._tasks):
            if t.id == task.id:
                self._tasks[i] = task
                logger.debug("Task updated id=%s", task.id)
                break
        else:
            self._tasks.append(task)
            logger.debug("Task added id=%s", task.id)

        self._tasks = sort_tasks(self._tasks)
        self._commit()
        return task

    def delete(self, task_id: str) -> bool:
        """Remove by id. A missing id leaves the collection as is but still commits."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) != before
        if removed:
            logger.debug("Task removed id=%s", task_id)
        else:
            logger.info("Task not found for removal id=%s", task_id)
        self._commit()
        return removed

    def _commit(self) -> None:
        if self._on_commit is None:
            return
        try:
            self._on_commit(tuple(self._tasks))
        except Exception:
            logger.exception("on_commit hook failed (in-memory state kept).")
