# src/orange_time/tasks/derive.py

"""
Derived views over a snapshot of the task collection.

Everything here is pure: inputs are never mutated and no state is kept.
The dashboard uses status_counts / completion_percentage / category_distribution /
stat_cards; the timeline uses filter_by_category / search_tasks / group_by_period.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .task_models import CATEGORIES, CategoryStyle, Task, TaskStatus
from .task_store import sort_tasks

ALL_CATEGORIES = "All Categories"
UNSCHEDULED = "Unscheduled"


class GroupMode(StrEnum):
    DAY = "Day"
    MONTH = "Month"


@dataclass(frozen=True, slots=True)
class StatusCounts:
    done: int
    in_progress: int
    todo: int
    total: int


@dataclass(frozen=True, slots=True)
class CategoryShare:
    name: str
    count: int
    percent: float


@dataclass(frozen=True, slots=True)
class TimelineGroup:
    key: str
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class StatCard:
    title: str
    value: str
    subtext: str


def status_counts(tasks: Sequence[Task]) -> StatusCounts:
    done = in_progress = todo = 0
    for t in tasks:
        if t.status == TaskStatus.DONE:
            done += 1
        elif t.status == TaskStatus.IN_PROGRESS:
            in_progress += 1
        else:
            todo += 1
    return StatusCounts(done=done, in_progress=in_progress, todo=todo, total=len(tasks))


def completion_percentage(counts: StatusCounts) -> int:
    if counts.total <= 0:
        return 0
    # Round half up, in integers.
    return (200 * counts.done + counts.total) // (2 * counts.total)


def category_distribution(
    tasks: Sequence[Task],
    categories: Iterable[CategoryStyle] = CATEGORIES,
) -> list[CategoryShare]:
    total = len(tasks)
    shares = []
    for cat in categories:
        count = sum(1 for t in tasks if t.category == cat.name)
        percent = (count / total) * 100 if total > 0 else 0.0
        shares.append(CategoryShare(name=str(cat.name), count=count, percent=percent))
    # Stable: equal counts keep the configured order.
    return sorted(shares, key=lambda s: -s.count)


def stat_cards(counts: StatusCounts) -> list[StatCard]:
    pct = completion_percentage(counts)
    return [
        StatCard("Total Tasks", f"{counts.total:02d}", "Across all categories"),
        StatCard("To Do", f"{counts.todo:02d}", "Pending actions"),
        StatCard("In Progress", f"{counts.in_progress:02d}", "Currently active"),
        StatCard("Completed", f"{counts.done:02d}", f"{pct}% completion rate"),
    ]


def filter_by_category(tasks: Sequence[Task], selector: str) -> list[Task]:
    if selector == ALL_CATEGORIES:
        return list(tasks)
    return [t for t in tasks if t.category == selector]


def search_tasks(tasks: Sequence[Task], query: str) -> list[Task]:
    """Case-insensitive substring match over title, category, dates and description."""
    q = (query or "").strip().lower()
    if not q:
        return list(tasks)

    def haystack(t: Task) -> str:
        parts = [t.title, str(t.category), t.date_str, t.end_date_str or "", t.description]
        return "\n".join(parts).lower()

    return [t for t in tasks if q in haystack(t)]


def _group_key(task: Task, mode: GroupMode) -> tuple[str, date | None]:
    if task.date is None:
        return UNSCHEDULED, None
    if mode == GroupMode.MONTH:
        d = task.date
        return f"{d:%B}, {d.year}", d.replace(day=1)
    return task.date_str, task.date


def group_by_period(tasks: Sequence[Task], mode: GroupMode | str = GroupMode.DAY) -> list[TimelineGroup]:
    """
    Bucket tasks by day (raw dateStr) or by month ("June, 2026").

    Groups come out in ascending order of the first date each key stands for;
    tasks inside a group keep date order. Tasks without a parseable date form
    a final "Unscheduled" group.
    """
    mode = GroupMode(mode)

    buckets: dict[str, list[Task]] = {}
    starts: dict[str, date | None] = {}
    for t in sort_tasks(tasks):
        key, start = _group_key(t, mode)
        if key not in buckets:
            buckets[key] = []
            starts[key] = start
        buckets[key].append(t)

    keys = sorted(buckets, key=lambda k: (starts[k] is None, starts[k] or date.min))
    return [TimelineGroup(key=k, tasks=tuple(buckets[k])) for k in keys]
