# src/orange_time/tasks/task_api.py

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any

from .task_models import (
    DEFAULT_TITLE,
    WIRE_FIELDS,
    Category,
    DateRangeError,
    InvalidDateError,
    Priority,
    Task,
    TaskFieldError,
    TaskStatus,
    format_display_date,
    parse_display_date,
)
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_TEXT_ATTRS = frozenset({"title", "description", "content", "start_time", "end_time"})


def create_draft(*, today: date | None = None, now_ms: int | None = None) -> Task:
    """
    A fresh task for the editor. It is not stored until the first edit commits.
    """
    today = today or date.today()
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return Task(
        id=f"new-{now_ms}",
        title=DEFAULT_TITLE,
        category=Category.PERSONAL,
        date_str=format_display_date(today),
        description="",
        status=TaskStatus.TODO,
        content="",
    )


def upsert(store: TaskStore, task: Task, *, today: date | None = None) -> Task:
    """
    Single write path for create and update.

    A task that becomes Done without an end date gets today's date as its end
    date. A task that was already Done is stored as given, so its end date can
    be cleared or dropped by a later start date.
    """
    previous = store.get(task.id)
    became_done = previous is None or previous.status != TaskStatus.DONE
    if task.status == TaskStatus.DONE and became_done and not task.end_date_str:
        task = task.replace(end_date_str=format_display_date(today or date.today()))
        logger.debug("Auto-filled end date for done task id=%s", task.id)
    return store.put(task)


def remove(store: TaskStore, task_id: str) -> bool:
    return store.delete(task_id)


def _attr_for(field_name: str) -> str:
    if field_name in WIRE_FIELDS:
        return WIRE_FIELDS[field_name]
    if field_name in WIRE_FIELDS.values():
        return field_name
    raise TaskFieldError(f"Unknown task field: {field_name}")


def edit_field(task: Task, field_name: str, value: Any) -> Task:
    """
    Apply one editor change and return the updated task.

    Date rules (editor-time only):
    - a start date must parse
    - moving the start date past the current end date clears the end date
    - an end date before the start date is rejected
    - an empty end date clears it
    """
    attr = _attr_for(field_name)

    if attr == "id":
        raise TaskFieldError("Task id cannot be edited")

    if attr in _TEXT_ATTRS:
        text = "" if value is None else str(value)
        if attr in ("start_time", "end_time"):
            return task.replace(**{attr: text or None})
        return task.replace(**{attr: text})

    if attr == "category":
        try:
            return task.replace(category=Category(value))
        except ValueError:
            raise TaskFieldError(f"Unknown category: {value!r}") from None

    if attr == "status":
        try:
            return task.replace(status=TaskStatus(value))
        except ValueError:
            raise TaskFieldError(f"Unknown status: {value!r}") from None

    if attr == "priority":
        if not value:
            return task.replace(priority=None)
        try:
            return task.replace(priority=Priority(value))
        except ValueError:
            raise TaskFieldError(f"Unknown priority: {value!r}") from None

    if attr == "date_str":
        start = parse_display_date(value)
        if start is None:
            raise InvalidDateError(f"Invalid date: {value!r}")
        changes: dict[str, Any] = {"date_str": format_display_date(start)}
        if task.end_date is not None and start > task.end_date:
            changes["end_date_str"] = None
        return task.replace(**changes)

    # end_date_str
    if not value:
        return task.replace(end_date_str=None)
    end = parse_display_date(value)
    if end is None:
        raise InvalidDateError(f"Invalid date: {value!r}")
    if task.date is not None and end < task.date:
        raise DateRangeError(
            f"End date {format_display_date(end)} is before start date {task.date_str}"
        )
    return task.replace(end_date_str=format_display_date(end))
