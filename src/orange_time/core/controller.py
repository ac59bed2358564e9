# src/orange_time/core/controller.py

"""
Application controller.

Single owner of AppState. Connectors (console) call into it; it calls the task
mutation API and the derivation engine, and moves the navigation state machine.
Persistence is not visible here: the store's on-commit hook pushes every change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..tasks import task_api
from ..tasks.derive import (
    ALL_CATEGORIES,
    CategoryShare,
    GroupMode,
    StatCard,
    StatusCounts,
    TimelineGroup,
    category_distribution,
    completion_percentage,
    filter_by_category,
    group_by_period,
    search_tasks,
    stat_cards,
    status_counts,
)
from ..tasks.task_models import CATEGORIES, Task
from .navigation import View
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DashboardView:
    counts: StatusCounts
    completion: int
    distribution: list[CategoryShare]
    cards: list[StatCard]


@dataclass(frozen=True, slots=True)
class TimelineView:
    category: str
    mode: GroupMode
    query: str
    groups: list[TimelineGroup]


class AppController:
    def __init__(self, state: AppState, *, today: Callable[[], date] = date.today) -> None:
        self.state = state
        self._today = today

    # ---- lifecycle ----

    def start(self, tasks: Iterable[Task]) -> None:
        self.state.store.load(tasks)

    # ---- navigation ----

    @property
    def view(self) -> View:
        return self.state.navigation.current

    def show_dashboard(self) -> None:
        self._leave_editor()
        self.state.navigation.show(View.DASHBOARD)

    def show_timeline(self) -> None:
        self._leave_editor()
        self.state.navigation.show(View.TIMELINE)

    def back(self) -> int:
        """Close the editor; returns the scroll offset to restore."""
        self._leave_editor()
        return self.state.navigation.close_editor()

    def _leave_editor(self) -> None:
        self.state.editing = None
        self.state.more_menu_open = False

    # ---- timeline filters ----

    def select_category(self, name: str) -> None:
        if name != ALL_CATEGORIES and name not in {c.name for c in CATEGORIES}:
            raise ValueError(f"Unknown category: {name!r}")
        self.state.timeline_category = name

    def set_group_mode(self, mode: GroupMode | str) -> None:
        self.state.group_mode = GroupMode(mode)

    def search(self, query: str) -> None:
        self.state.search_query = (query or "").strip()

    # ---- editor ----

    def open_task(self, task_id: str, scroll_offset: int = 0) -> Task:
        task = self.state.store.get(task_id)
        if task is None:
            raise KeyError(task_id)
        self.state.editing = task
        self.state.more_menu_open = False
        self.state.navigation.open_editor(scroll_offset)
        return task

    def create_new(self, scroll_offset: int = 0) -> Task:
        draft = task_api.create_draft(today=self._today())
        self.state.editing = draft
        self.state.more_menu_open = False
        self.state.navigation.open_editor(scroll_offset)
        logger.debug("Draft created id=%s", draft.id)
        return draft

    def edit(self, field_name: str, value: Any) -> Task:
        """Apply one field change to the editor task and commit it (first edit inserts a draft)."""
        current = self._require_editing()
        updated = task_api.edit_field(current, field_name, value)
        saved = task_api.upsert(self.state.store, updated, today=self._today())
        self.state.editing = saved
        return saved

    def delete_current(self) -> bool:
        current = self._require_editing()
        removed = task_api.remove(self.state.store, current.id)
        self.back()
        return removed

    def toggle_more_menu(self) -> bool:
        self._require_editing()
        self.state.more_menu_open = not self.state.more_menu_open
        return self.state.more_menu_open

    def _require_editing(self) -> Task:
        if not self.state.navigation.in_editor or self.state.editing is None:
            raise RuntimeError("No task is open in the editor")
        return self.state.editing

    # ---- derived views ----

    def dashboard_view(self) -> DashboardView:
        tasks = self.state.store.all()
        counts = status_counts(tasks)
        return DashboardView(
            counts=counts,
            completion=completion_percentage(counts),
            distribution=category_distribution(tasks, CATEGORIES),
            cards=stat_cards(counts),
        )

    def timeline_view(self) -> TimelineView:
        s = self.state
        tasks = filter_by_category(s.store.all(), s.timeline_category)
        tasks = search_tasks(tasks, s.search_query)
        return TimelineView(
            category=s.timeline_category,
            mode=s.group_mode,
            query=s.search_query,
            groups=group_by_period(tasks, s.group_mode),
        )
