# src/orange_time/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.derive import ALL_CATEGORIES, GroupMode
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from .navigation import NavigationState


@dataclass
class AppState:
    # Settings kept on the state for easy access from connectors/commands.
    settings: object

    store: TaskStore
    navigation: NavigationState = field(default_factory=NavigationState)

    # Timeline filters
    timeline_category: str = ALL_CATEGORIES
    group_mode: GroupMode = GroupMode.DAY
    search_query: str = ""

    # Editor: the task being edited (a draft is not in the store until its first edit).
    editing: Task | None = None
    more_menu_open: bool = False
