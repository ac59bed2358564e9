# tests/test_controller.py

from __future__ import annotations

import pytest

from orange_time.core.controller import AppController
from orange_time.core.navigation import View
from orange_time.tasks.derive import ALL_CATEGORIES, GroupMode
from orange_time.tasks.task_models import DateRangeError, TaskStatus

from .fakes import RecordingSync, make_task


def test_new_task_is_stored_on_first_edit(controller: AppController, sync: RecordingSync) -> None:
    controller.show_timeline()
    draft = controller.create_new(scroll_offset=300)

    assert controller.view == View.EDITOR
    assert controller.state.store.get(draft.id) is None
    assert sync.snapshots == []

    saved = controller.edit("title", "Buy groceries")

    assert saved.title == "Buy groceries"
    assert controller.state.store.get(draft.id) == saved
    assert len(sync.snapshots) == 1
    assert draft.id in [t.id for t in sync.last]

    assert controller.back() == 300
    assert controller.view == View.TIMELINE
    assert controller.state.editing is None


def test_every_edit_pushes_the_full_collection(controller: AppController, sync: RecordingSync) -> None:
    controller.open_task("a")
    controller.edit("status", "In Progress")
    controller.edit("description", "changed")

    assert len(sync.snapshots) == 2
    assert all(len(s) == 5 for s in sync.snapshots)


def test_marking_done_auto_fills_end_date(controller: AppController) -> None:
    controller.open_task("c")
    saved = controller.edit("status", "Done")

    assert saved.status == TaskStatus.DONE
    assert saved.end_date_str == "Mar 1, 2026"
    assert controller.state.editing.end_date_str == "Mar 1, 2026"


def test_rejected_edit_leaves_store_untouched(controller: AppController, sync: RecordingSync) -> None:
    controller.open_task("a")
    with pytest.raises(DateRangeError):
        controller.edit("endDateStr", "Jan 1, 2020")
    assert controller.state.store.get("a").end_date_str is None
    assert sync.snapshots == []


def test_delete_from_editor_returns_to_previous_view(controller: AppController, sync: RecordingSync) -> None:
    controller.show_timeline()
    controller.open_task("b", scroll_offset=42)
    controller.toggle_more_menu()

    assert controller.delete_current() is True

    assert controller.view == View.TIMELINE
    assert controller.state.store.get("b") is None
    assert controller.state.more_menu_open is False
    assert len(sync.last) == 4


def test_deleting_an_unsaved_draft_still_pushes(controller: AppController, sync: RecordingSync) -> None:
    controller.create_new()
    assert controller.delete_current() is False
    assert len(sync.last) == 5
    assert controller.view == View.DASHBOARD


def test_open_unknown_task_raises(controller: AppController) -> None:
    with pytest.raises(KeyError):
        controller.open_task("missing")
    assert controller.view == View.DASHBOARD


def test_editor_actions_need_an_open_task(controller: AppController) -> None:
    with pytest.raises(RuntimeError):
        controller.edit("title", "x")
    with pytest.raises(RuntimeError):
        controller.delete_current()


def test_leaving_editor_via_nav_drops_the_draft(controller: AppController) -> None:
    controller.create_new()
    controller.show_dashboard()
    assert controller.view == View.DASHBOARD
    assert controller.state.editing is None


def test_dashboard_view(controller: AppController) -> None:
    controller.open_task("a")
    controller.edit("status", "Done")

    view = controller.dashboard_view()

    assert view.counts.total == 5
    assert view.counts.done == 1
    assert view.completion == 20
    assert view.distribution[0].name == "Personal"
    assert view.distribution[0].count == 5


def test_timeline_view_applies_category_search_and_mode(controller: AppController) -> None:
    view = controller.timeline_view()
    assert view.category == ALL_CATEGORIES
    assert [g.key for g in view.groups] == ["Dec 31, 2025", "Jan 3, 2026", "Jun 5, 2026", "Jun 05, 2026", "Jun 12, 2026"]

    controller.set_group_mode("Month")
    assert [g.key for g in controller.timeline_view().groups] == ["December, 2025", "January, 2026", "June, 2026"]

    controller.search("Task a")
    view = controller.timeline_view()
    assert view.mode == GroupMode.MONTH
    assert [t.id for g in view.groups for t in g.tasks] == ["a"]

    controller.search("")
    controller.select_category("Health")
    assert controller.timeline_view().groups == []


def test_select_unknown_category_raises(controller: AppController) -> None:
    with pytest.raises(ValueError):
        controller.select_category("Travel")


def test_done_task_date_edits_keep_end_on_or_after_start(controller: AppController) -> None:
    controller.start([make_task("f", "Feb 1, 2026", status=TaskStatus.DONE, end_date_str="Feb 2, 2026")])
    controller.open_task("f")

    moved = controller.edit("dateStr", "Jun 20, 2026")

    assert moved.date_str == "Jun 20, 2026"
    assert moved.end_date_str is None
    assert controller.state.store.get("f").end_date_str is None

    ended = controller.edit("endDateStr", "Jun 22, 2026")
    assert ended.end_date >= ended.date

    with pytest.raises(DateRangeError):
        controller.edit("endDateStr", "Jun 19, 2026")
    assert controller.state.store.get("f").end_date_str == "Jun 22, 2026"


def test_done_task_end_date_can_be_cleared(controller: AppController, sync: RecordingSync) -> None:
    controller.start([make_task("f", "Feb 1, 2026", status=TaskStatus.DONE, end_date_str="Feb 2, 2026")])
    controller.open_task("f")

    cleared = controller.edit("endDateStr", "")

    assert cleared.end_date_str is None
    assert controller.state.store.get("f").end_date_str is None
    assert sync.last[0].end_date_str is None


def test_reopening_done_status_fills_end_date_again(controller: AppController) -> None:
    controller.start([make_task("f", "Feb 1, 2026", status=TaskStatus.DONE)])
    controller.open_task("f")

    controller.edit("status", "In Progress")
    assert controller.edit("status", "Done").end_date_str == "Mar 1, 2026"
