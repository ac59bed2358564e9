# tests/test_navigation.py

from __future__ import annotations

import pytest

from orange_time.core.navigation import NavigationState, View


def test_initial_state_is_dashboard() -> None:
    nav = NavigationState()
    assert nav.current == View.DASHBOARD
    assert not nav.in_editor


def test_dashboard_timeline_switch_directly() -> None:
    nav = NavigationState()
    nav.show(View.TIMELINE)
    assert nav.current == View.TIMELINE
    nav.show("dashboard")
    assert nav.current == View.DASHBOARD


def test_editor_cannot_be_entered_with_show() -> None:
    with pytest.raises(ValueError):
        NavigationState().show(View.EDITOR)


def test_editor_round_trip_restores_origin_and_scroll() -> None:
    nav = NavigationState()
    nav.show(View.TIMELINE)

    nav.open_editor(scroll_offset=640)

    assert nav.current == View.EDITOR
    assert nav.previous == View.TIMELINE
    assert nav.scroll_offset() == 0

    assert nav.close_editor() == 640
    assert nav.current == View.TIMELINE


def test_reopening_inside_editor_keeps_first_origin() -> None:
    nav = NavigationState()
    nav.show(View.TIMELINE)
    nav.open_editor(scroll_offset=120)
    nav.open_editor(scroll_offset=999)

    assert nav.previous == View.TIMELINE
    assert nav.close_editor() == 120


def test_close_editor_outside_editor_is_harmless() -> None:
    nav = NavigationState()
    assert nav.close_editor() == 0
    assert nav.current == View.DASHBOARD
