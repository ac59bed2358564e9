# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from orange_time.tasks.task_models import (
    DEFAULT_TITLE,
    Category,
    Priority,
    Task,
    TaskStatus,
    category_style,
    format_display_date,
    parse_display_date,
)


@pytest.mark.parametrize(
    "raw",
    ["Jun 5, 2026", "Jun 05, 2026", "June 5, 2026", "2026-06-05", "  Jun 5, 2026 "],
)
def test_parse_display_date_accepts_known_formats(raw: str) -> None:
    assert parse_display_date(raw) == date(2026, 6, 5)


@pytest.mark.parametrize("raw", [None, "", "someday", "Jun 31, 2026", "31/06/2026"])
def test_parse_display_date_returns_none_for_garbage(raw) -> None:
    assert parse_display_date(raw) is None


def test_format_display_date_has_no_zero_padding() -> None:
    assert format_display_date(date(2026, 6, 5)) == "Jun 5, 2026"
    assert format_display_date(date(2025, 12, 31)) == "Dec 31, 2025"


def test_from_dict_fills_defaults() -> None:
    t = Task.from_dict({"id": "x", "dateStr": "Jun 5, 2026"})

    assert t.title == DEFAULT_TITLE
    assert t.category == Category.PERSONAL
    assert t.status == TaskStatus.TODO
    assert t.priority is None
    assert t.description == ""
    assert t.content == ""
    assert t.date == date(2026, 6, 5)


def test_from_dict_normalizes_bad_enums_but_keeps_unknown_category() -> None:
    t = Task.from_dict(
        {"id": "x", "dateStr": "Jun 5, 2026", "status": "Blocked", "priority": "Urgent!", "category": "Travel"}
    )
    assert t.status == TaskStatus.TODO
    assert t.priority is None
    assert t.category == "Travel"


def test_from_dict_rejects_non_objects() -> None:
    with pytest.raises(TypeError):
        Task.from_dict(["not", "a", "task"])  # type: ignore[arg-type]


def test_to_dict_uses_wire_names_and_omits_missing_optionals() -> None:
    t = Task(
        id="t1",
        title="Write notes",
        category=Category.LEARNING,
        date_str="Jun 5, 2026",
        description="d",
        status=TaskStatus.IN_PROGRESS,
        priority=Priority.HIGH,
    )
    out = t.to_dict()

    assert out == {
        "id": "t1",
        "title": "Write notes",
        "category": "Learning",
        "dateStr": "Jun 5, 2026",
        "description": "d",
        "status": "In Progress",
        "priority": "High",
        "content": "",
    }
    assert Task.from_dict(out) == t


def test_parsed_dates_follow_replace() -> None:
    t = Task.from_dict({"id": "x", "dateStr": "Jun 5, 2026", "endDateStr": "Jun 7, 2026"})
    assert t.end_date == date(2026, 6, 7)

    moved = t.replace(date_str="Jul 1, 2026", end_date_str=None)
    assert moved.date == date(2026, 7, 1)
    assert moved.end_date is None
    assert t.date == date(2026, 6, 5)


def test_unparseable_date_is_unscheduled() -> None:
    t = Task.from_dict({"id": "x", "dateStr": "soon"})
    assert t.date is None
    assert not t.is_scheduled


def test_category_style_lookup_and_fallback() -> None:
    assert category_style("Health").color == "bg-green-500"
    assert category_style("Travel").color == "bg-slate-400"


def test_from_dict_keeps_an_explicit_empty_title() -> None:
    t = Task.from_dict({"id": "x", "title": "", "dateStr": "Jun 5, 2026"})
    assert t.title == ""
    assert Task.from_dict(t.to_dict()).title == ""
