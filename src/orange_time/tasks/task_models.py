# src/orange_time/tasks/task_models.py

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any

DEFAULT_TITLE = "Untitled Task"

# Display format used everywhere a date is shown or persisted: "Jun 5, 2026".
_DATE_INPUT_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%b %d %Y")


class InvalidDateError(ValueError):
    """Date string that cannot be parsed as a calendar date."""


class DateRangeError(ValueError):
    """End date earlier than the start date."""


class TaskFieldError(ValueError):
    """Unknown editor field or a value outside its enumeration."""


class Category(StrEnum):
    PERSONAL = "Personal"
    LEARNING = "Learning"
    HEALTH = "Health"
    URGENT = "Urgent"
    DESIGN = "Design"
    PRODUCT = "Product"


class TaskStatus(StrEnum):
    TODO = "ToDo"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @classmethod
    def from_raw(cls, raw: Any) -> TaskStatus:
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def from_raw(cls, raw: Any) -> Priority | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class CategoryStyle:
    """Static style facets of a category (CSS class names of the web UI)."""

    name: str
    color: str
    border: str
    text: str
    bg: str


CATEGORIES: tuple[CategoryStyle, ...] = (
    CategoryStyle(
        Category.PERSONAL,
        "bg-[#f37021]",
        "border-[#f37021]/30",
        "text-[#f37021]",
        "bg-[#f37021]/10",
    ),
    CategoryStyle(Category.LEARNING, "bg-blue-500", "border-blue-200", "text-blue-700", "bg-blue-50"),
    CategoryStyle(Category.HEALTH, "bg-green-500", "border-green-200", "text-green-700", "bg-green-50"),
    CategoryStyle(Category.URGENT, "bg-red-500", "border-red-200", "text-red-700", "bg-red-50"),
    CategoryStyle(Category.DESIGN, "bg-purple-500", "border-purple-200", "text-purple-700", "bg-purple-50"),
    CategoryStyle(Category.PRODUCT, "bg-indigo-500", "border-indigo-200", "text-indigo-700", "bg-indigo-50"),
)

FALLBACK_STYLE = CategoryStyle("", "bg-slate-400", "border-slate-200", "text-slate-700", "bg-slate-50")


def category_style(name: str) -> CategoryStyle:
    for style in CATEGORIES:
        if style.name == name:
            return style
    return FALLBACK_STYLE


def parse_display_date(raw: str | None) -> date | None:
    """
    Parse a display date ("Jun 5, 2026", "Jun 05, 2026", "June 5, 2026" or ISO "2026-06-05").

    Returns None for empty or unparseable input; callers decide whether that is an error.
    """
    if not raw:
        return None
    s = raw.strip()
    for fmt in _DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def format_display_date(d: date) -> str:
    return f"{d:%b} {d.day}, {d.year}"


# Wire (JSON) key -> dataclass attribute.
WIRE_FIELDS: dict[str, str] = {
    "id": "id",
    "title": "title",
    "category": "category",
    "dateStr": "date_str",
    "endDateStr": "end_date_str",
    "startTime": "start_time",
    "endTime": "end_time",
    "description": "description",
    "status": "status",
    "priority": "priority",
    "content": "content",
}

_OPTIONAL_ATTRS = frozenset({"end_date_str", "start_time", "end_time", "priority"})


@dataclass(slots=True)
class Task:
    id: str
    title: str
    category: str
    date_str: str
    description: str
    status: TaskStatus

    end_date_str: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    priority: Priority | None = None
    content: str = ""

    # Parsed once from the display strings; never persisted.
    date: date | None = field(default=None, init=False, compare=False, repr=False)
    end_date: date | None = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.date = parse_display_date(self.date_str)
        self.end_date = parse_display_date(self.end_date_str)

    @property
    def is_scheduled(self) -> bool:
        return self.date is not None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for wire, attr in WIRE_FIELDS.items():
            value = getattr(self, attr)
            if value is None and attr in _OPTIONAL_ATTRS:
                continue
            out[wire] = str(value) if isinstance(value, StrEnum) else value
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        if not isinstance(raw, dict):
            raise TypeError(f"Task must be a JSON object, got {type(raw).__name__}")

        title = raw.get("title")
        return cls(
            id=str(raw.get("id") or ""),
            title=DEFAULT_TITLE if title is None else str(title),
            category=coerce_category(raw.get("category")),
            date_str=str(raw.get("dateStr") or ""),
            description=str(raw.get("description") or ""),
            status=TaskStatus.from_raw(raw.get("status")),
            end_date_str=_opt_str(raw.get("endDateStr")),
            start_time=_opt_str(raw.get("startTime")),
            end_time=_opt_str(raw.get("endTime")),
            priority=Priority.from_raw(raw.get("priority")),
            content=str(raw.get("content") or ""),
        )

    def replace(self, **changes: Any) -> Task:
        return dataclasses.replace(self, **changes)


def coerce_category(raw: Any) -> str:
    """Known names become Category members; unknown names are kept verbatim."""
    if not raw:
        return Category.PERSONAL
    try:
        return Category(raw)
    except ValueError:
        return str(raw)


def _opt_str(v: Any) -> str | None:
    if v is None or v == "":
        return None
    return str(v)
