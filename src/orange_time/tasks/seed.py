# src/orange_time/tasks/seed.py

"""
Deterministic mock data used when storage is empty or unreachable.

Same input date -> same collection (ids, titles, dates, statuses).
"""

from __future__ import annotations

from datetime import date, timedelta

from .task_models import Category, Priority, Task, TaskStatus, format_display_date
from .task_store import sort_tasks

_SEED_CATEGORIES = (Category.PERSONAL, Category.LEARNING, Category.HEALTH, Category.URGENT)
_VERBS = ("Review", "Analyze", "Create")
_OBJECTS = ("Reports", "Design", "Code")
_STATUSES = (TaskStatus.DONE, TaskStatus.IN_PROGRESS, TaskStatus.TODO)


def _clock(hour: int) -> str:
    h12 = hour - 12 if hour > 12 else hour
    return f"{h12}:00 {'PM' if hour >= 12 else 'AM'}"


def _generated(today: date) -> list[Task]:
    tasks: list[Task] = []
    for cat in _SEED_CATEGORIES:
        for i in range(3):
            day = today + timedelta(days=i * 3)
            hour = 9 + i
            tasks.append(
                Task(
                    id=f"{cat}-{i}",
                    title=f"{cat} Task {i + 1}: {_VERBS[i % 3]} {_OBJECTS[i % 3]}",
                    category=cat,
                    date_str=format_display_date(day),
                    end_date_str=format_display_date(day + timedelta(days=2)),
                    start_time=_clock(hour),
                    end_time=_clock(hour + 1),
                    description=f"This is a generated description for {cat} task number {i + 1}.",
                    status=_STATUSES[i % 3],
                    priority=Priority.HIGH if i % 3 == 0 else Priority.MEDIUM,
                    content=(
                        f"Detailed notes for {cat} Task {i + 1}.\n\n"
                        "Ensure the following steps are completed:\n"
                        "- Initial assessment\n"
                        "- Execution phase\n"
                        "- Review and finalize"
                    ),
                )
            )
    return tasks


def _june_2026() -> list[Task]:
    return [
        Task(
            id="june-26-1",
            title="Summer Product Launch v2.0",
            category=Category.PRODUCT,
            date_str="Jun 05, 2026",
            description="Official release of the new mobile application including new AI features.",
            status=TaskStatus.TODO,
            priority=Priority.HIGH,
            content="Launch Checklist:\n1. App Store Submission\n2. Press Release\n3. Social Media Campaign",
        ),
        Task(
            id="june-26-2",
            title="Advanced UX Workshop",
            category=Category.DESIGN,
            date_str="Jun 12, 2026",
            description="Attending the 3-day workshop on micro-interactions and accessibility.",
            status=TaskStatus.TODO,
            priority=Priority.MEDIUM,
            content="Bring portfolio for review.",
        ),
        Task(
            id="june-26-3",
            title="Annual Health Checkup",
            category=Category.HEALTH,
            date_str="Jun 15, 2026",
            description="Full body checkup at City Medical Center.",
            status=TaskStatus.TODO,
            priority=Priority.HIGH,
            content="Fasting required for 12 hours.",
        ),
        Task(
            id="june-26-4",
            title="Rust Programming Masterclass",
            category=Category.LEARNING,
            date_str="Jun 20, 2026",
            description="Start of the 4-week intensive Rust systems programming course.",
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.MEDIUM,
            content="Module 1: Ownership and Borrowing",
        ),
        Task(
            id="june-26-5",
            title="Server Migration",
            category=Category.URGENT,
            date_str="Jun 28, 2026",
            description="Migrating legacy database to the new cloud cluster.",
            status=TaskStatus.TODO,
            priority=Priority.HIGH,
            content="Ensure backup is completed before starting.",
        ),
    ]


def generate_mock_tasks(today: date | None = None) -> list[Task]:
    """12 generated tasks around `today` plus five fixed June 2026 tasks, sorted by date."""
    today = today or date.today()
    return sort_tasks(_generated(today) + _june_2026())
