# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from orange_time.core.controller import AppController
from orange_time.core.state import AppState
from orange_time.tasks.task_store import TaskStore

from .fakes import FIXED_TODAY, RecordingSync, make_task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="orange time",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "data" / "tasks.json",
        host="127.0.0.1",
        port=3001,
        max_body_bytes=50 * 1024 * 1024,
        api_base_url="http://testserver",
        http_timeout_seconds=2.0,
    )


@pytest.fixture()
def today() -> date:
    return FIXED_TODAY


@pytest.fixture()
def sync() -> RecordingSync:
    return RecordingSync()


@pytest.fixture()
def store(sync: RecordingSync) -> TaskStore:
    return TaskStore(on_commit=sync.on_commit)


@pytest.fixture()
def five_tasks() -> list:
    return [
        make_task("a", "Jun 12, 2026"),
        make_task("b", "Jun 5, 2026"),
        make_task("c", "Jan 3, 2026"),
        make_task("d", "Dec 31, 2025"),
        make_task("e", "Jun 05, 2026"),
    ]


@pytest.fixture()
def controller(settings: SimpleNamespace, store: TaskStore, five_tasks: list) -> AppController:
    """Controller over a loaded store; pushes are recorded by the `sync` fixture."""
    ctl = AppController(AppState(settings=settings, store=store), today=lambda: FIXED_TODAY)
    ctl.start(five_tasks)
    return ctl
