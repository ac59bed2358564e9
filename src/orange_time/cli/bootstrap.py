# src/orange_time/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, background sync and controller together,
- loads the initial collection (server data or seed fallback).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import get_settings
from ..core.controller import AppController
from ..core.ports import TaskSource
from ..core.state import AppState
from ..persistence.client import PersistenceClient
from ..persistence.sync import BackgroundSync
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


@dataclass
class ClientApp:
    controller: AppController
    sync: BackgroundSync

    @property
    def state(self) -> AppState:
        return self.controller.state


def create_client_app(*, settings=None, client: TaskSource | None = None) -> ClientApp:
    """
    Build the console client: start the sync loop, fetch the collection, wire the commit hook.

    Keeping settings/client injectable makes this testable without a real server.
    """
    if settings is None:
        settings = get_settings()

    if client is None:
        client = PersistenceClient(
            settings.api_base_url,
            timeout=settings.http_timeout_seconds,
        )

    sync = BackgroundSync(client)
    sync.start()

    # The hook is attached after the initial load so loading never pushes.
    store = TaskStore()
    state = AppState(settings=settings, store=store)
    controller = AppController(state)
    controller.start(sync.load_initial(timeout=settings.http_timeout_seconds * 3))
    store.set_commit_hook(sync.on_commit)

    logger.info("Client ready with %d task(s).", len(store))
    return ClientApp(controller=controller, sync=sync)


def shutdown_client_app(app: ClientApp) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        app.sync.drain(timeout=5.0)
    except Exception:
        logger.exception("Failed to drain pending pushes.")
    try:
        app.sync.stop()
    except Exception:
        logger.debug("Sync stop failed.", exc_info=True)
