# src/orange_time/persistence/sync.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Future, wait
from datetime import date

from ..core.ports import TaskSource
from ..tasks.seed import generate_mock_tasks
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class BackgroundSync:
    """
    Runs the persistence client on its own event loop in a daemon thread.

    Why a thread:
    - the console REPL is blocking (input()),
    - pushes must not block the caller (fire-and-forget after every mutation).

    on_commit() is the TaskStore hook: it schedules a push of the snapshot and
    returns at once. Pushes are not ordered relative to each other; whichever
    completes last wins on the server.
    """

    def __init__(self, client: TaskSource) -> None:
        self._client = client
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._pending: set[Future] = set()
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._loop is not None and self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return

        ready = threading.Event()
        holder: dict[str, asyncio.AbstractEventLoop] = {}

        def runner() -> None:
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)
            holder["loop"] = loop
            ready.set()
            try:
                loop.run_forever()
            finally:
                with contextlib.suppress(Exception):
                    loop.close()

        t = threading.Thread(target=runner, name="orange-time-sync", daemon=True)
        t.start()
        ready.wait(timeout=5.0)

        loop = holder.get("loop")
        if loop is None:
            raise RuntimeError("Sync thread did not initialize its event loop")

        self._loop = loop
        self._thread = t
        logger.info("Background sync started (api=%s).", getattr(self._client, "base_url", "?"))

    def stop(self, timeout: float = 5.0) -> None:
        loop, thread = self._loop, self._thread
        if loop is None or thread is None:
            return
        try:
            loop.call_soon_threadsafe(loop.stop)
        except Exception:
            logger.debug("Failed to signal sync loop stop.", exc_info=True)
        thread.join(timeout=timeout)
        self._loop = None
        self._thread = None
        logger.info("Background sync stopped.")

    def load_initial(self, *, timeout: float = 30.0, today: date | None = None) -> list[Task]:
        """Blocking initial fetch (startup only). Falls back to seed data on any failure."""
        if self._loop is None:
            raise RuntimeError("BackgroundSync.start() must be called first")
        fut = asyncio.run_coroutine_threadsafe(self._client.fetch_all(today), self._loop)
        try:
            return fut.result(timeout=timeout)
        except Exception:
            fut.cancel()
            logger.exception("Initial load did not complete; using seed data.")
            return generate_mock_tasks(today)

    def on_commit(self, snapshot: Sequence[Task]) -> Future | None:
        if self._loop is None:
            logger.warning("Sync not running; %d task(s) not pushed.", len(snapshot))
            return None

        fut = asyncio.run_coroutine_threadsafe(self._client.push_all(tuple(snapshot)), self._loop)
        with self._lock:
            self._pending.add(fut)
        fut.add_done_callback(self._on_push_done)
        return fut

    def _on_push_done(self, fut: Future) -> None:
        with self._lock:
            self._pending.discard(fut)
        if fut.cancelled():
            logger.debug("Push cancelled.")
            return
        exc = fut.exception()
        if exc is not None:
            logger.error("Push crashed: %r", exc)
        elif fut.result() is False:
            logger.warning("Push failed; in-memory state kept until the next commit.")

    def drain(self, timeout: float = 5.0) -> bool:
        """Wait for in-flight pushes. Returns False if some did not finish in time."""
        with self._lock:
            pending = list(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        if not_done:
            logger.warning("%d push(es) still in flight at shutdown.", len(not_done))
        return not not_done
