# src/orange_time/persistence/client.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any

import httpx

from ..tasks.seed import generate_mock_tasks
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"


class PersistenceClient:
    """
    Whole-collection client for the persistence server.

    - fetch_all(): never raises; falls back to seed data when the server is
      unreachable, answers non-2xx / non-JSON / non-array, or holds no tasks.
    - push_all(): never raises; logs and returns False on failure.

    A fresh httpx.AsyncClient is opened per call, so the client can be used from
    whatever event loop runs it. Pass `transport` (e.g. httpx.MockTransport) in tests.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout, connect=min(timeout, 5.0))
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def fetch_all(self, today: date | None = None) -> list[Task]:
        try:
            async with self._client() as client:
                resp = await client.get(TASKS_PATH)
                resp.raise_for_status()
                data: Any = resp.json()
        except Exception:
            logger.exception("Failed to load tasks from %s; using seed data.", self._base_url)
            return generate_mock_tasks(today)

        if not isinstance(data, list):
            logger.warning("Unexpected tasks payload (%s); using seed data.", type(data).__name__)
            return generate_mock_tasks(today)

        if not data:
            logger.info("Storage is empty; using seed data.")
            return generate_mock_tasks(today)

        tasks: list[Task] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object task at index %d", i)
                continue
            if not item.get("id"):
                logger.warning("Skipping task without id at index %d", i)
                continue
            tasks.append(Task.from_dict(item))

        logger.info("Loaded %d task(s) from %s", len(tasks), self._base_url)
        return tasks

    async def push_all(self, tasks: Sequence[Task]) -> bool:
        payload = [t.to_dict() for t in tasks]
        try:
            async with self._client() as client:
                resp = await client.post(TASKS_PATH, json=payload)
                resp.raise_for_status()
        except Exception:
            logger.exception("Failed to save %d task(s) to %s", len(payload), self._base_url)
            return False

        logger.debug("Saved %d task(s)", len(payload))
        return True
