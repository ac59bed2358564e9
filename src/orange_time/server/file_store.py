# src/orange_time/server/file_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The tasks file could not be read or written."""


class JsonFileStore:
    """
    One JSON document on disk: the full task array, pretty-printed.

    The payload is opaque here: whatever array the client sends is stored verbatim.
    Writes go to a temp file first and are swapped in with os.replace, so a failed
    write never leaves a truncated file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def ensure_initialized(self) -> None:
        """Create the file as [] if it does not exist yet."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.write_text("[]", "utf-8")
                logger.info("Initialized empty tasks file at %s", self._path)
        except OSError as e:
            raise StorageError(f"Cannot initialize {self._path}") from e

    def read_all(self) -> list[Any]:
        try:
            raw = self._path.read_text("utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self._path}") from e
        if not isinstance(data, list):
            raise StorageError(f"{self._path} does not hold a JSON array")
        return data

    def write_all(self, payload: list[Any]) -> None:
        with self._lock:
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
                os.replace(tmp, self._path)
            except (OSError, TypeError, ValueError) as e:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)
                raise StorageError(f"Cannot write {self._path}") from e
        logger.debug("Wrote %d task(s) to %s", len(payload), self._path)
