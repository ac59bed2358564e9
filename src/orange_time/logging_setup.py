# src/orange_time/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

CLIENT = "client"
SERVER = "server"

# Loggers that write from the sync thread while the REPL waits on input().
_BACKGROUND_PREFIXES = ("orange_time.persistence.",)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console rules per process.

    client: app logs pass, background sync only at WARNING+, anything else at ERROR+.
    server: app logs and werkzeug request lines pass, anything else at ERROR+.
    """

    def __init__(self, role: str = CLIENT) -> None:
        super().__init__()
        self.role = role

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith("orange_time."):
            if self.role == CLIENT and name.startswith(_BACKGROUND_PREFIXES):
                return record.levelno >= logging.WARNING
            return True

        if name.startswith("werkzeug"):
            return self.role == SERVER or record.levelno >= logging.WARNING

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/orange_time",
    role: str = CLIENT,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Console handler (filtered for `role`) plus a full DEBUG log in <log_dir>/orange_time_<role>.log.

    Client and server share a data dir, so each gets its own file. Returns the file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"orange_time_{role}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter(role))
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)

    # One INFO line per request otherwise, even in the file.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return log_file


def console_level_from_name(level_name: str) -> int:
    level = logging.getLevelName(str(level_name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
