# src/orange_time/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (client and server read the same layer).
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "ORANGE"

DEFAULT_PORT = 3001


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_file: Path

    # ---- Persistence server ----
    host: str
    port: int
    max_body_bytes: int

    # ---- Persistence client ----
    api_base_url: str
    http_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "orange time") or "orange time"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/orange_time"))
        tasks_file = _env_path(_k("TASKS_FILE"), data_dir / "tasks.json")

        host = _env(_k("HOST"), "127.0.0.1")
        port = _env_int(_k("PORT"), DEFAULT_PORT)
        max_body_mb = _env_int(_k("MAX_BODY_MB"), 50)

        # Client talks to the local server by default.
        api_base_url = _env(_k("API_BASE_URL"), f"http://127.0.0.1:{port}").rstrip("/")
        http_timeout_seconds = _env_float(_k("HTTP_TIMEOUT_SECONDS"), 10.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_file=tasks_file,
            host=host,
            port=port,
            max_body_bytes=max(1, max_body_mb) * 1024 * 1024,
            api_base_url=api_base_url,
            http_timeout_seconds=max(0.5, http_timeout_seconds),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
