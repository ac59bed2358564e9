# src/orange_time/cli/main.py

"""
CLI entrypoints.

orange-time          console client: loads tasks from the server (or seed data),
                     runs the REPL, pushes every change in the background.
orange-time-server   persistence server: GET/POST /api/tasks over one JSON file.
"""

from __future__ import annotations

import logging
import signal

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import CLIENT, SERVER, console_level_from_name, setup_logging
from ..server.app import create_app
from .bootstrap import create_client_app, ensure_local_dirs, shutdown_client_app

logger = logging.getLogger(__name__)


def _setup(settings, role: str) -> None:
    ensure_local_dirs(settings)
    setup_logging(
        log_dir=settings.data_dir,
        role=role,
        console_level=console_level_from_name(settings.log_level),
    )


def main() -> None:
    settings = get_settings()
    _setup(settings, CLIENT)
    logger.info("Starting %s...", settings.app_name)

    app = create_client_app(settings=settings)
    try:
        run_console_loop(app.controller)
    finally:
        shutdown_client_app(app)
        logger.info("Bye.")


def serve() -> None:
    settings = get_settings()
    _setup(settings, SERVER)

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except Exception:
        # Some platforms may not support SIGTERM.
        pass

    app = create_app(settings.tasks_file, max_body_bytes=settings.max_body_bytes)
    logger.info("Server running on http://%s:%d (data=%s)", settings.host, settings.port, settings.tasks_file)
    try:
        app.run(host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        pass
    logger.info("Server stopped.")


if __name__ == "__main__":
    main()
