# src/orange_time/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_current
from ..core.controller import AppController

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(controller: AppController, line: str, emit: Callable[[str], None] | None = None) -> str:
    """One REPL step: slash commands go to the registry, plain text is a search."""
    line = line.strip()
    if not line:
        return render_current(controller)

    try:
        reply = command_registry.handle(controller, line, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    controller.search(line)
    controller.show_timeline()
    return render_current(controller)


def run_console_loop(controller: AppController, *, prompt: str = ">>> ") -> None:
    app_name = str(getattr(controller.state.settings, "app_name", "orange time"))
    logger.info("Console connector started.")
    _print_ts(f"[{app_name.upper()}] Use /help for commands, /exit to quit. Plain text searches the timeline.\n")
    print(render_current(controller))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        print(handle_line(controller, user_input, emit=emit))
        print()

    logger.info("Console connector finished.")
