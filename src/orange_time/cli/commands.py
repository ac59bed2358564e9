# src/orange_time/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.controller import AppController, DashboardView, TimelineView
from ..core.navigation import View
from ..tasks.derive import ALL_CATEGORIES, GroupMode
from ..tasks.task_models import WIRE_FIELDS, DateRangeError, InvalidDateError, Task, TaskFieldError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppController, list[str]], str]
CommandHandler3 = Callable[[AppController, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /open, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        controller: AppController,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(controller, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(controller, args)
        except (TaskFieldError, InvalidDateError, DateRangeError) as e:
            return f"Rejected: {e}"
        except (KeyError, ValueError, RuntimeError) as e:
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_dashboard(view: DashboardView) -> str:
    lines = ["Dashboard"]
    lines.append("  " + "  |  ".join(f"{c.title}: {c.value}" for c in view.cards))
    lines.append(f"  Completion: {view.completion}%")
    lines.append("  Categories:")
    for share in view.distribution:
        bar = "#" * int(round(share.percent / 5))
        lines.append(f"    {share.name:<9} {share.count:>3}  {share.percent:5.1f}%  {bar}")
    return "\n".join(lines)


def _task_line(t: Task) -> str:
    dates = t.date_str + (f" - {t.end_date_str}" if t.end_date_str else "")
    priority = t.priority or "Low"
    return f"    [{t.status}] {t.title}  ({t.category}, {priority}, {dates})  id={t.id}"


def render_timeline(view: TimelineView) -> str:
    header = f"Timeline ({view.mode}, {view.category}"
    if view.query:
        header += f", search={view.query!r}"
    header += ")"
    lines = [header]
    if not view.groups:
        lines.append("  No tasks.")
    for group in view.groups:
        lines.append(f"  {group.key}")
        lines.extend(_task_line(t) for t in group.tasks)
    return "\n".join(lines)


def render_editor(task: Task, *, saved: bool) -> str:
    lines = [f"Editing {task.id}" + ("" if saved else " (draft, not saved yet)")]
    for wire, attr in WIRE_FIELDS.items():
        if wire == "id":
            continue
        value = getattr(task, attr)
        lines.append(f"  {wire:<12} {'' if value is None else value}")
    return "\n".join(lines)


def render_current(controller: AppController) -> str:
    state = controller.state
    if controller.view == View.EDITOR and state.editing is not None:
        saved = state.store.get(state.editing.id) is not None
        return render_editor(state.editing, saved=saved)
    if controller.view == View.TIMELINE:
        return render_timeline(controller.timeline_view())
    return render_dashboard(controller.dashboard_view())


# ---- handlers ----


def cmd_help(controller: AppController, args: list[str]) -> str:
    return registry.build_help()


def cmd_show(controller: AppController, args: list[str]) -> str:
    return render_current(controller)


def cmd_dashboard(controller: AppController, args: list[str]) -> str:
    controller.show_dashboard()
    return render_current(controller)


def cmd_timeline(controller: AppController, args: list[str]) -> str:
    controller.show_timeline()
    return render_current(controller)


def cmd_category(controller: AppController, args: list[str]) -> str:
    """
    /category          -> show current filter
    /category all      -> all categories
    /category Health   -> only Health tasks
    """
    if not args:
        return f"Category filter: {controller.state.timeline_category}"
    name = " ".join(args)
    if name.lower() in ("all", ALL_CATEGORIES.lower()):
        name = ALL_CATEGORIES
    else:
        name = name.capitalize()
    controller.select_category(name)
    controller.show_timeline()
    return render_current(controller)


def cmd_mode(controller: AppController, args: list[str]) -> str:
    if not args:
        return f"Grouping: {controller.state.group_mode}. Use /mode day or /mode month."
    controller.set_group_mode(args[0].capitalize())
    controller.show_timeline()
    return render_current(controller)


def cmd_search(controller: AppController, args: list[str]) -> str:
    controller.search(" ".join(args))
    controller.show_timeline()
    return render_current(controller)


def cmd_new(controller: AppController, args: list[str]) -> str:
    controller.create_new()
    return render_current(controller)


def cmd_open(controller: AppController, args: list[str]) -> str:
    if not args:
        return "Usage: /open <task id>"
    try:
        controller.open_task(args[0])
    except KeyError:
        return f"No task with id={args[0]}."
    return render_current(controller)


def cmd_set(
    controller: AppController,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /set <field> <value...>   e.g. /set status In Progress, /set dateStr Jun 5, 2026
    """
    if not args:
        return "Usage: /set <field> <value>. Fields: " + ", ".join(k for k in WIRE_FIELDS if k != "id")
    field_name, value = args[0], " ".join(args[1:])
    controller.edit(field_name, value)
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Saved {field_name}.")
    return render_current(controller)


def cmd_delete(controller: AppController, args: list[str]) -> str:
    task_id = controller.state.editing.id if controller.state.editing else None
    removed = controller.delete_current()
    note = f"Deleted {task_id}." if removed else f"{task_id} was never saved; nothing to delete."
    return note + "\n" + render_current(controller)


def cmd_back(controller: AppController, args: list[str]) -> str:
    controller.back()
    return render_current(controller)


def cmd_status(controller: AppController, args: list[str]) -> str:
    s = controller.state
    api = getattr(s.settings, "api_base_url", "?")
    return (
        "Status:\n"
        f"  View: {controller.view}\n"
        f"  Tasks: {len(s.store)}\n"
        f"  API: {api}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("show", cmd_show, help_text="Render the current view.", aliases=["ls"])
registry.register("dashboard", cmd_dashboard, help_text="Show the dashboard.", aliases=["d"])
registry.register("timeline", cmd_timeline, help_text="Show the timeline.", aliases=["t"])
registry.register("category", cmd_category, help_text="Filter the timeline: /category all | /category Health.")
registry.register("mode", cmd_mode, help_text="Group the timeline: /mode day | /mode month.")
registry.register("search", cmd_search, help_text="Search title/category/dates: /search <text>.")
registry.register("new", cmd_new, help_text="Open the editor on a new task.")
registry.register("open", cmd_open, help_text="Open a task in the editor: /open <id>.")
registry.register("set", cmd_set, help_text="Edit a field of the open task: /set <field> <value>.")
registry.register("delete", cmd_delete, help_text="Delete the task open in the editor.")
registry.register("back", cmd_back, help_text="Leave the editor.", aliases=["b"])
registry.register("status", cmd_status, help_text="Show view, task count and API address.")
