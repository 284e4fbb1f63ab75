# src/taskorder/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_codec import parse_tasks
from ..tasks.task_errors import TaskOrderError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Commands that take the rest of the line verbatim as a single argument.
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if raw_args:
            self._raw.update([key, *(a.lower() for a in aliases)])

    def handle(
        self,
        state: AppState,
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
        if name in self._raw:
            rest = line[1:].split(None, 1)[1:]
            args = [rest[0].strip()] if rest else []

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskOrderError as e:
            logger.info("/%s refused: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    missing = state.registry.missing_dependencies()
    lines = [
        "Status:",
        f"  Tasks: {len(state.registry)}",
        f"  Saved tasks file: {getattr(settings, 'tasks_path', '?')}",
        f"  Execution log: {getattr(settings, 'execution_log_path', '?')}",
    ]
    if missing:
        lines.append("  Undefined dependencies:")
        for name, deps in missing.items():
            lines.append(f"    {name} -> {', '.join(deps)}")
    return "\n".join(lines)


def cmd_add(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /add <name> <priority> <deadline> [deps]
    deps: comma-separated names or "none" (default).
    """
    if len(args) < 3:
        return "Usage: /add <name> <priority> <deadline> [dep1,dep2,... | none]"

    name = args[0]
    priority = _parse_int(args[1])
    deadline = _parse_int(args[2])
    if priority is None:
        return "Invalid input! Priority must be an integer."
    if deadline is None:
        return "Invalid input! Deadline must be an integer."

    deps_text = " ".join(args[3:]) or "none"
    result = task_api.add_task(
        state, name=name, priority=priority, deadline=deadline, dependencies=deps_text
    )

    if emit is not None:
        for warning in result.warnings:
            emit(f"Warning: {warning}")

    reply = f"Task added: {result.task.describe()}"
    if result.skipped_dependencies and emit is None:
        reply += "\n" + "\n".join(f"Warning: {w}" for w in result.warnings)
    return reply


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.registry.list_tasks()
    if not tasks:
        return "No tasks available."
    lines = ["Tasks:"]
    for task in tasks:
        deps = ", ".join(task.dependencies) or "none"
        lines.append(f"  {task.describe()} | Depends on: {deps}")
    return "\n".join(lines)


def cmd_save(state: AppState, args: list[str]) -> str:
    if not len(state.registry):
        return "No tasks to save."
    n = task_api.save_tasks(state)
    return f"Saved {n} task(s)."


def cmd_load(state: AppState, args: list[str]) -> str:
    """
    /load          -> load from the saved tasks file
    /load <json>   -> load from an inline JSON array
    """
    text = args[0] if args else None
    n = task_api.load_tasks(state, text)
    if n is None:
        return "No saved tasks found."
    reply = f"Tasks loaded successfully! ({n} task(s))"
    missing = state.registry.missing_dependencies()
    if missing:
        names = ", ".join(sorted(missing))
        reply += f"\nWarning: undefined dependencies referenced by: {names}"
    return reply


def cmd_saved(state: AppState, args: list[str]) -> str:
    text = state.store.read_text()
    if text is None:
        return "No saved tasks available."
    tasks = parse_tasks(text)
    lines = ["Saved Tasks:"]
    for task in tasks:
        lines.append(
            f"Task: {task.name}, Priority: {task.priority}, Deadline: {task.deadline}"
        )
        lines.append(f"Dependencies: {' '.join(task.dependencies)}")
        lines.append("-------------------")
    return "\n".join(lines)


def cmd_plan(state: AppState, args: list[str]) -> str:
    tasks = task_api.plan_tasks(state)
    if not tasks:
        return "No tasks available."
    return "Optimized Task Execution Order:\n" + "\n".join(
        f"  {i}. {t.describe()}" for i, t in enumerate(tasks, start=1)
    )


def cmd_run(state: AppState, args: list[str]) -> str:
    tasks = task_api.execute_tasks(state)
    if not tasks:
        return "No tasks available."
    lines = ["Optimized Task Execution Order:"]
    lines.extend(f"  {i}. {t.describe()}" for i, t in enumerate(tasks, start=1))
    lines.append(f"Logged {len(tasks)} executed task(s).")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task count and file locations.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <name> <priority> <deadline> [dep1,dep2 | none].",
)
registry.register("list", cmd_list, help_text="List tasks (sorted by name).", aliases=["view", "ls"])
registry.register("save", cmd_save, help_text="Save tasks to the JSON file.")
registry.register(
    "load",
    cmd_load,
    help_text="Load tasks: /load (from file) | /load <json>.",
    raw_args=True,
)
registry.register("saved", cmd_saved, help_text="Show the tasks stored in the JSON file.")
registry.register("plan", cmd_plan, help_text="Show the execution order without logging it.")
registry.register("run", cmd_run, help_text="Execute tasks in order and log them.", aliases=["execute"])
