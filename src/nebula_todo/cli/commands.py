# src/nebula_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.state import AppState
from ..tasks.errors import TaskError, TaskPersistenceError
from ..tasks.task_api import load_state_tasks, save_state_tasks
from ..tasks.task_models import TaskStatus
from .render import render_task_line, render_task_table

CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Bad command input (usage errors, malformed ids). The message is shown as-is."""


class CommandRegistry:
    """Simple slash-command registry used by the console (/add, /list, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the whitespace-split args and the raw remainder of the line
        (for free text such as titles). Input and task errors become replies.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, rest.split(), rest)
        except CommandError as e:
            return str(e)
        except TaskError as e:
            logger.info("/%s failed: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (asks again if there are unsaved changes).")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str], usage: str) -> int:
    if not args:
        raise CommandError(f"Usage: {usage}")
    token = args[0].lstrip("#")
    try:
        task_id = int(token)
    except ValueError:
        raise CommandError(f"Invalid task id: {args[0]!r}. Usage: {usage}") from None
    if task_id < 1:
        raise CommandError(f"Invalid task id: {args[0]!r}. Ids start at 1.")
    return task_id


def _set_status(state: AppState, task_id: int, status: TaskStatus) -> str:
    task = state.task_store.update_status(task_id, status)
    state.unsaved_changes = True
    return f"Task #{task.id} updated.\n  {render_task_line(task, color=state.color)}"


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    """
    /add <title>                            -> Todo task with empty description
    /add <title> | <description>            -> Todo task with description
    /add <title> | <description> | <status> -> task created with that status
    """
    fields = [f.strip() for f in rest.split("|", 2)]
    title = fields[0]
    description = fields[1] if len(fields) > 1 else ""
    if not title:
        raise CommandError(
            "Title cannot be empty. Usage: /add <title> [| <description> [| <status>]]"
        )

    # Parse before adding so a bad status adds nothing.
    status = TaskStatus.parse(fields[2]) if len(fields) > 2 and fields[2] else None

    task = state.task_store.add(title, description)
    if status is not None and status != task.status:
        task = state.task_store.update_status(task.id, status)
    state.unsaved_changes = True

    reply = f"Task #{task.id} added: {task.title}"
    if status is not None:
        reply += f" ({task.status.label})"
    return reply


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    tasks = state.task_store.list()
    if not tasks:
        return "No tasks yet."
    table = render_task_table(tasks, color=state.color)
    footer = f"{len(tasks)} task(s)"
    if state.unsaved_changes:
        footer += " (unsaved changes, use /save)"
    return f"{table}\n{footer}"


def cmd_remove(state: AppState, args: list[str], rest: str) -> str:
    task_id = _parse_task_id(args, "/remove <id>")
    task = state.task_store.remove(task_id)
    state.unsaved_changes = True
    return f"Task #{task.id} removed: {task.title}"


def cmd_status(state: AppState, args: list[str], rest: str) -> str:
    """
    /status <id> <status>

    Status accepts Todo | InProgress | Done (any case, "in progress", "in-progress", 1/2/3).
    """
    usage = "/status <id> <Todo|InProgress|Done>"
    task_id = _parse_task_id(args, usage)
    if len(args) < 2:
        raise CommandError(f"Usage: {usage}")
    status = TaskStatus.parse(" ".join(args[1:]))
    return _set_status(state, task_id, status)


def cmd_start(state: AppState, args: list[str], rest: str) -> str:
    return _set_status(state, _parse_task_id(args, "/start <id>"), TaskStatus.IN_PROGRESS)


def cmd_done(state: AppState, args: list[str], rest: str) -> str:
    return _set_status(state, _parse_task_id(args, "/done <id>"), TaskStatus.DONE)


def cmd_save(state: AppState, args: list[str], rest: str) -> str:
    try:
        n = save_state_tasks(state)
    except TaskPersistenceError as e:
        logger.warning("Save failed: %s", e)
        return f"Failed to save: {e}"
    return f"Saved {n} task(s) to {state.tasks_path}"


def cmd_load(state: AppState, args: list[str], rest: str) -> str:
    """
    /load        -> replace in-memory tasks with the saved file
    /load force  -> same, discarding unsaved changes
    """
    force = bool(args) and args[0].lower() in ("force", "!", "-f")
    if state.unsaved_changes and not force:
        return "You have unsaved changes. Use /save first, or /load force to discard them."

    try:
        n = load_state_tasks(state)
    except TaskPersistenceError as e:
        logger.warning("Load failed: %s", e)
        return f"Failed to load: {e}\nIn-memory tasks were kept."
    return f"Loaded {n} task(s) from {state.tasks_path}"


def cmd_path(state: AppState, args: list[str], rest: str) -> str:
    return str(Path(state.tasks_path).resolve())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> [| <description> [| <status>]].",
    aliases=["a", "new"],
)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls", "l"])
registry.register("remove", cmd_remove, help_text="Delete a task: /remove <id>.", aliases=["rm", "del"])
registry.register(
    "status",
    cmd_status,
    help_text="Change status: /status <id> <Todo|InProgress|Done>.",
    aliases=["set"],
)
registry.register("start", cmd_start, help_text="Mark a task InProgress: /start <id>.")
registry.register("done", cmd_done, help_text="Mark a task Done: /done <id>.")
registry.register("save", cmd_save, help_text="Write tasks to the tasks file.", aliases=["w"])
registry.register(
    "load",
    cmd_load,
    help_text="Reload tasks from the tasks file: /load [force].",
    aliases=["reload"],
)
registry.register("path", cmd_path, help_text="Show the absolute path of the tasks file.")
