# src/todo_console/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import NotFoundError, PersistError, ValidationError
from ..tasks.task_models import Task, TaskFilter

CommandPrompt = Callable[[str], str]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandPrompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Menu-key registry used by the console connector (1..9, h)."""

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
        state: AppState,
        line: str,
        prompt: CommandPrompt | None = None,
    ) -> str | None:
        """
        Handle a line like "6" or "6 3".

        The first word picks the command; the rest of the line is passed as
        the inline argument. Handlers that take a prompt ask for anything
        missing. Returns a reply string, or None for an empty line.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return "Unknown command. Press h for help."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, prompt)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  q - Quit")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_row(task: Task) -> str:
    row = f"[{'x' if task.done else ' '}] ID:{task.id} | {task.title}"
    if task.category:
        row += f" ({task.category})"
    return f"{row}  -- created: {task.created_at}"


def _format_rows(tasks: list[Task], empty_text: str) -> str:
    if not tasks:
        return empty_text
    return "\n".join(format_task_row(t) for t in tasks)


def _ask(args: str, prompt: CommandPrompt | None, question: str) -> str | None:
    """Inline argument if given, otherwise ask. None when there is no way to ask."""
    if args:
        return args
    if prompt is None:
        return None
    return prompt(question)


def _parse_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _with_persist_warning(state: AppState, text: str) -> str:
    store = state.task_store
    if store.has_unsaved_changes:
        return (
            f"{text}\nWarning: could not write to {store.path}; "
            "changes are kept in memory only."
        )
    return text


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: str, prompt: CommandPrompt | None = None) -> str:
    """
    1 <title>  -> add with the inline title (category still asked if interactive)
    1          -> ask for title, then category
    """
    title = _ask(args, prompt, "Enter task title: ")
    if title is None:
        return "Usage: 1 <title>"
    category = ""
    if title and prompt is not None:
        category = prompt("Enter category (optional): ")

    try:
        task = state.task_store.create_task(title, category)
    except ValidationError:
        return "Title cannot be empty."

    return _with_persist_warning(state, f"Task added (id={task.id}).")


def cmd_list_pending(state: AppState, args: str) -> str:
    return _format_rows(state.task_store.list_tasks(TaskFilter.PENDING), "No pending tasks.")


def cmd_list_completed(state: AppState, args: str) -> str:
    return _format_rows(state.task_store.list_tasks(TaskFilter.COMPLETED), "No completed tasks.")


def cmd_list_all(state: AppState, args: str) -> str:
    return _format_rows(state.task_store.list_tasks(TaskFilter.ALL), "No tasks yet.")


def cmd_list_category(state: AppState, args: str, prompt: CommandPrompt | None = None) -> str:
    category = _ask(
        args, prompt, "Enter category to list (leave empty to list all categories): "
    )
    tasks = state.task_store.list_tasks(TaskFilter.CATEGORY, category or "")
    return _format_rows(tasks, "No tasks for that category.")


def cmd_toggle(state: AppState, args: str, prompt: CommandPrompt | None = None) -> str:
    task_id = _parse_id(_ask(args, prompt, "Enter task ID to toggle complete/incomplete: "))
    if task_id is None:
        return "Invalid input."

    try:
        task = state.task_store.toggle_task(task_id)
    except NotFoundError:
        return "Task ID not found."

    status = "completed." if task.done else "not completed."
    return _with_persist_warning(state, f"Task ID {task.id} marked {status}")


def cmd_delete(state: AppState, args: str, prompt: CommandPrompt | None = None) -> str:
    task_id = _parse_id(_ask(args, prompt, "Enter task ID to delete: "))
    if task_id is None:
        return "Invalid input."

    try:
        state.task_store.delete_task(task_id)
    except NotFoundError:
        return "Task ID not found."

    return _with_persist_warning(state, f"Task ID {task_id} deleted.")


def cmd_save(state: AppState, args: str) -> str:
    try:
        state.task_store.save()
    except PersistError as e:
        logger.warning("Explicit save failed: %s", e)
        return f"Error: could not write to {e.path}"
    return "Saved."


def cmd_load(state: AppState, args: str) -> str:
    state.task_store.load()
    return "Loaded."


registry.register("1", cmd_add, help_text="Add task")
registry.register("2", cmd_list_pending, help_text="List pending tasks")
registry.register("3", cmd_list_completed, help_text="List completed tasks")
registry.register("4", cmd_list_all, help_text="List all tasks")
registry.register("5", cmd_list_category, help_text="List tasks by category")
registry.register("6", cmd_toggle, help_text="Toggle complete/incomplete (by ID)")
registry.register("7", cmd_delete, help_text="Delete task (by ID)")
registry.register("8", cmd_save, help_text="Save (explicit)")
registry.register("9", cmd_load, help_text="Load (explicit)")
registry.register("h", cmd_help, help_text="Help", aliases=["?", "help"])
