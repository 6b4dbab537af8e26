# src/todo_console/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for task store failures reported to the user."""


class ValidationError(TaskError, ValueError):
    """User input failed a precondition (e.g. empty title)."""


class NotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task id={task_id} not found")
        self.task_id = task_id


class PersistError(TaskError):
    """
    Backing file could not be written.

    The in-memory collection stays valid; data lives only in memory
    until the next successful save.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not write {path}: {reason}")
        self.path = path
        self.reason = reason
