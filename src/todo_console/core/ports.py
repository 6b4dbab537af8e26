# src/todo_console/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore directly,
so an in-memory fake can stand in for the file-backed store.
"""

from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task, TaskFilter


class TaskRepo(Protocol):
    @property
    def path(self) -> Path: ...

    @property
    def has_unsaved_changes(self) -> bool: ...

    def create_task(self, title: str, category: str = "") -> Task: ...

    def list_tasks(
        self, task_filter: TaskFilter | str = TaskFilter.ALL, category: str = ""
    ) -> list[Task]: ...

    def toggle_task(self, task_id: int) -> Task: ...

    def delete_task(self, task_id: int) -> None: ...

    def load(self) -> None: ...

    def save(self) -> None: ...
