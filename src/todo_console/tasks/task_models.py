# src/todo_console/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """
    Selection mode for TaskStore.list_tasks.

    Notes:
    - "all" is a view-only sort (pending first, then by id); stored order is untouched.
    - "category" with an empty category argument matches every task.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    ALL = "all"
    CATEGORY = "category"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    category: str
    done: bool
    created_at: str  # opaque timestamp text, never reparsed
