# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_console.core.state import AppState
from todo_console.tasks.task_store import TaskStore

FIXED_TS = "2026-01-01 10:00:00"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.db",
        show_help=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path, clock=lambda: FIXED_TS)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
