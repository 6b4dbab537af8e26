# src/todo_console/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from .errors import NotFoundError, PersistError, ValidationError
from .task_codec import decode_line, encode_record
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.db"


def _ts_local() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class TaskStore:
    """
    In-memory task collection backed by a flat text file.

    - insertion order is the stored order
    - ids come from a running counter that never moves backwards
    - every mutation rewrites the whole file before returning

    Single process, single thread: concurrent instances on one path are unsupported.
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_TASKS_FILE,
        *,
        clock: Callable[[], str] = _ts_local,
    ) -> None:
        self._path = Path(path)
        self._clock = clock
        self._tasks: list[Task] = []
        self._next_id = 1
        self._unsaved = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def has_unsaved_changes(self) -> bool:
        """True after a mutation failed to persist, until the next successful save."""
        return self._unsaved

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _persist(self) -> None:
        try:
            self.save()
        except PersistError as e:
            self._unsaved = True
            logger.warning("Task changes kept in memory only: %s", e)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        return self._find(task_id)

    def create_task(self, title: str, category: str = "") -> Task:
        if title == "":
            raise ValidationError("title is required")

        task = Task(
            id=self._next_id,
            title=title,
            category=category,
            done=False,
            created_at=self._clock(),
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s category=%r", task.id, task.category)

        self._persist()
        return task

    def list_tasks(
        self, task_filter: TaskFilter | str = TaskFilter.ALL, category: str = ""
    ) -> list[Task]:
        task_filter = TaskFilter(task_filter)
        if task_filter is TaskFilter.PENDING:
            return [t for t in self._tasks if not t.done]
        if task_filter is TaskFilter.COMPLETED:
            return [t for t in self._tasks if t.done]
        if task_filter is TaskFilter.ALL:
            return sorted(self._tasks, key=lambda t: (t.done, t.id))
        if task_filter is TaskFilter.CATEGORY:
            if not category:
                return list(self._tasks)
            return [t for t in self._tasks if t.category == category]
        raise ValueError(f"unknown task filter: {task_filter!r}")

    def toggle_task(self, task_id: int) -> Task:
        task = self._find(task_id)
        if task is None:
            raise NotFoundError(task_id)

        task.done = not task.done
        logger.debug("Task toggled id=%s done=%s", task.id, task.done)

        self._persist()
        return task

    def delete_task(self, task_id: int) -> None:
        kept = [t for t in self._tasks if t.id != task_id]
        if len(kept) == len(self._tasks):
            raise NotFoundError(task_id)

        self._tasks = kept
        logger.debug("Task deleted id=%s", task_id)

        self._persist()

    def _read_lines(self) -> list[bytes]:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("Tasks file %s not found, starting empty.", self._path)
            return []
        # Split on "\n" only; a lone "\r" belongs to the record.
        return data.split(b"\n")

    def load(self) -> None:
        """
        Replace the collection with the contents of the backing file.

        A missing file is an empty store. Malformed lines are skipped: wrong
        field count, bad id, bytes that are not UTF-8 and empty titles, as
        well as non-positive ids and repeats of an id already loaded (first
        one wins). The id counter ends above every loaded id and never moves
        backwards.
        """
        tasks: list[Task] = []
        seen: set[int] = set()
        skipped = 0

        for lineno, raw in enumerate(self._read_lines(), start=1):
            if not raw.strip():
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                line = ""
            task = decode_line(line)
            if task is None or task.id < 1 or task.id in seen or task.title == "":
                skipped += 1
                logger.debug("Skipping line %d of %s", lineno, self._path)
                continue
            seen.add(task.id)
            tasks.append(task)

        self._tasks = tasks
        max_id = max(seen, default=0)
        self._next_id = max(self._next_id, max_id + 1, 1)

        logger.info(
            "TaskStore loaded path=%s total=%d skipped=%d next_id=%d",
            self._path,
            len(tasks),
            skipped,
            self._next_id,
        )

    def save(self) -> None:
        """Rewrite the backing file with every task in stored order."""
        lines = "".join(encode_record(t) + "\n" for t in self._tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(lines, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistError(self._path, e.strerror or str(e)) from e

        self._unsaved = False
        logger.debug("TaskStore saved path=%s total=%d", self._path, len(self._tasks))
