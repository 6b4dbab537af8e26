# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

from todo_console.cli.commands import CommandRegistry, format_task_row, registry
from todo_console.core.state import AppState
from todo_console.tasks.task_models import Task
from todo_console.tasks.task_store import TaskStore

from .conftest import FIXED_TS
from .fakes import FakePrompt


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return f"h2:{args}"

    def h3(state, args, prompt):
        called["h3"] += 1
        return f"h3:{prompt('q?')}"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "a x y") == "h2:x y"
    assert reg.handle(state, "BEE", prompt=lambda _: "answer") == "h3:answer"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_empty(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "   ") is None
    assert reg.handle(state, "z") == "Unknown command. Press h for help."


def test_help_lists_menu() -> None:
    text = registry.build_help()
    assert text.startswith("Commands:")
    assert "  1 - Add task" in text
    assert "  9 - Load (explicit)" in text
    assert text.endswith("  q - Quit")


def test_format_task_row() -> None:
    task = Task(id=3, title="Buy milk", category="", done=False, created_at=FIXED_TS)
    assert format_task_row(task) == f"[ ] ID:3 | Buy milk  -- created: {FIXED_TS}"

    task.done = True
    task.category = "home"
    assert format_task_row(task) == f"[x] ID:3 | Buy milk (home)  -- created: {FIXED_TS}"


def test_add_interactive_asks_title_then_category(state) -> None:
    prompt = FakePrompt(["Write report", "work"])
    assert registry.handle(state, "1", prompt=prompt) == "Task added (id=1)."
    assert prompt.questions == ["Enter task title: ", "Enter category (optional): "]

    task = state.task_store.get_task(1)
    assert task.title == "Write report"
    assert task.category == "work"


def test_add_inline_title_without_prompt(state) -> None:
    assert registry.handle(state, "1 Buy milk") == "Task added (id=1)."
    assert state.task_store.get_task(1).category == ""


def test_add_empty_title_skips_category_prompt(state) -> None:
    prompt = FakePrompt([""])
    assert registry.handle(state, "1", prompt=prompt) == "Title cannot be empty."
    assert prompt.questions == ["Enter task title: "]
    assert state.task_store.count_tasks() == 0


def test_list_commands_render_rows_and_empty_messages(state) -> None:
    assert registry.handle(state, "2") == "No pending tasks."
    assert registry.handle(state, "3") == "No completed tasks."
    assert registry.handle(state, "4") == "No tasks yet."
    assert registry.handle(state, "5 work") == "No tasks for that category."

    state.task_store.create_task("Buy milk", "")
    state.task_store.create_task("Write report", "work")
    state.task_store.toggle_task(1)

    assert registry.handle(state, "2") == f"[ ] ID:2 | Write report (work)  -- created: {FIXED_TS}"
    assert registry.handle(state, "3") == f"[x] ID:1 | Buy milk  -- created: {FIXED_TS}"
    assert registry.handle(state, "4").splitlines() == [
        f"[ ] ID:2 | Write report (work)  -- created: {FIXED_TS}",
        f"[x] ID:1 | Buy milk  -- created: {FIXED_TS}",
    ]
    assert registry.handle(state, "5", prompt=FakePrompt(["work"])).startswith("[ ] ID:2")
    assert len(registry.handle(state, "5", prompt=FakePrompt([""])).splitlines()) == 2


def test_toggle_and_delete_commands(state) -> None:
    state.task_store.create_task("Buy milk")

    assert registry.handle(state, "6 1") == "Task ID 1 marked completed."
    assert registry.handle(state, "6", prompt=FakePrompt(["1"])) == "Task ID 1 marked not completed."
    assert registry.handle(state, "6 x") == "Invalid input."
    assert registry.handle(state, "6 99") == "Task ID not found."

    assert registry.handle(state, "7", prompt=FakePrompt(["1"])) == "Task ID 1 deleted."
    assert registry.handle(state, "7 1") == "Task ID not found."
    assert registry.handle(state, "7") == "Invalid input."


def test_save_and_load_commands(state, settings) -> None:
    state.task_store.create_task("Buy milk")
    settings.tasks_path.write_text("4,From disk,,1,ts\n", "utf-8")

    assert registry.handle(state, "9") == "Loaded."
    assert [t.id for t in state.task_store.list_tasks("all")] == [4]

    assert registry.handle(state, "8") == "Saved."
    assert settings.tasks_path.read_text("utf-8") == "4,From disk,,1,ts\n"


def test_persist_failure_is_reported_as_warning(settings, tmp_path: Path) -> None:
    path = tmp_path / "missing-dir" / "tasks.db"
    state = AppState(settings=settings, task_store=TaskStore(path, clock=lambda: FIXED_TS))

    reply = registry.handle(state, "1 Buy milk")
    assert reply.startswith("Task added (id=1).\nWarning: could not write to")
    assert state.task_store.count_tasks() == 1

    assert registry.handle(state, "8") == f"Error: could not write to {path}"
