# tests/test_commands.py

from __future__ import annotations

from taskman.cli.commands import (
    INVALID_CHOICE,
    INVALID_TASK_NUMBER,
    CommandRegistry,
    MenuCommand,
    format_task,
    registry,
)
from taskman.tasks.task_models import Task, TaskStatus

from .fakes import FakeConsole


def _handle(state, choice: str, *lines: str) -> tuple[str, FakeConsole]:
    console = FakeConsole(lines)
    reply = registry.handle(state, choice, ask=console.read, emit=console.write)
    return reply, console


def test_menu_lists_nine_options_in_order() -> None:
    menu = registry.build_menu().splitlines()
    assert "=== TASK MANAGER ===" in menu
    numbered = [line for line in menu if line[:1].isdigit()]
    assert [line.split(".")[0] for line in numbered] == [str(i) for i in range(1, 10)]
    assert numbered[0] == "1. Add task"
    assert numbered[-1] == "9. Quit"


def test_registry_routes_and_rejects_unknown(state) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def h(state, ask, emit):
        called.append("h")
        return "ok"

    reg.register(MenuCommand.LIST_ALL, h, "List")
    console = FakeConsole()

    assert reg.handle(state, " 2 ", console.read, console.write) == "ok"
    assert reg.handle(state, "3", console.read, console.write) == INVALID_CHOICE
    assert reg.handle(state, "hello", console.read, console.write) == INVALID_CHOICE
    assert reg.handle(state, "", console.read, console.write) == INVALID_CHOICE
    assert called == ["h"]


def test_quit_is_not_handled_by_registry(state) -> None:
    reply, _ = _handle(state, "9")
    assert reply == INVALID_CHOICE


def test_format_task() -> None:
    task = Task("Buy milk", TaskStatus.COMPLETED, "2025-11-14")
    assert format_task(3, task) == "3. [Completed] Buy milk (2025-11-14)"


def test_add_trims_description(state) -> None:
    reply, console = _handle(state, "1", "   Buy milk  ")
    assert reply == "Task added!"
    assert console.prompts == ["Enter task description: "]
    assert state.task_store.tasks == [Task("Buy milk", TaskStatus.PENDING, "2025-11-14")]


def test_add_accepts_empty_description(state) -> None:
    reply, _ = _handle(state, "1", "   ")
    assert reply == "Task added!"
    assert state.task_store.tasks[0].description == ""


def test_listings(state) -> None:
    store = state.task_store
    store.add("a")
    store.add("b")
    store.mark_completed(1)

    all_reply, _ = _handle(state, "2")
    pending_reply, _ = _handle(state, "3")
    completed_reply, _ = _handle(state, "4")

    assert all_reply.splitlines()[1:] == [
        "=== ALL TASKS ===",
        "1. [Completed] a (2025-11-14)",
        "2. [Pending] b (2025-11-14)",
    ]
    assert pending_reply.splitlines()[1:] == ["=== PENDING TASKS ===", "2. [Pending] b (2025-11-14)"]
    assert completed_reply.splitlines()[1:] == [
        "=== COMPLETED TASKS ===",
        "1. [Completed] a (2025-11-14)",
    ]


def test_empty_listing(state) -> None:
    reply, _ = _handle(state, "2")
    assert reply.splitlines()[1:] == ["=== ALL TASKS ===", "(no tasks)"]


def test_mark_completed_shows_pending_then_marks(state) -> None:
    store = state.task_store
    store.add("a")
    store.add("b")
    store.mark_completed(1)

    reply, console = _handle(state, "5", "2")

    assert reply == "Task marked completed!"
    assert "2. [Pending] b (2025-11-14)" in console.text
    assert "1. [Completed] a" not in console.text
    assert store.tasks[1].status is TaskStatus.COMPLETED


def test_mark_completed_invalid_input_does_not_reprompt(state) -> None:
    state.task_store.add("a")

    for raw in ("0", "2", "abc", ""):
        reply, console = _handle(state, "5", raw, "1")
        assert reply == INVALID_TASK_NUMBER
        assert len(console.prompts) == 1

    assert state.task_store.tasks[0].status is TaskStatus.PENDING


def test_delete_shows_all_then_deletes(state) -> None:
    store = state.task_store
    store.add("a")
    store.add("b")

    reply, console = _handle(state, "7", "1")

    assert reply == "Task deleted!"
    assert "1. [Pending] a (2025-11-14)" in console.text
    assert [t.description for t in store] == ["b"]


def test_delete_invalid_number_leaves_tasks(state) -> None:
    state.task_store.add("a")
    reply, _ = _handle(state, "7", "5")
    assert reply == INVALID_TASK_NUMBER
    assert len(state.task_store) == 1


def test_search(state) -> None:
    store = state.task_store
    store.add("Buy milk")
    store.add("Plan weekend trip")

    reply, console = _handle(state, "6", "  PLAN ")
    assert console.prompts == ["Search for: "]
    assert reply.splitlines()[1:] == [
        "=== SEARCH RESULTS ===",
        "2. [Pending] Plan weekend trip (2025-11-14)",
    ]

    reply, _ = _handle(state, "6", "groceries")
    assert reply.splitlines()[1:] == ["=== SEARCH RESULTS ===", "No matching tasks found."]


def test_clear_completed(state) -> None:
    store = state.task_store
    store.add("a")
    store.add("b")
    store.mark_completed(1)

    reply, _ = _handle(state, "8")
    assert reply == "All completed tasks removed."
    assert [t.description for t in store] == ["b"]
