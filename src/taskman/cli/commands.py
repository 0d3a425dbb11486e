# src/taskman/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum

from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_store import InvalidIndexError, parse_position

CommandAsk = Callable[[str], str]
CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, CommandAsk, CommandEmitter], str]

logger = logging.getLogger(__name__)

MENU_TITLE = "=== TASK MANAGER ==="
INVALID_CHOICE = "Invalid choice."
INVALID_TASK_NUMBER = "Invalid task number."


class MenuCommand(StrEnum):
    """Menu options; the value is what the user types."""

    ADD = "1"
    LIST_ALL = "2"
    LIST_PENDING = "3"
    LIST_COMPLETED = "4"
    MARK_COMPLETED = "5"
    SEARCH = "6"
    DELETE = "7"
    CLEAR_COMPLETED = "8"
    QUIT = "9"

    @classmethod
    def parse(cls, raw: str) -> MenuCommand | None:
        try:
            return cls(raw.strip())
        except ValueError:
            return None


class CommandRegistry:
    """Numbered menu registry used by the console loop."""

    def __init__(self) -> None:
        self._handlers: dict[MenuCommand, CommandHandler | None] = {}
        self._labels: dict[MenuCommand, str] = {}

    def register(
        self,
        command: MenuCommand,
        handler: CommandHandler | None,
        label: str,
    ) -> None:
        """Register a menu entry. A None handler means the caller acts on it itself."""
        self._handlers[command] = handler
        self._labels[command] = label

    def handle(
        self,
        state: AppState,
        choice: str,
        ask: CommandAsk,
        emit: CommandEmitter,
    ) -> str:
        """
        Run the handler for a menu choice such as "3".
        Returns the reply text; unknown choices get INVALID_CHOICE.
        """
        command = MenuCommand.parse(choice)
        handler = self._handlers.get(command) if command is not None else None
        if handler is None:
            logger.debug("Unrecognized menu choice %r", choice)
            return INVALID_CHOICE
        return handler(state, ask, emit)

    def build_menu(self) -> str:
        lines = ["", MENU_TITLE]
        for command in sorted(self._labels, key=lambda c: int(c.value)):
            lines.append(f"{command.value}. {self._labels[command]}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(position: int, task: Task) -> str:
    return f"{position}. [{task.status.value}] {task.description} ({task.date})"


def render_listing(title: str, rows: Iterable[tuple[int, Task]], empty: str = "(no tasks)") -> str:
    lines = [f"\n=== {title} ==="]
    body = [format_task(position, task) for position, task in rows]
    lines.extend(body or [empty])
    return "\n".join(lines)


def _listing(state: AppState, which: TaskFilter) -> str:
    return render_listing(f"{which.value.upper()} TASKS", state.task_store.filter(which))


def cmd_add(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    description = ask("Enter task description: ").strip()
    state.task_store.add(description)
    return "Task added!"


def cmd_list_all(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    return _listing(state, TaskFilter.ALL)


def cmd_list_pending(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    return _listing(state, TaskFilter.PENDING)


def cmd_list_completed(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    return _listing(state, TaskFilter.COMPLETED)


def cmd_mark_completed(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    """
    Show pending tasks, then mark one completed.

    The number typed is the position shown in the listing, which is the
    position in the full collection.
    """
    emit(_listing(state, TaskFilter.PENDING))
    raw = ask("\nEnter task # to mark completed: ")
    try:
        state.task_store.mark_completed(parse_position(raw))
    except InvalidIndexError as e:
        logger.debug("Mark completed rejected: %s", e)
        return INVALID_TASK_NUMBER
    return "Task marked completed!"


def cmd_search(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    query = ask("Search for: ").strip().lower()
    return render_listing(
        "SEARCH RESULTS",
        state.task_store.search(query),
        empty="No matching tasks found.",
    )


def cmd_delete(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    emit(_listing(state, TaskFilter.ALL))
    raw = ask("\nEnter task # to delete: ")
    try:
        state.task_store.delete(parse_position(raw))
    except InvalidIndexError as e:
        logger.debug("Delete rejected: %s", e)
        return INVALID_TASK_NUMBER
    return "Task deleted!"


def cmd_clear_completed(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    state.task_store.clear_completed()
    return "All completed tasks removed."


registry.register(MenuCommand.ADD, cmd_add, "Add task")
registry.register(MenuCommand.LIST_ALL, cmd_list_all, "List all tasks")
registry.register(MenuCommand.LIST_PENDING, cmd_list_pending, "List pending tasks")
registry.register(MenuCommand.LIST_COMPLETED, cmd_list_completed, "List completed tasks")
registry.register(MenuCommand.MARK_COMPLETED, cmd_mark_completed, "Mark task completed")
registry.register(MenuCommand.SEARCH, cmd_search, "Search tasks")
registry.register(MenuCommand.DELETE, cmd_delete, "Delete task")
registry.register(MenuCommand.CLEAR_COMPLETED, cmd_clear_completed, "Clear completed tasks")
# Quit saves and ends the session; the console loop owns that step.
registry.register(MenuCommand.QUIT, None, "Quit")
