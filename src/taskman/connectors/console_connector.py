# src/taskman/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from ..cli.commands import MenuCommand
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class SessionEnd(Enum):
    """How the menu loop ended."""

    QUIT = "quit"  # option 9, tasks saved
    EOF = "eof"  # stdin closed, nothing saved
    INTERRUPTED = "interrupted"  # Ctrl+C, nothing saved


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
) -> SessionEnd:
    """
    Menu read-eval-print loop.

    Tasks are written back only on Quit; a failed save raises OSError to
    the caller. EOF and Ctrl+C end the loop without saving.
    """
    logger.info("Console session started (tasks=%d).", len(state.task_store))
    menu = command_registry.build_menu()

    while True:
        write(menu)
        try:
            choice = read("Enter choice: ").strip()

            if MenuCommand.parse(choice) is MenuCommand.QUIT:
                logger.info("Console quit command received.")
                write("Saving tasks...")
                state.task_store.save()
                write("Goodbye!")
                return SessionEnd.QUIT

            reply = command_registry.handle(state, choice, ask=read, emit=write)
        except EOFError:
            logger.warning("Console EOF received, exiting without saving.")
            write("")
            return SessionEnd.EOF
        except KeyboardInterrupt:
            logger.warning("Console KeyboardInterrupt, exiting without saving.")
            write("")
            return SessionEnd.INTERRUPTED

        write(reply)
