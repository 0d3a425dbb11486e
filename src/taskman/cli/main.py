# src/taskman/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (the single load of the tasks file),
then runs the console menu until the user quits.

Exit status: 0 after a successful save on quit, 1 when the tasks file
cannot be loaded or saved or stdin closes first, 130 on Ctrl+C.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import Reader, SessionEnd, Writer, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

_EXIT_CODES = {
    SessionEnd.QUIT: EXIT_OK,
    SessionEnd.EOF: EXIT_FAILURE,
    SessionEnd.INTERRUPTED: EXIT_INTERRUPTED,
}


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def run(settings, *, read: Reader = input, write: Writer = print) -> int:
    """Load, run the menu, save on quit. Returns the process exit status."""
    try:
        state = create_initial_state(settings=settings)
    except OSError as e:
        logger.error("Failed to load tasks from %s: %s", settings.tasks_file, e)
        _report(f"Failed to load tasks: {e}")
        return EXIT_FAILURE

    try:
        end = run_console_loop(state, read=read, write=write)
    except OSError as e:
        logger.error("Failed to save tasks to %s: %s", settings.tasks_file, e)
        _report(f"Failed to save tasks: {e}")
        return EXIT_FAILURE

    if end is not SessionEnd.QUIT:
        logger.info("Session ended (%s); unsaved changes discarded.", end.value)
    return _EXIT_CODES[end]


def build_parser(settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taskman", description="Menu-driven local task manager.")
    p.add_argument(
        "-f",
        "--file",
        type=Path,
        default=settings.tasks_file,
        help=f"Path to tasks file (default: {settings.tasks_file})",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    if args.file != settings.tasks_file:
        settings = dataclasses.replace(settings, tasks_file=args.file)

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    try:
        setup_logging(log_dir=settings.data_dir, console_level=console_level)
    except OSError as e:
        _report(f"Failed to set up logging in {settings.data_dir}: {e}")
        raise SystemExit(EXIT_FAILURE) from e

    logger.info("Starting %s (tasks_file=%s)...", settings.app_name, settings.tasks_file)
    code = run(settings)
    logger.info("Bye (exit=%d).", code)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
