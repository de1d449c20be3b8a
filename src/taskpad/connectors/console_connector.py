# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..cli.commands import submit
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "    " + "_" * 60
INDENT = "     "

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def frame(message: str) -> str:
    """Box a response between dividers, indenting every line."""
    body = INDENT + message.replace("\n", "\n" + INDENT)
    return f"{DIVIDER}\n{body}\n{DIVIDER}\n"


def _print_out(text: str) -> None:
    print(text, flush=True)


def _print_err(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write = _print_out,
    write_error: Write = _print_err,
) -> None:
    """Read lines until "bye", EOF or Ctrl+C; each line runs to completion first."""
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    if state.load_error:
        write_error(frame(state.load_error))
    write(frame(f"Hello! I'm {app_name}\nWhat can I do for you?"))

    while not state.is_exit:
        try:
            line = read_line("").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        try:
            response = submit(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            write_error(frame("Internal error while handling that command."))
            continue

        write(frame(response))

    logger.info("Console connector finished.")
