# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the save file), then runs the
console REPL in the main thread until "bye".
"""

from __future__ import annotations

import argparse
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="taskpad", description="Personal task tracker.")
    ap.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Save file to use instead of the configured one (blank = default).",
    )
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    settings = get_settings().with_tasks_file(args.path)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s with %s", settings.app_name, settings.tasks_file_path)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
