# tasks/line_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class FileLineStore:
    """
    UTF-8 text file, one record per line.

    The parent directory and an empty file are created on first access, so a
    fresh install starts with an empty list instead of an error. Writes go to
    a sibling .tmp file that then replaces the target in one step.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty save file %s", self._path)
        except OSError as e:
            logger.warning("Unable to initialize save file %s: %s", self._path, e)
            raise StorageError("Unable to initialize save file") from e

    def read_lines(self) -> list[str]:
        self._ensure_file()
        # Records end with "\n" only; str.splitlines would also break on
        # characters such as U+2028 or "\x0c" that task text may contain.
        try:
            with open(self._path, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read save file: {e}") from e

        if not content:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line.removesuffix("\r") for line in lines]

    def write_lines(self, lines: list[str]) -> None:
        self._ensure_file()
        content = "".join(line + "\n" for line in lines)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(content, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.warning("Failed to write save file %s: %s", self._path, e)
            raise StorageError("Failed to write save file") from e
        logger.debug("Wrote %d lines to %s", len(lines), self._path)
