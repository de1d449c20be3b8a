# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on a LineStore Protocol instead of a concrete file,
so tests can swap in an in-memory store and the file mechanics stay out of
the codec.
"""

from typing import Protocol


class LineStore(Protocol):
    """
    Raw line persistence.

    Implementations raise StorageError on any I/O failure.
    write_lines replaces the whole content; there is no append.
    """

    def read_lines(self) -> list[str]: ...
    def write_lines(self, lines: list[str]) -> None: ...
