# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskpad.errors import StorageError


@dataclass(slots=True)
class FakeLineStore:
    """
    In-memory LineStore for unit tests.

    - `lines` is the current "file" content
    - `writes` counts full rewrites for persistence assertions
    - `fail_reads` / `fail_writes` simulate I/O failures
    """

    lines: list[str] = field(default_factory=list)
    writes: int = 0
    fail_reads: bool = False
    fail_writes: bool = False

    def read_lines(self) -> list[str]:
        if self.fail_reads:
            raise StorageError("Failed to read save file: simulated")
        return list(self.lines)

    def write_lines(self, lines: list[str]) -> None:
        if self.fail_writes:
            raise StorageError("Failed to write save file")
        self.lines = list(lines)
        self.writes += 1
