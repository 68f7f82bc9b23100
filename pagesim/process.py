"""A process whose memory references come from a trace file."""

from __future__ import annotations

import os
from typing import IO, Optional

from .instruction import Instruction


class Process:
    """Reads a trace file one instruction at a time."""

    def __init__(self, path, process_id: int, avg_bytes_per_line: int) -> None:
        self.path = os.fspath(path)
        self.process_id = process_id
        self.avg_bytes_per_line = avg_bytes_per_line
        self.line = ""
        self._instruction: Optional[Instruction] = None
        self._estimated = 0
        self._read = 0
        self._eof = False
        self._file: Optional[IO[str]] = None
        try:
            self._file = self._open_stream()
        except OSError:
            self._file = None

    def _open_stream(self) -> IO[str]:
        return open(self.path, "r", encoding="latin-1", newline="\n")

    def __enter__(self) -> Process:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self) -> None:
        """(Re)open the trace from the start and estimate its length.

        Raises OSError if the file cannot be opened.
        """
        self.close()
        self._file = self._open_stream()
        self._eof = False
        self._read = 0
        self._estimated = os.path.getsize(self.path) // self.avg_bytes_per_line

    def close(self) -> None:
        """Close the trace file if it is open."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def read_line(self) -> bool:
        """Read the next instruction; return False when none is left."""
        if not self.is_open() or self._eof:
            return False
        raw = self._file.readline()
        if not raw.endswith("\n"):
            self._eof = True
        if not raw:
            return False
        self.line = raw[:-1] if raw.endswith("\n") else raw
        self._instruction = Instruction.from_line(self.line)
        self._read += 1
        return True

    def is_open(self) -> bool:
        """Whether the trace file is open."""
        return self._file is not None and not self._file.closed

    def at_end(self) -> bool:
        """Whether reading has reached the end of the file."""
        return self._eof

    @property
    def estimated_instructions(self) -> int:
        """Instruction count estimated from the file size at the last open."""
        return self._estimated

    @property
    def remaining_instructions(self) -> int:
        """Estimated instructions not yet read since the last open."""
        return self._estimated - self._read

    @property
    def current_instruction(self) -> Instruction:
        """The instruction read last; RuntimeError if none has been read."""
        if self._instruction is None:
            raise RuntimeError("no instruction has been read")
        return self._instruction