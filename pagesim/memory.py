"""Demand-paging simulation over one or more trace-driven processes."""

from __future__ import annotations

import math
import os
from bisect import bisect_right
from collections import OrderedDict
from typing import Callable, Union

from .instruction import Instruction
from .page import Page
from .process import Process
from .types import ReplacementAlgorithm, Scheduler

_MAP_COLUMNS = 10


class MemoryManager:
    """Runs processes against a fixed number of frames and counts page faults.

    The replacement policy and the scheduling policy are chosen through the
    ``algorithm`` and ``scheduler`` attributes.
    """

    def __init__(self, frames: int, page_size: int, avg_bytes_per_line: int, cycle_length: int) -> None:
        if frames < 1:
            raise ValueError(f"frames must be positive, got {frames}")
        if page_size < 1:
            raise ValueError(f"page size must be positive, got {page_size}")
        if avg_bytes_per_line < 1:
            raise ValueError(f"average bytes per line must be positive, got {avg_bytes_per_line}")
        self.frames = frames
        self.page_size = page_size
        self.avg_bytes_per_line = avg_bytes_per_line
        self.cycle_length = cycle_length
        self.algorithm = ReplacementAlgorithm.FIFO
        self.scheduler = Scheduler.FCFS
        self.instructions_read = 0

        self._processes: list[Process] = []
        self._next_process_id = 0
        self._references_loaded = False
        self._reference_positions: dict[str, list[int]] = {}
        self._position = -1
        self._resident: OrderedDict[str, Page] = OrderedDict()
        self._backing_store: dict[str, Page] = {}
        self._current = -1
        self._faults = 0

    def add_process(self, path: Union[str, os.PathLike]) -> None:
        """Register a process whose references are read from ``path``."""
        self._processes.append(Process(path, self._next_process_id, self.avg_bytes_per_line))
        self._next_process_id += 1

    def cycle(self) -> bool:
        """Schedule a process and run up to ``cycle_length`` of its references.

        Returns False when there was no process to run. Raises OSError if a
        trace file cannot be opened.
        """
        if not self._references_loaded:
            self._load_references()
        self._select_process()
        return self._run_current()

    @property
    def page_faults(self) -> int:
        """Number of page faults so far."""
        return self._faults

    @property
    def hit_rate(self) -> float:
        """Fraction of references that hit; NaN before any reference."""
        if self.instructions_read == 0:
            return math.nan
        return 1.0 - self._faults / self.instructions_read

    def effective_access_time(self, memory_time: float, fault_time: float) -> float:
        """Mean access time given the memory access and fault service times."""
        hit_rate = self.hit_rate
        return hit_rate * memory_time + (1.0 - hit_rate) * (memory_time + fault_time)

    def memory_map(self) -> str:
        """Render the frames: ``S`` dirty, ``C`` clean, ``.`` free."""
        cells = ["S " if page.dirty else "C " for page in self._resident.values()]
        cells.extend([". "] * (self.frames - len(cells)))
        rows = ["".join(cells[start:start + _MAP_COLUMNS]) for start in range(0, len(cells), _MAP_COLUMNS)]
        return "\n".join(["===== MEMORY MAP =====", *rows, "=" * 26])

    def _key(self, process_id: int, instruction: Instruction) -> str:
        return f"{process_id}-{instruction.page_id(self.page_size)}"

    def _load_references(self) -> None:
        position = 0
        for process in self._processes:
            process.open()
            while process.read_line():
                key = self._key(process.process_id, process.current_instruction)
                self._reference_positions.setdefault(key, []).append(position)
                position += 1
            process.close()
            process.open()
        self._references_loaded = True

    def _select_process(self) -> None:
        if not self._processes:
            self._current = -1
            return
        if self.scheduler is Scheduler.FCFS:
            self._current = 0
            return
        measure: Callable[[Process], int]
        if self.scheduler is Scheduler.SJF:
            measure = lambda process: process.estimated_instructions
        else:
            measure = lambda process: process.remaining_instructions
        if not 0 <= self._current < len(self._processes):
            self._current = 0
        for index, process in enumerate(self._processes):
            if measure(process) < measure(self._processes[self._current]):
                self._current = index

    def _retire_current(self) -> None:
        process = self._processes.pop(self._current)
        process.close()
        self._current = -1

    def _run_current(self) -> bool:
        if self._current == -1:
            return False
        process = self._processes[self._current]
        if process.at_end():
            self._retire_current()
            return True

        for _ in range(self.cycle_length):
            if not process.read_line():
                self._retire_current()
                return True
            instruction = process.current_instruction
            self._position += 1
            self.instructions_read += 1
            key = self._key(process.process_id, instruction)

            page = self._resident.get(key)
            if page is not None:
                if self.algorithm in (ReplacementAlgorithm.LRU, ReplacementAlgorithm.CLOCK):
                    self._resident.move_to_end(key)
                    if self.algorithm is ReplacementAlgorithm.CLOCK:
                        page.used = True
                        if instruction.operation == "W":
                            page.dirty = True
                continue

            self._faults += 1
            page = self._backing_store.get(key)
            if page is None:
                page = Page(process.process_id, instruction.page_id(self.page_size))
                self._backing_store[page.id] = page
            self._bring_in(page, instruction)
        return True

    def _bring_in(self, page: Page, instruction: Instruction) -> None:
        if self.algorithm is ReplacementAlgorithm.OPT:
            self._replace_optimal(page)
            return
        if len(self._resident) >= self.frames:
            _, victim = self._resident.popitem(last=False)
            if self.algorithm is ReplacementAlgorithm.CLOCK:
                victim.dirty = False
        if self.algorithm is ReplacementAlgorithm.CLOCK:
            page.used = True
            page.dirty = instruction.operation != "R"
        self._resident[page.id] = page

    def _next_use(self, key: str) -> int | None:
        positions = self._reference_positions.get(key, [])
        index = bisect_right(positions, self._position)
        return positions[index] if index < len(positions) else None

    def _replace_optimal(self, page: Page) -> None:
        if len(self._resident) >= self.frames:
            victim = None
            farthest = 0
            for key in self._resident:
                next_use = self._next_use(key)
                if next_use is None:
                    victim = key
                    break
                distance = next_use - self._position
                if distance > farthest:
                    farthest = distance
                    victim = key
            if victim is not None:
                del self._resident[victim]
        self._resident[page.id] = page