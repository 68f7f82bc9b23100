"""Page replacement algorithms and process scheduling policies."""

from __future__ import annotations

from enum import Enum


class ReplacementAlgorithm(Enum):
    """Policy used to choose which resident page to evict on a fault."""

    FIFO = "FIFO"
    LRU = "LRU"
    OPT = "OPT"
    CLOCK = "CLOCK"

    @classmethod
    def parse(cls, text: str) -> ReplacementAlgorithm:
        """Return the algorithm named exactly by ``text``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid replacement algorithm: {text}") from None

    def description(self) -> str:
        """Return the long name of the algorithm."""
        return _ALGORITHM_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


class Scheduler(Enum):
    """Policy used to choose which process runs next."""

    FCFS = "FCFS"
    SJF = "SJF"
    SRTN = "SRTN"

    @classmethod
    def parse(cls, text: str) -> Scheduler:
        """Return the scheduler named exactly by ``text``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid scheduler: {text}") from None

    def description(self) -> str:
        """Return the long name of the scheduler."""
        return _SCHEDULER_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_ALGORITHM_DESCRIPTIONS = {
    ReplacementAlgorithm.FIFO: "First In First Out",
    ReplacementAlgorithm.LRU: "Least Recently Used",
    ReplacementAlgorithm.OPT: "Optimal",
    ReplacementAlgorithm.CLOCK: "Clock (LRU approximation)",
}

_SCHEDULER_DESCRIPTIONS = {
    Scheduler.FCFS: "First Come First Serve",
    Scheduler.SJF: "Shortest Job First",
    Scheduler.SRTN: "Shortest Remaining Time First",
}