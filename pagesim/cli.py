"""Command line analysis of trace files under every replacement algorithm."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from .memory import MemoryManager
from .types import ReplacementAlgorithm

ALGORITHMS = (
    ReplacementAlgorithm.FIFO,
    ReplacementAlgorithm.LRU,
    ReplacementAlgorithm.CLOCK,
    ReplacementAlgorithm.OPT,
)
FRAME_COUNTS = (10, 50, 100)
PAGE_SIZE = 4096
AVG_BYTES_PER_LINE = 11
CYCLE_LENGTH = 100_000_000
MEMORY_TIME_NS = 100
FAULT_TIME_NS = 10_000
DEFAULT_TRACES = ("ArchivosParaTrabajar/bzip.trace", "ArchivosParaTrabajar/gcc.trace")


def analyze(path, out: Optional[TextIO] = None) -> None:
    """Simulate ``path`` for each algorithm and frame count and report."""
    out = sys.stdout if out is None else out
    print(f"\nAnalysis of file: {path}", file=out)
    print("=" * 58, file=out)
    for algorithm in ALGORITHMS:
        for frames in FRAME_COUNTS:
            manager = MemoryManager(frames, PAGE_SIZE, AVG_BYTES_PER_LINE, CYCLE_LENGTH)
            manager.add_process(path)
            manager.algorithm = algorithm
            manager.cycle()

            print(
                f"{'Algorithm':<10}{'Frames':<8}{'PageFaults':<12}{'HitRate (%)':<12}{'EAT (ns)':<10}",
                file=out,
            )
            print("-" * 58, file=out)
            hit_rate = manager.hit_rate * 100.0
            eat = manager.effective_access_time(MEMORY_TIME_NS, FAULT_TIME_NS)
            print(
                f"{algorithm.value:<10}{frames:<8}{manager.page_faults:<12}{hit_rate:<12.2f}{eat:<10.2f}",
                file=out,
            )
            print(file=out)
            print(manager.memory_map(), file=out)
            print(file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pagesim",
        description="Compare page replacement algorithms on memory trace files.",
    )
    parser.add_argument("traces", nargs="*", default=list(DEFAULT_TRACES), help="trace files to analyse")
    args = parser.parse_args(argv)
    for trace in args.traces:
        try:
            analyze(trace)
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())