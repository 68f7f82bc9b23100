# pagesim

A small simulator for virtual-memory page replacement. It reads memory
access traces and reports page faults, hit rate and effective access time
under four replacement algorithms: FIFO, LRU, CLOCK and OPT.

## Trace format

One memory access per line: a hexadecimal address followed by an operation,
`R` for read or `W` for write.

```
0041f7a0 R
13f5e2c0 W
05e78900 R
```

The leading hexadecimal digits of the address are used (an optional `0x`
prefix is accepted) and the value is taken as an unsigned 32-bit number.
An address maps to page `address // page_size`. Pages are identified as
`<process>-<page>`.

## Command line

```
pagesim path/to/first.trace path/to/second.trace
```

Each trace is run through every algorithm (FIFO, LRU, CLOCK, OPT) with 10,
50 and 100 frames, a page size of 4096 bytes, a memory access time of
100 ns and a page-fault service time of 10000 ns. For each run it prints the
number of page faults, the hit rate, the effective access time and a map of
the frames: `S` for a dirty page, `C` for a clean one and `.` for a free
frame.

With no arguments it analyses `ArchivosParaTrabajar/bzip.trace` and
`ArchivosParaTrabajar/gcc.trace`, relative to the current directory. If a
trace cannot be opened it prints the error and exits with status 1.

The same report can be produced from Python with
`pagesim.cli.analyze(path, out)`, which writes to `out` (standard output
when `out` is `None`).

## Library use

```python
from pagesim.memory import MemoryManager
from pagesim.types import ReplacementAlgorithm, Scheduler

manager = MemoryManager(frames=10, page_size=4096, avg_bytes_per_line=11,
                        cycle_length=100_000_000)
manager.add_process("path/to/first.trace")
manager.algorithm = ReplacementAlgorithm.parse("LRU")
manager.scheduler = Scheduler.FCFS
manager.cycle()

print(manager.page_faults)
print(manager.hit_rate)
print(manager.effective_access_time(100, 10000))
print(manager.memory_map())
```

`frames`, `page_size` and `avg_bytes_per_line` must be positive, otherwise
`MemoryManager` raises `ValueError`. The algorithm defaults to FIFO and the
scheduler to FCFS.

Each call to `cycle()` picks a process with the configured scheduler
(`FCFS`, `SJF` or `SRTN`) and runs up to `cycle_length` of its accesses.
A process whose trace is exhausted is removed. `cycle()` returns `False`
when there is no process left to run, and raises `OSError` if a trace
cannot be opened. A process's instruction count, used by `SJF` and `SRTN`,
is estimated from its trace file's size divided by `avg_bytes_per_line`.

`page_faults` and `hit_rate` are properties; `hit_rate` is NaN until at
least one access has been simulated. `memory_map()` returns the frame map
as a string, ten frames per row.

`OPT` needs the whole future reference string. It is built from every
process's trace the first time `cycle()` runs, so processes added after
that are not part of it.

`ReplacementAlgorithm.parse` and `Scheduler.parse` accept the exact names
above and raise `ValueError` otherwise; `description()` gives the long name.

The smaller pieces can be used on their own. `pagesim.instruction.Instruction`
parses one trace line (`Instruction.from_line`). `pagesim.page.Page` is a
page with its `used` and `dirty` bits. `pagesim.process.Process` reads one
trace file, one instruction at a time.

## What it does not do

The command line always uses the fixed settings listed above; frame counts,
page size, timings, algorithm and scheduler can only be changed through the
library. Results are printed, not saved.