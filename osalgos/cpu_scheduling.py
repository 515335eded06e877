"""CPU scheduling simulations: FCFS, priority, round robin, SJF and SRTF."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Process:
    """A process as submitted to the scheduler."""

    pid: int
    arrival: int
    burst: int
    priority: int | None = None


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time at which it completed."""

    process: Process
    completion: int

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival(self) -> int:
        return self.process.arrival

    @property
    def burst(self) -> int:
        return self.process.burst

    @property
    def priority(self) -> int | None:
        return self.process.priority

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


def _require_positive_bursts(processes: Sequence[Process]) -> None:
    for process in processes:
        if process.burst <= 0:
            raise ValueError(f"process {process.pid} has a non-positive burst time")


def _run_back_to_back(ordered: Iterable[Process]) -> list[ScheduledProcess]:
    """Run processes in the given order; the first starts at its arrival."""
    results: list[ScheduledProcess] = []
    previous: int | None = None
    for process in ordered:
        start = process.arrival if previous is None else max(previous, process.arrival)
        previous = start + process.burst
        results.append(ScheduledProcess(process, previous))
    return results


def fcfs(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """First come, first served, ordered by arrival time (stable)."""
    clock = 0
    results = []
    for process in sorted(processes, key=lambda p: p.arrival):
        clock = max(clock, process.arrival) + process.burst
        results.append(ScheduledProcess(process, clock))
    return results


def priority_schedule(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Non-preemptive priority scheduling; a lower number runs first."""
    procs = list(processes)
    for process in procs:
        if process.priority is None:
            raise ValueError(f"process {process.pid} has no priority")
    return _run_back_to_back(sorted(procs, key=lambda p: p.priority))


def sjf(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Non-preemptive shortest job first, ordered by burst time (stable)."""
    return _run_back_to_back(sorted(processes, key=lambda p: p.burst))


def round_robin(processes: Iterable[Process], quantum: int) -> list[ScheduledProcess]:
    """Round robin with the given time quantum; results keep input order."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    procs = list(processes)
    _require_positive_bursts(procs)

    remaining = [p.burst for p in procs]
    completion = [0] * len(procs)
    ready: deque[int] = deque()
    clock = 0
    finished = 0

    while finished < len(procs):
        for index, process in enumerate(procs):
            if process.arrival <= clock and remaining[index] > 0 and index not in ready:
                ready.append(index)

        if not ready:
            clock += 1
            continue

        index = ready.popleft()
        if remaining[index] <= quantum:
            clock += remaining[index]
            remaining[index] = 0
            completion[index] = clock
            finished += 1
        else:
            clock += quantum
            remaining[index] -= quantum
            ready.append(index)

    return [ScheduledProcess(p, done) for p, done in zip(procs, completion)]


def srtf(processes: Iterable[Process]) -> list[ScheduledProcess]:
    """Preemptive shortest remaining time first, in steps of one time unit."""
    ordered = sorted(processes, key=lambda p: p.arrival)
    _require_positive_bursts(ordered)

    remaining = [p.burst for p in ordered]
    completion = [0] * len(ordered)
    clock = 0
    finished = 0

    while finished < len(ordered):
        ready = [
            index
            for index, process in enumerate(ordered)
            if process.arrival <= clock and remaining[index] > 0
        ]
        clock += 1
        if not ready:
            continue
        current = min(ready, key=remaining.__getitem__)
        remaining[current] -= 1
        if remaining[current] == 0:
            completion[current] = clock
            finished += 1

    return [ScheduledProcess(p, done) for p, done in zip(ordered, completion)]


def average_waiting(results: Sequence[ScheduledProcess]) -> float:
    """Mean waiting time of the scheduled processes."""
    if not results:
        raise ValueError("no processes to average")
    return sum(r.waiting for r in results) / len(results)


def average_turnaround(results: Sequence[ScheduledProcess]) -> float:
    """Mean turnaround time of the scheduled processes."""
    if not results:
        raise ValueError("no processes to average")
    return sum(r.turnaround for r in results) / len(results)


def format_table(results: Sequence[ScheduledProcess]) -> str:
    """Render results as a tab-separated table with a header line."""
    with_priority = any(r.priority is not None for r in results)
    columns = ["Process ID", "Arrival Time", "Burst Time"]
    if with_priority:
        columns.append("Priority")
    columns += ["Completion Time", "Turnaround Time", "Waiting Time"]

    lines = ["\t".join(columns)]
    for r in results:
        values = [r.pid, r.arrival, r.burst]
        if with_priority:
            values.append(r.priority)
        values += [r.completion, r.turnaround, r.waiting]
        lines.append("\t\t".join(str(v) for v in values))
    return "\n".join(lines)


_ALGORITHMS = {
    "fcfs": fcfs,
    "priority": priority_schedule,
    "sjf": sjf,
    "srtf": srtf,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a process list from standard input and print the schedule."""
    parser = argparse.ArgumentParser(
        prog="cpu-scheduling",
        description=(
            "Read whitespace-separated integers from standard input: the process "
            "count, the quantum (rr only), then 'id arrival burst' per process "
            "('id arrival burst priority' for priority)."
        ),
    )
    parser.add_argument("algorithm", choices=[*_ALGORITHMS, "rr"])
    args = parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("error: input must be integers", file=sys.stderr)
        return 1

    header = 2 if args.algorithm == "rr" else 1
    if len(numbers) < header:
        print("error: missing process count", file=sys.stderr)
        return 1
    count = numbers[0]
    fields = 4 if args.algorithm == "priority" else 3
    body = numbers[header:]
    if count < 0 or len(body) < count * fields:
        print("error: not enough process data", file=sys.stderr)
        return 1

    processes = [
        Process(*body[start:start + fields])
        for start in range(0, count * fields, fields)
    ]

    try:
        if args.algorithm == "rr":
            results = round_robin(processes, numbers[1])
        else:
            results = _ALGORITHMS[args.algorithm](processes)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_table(results))
    if args.algorithm == "fcfs" and results:
        print(f"\nAverage Waiting Time: {average_waiting(results):.2f}")
        print(f"Average Turnaround Time: {average_turnaround(results):.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())