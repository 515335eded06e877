"""Banker's algorithm: safety check and resource requests."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass
from typing import Optional, Sequence


class RequestOutcome(enum.Enum):
    """What happened to a resource request."""

    GRANTED = "granted"
    MUST_WAIT = "must wait"
    DENIED = "denied"


class ExceedsNeedError(ValueError):
    """A process asked for more than its remaining need."""


@dataclass
class ResourceState:
    """Allocation, maximum demand and available resources of a system."""

    allocation: list[list[int]]
    maximum: list[list[int]]
    available: list[int]

    def __post_init__(self) -> None:
        self.allocation = [list(row) for row in self.allocation]
        self.maximum = [list(row) for row in self.maximum]
        self.available = list(self.available)
        if len(self.allocation) != len(self.maximum):
            raise ValueError("allocation and maximum differ in process count")
        width = len(self.available)
        for row in (*self.allocation, *self.maximum):
            if len(row) != width:
                raise ValueError("every row must have one entry per resource")

    def need(self) -> list[list[int]]:
        """Remaining need of each process: maximum minus allocation."""
        return [
            [m - a for m, a in zip(max_row, alloc_row)]
            for max_row, alloc_row in zip(self.maximum, self.allocation)
        ]

    def _finishing_order(self) -> list[int]:
        """Processes in the order the safety sweep lets them finish."""
        work = list(self.available)
        need = self.need()
        finished = [False] * len(need)
        order: list[int] = []
        progress = True
        while progress:
            progress = False
            for process, (need_row, alloc_row) in enumerate(zip(need, self.allocation)):
                if finished[process] or any(n > w for n, w in zip(need_row, work)):
                    continue
                finished[process] = True
                order.append(process)
                work = [w + a for w, a in zip(work, alloc_row)]
                progress = True
        return order

    def safe_sequence(self) -> Optional[list[int]]:
        """A safe sequence of process indices, or None if the system deadlocks."""
        order = self._finishing_order()
        return order if len(order) == len(self.allocation) else None

    def request(self, process: int, request: Sequence[int]) -> RequestOutcome:
        """Try to grant a request; keep it only if the process can still finish."""
        if not 0 <= process < len(self.allocation):
            raise ValueError(f"no process P{process}")
        request = list(request)
        if len(request) != len(self.available):
            raise ValueError("request must have one entry per resource")

        if any(r > n for r, n in zip(request, self.need()[process])):
            raise ExceedsNeedError(f"process P{process} requested more than its need")
        if any(r > a for r, a in zip(request, self.available)):
            return RequestOutcome.MUST_WAIT

        self._shift(process, request, 1)
        if process in self._finishing_order():
            return RequestOutcome.GRANTED
        self._shift(process, request, -1)
        return RequestOutcome.DENIED

    def _shift(self, process: int, request: list[int], sign: int) -> None:
        self.available = [a - sign * r for a, r in zip(self.available, request)]
        self.allocation[process] = [
            a + sign * r for a, r in zip(self.allocation[process], request)
        ]


def _format_matrix(matrix: list[list[int]]) -> str:
    return "\n".join(
        f" P{index}" + "".join(f"  {value}" for value in row)
        for index, row in enumerate(matrix)
    )


def _safety_report(sequence: Optional[list[int]]) -> str:
    if sequence is None:
        return "\nThe system is in deadlock"
    steps = "".join(f" P{process}" for process in sequence)
    return f"\nThe system is in a safe state!\nSafe sequence is: {steps}"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a system state from standard input, handle one request, report safety."""
    parser = argparse.ArgumentParser(
        prog="bankers",
        description=(
            "Read whitespace-separated integers from standard input: process count, "
            "resource count, allocation matrix, maximum matrix, available vector, "
            "then 1 with a process id and request vector to make a request, or 0."
        ),
    )
    parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("error: input must be integers", file=sys.stderr)
        return 1

    stream = iter(numbers)

    def take(count: int) -> list[int]:
        values = [value for _, value in zip(range(count), stream)]
        if len(values) != count:
            raise ValueError("not enough input")
        return values

    try:
        processes, resources = take(2)
        if processes < 0 or resources < 0:
            raise ValueError("counts must not be negative")
        allocation = [take(resources) for _ in range(processes)]
        maximum = [take(resources) for _ in range(processes)]
        state = ResourceState(allocation, maximum, take(resources))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("\n****** Entered Data ******")
    print("\nInitial Allocation:\n")
    print(_format_matrix(state.allocation))
    print("\nMaximum Requirement:\n")
    print(_format_matrix(state.maximum))
    print("\nAvailable Resources:")
    print("".join(f"{value} " for value in state.available))
    print("\nNeed Matrix:\n")
    print(_format_matrix(state.need()))

    choice = next(stream, 0)
    if choice == 1:
        try:
            process = take(1)[0]
            request = take(resources)
            outcome = state.request(process, request)
        except ExceedsNeedError:
            print(f"\nError: Process P{process} requested more than its need.")
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        else:
            if outcome is RequestOutcome.MUST_WAIT:
                print(f"\nProcess P{process} must wait, not enough resources available.")
            elif outcome is RequestOutcome.GRANTED:
                print(_safety_report(state.safe_sequence()))
                print(f"\nRequest granted to Process P{process}.")
            else:
                print(_safety_report(None))
                print("\nRequest cannot be granted, rolling back.")

    print(_safety_report(state.safe_sequence()))
    return 0


if __name__ == "__main__":
    sys.exit(main())