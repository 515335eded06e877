"""Disk head scheduling: FCFS, SCAN and C-SCAN seek orders and totals."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Move:
    """One movement of the disk head."""

    start: int
    end: int

    @property
    def seek(self) -> int:
        return abs(self.end - self.start)


def _split(head: int, requests: Iterable[int]) -> tuple[list[int], list[int]]:
    requests = list(requests)
    upper = sorted(r for r in requests if r >= head)
    lower = [r for r in requests if r < head]
    return upper, lower


def fcfs_order(head: int, requests: Iterable[int]) -> list[int]:
    """Head positions visited when serving requests in arrival order."""
    return [head, *requests]


def scan_order(head: int, requests: Iterable[int], disk_range: int) -> list[int]:
    """Sweep up to the end of the disk, then serve the rest going down."""
    upper, lower = _split(head, requests)
    return [head, *upper, disk_range, *sorted(lower, reverse=True)]


def cscan_order(head: int, requests: Iterable[int], disk_range: int) -> list[int]:
    """Sweep up to the end of the disk, then serve the rest in ascending order."""
    upper, lower = _split(head, requests)
    return [head, *upper, disk_range, *sorted(lower)]


def seek_moves(order: Iterable[int]) -> list[Move]:
    """The head movements between consecutive positions."""
    return [Move(start, end) for start, end in pairwise(order)]


def total_seek(order: Iterable[int]) -> int:
    """Total distance the head travels over the given positions."""
    return sum(move.seek for move in seek_moves(order))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a request list from standard input and print the head movements."""
    parser = argparse.ArgumentParser(
        prog="disk-scheduling",
        description=(
            "Read whitespace-separated integers from standard input: the disk "
            "range, the request count, the requests, then the head position."
        ),
    )
    parser.add_argument("algorithm", choices=["fcfs", "scan", "cscan"])
    args = parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("error: input must be integers", file=sys.stderr)
        return 1

    if len(numbers) < 2 or numbers[1] < 0 or len(numbers) < numbers[1] + 3:
        print("error: not enough input", file=sys.stderr)
        return 1
    disk_range, count = numbers[0], numbers[1]
    requests = numbers[2:2 + count]
    head = numbers[2 + count]

    if args.algorithm == "fcfs":
        order = fcfs_order(head, requests)
        print("\n--- FCFS Disk Scheduling ---")
        for move in seek_moves(order):
            print(f"\nDisk head moves from {move.start} to {move.end} "
                  f"with seek time {move.seek}", end="")
        print(f"\n\nTotal seek time: {total_seek(order)}")
        return 0

    if args.algorithm == "scan":
        order = scan_order(head, requests, disk_range)
    else:
        order = cscan_order(head, requests, disk_range)
    for move in seek_moves(order):
        print(f"Move from {move.start} to {move.end}: Seek = {move.seek}")
    print(f"\nTotal Seek Time = {total_seek(order)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())