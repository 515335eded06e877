"""Contiguous memory allocation: first, best and worst fit."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Block:
    """A memory block available for allocation."""

    id: int
    size: int


@dataclass(frozen=True)
class Request:
    """A process asking for memory."""

    id: int
    size: int


@dataclass(frozen=True)
class AllocationResult:
    """Blocks in the order considered and the block chosen for each request."""

    blocks: tuple[Block, ...]
    requests: tuple[Request, ...]
    assignment: tuple[Optional[int], ...]

    @property
    def placements(self) -> list[tuple[Request, Optional[Block]]]:
        return [
            (request, None if index is None else self.blocks[index])
            for request, index in zip(self.requests, self.assignment)
        ]

    def internal_fragmentation(self) -> int:
        """Unused space inside the blocks that were allocated."""
        return sum(
            block.size - request.size
            for request, block in self.placements
            if block is not None
        )

    def external_fragmentation(self) -> int:
        """Total size of the blocks left unallocated."""
        used = set(self.assignment)
        return sum(
            block.size for index, block in enumerate(self.blocks) if index not in used
        )


def _allocate(blocks: Iterable[Block], requests: Iterable[Request]) -> AllocationResult:
    blocks = tuple(blocks)
    requests = tuple(requests)
    free = [True] * len(blocks)
    assignment: list[Optional[int]] = []
    for request in requests:
        chosen = next(
            (
                index
                for index, block in enumerate(blocks)
                if free[index] and block.size >= request.size
            ),
            None,
        )
        if chosen is not None:
            free[chosen] = False
        assignment.append(chosen)
    return AllocationResult(blocks, requests, tuple(assignment))


def first_fit(blocks: Iterable[Block], processes: Iterable[Request]) -> AllocationResult:
    """Give each request the first free block large enough, in block order."""
    return _allocate(blocks, processes)


def best_fit(blocks: Iterable[Block], processes: Iterable[Request]) -> AllocationResult:
    """Give each request the smallest free block large enough."""
    return _allocate(sorted(blocks, key=lambda b: b.size), processes)


def worst_fit(blocks: Iterable[Block], processes: Iterable[Request]) -> AllocationResult:
    """Give each request the largest free block."""
    return _allocate(sorted(blocks, key=lambda b: b.size, reverse=True), processes)


def _report(result: AllocationResult) -> str:
    lines = ["", "Process ID\tProcess Size\tBlock No"]
    for request, block in result.placements:
        where = "Not Allocated" if block is None else str(block.id)
        lines.append(f"{request.id}\t\t{request.size}\t\t{where}")
    lines.append(f"Total Internal Fragmentation: {result.internal_fragmentation()}")
    lines.append(f"Total External Fragmentation: {result.external_fragmentation()}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read blocks and processes from standard input and print all three fits."""
    parser = argparse.ArgumentParser(
        prog="memory-alloc",
        description=(
            "Read whitespace-separated integers from standard input: the block "
            "count, 'id size' per block, the process count, 'id size' per process."
        ),
    )
    parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("error: input must be integers", file=sys.stderr)
        return 1

    def pairs(start: int, count: int) -> list[tuple[int, int]]:
        chunk = numbers[start:start + 2 * count]
        return list(zip(chunk[::2], chunk[1::2]))

    if not numbers or numbers[0] < 0:
        print("error: not enough input", file=sys.stderr)
        return 1
    block_count = numbers[0]
    count_at = 1 + 2 * block_count
    if len(numbers) <= count_at or numbers[count_at] < 0:
        print("error: not enough input", file=sys.stderr)
        return 1
    process_count = numbers[count_at]
    if len(numbers) < count_at + 1 + 2 * process_count:
        print("error: not enough input", file=sys.stderr)
        return 1

    blocks = [Block(i, size) for i, size in pairs(1, block_count)]
    requests = [Request(i, size) for i, size in pairs(count_at + 1, process_count)]

    for strategy in (first_fit, best_fit, worst_fit):
        print(_report(strategy(blocks, requests)))
    return 0


if __name__ == "__main__":
    sys.exit(main())