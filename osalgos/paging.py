"""Page replacement simulations: FIFO, LRU and LFU."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

Frames = tuple[Optional[int], ...]


@dataclass(frozen=True)
class PagingResult:
    """Outcome of running a page reference string through the frames."""

    references: int
    insertions: tuple[tuple[int, Frames], ...]
    frames: Frames

    @property
    def faults(self) -> int:
        return len(self.insertions)

    @property
    def hits(self) -> int:
        return self.references - self.faults


def _check_frames(frame_count: int) -> None:
    if frame_count <= 0:
        raise ValueError("frame count must be positive")


def fifo_replace(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace pages in the order in which frames were filled."""
    _check_frames(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    insertions = []
    references = 0
    next_victim = 0
    for page in pages:
        references += 1
        if page in frames:
            continue
        frames[next_victim] = page
        next_victim = (next_victim + 1) % frame_count
        insertions.append((page, tuple(frames)))
    return PagingResult(references, tuple(insertions), tuple(frames))


def lru_replace(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the least recently used page.

    Each use stamps the frame with a counter starting at zero; empty frames
    carry stamp zero, and ties go to the lowest frame index.
    """
    _check_frames(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    last_used = [0] * frame_count
    insertions = []
    references = 0
    clock = 0
    for page in pages:
        references += 1
        if page in frames:
            last_used[frames.index(page)] = clock
            clock += 1
            continue
        victim = min(range(frame_count), key=last_used.__getitem__)
        frames[victim] = page
        last_used[victim] = clock
        clock += 1
        insertions.append((page, tuple(frames)))
    return PagingResult(references, tuple(insertions), tuple(frames))


def lfu_replace(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Replace the least frequently used page; ties go to the lowest frame."""
    _check_frames(frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    uses = [0] * frame_count
    insertions = []
    references = 0
    for page in pages:
        references += 1
        if page in frames:
            uses[frames.index(page)] += 1
            continue
        victim = min(range(frame_count), key=uses.__getitem__)
        frames[victim] = page
        uses[victim] = 1
        insertions.append((page, tuple(frames)))
    return PagingResult(references, tuple(insertions), tuple(frames))


def format_frames(frames: Iterable[Optional[int]]) -> str:
    """Render frame contents, with '-' for an empty frame."""
    cells = "".join(f"{'-' if frame is None else frame} " for frame in frames)
    return f"[ {cells}]"


_ALGORITHMS = {
    "fifo": fifo_replace,
    "lru": lru_replace,
    "lfu": lfu_replace,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a reference string from standard input and print each fault."""
    parser = argparse.ArgumentParser(
        prog="paging",
        description=(
            "Read whitespace-separated integers from standard input: the page "
            "count, the page references, then the frame count."
        ),
    )
    parser.add_argument("algorithm", choices=list(_ALGORITHMS))
    args = parser.parse_args(argv)

    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("error: input must be integers", file=sys.stderr)
        return 1

    if not numbers or numbers[0] < 0 or len(numbers) < numbers[0] + 2:
        print("error: not enough input", file=sys.stderr)
        return 1
    count = numbers[0]
    pages = numbers[1:1 + count]
    frame_count = numbers[1 + count]

    try:
        result = _ALGORITHMS[args.algorithm](pages, frame_count)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for page, frames in result.insertions:
        print(f"Page {page} inserted -> {format_frames(frames)}")
    print(f"\nTotal Page Faults = {result.faults}")
    return 0


if __name__ == "__main__":
    sys.exit(main())