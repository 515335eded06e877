"""Producer and consumer threads sharing a bounded circular buffer."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Any, Callable, Optional, Sequence

SlotCallback = Callable[[Any, int], None]


class BoundedBuffer:
    """A fixed-size circular buffer guarded by counting semaphores.

    ``on_put`` and ``on_get`` are called with the item and its slot while
    the buffer lock is held, so their effects appear in buffer order.
    """

    def __init__(
        self,
        size: int = 5,
        on_put: Optional[SlotCallback] = None,
        on_get: Optional[SlotCallback] = None,
    ) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._empty = threading.Semaphore(size)
        self._full = threading.Semaphore(0)
        self._lock = threading.Lock()
        self._in = 0
        self._out = 0
        self._on_put = on_put
        self._on_get = on_get

    def put(self, item: Any) -> int:
        """Store an item, blocking while the buffer is full; return its slot."""
        self._empty.acquire()
        with self._lock:
            slot = self._in
            self._slots[slot] = item
            if self._on_put is not None:
                self._on_put(item, slot)
            self._in = (slot + 1) % self.size
        self._full.release()
        return slot

    def get(self) -> Any:
        """Remove and return the oldest item, blocking while the buffer is empty."""
        self._full.acquire()
        with self._lock:
            slot = self._out
            item = self._slots[slot]
            self._slots[slot] = None
            if self._on_get is not None:
                self._on_get(item, slot)
            self._out = (slot + 1) % self.size
        self._empty.release()
        return item


def run(
    count: int = 20,
    buffer_size: int = 5,
    item: Any = 0,
    emit: Callable[[str], None] = print,
) -> list[Any]:
    """Run one producer and one consumer for ``count`` items each.

    Every put and get is reported through ``emit``; the consumed items are
    returned in the order they were taken.
    """
    if count < 0:
        raise ValueError("count must not be negative")

    buffer = BoundedBuffer(
        buffer_size,
        on_put=lambda value, slot: emit(f"producer produced {value} at {slot}"),
        on_get=lambda value, slot: emit(f"CONSUMER CONSUMED {value} FROM  {slot}"),
    )
    consumed: list[Any] = []

    def produce() -> None:
        for _ in range(count):
            buffer.put(item)

    def consume() -> None:
        for _ in range(count):
            consumed.append(buffer.get())

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the producer/consumer simulation and print every step."""
    parser = argparse.ArgumentParser(
        prog="producer-consumer",
        description="One producer and one consumer sharing a bounded buffer.",
    )
    parser.add_argument("--count", type=int, default=20, help="items to produce")
    parser.add_argument("--size", type=int, default=5, help="buffer size")
    parser.add_argument("--item", type=int, default=0, help="value produced")
    args = parser.parse_args(argv)

    try:
        run(args.count, args.size, args.item, print)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())