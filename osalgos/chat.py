"""Two-party turn-taking chat over a named shared memory segment."""

from __future__ import annotations

import argparse
import struct
import sys
import time
from multiprocessing import shared_memory
from typing import Callable, Optional, Sequence

QUIT = -1
MESSAGE_SIZE = 128
_LAYOUT = struct.Struct(f"ii{MESSAGE_SIZE}s")
_TURN_OFFSET = 0
_MESSAGE_OFFSET = 8
_POLL_SECONDS = 0.001


class ChatChannel:
    """A shared record holding whose turn it is and the last message sent."""

    def __init__(self, name: str = "JO", first: Optional[int] = None) -> None:
        name = name.lstrip("/")
        try:
            self._shm = shared_memory.SharedMemory(name, create=True, size=_LAYOUT.size)
        except FileExistsError:
            self._shm = shared_memory.SharedMemory(name)
        if self._shm.size < _LAYOUT.size:
            self._shm.close()
            raise ValueError(f"shared memory segment {name!r} is too small")
        self._closed = False
        if first is not None and self.turn not in (1, 2):
            _LAYOUT.pack_into(self._shm.buf, 0, first, 0, self._raw_message())

    def __enter__(self) -> ChatChannel:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def turn(self) -> int:
        return struct.unpack_from("i", self._shm.buf, _TURN_OFFSET)[0]

    def _set_turn(self, value: int) -> None:
        struct.pack_into("i", self._shm.buf, _TURN_OFFSET, value)

    def _raw_message(self) -> bytes:
        return bytes(self._shm.buf[_MESSAGE_OFFSET:_MESSAGE_OFFSET + MESSAGE_SIZE])

    def wait_turn(self, me: int) -> bool:
        """Wait while another party holds the turn; False if the chat was quit."""
        while True:
            turn = self.turn
            if turn == QUIT:
                return False
            if turn <= 0 or turn == me:
                return True
            time.sleep(_POLL_SECONDS)

    def take_message(self) -> str:
        """Return the pending message, or '' if none, and clear it."""
        text = self._raw_message().split(b"\0", 1)[0].decode(errors="ignore")
        struct.pack_into(f"{MESSAGE_SIZE}s", self._shm.buf, _MESSAGE_OFFSET, b"")
        return text

    def send(self, text: str, peer: int) -> None:
        """Store a message (at most 127 bytes) and hand the turn to the peer."""
        data = text.split("\n", 1)[0].encode()[:MESSAGE_SIZE - 1]
        struct.pack_into(f"{MESSAGE_SIZE}s", self._shm.buf, _MESSAGE_OFFSET, data)
        self._set_turn(peer)

    def quit(self) -> None:
        """Mark the chat as finished for both parties."""
        self._set_turn(QUIT)

    def close(self) -> None:
        """Detach from the segment and remove its name."""
        if self._closed:
            return
        self._closed = True
        self._shm.close()
        try:
            self._shm.unlink()
        except FileNotFoundError:
            pass


def chat_loop(
    channel: ChatChannel,
    me: int,
    peer: int,
    read_line: Callable[[str], str],
    output: Callable[[str], None],
) -> None:
    """Alternate turns: show the peer's message, read a line, send it.

    Entering 'q', or running out of input, ends the chat for both sides.
    """
    while True:
        if channel.turn == QUIT or not channel.wait_turn(me):
            output(f"Chat {me} is exiting...")
            return
        message = channel.take_message()
        if message:
            output(f"Chat {peer}: {message}")
        try:
            line = read_line(f"Chat {me}: ")
        except EOFError:
            line = "q"
        line = line.split("\n", 1)[0]
        if line == "q":
            channel.quit()
            return
        channel.send(line, peer)


def main(argv: Sequence[str] | None = None) -> int:
    """Join the shared chat as party 1 or 2 and talk until someone quits."""
    parser = argparse.ArgumentParser(
        prog="chat", description="Turn-taking chat between two terminals."
    )
    parser.add_argument("party", nargs="?", type=int, choices=[1, 2], default=1)
    parser.add_argument("--name", default="JO", help="shared memory name")
    args = parser.parse_args(argv)

    peer = 3 - args.party
    try:
        channel = ChatChannel(args.name, first=1 if args.party == 1 else None)
    except (OSError, ValueError):
        print("Error in creating Shared Memory!")
        return 1
    with channel:
        chat_loop(channel, args.party, peer, input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())