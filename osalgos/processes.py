"""Starting child processes and waiting for them."""

from __future__ import annotations

import argparse
import multiprocessing
import os
import subprocess
import sys
from typing import Sequence

DEFAULT_COMMAND = ("./ADD", "10", "20")


def spawn_and_wait(command: Sequence[str]) -> int:
    """Run a command as a child process, wait for it and return its exit code."""
    if not command:
        raise ValueError("command must not be empty")
    return subprocess.run(list(command), check=False).returncode


def _report_ids(connection) -> None:
    connection.send((os.getpid(), os.getppid()))
    connection.close()


def describe_child() -> tuple[int, int]:
    """Start a child process and return the (pid, parent pid) it reports."""
    receiver, sender = multiprocessing.Pipe(duplex=False)
    child = multiprocessing.Process(target=_report_ids, args=(sender,))
    child.start()
    sender.close()
    try:
        ids = receiver.recv()
    finally:
        receiver.close()
        child.join()
    return ids


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command in a child process, or show a child's process ids."""
    parser = argparse.ArgumentParser(
        prog="processes", description="Create child processes and wait for them."
    )
    commands = parser.add_subparsers(dest="action")
    spawn = commands.add_parser("spawn", help="run a command and wait for it")
    spawn.add_argument("command", nargs=argparse.REMAINDER)
    commands.add_parser("pid", help="show a child's pid and parent pid")
    args = parser.parse_args(argv)

    if args.action == "pid":
        try:
            pid, parent = describe_child()
        except OSError:
            print("Fork failed")
            return 1
        print(f"Child process: PID = {pid}, Parent PID = {parent}")
        print("Child process ended")
        return 0

    command = getattr(args, "command", None) or list(DEFAULT_COMMAND)
    print("Child process:", flush=True)
    try:
        spawn_and_wait(command)
    except FileNotFoundError as exc:
        print(f"error: cannot run {exc.filename or command[0]}", file=sys.stderr)
        print("Child terminated")
        return 1
    except OSError:
        print("Fork failed")
        return 1
    print("Child terminated")
    return 0


if __name__ == "__main__":
    sys.exit(main())