"""File operations: write then read back, and listing directory entries with stats."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

DEFAULT_TEXT = "Hello, this is sample text"


@dataclass(frozen=True)
class FileStat:
    """Size, permission bits and modification time of a directory entry."""

    name: str
    size: Optional[int] = None
    permissions: Optional[int] = None
    modified: Optional[int] = None

    @property
    def available(self) -> bool:
        return self.size is not None


def write_and_read(path: str | os.PathLike[str], text: str = DEFAULT_TEXT) -> str:
    """Write text at the start of a file (creating it), then read it back."""
    data = text.encode()
    fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o666)
    with os.fdopen(fd, "r+b") as handle:
        handle.write(data)
        handle.flush()
        handle.seek(0)
        return handle.read(len(data)).decode(errors="replace")


def list_file_stats(directory: str | os.PathLike[str] = ".") -> list[FileStat]:
    """Stat every entry of a directory, including '.' and '..'."""
    base = Path(directory)
    names = [".", "..", *sorted(os.listdir(base))]
    stats = []
    for name in names:
        try:
            info = os.stat(base / name)
        except OSError:
            stats.append(FileStat(name))
            continue
        stats.append(
            FileStat(name, info.st_size, info.st_mode & 0o777, int(info.st_mtime))
        )
    return stats


def format_stats(stats: Iterable[FileStat]) -> str:
    """Render entries in the same layout as the directory listing report."""
    lines = ["Files and their stats:"]
    for entry in stats:
        if not entry.available:
            lines.append(f"Unable to get stats for {entry.name}")
            continue
        lines += [
            f"Name: {entry.name}",
            f"Size: {entry.size} bytes",
            f"Permissions: {entry.permissions:o}",
            f"Last modified: {entry.modified}",
            "-" * 28,
        ]
    return "\n".join(lines)


def fileread_main(argv: Sequence[str] | None = None) -> int:
    """Write sample text to a file, read it back and print it."""
    parser = argparse.ArgumentParser(
        prog="fileread", description="Write text to a file and read it back."
    )
    parser.add_argument("path", nargs="?", default="example.txt")
    parser.add_argument("--text", default=DEFAULT_TEXT)
    args = parser.parse_args(argv)

    try:
        content = write_and_read(args.path, args.text)
    except OSError as exc:
        print(f"File open error: {exc.strerror or exc}", file=sys.stderr)
        return 1
    print(f"File content: {content}")
    return 0


def filestatus_main(argv: Sequence[str] | None = None) -> int:
    """Print the stats of every entry in a directory."""
    parser = argparse.ArgumentParser(
        prog="filestatus", description="List directory entries with their stats."
    )
    parser.add_argument("directory", nargs="?", default=".")
    args = parser.parse_args(argv)

    try:
        stats = list_file_stats(args.directory)
    except OSError:
        print("Error opening directory")
        return 1
    print(format_stats(stats))
    return 0


if __name__ == "__main__":
    sys.exit(filestatus_main())