"""Utility helpers for working with files."""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator

READ_SIZE = 1 << 16


def count_stream_bytes(handle: BinaryIO) -> int:
    """Read a stream to exhaustion and return how many bytes it produced."""
    size = 0
    for chunk in iter(lambda: handle.read(READ_SIZE), b""):
        size += len(chunk)
    return size


def list_directory(path: str) -> list[os.DirEntry]:
    """Return the entries of a directory sorted by name.

    Raises OSError when the directory cannot be listed.
    """
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def iter_directory_files(path: str) -> Iterator[str]:
    """Yield the immediate children of a directory, or nothing if it cannot be listed."""
    try:
        entries = list_directory(path)
    except OSError:
        return
    for entry in entries:
        yield entry.path
