"""String helpers for classpath and entry names."""

from __future__ import annotations

import re
from typing import Iterator


def split_tokens(value: str, delimiters: str) -> Iterator[str]:
    """Split on any of the delimiter characters, dropping empty tokens."""
    if not delimiters:
        if value:
            yield value
        return
    for token in re.split(f"[{re.escape(delimiters)}]", value):
        if token:
            yield token


def to_forward_slashes(path: str) -> str:
    return path.replace("\\", "/")


def relative_to_root(root: str, path: str) -> str:
    """Strip the root prefix from a path and drop one leading separator."""
    relative = path[len(root):]
    if relative[:1] in ("/", "\\"):
        relative = relative[1:]
    return relative
