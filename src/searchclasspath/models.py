"""Core searchclasspath data models."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    ARCHIVE = "archive"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A single classpath location, either a directory or an archive file."""

    path: str

    @property
    def kind(self) -> EntryKind:
        """Inspect the filesystem now; the answer is not cached."""
        if os.path.isdir(self.path):
            return EntryKind.DIRECTORY
        if os.path.exists(self.path):
            return EntryKind.ARCHIVE
        return EntryKind.MISSING

    @property
    def basename(self) -> str:
        return os.path.basename(self.path.rstrip("/\\"))

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """One location where the requested class, package or resource was found."""

    location: str
    name: str
    modified: datetime | None = None
    size: int | None = None
    package: bool = False
