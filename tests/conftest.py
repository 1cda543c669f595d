"""Pytest fixtures for searchclasspath tests."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable, Mapping

import pytest

from searchclasspath.matching.targets import Target
from searchclasspath.models import MatchRecord, PathEntry

JAR_TIME = (2021, 3, 4, 5, 6, 8)


@pytest.fixture
def make_jar(tmp_path: Path) -> Callable[..., Path]:
    """Build a zip archive from a mapping of entry names to contents."""

    def _make(name: str, entries: Mapping[str, bytes], directory: Path | None = None) -> Path:
        parent = directory or tmp_path
        parent.mkdir(parents=True, exist_ok=True)
        jar = parent / name
        with zipfile.ZipFile(jar, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry_name, data in entries.items():
                info = zipfile.ZipInfo(entry_name, date_time=JAR_TIME)
                archive.writestr(info, data)
        return jar

    return _make


@pytest.fixture
def class_tree(tmp_path: Path) -> Path:
    """A classes directory holding com/acme/Foo.class and com/acme/util/Bar.class."""
    root = tmp_path / "classes"
    (root / "com" / "acme" / "util").mkdir(parents=True)
    (root / "com" / "acme" / "Foo.class").write_bytes(b"\xca\xfe\xba\xbe" + b"x" * 12)
    (root / "com" / "acme" / "util" / "Bar.class").write_bytes(b"\xca\xfe\xba\xbe")
    (root / "com" / "acme" / "app.properties").write_text("key=value")
    return root


class RecordingReporter:
    """Reporter that keeps every call for inspection."""

    def __init__(self) -> None:
        self.searched: list[Target] = []
        self.entries: list[str] = []
        self.matches: list[MatchRecord] = []
        self.warnings: list[str] = []
        self.missing: list[Target] = []
        self.duplicate_reports: list[dict[str, list[str]]] = []

    def searching(self, target: Target) -> None:
        self.searched.append(target)

    def entry(self, entry: PathEntry) -> None:
        self.entries.append(entry.path)

    def match(self, record: MatchRecord) -> None:
        self.matches.append(record)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def not_found(self, target: Target) -> None:
        self.missing.append(target)

    def duplicates(self, duplicates: dict[str, list[str]]) -> None:
        self.duplicate_reports.append(duplicates)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
