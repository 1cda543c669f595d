"""Line-oriented rendering of search results."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console

from searchclasspath.matching.targets import PackageTarget, Target
from searchclasspath.models import MatchRecord, PathEntry

NOT_AVAILABLE = "<not available>"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(TIMESTAMP_FORMAT)


def format_size(value: int | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return str(value)


def not_found_message(target: Target) -> str:
    if isinstance(target, PackageTarget):
        return f"Package '{target.name}' not found in path"
    return f"{target.describe()} not found in path"


class ConsoleReporter:
    """Write results to stdout and warnings to stderr."""

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out = out or Console(highlight=False)
        self.err = err or Console(stderr=True, highlight=False)

    def _print(self, console: Console, line: str = "") -> None:
        console.out(line, highlight=False)

    def searching(self, target: Target) -> None:
        self._print(self.out)
        self._print(self.out, f"Searching for {target.describe()}")

    def entry(self, entry: PathEntry) -> None:
        self._print(self.out, entry.path)

    def match(self, record: MatchRecord) -> None:
        self._print(self.out)
        self._print(self.out, f"{record.location}: {record.name}")
        if not record.package:
            self._print(self.out, f"   last modified: {format_timestamp(record.modified)}")
            self._print(self.out, f"   size in bytes: {format_size(record.size)}")

    def warning(self, message: str) -> None:
        self._print(self.err, f"warning: {message}")

    def error(self, message: str) -> None:
        self._print(self.err, message)

    def not_found(self, target: Target) -> None:
        self._print(self.err, not_found_message(target))

    def duplicates(self, duplicates: dict[str, list[str]]) -> None:
        for name, paths in duplicates.items():
            self._print(self.err)
            self._print(self.err, f"Duplicate classpath entry: {name}")
            for path in paths:
                self._print(self.err, f"    {path}")
