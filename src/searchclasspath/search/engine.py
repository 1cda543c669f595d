"""Walk the classpath and dispatch each entry to the matching scanner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Protocol

from searchclasspath.errors import ArchiveError
from searchclasspath.matching.targets import ListOnly, Target
from searchclasspath.models import EntryKind, MatchRecord, PathEntry
from searchclasspath.scan.archive import scan_archive
from searchclasspath.scan.directory import scan_directory
from searchclasspath.search.duplicates import DuplicateIndex

LOGGER = logging.getLogger(__name__)


class Reporter(Protocol):
    def searching(self, target: Target) -> None: ...

    def entry(self, entry: PathEntry) -> None: ...

    def match(self, record: MatchRecord) -> None: ...

    def warning(self, message: str) -> None: ...

    def not_found(self, target: Target) -> None: ...

    def duplicates(self, duplicates: dict[str, list[str]]) -> None: ...


@dataclass(slots=True)
class SearchContext:
    """State accumulated over a single run."""

    found: bool = False
    matches: int = 0
    duplicates: DuplicateIndex = field(default_factory=DuplicateIndex)


class SearchEngine:
    """Search every classpath entry in order for one target."""

    def __init__(
        self,
        target: Target,
        reporter: Reporter,
        *,
        quiet: bool = False,
        check_duplicates: bool = False,
    ) -> None:
        self.target = target
        self.reporter = reporter
        self.quiet = quiet
        self.check_duplicates = check_duplicates

    @property
    def listing(self) -> bool:
        return isinstance(self.target, ListOnly)

    def run(self, entries: Iterable[PathEntry]) -> SearchContext:
        context = SearchContext()
        if not self.listing:
            self.reporter.searching(self.target)

        for entry in entries:
            self.process(entry, context)

        if not self.listing and not context.found:
            self.reporter.not_found(self.target)
        if self.check_duplicates:
            self.reporter.duplicates(context.duplicates.duplicates())
        return context

    def process(self, entry: PathEntry, context: SearchContext) -> None:
        kind = entry.kind
        LOGGER.debug("Checking %s (%s)", entry, kind.value)

        if kind is EntryKind.MISSING:
            if self.listing:
                self.reporter.entry(entry)
            self._warn(f"{entry} does not exist")
            return

        if kind is EntryKind.ARCHIVE:
            context.duplicates.add(entry)

        if self.listing:
            self.reporter.entry(entry)
            return

        if kind is EntryKind.DIRECTORY:
            self._emit(scan_directory(entry.path, self.target), context)
            return

        try:
            self._emit(scan_archive(entry.path, self.target), context)
        except ArchiveError as exc:
            LOGGER.debug("Archive scan failed: %s", exc.cause)
            self._warn(str(exc))

    def _emit(self, records: Iterator[MatchRecord], context: SearchContext) -> None:
        for record in records:
            context.found = True
            context.matches += 1
            self.reporter.match(record)

    def _warn(self, message: str) -> None:
        if not self.quiet:
            self.reporter.warning(message)
