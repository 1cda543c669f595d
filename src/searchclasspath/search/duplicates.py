"""Track archive basenames that appear more than once on the classpath."""

from __future__ import annotations

from dataclasses import dataclass, field

from searchclasspath.models import PathEntry


@dataclass(slots=True)
class DuplicateIndex:
    entries: dict[str, list[str]] = field(default_factory=dict)

    def add(self, entry: PathEntry) -> None:
        self.entries.setdefault(entry.basename, []).append(entry.path)

    def duplicates(self) -> dict[str, list[str]]:
        """Basenames seen at least twice, in first-discovery order."""
        return {name: paths for name, paths in self.entries.items() if len(paths) > 1}
