"""Tests for core data models."""

from __future__ import annotations

from pathlib import Path

from searchclasspath.models import EntryKind, MatchRecord, PathEntry


class TestPathEntry:
    """Test PathEntry dataclass."""

    def test_kind_directory(self, tmp_path: Path) -> None:
        assert PathEntry(str(tmp_path)).kind is EntryKind.DIRECTORY

    def test_kind_archive(self, tmp_path: Path) -> None:
        jar = tmp_path / "lib.jar"
        jar.write_bytes(b"")

        assert PathEntry(str(jar)).kind is EntryKind.ARCHIVE

    def test_kind_missing(self, tmp_path: Path) -> None:
        assert PathEntry(str(tmp_path / "nope.jar")).kind is EntryKind.MISSING

    def test_kind_is_checked_lazily(self, tmp_path: Path) -> None:
        """Should reflect the filesystem at the time of the check."""
        jar = tmp_path / "late.jar"
        entry = PathEntry(str(jar))
        assert entry.kind is EntryKind.MISSING

        jar.write_bytes(b"")
        assert entry.kind is EntryKind.ARCHIVE

    def test_basename(self) -> None:
        assert PathEntry("/opt/lib/util.jar").basename == "util.jar"
        assert PathEntry("/opt/classes/").basename == "classes"

    def test_str(self) -> None:
        assert str(PathEntry("/opt/lib/util.jar")) == "/opt/lib/util.jar"


class TestMatchRecord:
    """Test MatchRecord dataclass."""

    def test_defaults(self) -> None:
        """Should default to unknown metadata and a class match."""
        record = MatchRecord(location="/a.jar", name="x/Y.class")

        assert record.modified is None
        assert record.size is None
        assert not record.package

    def test_equality(self) -> None:
        assert MatchRecord("/a", "b/", package=True) == MatchRecord("/a", "b/", package=True)
        assert MatchRecord("/a", "b/") != MatchRecord("/a", "b/", package=True)
