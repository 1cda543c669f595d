"""Search a jar or zip archive for a class or package.

Entries are visited once in archive order and never extracted to disk. Sizes
of matching entries are measured by reading the entry stream, since the size
recorded in the archive cannot be relied on.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from typing import Iterator

from searchclasspath.errors import ArchiveError
from searchclasspath.matching.targets import ClassTarget, PackageTarget, Target
from searchclasspath.models import MatchRecord
from searchclasspath.utils.files import count_stream_bytes

LOGGER = logging.getLogger(__name__)

# Raised by zipfile for corrupt data, bad CRCs, encryption and unknown compression.
READ_ERRORS = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    OSError,
    EOFError,
    RuntimeError,
    NotImplementedError,
)


def entry_timestamp(info: zipfile.ZipInfo) -> datetime | None:
    try:
        return datetime(*info.date_time)
    except (TypeError, ValueError):
        return None


def entry_size(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> int:
    with archive.open(info) as stream:
        return count_stream_bytes(stream)


def package_form(entry_name: str, extension: str) -> str | None:
    """Return the package prefix an entry represents, or None.

    Directory entries stand for themselves. Files with the active extension
    stand for their containing directory, including the trailing slash.
    Root-level files and other resources do not name a package.
    """
    if entry_name.endswith("/"):
        return entry_name
    if entry_name.endswith(extension):
        slash = entry_name.rfind("/")
        if slash == -1:
            return None
        return entry_name[: slash + 1]
    return None


def scan_archive(path: str, target: Target) -> Iterator[MatchRecord]:
    """Yield matches for the target inside one archive.

    Raises ArchiveError if the archive cannot be opened or an entry cannot be
    read. Matches yielded before the failure stand.
    """
    try:
        archive = zipfile.ZipFile(path)
    except READ_ERRORS as exc:
        raise ArchiveError(path, exc) from exc

    LOGGER.debug("Scanning archive %s", path)
    with archive:
        try:
            if isinstance(target, PackageTarget):
                yield from _scan_packages(path, archive, target)
            elif isinstance(target, ClassTarget):
                yield from _scan_classes(path, archive, target)
        except READ_ERRORS as exc:
            raise ArchiveError(path, exc) from exc


def _scan_packages(
    path: str, archive: zipfile.ZipFile, target: PackageTarget
) -> Iterator[MatchRecord]:
    seen: set[str] = set()
    for info in archive.infolist():
        form = package_form(info.filename, target.extension)
        if form is None or form in seen:
            continue
        if target.matches(form):
            seen.add(form)
            yield MatchRecord(location=path, name=form, package=True)


def _scan_classes(
    path: str, archive: zipfile.ZipFile, target: ClassTarget
) -> Iterator[MatchRecord]:
    for info in archive.infolist():
        if not target.matches(info.filename):
            continue
        yield MatchRecord(
            location=path,
            name=info.filename,
            modified=entry_timestamp(info),
            size=entry_size(archive, info),
        )
