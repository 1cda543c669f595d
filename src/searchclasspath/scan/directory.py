"""Search a classpath directory for a class or package."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Iterator

from searchclasspath.matching.targets import (
    ClassTarget,
    PackageTarget,
    PartialPackage,
    Target,
)
from searchclasspath.models import MatchRecord
from searchclasspath.utils.files import list_directory
from searchclasspath.utils.text import relative_to_root, to_forward_slashes

LOGGER = logging.getLogger(__name__)


def _file_record(root: str, name: str, stat: os.stat_result) -> MatchRecord:
    return MatchRecord(
        location=root,
        name=name,
        modified=datetime.fromtimestamp(stat.st_mtime),
        size=stat.st_size,
    )


def scan_directory(root: str, target: Target) -> Iterator[MatchRecord]:
    """Yield matches for the target under one classpath directory.

    Exact targets are resolved with a single path lookup. Partial targets walk
    the whole tree.
    """
    if target.partial:
        yield from walk_tree(root, target)
    elif isinstance(target, PackageTarget):
        if os.path.isdir(os.path.join(root, target.directory_path)):
            yield MatchRecord(location=root, name=target.directory_path, package=True)
    elif isinstance(target, ClassTarget):
        path = os.path.join(root, target.file_name)
        if os.path.isfile(path):
            yield _file_record(root, target.file_name, os.stat(path))


def walk_tree(root: str, target: Target) -> Iterator[MatchRecord]:
    """Recursively yield partial matches below root.

    Matching directories do not stop the descent, so nested packages are all
    reported. Unreadable subtrees are skipped.
    """
    top = os.path.abspath(root)
    yield from _walk(root, top, root, target)


def _walk(root: str, top: str, directory: str, target: Target) -> Iterator[MatchRecord]:
    try:
        entries = list_directory(directory)
    except OSError as exc:
        LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)
        return

    for entry in entries:
        if entry.is_dir():
            if isinstance(target, PartialPackage) and target.matches_directory(entry.path):
                name = relative_to_root(top, os.path.abspath(entry.path))
                yield MatchRecord(location=root, name=name, package=True)
            yield from _walk(root, top, entry.path, target)
        elif isinstance(target, ClassTarget) and entry.name.endswith(target.extension):
            if target.stem not in to_forward_slashes(entry.path):
                continue
            try:
                stat = entry.stat()
            except OSError as exc:
                LOGGER.debug("Cannot stat %s: %s", entry.path, exc)
                continue
            name = relative_to_root(top, os.path.abspath(entry.path))
            yield _file_record(root, name, stat)
