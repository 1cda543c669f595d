"""Assemble the ordered list of classpath entries to search."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from searchclasspath.config import SearchConfig
from searchclasspath.models import PathEntry
from searchclasspath.utils.files import iter_directory_files
from searchclasspath.utils.text import split_tokens

LOGGER = logging.getLogger(__name__)

EXTENSION_SUBDIR = os.path.join("lib", "ext")


def boot_entries(boot_classpath: str | None) -> Iterator[PathEntry]:
    """Yield boot classpath locations that exist right now."""
    if not boot_classpath:
        return
    for token in split_tokens(boot_classpath, os.pathsep):
        if os.path.exists(token):
            yield PathEntry(token)


def extension_entries(java_home: str | None) -> Iterator[PathEntry]:
    """Yield everything in the runtime's extension directory."""
    if not java_home:
        return
    for path in iter_directory_files(os.path.join(java_home, EXTENSION_SUBDIR)):
        yield PathEntry(path)


def user_entries(classpath: str, separator: str) -> Iterator[PathEntry]:
    """Yield every token of the user classpath, whether or not it exists."""
    for token in split_tokens(classpath, separator):
        yield PathEntry(token)


def build_classpath(config: SearchConfig) -> list[PathEntry]:
    """Concatenate boot, extension and user entries, keeping repeats."""
    boot = list(boot_entries(config.boot_classpath))
    ext = list(extension_entries(config.java_home))
    user = list(user_entries(config.classpath, config.separator))
    LOGGER.debug(
        "Classpath: %d boot, %d extension, %d user entries", len(boot), len(ext), len(user)
    )
    return boot + ext + user
