"""Exceptions raised while searching a classpath."""

from __future__ import annotations


class SearchClasspathError(Exception):
    """Base class for searchclasspath errors."""


class ConfigurationError(SearchClasspathError):
    """The search cannot start with the given options."""


class ArchiveError(SearchClasspathError):
    """An archive on the classpath could not be opened or streamed."""

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"cannot open {path} as an archive: {cause}")
        self.path = path
        self.cause = cause
