"""Compiled search requests.

A raw name from the command line is turned into one of five target variants.
Class names are kept in platform-neutral ``a/b/C`` form. Package names carry two
forms: one using the host directory separator for filesystem lookups and one
using ``/`` with a single trailing slash for archive entry names.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from searchclasspath.config import DEFAULT_EXTENSION, normalize_extension
from searchclasspath.utils.text import to_forward_slashes


@dataclass(frozen=True)
class ListOnly:
    """No name given: the classpath is printed, not searched."""

    @property
    def partial(self) -> bool:
        return False

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class ClassTarget(ABC):
    stem: str
    extension: str = DEFAULT_EXTENSION

    @property
    def file_name(self) -> str:
        return self.stem + self.extension

    @property
    def partial(self) -> bool:
        return False

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Whether an archive entry name is this class."""

    def describe(self) -> str:
        return f"'{self.file_name}'"


class ExactClass(ClassTarget):
    def matches(self, name: str) -> bool:
        return name == self.file_name


class PartialClass(ClassTarget):
    @property
    def partial(self) -> bool:
        return True

    def matches(self, name: str) -> bool:
        return self.stem in name and name.endswith(self.extension)

    def describe(self) -> str:
        return f"'*{self.stem}*{self.extension}'"


@dataclass(frozen=True)
class PackageTarget(ABC):
    name: str
    directory_path: str
    archive_path: str
    extension: str = DEFAULT_EXTENSION

    @property
    def partial(self) -> bool:
        return False

    @abstractmethod
    def matches(self, package_form: str) -> bool:
        """Whether an archive package prefix is this package."""

    def describe(self) -> str:
        return f"package '{self.name}'"


class ExactPackage(PackageTarget):
    def matches(self, package_form: str) -> bool:
        return package_form == self.archive_path


class PartialPackage(PackageTarget):
    @property
    def partial(self) -> bool:
        return True

    def matches(self, package_form: str) -> bool:
        return self.archive_path in package_form

    def matches_directory(self, path: str) -> bool:
        return self.directory_path in path

    def describe(self) -> str:
        return f"package '*{self.name}*'"


Target = Union[ListOnly, ClassTarget, PackageTarget]


def _split_extension(name: str, extension: str) -> tuple[str, str]:
    """Separate an embedded extension from a forward-slash name.

    Only a path-like name (one containing ``/``) can carry its own extension,
    and it is looked for in the last path segment alone so dotted directory
    names are left intact.
    """
    slash = name.rfind("/")
    if slash != -1:
        dot = name.rfind(".", slash + 1)
        if dot != -1:
            return name[:dot], name[dot:]
    if name.endswith(extension):
        return name[: -len(extension)], extension
    return name, extension


def class_stem(raw: str, extension: str) -> tuple[str, str]:
    """Return the ``a/b/C`` stem and the active extension for a class name."""
    stem, extension = _split_extension(to_forward_slashes(raw), extension)
    while stem.startswith("./"):
        stem = stem[2:]
    return stem.lstrip("/").replace(".", "/"), extension


def package_forms(raw: str, dir_sep: str = os.sep) -> tuple[str, str]:
    """Return the (filesystem, archive) forms of a package name."""
    directory = raw.replace(".", dir_sep)
    if dir_sep == "/":
        directory = directory.replace("\\", "/")
    else:
        directory = directory.replace("/", dir_sep)
    directory = directory.strip(dir_sep)
    archive = directory.replace(dir_sep, "/") + "/"
    return directory, archive


def build_target(
    name: str | None,
    *,
    extension: str = DEFAULT_EXTENSION,
    partial: bool = False,
    package: bool = False,
    dir_sep: str = os.sep,
) -> Target:
    """Compile the raw command-line name into a target variant."""
    extension = normalize_extension(extension)
    if package:
        if not name:
            raise ValueError("a package name is required for a package search")
        directory, archive = package_forms(name, dir_sep)
        cls = PartialPackage if partial else ExactPackage
        return cls(name=name, directory_path=directory, archive_path=archive, extension=extension)
    if name is None:
        return ListOnly()
    stem, extension = class_stem(name, extension)
    cls = PartialClass if partial else ExactClass
    return cls(stem=stem, extension=extension)
