"""Search configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from searchclasspath.errors import ConfigurationError

DEFAULT_BOOT_PROPERTY = "sun.boot.class.path"
DEFAULT_EXTENSION = ".class"
CLASSPATH_ENVVAR = "SEARCH_CLASSPATH"


def normalize_extension(extension: str) -> str:
    if not extension.startswith("."):
        return "." + extension
    return extension


def parse_definitions(definitions: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a property mapping."""
    properties: dict[str, str] = {}
    for item in definitions:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ConfigurationError(f"invalid property definition '{item}', expected KEY=VALUE")
        properties[key] = value
    return properties


def resolve_properties(
    definitions: Iterable[str] = (), environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Layer ``-D`` definitions over the process environment."""
    properties = dict(os.environ if environ is None else environ)
    properties.update(parse_definitions(definitions))
    return properties


@dataclass(slots=True)
class SearchConfig:
    classpath: str
    boot_property: str = DEFAULT_BOOT_PROPERTY
    separator: str = os.pathsep
    extension: str = DEFAULT_EXTENSION
    partial: bool = False
    package: bool = False
    quiet: bool = False
    check_duplicates: bool = False
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.extension = normalize_extension(self.extension)

    @property
    def boot_classpath(self) -> str | None:
        return self.properties.get(self.boot_property)

    @property
    def java_home(self) -> str | None:
        return self.properties.get("java.home") or self.properties.get("JAVA_HOME")
