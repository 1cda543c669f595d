"""Command line interface for searchclasspath."""

from __future__ import annotations

import logging
import os
from typing import List, NoReturn, Optional

import typer
from rich.console import Console

from searchclasspath.classpath.builder import build_classpath
from searchclasspath.config import (
    CLASSPATH_ENVVAR,
    DEFAULT_BOOT_PROPERTY,
    DEFAULT_EXTENSION,
    SearchConfig,
    resolve_properties,
)
from searchclasspath.errors import ConfigurationError
from searchclasspath.matching.targets import build_target
from searchclasspath.report import ConsoleReporter
from searchclasspath.search.engine import SearchEngine

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

app = typer.Typer(
    help=(
        "Display a classpath, or search it for a class, package or resource. "
        "Without NAME every classpath entry is listed; with NAME each directory "
        "and archive on the path is searched and every match is reported."
    ),
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> NoReturn:
    err_console.out(message, highlight=False)
    raise typer.Exit(1)


@app.command()
def main(
    name: Optional[str] = typer.Argument(
        None, help="Class, resource or package to search for. Omit to list the classpath."
    ),
    classpath: Optional[str] = typer.Option(
        None,
        "--classpath",
        "-c",
        envvar=CLASSPATH_ENVVAR,
        show_envvar=True,
        help="The classpath to display or search.",
    ),
    boot_property: str = typer.Option(
        DEFAULT_BOOT_PROPERTY,
        "--boot-property",
        "-b",
        help="Property naming the boot classpath.",
    ),
    duplicates: bool = typer.Option(
        False, "--duplicates", "-d", help="Warn when a jar file appears more than once."
    ),
    extension: str = typer.Option(
        DEFAULT_EXTENSION,
        "--extension",
        "-e",
        help=(
            "Search for files with this extension instead of class files. A dotted "
            "name such as foo.properties is read as a class name, so use -e properties foo."
        ),
    ),
    partial: bool = typer.Option(
        False, "--partial", "-p", help="Match any name containing NAME (scans whole directories)."
    ),
    package: bool = typer.Option(
        False, "--package", "-P", help="Search for a package name instead of a class."
    ),
    separator: str = typer.Option(
        os.pathsep, "--separator", "-s", help="Separator used in the classpath."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Don't display warnings."),
    define: Optional[List[str]] = typer.Option(
        None, "--define", "-D", help="Set a property, KEY=VALUE. May be repeated."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search a Java classpath."""
    _setup_logging(verbose)

    if not classpath:
        _fail(f"you must supply the classpath to search (--classpath or ${CLASSPATH_ENVVAR})")
    if package and not name:
        _fail("you must specify a package name if you use the '-P' option")

    try:
        properties = resolve_properties(define or ())
    except ConfigurationError as exc:
        _fail(str(exc))

    config = SearchConfig(
        classpath=classpath,
        boot_property=boot_property,
        separator=separator,
        extension=extension,
        partial=partial,
        package=package,
        quiet=quiet,
        check_duplicates=duplicates,
        properties=properties,
    )
    target = build_target(
        name, extension=config.extension, partial=config.partial, package=config.package
    )
    reporter = ConsoleReporter(console, err_console)
    engine = SearchEngine(
        target, reporter, quiet=config.quiet, check_duplicates=config.check_duplicates
    )
    engine.run(build_classpath(config))


if __name__ == "__main__":
    app()
