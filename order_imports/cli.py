#!/usr/bin/env python3
"""Command-line interface for order-imports using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import List
from typing import Optional
from typing import Sequence

import click
from order_imports import core

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_USAGE = -1
EXIT_UNEXPECTED = -2
EXIT_NO_FILES = -3

USAGE = """
order-imports sorts imports in go files
imports are divided into three groups: stdlib, platform and third parties
within the groups, they are sorted lexicographically

Usage:
order-imports [OPTIONS] [file|directory]

Example:
order-imports ../connection.go
order-imports ../memsql/
"""

try:
    VERSION = f"order-imports {metadata.version('order-imports')}"
except Exception:
    VERSION = "order-imports"


def _handle_files(path: Path, exclude: Sequence[str], apply_changes: bool, quiet: bool = False) -> int:
    """Order imports of every Go file found at path and print a status per file.

    Args:
        path: File or directory to process.
        exclude: Sub-paths of a directory to skip.
        apply_changes: If True, rewrite files in place.
        quiet: If True, do not print the per-file status lines.
    Returns:
        EXIT_OK, EXIT_CHANGES when a check found unordered files, or
        EXIT_NO_FILES when there was nothing to process.
    """
    file_paths = core.collect_files(path, exclude)
    if not file_paths:
        LOG.error("no go files to order imports")
        return EXIT_NO_FILES

    exit_code = EXIT_OK
    for file_path in file_paths:
        result = core.process_file(file_path, apply=apply_changes)
        if not quiet:
            click.echo(result.format())
        if result.status is core.FileStatus.WOULD_REORDER:
            exit_code = EXIT_CHANGES

    LOG.debug("Processed %d files", len(file_paths))
    return exit_code


@click.command(help=USAGE)
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--check", is_flag=True, help="Report files with unordered imports without modifying them.")
@click.option("--exclude", multiple=True, help="Sub-path of PATH to skip. May be repeated.")
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress status lines and non-error output.")
@click.version_option(version=VERSION, prog_name="order-imports CLI")
def cli(path: Path, check: bool, exclude: Sequence[str], verbose: bool, quiet: bool) -> int:
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    try:
        return _handle_files(path, exclude, apply_changes=not check, quiet=quiet)
    except Exception as exc:
        LOG.error("unexpected error occurred: %s", exc)
        return EXIT_UNEXPECTED


def run(argv: Optional[List[str]] = None) -> int:
    """Run the command line and return its exit code instead of exiting."""
    try:
        rv = cli.main(args=argv, prog_name="order-imports", standalone_mode=False)
    except click.UsageError as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        click.echo(USAGE, err=True)
        return EXIT_USAGE
    return rv if isinstance(rv, int) else EXIT_OK


def main():
    """Entry point for the CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
