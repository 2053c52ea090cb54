#!/usr/bin/env python3
"""Core utilities for order-imports. This module
removes blank lines from a grouped Go import block, sorts the block by
category and import path, and renders it back with one blank line between
groups. It also exposes the per-file driver and the source file discovery.
"""
from __future__ import annotations
import enum
import logging
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Tuple

from order_imports import parser
from order_imports.parser import ImportBlock
from order_imports.rules import CATEGORY_PRIORITY
from order_imports.rules import Category
from order_imports.rules import classify
from order_imports.rules import import_path_key
from order_imports.rules import WHITESPACE

LOG = logging.getLogger(__name__)

SOURCE_SUFFIX = ".go"


class Line(NamedTuple):
    """One source line, or a placeholder for a line dropped at render time."""

    text: str
    removed: bool = False

    @classmethod
    def removed_line(cls) -> "Line":
        return cls("", removed=True)


class FileStatus(enum.Enum):
    DONE = "done"
    NO_IMPORTS = "no includes found"
    UNREADABLE = "failed to read from file"
    WOULD_REORDER = "imports would be reordered"


class FileResult(NamedTuple):
    path: str
    status: FileStatus

    def format(self) -> str:
        return f"[{self.path}][{self.status.value}]"


def classify_line(line: Line) -> Category:
    """Classify a line; removed lines never belong to a group."""
    if line.removed:
        return Category.NONE
    return classify(line.text)


def _texts(lines: List[Line]) -> List[str]:
    return [line.text for line in lines]


def remove_blank_lines(lines: List[Line], block: ImportBlock) -> int:
    """Mark every empty or whitespace-only line of the block as removed.

    Comment lines are kept. Returns the number of lines marked.
    """
    removed = 0
    for index in range(block.begin, block.end):
        if not lines[index].removed and not lines[index].text.strip(WHITESPACE):
            lines[index] = Line.removed_line()
            removed += 1
    LOG.debug("Removed %d blank lines from the import block", removed)
    return removed


def sort_key(line: Line) -> Tuple:
    """Return the ordering key of a line inside the import block.

    Removed lines go last and are all equal to each other. Other lines are
    ordered by group priority, then by import path.
    """
    if line.removed:
        return (1,)
    return (0, CATEGORY_PRIORITY[classify_line(line)], import_path_key(line.text))


def line_less(lhs: Line, rhs: Line) -> bool:
    return sort_key(lhs) < sort_key(rhs)


def sort_import_block(lines: List[Line], block: ImportBlock) -> None:
    """Sort lines[block.begin:block.end] in place."""
    lines[block.begin:block.end] = sorted(lines[block.begin:block.end], key=sort_key)


def render_lines(lines: List[Line], block: ImportBlock) -> List[str]:
    """Render the file, dropping removed lines and separating groups.

    A single blank line is emitted between two adjacent lines of the block
    whose groups differ, unless either of them has no group.
    """
    current = parser.locate_import_block(_texts(lines))
    assert current == block, f"import block moved from {block} to {current}"

    output: List[str] = []
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if line.removed:
            continue
        output.append(line.text)
        if index == last:
            continue
        following = lines[index + 1]
        if following.removed or not (block.contains(index) and block.contains(index + 1)):
            continue
        group, next_group = classify_line(line), classify_line(following)
        if Category.NONE not in (group, next_group) and group != next_group:
            output.append("")
    return output


def order_imports(source_lines: List[str]) -> Optional[List[str]]:
    """Return source_lines with the import block ordered.

    Returns None when the file has no grouped import block.
    """
    lines = [Line(text) for text in source_lines]
    block = parser.locate_import_block(source_lines)
    if block.is_empty:
        return None
    remove_blank_lines(lines, block)
    sort_import_block(lines, block)
    return render_lines(lines, block)


def write_lines(file_path: str, lines: Iterable[str]) -> None:
    """Overwrite file_path, terminating every line with a newline.

    No newline translation happens, so carriage returns kept in the line
    text are written back unchanged.
    """
    with open(file_path, "w", encoding="utf-8", newline="") as f:
        for line in lines:
            f.write(line + "\n")


def process_file(file_path, apply: bool = True) -> FileResult:
    """Order the import block of a single Go file.

    Args:
        file_path: Path to the file.
        apply: If True, rewrite the file in place. Otherwise only report
            whether it would change.
    Returns:
        The file path together with its status.
    """
    path = str(file_path)
    try:
        source_lines = parser.read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        LOG.debug("Could not read %s: %s", path, exc)
        return FileResult(path, FileStatus.UNREADABLE)
    if not source_lines:
        return FileResult(path, FileStatus.UNREADABLE)

    new_lines = order_imports(source_lines)
    if new_lines is None:
        return FileResult(path, FileStatus.NO_IMPORTS)

    if not apply:
        if new_lines != source_lines:
            return FileResult(path, FileStatus.WOULD_REORDER)
        return FileResult(path, FileStatus.DONE)

    write_lines(path, new_lines)
    return FileResult(path, FileStatus.DONE)


def iter_go_files(root, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield Go files under the given root directory, excluding specified sub-paths."""
    root_path = Path(root)
    excluded = {root_path / pattern for pattern in ignore or []}
    for path in sorted(root_path.rglob("*" + SOURCE_SUFFIX)):
        if path.suffix != SOURCE_SUFFIX or not path.is_file():
            continue
        if path in excluded or not excluded.isdisjoint(path.parents):
            continue
        yield path


def collect_files(path, ignore: Optional[Iterable[str]] = None) -> List[Path]:
    """Return the Go files a command-line path argument refers to.

    A file path is kept on its suffix alone, so a missing file is still
    processed and reported as unreadable.
    """
    path = Path(path)
    if path.is_dir():
        return list(iter_go_files(path, ignore))
    if path.suffix == SOURCE_SUFFIX:
        return [path]
    return []
