"""Parser module for order-imports.

This module reads Go source files into lines and locates the grouped
`import ( ... )` block inside them.
"""

import logging
from typing import List
from typing import NamedTuple

from order_imports.rules import LINE_COMMENT
from order_imports.rules import strip_whitespace

LOG = logging.getLogger(__name__)

BLOCK_OPEN = "import("
BLOCK_CLOSE = ")"


class ImportBlock(NamedTuple):
    """Half-open range [begin, end) of line indices inside the delimiters."""

    begin: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.begin >= self.end

    def contains(self, index: int) -> bool:
        return self.begin <= index < self.end


def read_lines(file_path: str) -> List[str]:
    """Read a source file and return its lines without line terminators.

    Lines are split on newlines only, so a carriage return stays part of
    the line text.

    Args:
        file_path: Path to the Go source file.

    Returns:
        The lines of the file, in order.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        lines = f.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def strip_comment(text: str) -> str:
    """Truncate text at the first line comment marker."""
    index = text.find(LINE_COMMENT)
    if index == -1:
        return text
    return text[:index]


def _delimiter(text: str) -> str:
    return strip_comment(strip_whitespace(text))


def locate_import_block(lines: List[str]) -> ImportBlock:
    """Find the first grouped import block.

    `begin` is the index right after the first `import (` line and `end` is
    the index of the first `)` line after it. Either falls back to the end
    of the sequence when its delimiter is missing, so a file without a block
    yields an empty range.
    """
    total = len(lines)
    begin = total
    for index, line in enumerate(lines):
        if _delimiter(line) == BLOCK_OPEN:
            begin = index + 1
            break

    end = total
    for index in range(begin, total):
        if _delimiter(lines[index]) == BLOCK_CLOSE:
            end = index
            break

    LOG.debug("Import block bounds: [%d, %d)", begin, end)
    return ImportBlock(begin, end)
