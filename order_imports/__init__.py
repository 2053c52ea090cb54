"""Top-level package for order-imports.

This package exposes the core API for ordering grouped import blocks in Go
source files.
"""

from order_imports.core import collect_files
from order_imports.core import FileResult
from order_imports.core import FileStatus
from order_imports.core import iter_go_files
from order_imports.core import Line
from order_imports.core import line_less
from order_imports.core import order_imports
from order_imports.core import process_file
from order_imports.core import remove_blank_lines
from order_imports.core import render_lines
from order_imports.core import sort_import_block
from order_imports.parser import ImportBlock
from order_imports.parser import locate_import_block
from order_imports.rules import Category
from order_imports.rules import classify


__all__ = [
    "Category",
    "classify",
    "ImportBlock",
    "locate_import_block",
    "Line",
    "remove_blank_lines",
    "line_less",
    "sort_import_block",
    "render_lines",
    "order_imports",
    "FileStatus",
    "FileResult",
    "process_file",
    "iter_go_files",
    "collect_files",
]
