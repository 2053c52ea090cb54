"""Rules module for order-imports.

This module defines how a single line of a grouped Go import block is
classified into standard library, platform, or third-party imports, and how
lines are compared within the same group.
"""

import enum
from typing import Dict
from typing import Tuple


class Category(enum.Enum):
    """Group an import line belongs to."""

    STDLIB = "stdlib"
    PLATFORM = "platform"
    THIRD_PARTY = "third_party"
    NONE = "none"


# Groups are emitted in ascending priority.
CATEGORY_PRIORITY: Dict[Category, int] = {
    Category.STDLIB: 0,
    Category.PLATFORM: 1,
    Category.THIRD_PARTY: 2,
    Category.NONE: 3,
}

THIRD_PARTY_PREFIXES: Tuple[str, ...] = (
    '"github.com/',
    '"gopkg.in/',
    '"golang.org/',
    '"pault.ag/',
)

PLATFORM_PREFIXES: Tuple[str, ...] = ('"platform/',)

LINE_COMMENT = "//"

# Only ASCII whitespace separates tokens in a Go import block.
WHITESPACE = " \t\n\v\f\r"
_DROP_WHITESPACE = str.maketrans("", "", WHITESPACE)


def strip_whitespace(text: str) -> str:
    """Return text with every whitespace character removed."""
    return text.translate(_DROP_WHITESPACE)


def is_third_party(text: str) -> bool:
    return any(prefix in text for prefix in THIRD_PARTY_PREFIXES)


def is_platform(text: str) -> bool:
    return any(prefix in text for prefix in PLATFORM_PREFIXES)


def is_stdlib(text: str) -> bool:
    """Return True for any remaining import line.

    Blank lines and pure comment lines are not imports at all.
    """
    compact = strip_whitespace(text)
    if not compact:
        return False
    if is_third_party(text) or is_platform(text):
        return False
    return not compact.startswith(LINE_COMMENT)


def classify(text: str) -> Category:
    """Classify one raw line of an import block.

    Args:
        text: The line, verbatim from the source file.

    Returns:
        The first matching category: third-party, platform, standard
        library, or NONE for blank and comment lines.
    """
    if is_third_party(text):
        return Category.THIRD_PARTY
    if is_platform(text):
        return Category.PLATFORM
    if is_stdlib(text):
        return Category.STDLIB
    return Category.NONE


def import_path_key(text: str) -> str:
    """Return the comparison key of an import line.

    Whitespace is dropped and any alias in front of the quoted path is cut
    off, so `foo "a/b"` and `"a/b"` compare on the path alone.
    """
    compact = strip_whitespace(text)
    quote = compact.find('"')
    if quote == -1:
        return compact
    return compact[quote:]
