"""Tag and block kinds for the curly scanner.

Tags are the ``{{ ... }}`` units found in template source. The two block
kinds each own a literal opening prefix and a literal closing tag, which
is all the block matcher ever looks at.
"""

from __future__ import annotations

from enum import Enum

TAG_START = "{{"
TAG_END = "}}"


class TagKind(Enum):
    """Classification of a scanned tag by its trimmed content."""

    VARIABLE = "variable"
    IF_OPEN = "if_open"
    IF_CLOSE = "if_close"
    EACH_OPEN = "each_open"
    EACH_CLOSE = "each_close"


class BlockKind(Enum):
    """Block directives understood by the scanner."""

    IF = "if"
    EACH = "each"

    @property
    def directive(self) -> str:
        """Prefix of the trimmed tag text that opens this block (``#if ``)."""
        return f"#{self.value} "

    @property
    def open_marker(self) -> str:
        """Raw source prefix counted as a nested opening (``{{#if``)."""
        return f"{TAG_START}#{self.value}"

    @property
    def close_marker(self) -> str:
        """Exact source text that closes this block (``{{/if}}``)."""
        return f"{TAG_START}/{self.value}{TAG_END}"


def classify(expression: str) -> TagKind:
    """Classify trimmed tag content.

    Closing tags are recognised by a leading ``/`` alone. Anything not
    naming ``each`` is reported as an if-close; both render nothing.
    """
    if expression.startswith(BlockKind.IF.directive):
        return TagKind.IF_OPEN
    if expression.startswith(BlockKind.EACH.directive):
        return TagKind.EACH_OPEN
    if expression.startswith("/"):
        return TagKind.EACH_CLOSE if expression.startswith("/each") else TagKind.IF_CLOSE
    return TagKind.VARIABLE
