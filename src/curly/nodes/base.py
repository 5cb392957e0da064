"""Base node class for the curly node tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all template nodes.

    All nodes track their source location for error reporting.
    Locations are relative to the outermost template, even for nodes
    parsed out of a block body. Nodes are immutable.

    """

    lineno: int
    col_offset: int
