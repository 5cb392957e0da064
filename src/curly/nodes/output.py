"""Output nodes for the curly node tree."""

from __future__ import annotations

from dataclasses import dataclass

from curly.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Data(Node):
    """Literal text emitted unchanged, including unterminated ``{{`` tails."""

    value: str


@dataclass(frozen=True, slots=True)
class Output(Node):
    """Variable reference: {{ path }}"""

    path: str
