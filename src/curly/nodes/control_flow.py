"""Control flow nodes for the curly node tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from curly.nodes.base import Node


@dataclass(frozen=True, slots=True)
class If(Node):
    """Conditional: {{#if path}}...{{/if}}"""

    test: str
    body: Sequence[Node]


@dataclass(frozen=True, slots=True)
class Each(Node):
    """Iteration: {{#each path}}...{{/each}}

    Each element of the collection becomes the whole context of ``body``.
    """

    iter: str
    body: Sequence[Node]
