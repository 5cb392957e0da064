"""Template structure nodes for the curly node tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from curly.nodes.base import Node


@dataclass(frozen=True, slots=True)
class TemplateNode(Node):
    """Root of a parsed template."""

    body: Sequence[Node]
    name: str | None = None
