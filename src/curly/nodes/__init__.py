"""Immutable node tree produced by the curly parser.

Node Types:
    - Data: literal text
    - Output: variable reference ``{{ path }}``
    - If: conditional block ``{{#if path}}...{{/if}}``
    - Each: iteration block ``{{#each path}}...{{/each}}``
    - TemplateNode: root container

Nodes are frozen dataclasses with slots and are safe to share between
threads.
"""

from curly.nodes.base import Node
from curly.nodes.control_flow import Each, If
from curly.nodes.output import Data, Output
from curly.nodes.structure import TemplateNode

__all__ = [
    "Data",
    "Each",
    "If",
    "Node",
    "Output",
    "TemplateNode",
]
