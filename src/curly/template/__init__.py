"""Rendering runtime: value helpers, truthiness, and the node renderer."""

from curly.template.helpers import UNDEFINED, read_property, resolve, to_text
from curly.template.renderer import Renderer
from curly.template.truthiness import is_truthy

__all__ = [
    "UNDEFINED",
    "Renderer",
    "is_truthy",
    "read_property",
    "resolve",
    "to_text",
]
