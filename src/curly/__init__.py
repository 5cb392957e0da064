"""Curly: a small embeddable template renderer for JSON-like data.

Renders ``{{ }}`` templates against a hierarchical context (dicts, lists,
strings, numbers, booleans, None, and record-like objects) without a
template language of its own beyond three tags.

Quickstart:
    >>> from curly import render
    >>> render("Hello, {{name}}! You have {{count}} messages.", {"name": "Alice", "count": 5})
    'Hello, Alice! You have 5 messages.'

Syntax:
    - ``{{ path }}``: value at a dot-separated path (``user.name``)
    - ``{{#if path}}...{{/if}}``: body rendered when the value is truthy
    - ``{{#each path}}...{{/each}}``: body rendered once per list element,
      with the element as the whole context

Rendering never fails on bad input by default. Missing values render as
empty text, an unterminated ``{{`` is kept verbatim, and a block with no
matching close is treated as a variable that resolves to nothing. Use
``Environment(strict=True)`` to raise UndefinedError for missing
variables instead.

Architecture:
Template Source → Parser → node tree → Renderer → str

Thread-Safety:
Rendering uses only local state. Environment holds configuration only,
and per-render diagnostic state lives in a ContextVar.

"""

from typing import Any

from curly._types import BlockKind, TagKind
from curly.environment import (
    DEFAULT_MAX_NESTING_DEPTH,
    Environment,
    ErrorCode,
    SourceSnippet,
    TemplateError,
    TemplateNestingError,
    UndefinedError,
    build_source_snippet,
)
from curly.nodes import Data, Each, If, Node, Output, TemplateNode
from curly.parser import Parser, find_block_end
from curly.render_context import RenderContext, get_render_context, render_context
from curly.template import UNDEFINED, Renderer, is_truthy, read_property, resolve, to_text

__version__ = "0.1.0"

_default_env = Environment()


def render(template: str, context: Any = None) -> str:
    """Render ``template`` against ``context`` with default settings."""
    return _default_env.render(template, context)


__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "UNDEFINED",
    "BlockKind",
    "Data",
    "Each",
    "Environment",
    "ErrorCode",
    "If",
    "Node",
    "Output",
    "Parser",
    "RenderContext",
    "Renderer",
    "SourceSnippet",
    "TagKind",
    "TemplateError",
    "TemplateNestingError",
    "TemplateNode",
    "UndefinedError",
    "__version__",
    "build_source_snippet",
    "find_block_end",
    "get_render_context",
    "is_truthy",
    "read_property",
    "render",
    "render_context",
    "resolve",
    "to_text",
]
