"""Evaluate a parsed node tree against a context value.

Output is collected in a list and joined once at the end (StringBuilder
pattern). Conditional bodies are rendered with the same context;
iteration bodies are rendered once per element with the element as the
entire context, so outer names are not visible inside ``{{#each}}``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from curly.environment.exceptions import UndefinedError, build_source_snippet
from curly.nodes import Data, Each, If, Node, Output, TemplateNode
from curly.render_context import get_render_context
from curly.template.helpers import UNDEFINED, is_sequence, resolve, to_text
from curly.template.truthiness import is_truthy

logger = logging.getLogger(__name__)


class Renderer:
    """Render node trees.

    Args:
        strict: Raise UndefinedError when a variable tag does not resolve
            instead of rendering it as an empty string.
    """

    __slots__ = ("_handlers", "_strict")

    def __init__(self, strict: bool = False):
        self._strict = strict
        self._handlers: dict[type[Node], Callable[[Any, Any, list[str]], None]] = {
            Data: self._render_data,
            Output: self._render_output,
            If: self._render_if,
            Each: self._render_each,
        }

    def render(self, template: TemplateNode, context: Any) -> str:
        buf: list[str] = []
        self._render_body(template.body, context, buf)
        return "".join(buf)

    def _render_body(self, body: Sequence[Node], context: Any, buf: list[str]) -> None:
        handlers = self._handlers
        for node in body:
            handlers[type(node)](node, context, buf)

    def _render_data(self, node: Data, context: Any, buf: list[str]) -> None:
        buf.append(node.value)

    def _render_output(self, node: Output, context: Any, buf: list[str]) -> None:
        value = resolve(node.path, context)
        if value is UNDEFINED:
            logger.debug(f"Unresolved path '{node.path}' at line {node.lineno}")
            if self._strict:
                raise self._undefined(node, context)
            return
        buf.append(to_text(value))

    def _render_if(self, node: If, context: Any, buf: list[str]) -> None:
        if is_truthy(resolve(node.test, context)):
            self._render_body(node.body, context, buf)

    def _render_each(self, node: Each, context: Any, buf: list[str]) -> None:
        collection = resolve(node.iter, context)
        if not is_sequence(collection):
            if collection is UNDEFINED:
                logger.debug(f"Unresolved collection '{node.iter}' at line {node.lineno}")
            return
        for item in collection:
            self._render_body(node.body, item, buf)

    @staticmethod
    def _undefined(node: Output, context: Any) -> UndefinedError:
        """Build an UndefinedError for a variable tag, with location and suggestions."""
        parent_path, _, _ = node.path.rpartition(".")
        parent = resolve(parent_path, context) if parent_path else context
        available = (
            [key for key in parent if isinstance(key, str)] if isinstance(parent, Mapping) else None
        )

        render_ctx = get_render_context()
        template_name = render_ctx.template_name if render_ctx else None
        source = render_ctx.source if render_ctx else None
        snippet = (
            build_source_snippet(source, node.lineno, column=node.col_offset) if source else None
        )
        return UndefinedError(
            node.path,
            template_name,
            node.lineno,
            available_names=available,
            source_snippet=snippet,
        )
