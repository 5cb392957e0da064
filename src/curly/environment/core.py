"""Curly Environment: rendering configuration.

An Environment holds options only. It keeps no template cache and no
per-render state, so one instance can be shared freely between threads.

Example:
    >>> env = Environment()
    >>> env.render("Hello, {{ user.name }}!", {"user": {"name": "Ada"}})
    'Hello, Ada!'

    >>> Environment(strict=True).render("{{ missing }}", {})
    Traceback (most recent call last):
    ...
    curly.environment.exceptions.UndefinedError: Undefined variable 'missing' in <template>:1
"""

from __future__ import annotations

from typing import Any

from curly.nodes import TemplateNode
from curly.parser import Parser
from curly.render_context import render_context
from curly.template.renderer import Renderer

DEFAULT_MAX_NESTING_DEPTH = 100


class Environment:
    """Configuration for parsing and rendering templates.

    Attributes:
        strict: Raise UndefinedError for variable tags whose path does not
            resolve. Off by default: missing values render as "".
            Conditions and ``#each`` collections never raise.
        max_nesting_depth: Deepest allowed ``#if``/``#each`` nesting.
            Deeper templates raise TemplateNestingError while parsing.
    """

    __slots__ = ("_renderer", "max_nesting_depth", "strict")

    def __init__(
        self,
        *,
        strict: bool = False,
        max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
    ):
        if max_nesting_depth < 0:
            raise ValueError(f"max_nesting_depth must be >= 0, got {max_nesting_depth}")
        self.strict = strict
        self.max_nesting_depth = max_nesting_depth
        self._renderer = Renderer(strict=strict)

    def parse(self, source: str, name: str | None = None) -> TemplateNode:
        """Parse template source into its node tree.

        Useful for inspecting which paths a template references. The
        result is not cached; ``render`` parses again on every call.
        """
        return Parser(source, name=name, max_depth=self.max_nesting_depth).parse()

    def render(self, source: str, context: Any = None, name: str | None = None) -> str:
        """Render template source against a context value.

        Args:
            source: Template source
            context: Any JSON-like value (usually a dict); record-like
                objects are read through their public attributes
            name: Optional template name used in error messages and logs

        Returns:
            Rendered text
        """
        template = self.parse(source, name=name)
        with render_context(template_name=name, source=source):
            return self._renderer.render(template, context)

    def __repr__(self) -> str:
        return f"<Environment strict={self.strict} max_nesting_depth={self.max_nesting_depth}>"
