"""Per-render diagnostic state held in a ContextVar.

The renderer never stores anything on the Environment or in the user's
context. What it needs for error messages (template name and source)
lives in a RenderContext bound to the current thread or task for the
duration of one render call.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Per-render state isolated from the user's context.

    Attributes:
        template_name: Template name for error messages
        source: Template source for error snippets
    """

    template_name: str | None = None
    source: str | None = None


_render_context: ContextVar[RenderContext | None] = ContextVar(
    "curly_render_context",
    default=None,
)


def get_render_context() -> RenderContext | None:
    """Get current render context (None if not in render)."""
    return _render_context.get()


@contextmanager
def render_context(
    template_name: str | None = None,
    source: str | None = None,
) -> Iterator[RenderContext]:
    """Bind a fresh RenderContext for the duration of the with block.

    The previous context (if any) is restored on exit, so nested renders
    (a host calling ``render`` from inside a value's ``__str__``) keep
    their own state.

    Example:
        with render_context(template_name="greeting", source=source) as ctx:
            text = renderer.render(tree, data)
    """
    ctx = RenderContext(template_name=template_name, source=source)
    token: Token[RenderContext | None] = _render_context.set(ctx)
    try:
        yield ctx
    finally:
        _render_context.reset(token)
