"""Block matching for the curly parser.

Pairs an ``{{#if ...}}`` or ``{{#each ...}}`` tag with its closing tag by
counting same-kind markers only. Tags of the other kind are invisible to
the count, so cross-kind interleaving such as

    {{#if a}}{{#each xs}}{{/if}}{{/each}}

pairs the ``if`` with the first ``{{/if}}`` regardless of the ``each``
sitting between them. Properly nested templates are unaffected.
"""

from __future__ import annotations

from curly._types import BlockKind


def find_block_end(
    source: str,
    start: int,
    kind: BlockKind,
    end: int | None = None,
) -> int | None:
    """Find the closing tag matching an already-consumed opening tag.

    Args:
        source: Template source
        start: Offset just past the opening tag's ``}}``
        kind: Block kind being matched
        end: Optional end offset; markers must lie entirely before it

    Returns:
        Offset of the matching ``{{/if}}``/``{{/each}}``, or None when the
        source runs out first.
    """
    if end is None:
        end = len(source)
    open_marker = kind.open_marker
    close_marker = kind.close_marker
    depth = 1
    pos = start

    while True:
        next_close = source.find(close_marker, pos, end)
        if next_close == -1:
            return None
        next_open = source.find(open_marker, pos, next_close)
        if next_open == -1:
            depth -= 1
            if depth == 0:
                return next_close
            pos = next_close + len(close_marker)
        else:
            depth += 1
            pos = next_open + len(open_marker)
