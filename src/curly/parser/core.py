"""Curly parser: template source to an immutable node tree.

Scans left to right for ``{{``. Literal text becomes Data, variable
tags become Output, and block tags become If/Each nodes whose bodies
are parsed recursively from the text between the open tag and its
matching close. Malformed input never raises:

- ``{{`` without a later ``}}``: the rest of the source is Data
- a block open with no matching close: Output whose path is the raw
  directive text (``#if cond``), which normally resolves to nothing
- a stray close tag: dropped

Because values are substituted from the tree and never spliced back
into source, text coming from the context is never scanned for tags.
"""

from __future__ import annotations

import logging
from bisect import bisect_right

from curly._types import TAG_END, TAG_START, BlockKind, TagKind, classify
from curly.environment.exceptions import TemplateNestingError, build_source_snippet
from curly.nodes import Data, Each, If, Node, Output, TemplateNode
from curly.parser.blocks import find_block_end

logger = logging.getLogger(__name__)

_BLOCK_KINDS = {
    TagKind.IF_OPEN: BlockKind.IF,
    TagKind.EACH_OPEN: BlockKind.EACH,
}


class Parser:
    """Parse one template source.

    Args:
        source: Template source
        name: Template name for diagnostics
        max_depth: Deepest allowed block nesting

    Example:
        >>> Parser("Hi {{name}}").parse().body
        (Data(lineno=1, col_offset=0, value='Hi '), Output(lineno=1, col_offset=3, path='name'))
    """

    __slots__ = ("_line_starts", "_max_depth", "_name", "_source")

    def __init__(self, source: str, name: str | None = None, max_depth: int = 100):
        self._source = source
        self._name = name
        self._max_depth = max_depth
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(source) if ch == "\n")

    def parse(self) -> TemplateNode:
        body = self._parse_body(0, len(self._source), depth=0)
        return TemplateNode(lineno=1, col_offset=0, body=body, name=self._name)

    def _location(self, offset: int) -> tuple[int, int]:
        """Map a source offset to (1-based line, 0-based column)."""
        index = bisect_right(self._line_starts, offset) - 1
        return index + 1, offset - self._line_starts[index]

    def _where(self, offset: int) -> str:
        lineno, col = self._location(offset)
        return f"{self._name or '<template>'}:{lineno}:{col}"

    def _parse_body(self, start: int, end: int, depth: int) -> tuple[Node, ...]:
        source = self._source
        nodes: list[Node] = []
        pos = start

        while True:
            tag_start = source.find(TAG_START, pos, end)
            if tag_start == -1:
                self._add_data(nodes, pos, end)
                break
            tag_end = source.find(TAG_END, tag_start + len(TAG_START), end)
            if tag_end == -1:
                logger.debug(f"Unterminated tag at {self._where(tag_start)} emitted as text")
                self._add_data(nodes, pos, end)
                break

            self._add_data(nodes, pos, tag_start)
            expression = source[tag_start + len(TAG_START) : tag_end].strip()
            after = tag_end + len(TAG_END)
            lineno, col = self._location(tag_start)
            kind = classify(expression)

            if kind in _BLOCK_KINDS:
                block_kind = _BLOCK_KINDS[kind]
                close = find_block_end(source, after, block_kind, end)
                if close is not None:
                    nodes.append(
                        self._parse_block(block_kind, expression, tag_start, after, close, depth)
                    )
                    pos = close + len(block_kind.close_marker)
                    continue
                logger.debug(
                    f"No matching {block_kind.close_marker} for tag at "
                    f"{self._where(tag_start)}; treating '{expression}' as a variable"
                )
                nodes.append(Output(lineno=lineno, col_offset=col, path=expression))
            elif kind is TagKind.VARIABLE:
                nodes.append(Output(lineno=lineno, col_offset=col, path=expression))
            else:
                logger.debug(f"Stray closing tag '{expression}' at {self._where(tag_start)} dropped")
            pos = after

        return tuple(nodes)

    def _parse_block(
        self,
        kind: BlockKind,
        expression: str,
        tag_start: int,
        body_start: int,
        body_end: int,
        depth: int,
    ) -> Node:
        lineno, col = self._location(tag_start)
        if depth >= self._max_depth:
            raise TemplateNestingError(
                self._max_depth,
                template_name=self._name,
                lineno=lineno,
                source_snippet=build_source_snippet(self._source, lineno, column=col),
            )
        path = expression[len(kind.directive) :].strip()
        body = self._parse_body(body_start, body_end, depth + 1)
        if kind is BlockKind.IF:
            return If(lineno=lineno, col_offset=col, test=path, body=body)
        return Each(lineno=lineno, col_offset=col, iter=path, body=body)

    def _add_data(self, nodes: list[Node], start: int, end: int) -> None:
        if start < end:
            lineno, col = self._location(start)
            nodes.append(Data(lineno=lineno, col_offset=col, value=self._source[start:end]))
