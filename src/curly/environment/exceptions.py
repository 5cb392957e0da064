"""Exceptions for curly.

Exception Hierarchy:
TemplateError (base)
├── TemplateNestingError   # Block nesting deeper than max_nesting_depth
└── UndefinedError         # Unresolved variable tag (strict mode only)

Rendering is fail-silent by default: a missing value renders as an empty
string and malformed tags degrade to literal text. These exceptions exist
for opt-in strict rendering and for templates too deeply nested to
evaluate without exhausting the call stack.

Example:
    ```
    C-RUN-001: Undefined variable 'user.nmae' in greeting:1
       |
    >  1 | Hello {{user.nmae}}!
       |
      Hint: Did you mean 'name'?
    ```

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum

from curly.environment import terminal


class ErrorCode(Enum):
    """Searchable error codes for curly errors.

    Format: C-{CATEGORY}-{NUMBER}
    Categories: RUN (runtime)
    """

    UNDEFINED_VARIABLE = "C-RUN-001"
    NESTING_DEPTH = "C-RUN-002"

    @property
    def category(self) -> str:
        """Error category (e.g., 'runtime')."""
        prefix = self.value.split("-")[1]
        return {"RUN": "runtime"}.get(prefix, "unknown")


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Template source context around an error line.

    Attributes:
        lines: Tuple of (line_number, line_content) pairs around the error.
        error_line: The 1-based line number where the error occurred.
        column: Optional column offset for caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        """Format snippet with line numbers, highlighting the error line."""
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            is_error = lineno == self.error_line
            parts.append(terminal.format_source_line(lineno, content, is_error=is_error))
        if self.column is not None:
            caret = " " * (self.column + 2) + "^"
            parts.append(f"{terminal.dim_text('   |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from template source.

    Args:
        source: Full template source text.
        error_line: 1-based line number of the error.
        context_lines: Number of lines to show before/after the error line.
        column: Optional column offset for caret pointer.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


def _location(template_name: str | None, lineno: int | None) -> str:
    loc = template_name or "<template>"
    if lineno:
        loc += f":{lineno}"
    return loc


class TemplateError(Exception):
    """Base exception for all curly errors.

        >>> try:
        ...     env.render(source, data)
        ... except TemplateError as e:
        ...     log.error(e.format_compact())

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a one-line-per-fact summary without traceback noise."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        return header


class TemplateNestingError(TemplateError):
    """Block nesting exceeded the environment's ``max_nesting_depth``.

    Each nested ``{{#if}}``/``{{#each}}`` costs stack frames while the
    template is parsed and rendered, so the depth is capped instead of
    letting ``RecursionError`` escape from deep inside the engine.

    Attributes:
        max_depth: The configured limit
        template_name: Name of the template
        lineno: Line of the open tag that crossed the limit
    """

    code: ErrorCode | None = ErrorCode.NESTING_DEPTH

    def __init__(
        self,
        max_depth: int,
        *,
        template_name: str | None = None,
        lineno: int | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.max_depth = max_depth
        self.template_name = template_name
        self.lineno = lineno
        self.source_snippet = source_snippet
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        loc = terminal.location(_location(self.template_name, self.lineno))
        msg = f"Block nesting deeper than {self.max_depth} levels in {loc}"
        if self.source_snippet:
            msg += "\n" + self.source_snippet.format()
        msg += (
            f"\n  {terminal.hint('Hint:')} Flatten the template or raise "
            "Environment(max_nesting_depth=...)"
        )
        return msg


class UndefinedError(TemplateError):
    """Raised when a variable tag's path does not resolve in strict mode.

    Without ``strict=True`` the same tag silently renders as an empty
    string. Conditions and ``#each`` collections never raise; a missing
    value there is simply falsy or empty.

    If ``available_names`` is provided, a "Did you mean?" suggestion is
    included when a close match is found.

    Example:
            >>> Environment(strict=True).render("{{ missing }}", {})
        UndefinedError: Undefined variable 'missing' in <template>:1

    """

    code: ErrorCode | None = ErrorCode.UNDEFINED_VARIABLE

    def __init__(
        self,
        name: str,
        template: str | None = None,
        lineno: int | None = None,
        available_names: Iterable[str] | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.name = name
        self.template = template or "<template>"
        self.lineno = lineno
        self._available_names = frozenset(available_names or ())
        self.source_snippet = source_snippet
        super().__init__(self._format_message())

    @property
    def suggestion(self) -> str | None:
        """Closest available key to the segment that failed, if any."""
        if not self._available_names:
            return None
        missing = self.name.rsplit(".", 1)[-1]
        matches = get_close_matches(missing, self._available_names, n=1, cutoff=0.6)
        return matches[0] if matches else None

    def _format_message(self) -> str:
        loc = terminal.location(_location(self.template, self.lineno))
        msg = f"Undefined variable '{self.name}' in {loc}"
        if self.source_snippet:
            msg += "\n" + self.source_snippet.format()
        suggested = self.suggestion
        if suggested:
            msg += f"\n  {terminal.hint('Hint:')} Did you mean '{terminal.suggestion(suggested)}'?"
        return msg

    def format_compact(self) -> str:
        """Format undefined variable error as structured terminal diagnostic."""
        header = terminal.format_error_header(
            self.code.value if self.code else None,
            f"Undefined variable '{self.name}' in "
            f"{terminal.location(_location(self.template, self.lineno))}",
        )
        parts = [header]
        if self.source_snippet:
            parts.append(self.source_snippet.format())
        suggested = self.suggestion
        if suggested:
            parts.append(f"  {terminal.hint('Hint:')} Did you mean '{terminal.suggestion(suggested)}'?")
        return "\n".join(parts)
