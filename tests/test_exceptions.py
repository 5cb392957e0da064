"""Tests for error codes, source snippets and error formatting."""

from __future__ import annotations

import pytest

from curly import (
    ErrorCode,
    TemplateError,
    TemplateNestingError,
    UndefinedError,
    build_source_snippet,
)
from curly.environment import terminal


class TestErrorCode:
    def test_values(self) -> None:
        assert ErrorCode.UNDEFINED_VARIABLE.value == "C-RUN-001"
        assert ErrorCode.NESTING_DEPTH.value == "C-RUN-002"

    def test_category(self) -> None:
        assert ErrorCode.UNDEFINED_VARIABLE.category == "runtime"

    def test_hierarchy(self) -> None:
        assert issubclass(UndefinedError, TemplateError)
        assert issubclass(TemplateNestingError, TemplateError)


class TestSourceSnippet:
    """Snippet construction and formatting."""

    SOURCE = "one\ntwo\nthree\nfour\nfive\nsix"

    def test_context_lines(self) -> None:
        snippet = build_source_snippet(self.SOURCE, 4, context_lines=1)
        assert snippet.lines == ((3, "three"), (4, "four"), (5, "five"))
        assert snippet.error_line == 4

    def test_clamped_at_start(self) -> None:
        snippet = build_source_snippet(self.SOURCE, 1)
        assert [n for n, _ in snippet.lines] == [1, 2, 3]

    def test_clamped_at_end(self) -> None:
        snippet = build_source_snippet(self.SOURCE, 6)
        assert [n for n, _ in snippet.lines] == [4, 5, 6]

    def test_format_marks_error_line(self, no_colors: None) -> None:
        snippet = build_source_snippet("a\n{{ b }}", 2, column=3)
        assert snippet.format().splitlines() == [
            "   |",
            "   1 | a",
            ">  2 | {{ b }}",
            "   |      ^",
            "   |",
        ]


class TestNestingError:
    def test_message(self, no_colors: None) -> None:
        error = TemplateNestingError(5, template_name="deep.txt", lineno=3)
        assert "deeper than 5 levels in deep.txt:3" in str(error)
        assert error.code is ErrorCode.NESTING_DEPTH

    def test_format_compact_prefixes_code(self, no_colors: None) -> None:
        error = TemplateNestingError(5)
        assert error.format_compact().startswith("C-RUN-002: Block nesting deeper than 5")


class TestTerminal:
    """Color helpers used by error messages."""

    def test_colorize_plain_when_disabled(self, no_colors: None) -> None:
        assert terminal.colorize("Error", "bright_red", "bold") == "Error"

    def test_colorize_when_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.colorize("Error", "bright_red", "bold")
        assert result == "\033[91m\033[1mError\033[0m"

    def test_format_error_header(self, no_colors: None) -> None:
        assert terminal.format_error_header("C-RUN-001", "msg") == "C-RUN-001: msg"
        assert terminal.format_error_header(None, "msg") == "msg"
