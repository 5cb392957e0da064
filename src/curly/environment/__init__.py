"""Curly environment: configuration and exceptions."""

from curly.environment.exceptions import (
    ErrorCode,
    SourceSnippet,
    TemplateError,
    TemplateNestingError,
    UndefinedError,
    build_source_snippet,
)
from curly.environment.core import DEFAULT_MAX_NESTING_DEPTH, Environment

__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "Environment",
    "ErrorCode",
    "SourceSnippet",
    "TemplateError",
    "TemplateNestingError",
    "UndefinedError",
    "build_source_snippet",
]
