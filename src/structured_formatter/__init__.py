"""Structured formatter - collapsible value trees and line re-indentation."""

from __future__ import annotations

from structured_formatter.api import (
    build,
    children,
    format_text,
    indent_lines,
    render,
    render_text,
    set_expanded,
)
from structured_formatter.config import FormatterConfig, load_config
from structured_formatter.errors import FormatError
from structured_formatter.formats import FileType
from structured_formatter.formatter import Formatter
from structured_formatter.result import FormatResult
from structured_formatter.tree import DynamicValue, TreeNode, TreeView, ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "DynamicValue",
    "FileType",
    "FormatError",
    "FormatResult",
    "Formatter",
    "FormatterConfig",
    "TreeNode",
    "TreeView",
    "ValueKind",
    "build",
    "children",
    "format_text",
    "indent_lines",
    "load_config",
    "render",
    "render_text",
    "set_expanded",
]
