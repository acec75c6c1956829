"""Public API functions for structured-formatter.

Thin module-level entry points over the tree layer, the line re-indenter
and the Formatter orchestrator.  Each call uses fresh objects, so no state
is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterator

from structured_formatter.config import FormatterConfig
from structured_formatter.formats import FileType
from structured_formatter.formatter import Formatter
from structured_formatter.formatters.line_indent import LineIndentFormatter
from structured_formatter.result import FormatResult
from structured_formatter.tree.builder import TreeBuilder
from structured_formatter.tree.nodes import RenderLine, TreeNode
from structured_formatter.tree.renderer import TreeRenderer
from structured_formatter.tree.values import DynamicValue
from structured_formatter.tree.view import set_expanded

__all__ = [
    "build",
    "children",
    "format_text",
    "indent_lines",
    "render",
    "render_text",
    "set_expanded",
]


def build(value: DynamicValue) -> TreeNode:
    """Return an expanded root node with no key for ``value``."""
    return TreeBuilder().build(value)


def children(node: TreeNode) -> list[TreeNode]:
    """Return freshly derived, expanded child nodes of ``node``.

    Mapping entries come in insertion order keyed by entry key; sequence
    elements come in index order keyed ``"[i]"``; scalars have none.
    """
    return TreeBuilder().children(node)


def render(node: TreeNode, level: int = 0) -> Iterator[RenderLine]:
    """Lazily yield the display lines of ``node`` and its visible descendants."""
    return TreeRenderer().render(node, level)


def render_text(node: TreeNode, config: FormatterConfig | None = None) -> str:
    """Render ``node`` as indented text (``indent_unit`` spaces per level)."""
    renderer = TreeRenderer(config=config if config is not None else FormatterConfig())
    return renderer.render_text(node)


def indent_lines(text: str, config: FormatterConfig | None = None) -> str:
    """Re-indent line-oriented text with LineIndentFormatter."""
    formatter = LineIndentFormatter(config=config if config is not None else FormatterConfig())
    return formatter.format(text)


def format_text(
    text: str,
    file_type: FileType | str = FileType.JSON,
    config: FormatterConfig | None = None,
) -> FormatResult:
    """Format raw ``text`` as ``file_type``; see ``Formatter.format``."""
    return Formatter(config=config).format(text, file_type)
