"""TreeRenderer: lazily walks a TreeNode tree into display lines.

Line text rule:
- formattedKey is ``"<key>": `` when the node has a key, else empty.
- Scalars append their canonical value text; containers append nothing.

A collapsed container still yields its own line, but none of its
descendants.  ``render`` is a generator, so calling it again on the same
node restarts the walk.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from structured_formatter.config import FormatterConfig
from structured_formatter.tree.builder import TreeBuilder
from structured_formatter.tree.nodes import Path, RenderLine, TreeNode

__all__ = ["TreeRenderer", "format_key", "line_text"]


def format_key(key: str | None) -> str:
    if key is None:
        return ""
    return f'"{key}": '


def line_text(node: TreeNode) -> str:
    """Text of the single line that ``node`` contributes."""
    if node.is_container:
        return format_key(node.key)
    return format_key(node.key) + node.value.scalar_text()


@dataclass
class TreeRenderer:
    """Renders a tree as RenderLines, indented text, or pixel offsets.

    Attributes:
        config:  Supplies ``indent_unit`` and ``pixel_indent``.
        builder: Derives children during the walk.
    """

    config: FormatterConfig = field(default_factory=FormatterConfig)
    builder: TreeBuilder = field(default_factory=TreeBuilder)

    def render(
        self,
        node: TreeNode,
        level: int = 0,
        overrides: Mapping[Path, bool] | None = None,
    ) -> Iterator[RenderLine]:
        """Yield one RenderLine per visible node, depth first.

        Args:
            node:      Sub-root to start from.
            level:     Nesting depth assigned to ``node``.
            overrides: Sparse path -> expanded map used for derived children.
        """
        yield RenderLine(
            level=level,
            text=line_text(node),
            is_container=node.is_container,
            expanded=node.expanded,
            path=node.path,
        )
        if not (node.is_container and node.expanded):
            return
        for child in self.builder.children(node, overrides):
            yield from self.render(child, level + 1, overrides)

    def render_text(
        self,
        node: TreeNode,
        overrides: Mapping[Path, bool] | None = None,
    ) -> str:
        """Join rendered lines, each indented by ``indent_unit * level`` spaces."""
        unit = " " * self.config.indent_unit
        return "\n".join(
            unit * line.level + line.text
            for line in self.render(node, 0, overrides)
        )

    def pixel_offset(self, line: RenderLine) -> int:
        """Leading padding, in pixels, of ``line`` in the visual tree."""
        return line.level * self.config.pixel_indent
