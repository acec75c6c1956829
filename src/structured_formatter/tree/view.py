"""TreeView: one formatted-result session over a DynamicValue.

The value stays immutable.  Expand choices live in a sparse map keyed by
node path, owned by the view, so they survive the re-derivation of child
nodes that happens on every render.  A new view starts with every node
expanded; reformatting or clearing means dropping the view
(reset-on-reformat).
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from structured_formatter.config import FormatterConfig
from structured_formatter.tree.builder import TreeBuilder
from structured_formatter.tree.nodes import Path, RenderLine, TreeNode
from structured_formatter.tree.renderer import TreeRenderer
from structured_formatter.tree.values import DynamicValue

__all__ = ["TreeView", "set_expanded"]

logger = structlog.get_logger()


def set_expanded(node: TreeNode, value: bool) -> bool:
    """Set ``node.expanded``; a no-op on scalar nodes.

    Returns:
        True if the node is a container (the flag was applied).
    """
    if not node.is_container:
        logger.debug("tree.set_expanded.ignored_scalar", path=list(node.path))
        return False
    node.expanded = bool(value)
    return True


class TreeView:
    """Owns a freshly built root plus its expand overrides.

    Example::

        view = TreeView(DynamicValue.from_python({"a": {"b": 1}}))
        a = view.children(view.root)[0]
        view.set_expanded(a, False)
        print(view.render_text())
    """

    def __init__(
        self,
        value: DynamicValue,
        config: FormatterConfig | None = None,
    ) -> None:
        self._config: FormatterConfig = config if config is not None else FormatterConfig()
        self._builder = TreeBuilder()
        self._renderer = TreeRenderer(config=self._config, builder=self._builder)
        self._overrides: dict[Path, bool] = {}
        self.root: TreeNode = self._builder.build(value)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def value(self) -> DynamicValue:
        return self.root.value

    @property
    def overrides(self) -> dict[Path, bool]:
        """A copy of the non-default expand flags, keyed by path."""
        return dict(self._overrides)

    # ------------------------------------------------------------------
    # Navigation and state
    # ------------------------------------------------------------------

    def children(self, node: TreeNode) -> list[TreeNode]:
        return self._builder.children(node, self._overrides)

    def is_expanded(self, path: Path) -> bool:
        if path == self.root.path:
            return self.root.expanded
        return self._overrides.get(path, True)

    def set_expanded(self, node: TreeNode, value: bool) -> None:
        """Apply an expand flag to ``node`` and remember it by path."""
        if not set_expanded(node, value):
            return
        if node.path == self.root.path and node is not self.root:
            self.root.expanded = node.expanded
        if node.expanded:
            self._overrides.pop(node.path, None)
        else:
            self._overrides[node.path] = False

    def toggle(self, node: TreeNode) -> None:
        self.set_expanded(node, not node.expanded)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Iterator[RenderLine]:
        return self._renderer.render(self.root, 0, self._overrides)

    def render_text(self) -> str:
        return self._renderer.render_text(self.root, self._overrides)

    def pixel_offset(self, line: RenderLine) -> int:
        return self._renderer.pixel_offset(line)
