"""TreeBuilder: projects a DynamicValue onto lazily derived TreeNodes.

Only the root is built eagerly.  ``children()`` re-derives a node's
children from its value every time it is called, so the builder holds no
per-tree state.  Expand overrides, when supplied, are looked up by path.

Path steps:
- Mapping entries append their key (str).
- Sequence elements append their index (int); the display key is "[i]".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from structured_formatter.tree.nodes import Path, TreeNode
from structured_formatter.tree.values import DynamicValue, ValueKind

__all__ = ["TreeBuilder", "element_key"]


def element_key(index: int) -> str:
    """Display key of a sequence element, e.g. ``"[0]"``."""
    return f"[{index}]"


@dataclass
class TreeBuilder:
    """Builds root TreeNodes and derives their children on demand.

    Example::
        builder = TreeBuilder()
        root = builder.build(DynamicValue.from_python({"a": [1, 2]}))
        [child.key for child in builder.children(root)]   # ["a"]
    """

    def build(self, value: DynamicValue) -> TreeNode:
        """Return a fresh, expanded root node for ``value``."""
        return TreeNode(key=None, value=value, expanded=True, path=())

    def children(
        self,
        node: TreeNode,
        overrides: Mapping[Path, bool] | None = None,
    ) -> list[TreeNode]:
        """Derive the child nodes of ``node``.

        Args:
            node:      Any TreeNode.
            overrides: Optional sparse map of path -> expanded flag.  Children
                       without an entry default to expanded.

        Returns:
            One node per mapping entry (insertion order) or sequence element
            (index order); an empty list for scalars.
        """
        value = node.value

        if value.kind == ValueKind.MAPPING:
            return [
                self._child(key, item, (*node.path, key), overrides)
                for key, item in value.payload
            ]

        if value.kind == ValueKind.SEQUENCE:
            return [
                self._child(element_key(idx), item, (*node.path, idx), overrides)
                for idx, item in enumerate(value.payload)
            ]

        return []

    def _child(
        self,
        key: str,
        value: DynamicValue,
        path: Path,
        overrides: Mapping[Path, bool] | None,
    ) -> TreeNode:
        expanded = True
        if overrides is not None:
            expanded = overrides.get(path, True)
        return TreeNode(key=key, value=value, expanded=expanded, path=path)
