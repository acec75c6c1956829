"""Tree subpackage for the collapsible structured-value view.

Re-exports the public API for the tree module:
- DynamicValue / ValueKind: the tagged structured value
- TreeNode / RenderLine: renderable node and display line
- TreeBuilder: builds roots and derives children on demand
- TreeRenderer: lazy line rendering and indented text
- TreeView: one formatted-result session with expand overrides
"""

from structured_formatter.tree.builder import TreeBuilder
from structured_formatter.tree.nodes import RenderLine, TreeNode
from structured_formatter.tree.renderer import TreeRenderer
from structured_formatter.tree.values import DynamicValue, ValueKind
from structured_formatter.tree.view import TreeView, set_expanded

__all__ = [
    "DynamicValue",
    "RenderLine",
    "TreeBuilder",
    "TreeNode",
    "TreeRenderer",
    "TreeView",
    "ValueKind",
    "set_expanded",
]
