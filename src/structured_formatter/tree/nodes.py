"""TreeNode and RenderLine dataclasses for the collapsible value tree.

A TreeNode is one renderable unit of a DynamicValue.  Children are never
stored on the node; TreeBuilder derives them from ``value`` on demand.
"""

from __future__ import annotations

from dataclasses import dataclass

from structured_formatter.tree.values import DynamicValue

__all__ = ["Path", "RenderLine", "TreeNode"]

# Sequence of mapping-key (str) / element-index (int) steps from the root
Path = tuple[str | int, ...]


@dataclass(slots=True)
class TreeNode:
    """A node in the collapsible value tree.

    Attributes:
        key:      Mapping key, or ``"[i]"`` for a sequence element; None for
                  the root.
        value:    The DynamicValue this node displays.
        expanded: Presentation flag only.  Never affects ``value`` or any
                  other node.
        path:     Steps from the root to this node; ``()`` for the root.
    """

    key: str | None
    value: DynamicValue
    expanded: bool = True
    path: Path = ()

    @property
    def is_container(self) -> bool:
        return self.value.is_container


@dataclass(frozen=True, slots=True)
class RenderLine:
    """One display line produced by TreeRenderer.

    Attributes:
        level:        Nesting depth; the root is 0.
        text:         Formatted key plus, for scalars, the value text.
        is_container: Whether the line belongs to a mapping or sequence.
        expanded:     The node's expand flag at render time.
        path:         Path of the node that produced the line.
    """

    level: int
    text: str
    is_container: bool
    expanded: bool
    path: Path

    @property
    def indicator(self) -> str:
        """Chevron for containers: ``▼`` expanded, ``▶`` collapsed."""
        if not self.is_container:
            return ""
        return "▼" if self.expanded else "▶"
