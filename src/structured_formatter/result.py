"""FormatResult dataclass for formatter output.

This module provides the result type returned by ``Formatter.format()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from structured_formatter.formats import FileType
from structured_formatter.tree.view import TreeView

__all__ = ["FormatResult"]


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Outcome of formatting one piece of raw text.

    Attributes:
        file_type: The format the text was parsed as.
        view:      Collapsible tree session for tree-capable formats; None
                   otherwise or on failure.
        text:      Flat formatted string for display and clipboard copy
                   (pretty JSON for tree-capable formats); None on failure.
        error:     User-visible message such as ``"Invalid JSON."``; None on
                   success.
    """

    file_type: FileType
    view: TreeView | None = None
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def copy_text(self) -> str | None:
        """The string a UI should place on the clipboard, if any."""
        return self.text if self.ok else None
