"""FileType StrEnum for the input formats the formatter accepts."""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["FileType"]


class FileType(StrEnum):
    """Input formats, selected by the user before formatting.

    - JSON: parsed into a DynamicValue and shown as a collapsible tree.
    - XML, HTML: pretty-printed by a markup parser.
    - YAML, SQL: re-indented line by line (LineIndentFormatter).
    """

    JSON = auto()
    XML = auto()
    YAML = auto()
    SQL = auto()
    HTML = auto()

    @property
    def label(self) -> str:
        """Display name, e.g. ``"JSON"``."""
        return self.value.upper()

    @property
    def is_tree_capable(self) -> bool:
        return self is FileType.JSON

    @property
    def error_message(self) -> str:
        """User-visible message for unparsable input."""
        return f"Invalid {self.label}."
