"""Exceptions raised by the parser collaborators."""

from __future__ import annotations

from structured_formatter.formats import FileType

__all__ = ["FormatError"]


class FormatError(ValueError):
    """Raw text could not be parsed as ``file_type``.

    Attributes:
        file_type: The format the text was parsed as.
        detail:    The underlying parser message.
    """

    def __init__(self, file_type: FileType, detail: str) -> None:
        self.file_type = file_type
        self.detail = detail
        super().__init__(f"{file_type.label} parse error: {detail}")
