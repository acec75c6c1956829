"""Formatter: orchestrator that routes raw text to the right collaborator.

This is the wiring layer between the parser collaborators, the tree layer
and the line re-indenter:

- JSON is parsed into a DynamicValue and wrapped in a fresh TreeView; the
  pretty JSON copy string is produced alongside.
- XML and HTML go through the lxml pretty-printers.
- YAML and SQL go through LineIndentFormatter.

Every call builds its own result; nothing is cached or shared between
calls, so reformatting always starts from a fully expanded tree.  Parse
failures become ``FormatResult.error`` and are never raised.
"""

from __future__ import annotations

from typing import Any

import structlog

from structured_formatter.config import FormatterConfig
from structured_formatter.errors import FormatError
from structured_formatter.formats import FileType
from structured_formatter.formatters.json_codec import dump_json, parse_json
from structured_formatter.formatters.line_indent import LineIndentFormatter
from structured_formatter.formatters.markup import format_html, format_xml
from structured_formatter.result import FormatResult
from structured_formatter.tree.view import TreeView

__all__ = ["Formatter"]

logger = structlog.get_logger()


class Formatter:
    """Formats raw text of a selected FileType into a FormatResult.

    Example::

        fmt = Formatter()
        result = fmt.format('{"a": [1, 2]}', FileType.JSON)
        print(result.view.render_text())
        print(result.copy_text)

        bad = fmt.format('{"a": ', FileType.JSON)
        print(bad.error)   # Invalid JSON.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config: FormatterConfig = config if config is not None else FormatterConfig()
        self._line_indenter = LineIndentFormatter(config=self._config)

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def format(self, text: str, file_type: FileType | str = FileType.JSON) -> FormatResult:
        """Format ``text`` as ``file_type``.

        Args:
            text:      Raw input text.
            file_type: A FileType or its value (e.g. ``"yaml"``).

        Returns:
            A FormatResult holding a tree and/or text, or an error message.

        Raises:
            ValueError: If ``file_type`` names no known format.
        """
        file_type = FileType(str(file_type).lower())
        log = logger.bind(file_type=str(file_type), length=len(text))

        if file_type.is_tree_capable:
            return self._format_tree(text, file_type, log)

        try:
            formatted = self._format_text(text, file_type)
        except FormatError as e:
            log.info("formatter.format.failed", error=e.detail)
            return FormatResult(file_type=file_type, error=file_type.error_message)

        log.debug("formatter.format.success")
        return FormatResult(file_type=file_type, text=formatted)

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def _format_tree(self, text: str, file_type: FileType, log: Any) -> FormatResult:
        value = parse_json(text)
        if value is None:
            log.info("formatter.format.failed")
            return FormatResult(file_type=file_type, error=file_type.error_message)

        view = TreeView(value, config=self._config)
        copy = dump_json(value, indent=self._config.copy_indent)
        log.debug("formatter.format.success", kind=str(value.kind))
        return FormatResult(file_type=file_type, view=view, text=copy)

    def _format_text(self, text: str, file_type: FileType) -> str:
        if file_type == FileType.XML:
            return format_xml(text, indent=self._config.indent_unit)
        if file_type == FileType.HTML:
            return format_html(text, indent=self._config.indent_unit)
        if file_type in (FileType.YAML, FileType.SQL):
            return self._line_indenter.format(text)
        msg = f"no text formatter for {file_type}"
        raise ValueError(msg)
