"""Formatters subpackage: parser collaborators and the line re-indenter.

- LineIndentFormatter: lexical re-indentation for YAML/SQL
- parse_json / dump_json: JSON text <-> DynamicValue
- format_xml / format_html: lxml pretty-printers
"""

from structured_formatter.formatters.json_codec import dump_json, parse_json
from structured_formatter.formatters.line_indent import LineIndentFormatter
from structured_formatter.formatters.markup import format_html, format_xml

__all__ = [
    "LineIndentFormatter",
    "dump_json",
    "format_html",
    "format_xml",
    "parse_json",
]
