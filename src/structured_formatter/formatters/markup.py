"""XML and HTML pretty-printers backed by lxml.

Both re-indent the parsed element tree with ``etree.indent`` and serialize
it back to text.  Unparsable input raises FormatError.
"""

from __future__ import annotations

import re

import structlog
from lxml import etree, html

from structured_formatter.errors import FormatError
from structured_formatter.formats import FileType

__all__ = ["format_html", "format_xml"]

logger = structlog.get_logger()

# Full HTML documents start with a doctype or an <html> tag
_FULL_DOCUMENT = re.compile(r"\s*<(!doctype|html)\b", re.IGNORECASE)


def format_xml(text: str, indent: int = 2) -> str:
    """Pretty-print an XML document.

    The text is always decoded as UTF-8, whatever encoding its declaration
    names.  Any DOCTYPE, prolog comments and processing instructions are
    kept on their own lines around the root element.

    Args:
        text:   Raw XML text.
        indent: Spaces per nesting level.

    Returns:
        The re-indented document (no XML declaration).

    Raises:
        FormatError: If the text is not well-formed XML.
    """
    parser = etree.XMLParser(remove_blank_text=True, encoding="utf-8")
    try:
        root = etree.fromstring(text.strip().encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        logger.debug("markup.xml.parse_failed", error=str(e))
        raise FormatError(FileType.XML, str(e)) from e

    etree.indent(root, space=" " * indent)

    parts: list[str] = []
    doctype = root.getroottree().docinfo.doctype
    if doctype:
        parts.append(doctype)
    preceding = list(root.itersiblings(preceding=True))
    parts.extend(_serialize(node) for node in reversed(preceding))
    parts.append(_serialize(root))
    parts.extend(_serialize(node) for node in root.itersiblings())
    return "\n".join(parts)


def _serialize(node: etree._Element) -> str:
    return etree.tostring(node, encoding="unicode", with_tail=False)


def format_html(text: str, indent: int = 2) -> str:
    """Pretty-print an HTML document or fragment.

    Fragments (no doctype or ``<html>``) may hold several top-level
    elements; each is indented on its own and bare text is kept stripped.

    Args:
        text:   Raw HTML text.
        indent: Spaces per nesting level.

    Returns:
        The re-indented HTML ending in a newline, or "" for blank input.

    Raises:
        FormatError: If lxml cannot build a tree from the text.
    """
    text = text.strip()
    if not text:
        return ""

    space = " " * indent
    try:
        if _FULL_DOCUMENT.match(text):
            doc = html.document_fromstring(text)
            etree.indent(doc, space=space)
            result = etree.tostring(
                doc,
                pretty_print=True,
                encoding="unicode",
                method="html",
                doctype=doc.getroottree().docinfo.doctype or None,
            )
        else:
            parts: list[str] = []
            for frag in html.fragments_fromstring(text):
                if isinstance(frag, str):
                    stripped = frag.strip()
                    if stripped:
                        parts.append(stripped)
                    continue
                etree.indent(frag, space=space)
                parts.append(
                    etree.tostring(
                        frag, pretty_print=True, encoding="unicode", method="html"
                    ).rstrip("\n")
                )
            result = "\n".join(parts)
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        logger.debug("markup.html.parse_failed", error=str(e))
        raise FormatError(FileType.HTML, str(e)) from e

    return result.rstrip("\n") + "\n"
