"""JSON parser collaborator and the copy-output serializer.

``parse_json`` answers "value or nothing": malformed text yields None and
the caller picks the user-visible message.  ``dump_json`` produces the
pretty string a UI puts on the clipboard.
"""

from __future__ import annotations

import json
import math

import structlog

from structured_formatter.tree.values import DynamicValue

__all__ = ["dump_json", "parse_json"]

logger = structlog.get_logger()


def _reject_constant(token: str) -> float:
    msg = f"{token} is not valid JSON"
    raise ValueError(msg)


def _parse_float(token: str) -> float:
    number = float(token)
    if not math.isfinite(number):
        msg = f"{token} overflows a float"
        raise ValueError(msg)
    return number


def parse_json(text: str) -> DynamicValue | None:
    """Parse JSON text into a DynamicValue.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as are float
    literals that overflow to infinity and integer literals past the
    interpreter's digit limit.

    Args:
        text: Raw UTF-8 JSON text.  Any top-level value is accepted.

    Returns:
        The parsed value, or None when the text is not valid JSON.
    """
    try:
        return DynamicValue.from_python(
            json.loads(
                text, parse_float=_parse_float, parse_constant=_reject_constant
            )
        )
    except json.JSONDecodeError as e:
        logger.debug(
            "json.parse.failed", error=e.msg, line=e.lineno, column=e.colno
        )
        return None
    except ValueError as e:
        logger.debug("json.parse.rejected", error=str(e))
        return None
    except RecursionError:
        logger.debug("json.parse.too_deep", length=len(text))
        return None


def dump_json(value: DynamicValue, indent: int = 2) -> str:
    """Serialize ``value`` as pretty JSON, keeping key order and non-ASCII text."""
    return json.dumps(
        value.to_python(), indent=indent, ensure_ascii=False, allow_nan=False
    )
