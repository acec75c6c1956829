"""LineIndentFormatter: best-effort re-indentation for line-oriented text.

Used for formats without a structural parser (YAML, SQL).  Each line is
stripped and re-emitted at the current indent level:

- blank line           -> emitted empty, level unchanged
- line ending in ":"   -> emitted, then the level goes up by one
- line starting "-"    -> emitted at the current level
- anything else        -> emitted at the current level

The level never goes down within a call, so siblings that follow a nested
block keep the deeper indentation.  Output for such input is over-indented
and callers rely on that exact output.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structured_formatter.config import FormatterConfig

__all__ = ["LineIndentFormatter"]


@dataclass(frozen=True)
class LineIndentFormatter:
    """Stateless line re-indenter; the level counter lives in ``format``.

    Example::

        LineIndentFormatter().format("parent:\\n- a\\nchild:")
        # 'parent:\\n  - a\\n  child:'
    """

    config: FormatterConfig = field(default_factory=FormatterConfig)

    def format(self, text: str) -> str:
        unit = " " * self.config.indent_unit
        level = 0
        out: list[str] = []

        for line in text.split("\n"):
            trimmed = line.strip()
            if not trimmed:
                out.append("")
            elif trimmed.endswith(":"):
                out.append(unit * level + trimmed)
                level += 1
            elif trimmed.startswith("-"):
                out.append(unit * level + trimmed)
            else:
                out.append(unit * level + trimmed)

        return "\n".join(out)
