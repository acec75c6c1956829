"""FormatterConfig and YAML config loading.

FormatterConfig is a frozen (immutable) dataclass holding the layout
parameters shared by the tree renderer, the line indenter and the copy
serializer.  ``load_config`` reads the same fields from a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import structlog
import yaml

__all__ = ["FormatterConfig", "load_config"]

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable layout configuration.

    Attributes:
        indent_unit:  Spaces per nesting level in textual output (tree text
            and LineIndentFormatter).  Default 2.
        pixel_indent: Pixels per nesting level in the visual tree.  Default 20.
        copy_indent:  Indent used by the pretty JSON copied to the clipboard.
            Default 2.
    """

    indent_unit: int = 2
    pixel_indent: int = 20
    copy_indent: int = 2

    def __post_init__(self) -> None:
        for name in ("indent_unit", "pixel_indent", "copy_indent"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an int, got {type(value).__name__}"
                raise ValueError(msg)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)


def load_config(path: Path) -> FormatterConfig:
    """Load a FormatterConfig from a YAML mapping.

    A missing or empty file yields the defaults.

    Args:
        path: Location of the YAML file.

    Returns:
        The parsed, validated configuration.

    Raises:
        ValueError: If the document is not a mapping, names an unknown
            field, or holds an invalid value.
        yaml.YAMLError: If the file is not valid YAML.
    """
    logger.debug("config.load.starting", path=str(path))
    if not path.exists():
        logger.info("config.load.file_not_found", path=str(path))
        return FormatterConfig()

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("config.load.yaml_error", path=str(path), error=str(e))
            raise

    if not isinstance(data, dict):
        msg = f"config root must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)

    known = {f.name for f in fields(FormatterConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        msg = f"unknown config keys: {', '.join(map(str, unknown))}"
        raise ValueError(msg)

    config = FormatterConfig(**data)
    logger.info("config.load.success", path=str(path), keys=sorted(data))
    return config
