"""DynamicValue: the tagged structured value consumed by the tree layer.

A parser collaborator turns raw text into plain Python data; the tree layer
only ever sees the explicit ``DynamicValue`` variant below, so every consumer
dispatches on ``ValueKind`` instead of probing Python types at runtime.

Payload by kind:

- NULL     -> None
- BOOLEAN  -> bool
- NUMBER   -> int | float
- STRING   -> str
- MAPPING  -> tuple of (key, DynamicValue) pairs, insertion order kept
- SEQUENCE -> tuple of DynamicValue
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["DynamicValue", "JsonValue", "ValueKind"]

# Type alias for plain parsed JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six variants of a DynamicValue."""

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    MAPPING = auto()
    SEQUENCE = auto()


@dataclass(frozen=True, slots=True)
class DynamicValue:
    """An immutable, tree-shaped structured value.

    Build instances through the classmethod constructors (or
    ``from_python``) rather than directly, so the payload always matches
    ``kind``.

    Attributes:
        kind:    Which variant this value is.
        payload: The variant's data (see module docstring).
    """

    kind: ValueKind
    payload: Any = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> DynamicValue:
        return cls(ValueKind.NULL, None)

    @classmethod
    def boolean(cls, value: bool) -> DynamicValue:
        return cls(ValueKind.BOOLEAN, bool(value))

    @classmethod
    def number(cls, value: int | float) -> DynamicValue:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"number payload must be int or float, got {type(value)!r}"
            raise TypeError(msg)
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def string(cls, value: str) -> DynamicValue:
        return cls(ValueKind.STRING, str(value))

    @classmethod
    def mapping(cls, entries: Iterable[tuple[str, DynamicValue]]) -> DynamicValue:
        """Build an ordered mapping; keys must be unique strings."""
        pairs = tuple(entries)
        seen: set[str] = set()
        for key, _ in pairs:
            if key in seen:
                msg = f"duplicate mapping key: {key!r}"
                raise ValueError(msg)
            seen.add(key)
        return cls(ValueKind.MAPPING, pairs)

    @classmethod
    def sequence(cls, items: Iterable[DynamicValue]) -> DynamicValue:
        return cls(ValueKind.SEQUENCE, tuple(items))

    @classmethod
    def from_python(cls, value: JsonValue) -> DynamicValue:
        """Convert a parsed JSON value (dict, list, scalar) to a DynamicValue.

        Args:
            value: Any value ``json.loads`` can produce.

        Returns:
            The equivalent DynamicValue tree.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        # bool MUST be checked before int: bool subclasses int
        if isinstance(value, bool):
            return cls.boolean(value)
        if value is None:
            return cls.null()
        if isinstance(value, (int, float)):
            return cls.number(value)
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, dict):
            return cls.mapping(
                (str(key), cls.from_python(item)) for key, item in value.items()
            )
        if isinstance(value, list):
            return cls.sequence(cls.from_python(item) for item in value)

        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_container(self) -> bool:
        return self.kind in (ValueKind.MAPPING, ValueKind.SEQUENCE)

    def to_python(self) -> JsonValue:
        """Return the plain Python equivalent (dicts keep insertion order)."""
        if self.kind == ValueKind.MAPPING:
            return {key: item.to_python() for key, item in self.payload}
        if self.kind == ValueKind.SEQUENCE:
            return [item.to_python() for item in self.payload]
        if self.kind in (
            ValueKind.NULL,
            ValueKind.BOOLEAN,
            ValueKind.NUMBER,
            ValueKind.STRING,
        ):
            return self.payload  # type: ignore[no-any-return]
        msg = f"Unknown value kind: {self.kind!r}"
        raise TypeError(msg)

    def scalar_text(self) -> str:
        """Canonical display text of a scalar.

        Strings are double-quoted JSON string literals (quotes, backslashes
        and control characters escaped, non-ASCII kept), booleans are
        ``true``/``false``, null is ``null``.  Floats with an integral
        value drop the ``.0``.

        Raises:
            TypeError: If called on a container.
        """
        if self.kind == ValueKind.STRING:
            return json.dumps(self.payload, ensure_ascii=False)
        if self.kind == ValueKind.BOOLEAN:
            return "true" if self.payload else "false"
        if self.kind == ValueKind.NULL:
            return "null"
        if self.kind == ValueKind.NUMBER:
            return _number_text(self.payload)
        msg = f"{self.kind} value has no scalar text"
        raise TypeError(msg)


def _number_text(number: int | float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return repr(number)
