"""Value types of the source language and small string helpers."""

from __future__ import annotations

import enum
import re


class ValueType(enum.IntEnum):
    """Types a symbol or expression may have."""

    INT = 0
    FLOAT = 1
    STRING = 2
    BOOL = 3
    CHAR = 4
    VOID = 5


_TYPE_NAMES = {
    ValueType.INT: "int",
    ValueType.FLOAT: "float",
    ValueType.STRING: "string",
    ValueType.BOOL: "bool",
    ValueType.CHAR: "char",
    ValueType.VOID: "void",
}

_NUMERIC = frozenset({ValueType.INT, ValueType.FLOAT})


def split(text: str, delimiter: str) -> list[str]:
    """Split text on any character of delimiter, dropping empty tokens."""
    if not delimiter:
        return [text] if text else []
    pattern = "[" + re.escape(delimiter) + "]"
    return [token for token in re.split(pattern, text) if token]


def types_compatible(first: ValueType, second: ValueType) -> bool:
    """Numeric types mix freely; any other type matches only itself."""
    if first in _NUMERIC and second in _NUMERIC:
        return True
    return first == second


def concat_with_comma(first: str, second: str) -> str:
    if first is None or second is None:
        raise TypeError("both strings are required")
    return f"{first},{second}"


def type_name(value_type) -> str:
    """Return the language keyword for a type, or 'unknown'."""
    try:
        return _TYPE_NAMES[ValueType(value_type)]
    except ValueError:
        return "unknown"