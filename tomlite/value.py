"""Classification and lookup helpers for TOML values held as Python objects.

A TOML value is represented by plain Python data:

* string   -> ``str``
* integer  -> ``int`` (not ``bool``)
* float    -> ``float``
* boolean  -> ``bool``
* datetime -> ``datetime.datetime``, ``datetime.date`` or ``datetime.time``
* array    -> ``list`` or ``tuple``
* table    -> any ``Mapping`` with string keys
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ["ValueType", "type_of", "type_str", "same_type", "get"]


class ValueType(Enum):
    """The seven kinds of TOML value; each member's value is its readable name."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ARRAY = "array"
    TABLE = "table"


def type_of(value: Any) -> ValueType:
    """Return the TOML type of ``value``.

    Raises TypeError if the object cannot stand for a TOML value.
    """
    # bool must be checked before int, since bool is a subclass of int.
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, int):
        return ValueType.INTEGER
    if isinstance(value, float):
        return ValueType.FLOAT
    if isinstance(value, (_dt.datetime, _dt.date, _dt.time)):
        return ValueType.DATETIME
    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY
    if isinstance(value, Mapping):
        return ValueType.TABLE
    raise TypeError(f"{type(value).__name__} is not a TOML value")


def type_str(value: Any) -> str:
    """Return a human-readable name for the TOML type of ``value``."""
    return type_of(value).value


def same_type(a: Any, b: Any) -> bool:
    """Tell whether two values have the same TOML type."""
    return type_of(a) is type_of(b)


def get(value: Any, index: int | str) -> Any:
    """Index into an array with an int or into a table with a str.

    Returns None when the kind of index does not match the kind of value,
    when the key is missing, or when the position is out of bounds.
    """
    if isinstance(index, bool):
        return None
    if isinstance(index, int):
        if isinstance(value, (list, tuple)) and 0 <= index < len(value):
            return value[index]
        return None
    if isinstance(index, str):
        if isinstance(value, Mapping):
            return value.get(index)
        return None
    return None