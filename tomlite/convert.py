"""Turn arbitrary Python objects into TOML values and order table entries."""

from __future__ import annotations

import dataclasses
import datetime as _dt
from collections.abc import Iterator, Mapping, Set
from enum import Enum
from typing import Any

from .value import ValueType, type_of

__all__ = [
    "ConversionError",
    "UnsupportedTypeError",
    "UnsupportedNoneError",
    "KeyNotStringError",
    "to_value",
    "ordered_items",
]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ConversionError(ValueError):
    """Raised when an object cannot be represented as a TOML value."""


class UnsupportedTypeError(ConversionError):
    """Raised for objects of a type TOML has no counterpart for."""

    def __init__(self, obj: Any = None) -> None:
        name = type(obj).__name__ if obj is not None else "unknown"
        super().__init__(f"unsupported type: {name}")


class UnsupportedNoneError(ConversionError):
    """Raised when None appears where a value is required."""

    def __init__(self) -> None:
        super().__init__("unsupported None value")


class KeyNotStringError(ConversionError):
    """Raised when a mapping key does not convert to a string."""

    def __init__(self) -> None:
        super().__init__("map key was not a string")


def _convert_int(value: int) -> int:
    if value > _I64_MAX:
        raise ConversionError("u64 value was too large")
    if value < _I64_MIN:
        raise ConversionError("integer value was too small")
    return value


def _convert_key(key: Any) -> str:
    converted = to_value(key)
    if not isinstance(converted, str):
        raise KeyNotStringError()
    return converted


def _convert_pairs(pairs: Iterator[tuple[Any, Any]]) -> dict[str, Any]:
    table: dict[str, Any] = {}
    for key, item in pairs:
        name = _convert_key(key)
        try:
            table[name] = to_value(item)
        except UnsupportedNoneError:
            # A missing optional field is simply left out of the table.
            continue
    return dict(sorted(table.items()))


def _set_items(items: Set) -> list[Any]:
    try:
        return sorted(items)
    except TypeError:
        return list(items)


def to_value(obj: Any) -> Any:
    """Convert ``obj`` into plain TOML data.

    Tables come back as dicts with sorted string keys, arrays as lists.
    Entries of a mapping or dataclass whose value is None are dropped;
    None anywhere else raises UnsupportedNoneError.
    """
    if obj is None:
        raise UnsupportedNoneError()
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, int):
        return _convert_int(obj)
    if isinstance(obj, float):
        return obj
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (_dt.datetime, _dt.date, _dt.time)):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return list(bytes(obj))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _convert_pairs(
            (field.name, getattr(obj, field.name)) for field in dataclasses.fields(obj)
        )
    if isinstance(obj, Mapping):
        return _convert_pairs(iter(obj.items()))
    if isinstance(obj, (list, tuple)):
        return [to_value(item) for item in obj]
    if isinstance(obj, Set):
        return [to_value(item) for item in _set_items(obj)]
    raise UnsupportedTypeError(obj)


def _has_table(items: Any) -> bool:
    return any(isinstance(item, Mapping) for item in items)


def ordered_items(table: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield a table's entries in the order they must be written.

    Plain values and arrays without tables come first, then arrays that
    hold tables, then sub-tables; within each group the table's own order
    is kept.
    """
    kinds = {key: type_of(item) for key, item in table.items()}
    for key, item in table.items():
        kind = kinds[key]
        if kind not in (ValueType.TABLE, ValueType.ARRAY) or (
            kind is ValueType.ARRAY and not _has_table(item)
        ):
            yield key, item
    for key, item in table.items():
        if kinds[key] is ValueType.ARRAY and _has_table(item):
            yield key, item
    for key, item in table.items():
        if kinds[key] is ValueType.TABLE:
            yield key, item