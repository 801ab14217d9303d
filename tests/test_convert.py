import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pytest

from tomlite.convert import (
    ConversionError,
    KeyNotStringError,
    UnsupportedNoneError,
    UnsupportedTypeError,
    ordered_items,
    to_value,
)


@dataclass
class Foo:
    a: int


@dataclass
class Bar:
    a: str
    b: float


@dataclass
class Outer:
    a: Optional["Outer"]
    b: Bar


@dataclass
class CanBeEmpty:
    a: Optional[str] = None
    b: Optional[str] = None


@dataclass
class WithList:
    a: list = field(default_factory=list)


class Sort(Enum):
    asc = 1
    desc = 2


def test_smoke_struct():
    assert to_value(Foo(2)) == {"a": 2}


def test_nested_struct():
    @dataclass
    class Nested:
        a: int
        b: Foo

    assert to_value(Nested(2, Foo(3))) == {"a": 2, "b": {"a": 3}}


def test_inner_structs_with_options():
    obj = Outer(a=Outer(a=None, b=Bar("foo", 4.5)), b=Bar("bar", 1.0))
    assert to_value(obj) == {
        "a": {"b": {"a": "foo", "b": 4.5}},
        "b": {"a": "bar", "b": 1.0},
    }


def test_array_of_ints():
    assert to_value(WithList([1, 2, 3, 4])) == {"a": [1, 2, 3, 4]}


def test_set_and_map():
    obj = {"set": {"a"}, "map": {"foo": 10, "bar": 4}}
    assert to_value(obj) == {"map": {"bar": 4, "foo": 10}, "set": ["a"]}


def test_table_array():
    assert to_value(WithList([Foo(1), Foo(2)])) == {"a": [{"a": 1}, {"a": 2}]}


def test_enum_becomes_variant_name():
    assert to_value({"a": Sort.desc}) == {"a": "desc"}


def test_empty_optional_structs():
    assert to_value(CanBeEmpty()) == {}
    assert to_value(CanBeEmpty(a="foo")) == {"a": "foo"}


def test_tuple_becomes_list():
    assert to_value({"elems": (0, 1, 2)}) == {"elems": [0, 1, 2]}


def test_bytes_become_integers():
    assert to_value(b"\x01\x02") == [1, 2]


def test_keys_are_sorted():
    assert list(to_value({"b": 1, "a": 2})) == ["a", "b"]


def test_scalars_pass_through():
    moment = datetime.datetime(1979, 5, 27, 7, 32)
    assert to_value(moment) is moment
    assert to_value(True) is True
    assert to_value(2.5) == 2.5


def test_none_at_top_is_error():
    with pytest.raises(UnsupportedNoneError):
        to_value(None)


def test_none_in_list_is_error():
    with pytest.raises(UnsupportedNoneError):
        to_value([1, None])


def test_non_string_key_is_error():
    with pytest.raises(KeyNotStringError):
        to_value({1: "a"})


def test_unsupported_type():
    with pytest.raises(UnsupportedTypeError):
        to_value(object())


def test_integer_too_large():
    with pytest.raises(ConversionError, match="u64 value was too large"):
        to_value(2**63)


def test_integer_limit_ok():
    assert to_value(2**63 - 1) == 2**63 - 1


def test_ordered_items_tables_last():
    table = {"test2": {"test": "wut"}, "test": 2}
    assert [k for k, _ in ordered_items(table)] == ["test", "test2"]


def test_ordered_items_array_of_tables_between():
    table = {"t": {"x": 1}, "arr": [{"a": 1}], "plain": [2], "n": 1}
    assert [k for k, _ in ordered_items(table)] == ["plain", "n", "arr", "t"]


def test_ordered_items_keeps_all_entries():
    table = {"test": [2], "test2": 2, "empty": []}
    items = list(ordered_items(table))
    assert dict(items) == table
    assert [k for k, _ in items] == ["test", "test2", "empty"]


def test_ordered_items_rejects_non_value():
    with pytest.raises(TypeError):
        list(ordered_items({"a": object()}))