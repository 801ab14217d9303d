# tomlite

`tomlite` is a small, dependency-free toolkit for working with TOML at the
lexical and value level. It has three parts:

- a **tokenizer** (`tomlite.tokenizer`, with its token and error types in
  `tomlite.tokens`) that turns TOML text into spanned tokens and reports errors
  at exact character offsets;
- a **value model** (`tomlite.value`) built on plain Python types, with helpers
  for naming, comparing and indexing values;
- **conversion** helpers (`tomlite.convert`) that turn ordinary Python objects
  into TOML values and order table entries the way a TOML document has to be
  written.

## Installation

```
pip install tomlite
```

Python 3.10 or newer is required.

## Tokenizing

```python
from tomlite.tokenizer import Tokenizer

for span, token in Tokenizer('name = "value"\n'):
    print(span.start, span.end, token.describe())
```

Iterating over a `Tokenizer` yields `(Span, Token)` pairs until the input is
used up. A `Span` holds character offsets into the input string, with an
exclusive end; it unpacks as `start, end` and its `len()` is the width of the
token.

A `Token` has a `kind` (a `TokenKind` member), the source `text` for
whitespace, comments, bare keys and strings (quotes included), and for string
tokens the decoded `value` and whether it was `multiline`.
`Token.describe()` gives a short name such as `"an identifier"` or
`"a multiline string"`.

A leading byte order mark (`\ufeff`) is skipped, and `\r\n` is read as a single
newline; a lone `\r` outside a string is an error. Strings are decoded as they
are read: escapes in basic strings (`\b \t \n \f \r \" \\ \uXXXX \UXXXXXXXX`)
are resolved, the first newline after an opening triple quote is dropped, and a
backslash at the end of a line in a multi-line basic string removes the line
break and the whitespace that follows it.

A parser built on top of the tokenizer can use these methods:

- `next()`: consume the next token, returning `None` at the end of input;
- `peek()`: look at the next token without consuming it;
- `eat(kind)` and `eat_spanned(kind)`: consume the next token only if it is of
  the given kind;
- `expect(kind)` and `expect_spanned(kind)`: consume the next token and require
  it to be of the given kind;
- `table_key()`: read a bare or quoted key, returning its span and text;
- `eat_whitespace()`, `eat_comment()`, `eat_newline_or_eof()` and
  `skip_to_newline()`: move past layout;
- `current()`: the offset of the next unread character;
- `input()`: the whole text being tokenized.

Malformed input raises `tomlite.tokens.TokenizeError`. Its `kind` is an
`ErrorKind` member and `at` is the character offset where the problem was
found; depending on the kind it also carries `char`, `value`, or
`expected`/`found`. Its message reads like
``invalid escape character in string: `a` ``.

```python
from tomlite.tokenizer import Tokenizer
from tomlite.tokens import ErrorKind, TokenizeError

try:
    Tokenizer('"\\a"').next()
except TokenizeError as err:
    assert err.kind is ErrorKind.INVALID_ESCAPE
    assert err.at == 2
```

`tomlite.tokens.is_keylike(ch)` reports whether a character may appear in a
bare key (ASCII letters, digits, `-` and `_`).

## Values

TOML values are represented with ordinary Python types:

| TOML type | Python type |
|-----------|-------------|
| string    | `str` |
| integer   | `int` (not `bool`) |
| float     | `float` |
| boolean   | `bool` |
| datetime  | `datetime.datetime`, `datetime.date` or `datetime.time` |
| array     | `list` or `tuple` |
| table     | any `Mapping` with string keys |

The helpers in `tomlite.value` work on these values:

```python
from tomlite.value import ValueType, get, same_type, type_of, type_str

doc = {"fruit": [{"name": "apple"}]}
assert type_of(doc) is ValueType.TABLE
assert type_str(doc["fruit"]) == "array"
assert get(get(get(doc, "fruit"), 0), "name") == "apple"
assert get(doc, 5) is None  # the index does not fit the value's type
assert same_type(1, 2) and not same_type(1, 1.0)
```

`type_of` raises `TypeError` for an object that does not stand for a TOML
value. `get` returns `None` when the kind of index does not match the value,
when a key is missing or when a position is out of bounds.

## Converting Python objects

`tomlite.convert.to_value` turns Python objects into TOML values:

- dataclass instances and mappings become dicts with their keys sorted;
- lists and tuples become lists, and sets become lists (sorted when their
  items can be ordered);
- `bytes`, `bytearray` and `memoryview` become lists of integers;
- enum members become their names;
- strings, integers, floats, booleans and datetimes are kept as they are.

```python
from dataclasses import dataclass
from tomlite.convert import ordered_items, to_value

@dataclass
class Server:
    host: str
    port: int

assert to_value(Server("localhost", 8080)) == {"host": "localhost", "port": 8080}
```

Fields and entries whose value is `None` are left out of the table. `None` on
its own cannot be converted and raises `UnsupportedNoneError`. A table key that
does not convert to a string raises `KeyNotStringError`, an object of an
unsupported type raises `UnsupportedTypeError`, and an integer outside the
signed 64-bit range raises `ConversionError`. All of these derive from
`ConversionError`, which is a `ValueError`.

`ordered_items(table)` yields a table's entries in the order a TOML document
needs, keeping the table's own order within each group:

1. plain values and arrays that hold no tables;
2. arrays of tables;
3. sub-tables.

## What tomlite does not do

`tomlite` stops at tokens and values. It has no parser that builds a table
from a whole TOML document, no writer that turns values back into TOML text,
and no datetime parsing of its own; those are left to code built on top of
the tokenizer and value helpers.