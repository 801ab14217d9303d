"""Token, span and error types shared by the TOML tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True)
class Span:
    """A half-open range of character offsets where a token was found."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    def __len__(self) -> int:
        return self.end - self.start


class TokenKind(Enum):
    """The kinds of token the tokenizer produces."""

    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    COMMENT = "comment"
    EQUALS = "equals"
    PERIOD = "period"
    COMMA = "comma"
    COLON = "colon"
    PLUS = "plus"
    LEFT_BRACE = "left_brace"
    RIGHT_BRACE = "right_brace"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    KEYLIKE = "keylike"
    STRING = "string"


_DESCRIPTIONS = {
    TokenKind.KEYLIKE: "an identifier",
    TokenKind.EQUALS: "an equals",
    TokenKind.PERIOD: "a period",
    TokenKind.COMMENT: "a comment",
    TokenKind.NEWLINE: "a newline",
    TokenKind.WHITESPACE: "whitespace",
    TokenKind.COMMA: "a comma",
    TokenKind.RIGHT_BRACE: "a right brace",
    TokenKind.LEFT_BRACE: "a left brace",
    TokenKind.RIGHT_BRACKET: "a right bracket",
    TokenKind.LEFT_BRACKET: "a left bracket",
    TokenKind.COLON: "a colon",
    TokenKind.PLUS: "a plus",
}


@dataclass(frozen=True)
class Token:
    """A single token.

    ``text`` holds the source text for whitespace, comments, bare keys and
    strings (including quotes). ``value`` is the decoded content of a string
    token, and ``multiline`` tells whether it used triple quotes.
    """

    kind: TokenKind
    text: str = ""
    value: str | None = None
    multiline: bool = False

    def describe(self) -> str:
        """Return a short human-readable name for this token."""
        if self.kind is TokenKind.STRING:
            return "a multiline string" if self.multiline else "a string"
        return _DESCRIPTIONS[self.kind]


class ErrorKind(Enum):
    """The ways tokenizing can fail."""

    INVALID_CHAR_IN_STRING = "invalid_char_in_string"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_HEX_ESCAPE = "invalid_hex_escape"
    INVALID_ESCAPE_VALUE = "invalid_escape_value"
    NEWLINE_IN_STRING = "newline_in_string"
    UNEXPECTED = "unexpected"
    UNTERMINATED_STRING = "unterminated_string"
    NEWLINE_IN_TABLE_KEY = "newline_in_table_key"
    MULTILINE_STRING_KEY = "multiline_string_key"
    WANTED = "wanted"


_SIMPLE_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
}


def _escape_char(ch: str) -> str:
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if "\x20" <= ch <= "\x7e":
        return ch
    return "\\u{%x}" % ord(ch)


class TokenizeError(Exception):
    """Raised when the input cannot be split into tokens.

    ``at`` is the character offset of the problem. ``char`` is set for
    errors about a specific character, ``value`` for an invalid escape
    value, and ``expected``/``found`` for the ``WANTED`` kind.
    """

    def __init__(
        self,
        kind: ErrorKind,
        at: int,
        *,
        char: str | None = None,
        value: int | None = None,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.kind = kind
        self.at = at
        self.char = char
        self.value = value
        self.expected = expected
        self.found = found
        super().__init__(self._message())

    def _message(self) -> str:
        kind = self.kind
        if kind is ErrorKind.INVALID_CHAR_IN_STRING:
            return f"invalid character in string: `{_escape_char(self.char or '')}`"
        if kind is ErrorKind.INVALID_ESCAPE:
            return f"invalid escape character in string: `{_escape_char(self.char or '')}`"
        if kind is ErrorKind.INVALID_HEX_ESCAPE:
            return (
                "invalid hex escape character in string: "
                f"`{_escape_char(self.char or '')}`"
            )
        if kind is ErrorKind.INVALID_ESCAPE_VALUE:
            return f"invalid escape value: `{self.value}`"
        if kind is ErrorKind.NEWLINE_IN_STRING:
            return "newline in string found"
        if kind is ErrorKind.UNEXPECTED:
            return f"unexpected character found: `{_escape_char(self.char or '')}`"
        if kind is ErrorKind.UNTERMINATED_STRING:
            return "unterminated string"
        if kind is ErrorKind.NEWLINE_IN_TABLE_KEY:
            return "found newline in table key"
        if kind is ErrorKind.MULTILINE_STRING_KEY:
            return "multiline strings are not allowed for key"
        return f"expected {self.expected}, found {self.found}"

    def _fields(self) -> tuple:
        return (self.kind, self.at, self.char, self.value, self.expected, self.found)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenizeError):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        extras = [
            f"{name}={val!r}"
            for name, val in (
                ("char", self.char),
                ("value", self.value),
                ("expected", self.expected),
                ("found", self.found),
            )
            if val is not None
        ]
        inner = ", ".join([str(self.kind), str(self.at), *extras])
        return f"TokenizeError({inner})"


def is_keylike(ch: str) -> bool:
    """Return True if ``ch`` may appear in a bare key."""
    return (
        "A" <= ch <= "Z"
        or "a" <= ch <= "z"
        or "0" <= ch <= "9"
        or ch == "-"
        or ch == "_"
    )