"""A TOML tokenizer that splits text into spanned tokens."""

from __future__ import annotations

from typing import Callable, Iterator

from .tokens import ErrorKind, Span, Token, TokenizeError, TokenKind, is_keylike

_PUNCTUATION = {
    "=": TokenKind.EQUALS,
    ".": TokenKind.PERIOD,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "+": TokenKind.PLUS,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
}

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "b": "\x08",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _is_string_char(ch: str) -> bool:
    return ch == "\t" or ("\x20" <= ch <= "\U0010ffff" and ch != "\x7f")


class _StringValue:
    """Collects a string's value, slicing the input until an escape forces a copy."""

    def __init__(self, text: str, start: int) -> None:
        self._text = text
        self._start = start
        self._parts: list[str] | None = None

    def push(self, ch: str) -> None:
        if self._parts is not None:
            self._parts.append(ch)

    def make_owned(self, end: int) -> None:
        if self._parts is None:
            self._parts = [self._text[self._start:end]]

    def finish(self, end: int) -> str:
        if self._parts is None:
            return self._text[self._start:end]
        return "".join(self._parts)


_CharHandler = Callable[[_StringValue, bool, int, str], None]


class Tokenizer:
    """Splits TOML text into tokens, folding CRLF into a single newline."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._eatc("\ufeff")

    def __iter__(self) -> Iterator[tuple[Span, Token]]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item

    # -- character level ---------------------------------------------------

    def _peek_one(self) -> tuple[int, str] | None:
        pos = self._pos
        text = self._text
        if pos >= len(text):
            return None
        ch = text[pos]
        if ch == "\r" and pos + 1 < len(text) and text[pos + 1] == "\n":
            return pos, "\n"
        return pos, ch

    def _one(self) -> tuple[int, str] | None:
        item = self._peek_one()
        if item is None:
            return None
        index, ch = item
        self._pos = index + (2 if self._text[index] == "\r" and ch == "\n" else 1)
        return item

    def _eatc(self, ch: str) -> bool:
        item = self._peek_one()
        if item is not None and item[1] == ch:
            self._one()
            return True
        return False

    def _step_span(self, start: int) -> Span:
        return Span(start, self.current())

    # -- public API --------------------------------------------------------

    def next(self) -> tuple[Span, Token] | None:
        """Consume and return the next token with its span, or None at the end."""
        item = self._one()
        if item is None:
            return None
        start, ch = item
        if ch == "\n":
            token = Token(TokenKind.NEWLINE)
        elif ch in (" ", "\t"):
            token = self._whitespace_token(start)
        elif ch == "#":
            token = self._comment_token(start)
        elif ch in _PUNCTUATION:
            token = Token(_PUNCTUATION[ch])
        elif ch == "'":
            token = self._literal_string(start)
        elif ch == '"':
            token = self._basic_string(start)
        elif is_keylike(ch):
            token = self._keylike(start)
        else:
            raise TokenizeError(ErrorKind.UNEXPECTED, start, char=ch)
        return self._step_span(start), token

    def peek(self) -> tuple[Span, Token] | None:
        """Return the next token without consuming it."""
        saved = self._pos
        try:
            return self.next()
        finally:
            self._pos = saved

    def eat(self, kind: TokenKind) -> bool:
        """Consume the next token if it is of ``kind``; tell whether it was."""
        return self.eat_spanned(kind) is not None

    def eat_spanned(self, kind: TokenKind) -> Span | None:
        """Consume the next token if it is of ``kind`` and return its span."""
        item = self.peek()
        if item is None or item[1].kind is not kind:
            return None
        self._pos = item[0].end
        return item[0]

    def expect(self, kind: TokenKind) -> None:
        """Consume a token of ``kind`` or raise a WANTED error."""
        self.expect_spanned(kind)

    def expect_spanned(self, kind: TokenKind) -> Span:
        """Consume a token of ``kind`` and return its span, or raise."""
        current = self.current()
        expected = Token(kind).describe()
        item = self.next()
        if item is None:
            raise TokenizeError(
                ErrorKind.WANTED, len(self._text), expected=expected, found="eof"
            )
        span, found = item
        if found.kind is not kind:
            raise TokenizeError(
                ErrorKind.WANTED, current, expected=expected, found=found.describe()
            )
        return span

    def table_key(self) -> tuple[Span, str]:
        """Consume a bare or quoted key and return its span and text."""
        current = self.current()
        item = self.next()
        if item is None:
            raise TokenizeError(
                ErrorKind.WANTED, len(self._text), expected="a table key", found="eof"
            )
        span, token = item
        if token.kind is TokenKind.KEYLIKE:
            return span, token.text
        if token.kind is TokenKind.STRING:
            offset = span.start
            if token.multiline:
                raise TokenizeError(ErrorKind.MULTILINE_STRING_KEY, offset)
            newline = token.text.find("\n")
            if newline >= 0:
                raise TokenizeError(ErrorKind.NEWLINE_IN_TABLE_KEY, offset + newline)
            return span, token.value or ""
        raise TokenizeError(
            ErrorKind.WANTED, current, expected="a table key", found=token.describe()
        )

    def eat_whitespace(self) -> None:
        """Skip spaces and tabs."""
        while self._eatc(" ") or self._eatc("\t"):
            pass

    def eat_comment(self) -> bool:
        """Skip a comment and the line end after it; tell whether one was there."""
        if not self._eatc("#"):
            return False
        self._comment_token(0)
        self.eat_newline_or_eof()
        return True

    def eat_newline_or_eof(self) -> None:
        """Consume a newline, or accept the end of input; raise otherwise."""
        current = self.current()
        item = self.next()
        if item is None or item[1].kind is TokenKind.NEWLINE:
            return
        raise TokenizeError(
            ErrorKind.WANTED, current, expected="newline", found=item[1].describe()
        )

    def skip_to_newline(self) -> None:
        """Skip everything up to and including the next newline."""
        while True:
            item = self._one()
            if item is None or item[1] == "\n":
                return

    def current(self) -> int:
        """Return the offset of the next unread character."""
        item = self._peek_one()
        return len(self._text) if item is None else item[0]

    def input(self) -> str:
        """Return the full text being tokenized."""
        return self._text

    # -- token readers -----------------------------------------------------

    def _whitespace_token(self, start: int) -> Token:
        self.eat_whitespace()
        return Token(TokenKind.WHITESPACE, self._text[start:self.current()])

    def _comment_token(self, start: int) -> Token:
        while (item := self._peek_one()) is not None:
            ch = item[1]
            if ch != "\t" and (ch < "\x20" or ch > "\U0010ffff"):
                break
            self._one()
        return Token(TokenKind.COMMENT, self._text[start:self.current()])

    def _keylike(self, start: int) -> Token:
        while (item := self._peek_one()) is not None and is_keylike(item[1]):
            self._one()
        return Token(TokenKind.KEYLIKE, self._text[start:self.current()])

    def _read_string(self, delim: str, start: int, on_char: _CharHandler) -> Token:
        text = self._text
        multiline = False
        if self._eatc(delim):
            if self._eatc(delim):
                multiline = True
            else:
                return Token(
                    TokenKind.STRING, text[start:start + 2], value="", multiline=False
                )
        val = _StringValue(text, self.current())
        n = 0
        while True:
            n += 1
            item = self._one()
            if item is None:
                raise TokenizeError(ErrorKind.UNTERMINATED_STRING, start)
            i, ch = item
            if ch == "\n":
                if not multiline:
                    raise TokenizeError(ErrorKind.NEWLINE_IN_STRING, i)
                if text[i] == "\r":
                    val.make_owned(i)
                if n == 1:
                    val = _StringValue(text, self.current())
                else:
                    val.push("\n")
                continue
            if ch == delim:
                if multiline:
                    if not self._eatc(delim):
                        val.push(delim)
                        continue
                    if not self._eatc(delim):
                        val.push(delim)
                        val.push(delim)
                        continue
                    for _ in range(2):
                        if self._eatc(delim):
                            val.push(delim)
                            i += 1
                return Token(
                    TokenKind.STRING,
                    text[start:self.current()],
                    value=val.finish(i),
                    multiline=multiline,
                )
            on_char(val, multiline, i, ch)

    def _literal_string(self, start: int) -> Token:
        def on_char(val: _StringValue, multiline: bool, i: int, ch: str) -> None:
            if not _is_string_char(ch):
                raise TokenizeError(ErrorKind.INVALID_CHAR_IN_STRING, i, char=ch)
            val.push(ch)

        return self._read_string("'", start, on_char)

    def _basic_string(self, start: int) -> Token:
        def on_char(val: _StringValue, multiline: bool, i: int, ch: str) -> None:
            if ch == "\\":
                val.make_owned(i)
                self._escape(val, multiline, start)
            elif _is_string_char(ch):
                val.push(ch)
            else:
                raise TokenizeError(ErrorKind.INVALID_CHAR_IN_STRING, i, char=ch)

        return self._read_string('"', start, on_char)

    def _escape(self, val: _StringValue, multiline: bool, start: int) -> None:
        item = self._one()
        if item is None:
            raise TokenizeError(ErrorKind.UNTERMINATED_STRING, start)
        i, c = item
        if c in _SIMPLE_ESCAPES:
            val.push(_SIMPLE_ESCAPES[c])
        elif c in ("u", "U"):
            val.push(self._hex(start, i, 4 if c == "u" else 8))
        elif multiline and c in (" ", "\t", "\n"):
            if c != "\n":
                while (nxt := self._peek_one()) is not None:
                    if nxt[1] in (" ", "\t"):
                        self._one()
                    elif nxt[1] == "\n":
                        self._one()
                        break
                    else:
                        raise TokenizeError(ErrorKind.INVALID_ESCAPE, i, char=c)
            while (nxt := self._peek_one()) is not None and nxt[1] in (" ", "\t", "\n"):
                self._one()
        else:
            raise TokenizeError(ErrorKind.INVALID_ESCAPE, i, char=c)

    def _hex(self, start: int, i: int, length: int) -> str:
        digits = []
        for _ in range(length):
            item = self._one()
            if item is None:
                raise TokenizeError(ErrorKind.UNTERMINATED_STRING, start)
            index, ch = item
            if ch not in _HEX_DIGITS:
                raise TokenizeError(ErrorKind.INVALID_HEX_ESCAPE, index, char=ch)
            digits.append(ch)
        code = int("".join(digits), 16)
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            raise TokenizeError(ErrorKind.INVALID_ESCAPE_VALUE, i, value=code)
        return chr(code)