import pytest

from tomlite.tokens import (
    ErrorKind,
    Span,
    Token,
    TokenizeError,
    TokenKind,
    is_keylike,
)


def test_span_unpacks_to_tuple():
    span = Span(2, 5)
    assert tuple(span) == (2, 5)
    assert len(span) == 3


def test_span_equality():
    assert Span(0, 1) == Span(0, 1)
    assert not (Span(0, 1) == Span(0, 2))


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TokenKind.KEYLIKE, "an identifier"),
        (TokenKind.EQUALS, "an equals"),
        (TokenKind.PERIOD, "a period"),
        (TokenKind.COMMENT, "a comment"),
        (TokenKind.NEWLINE, "a newline"),
        (TokenKind.WHITESPACE, "whitespace"),
        (TokenKind.COMMA, "a comma"),
        (TokenKind.RIGHT_BRACE, "a right brace"),
        (TokenKind.LEFT_BRACE, "a left brace"),
        (TokenKind.RIGHT_BRACKET, "a right bracket"),
        (TokenKind.LEFT_BRACKET, "a left bracket"),
        (TokenKind.COLON, "a colon"),
        (TokenKind.PLUS, "a plus"),
    ],
)
def test_describe(kind, expected):
    assert Token(kind).describe() == expected


def test_describe_strings():
    assert Token(TokenKind.STRING, "'a'", "a", False).describe() == "a string"
    assert (
        Token(TokenKind.STRING, "'''a'''", "a", True).describe()
        == "a multiline string"
    )


def test_token_equality_includes_payload():
    assert Token(TokenKind.KEYLIKE, "foo") == Token(TokenKind.KEYLIKE, "foo")
    assert not (Token(TokenKind.KEYLIKE, "foo") == Token(TokenKind.KEYLIKE, "bar"))
    assert not (
        Token(TokenKind.STRING, "''", "", False)
        == Token(TokenKind.STRING, "''", "", True)
    )


@pytest.mark.parametrize("text", ["foo", "0bar", "bar0", "1234", "a-b", "a_B", "-_-", "___"])
def test_is_keylike_accepts_bare_key_chars(text):
    assert all(is_keylike(ch) for ch in text)


@pytest.mark.parametrize("ch", [" ", ".", "=", "!", "|", "\r", "\0", "ʎ", "\t", "#"])
def test_is_keylike_rejects_other_chars(ch):
    assert is_keylike(ch) is False


@pytest.mark.parametrize(
    "error, message",
    [
        (
            TokenizeError(ErrorKind.INVALID_CHAR_IN_STRING, 5, char="\x7f"),
            "invalid character in string: `\\u{7f}`",
        ),
        (
            TokenizeError(ErrorKind.INVALID_CHAR_IN_STRING, 5, char="\r"),
            "invalid character in string: `\\r`",
        ),
        (
            TokenizeError(ErrorKind.INVALID_ESCAPE, 2, char="x"),
            "invalid escape character in string: `x`",
        ),
        (
            TokenizeError(ErrorKind.INVALID_ESCAPE, 2, char=" "),
            "invalid escape character in string: ` `",
        ),
        (
            TokenizeError(ErrorKind.INVALID_HEX_ESCAPE, 9, char='"'),
            'invalid hex escape character in string: `\\"`',
        ),
        (
            TokenizeError(ErrorKind.INVALID_ESCAPE_VALUE, 8, value=0xD800),
            "invalid escape value: `55296`",
        ),
        (
            TokenizeError(ErrorKind.NEWLINE_IN_STRING, 1),
            "newline in string found",
        ),
        (
            TokenizeError(ErrorKind.UNEXPECTED, 0, char="\r"),
            "unexpected character found: `\\r`",
        ),
        (
            TokenizeError(ErrorKind.UNEXPECTED, 3, char="|"),
            "unexpected character found: `|`",
        ),
        (
            TokenizeError(ErrorKind.UNTERMINATED_STRING, 0),
            "unterminated string",
        ),
        (
            TokenizeError(ErrorKind.MULTILINE_STRING_KEY, 0),
            "multiline strings are not allowed for key",
        ),
        (
            TokenizeError(
                ErrorKind.WANTED, 1, expected="a table key", found="a right bracket"
            ),
            "expected a table key, found a right bracket",
        ),
        (
            TokenizeError(ErrorKind.WANTED, 2, expected="an equals", found="eof"),
            "expected an equals, found eof",
        ),
    ],
)
def test_error_messages(error, message):
    assert str(error) == message


def test_error_equality():
    assert TokenizeError(ErrorKind.INVALID_ESCAPE, 2, char="a") == TokenizeError(
        ErrorKind.INVALID_ESCAPE, 2, char="a"
    )
    assert not (
        TokenizeError(ErrorKind.INVALID_ESCAPE, 2, char="a")
        == TokenizeError(ErrorKind.INVALID_ESCAPE, 3, char="a")
    )
    assert not (
        TokenizeError(ErrorKind.UNEXPECTED, 0, char="\r")
        == TokenizeError(ErrorKind.UNEXPECTED, 0, char="\0")
    )


def test_error_keeps_fields():
    error = TokenizeError(ErrorKind.INVALID_ESCAPE_VALUE, 2, value=0xFFFFFFFF)
    assert error.kind is ErrorKind.INVALID_ESCAPE_VALUE
    assert error.at == 2
    assert error.value == 0xFFFFFFFF
    assert str(error) == "invalid escape value: `4294967295`"


def test_non_ascii_char_is_escaped_in_message():
    error = TokenizeError(ErrorKind.UNEXPECTED, 0, char="\u00e9")
    assert str(error) == "unexpected character found: `\\u{e9}`"