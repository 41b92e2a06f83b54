import pytest

from hydent.errors import ParseError, TokenizeError, TokenizeErrorKind


@pytest.mark.parametrize(
    ("kind", "index", "expected"),
    [
        (TokenizeErrorKind.STRING_LITERAL_NOT_CLOSED, 5, "String literal not closed at index 5"),
        (TokenizeErrorKind.CHAR_LITERAL_NOT_CLOSED, 0, "Char literal not closed at index 0"),
        (TokenizeErrorKind.INVALID_CHAR_LITERAL, 3, "Invalid char literal at index 3"),
        (TokenizeErrorKind.INVALID_INTEGER_LITERAL, 7, "Invalid integer literal at index 7"),
        (TokenizeErrorKind.INVALID_FLOAT_LITERAL, 9, "Invalid float literal at index 9"),
        (TokenizeErrorKind.UNKNOWN_TOKEN, 12, "Unknown token at index 12"),
        (TokenizeErrorKind.BLOCK_COMMENT_NOT_CLOSED, 1, "Block comment not closed at index 1"),
    ],
)
def test_tokenize_error_message(kind, index, expected):
    assert str(TokenizeError(kind, index)) == expected


def test_tokenize_error_keeps_fields():
    err = TokenizeError(TokenizeErrorKind.UNKNOWN_TOKEN, 4)
    assert err.kind is TokenizeErrorKind.UNKNOWN_TOKEN
    assert err.index == 4


def test_tokenize_error_equality():
    a = TokenizeError(TokenizeErrorKind.UNKNOWN_TOKEN, 4)
    b = TokenizeError(TokenizeErrorKind.UNKNOWN_TOKEN, 4)
    assert a == b
    assert hash(a) == hash(b)
    assert a != TokenizeError(TokenizeErrorKind.UNKNOWN_TOKEN, 5)
    assert a != TokenizeError(TokenizeErrorKind.INVALID_CHAR_LITERAL, 4)


def test_tokenize_error_is_raisable():
    err = TokenizeError(TokenizeErrorKind.INVALID_FLOAT_LITERAL, 2)
    assert err.index == 2
    with pytest.raises(TokenizeError, match="Invalid float literal at index 2"):
        raise err


def test_parse_error_message():
    err = ParseError("expected ;")
    assert str(err) == "expected ;"
    assert err.message == "expected ;"
    with pytest.raises(ParseError, match="expected ;"):
        raise err