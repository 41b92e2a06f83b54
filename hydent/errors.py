"""Errors raised by the tokenizer and the parser."""

from __future__ import annotations

import enum


class TokenizeErrorKind(enum.Enum):
    """What went wrong while tokenizing; the value is the message prefix."""

    STRING_LITERAL_NOT_CLOSED = "String literal not closed"
    CHAR_LITERAL_NOT_CLOSED = "Char literal not closed"
    INVALID_CHAR_LITERAL = "Invalid char literal"
    INVALID_INTEGER_LITERAL = "Invalid integer literal"
    INVALID_FLOAT_LITERAL = "Invalid float literal"
    UNKNOWN_TOKEN = "Unknown token"
    BLOCK_COMMENT_NOT_CLOSED = "Block comment not closed"


class TokenizeError(Exception):
    """A tokenizing failure at a byte index of the source."""

    def __init__(self, kind: TokenizeErrorKind, index: int) -> None:
        super().__init__(kind, index)
        self.kind = kind
        self.index = index

    def __str__(self) -> str:
        return f"{self.kind.value} at index {self.index}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenizeError):
            return NotImplemented
        return (self.kind, self.index) == (other.kind, other.index)

    def __hash__(self) -> int:
        return hash((self.kind, self.index))


class ParseError(Exception):
    """The token stream does not match the grammar."""

    def __init__(self, message: str = "parse error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message