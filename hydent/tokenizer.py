"""Turning source text into a list of tokens."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Iterator
from typing import Optional

from hydent.errors import TokenizeError, TokenizeErrorKind
from hydent.source_holder import SourceHolder
from hydent.span import Span
from hydent.symbol import SymbolFactory
from hydent.tokens import (
    Comment,
    CommentKind,
    Delimiter,
    Keyword,
    Literal,
    LiteralKind,
    Operator,
    Token,
    TokenKind,
)

_WHITESPACE = frozenset(b" \t\r\n")
_IDENT_START = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_CONTINUE = _IDENT_START | frozenset(b"0123456789")
_DIGITS = frozenset(b"0123456789")
_HEX_DIGITS = _DIGITS | frozenset(b"abcdefABCDEF")
_BIN_DIGITS = frozenset(b"01")

_KEYWORDS: dict[bytes, Keyword] = {kw.value.encode("ascii"): kw for kw in Keyword}

_MULTI_CHAR_OPERATORS: tuple[tuple[bytes, Operator], ...] = (
    (b"=>", Operator.FAT_ARROW),
    (b"|>", Operator.PIPE),
    (b"->", Operator.ARROW),
    (b"::", Operator.NAMESPACE_RESOLVER),
    (b"||", Operator.LOGICAL_OR),
    (b"&&", Operator.LOGICAL_AND),
    (b"==", Operator.EQUALITY),
    (b"!=", Operator.INEQUALITY),
    (b"<=", Operator.LESS_THAN_OR_EQUAL),
    (b">=", Operator.GREATER_THAN_OR_EQUAL),
    (b"<<", Operator.SHIFT_LEFT),
    (b">>", Operator.SHIFT_RIGHT),
    (b"**", Operator.POWER_OF),
    (b"+=", Operator.ADD_ASSIGN),
    (b"-=", Operator.SUBTRACT_ASSIGN),
    (b"*=", Operator.MULTIPLY_ASSIGN),
)

_SINGLE_CHAR_TOKENS: dict[int, Token] = {
    ord(";"): Token(TokenKind.DELIMITER, Delimiter.SEMICOLON),
    ord("{"): Token(TokenKind.DELIMITER, Delimiter.LEFT_BRACE),
    ord("}"): Token(TokenKind.DELIMITER, Delimiter.RIGHT_BRACE),
    ord("("): Token(TokenKind.DELIMITER, Delimiter.LEFT_PAREN),
    ord(")"): Token(TokenKind.DELIMITER, Delimiter.RIGHT_PAREN),
    ord("["): Token(TokenKind.DELIMITER, Delimiter.LEFT_BRACKET),
    ord("]"): Token(TokenKind.DELIMITER, Delimiter.RIGHT_BRACKET),
    ord(","): Token(TokenKind.DELIMITER, Delimiter.COMMA),
    ord(":"): Token(TokenKind.OPERATOR, Operator.COLON),
    ord("="): Token(TokenKind.OPERATOR, Operator.ASSIGNMENT),
    ord("*"): Token(TokenKind.OPERATOR, Operator.MULTIPLY),
    ord("+"): Token(TokenKind.OPERATOR, Operator.ADD),
    ord("-"): Token(TokenKind.OPERATOR, Operator.SUBTRACT),
    ord("/"): Token(TokenKind.OPERATOR, Operator.DIVIDE),
    ord("%"): Token(TokenKind.OPERATOR, Operator.REMAINDER),
    ord("<"): Token(TokenKind.OPERATOR, Operator.LESS_THAN),
    ord(">"): Token(TokenKind.OPERATOR, Operator.GREATER_THAN),
    ord("&"): Token(TokenKind.OPERATOR, Operator.AND),
    ord("|"): Token(TokenKind.OPERATOR, Operator.OR),
    ord("^"): Token(TokenKind.OPERATOR, Operator.XOR),
    ord("!"): Token(TokenKind.OPERATOR, Operator.NOT),
    ord("~"): Token(TokenKind.OPERATOR, Operator.BITWISE_NOT),
    ord("@"): Token(TokenKind.OPERATOR, Operator.AT),
    ord("_"): Token(TokenKind.OPERATOR, Operator.WILDCARD),
}

_CHAR_ESCAPES: dict[int, str] = {
    ord("n"): "\n",
    ord("r"): "\r",
    ord("t"): "\t",
    ord("\\"): "\\",
    ord("'"): "'",
}

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_EOF = Token(TokenKind.END_OF_FILE)


def _operator(op: Operator) -> Token:
    return Token(TokenKind.OPERATOR, op)


def _parse_i32(text: str) -> Optional[int]:
    if not _INTEGER_TEXT.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _parse_f32(text: str) -> Optional[float]:
    if not _FLOAT_TEXT.fullmatch(text):
        return None
    value = float(text)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Tokenizer:
    """Splits source text into tokens, interning identifiers as it goes."""

    def __init__(self, source: str, symbol_factory: SymbolFactory) -> None:
        self._input = source.encode("utf-8")
        self._symbol_factory = symbol_factory
        self._pos = 0

    def tokenize(self) -> list[Token]:
        """Return every token in the source, ending with an end-of-file token.

        Raises ``TokenizeError`` at the first malformed input.
        """
        self._pos = 0
        tokens = list(self._scan())
        tokens.append(_EOF)
        return tokens

    # --- low-level helpers ---

    def _peek(self, offset: int = 0) -> Optional[int]:
        index = self._pos + offset
        return self._input[index] if index < len(self._input) else None

    def _consume(self, target: bytes) -> bool:
        if self._input.startswith(target, self._pos):
            self._pos += len(target)
            return True
        return False

    def _error(self, kind: TokenizeErrorKind, index: int) -> TokenizeError:
        return TokenizeError(kind, index)

    # --- scanning ---

    def _scan(self) -> Iterator[Token]:
        while (byte := self._peek()) is not None:
            if byte in _WHITESPACE:
                self._pos += 1
            elif byte == ord("/"):
                yield self._read_slash()
            elif byte == ord('"'):
                yield self._read_string_literal()
            elif byte == ord("'"):
                yield self._read_char_literal()
            elif byte in _IDENT_START:
                yield self._read_identifier_or_keyword()
            elif byte in _DIGITS:
                yield self._read_number_literal()
            elif byte == ord("."):
                yield self._read_dot()
            else:
                token = self._read_operator_or_delimiter()
                if token is None:
                    raise self._error(TokenizeErrorKind.UNKNOWN_TOKEN, self._pos)
                yield token

    def _read_slash(self) -> Token:
        following = self._peek(1)
        if following == ord("/"):
            return self._read_line_comment()
        if following == ord("*"):
            return self._read_block_comment()
        if following == ord("="):
            self._pos += 2
            return _operator(Operator.DIVIDE_ASSIGN)
        self._pos += 1
        return _operator(Operator.DIVIDE)

    def _read_dot(self) -> Token:
        if self._consume(b"..="):
            return _operator(Operator.RANGE_INCLUSIVE)
        if self._consume(b".."):
            return _operator(Operator.RANGE_EXCLUSIVE)
        self._pos += 1
        return _operator(Operator.MEMBER_ACCESS)

    def _skip_while(self, allowed: frozenset[int]) -> None:
        while (byte := self._peek()) is not None and byte in allowed:
            self._pos += 1

    def _read_identifier_or_keyword(self) -> Token:
        start = self._pos
        self._skip_while(_IDENT_CONTINUE)
        keyword = _KEYWORDS.get(self._input[start : self._pos])
        if keyword is not None:
            return Token(TokenKind.KEYWORD, keyword)
        symbol = self._symbol_factory.from_range(start, self._pos)
        return Token(TokenKind.IDENTIFIER, symbol)

    def _read_number_literal(self) -> Token:
        start = self._pos
        is_float = False

        if self._consume(b"0x"):
            self._skip_while(_HEX_DIGITS)
        elif self._consume(b"0b"):
            self._skip_while(_BIN_DIGITS)
        else:
            while (byte := self._peek()) is not None:
                if byte in _DIGITS:
                    self._pos += 1
                elif byte == ord("."):
                    if self._peek(1) == ord("."):
                        break
                    is_float = True
                    self._pos += 1
                elif byte in (ord("e"), ord("E")):
                    is_float = True
                    self._pos += 1
                    if self._peek() in (ord("+"), ord("-")):
                        self._pos += 1
                else:
                    break

        text = self._input[start : self._pos].decode("ascii")
        if is_float:
            value = _parse_f32(text)
            if value is None:
                raise self._error(TokenizeErrorKind.INVALID_FLOAT_LITERAL, start)
            return Token(TokenKind.LITERAL, Literal(LiteralKind.FLOAT, value))
        integer = _parse_i32(text)
        if integer is None:
            raise self._error(TokenizeErrorKind.INVALID_INTEGER_LITERAL, start)
        return Token(TokenKind.LITERAL, Literal(LiteralKind.INTEGER, integer))

    def _read_string_literal(self) -> Token:
        self._pos += 1
        start = self._pos
        while (byte := self._peek()) is not None:
            if byte == ord('"'):
                span = Span(start, self._pos)
                self._pos += 1
                return Token(TokenKind.LITERAL, Literal(LiteralKind.STRING, span))
            self._pos += 2 if byte == ord("\\") else 1
        raise self._error(TokenizeErrorKind.STRING_LITERAL_NOT_CLOSED, start)

    def _read_char_literal(self) -> Token:
        self._pos += 1
        start = self._pos
        byte = self._peek()
        if byte is None:
            raise self._error(TokenizeErrorKind.CHAR_LITERAL_NOT_CLOSED, start)
        self._pos += 1
        if byte == ord("\\"):
            escape = self._peek()
            if escape is None:
                raise self._error(TokenizeErrorKind.CHAR_LITERAL_NOT_CLOSED, start)
            self._pos += 1
            if escape not in _CHAR_ESCAPES:
                raise self._error(TokenizeErrorKind.INVALID_CHAR_LITERAL, start)
            char = _CHAR_ESCAPES[escape]
        else:
            char = chr(byte)

        if self._peek() != ord("'"):
            raise self._error(TokenizeErrorKind.CHAR_LITERAL_NOT_CLOSED, start)
        self._pos += 1
        return Token(TokenKind.LITERAL, Literal(LiteralKind.CHAR, char))

    def _read_line_comment(self) -> Token:
        self._pos += 2
        is_doc = self._peek() == ord("/")
        if is_doc:
            self._pos += 1
        start = self._pos
        while (byte := self._peek()) is not None and byte != ord("\n"):
            self._pos += 1
        if is_doc:
            return Token(TokenKind.COMMENT, Comment(CommentKind.DOC, Span(start, self._pos)))
        return Token(TokenKind.COMMENT, Comment(CommentKind.LINE))

    def _read_block_comment(self) -> Token:
        start = self._pos
        self._pos += 2
        depth = 1
        while (byte := self._peek()) is not None:
            following = self._peek(1)
            if byte == ord("/") and following == ord("*"):
                depth += 1
                self._pos += 2
            elif byte == ord("*") and following == ord("/"):
                depth -= 1
                self._pos += 2
                if depth == 0:
                    return Token(TokenKind.COMMENT, Comment(CommentKind.BLOCK))
            else:
                self._pos += 1
        raise self._error(TokenizeErrorKind.BLOCK_COMMENT_NOT_CLOSED, start)

    def _read_operator_or_delimiter(self) -> Optional[Token]:
        byte = self._peek()
        if byte is None:
            return None
        for spelling, op in _MULTI_CHAR_OPERATORS:
            if self._consume(spelling):
                return _operator(op)
        self._pos += 1
        return _SINGLE_CHAR_TOKENS.get(byte)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` with a fresh symbol table."""
    factory = SymbolFactory(SourceHolder(source))
    return Tokenizer(source, factory).tokenize()