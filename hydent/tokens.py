"""Token types produced by the tokenizer."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from hydent.span import Span
from hydent.symbol import Symbol


class Keyword(enum.Enum):
    """Reserved words; the value is the spelling in source."""

    DOUBLE_FLOAT = "DoubleFloat"
    DOUBLE_INT = "DoubleInt"
    PROTOCOL = "protocol"
    CONTINUE = "continue"
    IMPORT = "import"
    STATIC = "static"
    STRUCT = "struct"
    EXTERN = "extern"
    PANICS = "panics"
    MODULE = "module"
    RETURN = "return"
    IGNORE = "ignore"
    TYPEOF = "typeof"
    CLASS = "class"
    ASYNC = "async"
    MATCH = "match"
    WHILE = "while"
    AWAIT = "await"
    BREAK = "break"
    CONST = "const"
    FINAL = "final"
    FLOAT = "Float"
    USIZE = "Usize"
    NEVER = "Never"
    FROM = "from"
    ENUM = "enum"
    TYPE = "type"
    ELSE = "else"
    LOOP = "loop"
    PIPE = "pipe"
    THIS = "this"
    IMPL = "impl"
    BOOL = "Bool"
    CHAR = "Char"
    VOID = "Void"
    FOR = "for"
    LET = "let"
    TRY = "try"
    MUT = "mut"
    PUB = "pub"
    INT = "Int"
    ANY = "Any"
    AS = "as"
    FN = "fn"
    IF = "if"
    IN = "in"

    def __str__(self) -> str:
        return self.value


class Operator(enum.Enum):
    """Operators; the value is the spelling in source."""

    RANGE_INCLUSIVE = "..="
    FAT_ARROW = "=>"
    PIPE = "|>"
    ARROW = "->"
    NAMESPACE_RESOLVER = "::"
    LOGICAL_OR = "||"
    LOGICAL_AND = "&&"
    EQUALITY = "=="
    INEQUALITY = "!="
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    POWER_OF = "**"
    RANGE_EXCLUSIVE = ".."
    ADD_ASSIGN = "+="
    SUBTRACT_ASSIGN = "-="
    MULTIPLY_ASSIGN = "*="
    DIVIDE_ASSIGN = "/="
    MULTIPLY = "*"
    ASSIGNMENT = "="
    COLON = ":"
    AT = "@"
    OR = "|"
    XOR = "^"
    AND = "&"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    ADD = "+"
    SUBTRACT = "-"
    DIVIDE = "/"
    REMAINDER = "%"
    NOT = "!"
    BITWISE_NOT = "~"
    MEMBER_ACCESS = "."
    WILDCARD = "_"

    def __str__(self) -> str:
        return self.value


class Delimiter(enum.Enum):
    """Delimiters; the value is the spelling in source."""

    SEMICOLON = ";"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COMMA = ","
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"

    def __str__(self) -> str:
        return self.value


class LiteralKind(enum.Enum):
    """The kinds of literal values."""

    INTEGER = "integer literal"
    FLOAT = "float literal"
    DOUBLE_INTEGER = "double integer literal"
    DOUBLE_FLOAT = "double float literal"
    STRING = "string literal"
    CHAR = "char literal"
    BOOL = "boolean literal"


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _plain_decimal(text: str) -> str:
    return format(Decimal(text).normalize(), "f")


def _format_float(value: float, single: bool) -> str:
    """Shortest round-tripping decimal form without exponent notation."""
    if math.isnan(value):
        return "NaN"
    if single:
        try:
            value = _to_single(value)
        except OverflowError:
            value = math.copysign(math.inf, value)
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if not single:
        return _plain_decimal(repr(value))
    text = repr(value)
    for precision in range(1, 10):
        candidate = f"{value:.{precision}g}"
        if _to_single(float(candidate)) == value:
            text = candidate
            break
    return _plain_decimal(text)


LiteralValue = Union[int, float, Span, str, bool]


@dataclass(frozen=True)
class Literal:
    """A literal value; strings are kept as the span of their contents."""

    kind: LiteralKind
    value: LiteralValue

    def __str__(self) -> str:
        prefix = self.kind.value
        if self.kind is LiteralKind.STRING:
            return prefix
        if self.kind is LiteralKind.CHAR:
            return f"{prefix} '{self.value}'"
        if self.kind is LiteralKind.BOOL:
            return f"{prefix} {'true' if self.value else 'false'}"
        if self.kind is LiteralKind.FLOAT:
            return f"{prefix} {_format_float(float(self.value), single=True)}"
        if self.kind is LiteralKind.DOUBLE_FLOAT:
            return f"{prefix} {_format_float(float(self.value), single=False)}"
        return f"{prefix} {self.value}"


class CommentKind(enum.Enum):
    """The kinds of comments."""

    DOC = "doc"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True)
class Comment:
    """A comment; doc comments keep the span of their text."""

    kind: CommentKind
    span: Optional[Span] = None


class TokenKind(enum.Enum):
    """The categories of tokens."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    OPERATOR = "operator"
    COMMENT = "comment"
    DELIMITER = "delimiter"
    END_OF_FILE = "end of file"


_PAYLOAD_TYPES: dict[TokenKind, type] = {
    TokenKind.KEYWORD: Keyword,
    TokenKind.IDENTIFIER: Symbol,
    TokenKind.LITERAL: Literal,
    TokenKind.OPERATOR: Operator,
    TokenKind.COMMENT: Comment,
    TokenKind.DELIMITER: Delimiter,
}

_FIRST_SET_KEYWORDS = frozenset(
    {
        Keyword.IMPORT,
        Keyword.STATIC,
        Keyword.CLASS,
        Keyword.ENUM,
        Keyword.STRUCT,
        Keyword.EXTERN,
        Keyword.PROTOCOL,
        Keyword.MODULE,
        Keyword.TYPE,
        Keyword.PUB,
        Keyword.ASYNC,
        Keyword.FN,
    }
)

TokenValue = Union[Keyword, Symbol, Literal, Operator, Comment, Delimiter, None]


@dataclass(frozen=True)
class Token:
    """One lexical token: its category and the payload for that category."""

    kind: TokenKind
    value: TokenValue = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError("end-of-file token carries no value")
        elif not isinstance(self.value, expected):
            raise TypeError(f"{self.kind.name} token needs a {expected.__name__} value")

    def is_first_set(self) -> bool:
        """Whether this token can start a top-level statement."""
        if self.kind is TokenKind.KEYWORD:
            return self.value in _FIRST_SET_KEYWORDS
        if self.kind is TokenKind.OPERATOR:
            return self.value is Operator.AT
        if self.kind is TokenKind.COMMENT:
            return self.value.kind is CommentKind.DOC
        return False

    def is_follow_set(self) -> bool:
        """Whether this token may follow a top-level statement."""
        if self.kind is TokenKind.END_OF_FILE:
            return True
        if self.kind is TokenKind.DELIMITER and self.value is Delimiter.RIGHT_BRACE:
            return True
        return self.is_first_set()

    def __str__(self) -> str:
        if self.kind is TokenKind.COMMENT:
            return "comment"
        if self.kind is TokenKind.END_OF_FILE:
            return "EOF"
        if self.kind is TokenKind.IDENTIFIER:
            return "identifier"
        if self.kind is TokenKind.KEYWORD:
            return f"{self.value} keyword"
        if self.kind is TokenKind.OPERATOR:
            return f"{self.value} operator"
        return str(self.value)