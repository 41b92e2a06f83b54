"""Node types of the abstract syntax tree.

Every node is an immutable, hashable dataclass. Sequences of child nodes are
stored as tuples; lists, generators and arena runs given to a constructor are
converted on creation.
"""

from __future__ import annotations

import enum
import types
from dataclasses import dataclass, fields
from typing import Optional, Union

from hydent.arena import ArenaIter
from hydent.span import Span
from hydent.symbol import Symbol

_SEQUENCE_INPUTS = (list, ArenaIter, types.GeneratorType)


class _Node:
    """Base for tree nodes: freezes sequence fields into tuples."""

    __slots__ = ()

    def __post_init__(self) -> None:
        for node_field in fields(self):
            value = getattr(self, node_field.name)
            if isinstance(value, _SEQUENCE_INPUTS):
                object.__setattr__(self, node_field.name, tuple(value))


# --- flags and operators ---


class BoolLiteral(enum.Enum):
    """A boolean literal."""

    TRUE = "true"
    FALSE = "false"


class IsExtern(enum.Enum):
    """Whether a function is declared ``extern``."""

    EXTERN = enum.auto()
    NOT_EXTERN = enum.auto()


class EqualityOperator(enum.Enum):
    """``==`` and ``!=``."""

    EQUAL = "=="
    NOT_EQUAL = "!="


class RelationalOperator(enum.Enum):
    """Ordering comparisons."""

    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


class ShiftOperator(enum.Enum):
    """Bit shifts."""

    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"


class CanPanics(enum.Enum):
    """Whether a function is marked ``panics``."""

    CAN_PANICS = enum.auto()
    CANNOT_PANICS = enum.auto()


class AdditiveOperator(enum.Enum):
    """``+`` and ``-``."""

    PLUS = "+"
    MINUS = "-"


class MultiplicativeOperator(enum.Enum):
    """``*``, ``/`` and ``%``."""

    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"


class PrefixOperator(enum.Enum):
    """Unary prefix operators."""

    BIT_NOT = "~"
    NOT = "!"
    MINUS = "-"


class IsTry(enum.Enum):
    """Whether a call is prefixed with ``try``."""

    YES = enum.auto()
    NO = enum.auto()


class IsIgnore(enum.Enum):
    """Whether an expression statement is prefixed with ``ignore``."""

    YES = enum.auto()
    NO = enum.auto()


class IsAsync(enum.Enum):
    """Whether a function is declared ``async``."""

    YES = enum.auto()
    NO = enum.auto()


class FieldDeclarationKeyword(enum.Enum):
    """The keyword that introduces a field."""

    FINAL = "final"
    MUT = "mut"


class IsMut(enum.Enum):
    """Whether a parameter is declared ``mut``."""

    YES = enum.auto()
    NO = enum.auto()


class IsPublic(enum.Enum):
    """Visibility of a declaration."""

    PUBLIC = enum.auto()
    PRIVATE = enum.auto()


class AssignmentOperator(enum.Enum):
    """Plain and compound assignment operators."""

    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUBTRACT_ASSIGN = "-="
    MULTIPLY_ASSIGN = "*="
    DIVIDE_ASSIGN = "/="
    REMAINDER_ASSIGN = "%="
    POWER_ASSIGN = "**="


class VariableDeclarationKeyword(enum.Enum):
    """The keyword that introduces a local variable."""

    LET = "let"
    CONST = "const"


class RangeOp(enum.Enum):
    """Exclusive and inclusive range operators."""

    IN_RANGE = ".."
    IN_RANGE_OR = "..="


class PrimitiveType(enum.Enum):
    """Built-in types; the value is the spelling in source."""

    BOOL = "Bool"
    INT = "Int"
    DOUBLE_INT = "DoubleInt"
    FLOAT = "Float"
    DOUBLE_FLOAT = "DoubleFloat"
    CHAR = "Char"
    USIZE = "Usize"
    ANY = "Any"
    NEVER = "Never"
    VOID = "Void"


class NumKind(enum.Enum):
    """The width and kind of a numeric literal."""

    INTEGER = enum.auto()
    FLOAT = enum.auto()
    DOUBLE_INTEGER = enum.auto()
    DOUBLE_FLOAT = enum.auto()


_INTEGER_LIMITS = {
    NumKind.INTEGER: (-(2**31), 2**31 - 1),
    NumKind.DOUBLE_INTEGER: (-(2**63), 2**63 - 1),
}


# --- leaves ---


@dataclass(frozen=True)
class Identifier(_Node):
    """A name, held as its interned symbol."""

    symbol: Symbol


@dataclass(frozen=True)
class StringLiteral(_Node):
    """A string literal, held as the span of its contents."""

    span: Span


@dataclass(frozen=True)
class CharLiteral(_Node):
    """A single-character literal."""

    value: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise ValueError("a char literal holds exactly one character")


@dataclass(frozen=True)
class NumLiteral(_Node):
    """A numeric literal of a given kind; integers are range-checked."""

    kind: NumKind
    value: Union[int, float]

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.value, bool):
            raise TypeError("a numeric literal cannot hold a bool")
        limits = _INTEGER_LIMITS.get(self.kind)
        if limits is not None:
            if not isinstance(self.value, int):
                raise TypeError(f"{self.kind.name} literal needs an int value")
            low, high = limits
            if not low <= self.value <= high:
                raise ValueError(f"{self.value} out of range for {self.kind.name} literal")
        else:
            if not isinstance(self.value, (int, float)):
                raise TypeError(f"{self.kind.name} literal needs a numeric value")
            object.__setattr__(self, "value", float(self.value))


# --- top level ---


@dataclass(frozen=True)
class DocsComments(_Node):
    """Doc comments and annotations preceding a declaration."""

    comments: tuple[Span, ...] = ()
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True)
class Ast(_Node):
    """The root of a parsed source file."""

    top_level: TopLevel


@dataclass(frozen=True)
class TopLevel(_Node):
    """A sequence of top-level statements."""

    children: tuple[TopLevelStatement, ...] = ()


@dataclass(frozen=True)
class ImportSpecific(_Node):
    """``{ a, b }`` in an import."""

    identifiers: IdentifierList


@dataclass(frozen=True)
class ImportAllAs(_Node):
    """``* as name`` in an import."""

    identifier: Identifier


@dataclass(frozen=True)
class ImportDeclaration(_Node):
    """An import with the span of its path string."""

    clause: Union[ImportSpecific, ImportAllAs]
    path: Span


@dataclass(frozen=True)
class StaticVariableDeclaration(_Node):
    """A ``static`` variable."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    expression: Expression


@dataclass(frozen=True)
class ClassDeclaration(_Node):
    """A ``class`` with its members."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    generics: Generics
    implements_protocol: ImplementsProtocol
    function_declarations: tuple[FunctionDeclaration, ...]
    field_declarations: tuple[FieldDeclaration, ...]
    type_alias_declarations: tuple[TypeAliasDeclaration, ...]


@dataclass(frozen=True)
class EnumDeclaration(_Node):
    """An ``enum`` with its members."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    generics: Generics
    implements_protocol: ImplementsProtocol
    enum_members: tuple[EnumMember, ...]


@dataclass(frozen=True)
class EnumVariant(_Node):
    """An enum variant, optionally carrying a list of types."""

    types: Optional[TypeLiteralList] = None


@dataclass(frozen=True)
class StructDeclaration(_Node):
    """A ``struct`` declaration."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    struct_body: StructBody


@dataclass(frozen=True)
class StructBlockBody(_Node):
    """A struct body of named fields."""

    fields: tuple[FieldDeclaration, ...] = ()


@dataclass(frozen=True)
class StructTupleBody(_Node):
    """A struct body of positional types."""

    types: TypeLiteralList


@dataclass(frozen=True)
class FunctionDeclaration(_Node):
    """A function, with an optional body."""

    docs_comments: DocsComments
    is_extern: IsExtern
    is_public: IsPublic
    is_async: IsAsync
    identifier: Identifier
    generics: Generics
    params_with_types: ParamsWithTypes
    return_type_literal: Optional[TypeLiteral]
    can_panics: CanPanics
    block_expression: Optional[BlockExpression]


@dataclass(frozen=True)
class ProtocolDeclaration(_Node):
    """A ``protocol`` with its members."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    generics: Generics
    implements_protocol: ImplementsProtocol
    protocol_members: tuple[ProtocolMember, ...]


@dataclass(frozen=True)
class ModuleDeclaration(_Node):
    """A nested ``module``."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    top_level: TopLevel


@dataclass(frozen=True)
class Annotation(_Node):
    """``@name`` followed by literal arguments."""

    identifier: Identifier
    literals: tuple[Literal, ...] = ()


@dataclass(frozen=True)
class TypeAliasDeclaration(_Node):
    """A ``type`` alias."""

    docs_comments: DocsComments
    is_public: IsPublic
    identifier: Identifier
    generics: Generics
    type_literal: TypeLiteral


# --- control flow ---


@dataclass(frozen=True)
class IfExpression(_Node):
    """``if`` condition and block."""

    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class ElseIfClause(_Node):
    """``else if`` condition and block."""

    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class ElseClause(_Node):
    """``else`` block."""

    block_expression: BlockExpression


@dataclass(frozen=True)
class MatchExpression(_Node):
    """``match`` scrutinee and arms."""

    expression: Expression
    match_arms: tuple[MatchArm, ...] = ()


@dataclass(frozen=True)
class MatchArm(_Node):
    """One ``pattern (if guard)? => expression`` arm."""

    pattern: Pattern
    guard_if: Optional[IfExpression]
    expression: Expression


@dataclass(frozen=True)
class LoopExpression(_Node):
    """``loop``, optionally with a repeat count."""

    loop_times: Optional[Expression]
    block_expression: BlockExpression


@dataclass(frozen=True)
class WhileExpression(_Node):
    """``while`` condition and block."""

    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class ForStatement(_Node):
    """``for pattern in expression block``."""

    pattern: Pattern
    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class ForExpression(_Node):
    """``for expression { |> arms }``."""

    expression: Expression
    pipeline_arms: tuple[PipelineArm, ...] = ()


@dataclass(frozen=True)
class PipelineArm(_Node):
    """``|> pattern => expression``."""

    pattern: Pattern
    expression: Expression


@dataclass(frozen=True)
class IfLetExpression(_Node):
    """``if let pattern = expression block``."""

    pattern: Pattern
    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class WhileLetExpression(_Node):
    """``while let pattern = expression block``."""

    pattern: Pattern
    expression: Expression
    block_expression: BlockExpression


@dataclass(frozen=True)
class PipeExpression(_Node):
    """``pipe expression { arms }``."""

    expression: Expression
    pipe_arms: tuple[PipeArm, ...] = ()


@dataclass(frozen=True)
class PipeArm(_Node):
    """``|> pattern if guard => expression``."""

    pattern: Pattern
    guard_if: Expression
    expression: Expression


@dataclass(frozen=True)
class Closer(_Node):
    """A closure: ``(params) -> expression``."""

    closer_params: Optional[CloserParams]
    block_expression: Expression


@dataclass(frozen=True)
class CloserParams(_Node):
    """The parameters of a closure."""

    items: tuple[CloserParamItem, ...] = ()


# --- expressions ---


@dataclass(frozen=True)
class Accesser(_Node):
    """A path ``a::b::c``."""

    identifiers: tuple[Identifier, ...] = ()


@dataclass(frozen=True)
class Params(_Node):
    """Call arguments."""

    expressions: Optional[ExpressionList] = None


@dataclass(frozen=True)
class Expression(_Node):
    """An expression."""

    logical_or: LogicalOrExpr


@dataclass(frozen=True)
class LogicalOrExpr(_Node):
    """Operands joined by ``||``."""

    operands: tuple[LogicalAndExpr, ...] = ()


@dataclass(frozen=True)
class LogicalAndExpr(_Node):
    """Operands joined by ``&&``."""

    operands: tuple[BitwiseOrExpr, ...] = ()


@dataclass(frozen=True)
class BitwiseOrExpr(_Node):
    """Operands joined by ``|``."""

    operands: tuple[BitwiseXorExpr, ...] = ()


@dataclass(frozen=True)
class BitwiseXorExpr(_Node):
    """Operands joined by ``^``."""

    operands: tuple[BitwiseAndExpr, ...] = ()


@dataclass(frozen=True)
class BitwiseAndExpr(_Node):
    """Operands joined by ``&``."""

    operands: tuple[EqualityExpr, ...] = ()


@dataclass(frozen=True)
class EqualityExpr(_Node):
    """An equality comparison."""

    left: RelationalExpr
    operator: EqualityOperator
    right: RelationalExpr


@dataclass(frozen=True)
class RelationalExpr(_Node):
    """An ordering comparison."""

    left: ShiftExpr
    operator: RelationalOperator
    right: ShiftExpr


@dataclass(frozen=True)
class ShiftExpr(_Node):
    """A bit shift."""

    left: AdditiveExpr
    operator: ShiftOperator
    right: AdditiveExpr


@dataclass(frozen=True)
class AdditiveExpr(_Node):
    """An addition or subtraction."""

    left: MultiplicativeExpr
    operator: AdditiveOperator
    right: MultiplicativeExpr


@dataclass(frozen=True)
class MultiplicativeExpr(_Node):
    """A multiplication, division or remainder."""

    left: PowerExpr
    operator: MultiplicativeOperator
    right: PowerExpr


@dataclass(frozen=True)
class PowerExpr(_Node):
    """Operands joined by ``**``."""

    operands: tuple[PrefixExpr, ...] = ()


@dataclass(frozen=True)
class PrefixExpr(_Node):
    """A primary expression with its prefix operators."""

    operators: tuple[PrefixOperator, ...]
    expression: PrimaryExpr


@dataclass(frozen=True)
class AwaitExpression(_Node):
    """``await expression``."""

    expression: Expression


@dataclass(frozen=True)
class FunctionCall(_Node):
    """``try? path(args)``."""

    is_try: IsTry
    accesser: Accesser
    params: Params


@dataclass(frozen=True)
class MethodCall(_Node):
    """``try? path.name(args)``."""

    is_try: IsTry
    accesser: Accesser
    identifier: Identifier
    params: Params


@dataclass(frozen=True)
class FieldAccess(_Node):
    """``path.name``."""

    accesser: Accesser
    identifier: Identifier


@dataclass(frozen=True)
class TupleOrGroupedExpression(_Node):
    """``( expressions )``."""

    expressions: Optional[ExpressionList] = None


@dataclass(frozen=True)
class StructLiteral(_Node):
    """``Path { fields }``."""

    accesser: Accesser
    struct_literal_fields: Optional[StructLiteralFields] = None


@dataclass(frozen=True)
class StructLiteralFields(_Node):
    """The field initialisers of a struct literal."""

    fields: tuple[StructFieldInit, ...] = ()


@dataclass(frozen=True)
class StructFieldInit(_Node):
    """``name: expression``, or just ``name``."""

    field_name: Identifier
    expression: Optional[Expression] = None


@dataclass(frozen=True)
class ArrayLiteral(_Node):
    """``[ expressions ]``."""

    expressions: Optional[ExpressionList] = None


@dataclass(frozen=True)
class IndexAccess(_Node):
    """``container[index]``."""

    container: Expression
    index: Expression


@dataclass(frozen=True)
class CastExpression(_Node):
    """``target as Type``."""

    target: Expression
    type_literal: TypeLiteral


# --- statements ---


@dataclass(frozen=True)
class ExpressionStatement(_Node):
    """An expression followed by ``;``."""

    is_ignore: IsIgnore
    expression: Expression


@dataclass(frozen=True)
class VariableDeclaration(_Node):
    """``let``/``const`` declaration."""

    variable_declaration_keyword: VariableDeclarationKeyword
    pattern: Pattern
    type_literal: Optional[TypeLiteral]
    variable_declaration_assignment: VariableDeclarationAssignment


@dataclass(frozen=True)
class VariableDeclarationAssignment(_Node):
    """The initialiser of a variable declaration."""

    assignment_operator: AssignmentOperator
    expression: Expression


@dataclass(frozen=True)
class AssignmentStatement(_Node):
    """``path op= expression;``."""

    accesser: Accesser
    assignment_operator: AssignmentOperator
    expression: Expression


@dataclass(frozen=True)
class ReturnStatement(_Node):
    """``return expression;``."""

    expression: Expression


@dataclass(frozen=True)
class BreakStatement(_Node):
    """``break expression;``."""

    expression: Expression


@dataclass(frozen=True)
class ContinueStatement(_Node):
    """``continue;``."""


@dataclass(frozen=True)
class FieldDeclaration(_Node):
    """``final``/``mut`` field with its type."""

    field_declaration_keyword: FieldDeclarationKeyword
    identifier: Identifier
    type_literal: TypeLiteral


@dataclass(frozen=True)
class TypedParam(_Node):
    """A named, typed parameter with an optional default."""

    is_mut: IsMut
    identifier: Identifier
    type_literal: TypeLiteral
    default_value: Optional[Expression] = None


@dataclass(frozen=True)
class ThisParam(_Node):
    """The ``this`` parameter."""

    is_mut: IsMut


@dataclass(frozen=True)
class ParamsWithTypes(_Node):
    """The parameter of a function declaration, if any."""

    param: Optional[ParamWithType] = None


@dataclass(frozen=True)
class ParamWithTypesList(_Node):
    """A list of parameter groups."""

    items: tuple[ParamsWithTypes, ...] = ()


@dataclass(frozen=True)
class StatementBlock(_Node):
    """A block made of statements."""

    statements: tuple[Statement, ...] = ()


@dataclass(frozen=True)
class ExpressionBlock(_Node):
    """A block made of a single expression."""

    expression: Expression


# --- types ---


@dataclass(frozen=True)
class NamedType(_Node):
    """A type named by a path, optionally with generics."""

    accesser: Accesser
    generics: Optional[Generics] = None


@dataclass(frozen=True)
class ImplType(_Node):
    """``impl Type``."""

    type_literal: TypeLiteral


@dataclass(frozen=True)
class TupleType(_Node):
    """``( types )``."""

    types: Optional[TypeLiteralList] = None


@dataclass(frozen=True)
class TypeOf(_Node):
    """``typeof expression``."""

    expression: Expression


@dataclass(frozen=True)
class GenericTypeArgs(_Node):
    """``< types >``."""

    types: TypeLiteralList


# --- patterns ---


@dataclass(frozen=True)
class WildPattern(_Node):
    """The ``_`` pattern."""


@dataclass(frozen=True)
class TupleStructPattern(_Node):
    """``Path(patterns)``."""

    accesser: Accesser
    pattern_list: Optional[PatternList] = None


@dataclass(frozen=True)
class TuplePattern(_Node):
    """``(patterns)``."""

    pattern_list: Optional[PatternList] = None


@dataclass(frozen=True)
class StructPattern(_Node):
    """``Path { fields }``."""

    accesser: Accesser
    struct_pattern_fields: Optional[StructPatternFields] = None


@dataclass(frozen=True)
class StructPatternFields(_Node):
    """The field patterns of a struct pattern."""

    fields: tuple[StructPatternField, ...] = ()


@dataclass(frozen=True)
class StructPatternField(_Node):
    """``name: pattern``, or just ``name``."""

    identifier: Identifier
    pattern: Optional[Pattern] = None


@dataclass(frozen=True)
class RangePattern(_Node):
    """A numeric or character range; both ends must be of the same kind."""

    left: Union[NumLiteral, CharLiteral]
    operator: RangeOp
    right: Union[NumLiteral, CharLiteral]

    def __post_init__(self) -> None:
        super().__post_init__()
        both_num = isinstance(self.left, NumLiteral) and isinstance(self.right, NumLiteral)
        both_char = isinstance(self.left, CharLiteral) and isinstance(self.right, CharLiteral)
        if not (both_num or both_char):
            raise TypeError("range ends must both be numeric or both be char literals")


@dataclass(frozen=True)
class BindingPattern(_Node):
    """``name @ pattern``."""

    identifier: Identifier
    pattern: Pattern


# --- generics and lists ---


@dataclass(frozen=True)
class Generics(_Node):
    """``< params >`` on a declaration."""

    params: GenericParamDefList


@dataclass(frozen=True)
class GenericParamDefList(_Node):
    """Generic parameter definitions."""

    params: tuple[GenericParamDef, ...] = ()


@dataclass(frozen=True)
class GenericParamDef(_Node):
    """``T`` or ``T: Bound``."""

    identifier: Identifier
    generic_bound: Optional[GenericBound] = None


@dataclass(frozen=True)
class GenericBound(_Node):
    """Types joined by ``&``."""

    types: tuple[TypeLiteral, ...] = ()


@dataclass(frozen=True)
class ImplementsProtocol(_Node):
    """``: Protocols`` on a declaration, if present."""

    protocols: Optional[AccesserList] = None


@dataclass(frozen=True)
class IdentifierList(_Node):
    """Comma-separated identifiers."""

    identifiers: tuple[Identifier, ...] = ()


@dataclass(frozen=True)
class TypeLiteralList(_Node):
    """Comma-separated types."""

    types: tuple[TypeLiteral, ...] = ()


@dataclass(frozen=True)
class ExpressionList(_Node):
    """Comma-separated expressions."""

    expressions: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class PatternList(_Node):
    """Comma-separated patterns."""

    patterns: tuple[Pattern, ...] = ()


@dataclass(frozen=True)
class AccesserList(_Node):
    """Comma-separated paths."""

    accessers: tuple[Accesser, ...] = ()


# --- alternatives ---

Literal = Union[StringLiteral, CharLiteral, NumLiteral, BoolLiteral]

TopLevelStatement = Union[
    ImportDeclaration,
    StaticVariableDeclaration,
    ClassDeclaration,
    EnumDeclaration,
    StructDeclaration,
    FunctionDeclaration,
    ProtocolDeclaration,
    ModuleDeclaration,
    Annotation,
    TypeAliasDeclaration,
]

EnumMember = Union[EnumVariant, FunctionDeclaration]
StructBody = Union[StructBlockBody, StructTupleBody]
ProtocolMember = Union[FunctionDeclaration, TypeAliasDeclaration]
ParamWithType = Union[TypedParam, ThisParam]
CloserParamItem = Union[TypedParam, ThisParam, Identifier]
BlockExpression = Union[StatementBlock, ExpressionBlock]

PrimaryExpr = Union[
    StatementBlock,
    ExpressionBlock,
    IfExpression,
    MatchExpression,
    LoopExpression,
    WhileExpression,
    ForExpression,
    PipeExpression,
    Accesser,
    StringLiteral,
    CharLiteral,
    NumLiteral,
    BoolLiteral,
    FunctionCall,
    MethodCall,
    FieldAccess,
    AwaitExpression,
    TupleOrGroupedExpression,
    StructLiteral,
    Closer,
    IfLetExpression,
    WhileLetExpression,
    ArrayLiteral,
    IndexAccess,
    CastExpression,
]

Statement = Union[
    IfExpression,
    MatchExpression,
    LoopExpression,
    WhileExpression,
    ForStatement,
    ExpressionStatement,
    VariableDeclaration,
    ReturnStatement,
    BreakStatement,
    ContinueStatement,
    AssignmentStatement,
]

TypeLiteral = Union[NamedType, ImplType, TupleType, TypeOf, PrimitiveType]

Pattern = Union[
    Identifier,
    WildPattern,
    TupleStructPattern,
    TuplePattern,
    StructPattern,
    Accesser,
    StringLiteral,
    CharLiteral,
    NumLiteral,
    BoolLiteral,
    RangePattern,
    BindingPattern,
]