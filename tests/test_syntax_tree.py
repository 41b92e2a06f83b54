import dataclasses

import pytest

from hydent.arena import Arena
from hydent.span import Span
from hydent.symbol import Symbol
from hydent.syntax_tree import (
    Accesser,
    AdditiveExpr,
    AdditiveOperator,
    AssignmentOperator,
    BitwiseAndExpr,
    BitwiseOrExpr,
    BitwiseXorExpr,
    BoolLiteral,
    BreakStatement,
    CanPanics,
    CharLiteral,
    ContinueStatement,
    DocsComments,
    EqualityExpr,
    EqualityOperator,
    Expression,
    ExpressionBlock,
    FunctionDeclaration,
    GenericParamDefList,
    Generics,
    Identifier,
    IdentifierList,
    IsAsync,
    IsExtern,
    IsPublic,
    LogicalAndExpr,
    LogicalOrExpr,
    MultiplicativeExpr,
    MultiplicativeOperator,
    NamedType,
    NumKind,
    NumLiteral,
    ParamsWithTypes,
    PatternList,
    PowerExpr,
    PrefixExpr,
    PrefixOperator,
    PrimitiveType,
    RangeOp,
    RangePattern,
    RelationalExpr,
    RelationalOperator,
    ReturnStatement,
    ShiftExpr,
    ShiftOperator,
    StatementBlock,
    ThisParam,
    IsMut,
    WildPattern,
)
from hydent.tokens import Keyword, Operator


def _ident(n):
    return Identifier(Symbol(n))


def _expr(primary):
    power = PowerExpr([PrefixExpr([PrefixOperator.MINUS], primary)])
    mult = MultiplicativeExpr(power, MultiplicativeOperator.MULTIPLY, power)
    add = AdditiveExpr(mult, AdditiveOperator.PLUS, mult)
    shift = ShiftExpr(add, ShiftOperator.SHIFT_LEFT, add)
    rel = RelationalExpr(shift, RelationalOperator.LESS_THAN, shift)
    eq = EqualityExpr(rel, EqualityOperator.EQUAL, rel)
    return Expression(
        LogicalOrExpr([LogicalAndExpr([BitwiseOrExpr([BitwiseXorExpr([BitwiseAndExpr([eq])])])])])
    )


def test_lists_become_tuples():
    a, b = _ident(0), _ident(1)
    assert IdentifierList([a, b]).identifiers == (a, b)


def test_generators_become_tuples():
    patterns = PatternList(WildPattern() for _ in range(2))
    assert patterns.patterns == (WildPattern(), WildPattern())


def test_arena_run_becomes_tuple():
    arena = Arena()
    a, b = _ident(0), _ident(1)
    run = arena.alloc_iter([a, b])
    assert Accesser(run).identifiers == (a, b)


def test_nodes_are_frozen():
    ident = _ident(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ident.symbol = Symbol(4)


def test_equal_trees_hash_equal():
    lit = NumLiteral(NumKind.INTEGER, 1)
    first, second = _expr(lit), _expr(lit)
    assert first == second
    assert len({first, second}) == 1


def test_different_literals_give_different_trees():
    one = _expr(NumLiteral(NumKind.INTEGER, 1))
    two = _expr(NumLiteral(NumKind.INTEGER, 2))
    assert one == _expr(NumLiteral(NumKind.INTEGER, 1))
    assert len({one, two}) == 2


def test_statement_kinds_distinct():
    e = _expr(BoolLiteral.TRUE)
    assert ReturnStatement(e) == ReturnStatement(e)
    assert len({ReturnStatement(e), BreakStatement(e)}) == 2
    assert ContinueStatement() == ContinueStatement()


def test_integer_limits():
    low, high = -(2**31), 2**31 - 1
    assert NumLiteral(NumKind.INTEGER, high).value == high
    assert NumLiteral(NumKind.INTEGER, low).value == low
    with pytest.raises(ValueError):
        NumLiteral(NumKind.INTEGER, high + 1)
    with pytest.raises(ValueError):
        NumLiteral(NumKind.INTEGER, low - 1)


def test_double_integer_limits():
    assert NumLiteral(NumKind.DOUBLE_INTEGER, 2**31).value == 2**31
    with pytest.raises(ValueError):
        NumLiteral(NumKind.DOUBLE_INTEGER, 2**63)


@pytest.mark.parametrize("kind", list(NumKind))
def test_bool_is_not_a_number(kind):
    with pytest.raises(TypeError):
        NumLiteral(kind, True)


def test_integer_kind_rejects_float():
    with pytest.raises(TypeError):
        NumLiteral(NumKind.INTEGER, 1.5)


def test_float_kind_stores_float():
    lit = NumLiteral(NumKind.FLOAT, 3)
    assert lit.value == 3.0
    assert isinstance(lit.value, float)
    with pytest.raises(TypeError):
        NumLiteral(NumKind.DOUBLE_FLOAT, "3")


@pytest.mark.parametrize("text", ["", "ab"])
def test_char_literal_needs_one_character(text):
    with pytest.raises(ValueError):
        CharLiteral(text)


def test_range_pattern_same_kinds():
    pattern = RangePattern(CharLiteral("a"), RangeOp.IN_RANGE_OR, CharLiteral("z"))
    assert pattern.right == CharLiteral("z")
    with pytest.raises(TypeError):
        RangePattern(CharLiteral("a"), RangeOp.IN_RANGE, NumLiteral(NumKind.INTEGER, 5))


@pytest.mark.parametrize(
    "op",
    list(EqualityOperator)
    + list(RelationalOperator)
    + list(ShiftOperator)
    + list(AdditiveOperator)
    + list(MultiplicativeOperator)
    + list(PrefixOperator)
    + list(RangeOp),
)
def test_operator_spellings_match_tokens(op):
    assert Operator(op.value).value == op.value


@pytest.mark.parametrize("op", list(AssignmentOperator)[:5])
def test_assignment_spellings_match_tokens(op):
    assert Operator(op.value).value == op.value


@pytest.mark.parametrize("prim", list(PrimitiveType))
def test_primitive_types_are_keywords(prim):
    assert str(Keyword(prim.value)) == prim.value


def test_bool_literal_spelling():
    assert BoolLiteral("true") is BoolLiteral.TRUE
    assert BoolLiteral("false") is BoolLiteral.FALSE


def test_docs_comments_default_empty():
    docs = DocsComments()
    assert docs.comments == ()
    assert docs.annotations == ()
    spans = DocsComments([Span(0, 3)])
    assert spans.comments == (Span(0, 3),)


def test_function_declaration_holds_children():
    body = StatementBlock([ReturnStatement(_expr(NumLiteral(NumKind.INTEGER, 0)))])
    func = FunctionDeclaration(
        docs_comments=DocsComments(),
        is_extern=IsExtern.NOT_EXTERN,
        is_public=IsPublic.PUBLIC,
        is_async=IsAsync.NO,
        identifier=_ident(0),
        generics=Generics(GenericParamDefList([])),
        params_with_types=ParamsWithTypes(ThisParam(IsMut.NO)),
        return_type_literal=NamedType(Accesser([_ident(1)])),
        can_panics=CanPanics.CANNOT_PANICS,
        block_expression=body,
    )
    assert func.block_expression.statements[0] == body.statements[0]
    assert func.return_type_literal.generics is None
    assert func.params_with_types.param == ThisParam(IsMut.NO)


def test_expression_block_wraps_expression():
    e = _expr(CharLiteral("x"))
    block = ExpressionBlock(e)
    primary = block.expression.logical_or.operands[0].operands[0].operands[0]
    assert isinstance(primary, BitwiseXorExpr)
    assert primary.operands[0].operands[0].operator is EqualityOperator.EQUAL