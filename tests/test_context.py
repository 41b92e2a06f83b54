from __future__ import annotations

import pytest

from hydent.arena import Arena
from hydent.context import (
    CompilerBackendContext,
    CompilerFrontendContext,
    CompilerMiddleendContext,
    Mergeable,
    integrate_all_contexts,
)
from hydent.source_holder import SourceHolder


class _Tree(Mergeable):
    def __init__(self, label: str) -> None:
        self.label = label

    def merge(self, other: "_Tree") -> "_Tree":
        return _Tree(f"({self.label}+{other.label})")


def test_integrate_empty_raises():
    with pytest.raises(ValueError):
        integrate_all_contexts([])


def test_integrate_single_returns_same_object():
    only = _Tree("a")
    assert integrate_all_contexts([only]) is only


def test_integrate_three_splits_left_half_first():
    result = integrate_all_contexts([_Tree("a"), _Tree("b"), _Tree("c")])
    assert result.label == "(a+(b+c))"


def test_integrate_four_is_balanced():
    result = integrate_all_contexts([_Tree(x) for x in "abcd"])
    assert result.label == "((a+b)+(c+d))"


def test_integrate_preserves_order_of_all_parts():
    labels = "abcdefg"
    result = integrate_all_contexts([_Tree(x) for x in labels])
    stripped = result.label.replace("(", "").replace(")", "").replace("+", "")
    assert stripped == labels


def test_integrate_accepts_tuple():
    result = integrate_all_contexts((_Tree("x"), _Tree("y")))
    assert result.label == "(x+y)"


def test_mergeable_requires_merge():
    with pytest.raises(TypeError):
        Mergeable()


def test_frontend_from_source_holds_source():
    ctx = CompilerFrontendContext.from_source("let x = 1;", Arena())
    assert ctx.get_source() == SourceHolder("let x = 1;")
    assert len(ctx.get_source()) == len("let x = 1;")


def test_frontend_keeps_given_arena():
    arena = Arena()
    ctx = CompilerFrontendContext.from_source("abc", arena)
    assert ctx.arena is arena


def test_frontend_symbol_factory_reads_same_source():
    ctx = CompilerFrontendContext.from_source("abc abc xyz", Arena())
    first = ctx.symbol_factory.from_range(0, 3)
    second = ctx.symbol_factory.from_range(4, 7)
    other = ctx.symbol_factory.from_range(8, 11)
    assert first == second
    assert first != other


def test_frontend_source_byte_length_counts_utf8():
    text = "é"
    ctx = CompilerFrontendContext.from_source(text, Arena())
    assert len(ctx.get_source()) == len(text.encode("utf-8"))


def test_phase_contexts_compare_equal():
    contexts = [CompilerMiddleendContext(), CompilerBackendContext()]
    assert contexts.count(CompilerMiddleendContext()) == 1
    assert contexts.count(CompilerBackendContext()) == 1