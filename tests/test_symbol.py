import pytest

from hydent.source_holder import SourceHolder
from hydent.span import Span
from hydent.symbol import Symbol, SymbolFactory


def make_factory(text):
    return SymbolFactory(SourceHolder(text))


def test_same_text_gives_same_symbol():
    factory = make_factory("foo bar foo")
    assert factory.from_range(0, 3) == factory.from_range(8, 11)


def test_different_text_gives_different_symbols():
    factory = make_factory("foo bar foo")
    assert factory.from_range(0, 3) != factory.from_range(4, 7)


def test_ids_start_at_zero_and_increase():
    factory = make_factory("foo bar baz")
    assert factory.from_range(0, 3) == Symbol(0)
    assert factory.from_range(4, 7) == Symbol(1)
    assert factory.from_range(0, 3) == Symbol(0)


def test_from_span_matches_from_range():
    factory = make_factory("alpha beta")
    assert factory.from_span(Span(6, 10)) == factory.from_range(6, 10)


def test_ids_are_dense():
    words = "a b c a b d"
    factory = make_factory(words)
    symbols = [factory.from_range(i, i + 1) for i in range(0, len(words), 2)]
    ids = {s.id for s in symbols}
    assert ids == set(range(len(ids)))
    assert len(ids) == len(set(words.split()))


def test_factories_are_independent():
    first = make_factory("x y")
    second = make_factory("x y")
    first.from_range(0, 1)
    assert second.from_range(2, 3) == first.from_range(0, 1)


def test_out_of_range_raises():
    with pytest.raises(IndexError):
        make_factory("abc").from_range(1, 10)