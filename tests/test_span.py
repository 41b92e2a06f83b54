import pytest

from hydent.source_holder import SourceHolder
from hydent.span import Span, SpanWithRef


def test_with_ref_holds_text_and_span():
    src = SourceHolder("abcabc")
    ref = Span(0, 3).with_ref(src)
    assert ref.reference == "abc"
    assert ref.span == Span(0, 3)


def test_equal_text_means_equal_refs():
    src = SourceHolder("abcabc")
    first = Span(0, 3).with_ref(src)
    second = Span(3, 6).with_ref(src)
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_different_text_means_different_refs():
    src = SourceHolder("abcabc")
    assert Span(0, 3).with_ref(src) != Span(1, 4).with_ref(src)


def test_spans_compare_by_bounds():
    assert Span(1, 2) == Span(1, 2)
    assert Span(1, 2) != Span(1, 3)


def test_span_is_immutable():
    span = Span(0, 1)
    with pytest.raises(AttributeError):
        span.begin = 5
    assert span.begin == 0
    assert span == Span(0, 1)


def test_offsets_are_bytes():
    src = SourceHolder("é!")
    assert Span(0, 2).with_ref(src).reference == "é"
    assert Span(2, 3).with_ref(src).reference == "!"


def test_split_character_is_rejected():
    with pytest.raises(ValueError):
        Span(0, 1).with_ref(SourceHolder("é"))


@pytest.mark.parametrize("begin,end", [(0, 10), (3, 2), (-1, 1)])
def test_out_of_range_raises(begin, end):
    with pytest.raises(IndexError):
        Span(begin, end).with_ref(SourceHolder("abc"))


def test_empty_span_gives_empty_text():
    ref = Span(2, 2).with_ref(SourceHolder("abc"))
    assert ref == SpanWithRef(Span(0, 0), "")