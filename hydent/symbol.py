"""Interning of identifier text into compact symbols."""

from __future__ import annotations

from dataclasses import dataclass

from hydent.source_holder import SourceHolder
from hydent.span import Span, SpanWithRef


@dataclass(frozen=True)
class Symbol:
    """A handle for one distinct interned string."""

    id: int


class SymbolFactory:
    """Maps distinct source strings to sequentially numbered symbols."""

    def __init__(self, source: SourceHolder) -> None:
        self._source = source
        self._table: dict[SpanWithRef, Symbol] = {}

    def from_span(self, span: Span) -> Symbol:
        """Return the symbol for the text under ``span``, creating it if new."""
        key = span.with_ref(self._source)
        symbol = self._table.get(key)
        if symbol is None:
            symbol = Symbol(len(self._table))
            self._table[key] = symbol
        return symbol

    def from_range(self, begin: int, end: int) -> Symbol:
        """Return the symbol for the text in the byte range ``[begin, end)``."""
        return self.from_span(Span(begin, end))