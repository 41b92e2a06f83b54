"""Regions of source text addressed by byte offsets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hydent.source_holder import SourceHolder


@dataclass(frozen=True)
class Span:
    """A half-open byte range ``[begin, end)`` within a source text."""

    begin: int
    end: int

    def with_ref(self, src: SourceHolder) -> SpanWithRef:
        """Pair this span with the text it covers in ``src``."""
        return SpanWithRef(span=self, reference=src._slice(self.begin, self.end))


@dataclass(frozen=True)
class SpanWithRef:
    """A span together with its text; equality and hashing use the text only."""

    span: Span = field(compare=False)
    reference: str