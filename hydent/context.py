"""Compilation contexts shared between compiler passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from hydent.arena import Arena
from hydent.source_holder import SourceHolder
from hydent.symbol import SymbolFactory

M = TypeVar("M", bound="Mergeable")


class Mergeable(ABC):
    """A value that can be combined with another value of the same type."""

    @abstractmethod
    def merge(self: M, other: M) -> M:
        """Combine this value with ``other`` and return the result."""


def _merge_halves(parts: Sequence[M]) -> M:
    if len(parts) == 1:
        return parts[0]
    mid = len(parts) // 2
    left = _merge_halves(parts[:mid])
    right = _merge_halves(parts[mid:])
    return left.merge(right)


def integrate_all_contexts(contexts: Sequence[M]) -> M:
    """Merge all contexts into one, splitting the list in halves recursively.

    Raises ``ValueError`` if ``contexts`` is empty.
    """
    parts = list(contexts)
    if not parts:
        raise ValueError("contexts is empty")
    return _merge_halves(parts)


@dataclass
class CompilerFrontendContext:
    """State used by the frontend: the source, its symbol table and the AST arena."""

    source: SourceHolder
    symbol_factory: SymbolFactory
    arena: Arena

    @classmethod
    def from_source(cls, source: str, arena: Arena) -> CompilerFrontendContext:
        """Build a context for ``source`` that allocates into ``arena``."""
        holder = SourceHolder(source)
        return cls(source=holder, symbol_factory=SymbolFactory(holder), arena=arena)

    def get_source(self) -> SourceHolder:
        """The holder of the source text being compiled."""
        return self.source


@dataclass
class CompilerMiddleendContext:
    """State used by the middle-end passes."""


@dataclass
class CompilerBackendContext:
    """State used by the code generation passes."""