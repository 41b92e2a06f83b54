"""A simple arena that owns values and hands out handles to them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class ArenaBox(Generic[T]):
    """A handle to a single value stored in an :class:`Arena`."""

    __slots__ = ("_slots", "_index")

    def __init__(self, slots: list[Any], index: int) -> None:
        self._slots = slots
        self._index = index

    @property
    def value(self) -> T:
        return self._slots[self._index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArenaBox):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ArenaBox({self.value!r})"


class ArenaIter(Generic[T]):
    """A contiguous run of values stored in an :class:`Arena`; re-iterable."""

    __slots__ = ("_slots", "_start", "_length")

    def __init__(self, slots: list[Any], start: int, length: int) -> None:
        self._slots = slots
        self._start = start
        self._length = length

    def __iter__(self) -> Iterator[T]:
        yield from self._slots[self._start : self._start + self._length]

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArenaIter):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"ArenaIter({list(self)!r})"


class Arena:
    """Owns allocated values for as long as the arena lives."""

    def __init__(self) -> None:
        self._slots: list[Any] = []

    def alloc(self, value: T) -> ArenaBox[T]:
        """Store one value and return a handle to it."""
        self._slots.append(value)
        return ArenaBox(self._slots, len(self._slots) - 1)

    def alloc_iter(self, values: Iterable[T]) -> ArenaIter[T]:
        """Store all values from ``values`` contiguously."""
        items = tuple(values)
        start = len(self._slots)
        self._slots.extend(items)
        return ArenaIter(self._slots, start, len(items))

    def alloc_with(self, func: Callable[[], Optional[T]]) -> ArenaIter[T]:
        """Call ``func`` repeatedly, storing results until it returns ``None``."""
        return self.alloc_iter(iter(func, None))