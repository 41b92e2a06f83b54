"""Holders for source text with byte-offset and line-based slicing."""

from __future__ import annotations

from dataclasses import dataclass, field


def _slice_bytes(data: bytes, begin: int, end: int) -> str:
    if not 0 <= begin <= end <= len(data):
        raise IndexError(f"byte range {begin}..{end} out of bounds for length {len(data)}")
    return data[begin:end].decode("utf-8")


@dataclass(frozen=True)
class SourceHolder:
    """Holds a source text; offsets into it are UTF-8 byte offsets."""

    source: str
    _data: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_data", self.source.encode("utf-8"))

    def __len__(self) -> int:
        """Length of the source in bytes."""
        return len(self._data)

    def _slice(self, begin: int, end: int) -> str:
        return _slice_bytes(self._data, begin, end)

    def upgrade(self) -> SourceHolderWithLineInfo:
        """Build a holder that also knows where each newline sits."""
        starts = tuple(i for i, byte in enumerate(self._data) if byte == 0x0A)
        return SourceHolderWithLineInfo(self.source, starts)


@dataclass(frozen=True)
class SourceHolderWithLineInfo:
    """A source text plus the byte offsets of its newline characters."""

    source: str
    line_starts: tuple[int, ...]
    _data: bytes = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_data", self.source.encode("utf-8"))

    def _line_offset(self, line: int) -> int:
        if not 1 <= line <= len(self.line_starts):
            raise IndexError(f"line {line} out of range")
        return self.line_starts[line - 1]

    def slice_from_line_info(
        self, begin_line: int, begin_column: int, end_line: int, end_column: int
    ) -> str:
        """Slice the text between two (1-based line, 0-based column) positions."""
        begin = self._line_offset(begin_line) + begin_column
        end = self._line_offset(end_line) + end_column
        return _slice_bytes(self._data, begin, end)