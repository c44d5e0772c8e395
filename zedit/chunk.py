"""Text chunks with cached newline offsets, and their metrics."""

from __future__ import annotations

from dataclasses import dataclass

from zedit.summary import Summary


@dataclass(frozen=True)
class TextMetrics(Summary):
    """Byte length and newline count of a piece of text."""

    len: int = 0
    lines: int = 0

    def add_summary(self, other: TextMetrics) -> TextMetrics:
        if not isinstance(other, TextMetrics):
            raise TypeError(f"cannot combine TextMetrics with {type(other).__name__}")
        return TextMetrics(self.len + other.len, self.lines + other.lines)


class Chunk:
    """An immutable piece of text; offsets are UTF-8 byte offsets."""

    __slots__ = ("_text", "_data", "_newlines")

    def __init__(self, text: str) -> None:
        self._text = text
        self._data = text.encode("utf-8")
        self._newlines = tuple(i for i, b in enumerate(self._data) if b == 0x0A)

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Chunk({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __len__(self) -> int:
        """Length in bytes."""
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def count_lines(self) -> int:
        """Number of newline characters."""
        return len(self._newlines)

    def get_newline_position(self, line_idx: int) -> int | None:
        """Byte offset of the line_idx-th newline, or None."""
        if 0 <= line_idx < len(self._newlines):
            return self._newlines[line_idx]
        return None

    def newline_positions(self) -> tuple[int, ...]:
        return self._newlines

    def _decode(self, start: int, end: int) -> str:
        if not 0 <= start <= end <= len(self._data):
            raise IndexError(f"byte range {start}..{end} out of bounds for {len(self._data)}")
        try:
            return self._data[start:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"byte range {start}..{end} is not on character boundaries") from exc

    def split_at(self, pos: int) -> tuple[Chunk, Chunk]:
        """Split into two chunks at a byte offset."""
        return Chunk(self._decode(0, pos)), Chunk(self._decode(pos, len(self._data)))

    def slice(self, start: int, end: int) -> Chunk:
        """The bytes start..end as a new chunk."""
        return Chunk(self._decode(start, end))

    def summary(self) -> TextMetrics:
        return TextMetrics(len=len(self), lines=self.count_lines())