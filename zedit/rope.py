"""Rope text storage built on a sum tree of chunks; offsets are UTF-8 bytes."""

from __future__ import annotations

from typing import Iterator

from zedit.chunk import Chunk, TextMetrics
from zedit.sum_tree import SumTree

CHUNK_SIZE = 1024
REBUILD_LIMIT = 1_000_000
CHUNK_OVERHEAD = 64


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _split_text(text: str) -> Iterator[Chunk]:
    """Cut text into chunks of about CHUNK_SIZE bytes on character boundaries."""
    data = text.encode("utf-8")
    start = 0
    while start < len(data):
        end = min(start + CHUNK_SIZE, len(data))
        while end < len(data) and _is_continuation(data[end]):
            end += 1
        yield Chunk(data[start:end].decode("utf-8"))
        start = end


class Rope:
    """Text held as a balanced tree of chunks."""

    def __init__(self) -> None:
        self._tree: SumTree[Chunk] = SumTree(TextMetrics)

    @classmethod
    def from_text(cls, text: str) -> Rope:
        """Build a balanced rope from text."""
        rope = cls()
        if text:
            rope._tree = SumTree.from_items(_split_text(text), TextMetrics)
        return rope

    def __repr__(self) -> str:
        return f"Rope(len={len(self)}, lines={self.line_count()})"

    def __len__(self) -> int:
        """Length in bytes."""
        return self._tree.summary().len

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def line_count(self) -> int:
        """Number of newline characters."""
        return self._tree.summary().lines

    def _segments(self) -> Iterator[tuple[str, bool]]:
        """Yield pieces of text between newlines, flagging those a newline follows."""
        for chunk in self._tree:
            *complete, last = chunk.text.split("\n")
            for piece in complete:
                yield piece, True
            yield last, False

    def line(self, line_idx: int) -> str | None:
        """Text of a line without its newline, or None if the line has no characters."""
        current = 0
        parts: list[str] = []
        found = False
        for piece, newline in self._segments():
            if current == line_idx:
                if piece or newline:
                    found = True
                parts.append(piece)
                if newline:
                    return "".join(parts)
            if newline:
                current += 1
                if current > line_idx:
                    break
        return "".join(parts) if found else None

    def line_to_byte(self, target_line: int) -> int:
        """Byte offset at which a line starts; the total length past the end."""
        if target_line == 0:
            return 0
        current_line = 0
        byte_offset = 0
        for chunk in self._tree:
            newlines = chunk.count_lines()
            if current_line + newlines >= target_line:
                line_in_chunk = target_line - current_line
                if line_in_chunk == 0:
                    return byte_offset
                newline_pos = chunk.get_newline_position(line_in_chunk - 1)
                if newline_pos is not None:
                    return byte_offset + newline_pos + 1
                return byte_offset + len(chunk)
            current_line += newlines
            byte_offset += len(chunk)
        return byte_offset

    def byte_to_line_col(self, target_byte: int) -> tuple[int, int]:
        """Line and column (in characters) of a byte offset."""
        if target_byte == 0:
            return (0, 0)
        byte_offset = 0
        line = 0
        column = 0
        for chunk in self._tree:
            chunk_len = len(chunk)
            if byte_offset + chunk_len > target_byte:
                offset_in_chunk = target_byte - byte_offset
                counted = 0
                for ch in chunk.text:
                    if counted >= offset_in_chunk:
                        break
                    counted += len(ch.encode("utf-8"))
                    if ch == "\n":
                        line += 1
                        column = 0
                    else:
                        column += 1
                return (line, column)
            line += chunk.count_lines()
            if chunk.count_lines():
                column = len(chunk.text.rsplit("\n", 1)[1])
            else:
                column += len(chunk.text)
            byte_offset += chunk_len
        return (line, column)

    def slice_bytes(self, start: int, end: int) -> str:
        """Text between two byte offsets; end is clamped to the length."""
        total = len(self)
        if start >= end or start >= total:
            return ""
        end = min(end, total)
        parts: list[str] = []
        current = 0
        for chunk in self._tree:
            chunk_end = current + len(chunk)
            if chunk_end <= start:
                current = chunk_end
                continue
            if current >= end:
                break
            local_start = max(start - current, 0)
            local_end = min(end, chunk_end) - current
            parts.append(chunk.slice(local_start, local_end).text)
            current = chunk_end
        return "".join(parts)

    def line_byte_range(self, line_idx: int) -> tuple[int, int] | None:
        """Byte range of a line, excluding its newline; None if the line is absent."""
        start = self.line_to_byte(line_idx)
        current = 0
        offset = 0
        found = False
        for piece, newline in self._segments():
            if current == line_idx and (piece or newline):
                found = True
            offset += len(piece.encode("utf-8"))
            if newline:
                if found:
                    return (start, offset)
                offset += 1
                current += 1
                if current > line_idx:
                    break
        return (start, offset) if found else None

    def __str__(self) -> str:
        return "".join(self.chunks())

    def _check_offset(self, data: bytes, pos: int) -> None:
        if not 0 <= pos <= len(data):
            raise IndexError(f"byte offset {pos} out of bounds for length {len(data)}")
        if pos < len(data) and _is_continuation(data[pos]):
            raise ValueError(f"byte offset {pos} is not on a character boundary")

    def insert(self, pos: int, text: str) -> None:
        """Insert text at a byte offset."""
        if not text:
            return
        if len(self) < REBUILD_LIMIT:
            data = str(self).encode("utf-8")
            self._check_offset(data, pos)
            content = data[:pos] + text.encode("utf-8") + data[pos:]
            self._tree = Rope.from_text(content.decode("utf-8"))._tree
            return
        self._insert_chunked(pos, text)

    def _insert_chunked(self, pos: int, text: str) -> None:
        if not 0 <= pos <= len(self):
            raise IndexError(f"byte offset {pos} out of bounds for length {len(self)}")
        new_chunks: list[Chunk] = []
        current = 0
        inserted = False
        for chunk in self._tree:
            chunk_end = current + len(chunk)
            if not inserted and current <= pos < chunk_end:
                if pos > current:
                    before, after = chunk.split_at(pos - current)
                    new_chunks.append(before)
                    new_chunks.extend(_split_text(text))
                    new_chunks.append(after)
                else:
                    new_chunks.extend(_split_text(text))
                    new_chunks.append(chunk)
                inserted = True
            else:
                new_chunks.append(chunk)
            current = chunk_end
        if not inserted:
            new_chunks.extend(_split_text(text))
        self._tree = SumTree.from_items(new_chunks, TextMetrics)

    def push_str(self, text: str) -> None:
        """Append text at the end."""
        self.insert(len(self), text)

    def delete(self, start: int, end: int) -> None:
        """Remove the bytes start..end."""
        if start >= end:
            return
        if len(self) < REBUILD_LIMIT:
            data = str(self).encode("utf-8")
            self._check_offset(data, start)
            self._check_offset(data, end)
            content = data[:start] + data[end:]
            self._tree = Rope.from_text(content.decode("utf-8"))._tree
            return
        self._delete_chunked(start, end)

    def _delete_chunked(self, start: int, end: int) -> None:
        if start < 0 or end > len(self):
            raise IndexError(f"byte range {start}..{end} out of bounds for length {len(self)}")
        new_chunks: list[Chunk] = []
        current = 0
        for chunk in self._tree:
            chunk_len = len(chunk)
            chunk_end = current + chunk_len
            if chunk_end <= start or current >= end:
                new_chunks.append(chunk)
            else:
                keep_start = max(start - current, 0)
                keep_end = min(end, chunk_end) - current
                if keep_start > 0:
                    new_chunks.append(chunk.slice(0, keep_start))
                if keep_end < chunk_len:
                    new_chunks.append(chunk.slice(keep_end, chunk_len))
            current = chunk_end
        self._tree = SumTree.from_items(new_chunks, TextMetrics)

    def chunk_count(self) -> int:
        return sum(1 for _ in self._tree)

    def chunks(self) -> Iterator[str]:
        """Yield the text of each chunk in order."""
        for chunk in self._tree:
            yield chunk.text

    def memory_usage(self) -> int:
        """Rough memory estimate: bytes plus a fixed overhead per chunk."""
        return len(self) + self.chunk_count() * CHUNK_OVERHEAD