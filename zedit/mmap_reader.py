"""Memory-mapped access to files, read lazily in byte chunks."""

from __future__ import annotations

import mmap
import os
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]


class MmapReader:
    """Read-only view of a file through a memory map; the OS pages data in."""

    def __init__(self, data: mmap.mmap | bytes, length: int) -> None:
        self._data = data
        self._len = length

    @classmethod
    def open(cls, path: PathLike) -> MmapReader:
        """Map a file into memory; returns quickly even for very large files."""
        with open(path, "rb") as handle:
            length = os.fstat(handle.fileno()).st_size
            if length == 0:
                return cls(b"", 0)
            data = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
        return cls(data, length)

    def __len__(self) -> int:
        """File size in bytes."""
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def chunk(self, start: int, length: int) -> bytes:
        """Bytes from start, at most length of them, clamped to the end of the file."""
        if start < 0 or start > self._len:
            raise IndexError(f"start {start} out of bounds for length {self._len}")
        if length < 0:
            raise ValueError("length must not be negative")
        end = min(start + length, self._len)
        return self._data[start:end]

    def chunk_as_str(self, start: int, length: int) -> str:
        """A chunk decoded as UTF-8; raises ValueError if it is not valid UTF-8."""
        return self.chunk(start, length).decode("utf-8")

    def as_str(self) -> str:
        """The whole file decoded as UTF-8; meant for small files."""
        return self._data[: self._len].decode("utf-8")

    def close(self) -> None:
        """Release the memory map."""
        if isinstance(self._data, mmap.mmap):
            self._data.close()

    def __enter__(self) -> MmapReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class ChunkIterator:
    """Iterates over a mapped file in chunks of a fixed size."""

    def __init__(self, reader: MmapReader, chunk_size: int) -> None:
        self._reader = reader
        self._pos = 0
        self._chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        if self._pos >= len(self._reader):
            raise StopIteration
        piece = self._reader.chunk(self._pos, self._chunk_size)
        self._pos += len(piece)
        if not piece:
            raise StopIteration
        return piece