"""Loading files in chunks with progress reports, and cheap file inspection."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]
ChunkCallback = Callable[[str], None]
ProgressCallback = Callable[[float, str], None]

DEFAULT_CHUNK_SIZE = 64 * 1024
TEXT_PROBE_SIZE = 512
LINE_SAMPLE_SIZE = 10 * 1024
STREAM_THRESHOLD = 5 * 1024 * 1024
MMAP_THRESHOLD = 10 * 1024 * 1024


class StreamingLoader:
    """Reads a file in fixed-size chunks, reporting progress after each."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def load_with_progress(
        self,
        path: PathLike,
        on_chunk: ChunkCallback,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Pass each chunk, decoded leniently as UTF-8, to on_chunk.

        Exceptions raised by on_chunk stop loading and propagate.
        """
        filename = Path(path).name or "file"
        with open(path, "rb") as handle:
            file_size = os.fstat(handle.fileno()).st_size
            bytes_read = 0
            while True:
                data = handle.read(self.chunk_size)
                if not data:
                    break
                bytes_read += len(data)
                progress = min(bytes_read / file_size, 1.0) if file_size > 0 else 0.0
                on_chunk(data.decode("utf-8", errors="replace"))
                if on_progress is not None:
                    on_progress(progress, f"Loading {filename} ({progress * 100:.1f}%)")

    def load_complete(
        self, path: PathLike, on_progress: Optional[ProgressCallback] = None
    ) -> str:
        """Load a whole file into one string."""
        parts: list[str] = []
        self.load_with_progress(path, parts.append, on_progress)
        return "".join(parts)


def is_text_file(path: PathLike) -> bool:
    """Guess whether a file is text: under 1% NUL bytes in its first 512 bytes."""
    with open(path, "rb") as handle:
        sample = handle.read(TEXT_PROBE_SIZE)
    if not sample:
        return True
    return sample.count(0) / len(sample) < 0.01


def _estimate_line_count(path: PathLike, file_size: int) -> int:
    with open(path, "rb") as handle:
        sample = handle.read(min(file_size, LINE_SAMPLE_SIZE))
    if not sample:
        return 0
    newlines = sample.count(b"\n")
    if newlines == 0:
        return 1
    return int(file_size / len(sample) * newlines)


@dataclass(frozen=True)
class FileInfo:
    """What can be learnt about a file without loading it."""

    size: int
    is_text: bool
    line_count_estimate: Optional[int]

    @classmethod
    def from_path(cls, path: PathLike) -> FileInfo:
        size = os.stat(path).st_size
        text = is_text_file(path)
        estimate = _estimate_line_count(path, size) if text and size > 0 else None
        return cls(size=size, is_text=text, line_count_estimate=estimate)

    def should_stream(self) -> bool:
        """Files over 5 MiB are loaded in a streaming fashion."""
        return self.size > STREAM_THRESHOLD

    def should_mmap(self) -> bool:
        """Files over 10 MiB are memory-mapped."""
        return self.size > MMAP_THRESHOLD