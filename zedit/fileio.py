"""Reading and writing text files."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from zedit.rope import Rope

PathLike = Union[str, "os.PathLike[str]"]


def read_file(path: PathLike) -> str:
    """Read a whole UTF-8 file, keeping line endings as they are."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_file_chunked(path: PathLike, max_size: int) -> str:
    """Read a file line by line, stopping with a notice once max_size bytes are reached."""
    parts: list[str] = []
    total = 0
    with open(path, "rb") as handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith(b"\n") else raw
            if line.endswith(b"\r"):
                line = line[:-1]
            text = line.decode("utf-8")
            if total + len(line) > max_size:
                parts.append(f"\n... [File truncated - {max_size} bytes max]")
                break
            parts.append(text)
            parts.append("\n")
            total += len(line) + 1
    return "".join(parts)


def write_file(path: PathLike, contents: str) -> None:
    """Write a string to a file as UTF-8."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(contents)


def write_file_from_rope(path: PathLike, rope: Rope) -> None:
    """Write a rope to a file chunk by chunk."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for chunk in rope.chunks():
            handle.write(chunk)