"""Fast regex-based highlighting of a visible region of text."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from itertools import accumulate
from pathlib import Path
from typing import Optional, Union

from zedit.theme import Color

PathLike = Union[str, "os.PathLike[str]"]


class Highlight(enum.Enum):
    COMMENT = "comment"
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    FUNCTION = "function"
    TYPE = "type"
    VARIABLE = "variable"
    CONSTANT = "constant"
    ATTRIBUTE = "attribute"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"

    def to_color(self) -> Color:
        return _HIGHLIGHT_COLORS[self]


_HIGHLIGHT_COLORS = {
    Highlight.COMMENT: Color(100, 160, 100),
    Highlight.KEYWORD: Color(200, 120, 200),
    Highlight.STRING: Color(200, 150, 100),
    Highlight.NUMBER: Color(100, 180, 255),
    Highlight.FUNCTION: Color(220, 220, 100),
    Highlight.TYPE: Color(100, 200, 255),
    Highlight.VARIABLE: Color.WHITE,
    Highlight.CONSTANT: Color(200, 100, 100),
    Highlight.ATTRIBUTE: Color(200, 200, 100),
    Highlight.OPERATOR: Color(200, 200, 200),
    Highlight.PUNCTUATION: Color(150, 150, 150),
}


@dataclass(frozen=True)
class HighlightedRange:
    """A highlighted span given as UTF-8 byte offsets into the whole content."""

    start: int
    end: int
    highlight: Highlight


Patterns = tuple[tuple["re.Pattern[str]", Highlight], ...]

_NUMBER = re.compile(r"\b\d+\.?\d*\b")
_BLOCK_COMMENT = re.compile(r"/\*[^*]*\*/")

_PYTHON: Patterns = (
    (
        re.compile(
            r"\b(def|class|if|else|elif|for|while|return|import|from|as|with|try|except|finally|raise)\b"
        ),
        Highlight.KEYWORD,
    ),
    (re.compile(r"\b(True|False|None)\b"), Highlight.CONSTANT),
    (re.compile(r"\b(self|cls)\b"), Highlight.VARIABLE),
    (re.compile(r"#[^\n]*"), Highlight.COMMENT),
    (re.compile(r'"{3}[^"]*"{3}|\'{3}[^\']*\'{3}'), Highlight.COMMENT),
    (re.compile(r'"[^"]*"|\'[^\']*\''), Highlight.STRING),
    (_NUMBER, Highlight.NUMBER),
)

_JAVASCRIPT: Patterns = (
    (
        re.compile(
            r"\b(function|class|const|let|var|if|else|for|while|return|import|export|from|default)\b"
        ),
        Highlight.KEYWORD,
    ),
    (re.compile(r"\b(true|false|null|undefined)\b"), Highlight.CONSTANT),
    (re.compile(r"//[^\n]*"), Highlight.COMMENT),
    (_BLOCK_COMMENT, Highlight.COMMENT),
    (re.compile(r'"[^"]*"|\'[^\']*\'|`[^`]*`'), Highlight.STRING),
    (_NUMBER, Highlight.NUMBER),
)

_RUST: Patterns = (
    (
        re.compile(
            r"\b(fn|struct|enum|impl|trait|let|mut|pub|if|else|for|while|match|return|use|mod|crate|super|self)\b"
        ),
        Highlight.KEYWORD,
    ),
    (re.compile(r"\b(true|false|Some|None|Ok|Err)\b"), Highlight.CONSTANT),
    (re.compile(r"//[^\n]*"), Highlight.COMMENT),
    (_BLOCK_COMMENT, Highlight.COMMENT),
    (re.compile(r'"[^"]*"'), Highlight.STRING),
    (_NUMBER, Highlight.NUMBER),
)

_GENERIC: Patterns = (
    (re.compile(r"//[^\n]*|#[^\n]*"), Highlight.COMMENT),
    (_BLOCK_COMMENT, Highlight.COMMENT),
    (re.compile(r'"[^"]*"|\'[^\']*\''), Highlight.STRING),
    (_NUMBER, Highlight.NUMBER),
)

_EXTENSIONS = {
    "rs": "rust",
    "py": "python",
    "js": "javascript",
    "jsx": "javascript",
    "ts": "javascript",
    "tsx": "javascript",
}


def _byte_offsets(text: str) -> list[int]:
    """Byte offset of every character index in text, including the end."""
    if text.isascii():
        return list(range(len(text) + 1))
    return [0, *accumulate(len(ch.encode("utf-8")) for ch in text)]


class InstantHighlighter:
    """Highlights text with per-language regular expressions."""

    def __init__(self) -> None:
        self._patterns: Patterns = _GENERIC
        self._language_patterns: dict[str, Patterns] = {
            "python": _PYTHON,
            "javascript": _JAVASCRIPT,
            "rust": _RUST,
        }

    def highlight_visible_region(
        self,
        content: str,
        visible_start_byte: int,
        visible_end_byte: int,
        language: str,
    ) -> list[HighlightedRange]:
        """Highlight the bytes start..end of content (end clamped), sorted by start."""
        patterns = self._language_patterns.get(language, self._patterns)
        data = content.encode("utf-8")
        end = visible_end_byte if visible_end_byte <= len(data) else len(data)
        if not 0 <= visible_start_byte <= end:
            raise IndexError(
                f"byte range {visible_start_byte}..{visible_end_byte} "
                f"out of bounds for length {len(data)}"
            )
        try:
            visible = data[visible_start_byte:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("visible range is not on character boundaries") from exc

        offsets = _byte_offsets(visible)
        ranges = [
            HighlightedRange(
                visible_start_byte + offsets[match.start()],
                visible_start_byte + offsets[match.end()],
                highlight,
            )
            for pattern, highlight in patterns
            for match in pattern.finditer(visible)
        ]
        ranges.sort(key=lambda r: r.start)
        return ranges

    @staticmethod
    def detect_language(file_path: Optional[PathLike]) -> str:
        """Language name from a file extension, or "unknown"."""
        if file_path is None:
            return "unknown"
        suffix = Path(file_path).suffix
        return _EXTENSIONS.get(suffix[1:], "unknown") if suffix else "unknown"