import pytest

from zedit.instant_highlighter import (
    Highlight,
    HighlightedRange,
    InstantHighlighter,
)
from zedit.theme import Color


@pytest.fixture
def highlighter():
    return InstantHighlighter()


def _texts(content, ranges):
    data = content.encode("utf-8")
    return [(data[r.start : r.end].decode("utf-8"), r.highlight) for r in ranges]


def test_python_keyword(highlighter):
    content = "def foo"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "python")
    assert ranges == [HighlightedRange(0, 3, Highlight.KEYWORD)]


def test_python_constants_and_self(highlighter):
    content = "self.x = None"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "python")
    assert _texts(content, ranges) == [
        ("self", Highlight.VARIABLE),
        ("None", Highlight.CONSTANT),
    ]


def test_python_comment_and_string(highlighter):
    content = "x = 'hi'  # note"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "python")
    found = _texts(content, ranges)
    assert ("# note", Highlight.COMMENT) in found
    assert ("'hi'", Highlight.STRING) in found


def test_rust_keywords_and_constants(highlighter):
    content = "fn main() { let x = Some(1); }"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "rust")
    found = _texts(content, ranges)
    assert ("fn", Highlight.KEYWORD) in found
    assert ("let", Highlight.KEYWORD) in found
    assert ("Some", Highlight.CONSTANT) in found
    assert ("1", Highlight.NUMBER) in found


def test_javascript_template_string(highlighter):
    content = "const s = `x`;"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "javascript")
    found = _texts(content, ranges)
    assert ("const", Highlight.KEYWORD) in found
    assert ("`x`", Highlight.STRING) in found


def test_unknown_language_uses_generic(highlighter):
    content = "def x // done"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "cobol")
    assert _texts(content, ranges) == [("// done", Highlight.COMMENT)]


def test_ranges_are_sorted_by_start(highlighter):
    content = "def f(): return 42  # answer"
    ranges = highlighter.highlight_visible_region(content, 0, len(content), "python")
    starts = [r.start for r in ranges]
    assert starts == sorted(starts)
    assert len(ranges) == 4


def test_visible_window_offsets_are_absolute(highlighter):
    content = "x = 42"
    ranges = highlighter.highlight_visible_region(content, 4, 6, "python")
    assert len(ranges) == 1
    assert content[ranges[0].start : ranges[0].end] == "42"


def test_end_past_content_is_clamped(highlighter):
    content = "return 7"
    ranges = highlighter.highlight_visible_region(content, 0, 1000, "python")
    assert _texts(content, ranges) == [
        ("return", Highlight.KEYWORD),
        ("7", Highlight.NUMBER),
    ]


def test_offsets_are_bytes_with_multibyte_text(highlighter):
    content = "é = 1"
    ranges = highlighter.highlight_visible_region(
        content, 0, len(content.encode("utf-8")), "python"
    )
    assert _texts(content, ranges) == [("1", Highlight.NUMBER)]
    assert ranges[0].end == len(content.encode("utf-8"))


def test_start_past_end_raises(highlighter):
    with pytest.raises(IndexError):
        highlighter.highlight_visible_region("abc", 5, 2, "python")


def test_split_character_raises(highlighter):
    with pytest.raises(ValueError):
        highlighter.highlight_visible_region("é", 1, 2, "python")


@pytest.mark.parametrize(
    "path, language",
    [
        ("main.rs", "rust"),
        ("script.py", "python"),
        ("app.js", "javascript"),
        ("app.jsx", "javascript"),
        ("app.ts", "javascript"),
        ("app.tsx", "javascript"),
        ("notes.txt", "unknown"),
        ("Makefile", "unknown"),
        (None, "unknown"),
    ],
)
def test_detect_language(path, language):
    assert InstantHighlighter.detect_language(path) == language


def test_highlight_colors():
    assert Highlight.VARIABLE.to_color() == Color.WHITE
    assert Highlight.COMMENT.to_color() == Color(100, 160, 100)
    assert Highlight.KEYWORD.to_color() == Color(200, 120, 200)