import pytest

from zedit.chunk import Chunk, TextMetrics
from zedit.sum_tree import SumTree

SAMPLE = "Line 1\nLine 2\nLine 3\n"


def test_text_round_trip():
    assert Chunk(SAMPLE).text == SAMPLE
    assert str(Chunk(SAMPLE)) == SAMPLE


def test_len_is_utf8_bytes():
    text = "héllo→\n"
    assert len(Chunk(text)) == len(text.encode("utf-8"))


def test_hello_world_length():
    assert len(Chunk("Hello, World!")) == 13


def test_empty():
    assert Chunk("").is_empty()
    assert not Chunk("x").is_empty()
    assert Chunk("").count_lines() == 0


def test_count_lines_matches_newlines():
    assert Chunk(SAMPLE).count_lines() == SAMPLE.count("\n")


def test_newline_positions_point_at_newlines():
    text = "aé\nb\n\nc"
    chunk = Chunk(text)
    data = text.encode("utf-8")
    positions = chunk.newline_positions()
    assert len(positions) == text.count("\n")
    assert all(data[p] == ord("\n") for p in positions)
    assert list(positions) == sorted(positions)


def test_get_newline_position():
    chunk = Chunk(SAMPLE)
    positions = chunk.newline_positions()
    for idx, pos in enumerate(positions):
        assert chunk.get_newline_position(idx) == pos
    assert chunk.get_newline_position(len(positions)) is None


def test_split_at_round_trip():
    chunk = Chunk(SAMPLE)
    left, right = chunk.split_at(7)
    assert left.text + right.text == SAMPLE
    assert left.text == "Line 1\n"
    assert len(left) + len(right) == len(chunk)


def test_split_inside_character_rejected():
    chunk = Chunk("é")
    with pytest.raises(ValueError):
        chunk.split_at(1)


def test_slice():
    chunk = Chunk("Hello World")
    assert chunk.slice(6, 11).text == "World"
    assert chunk.slice(0, 0).is_empty()


def test_slice_out_of_range():
    with pytest.raises(IndexError):
        Chunk("abc").slice(1, 10)


def test_summary_matches_chunk():
    chunk = Chunk(SAMPLE)
    assert chunk.summary() == TextMetrics(len=len(chunk), lines=chunk.count_lines())


def test_metrics_identity():
    m = TextMetrics(len=19, lines=3)
    assert m + TextMetrics() == m


def test_chunks_in_sum_tree():
    chunks = [Chunk("First\n"), Chunk("Second\n"), Chunk("Third\n")]
    tree = SumTree.from_items(chunks, TextMetrics)
    assert tree.summary() == TextMetrics(len=19, lines=3)
    assert "".join(c.text for c in tree) == "First\nSecond\nThird\n"