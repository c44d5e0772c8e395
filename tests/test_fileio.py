import pytest

from zedit.fileio import read_file, read_file_chunked, write_file, write_file_from_rope
from zedit.rope import Rope


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    text = "Hello, World!\nLine 2\nLine 3"
    write_file(path, text)
    assert read_file(path) == text


def test_round_trip_keeps_crlf_and_unicode(tmp_path):
    path = tmp_path / "crlf.txt"
    text = "héllo\r\nwörld\r\n"
    write_file(path, text)
    assert read_file(path) == text
    assert path.read_bytes() == text.encode("utf-8")


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_read_invalid_utf8(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(UnicodeDecodeError):
        read_file(path)


def test_chunked_read_within_limit_ends_every_line(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"Line 1\nLine 2\nLine 3")
    assert read_file_chunked(path, 1000) == "Line 1\nLine 2\nLine 3\n"


def test_chunked_read_truncates(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes(b"Line 1\nLine 2\n")
    result = read_file_chunked(path, 10)
    assert result == "Line 1\n\n... [File truncated - 10 bytes max]"


def test_chunked_read_strips_carriage_returns(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"Line 1\r\nLine 2\r\n")
    assert read_file_chunked(path, 1000) == "Line 1\nLine 2\n"


def test_chunked_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_chunked(tmp_path / "missing.txt", 10)


def test_write_from_rope_round_trip(tmp_path):
    path = tmp_path / "rope.txt"
    text = "".join(f"line {n} é\n" for n in range(500))
    rope = Rope.from_text(text)
    assert rope.chunk_count() > 1
    write_file_from_rope(path, rope)
    assert read_file(path) == text


def test_write_from_empty_rope(tmp_path):
    path = tmp_path / "empty.txt"
    write_file_from_rope(path, Rope())
    assert path.read_bytes() == b""