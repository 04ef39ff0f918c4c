import io
import os

import pytest

from pipex.errors import FileOpenError
from pipex.heredoc import read_until, write_heredoc
from pipex.lines import LineReader


def test_read_until_stops_at_limiter():
    prompt = io.StringIO()
    lines = list(read_until("EOF", io.StringIO("a\nb\nEOF\nc\n"), prompt))
    assert lines == ["a\n", "b\n"]
    assert prompt.getvalue() == "> " * 3


def test_read_until_stops_at_end_of_input():
    prompt = io.StringIO()
    lines = list(read_until("END", io.StringIO("one\ntwo\n"), prompt))
    assert lines == ["one\n", "two\n"]
    assert prompt.getvalue().count("> ") == len(lines) + 1


def test_limiter_must_end_with_newline():
    prompt = io.StringIO()
    lines = list(read_until("EOF", io.StringIO("x\nEOF"), prompt))
    assert lines == ["x\n", "EOF"]


def test_limiter_must_match_whole_line():
    prompt = io.StringIO()
    lines = list(read_until("EOF", io.StringIO("EOFX\n EOF\nEOF\n"), prompt))
    assert lines == ["EOFX\n", " EOF\n"]


def test_read_until_from_file_descriptor():
    read_end, write_end = os.pipe()
    os.write(write_end, b"hello\nstop\nafter\n")
    os.close(write_end)
    try:
        lines = list(read_until("stop", read_end, io.StringIO()))
    finally:
        os.close(read_end)
    assert lines == ["hello\n"]


def test_read_until_from_line_reader():
    reader = LineReader(io.BytesIO(b"q\nw\nLIM\n"), buffer_size=4)
    assert list(read_until("LIM", reader, io.StringIO())) == ["q\n", "w\n"]


def test_write_heredoc_round_trip(tmp_path):
    path = tmp_path / "doc"
    path.write_bytes(b"old content that must go\n")
    with write_heredoc("EOF", str(path), io.StringIO("a\nb\nEOF\nc\n"), io.StringIO()) as f:
        assert f.read() == b"a\nb\n"
    assert path.read_bytes() == b"a\nb\n"


def test_write_heredoc_empty_document(tmp_path):
    path = tmp_path / "doc"
    with write_heredoc("EOF", str(path), io.StringIO("EOF\n"), io.StringIO()) as f:
        assert f.read() == b""


def test_write_heredoc_unopenable_path_raises(tmp_path):
    path = tmp_path / "missing-dir" / "doc"
    with pytest.raises(FileOpenError) as info:
        write_heredoc("EOF", str(path), io.StringIO("EOF\n"), io.StringIO())
    assert info.value.path == str(path)
    assert str(info.value).endswith(f": {path}")