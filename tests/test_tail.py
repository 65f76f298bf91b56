import io
import sys

import pytest

from fortytools.tail import (
    count_lines,
    file_length,
    header,
    main,
    tail_bytes,
    tail_size,
)


def _lines(count):
    return [f"line{n}\n".encode() for n in range(1, count + 1)]


@pytest.fixture
def long_file(tmp_path):
    path = tmp_path / "long.txt"
    path.write_bytes(b"".join(_lines(12)))
    return path


def test_count_lines(long_file):
    assert count_lines(long_file) == 12


def test_file_length(long_file):
    assert file_length(long_file) == len(long_file.read_bytes())


def test_tail_size_covers_last_ten_lines(long_file):
    expected = b"".join(_lines(12)[-10:])
    assert tail_size(long_file, 12, 10) == len(expected)


def test_tail_bytes_returns_end_of_file(long_file):
    data = long_file.read_bytes()
    assert tail_bytes(long_file, 5, len(data)) == data[-5:]


def test_tail_bytes_nonpositive_size_is_empty(long_file):
    assert tail_bytes(long_file, -1, 0) == b""


def test_short_file_drops_first_byte(tmp_path):
    path = tmp_path / "short.txt"
    path.write_bytes(b"a\nb\n")
    size = tail_size(path, count_lines(path), 10)
    assert tail_bytes(path, size, file_length(path)) == b"\nb\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_lines(tmp_path / "absent")


def test_header_first_and_later():
    assert header("f", 1) == "==> f <==\n"
    assert header("f", 2) == "\n==> f <==\n"


def test_main_single_file(long_file, capsysbinary):
    assert main([str(long_file)]) == 0
    assert capsysbinary.readouterr().out == b"".join(_lines(12)[-10:])


def test_main_two_files_print_headers(long_file, capsysbinary):
    name = str(long_file)
    assert main([name, name]) == 0
    tail = b"".join(_lines(12)[-10:])
    expected = (
        header(name, 1).encode() + tail + header(name, 2).encode() + tail
    )
    assert capsysbinary.readouterr().out == expected


def test_main_missing_file_reports(tmp_path, capsysbinary):
    assert main([str(tmp_path / "absent")]) == 0
    assert capsysbinary.readouterr().out == b"open() failed !\n"


def test_main_without_files_consumes_stdin(capsysbinary, monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"some input\n"))
    monkeypatch.setattr(sys, "stdin", stdin)
    assert main([]) == 0
    assert stdin.buffer.read() == b""
    assert capsysbinary.readouterr().out == b""