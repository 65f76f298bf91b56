"""Print the last ten lines of each file named on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

DEFAULT_LINES = 10
OPEN_FAILED = "open() failed !\n"
LEFT_HEADER = "==> "
RIGHT_HEADER = " <==\n"


def _read(path: str | Path) -> bytes:
    return Path(path).read_bytes()


def count_lines(path: str | Path) -> int:
    """Return the number of newline bytes in the file."""
    return _read(path).count(b"\n")


def file_length(path: str | Path) -> int:
    """Return the size of the file in bytes."""
    return len(_read(path))


def tail_size(path: str | Path, newline_count: int, line_count: int) -> int:
    """Return how many bytes at the end of the file hold its last ``line_count`` lines.

    Counting starts at the newline that leaves ``line_count`` newlines after
    it, and that newline itself is left out. When the file has no more than
    ``line_count`` newlines every byte but the first is counted.
    """
    threshold = newline_count - line_count
    seen = 0
    size = 0
    for byte in _read(path):
        if byte == 0x0A:
            seen += 1
        if seen >= threshold:
            size += 1
    return size - 1


def tail_bytes(path: str | Path, size: int, length: int) -> bytes:
    """Return the last ``size`` bytes of a file that is ``length`` bytes long."""
    if size <= 0:
        return b""
    with open(path, "rb") as stream:
        stream.seek(max(length - size, 0))
        return stream.read(size)


def header(file_name: str, index: int) -> str:
    """Return the banner shown before a file when several are given.

    ``index`` is the 1-based position of the file among the operands; every
    banner after the first is preceded by a blank line.
    """
    lead = "\n" if index > 1 else ""
    return f"{lead}{LEFT_HEADER}{file_name}{RIGHT_HEADER}"


def _emit(data: bytes) -> None:
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode(errors="replace"))
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def _drain_stdin() -> None:
    stream = sys.stdin
    source = getattr(stream, "buffer", stream)
    while source.read(1):
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tail of each file; with no file, consume standard input."""
    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        _drain_stdin()
    for index, path in enumerate(paths, start=1):
        if len(paths) >= 2:
            _emit(header(path, index).encode())
        try:
            lines = count_lines(path)
            size = tail_size(path, lines, DEFAULT_LINES)
            data = tail_bytes(path, size, file_length(path))
        except OSError:
            _emit(OPEN_FAILED.encode())
            continue
        _emit(data.split(b"\0", 1)[0])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())