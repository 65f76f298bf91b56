"""Copy files to standard output, one after another."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import BinaryIO, TextIO

_CHUNK = 8191


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _copy(stream: BinaryIO, out: BinaryIO, err: TextIO) -> None:
    while True:
        try:
            chunk = stream.read(_CHUNK)
        except OSError:
            return
        if not chunk:
            return
        try:
            out.write(chunk)
        except OSError as exc:
            err.write(f"{_reason(exc)}\n")


def cat(prog_name: str, paths: Sequence[str], out: BinaryIO, err: TextIO) -> int:
    """Write each file in ``paths`` to ``out`` and return the exit status.

    Files are opened for reading and writing; a file that cannot be opened
    is reported on ``err`` and skipped. With no path at all a usage line is
    printed and 1 is returned.
    """
    if not paths:
        err.write(f"usage: {prog_name} file ...\n")
        return 1
    for path in paths:
        try:
            stream = open(path, "r+b")
        except OSError as exc:
            err.write(f"{prog_name}: {path}: {_reason(exc)}\n")
            continue
        _copy(stream, out, err)
        try:
            stream.close()
        except OSError as exc:
            err.write(f"{prog_name}: {_reason(exc)}\n")
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; ``argv`` holds the file names."""
    paths = list(sys.argv[1:] if argv is None else argv)
    prog_name = sys.argv[0] if sys.argv and sys.argv[0] else "tinycat"
    out = getattr(sys.stdout, "buffer", None)
    if out is None:
        out = os.fdopen(os.dup(1), "wb")
    sys.stdout.flush()
    status = cat(prog_name, paths, out, sys.stderr)
    out.flush()
    return status


if __name__ == "__main__":
    raise SystemExit(main())