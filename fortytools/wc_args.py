"""Option parsing for the word-count tool."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NoReturn

FT_WC_DOC = (
    "Print newline, word, and byte counts for each FILE, and a total line if\n"
    "more than one FILE is specified.  A word is a non-zero-length sequence of\n"
    "characters delimited by white space.\n\n"
    "With no FILE, or when FILE is -, read standard input.\n\n"
)
ARGS_DOC = (
    "wc [OPTION]... [FILE]...\n"
    "  or:  wc [OPTION]... --files0-from=F\n"
)
VERSION_TEXT = (
    "Ft_wc 0.0\n"
    "This is free software: you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law."
)
UNHANDLED_OPTION = "(PROGRAM ERROR) Option should have been recognized!?"

_USAGE_STATUS = 64


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(_USAGE_STATUS, f"{self.prog}: {message}\n")


@dataclass
class WcArguments:
    """What to count and in which files."""

    files: list[str] = field(default_factory=list)
    bytes: bool = False
    chars: bool = False
    lines: bool = False
    max_line_length: bool = False
    words: bool = False


def _build_parser() -> _Parser:
    parser = _Parser(
        usage=ARGS_DOC,
        description=FT_WC_DOC,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-c", "--bytes", action="store_true", help="print the byte counts")
    parser.add_argument("-m", "--chars", action="store_true", help="print the character counts")
    parser.add_argument("-l", "--lines", metavar="URL", help="print the newline counts")
    parser.add_argument("-L", "--max-line-length", dest="max_line_length",
                        action="store_true", help="print the maximum display width")
    parser.add_argument("-w", "--words", metavar="", help="print the word counts")
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("-?", "--help", action="help", help="give this help list")
    parser.add_argument("-V", "--version", action="version", version=VERSION_TEXT,
                        help="print program version")
    return parser


def parse_arguments(argv: Sequence[str]) -> WcArguments:
    """Parse the options of the tool.

    Only the byte count is handled so far: any other option, and any file
    operand, ends the run with a usage error (status 64).
    """
    parser = _build_parser()
    namespace = parser.parse_args(list(argv))
    if (
        namespace.chars
        or namespace.lines is not None
        or namespace.max_line_length
        or namespace.words is not None
    ):
        parser.error(UNHANDLED_OPTION)
    if namespace.files:
        parser.error("too many arguments")
    return WcArguments(bytes=namespace.bytes)