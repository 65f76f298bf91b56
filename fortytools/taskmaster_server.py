"""Command-line options of the Taskmaster daemon."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn

SERVER_URL = "http://localhost:9001"
SOCKET_FILE_MODE = "0700"
SERVER_DOC = "Taskamaster-deamon runs a set of applications as daemons."
ARGS_DOC = "[ARGUMENTS]"
VERSION_TEXT = (
    "Taskmaster 0.0\n"
    "This is free software: you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law."
)

_USAGE_STATUS = 64


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(_USAGE_STATUS, f"{self.prog}: {message}\n")


@dataclass
class ServerArguments:
    """Command-line settings of the daemon; ``None`` means not given."""

    configuration: str | None = None
    nodaemon: bool = False
    user: str | None = None
    umask: str | None = None
    directory: str | None = None
    logfile: str | None = None
    logfile_maxbytes: str | None = None
    logfile_backups: str | None = None
    loglevel: str | None = None
    pidfile: str | None = None
    identifier: str | None = None
    childlogdir: str | None = None
    nocleanup: bool = False
    minfds: str | None = None
    strip_ansi: bool = False
    minprocs: str | None = None
    profile_options: str | None = None


_VALUE_OPTIONS = (
    ("-c", "--configuration", "FILENAME", "Configuration file path (searches if not given)"),
    ("-u", "--user", "USER", "Run Taskmaster-deamon as this user (or numeric uid)"),
    ("-m", "--umask", "UMASK", "Use this umask for daemon subprocess (default is 022)"),
    ("-d", "--directory", "DIRECTORY", "Directory to chdir to when daemonized"),
    ("-l", "--logfile", "FILENAME", "Use FILENAME as logfile path"),
    ("-y", "--logfile_maxbytes", "BYTES", "Use BYTES to limit the max size of logfile"),
    ("-z", "--logfile_backups", "NUM", "Number of backups to keep when max bytes reached"),
    ("-e", "--loglevel", "LEVEL", "Use LEVEL as log level (debug,info,warn,error,critical)"),
    ("-j", "--pidfile", "FILENAME", "Write a pid file for the daemon process to FILENAME"),
    ("-i", "--identifier", "STR", "Identifier used for this instance of Taskmaster-deamon"),
    ("-q", "--childlogdir", "DIRECTORY", "The log directory for child process logs"),
    ("-a", "--minfds", "NUM", "The minimum number of file descriptors for start success"),
    ("-p", "--minprocs", "NUM", "The minimum number of processes available for start success"),
    ("-o", "--profile_options", "OPTIONS",
     "Run Taskmaster-deamon under profiler and output results based on OPTIONS, "
     "which  is a comma-sep'd list of 'cumulative', 'calls', and/or 'callers', "
     "e.g. 'cumulative,callers')"),
)

_FLAG_OPTIONS = (
    ("-n", "--nodaemon", "Run in the foreground (same as 'nodaemon=true' in config file)"),
    ("-k", "--nocleanup",
     "Prevent the process from performing cleanup (removal of old automatic "
     "child log files) at startup"),
    ("-t", "--strip_ansi", "Strip ansi escape codes from process output"),
)


def _build_parser() -> _Parser:
    parser = _Parser(
        usage=f"%(prog)s {ARGS_DOC}",
        description=SERVER_DOC,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    for short, long, metavar, text in _VALUE_OPTIONS:
        parser.add_argument(short, long, metavar=metavar, help=text)
    for short, long, text in _FLAG_OPTIONS:
        parser.add_argument(short, long, action="store_true", help=text)
    parser.add_argument("-?", "--help", action="help", help="give this help list")
    parser.add_argument("-V", "--version", action="version", version=VERSION_TEXT,
                        help="print program version")
    return parser


def parse_server_args(argv: Sequence[str]) -> ServerArguments:
    """Parse the daemon's options; bad input exits with status 64."""
    namespace = _build_parser().parse_args(list(argv))
    return ServerArguments(**vars(namespace))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; ``argv`` holds the arguments without the program name."""
    parse_server_args(list(sys.argv[1:] if argv is None else argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())