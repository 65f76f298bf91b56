"""Interactive command shell of the Taskmaster client."""

from __future__ import annotations

import argparse
import errno
import os
import socket
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NoReturn, TextIO

SERVER_URL = "http://localhost:9001"
PROMPT = "\x1b[38;5;44mTaskmaster[\x1b[38;5;82m{user}@{host}\x1b[38;5;44m]:$ \x1b[0m"
CLIENT_DOC = (
    "Taskmaster-client controls applications run by Taskamaster-deamon "
    "from the command line."
)
ARGS_DOC = "[ARGUMENTS]"
VERSION_TEXT = (
    "Taskmaster 0.0\n"
    "This is free software: you are free to change and redistribute it.\n"
    "There is NO WARRANTY, to the extent permitted by law."
)
HELP = (
    "\n"
    "default commands (type help <topic>):\n"
    "=====================================\n"
    "add    exit      open  reload  restart   start   tail\n"
    "avail  fg        pid   remove  shutdown  status  update\n"
    "clear  maintail  quit  reread  signal    stop    version\n\n"
)

_MAX_ATTEMPTS = 6
_HOSTNAME_MAX = 25
_USAGE_STATUS = 64


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(_USAGE_STATUS, f"{self.prog}: {message}\n")


@dataclass
class ClientArguments:
    """Command-line settings of the client; ``None`` means not given."""

    configuration: str | None = None
    interactive: bool = False
    serverurl: str | None = None
    username: str | None = None
    password: str | None = None
    history_file: bool = False


def _build_parser() -> _Parser:
    parser = _Parser(
        usage=f"%(prog)s {ARGS_DOC}",
        description=CLIENT_DOC,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-c", "--configuration", metavar="FILENAME",
                        help="Configuration file path (searches if not given)")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Start an interactive shell after executing commands")
    parser.add_argument("-s", "--serverurl", metavar="URL",
                        help="URL on which supervisord server is listening "
                             f'(default "{SERVER_URL}")')
    parser.add_argument("-u", "--username", metavar="USERNAME",
                        help="Username to use for authentication with server")
    parser.add_argument("-p", "--password", metavar="PASSWORD",
                        help="Password to use for authentication with server")
    parser.add_argument("-r", "--history-file", dest="history_file", action="store_true",
                        help="Keep a readline history (if readline is available)")
    parser.add_argument("-?", "--help", action="help", help="give this help list")
    parser.add_argument("-V", "--version", action="version", version=VERSION_TEXT,
                        help="print program version")
    return parser


def parse_client_args(argv: Sequence[str]) -> ClientArguments:
    """Parse the client's options; bad input exits with status 64."""
    namespace = _build_parser().parse_args(list(argv))
    return ClientArguments(**vars(namespace))


def build_prompt(user: str, host: str) -> str:
    """Return the coloured shell prompt for ``user`` on ``host``."""
    return PROMPT.format(user=user, host=host)


def send_command(command: str, out: TextIO) -> None:
    """Hand ``command`` to the daemon; raises ``OSError`` if it cannot be sent."""
    out.write(f"input to send: {command}\n")


def _deliver(command: str, out: TextIO, err: TextIO, sleep: Callable[[float], object]) -> None:
    for attempt in range(1, _MAX_ATTEMPTS + 1):
        try:
            send_command(command, out)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            err.write(
                f"Attempt {attempt}/{_MAX_ATTEMPTS}: send command to deamon: {reason}\n"
            )
            sleep(attempt)
        else:
            return
    err.write("Failed to connect to deamon\n")


def run_shell(
    prompt: str,
    read_line: Callable[[str], str | None],
    out: TextIO,
    err: TextIO,
    sleep: Callable[[float], object],
) -> int:
    """Read commands until ``exit`` (status 0) or end of input (status 1).

    ``help`` prints the command list; any other non-empty line is sent to
    the daemon, with up to six attempts and a growing pause between them.
    """
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            line = None
        if line is None:
            return 1
        if line == "exit":
            return 0
        if line == "help":
            out.write(HELP)
        elif line:
            _deliver(line, out, err, sleep)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; ``argv`` holds the arguments without the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog_name = sys.argv[0] if sys.argv and sys.argv[0] else "taskmaster-client"
    try:
        user = os.getlogin()
    except OSError:
        return 1
    host = socket.gethostname()
    if len(host) >= _HOSTNAME_MAX:
        sys.stderr.write(f"{prog_name}: {os.strerror(errno.ENAMETOOLONG)}\n")
        return 1
    prompt = build_prompt(user, host)
    parse_client_args(args)
    try:
        import readline
    except ImportError:
        readline = None
    try:
        return run_shell(prompt, input, sys.stdout, sys.stderr, time.sleep)
    finally:
        clear = getattr(readline, "clear_history", None)
        if clear is not None:
            clear()


if __name__ == "__main__":
    raise SystemExit(main())