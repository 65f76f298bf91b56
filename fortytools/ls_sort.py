"""Ordering of directory entries and command-line operands for the ls tool."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """Flags accepted by the ls tool: -l, -R, -a, -r and -t."""

    long: bool = False
    recursive: bool = False
    all: bool = False
    reverse: bool = False
    time: bool = False


@dataclass(frozen=True)
class Entry:
    """One directory entry with the parts of its status the listing needs.

    ``mtime`` is in whole seconds. ``is_dir`` is ``None`` when the entry's
    type is not known.
    """

    name: str
    mtime: int = 0
    size: int = 0
    uid: int = 0
    is_dir: bool | None = None


def _bytes(name: str) -> bytes:
    return os.fsencode(name)


def _strcmp(left: str, right: str) -> int:
    a, b = _bytes(left), _bytes(right)
    return (a > b) - (a < b)


def _strcasecmp(left: str, right: str) -> int:
    a, b = _bytes(left).lower(), _bytes(right).lower()
    return (a > b) - (a < b)


def _time_cmp(new: Entry, existing: Entry) -> int:
    return (existing.mtime > new.mtime) - (existing.mtime < new.mtime)


def compare(new: Entry, existing: Entry, options: Options, gnu: bool) -> int:
    """Order ``new`` against ``existing``: negative means ``new`` goes first.

    With ``gnu`` false names are compared byte by byte; with ``gnu`` true
    they are compared without regard to ASCII case, lower case winning ties.
    """
    sign = -1 if options.reverse else 1
    if options.time:
        by_time = _time_cmp(new, existing)
        if by_time:
            return by_time * sign
    if not gnu:
        if options.reverse:
            return _strcmp(existing.name, new.name)
        return _strcmp(new.name, existing.name)
    if _strcasecmp(new.name, existing.name) == 0:
        len_new, len_existing = len(_bytes(new.name)), len(_bytes(existing.name))
        if len_new != len_existing:
            return sign if len_new > len_existing else -sign
        return -sign * _strcmp(new.name, existing.name)
    return _strcasecmp(new.name, existing.name) * sign


def insert_entry(
    entries: list[Entry], entry: Entry, options: Options, gnu: bool
) -> int | None:
    """Insert ``entry`` into the sorted list ``entries`` in place.

    The first entry is always kept. Later entries whose name starts with a
    dot are dropped unless ``options.all`` is set. Equal entries keep their
    arrival order. Returns the index used, or ``None`` if the entry was dropped.
    """
    if not entries:
        entries.append(entry)
        return 0
    if not options.all and entry.name.startswith("."):
        return None
    index = next(
        (i for i, existing in enumerate(entries)
         if compare(entry, existing, options, gnu) < 0),
        len(entries),
    )
    entries.insert(index, entry)
    return index


def build_listing(entries: Iterable[Entry], options: Options, gnu: bool) -> list[Entry]:
    """Return the entries in listing order, as read one by one from a directory."""
    listing: list[Entry] = []
    for entry in entries:
        insert_entry(listing, entry, options, gnu)
    return listing


def _operand_rank(path: str) -> int:
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return 0
    return 2 if stat.S_ISDIR(mode) else 1


def sort_operands(paths: Iterable[str]) -> list[str]:
    """Order operands: missing paths, then other files, then directories.

    Within each group paths are sorted byte by byte. Symbolic links are not
    followed.
    """
    return sorted(paths, key=lambda path: (_operand_rank(path), _bytes(path)))