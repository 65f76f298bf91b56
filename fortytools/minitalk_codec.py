"""Bit-level encoding used to send numbers and text one signal at a time.

A bit of 1 stands for the first user signal and 0 for the second. Numbers
travel as decimal digits, four bits each, most significant first, closed by
four 1 bits. Text travels as seven bits per character, most significant first.
"""

from __future__ import annotations

from collections.abc import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_TERMINATOR = (1, 1, 1, 1)
_CHAR_BITS = 7


def _check_int(number: int) -> None:
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit integer")


def atoi(text: str) -> int:
    """Read a leading decimal integer the way the tools' own parser does.

    Leading white space is skipped; a ``-`` followed by ``+`` gives 0.
    Values past the 64-bit range give -1 (or 0 when negative); the result is
    then wrapped to a 32-bit integer.
    """
    index = 0
    while index < len(text) and (text[index] == " " or "\t" <= text[index] <= "\r"):
        index += 1
    negative = False
    if index < len(text) and text[index] == "-":
        negative = True
        index += 1
    if index < len(text) and text[index] == "+":
        if negative:
            return 0
        index += 1
    value = 0
    while index < len(text) and "0" <= text[index] <= "9":
        value = value * 10 + ord(text[index]) - ord("0")
        index += 1
    if value > _LONG_MAX:
        return 0 if negative else -1
    if negative:
        value = -value
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    _check_int(number)
    return str(number)


def format_number(number: int) -> str:
    """Return a 32-bit integer as it is printed on a descriptor."""
    _check_int(number)
    return f"{number:d}"


def checksum(text: str | bytes) -> int:
    """Count the set bits among the six low bits of every character."""
    data = text.encode() if isinstance(text, str) else bytes(text)
    return sum(bin(byte & 0x3F).count("1") for byte in data)


def encode_number(number: int) -> list[int]:
    """Return the bits that carry ``number``: a nibble per digit, then 1111."""
    bits: list[int] = []
    for char in itoa(number):
        code = ord(char)
        bits.extend((code >> shift) & 1 for shift in range(3, -1, -1))
    bits.extend(_TERMINATOR)
    return bits


def encode_message(text: str) -> list[int]:
    """Return the bits that carry ``text``, seven per character.

    Raises ``ValueError`` for empty text or for characters outside ASCII.
    """
    if not text:
        raise ValueError("message is empty")
    bits: list[int] = []
    for char in text:
        code = ord(char)
        if code > 0x7F:
            raise ValueError(f"character {char!r} is not ASCII")
        bits.extend((code >> shift) & 1 for shift in range(_CHAR_BITS - 1, -1, -1))
    return bits


class NumberDecoder:
    """Rebuild numbers from bits sent by :func:`encode_number`."""

    def __init__(self) -> None:
        self._nibble: list[int] = []
        self._value = 0

    def feed(self, bit: int) -> int | None:
        """Take one bit; return the number once its terminator is complete."""
        self._nibble.append(1 if bit else 0)
        if len(self._nibble) < 4:
            return None
        nibble = 0
        for value in self._nibble:
            nibble = (nibble << 1) | value
        self._nibble.clear()
        if nibble == 0b1111:
            result, self._value = self._value, 0
            return result
        self._value = self._value * 10 + nibble
        return None

    def feed_all(self, bits: Iterable[int]) -> list[int]:
        """Feed several bits and return every number completed on the way."""
        return [number for number in map(self.feed, bits) if number is not None]


class MessageDecoder:
    """Rebuild a message of known length from bits sent by :func:`encode_message`."""

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError("message length must be positive")
        self.length = length
        self._codes: list[int] = []
        self._current = 0
        self._bits = 0

    @property
    def complete(self) -> bool:
        """Whether every character has been received."""
        return len(self._codes) == self.length

    def feed(self, bit: int) -> str | None:
        """Take one bit; return the whole message once its last bit arrives.

        Raises ``ValueError`` if the message is already complete.
        """
        if self.complete:
            raise ValueError("message already complete")
        self._current = (self._current << 1) | (1 if bit else 0)
        self._bits += 1
        if self._bits < _CHAR_BITS:
            return None
        self._codes.append(self._current)
        self._current = 0
        self._bits = 0
        if self.complete:
            return "".join(map(chr, self._codes))
        return None