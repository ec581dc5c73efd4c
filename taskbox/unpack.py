"""Expansion of strings packed as characters followed by repeat counts."""

from __future__ import annotations

import re

_DIGITS = frozenset("0123456789")

# A character (or a backslash-escaped digit or backslash) and an optional count.
_PIECE = re.compile(r"(?:\\(?P<escaped>[0-9\\])|(?P<char>[^0-9\\]))(?P<count>[0-9]?)")


class InvalidStringError(ValueError):
    """Raised when a packed string is malformed."""

    def __init__(self, message: str = "invalid string") -> None:
        super().__init__(message)


def is_digit(char: str) -> bool:
    """Return True if ``char`` is a single ASCII digit."""
    return char in _DIGITS


def unpack(text: str) -> str:
    """Expand ``text`` such as ``"a4bc2"`` into ``"aaaabcc"``.

    A digit repeats the preceding character that many times (``0`` drops it).
    A backslash escapes a following digit or backslash.
    """
    parts: list[str] = []
    position = 0
    for match in _PIECE.finditer(text):
        if match.start() != position:
            raise InvalidStringError()
        escaped = match["escaped"]
        char = escaped if escaped is not None else match["char"]
        count = match["count"]
        parts.append(char * int(count) if count else char)
        position = match.end()
    if position != len(text):
        raise InvalidStringError()
    return "".join(parts)