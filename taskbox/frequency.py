"""Word frequency analysis: the ten most frequent words of a text."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

PATTERN = re.compile(
    r"[a-zA-Zа-яА-Я0-9]+[.\-,]*[a-zA-Zа-яА-Я0-9]+|-{2,}|[a-zA-Zа-яА-Я0-9]+"
)


@dataclass(frozen=True)
class WordWidth:
    """A word together with the number of times it occurs."""

    word: str
    width: int


def split_words(text: str, pattern: re.Pattern[str] | None = None) -> list[str]:
    """Split ``text`` into words.

    With a pattern, words are its matches; without one, whitespace separates them.
    """
    if not text:
        return []
    if pattern is None:
        return text.split()
    return pattern.findall(text)


def words_widths_sort(words: list[str], ignore_case: bool = False) -> list[WordWidth]:
    """Count the words and sort them by count descending, then alphabetically."""
    counts = Counter(word.lower() if ignore_case else word for word in words)
    ordered = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
    return [WordWidth(word, width) for word, width in ordered]


def top10(text: str) -> list[str]:
    """Return up to ten most frequent words of ``text``, case-insensitively."""
    words = split_words(text, PATTERN)
    return [entry.word for entry in words_widths_sort(words, ignore_case=True)[:10]]