"""String transformation, analysis and searching helpers (ASCII semantics)."""

from __future__ import annotations

import string
from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"
_VOWELS = frozenset("aeiouAEIOU")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _alnum_lowered(text: str) -> str:
    return "".join(c for c in to_lower(text) if c in _ALNUM)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of text."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of text."""
    return text.translate(_TO_LOWER)


def reverse(text: str) -> str:
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True when text reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = _alnum_lowered(text)
    return cleaned == cleaned[::-1]


def is_anagram(first: str, second: str) -> bool:
    """True when both strings hold the same alphanumerics, ignoring case."""
    return sorted(_alnum_lowered(first)) == sorted(_alnum_lowered(second))


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.translate({ord(c): " " for c in _WHITESPACE}).split(" ")) - text.translate(
        {ord(c): " " for c in _WHITESPACE}
    ).split(" ").count("")


def count_vowels(text: str) -> int:
    return sum(1 for c in text if c in _VOWELS)


def trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def trim_left(text: str) -> str:
    return text.lstrip(_WHITESPACE)


def trim_right(text: str) -> str:
    return text.rstrip(_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split text on a single-character delimiter; a trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def join(strings: Iterable[str], delimiter: str) -> str:
    return delimiter.join(strings)


def contains(text: str, substring: str) -> bool:
    return substring in text


def find_nth_occurrence(text: str, substring: str, n: int) -> int:
    """Index of the n-th non-overlapping occurrence of substring, or -1 if there is none.

    For n == 0 the result is 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pos = 0
    for i in range(n):
        pos = text.find(substring, pos)
        if pos == -1:
            return -1
        if i < n - 1:
            pos += len(substring)
    return pos