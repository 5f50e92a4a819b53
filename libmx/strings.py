"""String helpers: trimming, searching, splitting, comparing and joining."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import islice, zip_longest

_WHITESPACE = "\t\n\v\f\r "
_WHITESPACE_RUN = re.compile(r"([\t\n\v\f\r ])[\t\n\v\f\r ]+")

__all__ = [
    "count_substr",
    "count_words",
    "del_extra_spaces",
    "find_substr",
    "get_char_index",
    "get_substr_index",
    "get_substr_nth_index",
    "greater",
    "is_space",
    "join",
    "replace_substr",
    "reverse",
    "split",
    "strcmp",
    "strtrim",
]


def is_space(c: str) -> bool:
    """Return True if ``c`` is one of tab, newline, vertical tab, form feed, CR or space."""
    return len(c) == 1 and c in _WHITESPACE


def strtrim(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip(_WHITESPACE)


def del_extra_spaces(text: str) -> str:
    """Trim ``text`` and shrink every run of whitespace to its first character."""
    return _WHITESPACE_RUN.sub(r"\1", strtrim(text))


def _occurrences(text: str, sub: str) -> Iterator[int]:
    """Yield the start of every occurrence of ``sub`` in ``text``, overlaps included."""
    if not sub:
        return
    pos = text.find(sub)
    while pos != -1:
        yield pos
        pos = text.find(sub, pos + 1)


def count_substr(text: str, sub: str) -> int:
    """Count the occurrences of ``sub`` in ``text``, overlapping ones included."""
    return sum(1 for _ in _occurrences(text, sub))


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on ``delim``, dropping empty pieces."""
    return [word for word in text.split(delim) if word]


def count_words(text: str, delim: str) -> int:
    """Count the non-empty words of ``text`` separated by ``delim``."""
    return len(split(text, delim))


def get_char_index(text: str, c: str) -> int:
    """Return the index of the first ``c`` in ``text``, or -1 if absent.

    Raises ValueError for an empty ``text``.
    """
    if not text:
        raise ValueError("cannot search an empty string")
    return text.find(c)


def get_substr_index(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub`` in ``text``, or -1."""
    return next(_occurrences(text, sub), -1)


def get_substr_nth_index(text: str, sub: str, count: int) -> int:
    """Return the index of the ``count``-th (0-based) occurrence of ``sub``, or -1."""
    if count < 0:
        return -1
    return next(islice(_occurrences(text, sub), count, None), -1)


def replace_substr(text: str, sub: str, replacement: str) -> str:
    """Replace every occurrence of ``sub`` in ``text`` with ``replacement``."""
    if not sub:
        return text
    return text.replace(sub, replacement)


def find_substr(haystack: str, needle: str) -> str | None:
    """Return the tail of ``haystack`` starting at ``needle``, or None if absent."""
    index = get_substr_index(haystack, needle)
    return None if index == -1 else haystack[index:]


def strcmp(a: str, b: str) -> int:
    """Return the code point difference at the first position where ``a`` and ``b`` differ."""
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def greater(a: str, b: str) -> bool:
    """Return True if ``a`` sorts after ``b``."""
    return strcmp(a, b) > 0


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def join(a: str | None, b: str | None) -> str | None:
    """Concatenate ``a`` and ``b``; a missing side is skipped, both missing gives None."""
    if a is None and b is None:
        return None
    return (a or "") + (b or "")