"""Writing characters, numbers, strings and code points to a stream."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import BinaryIO, TextIO

__all__ = ["encode_unicode", "print_strarr", "print_unicode", "printchar", "printint", "printstr"]

_MAX_CODE_POINT = 0x10FFFF


def printchar(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    (stream or sys.stdout).write(c)


def printint(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` in decimal."""
    (stream or sys.stdout).write(str(n))


def printstr(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` as it is."""
    (stream or sys.stdout).write(s)


def print_strarr(arr: Iterable[str] | None, delim: str | None, stream: TextIO | None = None) -> None:
    """Write the strings of ``arr`` separated by ``delim``, then a newline.

    Nothing is written when ``arr`` or ``delim`` is None.
    """
    if arr is None or delim is None:
        return
    (stream or sys.stdout).write(delim.join(arr) + "\n")


def encode_unicode(c: str | int) -> bytes:
    """Return the UTF-8 bytes of a character or code point."""
    code = ord(c) if isinstance(c, str) else c
    if not 0 <= code <= _MAX_CODE_POINT:
        raise ValueError(f"code point {code:#x} is out of range")
    if code < 0x80:
        return bytes([code])
    if code < 0x800:
        return bytes([0xC0 | code >> 6 & 0x1F, 0x80 | code & 0x3F])
    if code < 0x10000:
        return bytes([0xE0 | code >> 12 & 0x0F, 0x80 | code >> 6 & 0x3F, 0x80 | code & 0x3F])
    return bytes(
        [
            0xF0 | code >> 18 & 0x07,
            0x80 | code >> 12 & 0x3F,
            0x80 | code >> 6 & 0x3F,
            0x80 | code & 0x3F,
        ]
    )


def print_unicode(c: str | int, stream: BinaryIO | None = None) -> None:
    """Write the UTF-8 bytes of ``c`` to a binary stream (standard output by default)."""
    data = encode_unicode(c)
    if stream is None:
        sys.stdout.flush()
        stream = sys.stdout.buffer
    stream.write(data)