"""Byte-buffer helpers modelled on the classic mem* routines."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

__all__ = [
    "memccpy",
    "memchr",
    "memcmp",
    "memcpy",
    "memmem",
    "memmove",
    "memrchr",
    "memset",
    "realloc",
]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("length must be non-negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError(f"length {n} exceeds buffer size")


def memccpy(dst: WritableBuffer, src: Buffer, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the first byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past the
    copied ``c``, or None if ``c`` was not among the first ``n`` bytes.
    """
    _check_length(n, dst, src)
    chunk = bytes(src[:n])
    stop = chunk.find(c & 0xFF)
    copied = n if stop == -1 else stop + 1
    dst[:copied] = chunk[:copied]
    return None if stop == -1 else copied


def memchr(data: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memrchr(data: Buffer, c: int, n: int) -> int | None:
    """Return the index of the last byte ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).rfind(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dst``, correct even when they overlap."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmem(big: Buffer, little: Buffer) -> int | None:
    """Return the index of the first occurrence of ``little`` in ``big``, or None.

    Empty buffers and a ``little`` longer than ``big`` never match.
    """
    if not len(big) or not len(little) or len(little) > len(big):
        return None
    index = bytes(big).find(bytes(little))
    return None if index == -1 else index


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def realloc(data: Buffer | None, size: int) -> bytearray | None:
    """Return a new buffer of ``size`` bytes holding as much of ``data`` as fits.

    Extra room is zero-filled. A missing ``data`` gives None.
    """
    if data is None:
        return None
    if size < 0:
        raise ValueError("size must be non-negative")
    resized = bytearray(size)
    keep = min(size, len(data))
    resized[:keep] = data[:keep]
    return resized