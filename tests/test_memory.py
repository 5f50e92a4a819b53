import pytest

from libmx.memory import (
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmem,
    memmove,
    memrchr,
    memset,
    realloc,
)


def test_memccpy_stops_after_char():
    src = b"abc:def"
    dst = bytearray(len(src))
    pos = memccpy(dst, src, ord(":"), len(src))
    assert pos == src.index(b":") + 1
    assert dst[:pos] == src[:pos]
    assert dst[pos:] == bytearray(len(src) - pos)


def test_memccpy_not_found_copies_n():
    src = b"abcdef"
    dst = bytearray(6)
    assert memccpy(dst, src, ord("z"), 4) is None
    assert dst[:4] == src[:4]
    assert dst[4:] == bytearray(2)


def test_memccpy_length_too_large():
    with pytest.raises(ValueError):
        memccpy(bytearray(2), b"abcd", ord("a"), 4)


def test_memchr_finds_first():
    data = b"hello"
    idx = memchr(data, ord("l"), len(data))
    assert data[idx] == ord("l")
    assert ord("l") not in data[:idx]


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memrchr_finds_last():
    data = b"hello world"
    idx = memrchr(data, ord("o"), len(data))
    assert data[idx] == ord("o")
    assert ord("o") not in data[idx + 1:]


def test_memrchr_missing():
    assert memrchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_and_limited():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign_and_antisymmetry():
    assert memcmp(b"a", b"b", 1) < 0
    assert memcmp(b"ab", b"aa", 2) == -memcmp(b"aa", b"ab", 2)


def test_memcpy_copies_prefix_and_returns_dst():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abcd", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"xxx"


def test_memcpy_length_too_large():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_memmove_overlapping():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmem_finds_match():
    big = b"one two three"
    little = b"two"
    idx = memmem(big, little)
    assert big[idx:idx + len(little)] == little


@pytest.mark.parametrize(
    "big,little",
    [(b"", b"a"), (b"abc", b""), (b"ab", b"abc"), (b"abc", b"zz")],
)
def test_memmem_no_match(big, little):
    assert memmem(big, little) is None


def test_memset_fills_prefix():
    buf = bytearray(5)
    result = memset(buf, 0x41, 3)
    assert result is buf
    assert buf == bytearray(b"AAA\x00\x00")


def test_memset_length_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_realloc_grow_keeps_prefix():
    data = b"abc"
    grown = realloc(data, 6)
    assert len(grown) == 6
    assert grown[:3] == data
    assert grown[3:] == bytearray(3)


def test_realloc_shrink_truncates():
    data = bytearray(b"abcdef")
    shrunk = realloc(data, 2)
    assert shrunk == data[:2]
    assert shrunk is not data


def test_realloc_none():
    assert realloc(None, 4) is None