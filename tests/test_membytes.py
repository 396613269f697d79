import pytest

from solong.membytes import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"Hello World")
    result = memset(buf, ord("k"), 3)
    assert result is buf
    assert buf[:3] == b"kkk"
    assert buf[3:] == b"lo World"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert set(buf) == {0xFF}


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"Hello")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[4] == ord("o")


def test_calloc_zeroed():
    buf = calloc(10, 4)
    assert len(buf) == 40
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_memchr_finds_within_length():
    buf = b"Hello.World"
    index = memchr(buf, ord("."), 6)
    assert buf[index] == ord(".")
    assert buf[:index] == b"Hello"


def test_memchr_not_within_length():
    assert memchr(b"Hello.World", ord("."), 5) is None


def test_memcmp_case_difference():
    assert memcmp(b"ABCD", b"abcd", 4) == -32
    assert memcmp(b"abcd", b"ABCD", 4) == 32


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"wlcome")
    result = memcpy(dst, b"Hello World", 6)
    assert result is dst
    assert dst == bytearray(b"Hello World"[:6])


def test_memcpy_too_long():
    with pytest.raises(IndexError):
        memcpy(bytearray(3), b"Hello", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    before = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == before[0:4]
    assert buf[:2] == before[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    before = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == before[2:6]
    assert buf[4:] == before[4:]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)