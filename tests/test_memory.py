import pytest

from forkunit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_basic_fills_prefix():
    buffer = bytearray(10)
    result = memset(buffer, ord("A"), 5)
    assert result is buffer
    assert bytes(buffer[:5]) == b"AAAAA"
    assert bytes(buffer[5:]) == bytes(5)


def test_memset_zero_len_leaves_buffer():
    buffer = bytearray(b"test")
    memset(buffer, ord("X"), 0)
    assert buffer == bytearray(b"test")


def test_memset_truncates_value_to_byte():
    buffer = bytearray(3)
    memset(buffer, 0x141, 3)
    assert buffer == bytearray(b"AAA")


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_basic():
    buffer = bytearray(b"hello\0\0\0\0\0")
    bzero(buffer, 3)
    assert buffer[0] == 0 and buffer[1] == 0 and buffer[2] == 0
    assert buffer[3] == ord("l")


def test_bzero_zero_len():
    buffer = bytearray(b"test")
    bzero(buffer, 0)
    assert buffer == bytearray(b"test")


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(8)
    result = memcpy(dest, b"hello", 5)
    assert result is dest
    assert bytes(dest[:5]) == b"hello"
    assert bytes(dest[5:]) == bytes(3)


def test_memcpy_source_too_short_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_non_overlapping_matches_source():
    original = b"0123456789"
    buffer = bytearray(original)
    memmove(buffer, 6, 0, 3)
    assert bytes(buffer[6:9]) == original[0:3]
    assert bytes(buffer[:6]) == original[:6]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_value():
    data = b"string"
    index = memchr(data, ord("t"), len(data))
    assert index == 1
    assert data[index] == ord("t")


def test_memchr_respects_limit():
    assert memchr(b"string", ord("t"), 1) is None


def test_memchr_missing_value():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"\x80", b"\x01", 1) == -memcmp(b"\x01", b"\x80", 1)
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_calloc_is_zeroed():
    buffer = calloc(4, 3)
    assert len(buffer) == 12
    assert not any(buffer)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)