import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_calloc_zero_filled():
    buf = calloc(4, 2)
    assert len(buf) == 4 * 2
    assert all(b == 0 for b in buf)


def test_calloc_empty():
    assert calloc(0, 0) == bytearray()


def test_calloc_too_large():
    with pytest.raises(MemoryError):
        calloc(2**32, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_fills_prefix():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"lo"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("z"), 4)
    assert buf == b"zzzz"


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memset_past_end_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 2)
    assert result is dst
    assert dst[:2] == b"ab"
    assert dst[2:] == b"...."


def test_memcpy_same_buffer_untouched():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) is buf
    assert buf == b"same"


def test_memcpy_too_long_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"abc", 4)


def test_memmove_forward_overlap():
    buf = bytearray(b"Hello, World!" + bytes(7))
    memmove(buf, 7, 0, 13)
    assert buf[7:20] == b"Hello, World!"
    assert buf[:7] == b"Hello, "


def test_memmove_backward_overlap():
    original = b"0123456789"
    buf = bytearray(original)
    memmove(buf, 0, 3, 7)
    assert buf[:7] == original[3:]
    assert buf[7:] == original[7:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(5), 3, 0, 4)


def test_memchr_finds_first():
    data = b"TestPlease"
    idx = memchr(data, ord("a"), 10)
    assert data[idx] == ord("a")
    assert ord("a") not in data[:idx]


def test_memchr_respects_limit():
    data = b"TestPlease"
    assert memchr(data, ord("a"), 3) is None
    assert memchr(data, ord("T"), 1) == 0


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_prefix():
    assert memcmp(b"test123", b"test456", 4) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"test123", b"test456"
    assert memcmp(a, b, 7) < 0
    assert memcmp(b, a, 7) == -memcmp(a, b, 7)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_too_long_rejected():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)