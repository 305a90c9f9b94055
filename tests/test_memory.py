import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"xxxxx"
    assert buf[5:] == b" world"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("a"), 4)
    assert buf == b"aaaa"


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 3) is None
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_zero_length_changes_nothing():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == b"abc"


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_masks_character():
    data = b"abc"
    assert memchr(data, 0x100 + ord("c"), 3) == data.index(b"c")


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_rejects_overrun():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, 10)


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_only_looks_at_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"abc", b"abd"
    assert memcmp(a, b, 3) < 0
    assert memcmp(b, a, 3) == -memcmp(a, b, 3)


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(b"------")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == b"abc---"


def test_memcpy_both_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_none():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), None, 1)


@pytest.mark.parametrize("dst,src", [(2, 0), (0, 2), (1, 1)])
def test_memmove_overlap_keeps_source_bytes(dst, src):
    original = bytes(b"abcdefgh")
    buf = bytearray(original)
    result = memmove(buf, dst, src, 5)
    assert result is buf
    assert buf[dst:dst + 5] == original[src:src + 5]


def test_memmove_forward_overlap_example():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)