import pytest

from ftkit.convert import atoi, itoa

INT32 = [0, 1, -1, 7, -42, 123456, -987654, 2147483647, -2147483648]


@pytest.mark.parametrize("n", INT32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", INT32)
def test_itoa_matches_str(n):
    assert itoa(n) == str(n)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("  +17 18") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("+-5") == 0
    assert atoi("- 5") == 0


def test_atoi_positive_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("99999999999999999999999") == -1


def test_atoi_negative_overflow():
    assert atoi("-9223372036854775809") == 0
    assert atoi("-99999999999999999999999") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


def test_atoi_leading_zeros():
    assert atoi("000123") == atoi("123")


def test_atoi_non_ascii_digits_stop_parsing():
    assert atoi("12\u0663") == 12