import string

import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.ascii_letters
        assert is_alpha(code) == expected


def test_is_digit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.digits
        assert is_digit(code) == expected


def test_is_alnum_is_alpha_or_digit():
    for code in CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_range():
    assert [code for code in CODES if is_ascii(code)] == list(range(128))


def test_is_print_range():
    assert [code for code in CODES if is_print(code)] == list(range(32, 127))


def test_accepts_single_character_strings():
    assert is_alpha("u") == is_alpha(ord("u"))
    assert is_digit("o") == is_digit(ord("o"))
    assert is_print("(") == is_print(40)


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_conversion_strings():
    for letter in string.ascii_lowercase:
        assert to_upper(letter) == letter.upper()
        assert to_lower(letter.upper()) == letter


def test_case_conversion_leaves_others_alone():
    for code in CODES:
        if not is_alpha(code):
            assert to_lower(code) == code
            assert to_upper(code) == code


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("r")) == ord("R")
    assert to_lower(ord("U")) == ord("u")


def test_case_round_trip():
    for letter in string.ascii_letters:
        assert to_lower(to_upper(letter)) == letter.lower()


def test_atoi_double_sign_gives_zero():
    assert atoi(" -+99") == 0


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_without_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


@pytest.mark.parametrize("n", [0, 7, -532, 2**31 - 1, -(2**31), 1000000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_atoi_wraps_like_int():
    assert atoi(str(2**31)) == -(2**31)
    assert atoi(str(-(2**31))) == -(2**31)


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)