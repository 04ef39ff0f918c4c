import pytest

from pipex.chars import (
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

ALL_CODES = range(-5, 300)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code).isalpha()
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in "0123456789"
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_accepts_single_character_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("_") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("letter", "abcdefghijklmnopqrstuvwxyz")
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("code", [c for c in range(256) if not is_alpha(c)])
def test_case_mapping_leaves_non_letters(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_case_mapping_keeps_input_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower("Z") == "z"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(n):
    text = itoa(n)
    assert text == str(n)
    assert atoi(text) == n


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-123abc") == -123
    assert atoi("+77 88") == 77


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(1.5)