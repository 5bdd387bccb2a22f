import string

import pytest

from barbiesh.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    striteri,
    strmapi,
    to_lower,
    to_upper,
)


def test_is_alpha_letters_and_others():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not any(is_alpha(c) for c in string.digits + string.punctuation + " ")


def test_is_digit():
    assert all(is_digit(c) for c in string.digits)
    assert not any(is_digit(c) for c in string.ascii_letters)


def test_is_alnum_matches_union():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_rejects_multi_char_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_case_mapping_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower


def test_case_mapping_leaves_non_letters():
    for c in string.digits + string.punctuation:
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_case_mapping_keeps_int_type():
    assert to_upper(ord("y")) == ord("Y")
    assert to_lower(ord("T")) == ord("t")


def test_atoi_source_example():
    assert atoi(" +1652hed3") == 1652


def test_atoi_no_digits_gives_zero():
    assert atoi("hello") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0
    assert atoi("   ") == 0


def test_atoi_negative_with_whitespace():
    assert atoi("\t\n -9876xyz") == -9876


def test_itoa_source_examples():
    assert itoa(12345) == "12345"
    assert itoa(-9876) == "-9876"
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_strmapi_uses_index():
    result = strmapi("Hello, World!", lambda i, c: to_upper(c) if i % 2 == 0 else c)
    assert len(result) == len("Hello, World!")
    assert result.lower() == "hello, world!"
    assert result[0] == "H" and result[2] == "L"


def test_strmapi_requires_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_modifies_in_place():
    chars = list("Hello")
    striteri(chars, lambda i, c: to_upper(c))
    assert "".join(chars) == "Hello".upper()


def test_striteri_none_keeps_item():
    chars = list("abc")
    seen = []
    striteri(chars, lambda i, c: seen.append(i))
    assert chars == ["a", "b", "c"]
    assert seen == [0, 1, 2]