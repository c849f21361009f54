import pytest

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)


def test_format_char_from_str():
    assert format_char("a") == "a"


def test_format_char_from_int():
    assert format_char(ord("Z")) == "Z"


def test_format_char_keeps_low_byte():
    assert format_char(256 + ord("A")) == "A"


def test_format_char_nul_is_one_character():
    assert len(format_char(0)) == 1


def test_format_char_rejects_long_str():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_char_rejects_other_types():
    with pytest.raises(TypeError):
        format_char(1.5)


@pytest.mark.parametrize("value", [0, 1, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_format_hex_round_trip(value):
    assert int(format_hex(value, "x"), 16) == value
    assert int(format_hex(value, "X"), 16) == value


@pytest.mark.parametrize("value", [10, 171, 48879, 2**32 - 1])
def test_format_hex_case(value):
    lower = format_hex(value, "x")
    upper = format_hex(value, "X")
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert lower.upper() == upper


def test_format_hex_wraps_negative_to_unsigned():
    assert int(format_hex(-1, "x"), 16) == 2**32 - 1


def test_format_hex_matches_builtin():
    assert format_hex(3054, "x") == format(3054, "x")


def test_format_hex_rejects_bad_case():
    with pytest.raises(ValueError):
        format_hex(10, "o")


@pytest.mark.parametrize("value", [0, 7, -7, 42, -42, 2**31 - 1, -(2**31) + 1])
def test_format_int_round_trip(value):
    assert int(format_int(value)) == value


def test_format_int_minimum():
    assert format_int(-(2**31)) == "-2147483648"


def test_format_int_wraps_overflow():
    assert format_int(2**31) == "-2147483648"
    assert int(format_int(2**32 + 5)) == 5


@pytest.mark.parametrize("value", [0, 9, 10, 12345, 2**32 - 1])
def test_format_unsigned_round_trip(value):
    assert int(format_unsigned(value)) == value


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


def test_format_pointer_null():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"


@pytest.mark.parametrize("address", [1, 0xDEAD, 0x7FFF_FFFF_FFFF])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text, 16) == address
    assert text == text.lower()


def test_format_string_passthrough():
    assert format_string("hello world") == "hello world"


def test_format_string_null():
    assert format_string(None) == "(null)"


def test_format_string_stops_at_nul():
    assert format_string("abc\0def") == "abc"