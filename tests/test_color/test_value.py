"""Tests for the color value model."""

from __future__ import annotations

import pytest

from iconshade.color.value import (
    NONE_COLOR,
    Rgba,
    format_hex,
    is_none_value,
    parse_color,
    validate_color_input,
)
from iconshade.errors import InvalidColor


def test_parse_long_hex():
    token = parse_color("#FF8000")
    assert token.rgba == Rgba(255, 128, 0, 255)
    assert not token.explicit_alpha
    assert token.text == "#FF8000"


def test_parse_short_hex_duplicates_digits():
    token = parse_color("#a1c")
    assert token.rgba == Rgba(0xAA, 0x11, 0xCC, 255)
    assert not token.explicit_alpha


def test_parse_alpha_forms():
    assert parse_color("#0008").rgba == Rgba(0, 0, 0, 0x88)
    token = parse_color("#11223344")
    assert token.rgba == Rgba(0x11, 0x22, 0x33, 0x44)
    assert token.explicit_alpha


def test_parse_trims_whitespace():
    assert parse_color("  #abcdef \n").text == "#abcdef"


@pytest.mark.parametrize("text", ["none", "NONE", " None "])
def test_parse_none_keyword(text):
    token = parse_color(text)
    assert token is NONE_COLOR
    assert token.is_none
    assert token.to_hex() == "none"


@pytest.mark.parametrize("text", ["#12", "#12345", "#1234567", "#123456789", "123456", "#ggg", "red", ""])
def test_parse_rejects_unsupported(text):
    with pytest.raises(InvalidColor) as exc:
        parse_color(text)
    assert exc.value.value == text


def test_invalid_color_message_names_value_and_formats():
    with pytest.raises(InvalidColor, match="#12") as exc:
        parse_color("#12")
    assert "#rrggbb" in str(exc.value)
    assert "none" in str(exc.value)


def test_format_hex():
    assert format_hex(Rgba(255, 0, 10), False) == "#ff000a"
    assert format_hex(Rgba(255, 0, 10, 5), True) == "#ff000a05"
    assert format_hex(Rgba(1, 2, 3, 4), False) == "#010203"


@pytest.mark.parametrize("text", ["#00FFcc", "#abcdef", "#12345678", "#FFFFFF00"])
def test_hex_round_trip(text):
    token = parse_color(text)
    assert format_hex(token.rgba, token.explicit_alpha) == text.lower()


def test_short_forms_serialize_expanded():
    assert parse_color("#abc").to_hex() == "#aabbcc"
    assert parse_color("#abcd").to_hex() == "#aabbccdd"


def test_rgba_rejects_out_of_range():
    with pytest.raises(ValueError):
        Rgba(256, 0, 0)


def test_validate_color_input():
    assert validate_color_input(" #FF3300 ") == "#FF3300"
    assert validate_color_input("NONE") == "none"
    with pytest.raises(InvalidColor):
        validate_color_input("#zz")


def test_is_none_value():
    assert is_none_value(" NoNe ")
    assert not is_none_value("#000")
