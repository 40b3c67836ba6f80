from itertools import product

import pytest

from pycolorparse import config
from pycolorparse.colors import Color
from pycolorparse.named import NAMED_COLORS
from pycolorparse.parser import ColorParser, parse_color

RED = Color(255, 0, 0, 255)


@pytest.fixture
def parse():
    return ColorParser().parse


@pytest.mark.parametrize("input", [None, "", " ", "\t\r\n "])
def test_empty_input(parse, input):
    assert parse(input, ",") == Color.DEFAULT


BYTE_SAMPLES = (0, 1, 9, 10, 99, 128, 254, 255)


@pytest.mark.parametrize("r,g,b", list(product(BYTE_SAMPLES, repeat=3))[::7])
def test_numeric_rgb(parse, r, g, b):
    assert parse("{0},{1},{2}".format(r, g, b), ",") == Color(r, g, b, 255)


@pytest.mark.parametrize("r,g,b,a", list(product(BYTE_SAMPLES, repeat=4))[::31])
def test_numeric_rgba(parse, r, g, b, a):
    assert parse("{0},{1},{2},{3}".format(r, g, b, a), ",") == Color(r, g, b, a)


def test_numeric_with_locale_separator(parse):
    assert parse("10;20;30", ";") == Color(10, 20, 30, 255)
    assert parse("10;20;30;40", ";") == Color(10, 20, 30, 40)
    assert parse(" 10 ; 20 ; 30 ", ";") == Color(10, 20, 30, 255)


@pytest.mark.parametrize(
    "input",
    [
        "1,2",
        "255,",
        ",",
        "1,2,3,4,5",
        "256,0,0",
        "0,0,0,300",
        "1,,3",
        "-1,0,0",
        "1.0,2,3",
        "ff,00,00",
        "ff0000,1",
        "red,0,0",
        "#f00,",
    ],
)
def test_numeric_branch_commits(parse, input):
    assert parse(input, ",") == Color.DEFAULT


def test_separator_decides_the_branch(parse):
    # without the separator, "255,0,0" contains the hex run "255" but is not
    # a valid hexadecimal color, nor a known name
    assert parse("255,0,0", ";") == Color.DEFAULT
    assert parse("f00", ";") == RED
    assert parse("f00", "f") == Color.DEFAULT


@pytest.mark.parametrize(
    "input", ["f00", "F00", "#f00", "ff0000", "#FF0000", "ff0000ff", "#ff0000ff"]
)
def test_hex(parse, input):
    assert parse(input, ",") == RED


def test_hex_short_and_long_forms_agree(parse):
    assert parse("f00", ",") == parse("ff0000", ",") == parse("ff0000ff", ",")
    assert parse("369", ",") == Color(0x33, 0x66, 0x99, 255)


def test_hex_with_alpha(parse):
    assert parse("11223344", ",") == Color(0x11, 0x22, 0x33, 0x44)
    assert parse("#00000000", ",") == Color(0, 0, 0, 0)


@pytest.mark.parametrize(
    "input", ["ffff", "fffff", "fffffff", "fffffffff", "#ffff", "fffffffffffff"]
)
def test_hex_invalid_lengths(parse, input):
    assert parse(input, ",") == Color.DEFAULT


@pytest.mark.parametrize("input", ["xff0000", "ff0000!", "#ff0000#", "0xff0000", "ab"])
def test_hex_with_extra_characters(parse, input):
    assert parse(input, ",") == Color.DEFAULT


@pytest.mark.parametrize("input", ["red", "RED", "Red", "rEd"])
def test_named(parse, input):
    assert parse(input, ",") == RED


def test_named_colors_containing_hex_digits(parse):
    # "aliceblue" contains "ceb" and "cadetblue" contains "cade"; both are
    # still resolved by name
    assert parse("AliceBlue", ",") == Color(240, 248, 255, 255)
    assert parse("cadetblue", ",") == Color(95, 158, 160, 255)
    assert parse("DeepSkyBlue", ",") == Color(0, 191, 255, 255)


@pytest.mark.parametrize("name,spec", NAMED_COLORS)
def test_every_named_color(parse, name, spec):
    assert parse(name, ",") == Color.from_hex(spec)
    assert parse(name.upper(), ",") == Color.from_hex(spec)


@pytest.mark.parametrize("input", ["notacolor", "reddish", "light red", "#red"])
def test_unknown_name(parse, input):
    assert parse(input, ",") == Color.DEFAULT


def test_transparent(parse):
    assert parse("transparent", ",") == Color(0, 0, 0, 0)


@pytest.mark.parametrize(
    "color",
    [Color(0, 0, 0, 255), Color(255, 255, 255, 255), Color(18, 52, 86, 255), RED],
)
def test_hex_round_trip(parse, color):
    assert parse(color.to_hex(), ",") == color
    assert parse("#" + color.to_hex(), ",") == color


@pytest.mark.parametrize(
    "color", [Color(1, 2, 3, 4), Color(200, 100, 50, 255), Color(0, 0, 0, 0)]
)
def test_reparse_is_stable(parse, color):
    assert parse(color.to_hex(alpha=True), ",") == color
    assert parse(color.to_rgba_string(","), ",") == color
    assert parse(color.to_rgba_string(";"), ";") == color

    once = parse(color.to_hex(alpha=True), ",")
    assert parse(once.to_hex(alpha=True), ",") == once


@pytest.mark.parametrize("separator", ["", ",;"])
def test_invalid_separator(parse, separator):
    with pytest.raises(ValueError, match="single character"):
        parse("red", separator)


def test_parse_color_uses_locale_separator(monkeypatch):
    monkeypatch.setattr(config.locale, "localeconv", lambda: {"decimal_point": ","})
    assert parse_color("1;2;3") == Color(1, 2, 3, 255)
    assert parse_color("1,2,3") == Color.DEFAULT

    monkeypatch.setattr(config.locale, "localeconv", lambda: {"decimal_point": "."})
    assert parse_color("1,2,3") == Color(1, 2, 3, 255)


def test_parse_color_with_explicit_separator():
    assert parse_color("1|2|3|4", "|") == Color(1, 2, 3, 4)
    assert parse_color("red", ",") == RED
    assert parse_color("", ",") == Color.DEFAULT


def test_parse_logs_fallbacks(parse, caplog):
    with caplog.at_level("DEBUG", logger="pycolorparse"):
        assert parse("1,2", ",") == Color.DEFAULT
    assert "Expected 3 or 4 components" in caplog.text


def test_very_long_numeric_component(parse):
    assert parse("1,2," + "9" * 5000, ",") == Color.DEFAULT
    assert parse("1,2,3," + "0" * 5000, ",") == Color(1, 2, 3, 0)
