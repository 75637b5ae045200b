import math
import sys

import pytest

from tomllex.errors import OutOfRangeError, ParseError
from tomllex.numbers import (
    bin_int,
    boolean,
    dec_int,
    digit,
    exp,
    false_,
    float_text,
    frac,
    hex_int,
    hexdig,
    inf,
    integer,
    nan,
    oct_int,
    parse_float,
    special_float,
    true_,
    zero_prefixable_int,
)
from tomllex.scanner import Scanner, parse_complete

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+99", 99),
        ("42", 42),
        ("0", 0),
        ("-17", -17),
        ("1_000", 1000),
        ("5_349_221", 5349221),
        ("1_2_3_4_5", 12345),
        ("0xF", 15),
        ("0o0_755", 493),
        ("0b1_0_1", 5),
        (str(I64_MIN), I64_MIN),
        (str(I64_MAX), I64_MAX),
    ],
)
def test_integers(text, expected):
    assert parse_complete(integer, text) == expected


def test_integer_overflow():
    with pytest.raises(ParseError):
        parse_complete(integer, "1000000000000000000000000000000000")


def test_hex_overflow_is_out_of_range():
    with pytest.raises(OutOfRangeError):
        parse_complete(integer, "0x8000000000000000")


@pytest.mark.parametrize("text", ["1_", "1__2", "0x", "0xG", "0o8", "0b2", "_1"])
def test_invalid_integers(text):
    with pytest.raises(ParseError):
        parse_complete(integer, text)


def test_leading_zero_stops_after_zero():
    scanner = Scanner("01")
    assert integer(scanner) == 0
    assert scanner.pos == 1


def test_failed_integer_restores_position():
    scanner = Scanner("1_x")
    with pytest.raises(ParseError):
        integer(scanner)
    assert scanner.pos == 0


def test_prefixed_ints_return_digits():
    assert hex_int(Scanner("0xdead_BEEF")) == "dead_BEEF"
    assert oct_int(Scanner("0o17")) == "17"
    assert bin_int(Scanner("0b1_1")) == "1_1"


def test_dec_int_text():
    assert dec_int(Scanner("-1_000.5")) == "-1_000"
    assert dec_int(Scanner("+0")) == "+0"


def _assert_float_eq(actual, expected):
    if math.isnan(expected):
        assert math.isnan(actual)
        assert math.copysign(1.0, expected) == math.copysign(1.0, actual)
    elif math.isinf(expected):
        assert math.isinf(actual)
        assert (expected > 0) == (actual > 0)
    else:
        assert abs(expected - actual) < sys.float_info.epsilon


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+1.0", 1.0),
        ("3.1419", 3.1419),
        ("-0.01", -0.01),
        ("5e+22", 5e22),
        ("1e6", 1e6),
        ("-2E-2", -2e-2),
        ("6.626e-34", 6.626e-34),
        ("9_224_617.445_991_228_313", 9224617.445991227),
        ("-1.7976931348623157e+308", -sys.float_info.max),
        ("1.7976931348623157e+308", sys.float_info.max),
        ("nan", math.copysign(math.nan, 1.0)),
        ("+nan", math.copysign(math.nan, 1.0)),
        ("-nan", math.copysign(math.nan, -1.0)),
        ("inf", math.inf),
        ("+inf", math.inf),
        ("-inf", -math.inf),
    ],
)
def test_floats(text, expected):
    _assert_float_eq(parse_complete(parse_float, text), expected)


def test_float_overflow():
    with pytest.raises(ParseError):
        parse_complete(parse_float, "9e99999")


@pytest.mark.parametrize("text", ["1.", "1.x", "1e", "1e+", ".5", "42", "infinity"])
def test_invalid_floats(text):
    with pytest.raises(ParseError):
        parse_complete(parse_float, text)


def test_float_text_keeps_underscores():
    assert float_text(Scanner("1_0.2_5e3 rest")) == "1_0.2_5e3"


def test_float_text_requires_fraction_or_exponent():
    scanner = Scanner("12")
    with pytest.raises(ParseError):
        float_text(scanner)
    assert scanner.pos == 0


def test_frac_and_exp_text():
    assert frac(Scanner(".05")) == ".05"
    assert exp(Scanner("E-07")) == "E-07"
    assert zero_prefixable_int(Scanner("007_1x")) == "007_1"


def test_special_float_sign():
    value = special_float(Scanner("-nan"))
    assert math.isnan(value)
    assert math.copysign(1.0, value) == -1.0
    assert inf(Scanner("inf")) == math.inf
    assert math.isnan(nan(Scanner("nan")))


def test_booleans():
    assert parse_complete(boolean, "true") is True
    assert parse_complete(boolean, "false") is False
    assert true_(Scanner("true")) is True
    assert false_(Scanner("false")) is False


@pytest.mark.parametrize("text", ["tru", "fals", "yes", ""])
def test_invalid_booleans(text):
    scanner = Scanner(text)
    with pytest.raises(ParseError):
        boolean(scanner)
    assert scanner.pos == 0


def test_single_digits():
    assert digit(Scanner("7")) == "7"
    assert hexdig(Scanner("f")) == "f"
    with pytest.raises(ParseError):
        digit(Scanner("a"))
    with pytest.raises(ParseError):
        hexdig(Scanner("g"))