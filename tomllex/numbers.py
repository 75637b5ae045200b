"""Booleans, integers and floats."""

from __future__ import annotations

import functools
import math
from collections.abc import Callable
from typing import TypeVar

from tomllex.errors import OutOfRangeError, ParseError
from tomllex.scanner import Scanner

R = TypeVar("R")

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

TRUE = "true"
FALSE = "false"
INF = "inf"
NAN = "nan"
HEX_PREFIX = "0x"
OCT_PREFIX = "0o"
BIN_PREFIX = "0b"

_DIGITS = frozenset("0123456789")
_DIGITS_1_9 = frozenset("123456789")
_DIGITS_0_7 = frozenset("01234567")
_DIGITS_0_1 = frozenset("01")
_HEXDIGS = frozenset("0123456789ABCDEFabcdef")


def _backtracking(rule: Callable[[Scanner], R]) -> Callable[[Scanner], R]:
    """Restore the scanner position when ``rule`` fails."""

    @functools.wraps(rule)
    def wrapper(scanner: Scanner) -> R:
        start = scanner.pos
        try:
            return rule(scanner)
        except ParseError:
            scanner.pos = start
            raise

    return wrapper


def _one_of(scanner: Scanner, allowed: frozenset[str], what: str) -> str:
    c = scanner.peek()
    if not c or c not in allowed:
        raise scanner.error(f"expected {what}")
    return scanner.advance(1)


def _digit_run(scanner: Scanner, allowed: frozenset[str], first: frozenset[str]) -> None:
    """A first digit, then digits where single underscores may separate digits."""
    _one_of(scanner, first, "digit")
    while True:
        c = scanner.peek()
        if c and c in allowed:
            scanner.advance(1)
        elif c == "_":
            scanner.advance(1)
            _one_of(scanner, allowed, "digit")
        else:
            return


def _to_i64(text: str, base: int, offset: int) -> int:
    number = int(text.replace("_", ""), base)
    if not I64_MIN <= number <= I64_MAX:
        raise OutOfRangeError(offset)
    return number


# ;; Boolean


@_backtracking
def true_(scanner: Scanner) -> bool:
    """The literal ``true``."""
    if not scanner.starts_with(TRUE[0]):
        raise scanner.error("expected `true`")
    if not scanner.starts_with(TRUE):
        raise scanner.error("expected `true`")
    scanner.advance(len(TRUE))
    return True


@_backtracking
def false_(scanner: Scanner) -> bool:
    """The literal ``false``."""
    if not scanner.starts_with(FALSE[0]):
        raise scanner.error("expected `false`")
    if not scanner.starts_with(FALSE):
        raise scanner.error("expected `false`")
    scanner.advance(len(FALSE))
    return False


def boolean(scanner: Scanner) -> bool:
    """``true`` or ``false``."""
    if scanner.starts_with(TRUE[0]):
        return true_(scanner)
    if scanner.starts_with(FALSE[0]):
        return false_(scanner)
    raise scanner.error("expected boolean")


# ;; Integer


@_backtracking
def integer(scanner: Scanner) -> int:
    """A decimal, hexadecimal, octal or binary integer within the 64-bit signed range."""
    start = scanner.pos
    prefix = scanner.peek(2)
    if prefix == HEX_PREFIX:
        return _to_i64(hex_int(scanner), 16, start)
    if prefix == OCT_PREFIX:
        return _to_i64(oct_int(scanner), 8, start)
    if prefix == BIN_PREFIX:
        return _to_i64(bin_int(scanner), 2, start)
    return _to_i64(dec_int(scanner), 10, start)


@_backtracking
def dec_int(scanner: Scanner) -> str:
    """An optionally signed decimal integer without leading zeros, as written."""
    start = scanner.pos
    if scanner.peek() in ("+", "-") and scanner.peek():
        scanner.advance(1)
    c = scanner.peek()
    if c and c in _DIGITS_1_9:
        _digit_run(scanner, _DIGITS, _DIGITS_1_9)
    elif c and c in _DIGITS:
        scanner.advance(1)
    else:
        raise scanner.error("expected integer")
    return scanner.text[start : scanner.pos]


def _prefixed_int(
    scanner: Scanner, prefix: str, allowed: frozenset[str], label: str
) -> str:
    if not scanner.starts_with(prefix):
        raise scanner.error(f"expected {label}")
    scanner.advance(len(prefix))
    start = scanner.pos
    _digit_run(scanner, allowed, allowed)
    return scanner.text[start : scanner.pos]


@_backtracking
def hex_int(scanner: Scanner) -> str:
    """``0x`` and hexadecimal digits; returns the digits as written."""
    return _prefixed_int(scanner, HEX_PREFIX, _HEXDIGS, "hexadecimal integer")


@_backtracking
def oct_int(scanner: Scanner) -> str:
    """``0o`` and octal digits; returns the digits as written."""
    return _prefixed_int(scanner, OCT_PREFIX, _DIGITS_0_7, "octal integer")


@_backtracking
def bin_int(scanner: Scanner) -> str:
    """``0b`` and binary digits; returns the digits as written."""
    return _prefixed_int(scanner, BIN_PREFIX, _DIGITS_0_1, "binary integer")


# ;; Float


def parse_float(scanner: Scanner) -> float:
    """A float with a fraction and/or exponent, or a signed ``inf`` or ``nan``."""
    start = scanner.pos
    try:
        text = float_text(scanner)
    except ParseError as float_error:
        try:
            return special_float(scanner)
        except ParseError as special_error:
            if special_error.offset > float_error.offset:
                raise
            raise float_error from None
    value = float(text.replace("_", ""))
    if value == math.inf:
        scanner.pos = start
        raise OutOfRangeError(start)
    return value


@_backtracking
def float_text(scanner: Scanner) -> str:
    """The text of a float: an integer part then an exponent or fraction."""
    start = scanner.pos
    dec_int(scanner)
    c = scanner.peek()
    if c and c in "eE":
        exp(scanner)
    elif c == ".":
        frac(scanner)
        if scanner.peek() and scanner.peek() in "eE":
            exp(scanner)
    else:
        raise scanner.error("expected fraction or exponent")
    return scanner.text[start : scanner.pos]


@_backtracking
def frac(scanner: Scanner) -> str:
    """A decimal point and digits, as written."""
    start = scanner.pos
    if not scanner.starts_with("."):
        raise scanner.error("expected `.`")
    scanner.advance(1)
    zero_prefixable_int(scanner)
    return scanner.text[start : scanner.pos]


@_backtracking
def zero_prefixable_int(scanner: Scanner) -> str:
    """Digits, possibly with leading zeros and single underscores between them."""
    start = scanner.pos
    _digit_run(scanner, _DIGITS, _DIGITS)
    return scanner.text[start : scanner.pos]


@_backtracking
def exp(scanner: Scanner) -> str:
    """``e`` or ``E``, an optional sign and digits, as written."""
    start = scanner.pos
    _one_of(scanner, frozenset("eE"), "exponent")
    if scanner.peek() and scanner.peek() in "+-":
        scanner.advance(1)
    zero_prefixable_int(scanner)
    return scanner.text[start : scanner.pos]


@_backtracking
def special_float(scanner: Scanner) -> float:
    """``inf`` or ``nan`` with an optional sign."""
    sign = scanner.peek()
    if sign and sign in "+-":
        scanner.advance(1)
    if scanner.starts_with(INF):
        value = inf(scanner)
    else:
        value = nan(scanner)
    return -value if sign == "-" else value


@_backtracking
def inf(scanner: Scanner) -> float:
    """The literal ``inf``."""
    if not scanner.starts_with(INF):
        raise scanner.error("expected `inf`")
    scanner.advance(len(INF))
    return math.inf


@_backtracking
def nan(scanner: Scanner) -> float:
    """The literal ``nan``, as a positive NaN."""
    if not scanner.starts_with(NAN):
        raise scanner.error("expected `nan`")
    scanner.advance(len(NAN))
    return math.copysign(math.nan, 1.0)


def digit(scanner: Scanner) -> str:
    """One decimal digit."""
    return _one_of(scanner, _DIGITS, "digit")


def hexdig(scanner: Scanner) -> str:
    """One hexadecimal digit, either case."""
    return _one_of(scanner, _HEXDIGS, "hexadecimal digit")