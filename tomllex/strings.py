"""Basic, literal and multi-line strings."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from tomllex.errors import OutOfRangeError, ParseError
from tomllex.scanner import Scanner
from tomllex.trivia import WSCHAR, newline, ws, ws_newlines

R = TypeVar("R")

QUOTATION_MARK = '"'
APOSTROPHE = "'"
ESCAPE = "\\"
ML_BASIC_STRING_DELIM = '"""'
ML_LITERAL_STRING_DELIM = "'''"

_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}
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


def _is_basic_unescaped(c: str) -> bool:
    code = ord(c)
    return (
        c in WSCHAR
        or code == 0x21
        or 0x23 <= code <= 0x5B
        or 0x5D <= code <= 0x7E
        or code >= 0x80
    )


def _is_literal_char(c: str) -> bool:
    code = ord(c)
    return code == 0x09 or 0x20 <= code <= 0x26 or 0x28 <= code <= 0x7E or code >= 0x80


def _at_newline(scanner: Scanner) -> bool:
    return scanner.starts_with("\n") or scanner.starts_with("\r\n")


def _expect(scanner: Scanner, token: str, label: str) -> None:
    if not scanner.starts_with(token):
        raise scanner.error(f"invalid {label}, expected `{token}`")
    scanner.advance(len(token))


def _skip_newline(scanner: Scanner) -> None:
    if _at_newline(scanner):
        newline(scanner)


# ;; Basic String


def hexescape(scanner: Scanner, n: int) -> str:
    """Exactly ``n`` hexadecimal digits naming a Unicode scalar value."""
    start = scanner.pos
    digits = scanner.take_while(lambda c: c in _HEXDIGS, 0, n)
    if len(digits) != n:
        scanner.pos = start
        raise scanner.error(f"invalid unicode {n}-digit hex code")
    code = int(digits, 16)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        scanner.pos = start
        raise OutOfRangeError(start)
    return chr(code)


@_backtracking
def escaped(scanner: Scanner) -> str:
    """A backslash escape sequence, decoded."""
    _expect(scanner, ESCAPE, "escape sequence")
    c = scanner.peek()
    if not c:
        raise scanner.error("invalid escape sequence, unexpected end of input")
    if c in _SIMPLE_ESCAPES:
        scanner.advance(1)
        return _SIMPLE_ESCAPES[c]
    if c == "u":
        scanner.advance(1)
        return hexescape(scanner, 4)
    if c == "U":
        scanner.advance(1)
        return hexescape(scanner, 8)
    raise scanner.error(
        'invalid escape sequence, expected `b`, `f`, `n`, `r`, `t`, `u`, `U`, `\\`, `"`'
    )


@_backtracking
def basic_string(scanner: Scanner) -> str:
    """A double-quoted string on one line, with escapes decoded."""
    _expect(scanner, QUOTATION_MARK, "basic string")
    parts: list[str] = []
    while True:
        c = scanner.peek()
        if c and _is_basic_unescaped(c):
            parts.append(scanner.take_while(_is_basic_unescaped))
        elif c == ESCAPE:
            parts.append(escaped(scanner))
        else:
            break
    _expect(scanner, QUOTATION_MARK, "basic string")
    return "".join(parts)


# ;; Multiline strings


def _ml_quotes(
    scanner: Scanner, quote: str, term: Callable[[Scanner], bool]
) -> str | None:
    """Two or one quote characters followed by something ``term`` accepts."""
    for count in (2, 1):
        quotes = quote * count
        if scanner.starts_with(quotes):
            start = scanner.pos
            scanner.advance(count)
            if term(scanner):
                return quotes
            scanner.pos = start
    return None


def _not_char(char: str) -> Callable[[Scanner], bool]:
    def term(scanner: Scanner) -> bool:
        c = scanner.peek()
        return bool(c) and c != char

    return term


def _tag(token: str) -> Callable[[Scanner], bool]:
    def term(scanner: Scanner) -> bool:
        return scanner.starts_with(token)

    return term


def _mlb_escaped_nl(scanner: Scanner) -> bool:
    """Line-ending backslashes with the whitespace they trim."""
    matched = False
    while scanner.starts_with(ESCAPE):
        start = scanner.pos
        scanner.advance(1)
        ws(scanner)
        try:
            ws_newlines(scanner)
        except ParseError:
            scanner.pos = start
            break
        matched = True
    return matched


def _mlb_content(scanner: Scanner) -> str | None:
    c = scanner.peek()
    if c and _is_basic_unescaped(c):
        return scanner.take_while(_is_basic_unescaped)
    if c == ESCAPE:
        if _mlb_escaped_nl(scanner):
            return ""
        return escaped(scanner)
    if _at_newline(scanner):
        newline(scanner)
        return "\n"
    return None


def _collect_mlb(scanner: Scanner, parts: list[str]) -> bool:
    found = False
    while (content := _mlb_content(scanner)) is not None:
        parts.append(content)
        found = True
    return found


def _ml_basic_body(scanner: Scanner) -> str:
    parts: list[str] = []
    _collect_mlb(scanner, parts)
    while (quotes := _ml_quotes(scanner, QUOTATION_MARK, _not_char(QUOTATION_MARK))) is not None:
        more: list[str] = []
        if not _collect_mlb(scanner, more):
            break
        parts.append(quotes)
        parts.extend(more)
    quotes = _ml_quotes(scanner, QUOTATION_MARK, _tag(ML_BASIC_STRING_DELIM))
    if quotes is not None:
        parts.append(quotes)
    return "".join(parts)


@_backtracking
def ml_basic_string(scanner: Scanner) -> str:
    """A triple-double-quoted string; a newline right after the opening is dropped."""
    _expect(scanner, ML_BASIC_STRING_DELIM, "multiline basic string")
    _skip_newline(scanner)
    body = _ml_basic_body(scanner)
    _expect(scanner, ML_BASIC_STRING_DELIM, "multiline basic string")
    return body


# ;; Literal strings


@_backtracking
def literal_string(scanner: Scanner) -> str:
    """A single-quoted string, taken as written."""
    _expect(scanner, APOSTROPHE, "literal string")
    body = scanner.take_while(_is_literal_char)
    _expect(scanner, APOSTROPHE, "literal string")
    return body


def _skip_mll(scanner: Scanner) -> bool:
    start = scanner.pos
    while True:
        c = scanner.peek()
        if c and _is_literal_char(c):
            scanner.take_while(_is_literal_char)
        elif _at_newline(scanner):
            newline(scanner)
        else:
            break
    return scanner.pos > start


@_backtracking
def ml_literal_string(scanner: Scanner) -> str:
    """A triple-single-quoted string, taken as written with CRLF turned into LF."""
    _expect(scanner, ML_LITERAL_STRING_DELIM, "multiline literal string")
    _skip_newline(scanner)
    start = scanner.pos
    _skip_mll(scanner)
    while True:
        mark = scanner.pos
        if _ml_quotes(scanner, APOSTROPHE, _not_char(APOSTROPHE)) is None:
            break
        if not _skip_mll(scanner):
            scanner.pos = mark
            break
    _ml_quotes(scanner, APOSTROPHE, _tag(ML_LITERAL_STRING_DELIM))
    body = scanner.text[start : scanner.pos]
    _expect(scanner, ML_LITERAL_STRING_DELIM, "multiline literal string")
    return body.replace("\r\n", "\n")


def string(scanner: Scanner) -> str:
    """Any of the four kinds of string, decoded."""
    if scanner.starts_with(ML_BASIC_STRING_DELIM):
        return ml_basic_string(scanner)
    if scanner.starts_with(QUOTATION_MARK):
        return basic_string(scanner)
    if scanner.starts_with(ML_LITERAL_STRING_DELIM):
        return ml_literal_string(scanner)
    if scanner.starts_with(APOSTROPHE):
        return literal_string(scanner)
    raise scanner.error("expected string")