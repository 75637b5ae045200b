"""Whitespace, newlines and comments."""

from __future__ import annotations

from tomllex.errors import ParseError
from tomllex.scanner import Scanner

WSCHAR = " \t"
LF = "\n"
CR = "\r"
COMMENT_START_SYMBOL = "#"


def _is_wschar(c: str) -> bool:
    return c in WSCHAR


def _is_non_eol(c: str) -> bool:
    code = ord(c)
    return code == 0x09 or 0x20 <= code <= 0x7E or code >= 0x80


def _at_newline(scanner: Scanner) -> bool:
    return scanner.starts_with(LF) or scanner.starts_with(CR + LF)


def ws(scanner: Scanner) -> str:
    """Zero or more spaces and tabs."""
    return scanner.take_while(_is_wschar)


def comment(scanner: Scanner) -> str:
    """A ``#`` and the rest of the line, without the line ending."""
    if not scanner.starts_with(COMMENT_START_SYMBOL):
        raise scanner.error("expected `#`")
    start = scanner.pos
    scanner.advance(1)
    scanner.take_while(_is_non_eol)
    return scanner.text[start : scanner.pos]


def newline(scanner: Scanner) -> str:
    """A LF or CRLF, returned as ``"\\n"``."""
    if scanner.starts_with(LF):
        scanner.advance(1)
    elif scanner.starts_with(CR + LF):
        scanner.advance(2)
    else:
        raise scanner.error("expected newline")
    return LF


def ws_newline(scanner: Scanner) -> str:
    """Zero or more whitespace characters and newlines, as written."""
    start = scanner.pos
    while True:
        if _at_newline(scanner):
            newline(scanner)
        elif scanner.peek() and _is_wschar(scanner.peek()):
            ws(scanner)
        else:
            break
    return scanner.text[start : scanner.pos]


def ws_newlines(scanner: Scanner) -> str:
    """A newline followed by any whitespace and newlines, as written."""
    start = scanner.pos
    newline(scanner)
    ws_newline(scanner)
    return scanner.text[start : scanner.pos]


def ws_comment_newline(scanner: Scanner) -> str:
    """Any mix of whitespace, newlines and comments, as written."""
    start = scanner.pos
    while True:
        if _at_newline(scanner):
            newline(scanner)
        elif scanner.starts_with(COMMENT_START_SYMBOL):
            comment(scanner)
        elif scanner.peek() and _is_wschar(scanner.peek()):
            ws(scanner)
        else:
            break
    return scanner.text[start : scanner.pos]


def line_ending(scanner: Scanner) -> str:
    """A newline, returned as ``"\\n"``, or the end of input, returned as ``""``."""
    if scanner.at_end():
        return ""
    try:
        return newline(scanner)
    except ParseError:
        raise scanner.error("expected newline, `#`") from None


def line_trailing(scanner: Scanner) -> tuple[int, int]:
    """Whitespace and an optional comment up to the line ending.

    Returns the span of the whitespace and comment; the line ending itself is
    consumed but not part of the span.
    """
    start = scanner.pos
    ws(scanner)
    if scanner.starts_with(COMMENT_START_SYMBOL):
        comment(scanner)
    end = scanner.pos
    try:
        line_ending(scanner)
    except ParseError:
        scanner.pos = start
        raise
    return (start, end)