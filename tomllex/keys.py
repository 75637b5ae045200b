"""Simple and dotted keys."""

from __future__ import annotations

from dataclasses import dataclass, field

from tomllex.errors import ParseError, RecursionLimitExceededError
from tomllex.raw_string import RawString
from tomllex.repr import Decor
from tomllex.scanner import RecursionCheck, Scanner
from tomllex.strings import APOSTROPHE, QUOTATION_MARK, basic_string, literal_string
from tomllex.trivia import ws

DOT_SEP = "."

_UNQUOTED_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)


@dataclass
class KeyPart:
    """One segment of a key: its name, how it was written, and the space around it."""

    key: str
    raw: RawString
    decor: Decor = field(default_factory=Decor)


def is_unquoted_char(c: str) -> bool:
    """Whether ``c`` may appear in a bare key."""
    return c in _UNQUOTED_CHARS


def unquoted_key(scanner: Scanner) -> str:
    """One or more letters, digits, dashes and underscores."""
    return scanner.take_while(is_unquoted_char, 1)


def simple_key(scanner: Scanner) -> tuple[RawString, str]:
    """A quoted or bare key: its raw span and its decoded name."""
    start = scanner.pos
    c = scanner.peek()
    if c == QUOTATION_MARK:
        name = basic_string(scanner)
    elif c == APOSTROPHE:
        name = literal_string(scanner)
    else:
        name = unquoted_key(scanner)
    return RawString.with_span(start, scanner.pos), name


def _key_part(scanner: Scanner) -> KeyPart:
    pre_start = scanner.pos
    ws(scanner)
    pre_end = scanner.pos
    raw, name = simple_key(scanner)
    suf_start = scanner.pos
    ws(scanner)
    return KeyPart(
        name,
        raw,
        Decor(
            RawString.with_span(pre_start, pre_end),
            RawString.with_span(suf_start, scanner.pos),
        ),
    )


def _key_follows(scanner: Scanner) -> bool:
    """Whether a simple key, after optional whitespace, comes next."""
    start = scanner.pos
    ws(scanner)
    c = scanner.peek()
    scanner.pos = start
    return bool(c) and (c in (QUOTATION_MARK, APOSTROPHE) or is_unquoted_char(c))


def key(scanner: Scanner) -> list[KeyPart]:
    """A simple key or dotted key, as its segments."""
    start = scanner.pos
    try:
        parts = [_key_part(scanner)]
        while scanner.starts_with(DOT_SEP):
            mark = scanner.pos
            scanner.advance(1)
            if not _key_follows(scanner):
                scanner.pos = mark
                break
            parts.append(_key_part(scanner))
        try:
            RecursionCheck.check_depth(len(parts))
        except RecursionLimitExceededError:
            raise RecursionLimitExceededError(start) from None
    except ParseError:
        scanner.pos = start
        raise
    return parts