"""A cursor over TOML text and the helpers shared by the grammar rules.

Grammar rules are plain functions taking a ``Scanner``. A rule that matches
advances the scanner and returns its result; a rule that does not match
raises ``ParseError`` and leaves the scanner where it started.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from tomllex.errors import ParseError, RecursionLimitExceededError

R = TypeVar("R")

RECURSION_LIMIT = 128


class Scanner:
    """A position within a piece of text being parsed."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        """Whether all of the text has been consumed."""
        return self.pos >= len(self.text)

    def peek(self, n: int = 1) -> str:
        """Up to ``n`` characters ahead, without consuming them."""
        return self.text[self.pos : self.pos + n]

    def starts_with(self, prefix: str) -> bool:
        """Whether the unconsumed text begins with ``prefix``."""
        return self.text.startswith(prefix, self.pos)

    def advance(self, n: int = 1) -> str:
        """Consume and return exactly ``n`` characters."""
        end = self.pos + n
        if end > len(self.text):
            raise self.error("unexpected end of input")
        consumed = self.text[self.pos : end]
        self.pos = end
        return consumed

    def take_while(
        self,
        predicate: Callable[[str], bool],
        minimum: int = 0,
        maximum: int | None = None,
    ) -> str:
        """Consume characters while ``predicate`` holds, at most ``maximum`` of them.

        Raises ``ParseError`` without consuming anything if fewer than
        ``minimum`` characters match.
        """
        limit = len(self.text) if maximum is None else min(len(self.text), self.pos + maximum)
        end = self.pos
        while end < limit and predicate(self.text[end]):
            end += 1
        if end - self.pos < minimum:
            raise self.error(f"expected at least {minimum} matching characters")
        taken = self.text[self.pos : end]
        self.pos = end
        return taken

    def error(self, message: str) -> ParseError:
        """A ``ParseError`` located at the current position."""
        return ParseError(message, self.pos)

    def __repr__(self) -> str:
        return f"Scanner(pos={self.pos}, rest={self.text[self.pos:self.pos + 20]!r})"


@dataclass(frozen=True)
class RecursionCheck:
    """Tracks nesting depth so deeply nested input fails instead of overflowing."""

    current: int = 0

    def recursing(self, scanner: Scanner) -> RecursionCheck:
        """One level deeper; raises once the nesting limit is reached."""
        deeper = RecursionCheck(self.current + 1)
        if deeper.current >= RECURSION_LIMIT:
            raise RecursionLimitExceededError(scanner.pos)
        return deeper

    @staticmethod
    def check_depth(depth: int) -> None:
        """Raise if a path of ``depth`` keys would exceed the nesting limit."""
        if depth >= RECURSION_LIMIT:
            raise RecursionLimitExceededError(0)


def parse_complete(parser: Callable[[Scanner], R], text: str) -> R:
    """Run ``parser`` over ``text`` and require it to consume all of it."""
    scanner = Scanner(text)
    result = parser(scanner)
    if not scanner.at_end():
        raise scanner.error("unexpected content at end of input")
    return result