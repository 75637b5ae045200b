"""Raw representations of values and the whitespace and comments around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tomllex.raw_string import RawString

T = TypeVar("T")


def _to_raw(value: RawString | str | None) -> RawString | None:
    if value is None or isinstance(value, RawString):
        return value
    return RawString(value)


@dataclass
class Repr:
    """The TOML text of a value as it was written."""

    raw: RawString

    def __post_init__(self) -> None:
        self.raw = _to_raw(self.raw)

    def as_raw(self) -> RawString:
        """The underlying raw text."""
        return self.raw

    def span(self) -> tuple[int, int] | None:
        """The location within the parsed document."""
        return self.raw.span()

    def despan(self, source: str) -> None:
        """Resolve the span against ``source``."""
        self.raw.despan(source)

    def encode(self, source: str) -> str:
        """The text for output."""
        return self.raw.encode(source)


@dataclass
class Decor:
    """A prefix and suffix of comments, whitespace and newlines; None means default."""

    prefix: RawString | None = None
    suffix: RawString | None = None

    def __post_init__(self) -> None:
        self.prefix = _to_raw(self.prefix)
        self.suffix = _to_raw(self.suffix)

    def clear(self) -> None:
        """Go back to the default decor."""
        self.prefix = None
        self.suffix = None

    def prefix_encode(self, source: str | None, default: str) -> str:
        """The prefix for output, or ``default`` if none is set."""
        if self.prefix is None:
            return default
        return self.prefix.encode_with_default(source, default)

    def suffix_encode(self, source: str | None, default: str) -> str:
        """The suffix for output, or ``default`` if none is set."""
        if self.suffix is None:
            return default
        return self.suffix.encode_with_default(source, default)

    def despan(self, source: str) -> None:
        """Resolve prefix and suffix spans against ``source``."""
        for raw in (self.prefix, self.suffix):
            if raw is not None:
                raw.despan(source)


@dataclass
class Formatted(Generic[T]):
    """A value with its raw representation, if known, and its decor."""

    value: T
    repr: Repr | None = None
    decor: Decor = field(default_factory=Decor)

    def span(self) -> tuple[int, int] | None:
        """The location within the parsed document."""
        return None if self.repr is None else self.repr.span()

    def despan(self, source: str) -> None:
        """Resolve every span against ``source``."""
        self.decor.despan(source)
        if self.repr is not None:
            self.repr.despan(source)

    def fmt(self) -> None:
        """Drop the raw representation so the value is formatted by default."""
        self.repr = None