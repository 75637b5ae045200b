"""Raw TOML text, held either explicitly or as a span of the parsed input."""

from __future__ import annotations


class RawString:
    """Text as written in a document: empty, explicit, or a span into the source."""

    __slots__ = ("_text", "_span")

    def __init__(self, text: str = "") -> None:
        self._text: str | None = text if text else None
        self._span: tuple[int, int] | None = None

    @classmethod
    def with_span(cls, start: int, end: int) -> RawString:
        """A raw string referring to ``source[start:end]``; empty if the span is."""
        raw = cls()
        if start != end:
            raw._span = (start, end)
        return raw

    def as_str(self) -> str | None:
        """The text, or None while it is still a span of the input."""
        if self._span is not None:
            return None
        return self._text or ""

    def _slice(self, source: str) -> str:
        start, end = self._span
        if not 0 <= start <= end <= len(source):
            raise ValueError(f"span {start}..{end} should be in input:\n{source}")
        return source[start:end]

    def to_str(self, source: str) -> str:
        """The text, resolving a span against ``source``."""
        if self._span is not None:
            return self._slice(source)
        return self._text or ""

    def to_str_with_default(self, source: str | None, default: str) -> str:
        """Like ``to_str``, but a span with no source gives ``default``."""
        if self._span is not None:
            return default if source is None else self._slice(source)
        return self._text or ""

    def span(self) -> tuple[int, int] | None:
        """The ``(start, end)`` span into the input, if any."""
        return self._span

    def despan(self, source: str) -> None:
        """Replace a span with the text it covers in ``source``."""
        if self._span is not None:
            text = self._slice(source)
            self._span = None
            self._text = text or None

    def encode(self, source: str) -> str:
        """The text for output, with carriage returns dropped."""
        return self.to_str(source).replace("\r", "")

    def encode_with_default(self, source: str | None, default: str) -> str:
        """The text for output, falling back to ``default`` for an unresolved span."""
        return self.to_str_with_default(source, default).replace("\r", "")

    def _state(self) -> tuple[str | None, tuple[int, int] | None]:
        return (self._text, self._span)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawString):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __repr__(self) -> str:
        if self._span is not None:
            return f"RawString.with_span({self._span[0]}, {self._span[1]})"
        if self._text is None:
            return "RawString()"
        return f"RawString({self._text!r})"