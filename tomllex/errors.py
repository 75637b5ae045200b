"""Errors raised while parsing TOML."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_UNQUOTED_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)

_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _key_name(key: Any) -> str:
    """The decoded name of a key: a plain string or an object with a ``key`` attribute."""
    if isinstance(key, str):
        return key
    return key.key


def _default_key_repr(name: str) -> str:
    if name and all(c in _UNQUOTED_CHARS for c in name):
        return name
    parts = []
    for c in name:
        if c in _ESCAPES:
            parts.append(_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            parts.append(f"\\u{ord(c):04X}")
        else:
            parts.append(c)
    return '"' + "".join(parts) + '"'


def _key_repr(key: Any) -> str:
    """How a key was written, falling back to its default TOML spelling."""
    raw = None if isinstance(key, str) else getattr(key, "raw", None)
    if raw is not None and not isinstance(raw, str):
        raw = raw.as_str()
    if raw is not None:
        return raw
    return _default_key_repr(_key_name(key))


class ParseError(Exception):
    """A TOML parse failure at a character offset of the input."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        return self.message


class OutOfRangeError(ParseError):
    """A value does not fit the range its type allows."""

    def __init__(self, offset: int) -> None:
        super().__init__("value is out of range", offset)


class RecursionLimitExceededError(ParseError):
    """Arrays, inline tables or dotted keys nest too deeply."""

    def __init__(self, offset: int) -> None:
        super().__init__("recursion limit exceeded", offset)


class DuplicateKeyError(ParseError):
    """A key, or a table, is defined more than once."""

    def __init__(self, key: str, table: Sequence[Any] | None, offset: int) -> None:
        self.key = key
        self.table = None if table is None else tuple(_key_name(k) for k in table)
        if self.table is None:
            message = f"duplicate key `{key}`"
        elif not self.table:
            message = f"duplicate key `{key}` in document root"
        else:
            message = f"duplicate key `{key}` in table `{'.'.join(self.table)}`"
        super().__init__(message, offset)


class DottedKeyExtendWrongTypeError(ParseError):
    """A dotted key tries to descend into a value that is not a table."""

    def __init__(self, key: Sequence[Any], actual: str, offset: int) -> None:
        self.key = tuple(_key_name(k) for k in key)
        self.actual = actual
        path = ".".join(self.key)
        super().__init__(
            f"dotted key `{path}` attempted to extend non-table type ({actual})",
            offset,
        )


def duplicate_key(path: Sequence[Any], i: int, offset: int) -> DuplicateKeyError:
    """Build the error for ``path[i]`` already being defined under ``path[:i]``."""
    if not 0 <= i < len(path):
        raise IndexError(f"key index {i} outside path of length {len(path)}")
    return DuplicateKeyError(_key_repr(path[i]), list(path[:i]), offset)


def extend_wrong_type(
    path: Sequence[Any], i: int, actual: str, offset: int
) -> DottedKeyExtendWrongTypeError:
    """Build the error for ``path[:i + 1]`` naming a value of type ``actual``."""
    if not 0 <= i < len(path):
        raise IndexError(f"key index {i} outside path of length {len(path)}")
    return DottedKeyExtendWrongTypeError(list(path[: i + 1]), actual, offset)