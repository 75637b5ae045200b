"""Offset and local date-times, dates and times, as RFC 3339 writes them."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from tomllex.errors import OutOfRangeError, ParseError
from tomllex.scanner import Scanner

R = TypeVar("R")

TIME_DELIM = "Tt "
_DIGITS = frozenset("0123456789")
_SECFRAC_SCALE = (
    0,
    100_000_000,
    10_000_000,
    1_000_000,
    100_000,
    10_000,
    1_000,
    100,
    10,
    1,
)
_MAX_SECFRAC_DIGITS = len(_SECFRAC_SCALE) - 1


@dataclass(frozen=True)
class Date:
    """A calendar date."""

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class Time:
    """A time of day, with nanosecond precision."""

    hour: int
    minute: int
    second: int
    nanosecond: int = 0


@dataclass(frozen=True)
class Offset:
    """A UTC offset: ``Offset.Z`` (``minutes`` is None) or a number of minutes."""

    minutes: int | None = None

    Z: ClassVar[Offset]

    @property
    def is_z(self) -> bool:
        """Whether this offset was written as ``Z``."""
        return self.minutes is None


Offset.Z = Offset()


@dataclass(frozen=True)
class Datetime:
    """A date, a time, or both, with an optional offset."""

    date: Date | None = None
    time: Time | None = None
    offset: Offset | None = None


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


def _expect(scanner: Scanner, char: str) -> None:
    if not scanner.starts_with(char):
        raise scanner.error(f"expected `{char}`")
    scanner.advance(1)


def unsigned_digits(scanner: Scanner, minimum: int, maximum: int | None) -> str:
    """Between ``minimum`` and ``maximum`` ASCII digits; ``maximum`` None is unbounded."""
    return scanner.take_while(lambda c: c in _DIGITS, minimum, maximum)


def _ranged_two_digits(scanner: Scanner, low: int, high: int) -> int:
    start = scanner.pos
    number = int(unsigned_digits(scanner, 2, 2))
    if not low <= number <= high:
        scanner.pos = start
        raise OutOfRangeError(start)
    return number


def date_fullyear(scanner: Scanner) -> int:
    """Four digits of year."""
    return int(unsigned_digits(scanner, 4, 4))


def date_month(scanner: Scanner) -> int:
    """Two digits of month, 01 to 12."""
    return _ranged_two_digits(scanner, 1, 12)


def date_mday(scanner: Scanner) -> int:
    """Two digits of day of month, 01 to 31."""
    return _ranged_two_digits(scanner, 1, 31)


def time_hour(scanner: Scanner) -> int:
    """Two digits of hour, 00 to 23."""
    return _ranged_two_digits(scanner, 0, 23)


def time_minute(scanner: Scanner) -> int:
    """Two digits of minute, 00 to 59."""
    return _ranged_two_digits(scanner, 0, 59)


def time_second(scanner: Scanner) -> int:
    """Two digits of second, 00 to 60 to allow for leap seconds."""
    return _ranged_two_digits(scanner, 0, 60)


def time_delim(scanner: Scanner) -> str:
    """The separator between date and time: ``T``, ``t`` or a space."""
    c = scanner.peek()
    if not c or c not in TIME_DELIM:
        raise scanner.error("expected `T`, `t` or space")
    return scanner.advance(1)


@_backtracking
def time_secfrac(scanner: Scanner) -> int:
    """A decimal point and digits, as nanoseconds; digits past nine are truncated."""
    _expect(scanner, ".")
    digits = unsigned_digits(scanner, 1, None)[:_MAX_SECFRAC_DIGITS]
    return int(digits) * _SECFRAC_SCALE[len(digits)]


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


@_backtracking
def full_date(scanner: Scanner) -> Date:
    """``YYYY-MM-DD``, with the day checked against the month and year."""
    year = date_fullyear(scanner)
    _expect(scanner, "-")
    month = date_month(scanner)
    _expect(scanner, "-")
    day_start = scanner.pos
    day = date_mday(scanner)
    if day > _days_in_month(year, month):
        scanner.pos = day_start
        raise OutOfRangeError(day_start)
    return Date(year, month, day)


@_backtracking
def partial_time(scanner: Scanner) -> Time:
    """``HH:MM:SS`` with an optional fraction of a second."""
    hour = time_hour(scanner)
    _expect(scanner, ":")
    minute = time_minute(scanner)
    _expect(scanner, ":")
    second = time_second(scanner)
    nanosecond = time_secfrac(scanner) if scanner.starts_with(".") else 0
    return Time(hour, minute, second, nanosecond)


@_backtracking
def time_offset(scanner: Scanner) -> Offset:
    """``Z``, ``z``, or a signed ``HH:MM`` offset."""
    c = scanner.peek()
    if c and c in "Zz":
        scanner.advance(1)
        return Offset.Z
    if c and c in "+-":
        scanner.advance(1)
        hours = time_hour(scanner)
        _expect(scanner, ":")
        minutes = time_minute(scanner)
        total = hours * 60 + minutes
        return Offset(-total if c == "-" else total)
    raise scanner.error("expected time offset")


def _starts_date(scanner: Scanner) -> bool:
    """Whether a year and its dash come next; after that a date is committed to."""
    start = scanner.pos
    try:
        date_fullyear(scanner)
        _expect(scanner, "-")
    except ParseError:
        return False
    finally:
        scanner.pos = start
    return True


def _starts_time(scanner: Scanner) -> bool:
    """Whether a delimiter, an hour and a colon follow a date."""
    start = scanner.pos
    try:
        time_delim(scanner)
        time_hour(scanner)
        _expect(scanner, ":")
    except ParseError:
        return False
    finally:
        scanner.pos = start
    return True


@_backtracking
def date_time(scanner: Scanner) -> Datetime:
    """An offset date-time, local date-time, local date or local time."""
    if not _starts_date(scanner):
        return Datetime(time=partial_time(scanner))
    date = full_date(scanner)
    if not _starts_time(scanner):
        return Datetime(date=date)
    time_delim(scanner)
    time = partial_time(scanner)
    c = scanner.peek()
    offset = time_offset(scanner) if c and c in "Zz+-" else None
    return Datetime(date=date, time=time, offset=offset)