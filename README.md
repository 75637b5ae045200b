# tomllex

Lexical building blocks for reading TOML while keeping track of where each
piece came from. Every scanning function takes a `Scanner` positioned inside
the input text. If it matches, it consumes what it recognises and returns the
decoded value. If it does not match, it raises `ParseError` and leaves the
scanner where it started.

## Install

```
pip install tomllex
```

The package has no third-party dependencies and needs Python 3.10 or later.

## Modules

- `tomllex.scanner`: `Scanner` (a cursor over the text with `peek`,
  `starts_with`, `advance`, `take_while`, `at_end` and `error`),
  `RecursionCheck` (a nesting-depth guard) and `parse_complete`.
- `tomllex.trivia`: `ws`, `comment`, `newline`, `ws_newline`, `ws_newlines`,
  `ws_comment_newline`, `line_ending` and `line_trailing`.
- `tomllex.numbers`: `boolean`, `true_`, `false_`, `integer`, `dec_int`,
  `hex_int`, `oct_int`, `bin_int`, `parse_float`, `float_text`, `frac`, `exp`,
  `zero_prefixable_int`, `special_float`, `inf`, `nan`, `digit` and `hexdig`.
- `tomllex.dates`: the `Date`, `Time`, `Offset` and `Datetime` dataclasses,
  plus `date_time`, `full_date`, `partial_time`, `time_offset` and the
  field-level rules (`date_fullyear`, `date_month`, `date_mday`, `time_delim`,
  `time_hour`, `time_minute`, `time_second`, `time_secfrac`,
  `unsigned_digits`).
- `tomllex.strings`: `string`, `basic_string`, `ml_basic_string`,
  `literal_string`, `ml_literal_string`, `escaped` and `hexescape`.
- `tomllex.keys`: `KeyPart`, `key`, `simple_key`, `unquoted_key` and
  `is_unquoted_char`.
- `tomllex.raw_string`, `tomllex.repr`: containers for raw text and the
  decoration around it.
- `tomllex.errors`: the exception types.

## Scanning values

```python
from tomllex.scanner import parse_complete
from tomllex.numbers import integer, parse_float
from tomllex.strings import string
from tomllex.dates import date_time
from tomllex.keys import key

parse_complete(integer, "0o0_755")            # 493
parse_complete(parse_float, "6.626e-34")      # 6.626e-34
parse_complete(string, r'"Jos\u00E9"')        # 'José'
dt = parse_complete(date_time, "1979-05-27T07:32:00Z")
dt.date.year, dt.time.hour                    # (1979, 7)
dt.offset.is_z                                # True

parts = parse_complete(key, 'a . "b.c" . d')
[p.key for p in parts]                        # ['a', 'b.c', 'd']
```

`parse_complete` runs a parser and requires it to consume the whole input.
For finer control, create a `Scanner` and call the parsers directly. Each
parser advances the scanner past what it recognised.

```python
from tomllex.scanner import Scanner
from tomllex.trivia import ws_comment_newline

s = Scanner("# note\n\n  value")
ws_comment_newline(s)   # '# note\n\n  '
s.peek(5)               # 'value'
```

The parsers apply these rules:

- Integers must fit in a signed 64-bit range.
- A float that overflows to infinity is an error.
- `nan` is positive unless it is written `-nan`.
- Fractions of a second are truncated to nanoseconds.
- A day of the month is checked against its month and the leap year.
- A CRLF inside a multi-line literal string becomes LF.

## Errors

Every failure raises `tomllex.errors.ParseError` or one of its subclasses.
Each error has an `offset` attribute giving the character offset in the input
where the problem was found:

- `OutOfRangeError`: a number, date field or escape code is outside its range.
- `RecursionLimitExceededError`: nesting, such as a dotted key, reaches 128
  levels.
- `DuplicateKeyError`: a key is defined twice.
- `DottedKeyExtendWrongTypeError`: a dotted key extends a value that is not a
  table.

The helpers `duplicate_key(path, i, offset)` and
`extend_wrong_type(path, i, actual, offset)` build the last two errors from a
key path.

```python
from tomllex.errors import ParseError

try:
    parse_complete(integer, "1000000000000000000000000000000000")
except ParseError as err:
    print(err.offset, err)   # 0 value is out of range
```

## Raw text and decoration

`tomllex.raw_string.RawString` holds raw text in one of two forms: an explicit
string, or a `(start, end)` span into the input created with
`RawString.with_span`.

- `to_str(source)` resolves a span against the input.
- `despan(source)` replaces a span with the text it covers.
- `encode(source)` returns the text with carriage returns removed.

`tomllex.repr` adds three classes:

- `Repr`: the way a value was written.
- `Decor`: a prefix and a suffix of whitespace and comments. `None` means the
  default.
- `Formatted`: a value together with its `Repr` and `Decor`.

## What this package does not do

This package scans the individual pieces of TOML. It does not:

- parse whole documents, table headers, arrays or inline tables;
- build a document tree or check for duplicates across one;
- write a document back out.

It provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```