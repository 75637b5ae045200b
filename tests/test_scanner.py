import pytest

from tomllex.errors import ParseError, RecursionLimitExceededError
from tomllex.scanner import RecursionCheck, Scanner, parse_complete


def test_new_scanner_starts_at_beginning():
    scanner = Scanner("abc")
    assert scanner.pos == 0
    assert not scanner.at_end()


def test_empty_text_is_at_end():
    assert Scanner("").at_end()


def test_peek_does_not_consume():
    text = "hello"
    scanner = Scanner(text)
    assert scanner.peek(3) == text[:3]
    assert scanner.peek() == text[0]
    assert scanner.pos == 0


def test_peek_past_end_is_shorter():
    text = "ab"
    scanner = Scanner(text)
    assert scanner.peek(10) == text


def test_starts_with():
    scanner = Scanner("[[table]]")
    assert scanner.starts_with("[[")
    assert not scanner.starts_with("]")


def test_advance_returns_consumed_text():
    text = "key = 1"
    scanner = Scanner(text)
    assert scanner.advance(3) == text[:3]
    assert scanner.pos == 3
    assert scanner.advance(len(text) - 3) == text[3:]
    assert scanner.at_end()


def test_advance_past_end_raises_and_keeps_position():
    scanner = Scanner("ab")
    scanner.advance(1)
    with pytest.raises(ParseError) as info:
        scanner.advance(2)
    assert info.value.offset == 1
    assert scanner.pos == 1


def test_take_while_stops_at_first_mismatch():
    text = "123abc"
    scanner = Scanner(text)
    taken = scanner.take_while(str.isdigit)
    assert taken == text[:3]
    assert scanner.pos == len(taken)


def test_take_while_respects_maximum():
    text = "123456"
    scanner = Scanner(text)
    assert scanner.take_while(str.isdigit, 0, 4) == text[:4]
    assert scanner.pos == 4


def test_take_while_below_minimum_raises_without_consuming():
    scanner = Scanner("12x")
    with pytest.raises(ParseError):
        scanner.take_while(str.isdigit, 3)
    assert scanner.pos == 0


def test_take_while_zero_matches_is_empty():
    scanner = Scanner("xyz")
    assert scanner.take_while(str.isdigit) == ""
    assert scanner.pos == 0


def test_error_carries_current_offset():
    scanner = Scanner("abcdef")
    scanner.advance(4)
    err = scanner.error("boom")
    assert isinstance(err, ParseError)
    assert err.offset == 4
    assert str(err) == "boom"


def test_recursion_check_allows_up_to_limit():
    check = RecursionCheck()
    scanner = Scanner("")
    for _ in range(127):
        check = check.recursing(scanner)
    assert check.current == 127
    with pytest.raises(RecursionLimitExceededError):
        check.recursing(scanner)


def test_recursing_does_not_mutate_original():
    check = RecursionCheck()
    deeper = check.recursing(Scanner(""))
    assert check.current == 0
    assert deeper.current == 1


def test_check_depth():
    assert RecursionCheck.check_depth(127) is None
    with pytest.raises(RecursionLimitExceededError):
        RecursionCheck.check_depth(128)


def test_parse_complete_returns_parser_result():
    text = "abc"
    assert parse_complete(lambda s: s.advance(3), text) == text


def test_parse_complete_rejects_leftover_input():
    with pytest.raises(ParseError) as info:
        parse_complete(lambda s: s.advance(2), "abc")
    assert info.value.offset == 2