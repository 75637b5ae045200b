from tomllex.raw_string import RawString
from tomllex.repr import Decor, Formatted, Repr


def test_repr_accepts_plain_text():
    rep = Repr("42")
    assert rep.as_raw() == RawString("42")
    assert rep.span() is None
    assert rep.encode("") == "42"


def test_repr_span_and_despan():
    source = "x = 'a'"
    rep = Repr(RawString.with_span(4, 7))
    assert rep.span() == (4, 7)
    rep.despan(source)
    assert rep.span() is None
    assert rep.as_raw().as_str() == "'a'"


def test_default_decor_encodes_defaults():
    decor = Decor()
    assert decor.prefix is None and decor.suffix is None
    assert decor.prefix_encode(None, " ") == " "
    assert decor.suffix_encode(None, "") == ""


def test_decor_with_text():
    decor = Decor("  ", " # note")
    assert decor.prefix == RawString("  ")
    assert decor.prefix_encode(None, "") == "  "
    assert decor.suffix_encode(None, "") == " # note"


def test_decor_span_without_source_uses_default():
    decor = Decor(RawString.with_span(0, 2), RawString.with_span(2, 3))
    assert decor.prefix_encode(None, "d") == "d"
    assert decor.suffix_encode("ab\r", "d") == ""


def test_decor_clear():
    decor = Decor("a", "b")
    decor.clear()
    assert decor == Decor()


def test_decor_despan():
    source = " \tv"
    decor = Decor(RawString.with_span(0, 2), RawString.with_span(2, 3))
    decor.despan(source)
    assert decor == Decor(" \t", "v")


def test_formatted_defaults_and_fmt():
    item = Formatted(5)
    assert item.value == 5
    assert item.repr is None
    assert item.span() is None
    item.repr = Repr("0x5")
    item.fmt()
    assert item.repr is None


def test_formatted_despan_resolves_repr_and_decor():
    source = " 1_000 "
    item = Formatted(1000, Repr(RawString.with_span(1, 6)), Decor(RawString.with_span(0, 1), ""))
    assert item.span() == (1, 6)
    item.despan(source)
    assert item.span() is None
    assert item.repr.as_raw().as_str() == "1_000"
    assert item.decor.prefix.as_str() == " "


def test_formatted_equality():
    assert Formatted("a", Repr("'a'")) == Formatted("a", Repr("'a'"))
    assert Formatted("a", Repr("'a'")) != Formatted("a")