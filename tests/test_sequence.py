from __future__ import annotations

import pytest

from tokenized_string import Text, Token, TokenSequence

from conftest import Tok

LONG = TokenSequence([
    Text("A very long string with "),
    Token(Tok.ONE),
    Text(", "),
    Token(Tok.TWO),
    Text(" and "),
    Token(Tok.THREE),
    Text("."),
])


def number(t: Tok) -> str:
    return str(t.number)


@pytest.mark.parametrize(
    "elements, expected",
    [
        ([], ""),
        ([Text("")], ""),
        ([Text(" ")], " "),
        ([Text(" "), Text(" ")], "  "),
        ([Text("a"), Text("b")], "ab"),
        ([Token(Tok.ONE)], "1"),
        ([Token(Tok.ONE), Token(Tok.TWO), Token(Tok.THREE)], "123"),
    ],
)
def test_string_substitution(elements, expected):
    assert TokenSequence(elements).string(number) == expected


def test_string_substitution_long():
    assert LONG.string(number) == "A very long string with 1, 2 and 3."


@pytest.mark.parametrize(
    "elements, expected",
    [
        ([], ""),
        ([Text("")], ""),
        ([Text(""), Text("")], "-"),
        ([Text(" "), Text("")], " -"),
        ([Text(""), Text(" ")], "- "),
        ([Text("a"), Text("b")], "a-b"),
    ],
)
def test_string_with_separator(elements, expected):
    assert TokenSequence(elements).string(number, separator="-") == expected


def test_string_with_separator_long():
    assert LONG.string(number, separator="-") == "A very long string with -1-, -2- and -3-."


def test_contains_token_and_text():
    assert LONG.contains_token(Tok.ONE)
    assert LONG.contains_text(", ")
    assert not LONG.contains_text(",")  # exact match only
    assert not TokenSequence([Text("one")]).contains_token(Tok.ONE)
    assert not TokenSequence([Token("one")]).contains_text("one")
    assert Token(Tok.TWO) in LONG
    assert Text("missing") not in LONG


def test_equality_and_hash_are_structural():
    a = TokenSequence([Text("x"), Token("y")])
    b = TokenSequence([Text("x"), Token("y")])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != TokenSequence([Token("y"), Text("x")])
    assert a != TokenSequence([Text("x"), Text("y")])
    assert TokenSequence() == TokenSequence([])


def test_text_and_token_never_equal():
    assert Token("a") != Text("a")
    assert Token("a") not in TokenSequence([Text("a")])


def test_no_automatic_merging():
    seq = TokenSequence()
    seq.append(Text("a"))
    seq.append(Text("b"))
    assert len(seq) == 2
    assert seq.texts() == ["a", "b"]


def test_mutation():
    seq = TokenSequence([Text("a")])
    seq.insert(0, Token("t"))
    seq.extend([Text("b"), Token("u")])
    assert seq.tokens() == ["t", "u"]
    seq.remove(Text("b"))
    assert seq.pop() == Token("u")
    seq[1] = Text("z")
    assert list(seq) == [Token("t"), Text("z")]
    del seq[0]
    assert seq == TokenSequence([Text("z")])
    copy = seq.copy()
    seq.clear()
    assert len(seq) == 0
    assert copy == TokenSequence([Text("z")])


def test_slicing_returns_sequence():
    assert LONG[:2] == TokenSequence([Text("A very long string with "), Token(Tok.ONE)])
    assert LONG[1] == Token(Tok.ONE)


def test_element_conveniences():
    assert Token(Tok.TWO).raw_value == "t-wo"
    assert Token("x").raw_value == "x"
    assert Text("plain").raw_value == "plain"
    assert Token("x").is_token and not Token("x").is_text
    assert Text("x").matches("x")
    assert Token("x").matches("x")
    assert not Text("y").matches("x")
    with pytest.raises(TypeError):
        Token(5).raw_value


def test_codec_shortcuts_use_default_delimiters():
    seq = TokenSequence.parse("Hi %[name]")
    assert seq == TokenSequence([Text("Hi "), Token("name")])
    assert seq.serialize() == "Hi %[name]"
    assert seq.serialize(prefix="{", suffix="}") == "Hi {name}"
