import pytest

from lexdemos.ascii_words import (
    InvalidInteger,
    LexingError,
    NonAsciiCharacter,
    Token,
    TokenKind,
    tokenize,
)


def test_example_sequence():
    results = list(tokenize("Hello 256 Jérome"))
    assert len(results) == 5

    hello, overflow, j, accent, rome = results
    assert isinstance(hello, Token) and hello.kind is TokenKind.WORD
    assert hello.slice == "Hello"

    assert isinstance(overflow, InvalidInteger)
    assert overflow.reason == "overflow error"
    assert overflow.slice == "256"

    assert j.kind is TokenKind.WORD and j.slice == "J"

    assert isinstance(accent, NonAsciiCharacter)
    assert accent.slice == "é"

    assert rome.kind is TokenKind.WORD and rome.slice == "rome"


def test_largest_byte_is_accepted():
    (token,) = tokenize("255")
    assert token.kind is TokenKind.INTEGER
    assert token.value == 255


def test_tabs_and_spaces_are_skipped():
    kinds = [t.kind for t in tokenize("ab\t 12  cd")]
    assert kinds == [TokenKind.WORD, TokenKind.INTEGER, TokenKind.WORD]


@pytest.mark.parametrize("char", ["!", "\n", "é"])
def test_unrecognised_characters_are_errors(char):
    (error,) = tokenize(char)
    assert isinstance(error, NonAsciiCharacter)
    assert isinstance(error, LexingError)
    assert error.slice == char


def test_spans_match_slices():
    source = "Hello 256 Jérome\t7 x!"
    for item in tokenize(source):
        start, end = item.span
        assert source[start:end] == item.slice


def test_empty_input_yields_nothing():
    assert list(tokenize("")) == []