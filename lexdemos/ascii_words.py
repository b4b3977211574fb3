"""Lexer for blank-separated ASCII words and byte-sized integers."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

U8_MAX = 255


class TokenKind(Enum):
    WORD = "word"
    INTEGER = "integer"


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` is set for integers only."""

    kind: TokenKind
    slice: str
    span: tuple[int, int]
    value: int | None = None


class LexingError(Exception):
    """An error for one piece of the input; lexing carries on after it."""

    def __init__(self, slice: str, span: tuple[int, int], message: str) -> None:
        super().__init__(message)
        self.slice = slice
        self.span = span


class InvalidInteger(LexingError):
    """A run of digits that does not fit in an unsigned byte."""

    def __init__(self, reason: str, slice: str, span: tuple[int, int]) -> None:
        super().__init__(slice, span, f"invalid integer {slice!r}: {reason}")
        self.reason = reason


class NonAsciiCharacter(LexingError):
    """A character that starts no token."""

    def __init__(self, slice: str, span: tuple[int, int]) -> None:
        super().__init__(slice, span, f"unexpected character {slice!r}")


_PATTERN = re.compile(r"(?P<skip>[ \t]+)|(?P<word>[a-zA-Z]+)|(?P<integer>[0-9]+)")


def tokenize(source: str) -> Iterator[Token | LexingError]:
    """Yield tokens and, in their place, errors for pieces that do not lex."""
    pos = 0
    while pos < len(source):
        match = _PATTERN.match(source, pos)
        if match is None:
            yield NonAsciiCharacter(source[pos], (pos, pos + 1))
            pos += 1
            continue
        pos = match.end()
        group = match.lastgroup
        if group == "skip":
            continue
        text, span = match.group(), match.span()
        if group == "word":
            yield Token(TokenKind.WORD, text, span)
            continue
        value = int(text)
        if value > U8_MAX:
            yield InvalidInteger("overflow error", text, span)
        else:
            yield Token(TokenKind.INTEGER, text, span, value)