"""Small JSON lexer and parser that reports errors with their location."""

from __future__ import annotations

import argparse
import pprint
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class TokenKind(Enum):
    BOOL = "bool"
    BRACE_OPEN = "{"
    BRACE_CLOSE = "}"
    BRACKET_OPEN = "["
    BRACKET_CLOSE = "]"
    COLON = ":"
    COMMA = ","
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    """A lexed token.

    ``value`` is a bool for booleans, a float for numbers and the quoted
    text, quotes and escapes included, for strings.
    """

    kind: TokenKind
    span: tuple[int, int]
    value: Any = None


class JsonError(ValueError):
    """Raised when the input is not a valid JSON value."""

    def __init__(self, message: str, span: tuple[int, int]) -> None:
        super().__init__(f"{message} at {span[0]}..{span[1]}")
        self.message = message
        self.span = span


_TOKEN_RE = re.compile(
    r"(?P<skip>[ \t\r\n\f]+)"
    r"|(?P<false>false)"
    r"|(?P<true>true)"
    r"|(?P<null>null)"
    r"|(?P<punct>[{}\[\]:,])"
    r"|(?P<number>-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?)"
    r'|(?P<string>"(?:[^"\\\x00-\x1F]|\\(?:["\\bnfrt/]|u[a-fA-F0-9]{4}))*")'
)

_PUNCTUATION = {
    kind.value: kind
    for kind in (
        TokenKind.BRACE_OPEN,
        TokenKind.BRACE_CLOSE,
        TokenKind.BRACKET_OPEN,
        TokenKind.BRACKET_CLOSE,
        TokenKind.COLON,
        TokenKind.COMMA,
    )
}


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source``; unrecognised characters become ERROR tokens."""
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            yield Token(TokenKind.ERROR, (pos, pos + 1), source[pos])
            pos += 1
            continue
        pos = match.end()
        group = match.lastgroup
        text, span = match.group(), match.span()
        if group == "skip":
            continue
        if group == "false":
            yield Token(TokenKind.BOOL, span, False)
        elif group == "true":
            yield Token(TokenKind.BOOL, span, True)
        elif group == "null":
            yield Token(TokenKind.NULL, span)
        elif group == "punct":
            yield Token(_PUNCTUATION[text], span)
        elif group == "number":
            yield Token(TokenKind.NUMBER, span, float(text))
        else:
            yield Token(TokenKind.STRING, span, text)


class _Lexer:
    """Token stream that remembers the span of the last token read."""

    def __init__(self, source: str) -> None:
        self._tokens = tokenize(source)
        self._end = len(source)
        self.span: tuple[int, int] = (0, 0)

    def next(self) -> Token | None:
        token = next(self._tokens, None)
        self.span = (self._end, self._end) if token is None else token.span
        return token


_SCALARS = (TokenKind.BOOL, TokenKind.NULL, TokenKind.NUMBER, TokenKind.STRING)


def _parse_value(lexer: _Lexer) -> Any:
    token = lexer.next()
    if token is None:
        raise JsonError("empty values are not allowed", lexer.span)
    if token.kind in _SCALARS:
        return token.value
    if token.kind is TokenKind.BRACE_OPEN:
        return _parse_object(lexer)
    if token.kind is TokenKind.BRACKET_OPEN:
        return _parse_array(lexer)
    raise JsonError("unexpected token here (context: value)", lexer.span)


def _parse_array(lexer: _Lexer) -> list[Any]:
    array: list[Any] = []
    opening = lexer.span
    awaits_comma = False
    awaits_value = False
    while (token := lexer.next()) is not None:
        kind = token.kind
        if kind in _SCALARS and not awaits_comma:
            array.append(token.value)
            awaits_value = False
        elif kind is TokenKind.BRACE_OPEN and not awaits_comma:
            array.append(_parse_object(lexer))
            awaits_value = False
        elif kind is TokenKind.BRACKET_OPEN and not awaits_comma:
            array.append(_parse_array(lexer))
            awaits_value = False
        elif kind is TokenKind.BRACKET_CLOSE and not awaits_value:
            return array
        elif kind is TokenKind.COMMA and awaits_comma:
            awaits_value = True
        else:
            raise JsonError("unexpected token here (context: array)", lexer.span)
        awaits_comma = not awaits_value
    raise JsonError("unmatched opening bracket defined here", opening)


def _parse_object(lexer: _Lexer) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    opening = lexer.span
    awaits_comma = False
    awaits_key = False
    while (token := lexer.next()) is not None:
        kind = token.kind
        if kind is TokenKind.BRACE_CLOSE and not awaits_key:
            return mapping
        if kind is TokenKind.COMMA and awaits_comma:
            awaits_key = True
        elif kind is TokenKind.STRING and not awaits_comma:
            colon = lexer.next()
            if colon is None or colon.kind is not TokenKind.COLON:
                raise JsonError("unexpected token here, expecting ':'", lexer.span)
            mapping[token.value] = _parse_value(lexer)
            awaits_key = False
        else:
            raise JsonError("unexpected token here (context: object)", lexer.span)
        awaits_comma = not awaits_key
    raise JsonError("unmatched opening brace defined here", opening)


def parse(source: str) -> Any:
    """Parse the first JSON value in ``source``.

    Objects become dicts keyed by the quoted key text, arrays lists,
    numbers floats, strings their quoted text and null ``None``.
    """
    return _parse_value(_Lexer(source))


def format_error(filename: str, source: str, error: JsonError) -> str:
    """Render ``error`` as a report that points into ``source``."""
    start, end = error.span
    line_number = source.count("\n", 0, start) + 1
    line_start = source.rfind("\n", 0, start) + 1
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)
    line = source[line_start:line_end]
    column = start - line_start
    width = max(1, min(end, line_end) - start)
    gutter = " " * len(str(line_number))
    return "\n".join(
        [
            "Error: Invalid JSON",
            f"{gutter}--> {filename}:{line_number}:{column + 1}",
            f"{gutter} |",
            f"{line_number} | {line}",
            f"{gutter} | {' ' * column}{'^' * width} {error.message}",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Parse the file named on the command line and print its value or an error."""
    parser = argparse.ArgumentParser(prog="jsonparse", description="Parse a JSON file.")
    parser.add_argument("path", help="file holding a JSON value")
    args = parser.parse_args(argv)
    source = Path(args.path).read_text(encoding="utf-8")
    try:
        value = parse(source)
    except JsonError as err:
        print(format_error(args.path, source, err), file=sys.stderr)
        return 0
    print(pprint.pformat(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())