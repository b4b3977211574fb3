"""Integer arithmetic calculator: lexer, recursive-descent parser and evaluator."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_ISIZE_MAX = 2**63 - 1


class TokenKind(Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    LPAREN = "("
    RPAREN = ")"
    INTEGER = "integer"


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` is set for integers only."""

    kind: TokenKind
    value: int | None = None
    span: tuple[int, int] = field(default=(0, 0), compare=False)


class LexError(ValueError):
    """Raised when the input holds text no token matches."""

    def __init__(self, span: tuple[int, int], message: str = "") -> None:
        super().__init__(f"lexer error at {span[0]}..{span[1]}: {message}")
        self.span = span
        self.message = message


class ParseError(ValueError):
    """Raised when the token sequence is not a valid expression."""

    def __init__(self, position: int, found: Token | None) -> None:
        what = "end of input" if found is None else f"{found.kind.value!r}"
        super().__init__(f"unexpected {what} at token {position}")
        self.position = position
        self.found = found


@dataclass(frozen=True)
class Int:
    value: int

    def eval(self) -> int:
        return self.value


@dataclass(frozen=True)
class Neg:
    operand: Expr

    def eval(self) -> int:
        return -self.operand.eval()


@dataclass(frozen=True)
class Add:
    lhs: Expr
    rhs: Expr

    def eval(self) -> int:
        return self.lhs.eval() + self.rhs.eval()


@dataclass(frozen=True)
class Sub:
    lhs: Expr
    rhs: Expr

    def eval(self) -> int:
        return self.lhs.eval() - self.rhs.eval()


@dataclass(frozen=True)
class Mul:
    lhs: Expr
    rhs: Expr

    def eval(self) -> int:
        return self.lhs.eval() * self.rhs.eval()


@dataclass(frozen=True)
class Div:
    lhs: Expr
    rhs: Expr

    def eval(self) -> int:
        """Divide, truncating toward zero."""
        dividend = self.lhs.eval()
        divisor = self.rhs.eval()
        quotient = abs(dividend) // abs(divisor)
        return quotient if (dividend < 0) == (divisor < 0) else -quotient


Expr = Union[Int, Neg, Add, Sub, Mul, Div]

_TOKEN_RE = re.compile(r"(?P<skip>[ \t\n]+)|(?P<integer>[0-9]+)|(?P<op>[-+*/()])")
_OPERATORS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.INTEGER}


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into tokens, skipping spaces, tabs and newlines."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise LexError((pos, pos + 1), f"unrecognised character {source[pos]!r}")
        pos = match.end()
        group = match.lastgroup
        if group == "skip":
            continue
        text = match.group()
        if group == "integer":
            value = int(text)
            if value > _ISIZE_MAX:
                raise LexError(match.span(), "integer literal too large")
            tokens.append(Token(TokenKind.INTEGER, value, match.span()))
        else:
            tokens.append(Token(_OPERATORS[text], None, match.span()))
    return tokens


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def fail(self) -> ParseError:
        return ParseError(self.pos, self.peek())

    def accept(self, *kinds: TokenKind) -> TokenKind | None:
        token = self.peek()
        if token is not None and token.kind in kinds:
            self.pos += 1
            return token.kind
        return None

    def expression(self) -> Expr:
        lhs = self.term()
        while (kind := self.accept(TokenKind.PLUS, TokenKind.MINUS)) is not None:
            rhs = self.term()
            lhs = Add(lhs, rhs) if kind is TokenKind.PLUS else Sub(lhs, rhs)
        return lhs

    def term(self) -> Expr:
        lhs = self.unary()
        while (kind := self.accept(TokenKind.MULTIPLY, TokenKind.DIVIDE)) is not None:
            rhs = self.unary()
            lhs = Mul(lhs, rhs) if kind is TokenKind.MULTIPLY else Div(lhs, rhs)
        return lhs

    def unary(self) -> Expr:
        negations = 0
        while self.accept(TokenKind.MINUS) is not None:
            negations += 1
        expr = self.atom()
        for _ in range(negations):
            expr = Neg(expr)
        return expr

    def atom(self) -> Expr:
        token = self.peek()
        if token is None:
            raise self.fail()
        if token.kind is TokenKind.INTEGER:
            self.pos += 1
            return Int(token.value)
        if token.kind is TokenKind.LPAREN:
            self.pos += 1
            inner = self.expression()
            if self.accept(TokenKind.RPAREN) is None:
                raise self.fail()
            return inner
        raise self.fail()


def parse(tokens: list[Token]) -> Expr:
    """Build an expression tree from the whole token sequence."""
    parser = _Parser(list(tokens))
    expr = parser.expression()
    if parser.peek() is not None:
        raise parser.fail()
    return expr


def evaluate(source: str) -> int:
    """Lex, parse and evaluate an arithmetic expression."""
    return parse(tokenize(source)).eval()


def main(argv: list[str] | None = None) -> int:
    """Print the tree and the value of the expression given on the command line."""
    parser = argparse.ArgumentParser(prog="calculator", description="Evaluate an integer expression.")
    parser.add_argument("expression", help="e.g. '1 + 7 * (3 - 4) / 5'")
    args = parser.parse_args(argv)

    try:
        tokens = tokenize(args.expression)
    except LexError as err:
        print(err)
        return 0
    try:
        ast = parse(tokens)
    except ParseError as err:
        print(f"parse error: {err}")
        return 0
    print(f"[AST]\n{ast!r}")
    print(f"\n[result]\n{ast.eval()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())