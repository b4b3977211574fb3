import pytest

from lexdemos.calculator import (
    Add,
    Div,
    Int,
    LexError,
    Mul,
    Neg,
    ParseError,
    Sub,
    Token,
    TokenKind,
    evaluate,
    main,
    parse,
    tokenize,
)


def test_worked_example():
    assert evaluate("1 + 7 * (3 - 4) / 2") == -2


def test_division_truncates_toward_zero():
    assert evaluate("-7 / 2") == -3
    assert evaluate("7 / 2") == 3


@pytest.mark.parametrize(
    "source, expected",
    [
        ("2 + 3 * 4", 2 + 3 * 4),
        ("(2 + 3) * 4", (2 + 3) * 4),
        ("10 - 4 - 3", 10 - 4 - 3),
        ("--5", 5),
        ("-(6)", -6),
    ],
)
def test_precedence_and_associativity(source, expected):
    assert evaluate(source) == expected


def test_left_associative_tree():
    assert parse(tokenize("1 - 2 - 3")) == Sub(Sub(Int(1), Int(2)), Int(3))


def test_unary_minus_nests():
    assert parse(tokenize("--5")) == Neg(Neg(Int(5)))


def test_mixed_tree():
    assert parse(tokenize("1 + 2 * 3 / 4")) == Add(Int(1), Div(Mul(Int(2), Int(3)), Int(4)))


def test_tokenize_kinds_and_values():
    assert tokenize("12+(3)") == [
        Token(TokenKind.INTEGER, 12),
        Token(TokenKind.PLUS),
        Token(TokenKind.LPAREN),
        Token(TokenKind.INTEGER, 3),
        Token(TokenKind.RPAREN),
    ]


def test_token_spans_cover_their_text():
    source = " 42 *\t7\n- 100"
    for token in tokenize(source):
        start, end = token.span
        text = source[start:end]
        if token.kind is TokenKind.INTEGER:
            assert text == str(token.value)
        else:
            assert text == token.kind.value


def test_lex_error_points_at_character():
    source = "1 $ 2"
    with pytest.raises(LexError) as info:
        tokenize(source)
    start, end = info.value.span
    assert source[start:end] == "$"


def test_oversized_literal_is_lex_error():
    with pytest.raises(LexError):
        tokenize(str(2**63))


@pytest.mark.parametrize("source", ["1 +", "(1", "1 2", "", ")", "* 3"])
def test_parse_errors(source):
    with pytest.raises(ParseError):
        parse(tokenize(source))


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1 / 0")


def test_main_prints_result(capsys):
    assert main(["2 * 3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[AST]\n")
    assert out.endswith(f"[result]\n{2 * 3}\n")


def test_main_reports_lex_error(capsys):
    main(["1 $"])
    assert capsys.readouterr().out.startswith("lexer error at")


def test_main_reports_parse_error(capsys):
    main(["1 +"])
    assert capsys.readouterr().out.startswith("parse error:")