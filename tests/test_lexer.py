import sys
from pathlib import Path

import pytest

# Make src importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from linecalc.errors import LexerError  # noqa: E402
from linecalc.lexer import Lexer, TokenKind, scan_name, scan_number  # noqa: E402
from linecalc.scanner import Scanner  # noqa: E402


def number(text: str) -> float:
    return scan_number(Scanner(text))


def kinds(code: str):
    return [t.kind for t in Lexer(code).scan()]


@pytest.mark.parametrize(
    "text",
    ["0", "7", "42", "3.14", "0.1", "1e-3", "2e+2", "6.02e23", "1.5e-7", "123.456e2"],
)
def test_number_matches_float_parsing(text):
    assert number(text) == float(text)


def test_number_skips_trailing_blanks():
    s = Scanner("12  \t+")
    assert scan_number(s) == 12
    assert s.peek() == "+"


def test_number_stops_before_non_digit():
    s = Scanner("12x")
    assert scan_number(s) == 12
    assert s.peek() == "x"


def test_huge_literal_becomes_inf_and_tiny_becomes_zero():
    assert number("1e400") == float("inf")
    assert number("1e-400") == 0.0


def test_number_requires_leading_digit():
    with pytest.raises(LexerError) as info:
        number(".5")
    assert info.value.rule == "number"
    assert info.value.char == "."


def test_decimal_point_requires_digit():
    with pytest.raises(LexerError) as info:
        number("3.")
    assert "decimal point" in str(info.value)
    assert "end of input" in str(info.value)


def test_exponent_requires_sign_or_digit():
    with pytest.raises(LexerError) as info:
        number("3e")
    assert "exponent" in str(info.value)


def test_exponent_sign_requires_digit():
    with pytest.raises(LexerError):
        number("3e+")


def test_name_allows_underscore_and_digits():
    s = Scanner("_tmp2 > x")
    assert scan_name(s) == "_tmp2"
    assert s.peek() == ">"


def test_name_is_case_sensitive():
    assert scan_name(Scanner("Pi")) == "Pi"


def test_name_requires_letter():
    with pytest.raises(LexerError) as info:
        scan_name(Scanner("9lives"))
    assert info.value.rule == "name"


def test_non_ascii_letters_are_not_names():
    with pytest.raises(LexerError):
        scan_name(Scanner("é"))


def test_token_dump_of_statement():
    assert kinds("2 + sqrt(x) ^ 3 > y") == [
        TokenKind.NUMBER,
        TokenKind.PLUS,
        TokenKind.NAME,
        TokenKind.LPAREN,
        TokenKind.NAME,
        TokenKind.RPAREN,
        TokenKind.CARET,
        TokenKind.NUMBER,
        TokenKind.GT,
        TokenKind.NAME,
        TokenKind.EOF,
    ]


def test_token_positions_and_values():
    tokens = Lexer("1.5e2 *\n  pi").scan()
    assert tokens[0].lexeme == "1.5e2"
    assert tokens[0].value == 150.0
    assert (tokens[0].line, tokens[0].col) == (1, 1)
    assert tokens[1].kind == TokenKind.STAR
    assert tokens[1].col == 7
    assert tokens[2].kind == TokenKind.NEWLINE
    assert tokens[3].lexeme == "pi"
    assert (tokens[3].line, tokens[3].col) == (2, 3)


def test_unknown_character_raises():
    with pytest.raises(LexerError) as info:
        Lexer("2 $ 3").scan()
    assert info.value.char == "$"
    assert info.value.position == 2
