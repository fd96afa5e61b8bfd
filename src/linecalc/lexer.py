"""
Lexical rules for calculator input.

``scan_number`` and ``scan_name`` are the two token shapes the grammar
consumes directly from a Scanner. ``Lexer`` reuses them to split a whole
line into tokens for the token-dump CLI; the evaluator never builds a
token list.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .errors import LexerError
from .scanner import Scanner

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters + "_")

# Past this many decimal places a literal is certainly inf or 0.0.
_MAX_DECIMAL_EXPONENT = 400


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_letter(ch: str) -> bool:
    return ch in LETTERS


def is_name_char(ch: str) -> bool:
    return ch in LETTERS or ch in DIGITS


def _scale(mantissa: int, power: int) -> float:
    """Return ``mantissa * 10**power`` rounded once to the nearest float."""
    if mantissa == 0:
        return 0.0
    if power > _MAX_DECIMAL_EXPONENT:
        return math.inf
    if -power > _MAX_DECIMAL_EXPONENT + len(str(mantissa)):
        return 0.0
    try:
        if power >= 0:
            return float(mantissa * 10**power)
        return mantissa / 10**-power
    except OverflowError:
        return math.inf


def _digits(scanner: Scanner) -> tuple[int, int]:
    value = 0
    count = 0
    while is_digit(scanner.peek()):
        value = value * 10 + int(scanner.peek())
        count += 1
        scanner.advance()
    return value, count


def scan_number(scanner: Scanner) -> float:
    """number ::= digit+ ('.' digit+)? ('e' ('+'|'-')? digit+)?"""
    ch = scanner.peek()
    if not is_digit(ch):
        raise LexerError("number", "digit", ch, scanner.position)
    mantissa, _ = _digits(scanner)

    fraction_digits = 0
    if scanner.peek() == ".":
        scanner.advance()
        ch = scanner.peek()
        if not is_digit(ch):
            raise LexerError(
                "number", "digit after decimal point", ch, scanner.position
            )
        fraction, fraction_digits = _digits(scanner)
        mantissa = mantissa * 10**fraction_digits + fraction

    exponent = 0
    if scanner.peek() == "e":
        scanner.advance()
        ch = scanner.peek()
        negative = False
        if ch == "+":
            scanner.advance()
        elif ch == "-":
            negative = True
            scanner.advance()
        elif not is_digit(ch):
            raise LexerError(
                "number",
                "sign or digit after exponent indicator",
                ch,
                scanner.position,
            )
        ch = scanner.peek()
        if not is_digit(ch):
            raise LexerError("number", "digit in exponent", ch, scanner.position)
        exponent, _ = _digits(scanner)
        if negative:
            exponent = -exponent

    scanner.skip_blanks()
    return _scale(mantissa, exponent - fraction_digits)


def scan_name(scanner: Scanner) -> str:
    """name ::= letter (letter|digit)*  (underscore counts as a letter)"""
    ch = scanner.peek()
    if not is_letter(ch):
        raise LexerError("name", "letter", ch, scanner.position)
    chars = []
    while is_name_char(scanner.peek()):
        chars.append(scanner.peek())
        scanner.advance()
    scanner.skip_blanks()
    return "".join(chars)


class TokenKind(Enum):
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    GT = auto()

    NUMBER = auto()
    NAME = auto()

    NEWLINE = auto()
    EOF = auto()


PUNCTUATION = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    ">": TokenKind.GT,
}


@dataclass
class Token:
    kind: TokenKind
    lexeme: str
    line: int
    col: int
    value: Optional[float] = None


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.line = 1
        self.line_start = 0

    def scan(self) -> List[Token]:
        scanner = Scanner(self.source)
        tokens: List[Token] = []
        while True:
            scanner.skip_blanks()
            start = scanner.position
            col = start - self.line_start + 1
            ch = scanner.peek()

            if scanner.at_end():
                tokens.append(Token(TokenKind.EOF, "", self.line, col))
                return tokens

            if ch == "\n":
                tokens.append(Token(TokenKind.NEWLINE, ch, self.line, col))
                scanner.advance()
                self.line += 1
                self.line_start = scanner.position
                continue

            if is_digit(ch):
                value = scan_number(scanner)
                lexeme = self.source[start : scanner.position].rstrip(" \t")
                tokens.append(Token(TokenKind.NUMBER, lexeme, self.line, col, value))
                continue

            if is_letter(ch):
                name = scan_name(scanner)
                tokens.append(Token(TokenKind.NAME, name, self.line, col))
                continue

            kind = PUNCTUATION.get(ch)
            if kind is None:
                raise LexerError("token", "number, name or operator", ch, start)
            scanner.advance()
            tokens.append(Token(kind, ch, self.line, col))


__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "LexerError",
    "PUNCTUATION",
    "scan_number",
    "scan_name",
    "is_digit",
    "is_letter",
    "is_name_char",
]
