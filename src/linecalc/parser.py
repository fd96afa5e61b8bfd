"""Recursive-descent evaluator for calculator statements.

Each grammar layer consumes its syntactic unit straight off the Scanner
and returns a float; there is no intermediate token list or tree.

    identifier ::= name ('(' (expr (',' expr)*)? ')')?
    primary    ::= number | identifier | '(' expr ')'
    factor     ::= primary ('^' primary)*
    term       ::= factor (('*'|'/'|'%') factor)*
    expr       ::= ('+'|'-')? term (('+'|'-') term)*
    statement  ::= expr ('>' name)?

Layers raise CalcError subclasses; ``evaluate_statement`` is the one
place they are turned into a Result for the driving loop.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .environment import Environment
from .errors import CalcError, ParseError
from .lexer import is_digit, is_letter, scan_name, scan_number
from .scanner import Scanner


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"
    POWER = "^"


ADDITIVE = frozenset({Operator.ADD, Operator.SUBTRACT})
MULTIPLICATIVE = frozenset({Operator.MULTIPLY, Operator.DIVIDE, Operator.REMAINDER})


def operator_for(ch: str) -> Optional[Operator]:
    for op in Operator:
        if op.value == ch:
            return op
    return None


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def _power(left: float, right: float) -> float:
    right = float(right)
    odd = right.is_integer() and right % 2 == 1
    try:
        return math.pow(left, right)
    except OverflowError:
        return -math.inf if left < 0 and odd else math.inf
    except ValueError:
        if left == 0:
            # zero to a negative power
            return math.copysign(math.inf, left) if odd else math.inf
        return math.nan


def apply_operator(op: Operator, left: float, right: float) -> float:
    """Binary operators with IEEE results: 1/0 is inf, 1%0 and (-8)^0.5 are nan."""
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUBTRACT:
        return left - right
    if op is Operator.MULTIPLY:
        return left * right
    if op is Operator.DIVIDE:
        return _divide(left, right)
    if op is Operator.REMAINDER:
        return _remainder(left, right)
    if op is Operator.POWER:
        return _power(left, right)
    raise ValueError(f"unknown operator {op!r}")


# Each level of parentheses or call arguments costs several Python frames.
MAX_NESTING = 64


class Parser:
    def __init__(self, scanner: Scanner, env: Environment):
        self.scanner = scanner
        self.env = env
        self.depth = 0

    # --- statement ---
    def statement(self) -> float:
        self.scanner.skip_blanks()
        result = self._expr()
        if self._peek() == ">":
            self._advance()
            name = scan_name(self.scanner)
            self.env.assign(name, result)
        return result

    # --- expressions ---
    def _expr(self) -> float:
        negate = False
        sign = self._operator()
        if sign in ADDITIVE:
            negate = sign is Operator.SUBTRACT
            self._advance()

        result = self._term()
        if negate:
            result = -result

        op = self._operator()
        while op in ADDITIVE:
            self._advance()
            result = apply_operator(op, result, self._term())
            op = self._operator()
        return result

    def _term(self) -> float:
        result = self._factor()
        op = self._operator()
        while op in MULTIPLICATIVE:
            self._advance()
            result = apply_operator(op, result, self._factor())
            op = self._operator()
        return result

    def _factor(self) -> float:
        result = self._primary()
        while self._operator() is Operator.POWER:
            self._advance()
            result = apply_operator(Operator.POWER, result, self._primary())
        return result

    def _primary(self) -> float:
        ch = self._peek()
        if is_digit(ch):
            return scan_number(self.scanner)
        if is_letter(ch):
            return self._identifier()
        if ch == "(":
            self._open("primary")
            try:
                result = self._expr()
                self._expect(")", "primary")
            finally:
                self.depth -= 1
            return result
        raise self._error("primary", "number, identifier or (expression)")

    def _identifier(self) -> float:
        name = scan_name(self.scanner)
        if self._peek() != "(":
            return self.env.lookup(name)
        self._open("call")
        try:
            args = self._arguments()
            self._expect(")", "call")
        finally:
            self.depth -= 1
        return self.env.call(name, args)

    def _arguments(self) -> List[float]:
        args: List[float] = []
        if self._peek() == ")":
            return args
        args.append(self._expr())
        while self._peek() == ",":
            self._advance()
            args.append(self._expr())
        return args

    # --- helpers ---
    def _peek(self) -> str:
        return self.scanner.peek()

    def _operator(self) -> Optional[Operator]:
        return operator_for(self._peek())

    def _advance(self) -> None:
        # Consume one punctuation character and the blanks after it.
        self.scanner.advance()
        self.scanner.skip_blanks()

    def _open(self, rule: str) -> None:
        if self.depth >= MAX_NESTING:
            raise self._error(rule, f"at most {MAX_NESTING} nested levels")
        self.depth += 1
        self._advance()

    def _expect(self, ch: str, rule: str) -> None:
        if self._peek() != ch:
            raise self._error(rule, repr(ch))
        self._advance()

    def _error(self, rule: str, expected: str) -> ParseError:
        return ParseError(rule, expected, self._peek(), self.scanner.position)


@dataclass(frozen=True)
class Result:
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate_statement(scanner: Scanner, env: Environment) -> Result:
    """Evaluate one statement, leaving the scanner just past it.

    On failure the scanner is left at the offending character and the
    environment is untouched; the caller may discard the rest of the line.
    """
    try:
        return Result(value=Parser(scanner, env).statement())
    except CalcError as e:
        return Result(error=e)


def evaluate(source: str, env: Environment) -> float:
    """Evaluate the first statement in ``source``; raise on failure."""
    result = evaluate_statement(Scanner(source), env)
    if not result.ok:
        raise result.error
    return result.value


__all__ = [
    "Operator",
    "ADDITIVE",
    "MULTIPLICATIVE",
    "MAX_NESTING",
    "operator_for",
    "apply_operator",
    "Parser",
    "Result",
    "evaluate_statement",
    "evaluate",
]
