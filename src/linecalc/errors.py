"""Errors raised while scanning, parsing and evaluating calculator statements.

Two categories reach the driving loop:
- ParseError ("parse error"): bad token shape or unexpected character
- EvaluationError ("execution error"): well-formed input that cannot be evaluated
"""

from __future__ import annotations

from typing import Optional, Sequence


def describe_char(ch: str) -> str:
    if ch == "":
        return "end of input"
    return repr(ch)


class CalcError(Exception):
    category = "error"

    def __init__(self, rule: str, message: str):
        super().__init__(f"{rule}: {message}")
        self.rule = rule
        self.message = message


class ParseError(CalcError):
    category = "parse error"

    def __init__(
        self,
        rule: str,
        expected: str,
        char: str = "",
        position: Optional[int] = None,
    ):
        super().__init__(rule, f"expected {expected}, got {describe_char(char)}")
        self.char = char
        self.position = position


class LexerError(ParseError):
    pass


class EvaluationError(CalcError):
    category = "execution error"


class UndefinedIdentifierError(EvaluationError):
    def __init__(self, name: str):
        super().__init__("identifier", f"undefined identifier: {name}")
        self.name = name


class UndefinedFunctionError(EvaluationError):
    def __init__(self, name: str):
        super().__init__("identifier", f"undefined function: {name}")
        self.name = name


class ArityError(EvaluationError):
    def __init__(self, name: str, got: int, expected: Sequence[int]):
        wanted = " or ".join(str(n) for n in expected)
        super().__init__(
            name, f"wrong number of arguments (expected {wanted}, got {got})"
        )
        self.name = name
        self.got = got
        self.expected = tuple(expected)


class DomainError(EvaluationError):
    pass


class AssignmentTargetError(EvaluationError):
    def __init__(self, name: str, kind: str):
        super().__init__("statement", f"cannot assign value to {kind} '{name}'")
        self.name = name
        self.kind = kind


__all__ = [
    "CalcError",
    "ParseError",
    "LexerError",
    "EvaluationError",
    "UndefinedIdentifierError",
    "UndefinedFunctionError",
    "ArityError",
    "DomainError",
    "AssignmentTargetError",
    "describe_char",
]
