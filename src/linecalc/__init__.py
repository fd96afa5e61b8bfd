from .environment import Environment, Function
from .errors import (
    ArityError,
    AssignmentTargetError,
    CalcError,
    DomainError,
    EvaluationError,
    LexerError,
    ParseError,
    UndefinedFunctionError,
    UndefinedIdentifierError,
)
from .lexer import Lexer, Token, TokenKind
from .parser import Operator, Parser, Result, evaluate, evaluate_statement
from .prelude import default_environment
from .scanner import Scanner

__all__ = [
    "Scanner",
    "Lexer",
    "Token",
    "TokenKind",
    "Environment",
    "Function",
    "default_environment",
    "Operator",
    "Parser",
    "Result",
    "evaluate",
    "evaluate_statement",
    "CalcError",
    "ParseError",
    "LexerError",
    "EvaluationError",
    "UndefinedIdentifierError",
    "UndefinedFunctionError",
    "ArityError",
    "DomainError",
    "AssignmentTargetError",
]
