"""Error types raised by the lexer, parser and evaluator.

Every stage fails with a single exception that aborts the pipeline. All of
them derive from `SolomanError`, which records a message and, where one is
known, the 1-based source position. The class attribute `kind` names the
error in diagnostics, e.g.

    ParseError at line 1, column 9: Expected INTEGER, got SEMICOLON (';')
"""

from __future__ import annotations
from typing import Optional


class SolomanError(Exception):
    kind = "Error"

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    @property
    def position(self) -> Optional[tuple[int, int]]:
        if self.line is None or self.column is None:
            return None
        return (self.line, self.column)

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind} at line {self.line}, column {self.column}: {self.message}"


# Lexical errors
class LexError(SolomanError):
    kind = "LexError"


class UnexpectedCharacter(LexError):
    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"Unexpected character {char!r}", line, column)
        self.char = char


class InvalidNumber(LexError):
    def __init__(self, literal: str, line: int, column: int):
        super().__init__(
            f"Integer literal {literal} does not fit in a 64-bit signed integer",
            line,
            column,
        )
        self.literal = literal


class UnknownIdentifier(LexError):
    def __init__(self, name: str, line: int, column: int):
        super().__init__(f"Unknown identifier '{name}'", line, column)
        self.name = name


# Syntax errors
class ParseError(SolomanError):
    kind = "ParseError"


class UnexpectedToken(ParseError):
    def __init__(self, expected, found, line: int, column: int):
        super().__init__(
            f"Expected {expected}, got {found.type} ({found.lexeme!r})", line, column
        )
        self.expected = expected
        self.found = found


class UnexpectedEndOfInput(ParseError):
    def __init__(self, expected, line: int, column: int):
        super().__init__(f"Unexpected end of input, expected {expected}", line, column)
        self.expected = expected


# Runtime errors
class EvalError(SolomanError):
    kind = "EvalError"


class Overflow(EvalError):
    def __init__(
        self,
        operator,
        left: int,
        right: int,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(
            f"Integer overflow evaluating {left} {operator} {right}", line, column
        )
        self.operator = operator
        self.left = left
        self.right = right
