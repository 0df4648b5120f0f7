"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type, an optional
value and the source position of the token's first character. Tokens are the
atomic units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# Integer values are signed 64-bit
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TokenType(Enum):
    # Literals
    INTEGER = auto()

    # Arithmetic operators
    PLUS = auto()
    STAR = auto()

    # Punctuation
    SEMICOLON = auto()

    # Keywords
    PRINT = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | int] = None
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)}, {self.line}:{self.column})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)
