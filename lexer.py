"""
Lexer for the Soloman arithmetic language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes the keyword `print`, non-negative integer literals, the
    operators `+` and `*`, the statement terminator `;`, and skips whitespace.
    The stream always ends with a single `EOF` token.

Examples:
    Input:  "print 1 + 2 * 3;"
    Tokens: [PRINT, INTEGER(1), PLUS, INTEGER(2), STAR, INTEGER(3), SEMICOLON, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Iterating over a `Lexer` yields tokens lazily; `tokenize()` collects them.
- Identifiers are scanned and then mapped to keywords using `self.keywords`.
    The language has no variables, so any other identifier is an error.
- Integer literals must fit in a signed 64-bit integer.
"""

from __future__ import annotations
from typing import Iterator, List
from tokens import INT64_MAX, Token, TokenType
from errors import InvalidNumber, UnexpectedCharacter, UnknownIdentifier


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        self.keywords = {
            "print": TokenType.PRINT,
        }

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        result = []
        line, column = self.line, self.column

        # ASCII digits only
        while self.current_char is not None and self.current_char in "0123456789":
            result.append(self.current_char)
            self.advance()

        literal = "".join(result)
        value = int(literal)
        if value > INT64_MAX:
            raise InvalidNumber(literal, line, column)
        return value

    def identifier(self) -> str:
        """Parse an identifier or keyword."""
        result = []

        while self.current_char is not None and (
            self.current_char.isalnum() or self.current_char == "_"
        ):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            line, column = self.line, self.column

            match self.current_char:
                case "+":
                    self.advance()
                    return Token(TokenType.PLUS, "+", line, column)
                case "*":
                    self.advance()
                    return Token(TokenType.STAR, "*", line, column)
                case ";":
                    self.advance()
                    return Token(TokenType.SEMICOLON, ";", line, column)

            if self.current_char in "0123456789":
                value = self.integer()
                return Token(TokenType.INTEGER, value, line, column)

            if self.current_char.isalpha() or self.current_char == "_":
                ident = self.identifier()
                token_type = self.keywords.get(ident)
                if token_type is None:
                    raise UnknownIdentifier(ident, line, column)
                return Token(token_type, ident, line, column)

            raise UnexpectedCharacter(self.current_char, line, column)

        return Token(TokenType.EOF, None, self.line, self.column)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with (and including) `EOF`."""
        while True:
            token = self.get_next_token()
            yield token
            if token.type == TokenType.EOF:
                break

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        return list(self)


def tokenize(text: str) -> List[Token]:
    return Lexer(text).tokenize()
