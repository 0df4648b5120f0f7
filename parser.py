"""
Parser for the Soloman arithmetic language.

Overview and approach:
- This parser implements a small, hand-written recursive/Pratt-style parser.
    Statements are parsed by recursive descent; expressions use a Pratt-like
    loop driven by the precedence table in `self.precedence`.

Grammar (LL(1), one token of lookahead, no backtracking):

    program    := statement* EOF
    statement  := PRINT expression SEMICOLON
    expression := term (PLUS term)*
    term       := factor (STAR factor)*
    factor     := INTEGER

Key points:
- `parse_primary()` recognizes integer literals, the only factor.
- `parse_binary_expression()` implements the Pratt loop: while the next
    token is an operator with precedence >= the current minimum, bind that
    operator and parse the right-hand side with minimum `precedence + 1`.
    Raising the minimum makes every operator left-associative, so `1+2+3`
    groups as `(1+2)+3`, and `*` (precedence 2) binds tighter than `+` (1).
- The parser pulls tokens from any iterable, so it can consume a lazy
    `Lexer` directly. Only the current token is held.

Errors:
- A missing required token raises `UnexpectedToken`; reaching `EOF` where a
    statement is still open raises `UnexpectedEndOfInput`. Both carry the
    position of the offending token.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import UnexpectedEndOfInput, UnexpectedToken


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.current = Token(TokenType.EOF, None, 1, 1)
        self.current = self._pull()

        # Operator precedence table (higher = tighter binding)
        self.precedence: Dict[TokenType, int] = {
            TokenType.PLUS: 1,
            TokenType.STAR: 2,
        }
        self.operators: Dict[TokenType, BinaryOperator] = {
            TokenType.PLUS: BinaryOperator.ADD,
            TokenType.STAR: BinaryOperator.MULTIPLY,
        }

    def _pull(self) -> Token:
        try:
            return next(self.tokens)
        except StopIteration:
            # A stream without its own EOF ends where the last token was.
            return Token(TokenType.EOF, None, self.current.line, self.current.column)

    def advance(self) -> Token:
        """Move to next token. `EOF` is never consumed."""
        if self.current.type != TokenType.EOF:
            self.current = self._pull()
        return self.current

    def error(self, expected: TokenType | str) -> UnexpectedToken | UnexpectedEndOfInput:
        token = self.current
        if token.type == TokenType.EOF:
            return UnexpectedEndOfInput(expected, token.line, token.column)
        return UnexpectedToken(expected, token, token.line, token.column)

    def expect(self, expected_type: TokenType) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            token = self.current
            self.advance()
            return token
        raise self.error(expected_type)

    def get_precedence(self, token_type: TokenType) -> int:
        """Get precedence for operator token type."""
        return self.precedence.get(token_type, 0)

    def parse_primary(self) -> ASTNode:
        """Parse a factor: an integer literal."""
        token = self.expect(TokenType.INTEGER)
        return IntLiteralNode(value=token.value, line=token.line, column=token.column)

    def parse_binary_expression(
        self, left: ASTNode, min_precedence: int = 1
    ) -> ASTNode:
        """Parse binary expressions using Pratt parsing."""
        while True:
            token = self.current
            operator: Optional[BinaryOperator] = self.operators.get(token.type)
            if operator is None:
                break

            precedence = self.get_precedence(token.type)
            if precedence < min_precedence:
                break

            self.advance()
            # Parse right operand with higher precedence
            right = self.parse_binary_expression(self.parse_primary(), precedence + 1)
            left = BinaryOpNode(
                left=left,
                operator=operator,
                right=right,
                line=token.line,
                column=token.column,
            )

        return left

    def parse_expression(self) -> ASTNode:
        """Parse an expression."""
        return self.parse_binary_expression(self.parse_primary())

    def parse_statement(self) -> PrintStatementNode:
        """Parse a statement: print expression ;"""
        keyword = self.expect(TokenType.PRINT)
        expr = self.parse_expression()
        self.expect(TokenType.SEMICOLON)
        return PrintStatementNode(
            expression=expr, line=keyword.line, column=keyword.column
        )

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements: List[PrintStatementNode] = []

        while self.current.type != TokenType.EOF:
            statements.append(self.parse_statement())

        return ProgramNode(statements=statements, line=1, column=1)

    def parse(self) -> ProgramNode:
        return self.parse_program()


def parse(tokens: Iterable[Token]) -> ProgramNode:
    return Parser(tokens).parse()
