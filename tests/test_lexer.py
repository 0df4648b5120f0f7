import pytest

from errors import InvalidNumber, LexError, UnexpectedCharacter, UnknownIdentifier
from lexer import Lexer
from main import lex
from tokens import INT64_MAX, Token, TokenType


def test_lexer_recognizes_statement_tokens():
    tokens = lex("print 1 + 22 * 333;")
    types = [t.type for t in tokens]

    assert types == [
        TokenType.PRINT,
        TokenType.INTEGER,
        TokenType.PLUS,
        TokenType.INTEGER,
        TokenType.STAR,
        TokenType.INTEGER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert [t.value for t in tokens if t.type == TokenType.INTEGER] == [1, 22, 333]


def test_whitespace_is_not_significant():
    assert [t.type for t in lex("print 1+2;")] == [
        t.type for t in lex("  print\n\t1 +\n 2 ;  ")
    ]


def test_empty_and_blank_sources_yield_only_eof():
    for src in ("", "   \n\t  "):
        tokens = lex(src)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF


def test_tokens_carry_line_and_column():
    tokens = lex("print 1;\n  print 23;")
    second_print = tokens[3]
    assert second_print.type == TokenType.PRINT
    assert (second_print.line, second_print.column) == (2, 3)
    literal = tokens[4]
    assert (literal.line, literal.column) == (2, 9)


def test_lexer_is_lazy():
    stream = iter(Lexer("print 1; @"))
    assert next(stream).type == TokenType.PRINT
    assert next(stream).type == TokenType.INTEGER
    assert next(stream).type == TokenType.SEMICOLON
    with pytest.raises(UnexpectedCharacter):
        next(stream)


def test_largest_int64_literal_is_accepted():
    tokens = lex(f"print {INT64_MAX};")
    assert tokens[1] == Token(TokenType.INTEGER, INT64_MAX, 1, 7)


def test_overflowing_literal_is_invalid_number():
    with pytest.raises(InvalidNumber) as excinfo:
        lex(f"print {INT64_MAX + 1};")
    assert excinfo.value.position == (1, 7)
    assert isinstance(excinfo.value, LexError)


def test_unexpected_character_reports_position():
    with pytest.raises(UnexpectedCharacter) as excinfo:
        lex("print 1 - 2;")
    assert excinfo.value.char == "-"
    assert excinfo.value.position == (1, 9)
    assert "LexError at line 1, column 9" in str(excinfo.value)


def test_keyword_is_case_sensitive():
    with pytest.raises(UnknownIdentifier) as excinfo:
        lex("Print 1;")
    assert excinfo.value.name == "Print"


def test_identifiers_other_than_print_are_rejected():
    with pytest.raises(UnknownIdentifier):
        lex("print x;")
    with pytest.raises(UnknownIdentifier):
        lex("printx 1;")


def test_non_ascii_digits_are_not_integers():
    with pytest.raises(UnexpectedCharacter):
        lex("print ²;")
