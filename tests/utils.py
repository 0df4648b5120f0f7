import io

from lexer import Lexer
from parser import Parser
from ast_interpreter import run_program


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_tokens(tokens):
    """Parse a list of tokens into a ProgramNode."""
    return Parser(tokens).parse()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize()).parse()


def run_text(text: str):
    """Run a program and return (printed values, captured stdout text)."""
    out = io.StringIO()
    values = run_program(parse_text(text), out=out)
    return values, out.getvalue()
