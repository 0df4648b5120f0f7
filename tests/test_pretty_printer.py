from main import lex, parse_tokens
from pretty_printer import PrettyPrinter


def test_print_ast_shows_tree_shape():
    ast = parse_tokens(lex("print 1 + 2 * 3;"))
    s = PrettyPrinter.print_ast(ast)
    assert s.splitlines() == [
        "Program",
        "    stmt[0]: PrintStatement",
        "      expr: BinaryOp(+)",
        "        left: IntLiteral(1)",
        "        right: BinaryOp(*)",
        "          left: IntLiteral(2)",
        "          right: IntLiteral(3)",
    ]


def test_print_surface_round_trips_through_parser():
    src = "print 1 + 2 * 3 + 4; print 5;"
    ast = parse_tokens(lex(src))
    surface = PrettyPrinter.print_surface(ast)
    assert surface == src
    assert parse_tokens(lex(surface)) == ast


def test_print_surface_of_empty_program():
    assert PrettyPrinter.print_surface(parse_tokens(lex(""))) == ""
