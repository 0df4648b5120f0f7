from ast_nodes import *
from main import lex, parse_tokens


def _walk(node):
    yield node
    if isinstance(node, BinaryOpNode):
        yield from _walk(node.left)
        yield from _walk(node.right)


def test_expression_trees_have_only_literal_leaves_and_binary_nodes():
    src = "print 1; print 1+2*3+4*5*6; print 7*8+9;"
    ast = parse_tokens(lex(src))
    for stmt in ast.statements:
        assert stmt.type == NodeType.PRINT_STMT
        for node in _walk(stmt.expression):
            assert isinstance(node, (IntLiteralNode, BinaryOpNode))
            if isinstance(node, BinaryOpNode):
                assert node.left is not None and node.right is not None
                assert isinstance(node.operator, BinaryOperator)


def test_no_node_is_shared_between_parents():
    ast = parse_tokens(lex("print 2*2*2 + 2*2; print 2;"))
    seen = set()
    for stmt in ast.statements:
        for node in _walk(stmt.expression):
            assert id(node) not in seen
            seen.add(id(node))


def test_statement_positions_follow_source_order():
    ast = parse_tokens(lex("print 1;\nprint 2; print 3;"))
    positions = [(s.line, s.column) for s in ast.statements]
    assert positions == [(1, 1), (2, 1), (2, 10)]
    assert positions == sorted(positions)
