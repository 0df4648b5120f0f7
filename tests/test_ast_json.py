import json

from ast_json import ast_to_json
from tests.utils import parse_text


def test_ast_to_json_encodes_operators_and_positions():
    data = ast_to_json(parse_text("print 2 * 3;"))
    assert data["node_type"] == "Program"
    stmt = data["statements"][0]
    assert stmt["node_type"] == "Print"
    assert (stmt["line"], stmt["column"]) == (1, 1)
    expr = stmt["expression"]
    assert expr["node_type"] == "BinaryOp"
    assert expr["operator"] == "*"
    assert expr["left"] == {"node_type": "IntLiteral", "value": 2, "line": 1, "column": 7}
    assert expr["right"]["value"] == 3


def test_ast_to_json_is_serializable():
    data = ast_to_json(parse_text("print 1+2; print 3;"))
    assert json.loads(json.dumps(data)) == data
    assert len(data["statements"]) == 2


def test_ast_to_json_none():
    assert ast_to_json(None) is None
