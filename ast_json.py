"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. Each dict carries a
`node_type` key plus the node's fields and its source position.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *


def _position(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    """Convert `node` bottom-up from an explicit stack (no recursion)."""
    if node is None:
        return None

    results: List[Any] = []
    # (node, children_done)
    stack = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        t = getattr(current, "type", None)

        if t == NodeType.INT_LITERAL and isinstance(current, IntLiteralNode):
            results.append(
                {"node_type": "IntLiteral", "value": current.value, **_position(current)}
            )
        elif t == NodeType.BINARY_OP and isinstance(current, BinaryOpNode):
            if not children_done:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
                continue
            right = results.pop()
            left = results.pop()
            results.append(
                {
                    "node_type": "BinaryOp",
                    "operator": str(current.operator),
                    "left": left,
                    "right": right,
                    **_position(current),
                }
            )
        elif t == NodeType.PRINT_STMT and isinstance(current, PrintStatementNode):
            if not children_done:
                stack.append((current, True))
                stack.append((current.expression, False))
                continue
            results.append(
                {
                    "node_type": "Print",
                    "expression": results.pop(),
                    **_position(current),
                }
            )
        elif t == NodeType.PROGRAM and isinstance(current, ProgramNode):
            if not children_done:
                stack.append((current, True))
                for stmt in reversed(current.statements):
                    stack.append((stmt, False))
                continue
            count = len(current.statements)
            statements = results[len(results) - count :]
            del results[len(results) - count :]
            results.append({"node_type": "Program", "statements": statements})
        else:
            raise TypeError(f"Cannot convert {type(current).__name__} to JSON")

    return results.pop()
