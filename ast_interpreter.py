"""Tree-walking evaluator for Soloman programs.

`run_program` executes a `ProgramNode` statement by statement, in source
order. Each `print` statement evaluates its expression and writes the
decimal value followed by a newline to the output stream.

Arithmetic is checked against the signed 64-bit range: an addition or
multiplication whose result does not fit raises `Overflow`. Execution is
fail-fast, so the first error propagates out of `run_program` and no later
statement runs. Lines already written stay written.
"""

import sys
from typing import List, Optional, TextIO
from ast_nodes import *
from errors import EvalError, Overflow
from tokens import INT64_MAX, INT64_MIN


def _checked(op: BinaryOperator, lv: int, rv: int, node: ASTNode) -> int:
    match op:
        case BinaryOperator.ADD:
            result = lv + rv
        case BinaryOperator.MULTIPLY:
            result = lv * rv
        case _:
            raise EvalError(f"Unsupported binary operator: {op}", node.line, node.column)
    if not INT64_MIN <= result <= INT64_MAX:
        raise Overflow(op, lv, rv, node.line, node.column)
    return result


def evaluate(node: ASTNode) -> int:
    """Evaluate an expression tree to an integer (left operand first).

    Long operator chains parse into deep left spines, so the walk keeps an
    explicit stack of pending nodes instead of recursing.
    """
    values: List[int] = []
    # (node, operands_done)
    stack = [(node, False)]
    while stack:
        current, operands_done = stack.pop()
        match current:
            case IntLiteralNode(value=v):
                values.append(v)
            case BinaryOpNode(operator=op) if operands_done:
                rv = values.pop()
                lv = values.pop()
                values.append(_checked(op, lv, rv, current))
            case BinaryOpNode(left=l, right=r):
                stack.append((current, True))
                stack.append((r, False))
                stack.append((l, False))
            case _:
                raise EvalError(
                    f"Unhandled expression node type: {type(current).__name__}",
                    current.line,
                    current.column,
                )
    return values.pop()


def _exec_stmt(stmt: ASTNode, out: TextIO) -> int:
    match stmt:
        case PrintStatementNode(expression=expr):
            value = evaluate(expr)
            out.write(f"{value}\n")
            return value
        case _:
            raise EvalError(f"Unhandled statement node: {stmt}", stmt.line, stmt.column)


def run_program(prog: ProgramNode, out: Optional[TextIO] = None) -> List[int]:
    """Run every statement of `prog`, writing printed values to `out`.

    `out` defaults to `sys.stdout` at call time. Returns the printed values in
    order. The stream is flushed whether the run succeeds or fails.
    """
    if out is None:
        out = sys.stdout
    printed: List[int] = []
    try:
        for s in prog.statements:
            printed.append(_exec_stmt(s, out))
    finally:
        out.flush()
    return printed
