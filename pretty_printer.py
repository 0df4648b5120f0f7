"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders a node back into one line of source-like syntax. The printer is
intended for debugging, tests and the `--print-ast` flag rather than for
producing final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(stmt)  # 'print 1 + 2 * 3;'
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string.

        Nodes are visited pre-order from an explicit stack, so long operator
        chains do not hit the recursion limit.
        """
        lines = []
        stack = [(node, indent, prefix)]

        while stack:
            current, ind, pre = stack.pop()
            indent_str = " " * ind

            if not isinstance(current, ASTNode):
                lines.append(f"{indent_str}{pre}{current}")
                continue

            match current:
                case IntLiteralNode(value=v):
                    lines.append(f"{indent_str}{pre}IntLiteral({v})")

                case BinaryOpNode(left=left, operator=op, right=right):
                    lines.append(f"{indent_str}{pre}BinaryOp({op})")
                    stack.append((right, ind + 2, "right: "))
                    stack.append((left, ind + 2, "left: "))

                case PrintStatementNode(expression=expr):
                    lines.append(f"{indent_str}{pre}PrintStatement")
                    stack.append((expr, ind + 2, "expr: "))

                case ProgramNode(statements=stmts):
                    lines.append(f"{indent_str}{pre}Program")
                    for i in reversed(range(len(stmts))):
                        stack.append((stmts[i], ind + 4, f"stmt[{i}]: "))

                case _:
                    lines.append(f"{indent_str}{pre}Unknown node type: {type(current)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node.

        Nested binary operations are not parenthesized (the language has no
        parentheses), so the output re-parses to the same tree only when the
        tree follows the language's own precedence and associativity.
        """
        if node is None:
            return ""

        parts = []
        # Plain strings on the stack are emitted verbatim.
        stack = [node]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue

            match item:
                case IntLiteralNode(value=v):
                    parts.append(str(v))
                case BinaryOpNode(left=l, operator=op, right=r):
                    stack.extend([r, f" {op} ", l])
                case PrintStatementNode(expression=expr):
                    stack.extend([";", expr, "print "])
                case ProgramNode(statements=stmts):
                    items = []
                    for i, s in enumerate(stmts):
                        if i:
                            items.append(" ")
                        items.append(s)
                    stack.extend(reversed(items))
                case ASTNode():
                    s = PrettyPrinter.print_ast(item)
                    parts.append(" ".join(line.strip() for line in s.splitlines()))
                case _:
                    parts.append(str(item))

        return "".join(parts)
