"""Graphviz visualization helpers for Soloman programs.

Provides `render_ast_dot(program)` which returns a `graphviz.Digraph` object
(not rendered), and `write_and_render` which writes the rendered file to disk.

Layout: each statement is drawn as its own cluster labelled with its surface
syntax (`print 1 + 2 * 3;`). Inside a cluster, every expression node is a
graph node and edges point from an operator to its `left` and `right`
operands, so precedence and associativity are visible as tree shape.
"""

from ast_nodes import *
from graphviz import Digraph
from pretty_printer import PrettyPrinter


def _node_label(node: ASTNode) -> str:
    match node:
        case IntLiteralNode(value=v):
            return str(v)
        case BinaryOpNode(operator=op):
            return str(op)
        case _:
            return type(node).__name__


def _add_expr(graph: Digraph, node: ASTNode, name: str) -> None:
    """Add `node` and its operands to `graph`.

    The root gets id `name`; operands get `name_1`, `name_2`, ... in
    pre-order, left before right.
    """
    count = 0
    # (node, parent id, edge label)
    stack = [(node, None, None)]
    while stack:
        current, parent, side = stack.pop()
        if parent is None:
            current_name = name
        else:
            count += 1
            current_name = f"{name}_{count}"

        if isinstance(current, BinaryOpNode):
            graph.node(current_name, label=_node_label(current), shape="circle")
            stack.append((current.right, current_name, "right"))
            stack.append((current.left, current_name, "left"))
        else:
            graph.node(current_name, label=_node_label(current), shape="box")

        if parent is not None:
            graph.edge(parent, current_name, label=side)


def render_ast_dot(program: ProgramNode, fmt: str = "svg") -> Digraph:
    """Return a graphviz.Digraph for the given program.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format=fmt)
    dot.attr("graph", rankdir="TB")

    for i, stmt in enumerate(program.statements):
        with dot.subgraph(name=f"cluster_stmt_{i}") as c:
            c.attr(label=f"stmt[{i}]: {PrettyPrinter.print_surface(stmt)}")
            c.attr(style="rounded")
            _add_expr(c, stmt.expression, f"s{i}")

    return dot


def write_and_render(
    program: ProgramNode,
    out_path: str,
    fmt: str = "svg",
) -> str:
    """Write and render the program tree to the given path (without extension).

    Example: write_and_render(prog, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(program, fmt=fmt)
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
