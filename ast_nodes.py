"""AST node definitions for the Soloman language.

This module defines the concrete AST node dataclasses built by the parser and
consumed by the evaluator, printers and code generator. The `NodeType` enum
identifies node kinds and is used by the pretty-printer and JSON exporter.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and optional source `line`/`column` information.
- Expressions are `IntLiteralNode` leaves and `BinaryOpNode` internal nodes
    with exactly two children. Trees are built bottom-up by the parser, so no
    node is shared between two parents.
- A program is an ordered list of `PrintStatementNode`s.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class NodeType(Enum):
    INT_LITERAL = auto()
    BINARY_OP = auto()
    PRINT_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


class BinaryOperator(Enum):
    ADD = "+"
    MULTIPLY = "*"

    def __str__(self) -> str:
        return self.value


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0


# Expression Nodes
@dataclass
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0


@dataclass
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: IntLiteralNode())
    operator: BinaryOperator = BinaryOperator.ADD
    right: ASTNode = field(default_factory=lambda: IntLiteralNode())


# Statement Nodes
@dataclass
class PrintStatementNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    expression: ASTNode = field(default_factory=lambda: IntLiteralNode())


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[PrintStatementNode] = field(default_factory=list)
