"""AST node definitions for the Lox subset.

This module defines the AST node dataclasses produced by the parser and
consumed by the interpreter and the debugging printers. The `NodeType` enum
identifies node kinds and `Operator` enumerates every unary/binary operator.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the source `line` the node started on. The line is
    informational only and does not take part in equality, so a parsed tree
    compares equal to the same tree built by hand.
- Nodes are frozen: a tree never changes after the parser builds it.
- Number literals keep their lexeme text; the interpreter turns it into a
    float when the literal is evaluated.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NE = "!="
    NOT = "!"
    AND = "and"
    OR = "or"

    def __str__(self) -> str:
        return self.value


class NodeType(Enum):
    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    BOOL_LITERAL = auto()
    NIL_LITERAL = auto()
    VARIABLE = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    GROUPING = auto()
    ASSIGNMENT = auto()
    PRINT_STMT = auto()
    EXPR_STMT = auto()
    VAR_DECL = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)


# Expression Nodes
@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    text: str = "0"


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: NodeType = NodeType.STRING_LITERAL
    value: str = ""


@dataclass(frozen=True)
class BoolLiteralNode(ASTNode):
    type: NodeType = NodeType.BOOL_LITERAL
    value: bool = False


@dataclass(frozen=True)
class NilLiteralNode(ASTNode):
    type: NodeType = NodeType.NIL_LITERAL


@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: NilLiteralNode())
    operator: Operator = Operator.ADD
    right: ASTNode = field(default_factory=lambda: NilLiteralNode())


@dataclass(frozen=True)
class UnaryOpNode(ASTNode):
    type: NodeType = NodeType.UNARY_OP
    operator: Operator = Operator.SUB
    right: ASTNode = field(default_factory=lambda: NilLiteralNode())


@dataclass(frozen=True)
class GroupingNode(ASTNode):
    type: NodeType = NodeType.GROUPING
    expression: ASTNode = field(default_factory=lambda: NilLiteralNode())


@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    name: str = ""
    value: ASTNode = field(default_factory=lambda: NilLiteralNode())


# Statement Nodes
@dataclass(frozen=True)
class PrintStatementNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    expression: ASTNode = field(default_factory=lambda: NilLiteralNode())


@dataclass(frozen=True)
class ExpressionStatementNode(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: ASTNode = field(default_factory=lambda: NilLiteralNode())


# Declaration Nodes
@dataclass(frozen=True)
class VariableDeclarationNode(ASTNode):
    type: NodeType = NodeType.VAR_DECL
    name: str = ""
    initializer: Optional[ASTNode] = None


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[ASTNode, ...] = ()


EXPRESSION_TYPES = frozenset(
    {
        NodeType.NUMBER_LITERAL,
        NodeType.STRING_LITERAL,
        NodeType.BOOL_LITERAL,
        NodeType.NIL_LITERAL,
        NodeType.VARIABLE,
        NodeType.BINARY_OP,
        NodeType.UNARY_OP,
        NodeType.GROUPING,
        NodeType.ASSIGNMENT,
    }
)


def is_expression(node: ASTNode) -> bool:
    return node.type in EXPRESSION_TYPES
