"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `dump_ast(node, path)`
which writes that structure to a file. Each dict carries a `node_type` key,
the node's key fields and its source `line`.
"""

import json
from typing import Any, Dict, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any]
    match node:
        # literals
        case NumberLiteralNode(text=t):
            data = {"node_type": "NumberLiteral", "text": t}
        case StringLiteralNode(value=v):
            data = {"node_type": "StringLiteral", "value": v}
        case BoolLiteralNode(value=v):
            data = {"node_type": "BoolLiteral", "value": v}
        case NilLiteralNode():
            data = {"node_type": "NilLiteral"}
        case VariableNode(name=n):
            data = {"node_type": "Variable", "name": n}
        # expressions
        case BinaryOpNode(left=l, operator=op, right=r):
            data = {
                "node_type": "BinaryOp",
                "operator": str(op),
                "left": ast_to_json(l),
                "right": ast_to_json(r),
            }
        case UnaryOpNode(operator=op, right=r):
            data = {
                "node_type": "UnaryOp",
                "operator": str(op),
                "right": ast_to_json(r),
            }
        case GroupingNode(expression=e):
            data = {"node_type": "Grouping", "expression": ast_to_json(e)}
        case AssignmentNode(name=n, value=v):
            data = {"node_type": "Assignment", "name": n, "value": ast_to_json(v)}
        # statements and higher-level nodes
        case PrintStatementNode(expression=e):
            data = {"node_type": "Print", "expression": ast_to_json(e)}
        case ExpressionStatementNode(expression=e):
            data = {"node_type": "ExprStmt", "expression": ast_to_json(e)}
        case VariableDeclarationNode(name=n, initializer=init):
            data = {
                "node_type": "VarDecl",
                "name": n,
                "initializer": ast_to_json(init),
            }
        case ProgramNode(statements=stmts):
            data = {
                "node_type": "Program",
                "statements": [ast_to_json(s) for s in stmts],
            }
        case _:
            raise TypeError(f"Cannot serialize {type(node).__name__}")

    data["line"] = node.line
    return data


def dump_ast(node: ASTNode, path: str) -> None:
    """Write the JSON form of `node` to `path`."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(ast_to_json(node), fh, indent=2)
