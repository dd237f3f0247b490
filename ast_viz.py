"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node labelled with its kind and key
field (operator, name or literal). Edges run from parent to child and are
labelled with the field the child hangs off (`left`, `right`, `init`, ...).
Statements are drawn as boxes, expressions as ellipses.
"""

from typing import Iterator, List, Optional, Tuple
from graphviz import Digraph
from ast_nodes import *


def _label(node: ASTNode) -> str:
    match node:
        case NumberLiteralNode(text=t):
            return f"Number\n{t}"
        case StringLiteralNode(value=v):
            return f'String\n"{v}"'
        case BoolLiteralNode(value=v):
            return f"Bool\n{'true' if v else 'false'}"
        case NilLiteralNode():
            return "Nil"
        case VariableNode(name=n):
            return f"Variable\n{n}"
        case BinaryOpNode(operator=op):
            return f"Binary\n{op}"
        case UnaryOpNode(operator=op):
            return f"Unary\n{op}"
        case GroupingNode():
            return "Grouping"
        case AssignmentNode(name=n):
            return f"Assign\n{n}"
        case PrintStatementNode():
            return "Print"
        case ExpressionStatementNode():
            return "ExprStmt"
        case VariableDeclarationNode(name=n):
            return f"VarDecl\n{n}"
        case ProgramNode():
            return "Program"
        case _:
            return type(node).__name__


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    match node:
        case BinaryOpNode(left=l, right=r):
            yield "left", l
            yield "right", r
        case UnaryOpNode(right=r):
            yield "right", r
        case GroupingNode(expression=e):
            yield "expr", e
        case AssignmentNode(value=v):
            yield "value", v
        case PrintStatementNode(expression=e) | ExpressionStatementNode(expression=e):
            yield "expr", e
        case VariableDeclarationNode(initializer=init) if init is not None:
            yield "init", init
        case ProgramNode(statements=stmts):
            for i, s in enumerate(stmts):
                yield f"stmt[{i}]", s


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr("graph", label=title, labelloc="t")

    counter = 0
    # depth-first, pre-order
    stack: List[Tuple[Optional[str], str, ASTNode]] = [(None, "", node)]
    while stack:
        parent_id, edge_label, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        shape = "ellipse" if is_expression(current) else "box"
        dot.node(node_id, label=_label(current), shape=shape)
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)
        # push in reverse so children are numbered left to right
        for name, child in reversed(list(_children(current))):
            stack.append((node_id, name, child))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
