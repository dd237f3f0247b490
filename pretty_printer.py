"""Pretty-printer for the AST.

Provides three renderings of a tree:

- `PrettyPrinter.print_ast(node)` renders a readable multi-line tree,
- `PrettyPrinter.format_expr(node)` renders a compact parenthesized prefix
    form such as `(* (- 123) (group 45.67))`,
- `PrettyPrinter.print_surface(node)` renders source-like text such as
    `x = (1 + 2) * 3;`.

The printers are intended for debugging, tests and development rather than
for producing final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from ast_nodes import *


def _quote(text: str) -> str:
    return f'"{text}"'


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(text=t):
                lines.append(f"{indent_str}{prefix}NumberLiteral({t})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({_quote(v)})")

            case BoolLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}BoolLiteral({v})")

            case NilLiteralNode():
                lines.append(f"{indent_str}{prefix}NilLiteral")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case BinaryOpNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case UnaryOpNode(operator=op, right=right):
                lines.append(f"{indent_str}{prefix}UnaryOp({op})")
                lines.append(PrettyPrinter.print_ast(right, indent + 2))

            case GroupingNode(expression=expr):
                lines.append(f"{indent_str}{prefix}Grouping")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case AssignmentNode(name=n, value=value):
                lines.append(f"{indent_str}{prefix}Assignment({n})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case PrintStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}PrintStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case VariableDeclarationNode(name=vname, initializer=init):
                init_str = f" = ..." if init else ""
                lines.append(f"{indent_str}{prefix}VarDecl({vname}{init_str})")
                if init:
                    lines.append(PrettyPrinter.print_ast(init, indent + 2, "init: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def format_expr(node: ASTNode) -> str:
        """Return the parenthesized prefix form of an expression."""
        match node:
            case NumberLiteralNode(text=t):
                return t
            case StringLiteralNode(value=v):
                return _quote(v)
            case BoolLiteralNode(value=v):
                return "true" if v else "false"
            case NilLiteralNode():
                return "nil"
            case VariableNode(name=n):
                return n
            case BinaryOpNode(left=l, operator=op, right=r):
                return f"({op} {PrettyPrinter.format_expr(l)} {PrettyPrinter.format_expr(r)})"
            case UnaryOpNode(operator=op, right=right):
                return f"({op} {PrettyPrinter.format_expr(right)})"
            case GroupingNode(expression=expr):
                return f"(group {PrettyPrinter.format_expr(expr)})"
            case AssignmentNode(name=n, value=value):
                return f"(= {n} {PrettyPrinter.format_expr(value)})"
            case _:
                raise ValueError(f"Not an expression node: {node}")

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, source-like one-line representation of a node.

        Statements end with `;` and a program puts one statement per line.
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n)

        match node:
            case NumberLiteralNode(text=t):
                return t
            case StringLiteralNode(value=v):
                return _quote(v)
            case BoolLiteralNode(value=v):
                return "true" if v else "false"
            case NilLiteralNode():
                return "nil"
            case VariableNode(name=n):
                return n
            case BinaryOpNode(left=l, operator=op, right=r):
                return f"{_p(l)} {op} {_p(r)}"
            case UnaryOpNode(operator=op, right=right):
                return f"{op}{_p(right)}"
            case GroupingNode(expression=expr):
                return f"({_p(expr)})"
            case AssignmentNode(name=n, value=value):
                return f"{n} = {_p(value)}"
            case PrintStatementNode(expression=expr):
                return f"print {_p(expr)};"
            case ExpressionStatementNode(expression=expr):
                return f"{_p(expr)};"
            case VariableDeclarationNode(name=n, initializer=None):
                return f"var {n};"
            case VariableDeclarationNode(name=n, initializer=init):
                return f"var {n} = {_p(init)};"
            case ProgramNode(statements=stmts):
                return "\n".join(_p(s) for s in stmts)
            case _:
                return str(node)
