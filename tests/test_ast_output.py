import json

from tests.utils import parse_expr, parse_text
from ast_nodes import *
from ast_json import ast_to_json, dump_ast
from ast_viz import render_ast_dot
from pretty_printer import PrettyPrinter


SOURCE = 'var x = 1;\nx = (x + 2) * 3;\nprint -x;\nprint "done";'


def test_nodes_are_frozen():
    node = NumberLiteralNode(text="1")
    try:
        node.text = "2"
    except AttributeError:
        pass
    else:
        raise AssertionError("AST nodes should be immutable")


def test_line_does_not_affect_equality():
    assert VariableNode(name="a", line=3) == VariableNode(name="a", line=9)


def test_expression_and_statement_kinds():
    prog = parse_text(SOURCE)
    assert all(not is_expression(s) for s in prog.statements)
    assert all(is_expression(s.expression) for s in prog.statements[1:])


def test_format_expr_prefix_form():
    expr = BinaryOpNode(
        left=UnaryOpNode(operator=Operator.SUB, right=NumberLiteralNode(text="123")),
        operator=Operator.MUL,
        right=GroupingNode(expression=NumberLiteralNode(text="45.67")),
    )
    assert PrettyPrinter.format_expr(expr) == "(* (- 123) (group 45.67))"
    assert PrettyPrinter.format_expr(parse_expr('a = "s" <= nil')) == '(= a (<= "s" nil))'


def test_print_surface_round_trips_source_text():
    assert PrettyPrinter.print_surface(parse_text(SOURCE)) == SOURCE
    assert PrettyPrinter.print_surface(parse_text("var y;")) == "var y;"


def test_print_ast_outputs_every_statement():
    s = PrettyPrinter.print_ast(parse_text(SOURCE))
    assert s.splitlines()[0] == "Program"
    assert "VarDecl(x = ...)" in s
    assert "BinaryOp(*)" in s
    assert "UnaryOp(-)" in s
    assert 'StringLiteral("done")' in s
    assert s.count("PrintStatement") == 2


def test_ast_to_json_shape():
    data = ast_to_json(parse_text("var a = 1 + 2;"))
    assert data == {
        "node_type": "Program",
        "line": 1,
        "statements": [
            {
                "node_type": "VarDecl",
                "name": "a",
                "line": 1,
                "initializer": {
                    "node_type": "BinaryOp",
                    "operator": "+",
                    "line": 1,
                    "left": {"node_type": "NumberLiteral", "text": "1", "line": 1},
                    "right": {"node_type": "NumberLiteral", "text": "2", "line": 1},
                },
            }
        ],
    }


def test_dump_ast_writes_json(tmp_path):
    path = tmp_path / "ast.json"
    dump_ast(parse_text(SOURCE), str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [s["node_type"] for s in data["statements"]] == [
        "VarDecl",
        "ExprStmt",
        "Print",
        "Print",
    ]


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text(SOURCE))
    src = dot.source
    assert "Program" in src
    assert "VarDecl" in src
    assert "Assign" in src
    assert "Grouping" in src
    assert "stmt[3]" in src
    # one graph node per AST node
    assert src.count("shape=box") == 5
    assert src.count("shape=ellipse") == 11
