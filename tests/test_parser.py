import pytest

from tests.utils import lex, parse_text, parse_expr
from ast_nodes import *
from errors import ParseError, ParseErrors
from parser import Parser, parse, parse_all


def test_primary_literals():
    assert parse_expr("123") == NumberLiteralNode(text="123")
    assert parse_expr('"hello"') == StringLiteralNode(value="hello")
    assert parse_expr("nil") == NilLiteralNode()
    assert parse_expr("true") == BoolLiteralNode(value=True)
    assert parse_expr("false") == BoolLiteralNode(value=False)
    assert parse_expr("abc") == VariableNode(name="abc")


def test_grouping():
    assert parse_expr("(2)") == GroupingNode(expression=NumberLiteralNode(text="2"))


def test_binary():
    assert parse_expr("1 + 2") == BinaryOpNode(
        left=NumberLiteralNode(text="1"),
        operator=Operator.ADD,
        right=NumberLiteralNode(text="2"),
    )


@pytest.mark.parametrize(
    "src, op",
    [
        ("1 - 2", Operator.SUB),
        ("1 * 2", Operator.MUL),
        ("1 / 2", Operator.DIV),
        ("1 < 2", Operator.LT),
        ("1 <= 2", Operator.LE),
        ("1 > 2", Operator.GT),
        ("1 >= 2", Operator.GE),
        ("1 == 2", Operator.EQ),
        ("1 != 2", Operator.NE),
    ],
)
def test_binary_operators(src, op):
    assert parse_expr(src).operator == op


def test_precedence_levels_nest():
    # 1 + 2 * 3 < 10 == true
    expr = parse_expr("1 + 2 * 3 < 10 == true")
    assert expr.operator == Operator.EQ
    comparison = expr.left
    assert comparison.operator == Operator.LT
    addition = comparison.left
    assert addition.operator == Operator.ADD
    assert addition.right.operator == Operator.MUL


def test_binary_levels_do_not_chain():
    with pytest.raises(ParseError) as excinfo:
        parse_text("1 + 2 + 3;")
    assert "Expect ';' after expression" in excinfo.value.message
    assert "'+'" in excinfo.value.message


def test_parenthesized_chain_is_accepted():
    stmt = parse_text("(1 + 2) + 3;").statements[0]
    assert isinstance(stmt.expression.left, GroupingNode)


def test_unary_applies_to_whole_expression():
    assert parse_expr("-1 + 2") == UnaryOpNode(
        operator=Operator.SUB,
        right=BinaryOpNode(
            left=NumberLiteralNode(text="1"),
            operator=Operator.ADD,
            right=NumberLiteralNode(text="2"),
        ),
    )
    assert parse_expr("!true") == UnaryOpNode(
        operator=Operator.NOT, right=BoolLiteralNode(value=True)
    )


def test_assignment_is_right_associative():
    assert parse_expr("a = b = 1") == AssignmentNode(
        name="a",
        value=AssignmentNode(name="b", value=NumberLiteralNode(text="1")),
    )


def test_assignment_to_variable_parses():
    prog = parse_text("x = 2;")
    assert prog.statements == (
        ExpressionStatementNode(
            expression=AssignmentNode(name="x", value=NumberLiteralNode(text="2"))
        ),
    )


@pytest.mark.parametrize("src", ["1 = 2;", "(x) = 2;", "x + 1 = 2;"])
def test_invalid_assignment_target(src):
    with pytest.raises(ParseError) as excinfo:
        parse_text(src)
    assert excinfo.value.message == "Invalid assignment target"
    assert excinfo.value.line == 1


def test_statements():
    prog = parse_text('var a; var b = "s"; print a; a;')
    assert prog.type == NodeType.PROGRAM
    assert prog.statements == (
        VariableDeclarationNode(name="a", initializer=None),
        VariableDeclarationNode(name="b", initializer=StringLiteralNode(value="s")),
        PrintStatementNode(expression=VariableNode(name="a")),
        ExpressionStatementNode(expression=VariableNode(name="a")),
    )


def test_empty_program():
    assert parse_text("") == ProgramNode(statements=())
    assert parse_text("// nothing here\n") == ProgramNode(statements=())


def test_nodes_record_lines():
    prog = parse_text("var a = 1;\n\nprint a;")
    assert prog.statements[0].line == 1
    assert prog.statements[1].line == 3
    assert prog.statements[1].expression.line == 3


@pytest.mark.parametrize(
    "src, message, line",
    [
        ("print 1", "Expect ';' after value at end", 1),
        ("var 1 = 2;", "Expect variable name at '1'", 1),
        ("var x = 1", "Expect ';' after variable declaration at end", 1),
        ("\n(1;", "Expect ')' after expression at ';'", 2),
        ("print ;", "Expect expression at ';'", 1),
        ("1 2;", "Expect ';' after expression at '2'", 1),
    ],
)
def test_syntax_error_messages(src, message, line):
    with pytest.raises(ParseError) as excinfo:
        parse_text(src)
    assert excinfo.value.message == message
    assert excinfo.value.line == line
    assert str(excinfo.value) == f"[line {line}] Error: {message}"


def test_parse_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        parse(lex("print;"))


def test_parser_stops_at_first_error():
    with pytest.raises(ParseError) as excinfo:
        parse_text("print ;\nprint ;")
    assert excinfo.value.line == 1


def test_eof_is_never_consumed():
    parser = Parser(lex("x"))
    parser.advance()
    assert parser.at_end()
    eof = parser.advance()
    assert parser.at_end()
    assert eof is parser.current


def test_parser_appends_missing_eof():
    parser = Parser([])
    assert parser.at_end()
    assert parser.parse() == ProgramNode(statements=())


def test_recovery_collects_every_error():
    program, errors = Parser(lex("var = 1; print 2; 1 = 3;")).parse_with_recovery()
    assert [e.message for e in errors] == [
        "Expect variable name at '='",
        "Invalid assignment target",
    ]
    assert program.statements == (
        PrintStatementNode(expression=NumberLiteralNode(text="2")),
    )


def test_recovery_resumes_at_statement_keyword():
    program, errors = Parser(lex("var x = ) 1 print 1;")).parse_with_recovery()
    assert len(errors) == 1
    assert program.statements == (
        PrintStatementNode(expression=NumberLiteralNode(text="1")),
    )


def test_parse_all_raises_with_every_error():
    with pytest.raises(ParseErrors) as excinfo:
        parse_all(lex("print ;\nprint ;"))
    assert [e.line for e in excinfo.value.errors] == [1, 2]


def test_expression_only_requires_end_of_input():
    with pytest.raises(ParseError) as excinfo:
        parse_expr("1 + 2;")
    assert excinfo.value.message == "Expect end of expression at ';'"
