"""Tree-walking interpreter for the Lox subset.

The interpreter walks a `ProgramNode` statement by statement against an
`Environment`. Expressions evaluate to runtime values from `values.py`;
statements may declare or assign variables or print a value.

Operators are strict about operand types. Arithmetic and ordering need two
numbers, `+` also joins two strings, and `==`/`!=` compare any two values
(values of different types are never equal). Both operands of a binary
operator are always evaluated, including for `and`/`or`, which then pick one
of the two values without short-circuiting.

Evaluation is fail-fast: the first `EvalError` stops the program. Output
already printed and variables already declared stay as they are.
"""

from __future__ import annotations
from typing import Optional, TextIO
from ast_nodes import *
from environment import Environment
from errors import (
    EvalError,
    UndefinedVariable,
    UnsupportedBinOp,
    UnsupportedUnaryOp,
    ZeroDivision,
)
from values import NIL, Value, VBool, VNumber, VString, is_truthy


def _at(error: EvalError, node: ASTNode) -> EvalError:
    if error.line is None and node.line:
        error.line = node.line
    return error


def _binary(op: Operator, lv: Value, rv: Value) -> Value:
    match (lv, op, rv):
        case (VNumber(value=x), Operator.ADD, VNumber(value=y)):
            return VNumber(x + y)
        case (VNumber(value=x), Operator.SUB, VNumber(value=y)):
            return VNumber(x - y)
        case (VNumber(value=x), Operator.MUL, VNumber(value=y)):
            return VNumber(x * y)
        case (VNumber(value=x), Operator.DIV, VNumber(value=y)):
            if y == 0:
                raise ZeroDivision()
            return VNumber(x / y)
        case (VNumber(value=x), Operator.LT, VNumber(value=y)):
            return VBool(x < y)
        case (VNumber(value=x), Operator.LE, VNumber(value=y)):
            return VBool(x <= y)
        case (VNumber(value=x), Operator.GT, VNumber(value=y)):
            return VBool(x > y)
        case (VNumber(value=x), Operator.GE, VNumber(value=y)):
            return VBool(x >= y)
        case (VString(value=x), Operator.ADD, VString(value=y)):
            return VString(x + y)
        # NaN is never equal to itself
        case (VNumber(value=x), Operator.EQ, VNumber(value=y)):
            return VBool(x == y)
        case (VNumber(value=x), Operator.NE, VNumber(value=y)):
            return VBool(x != y)
        # equality works with any combination of values
        case (_, Operator.EQ, _):
            return VBool(lv == rv)
        case (_, Operator.NE, _):
            return VBool(lv != rv)
        case (_, Operator.AND, _):
            return rv if is_truthy(lv) else lv
        case (_, Operator.OR, _):
            return lv if is_truthy(lv) else rv
        case _:
            raise UnsupportedBinOp(lv, op, rv)


def _unary(op: Operator, value: Value) -> Value:
    match (op, value):
        case (Operator.SUB, VNumber(value=x)):
            return VNumber(-x)
        case (Operator.NOT, _):
            return VBool(not is_truthy(value))
        case _:
            raise UnsupportedUnaryOp(op, value)


def evaluate_expression(node: ASTNode, env: Environment) -> Value:
    """Compute the value of an expression node."""
    match node:
        case NumberLiteralNode(text=text):
            try:
                return VNumber(float(text))
            except ValueError as e:
                raise AssertionError(f"Malformed number literal {text!r}") from e
        case StringLiteralNode(value=v):
            return VString(v)
        case BoolLiteralNode(value=v):
            return VBool(v)
        case NilLiteralNode():
            return NIL
        case VariableNode(name=n):
            try:
                return env.lookup(n)
            except UndefinedVariable as e:
                raise _at(e, node)
        case GroupingNode(expression=expr):
            return evaluate_expression(expr, env)
        case BinaryOpNode(left=l, operator=op, right=r):
            lv = evaluate_expression(l, env)
            rv = evaluate_expression(r, env)
            try:
                return _binary(op, lv, rv)
            except EvalError as e:
                raise _at(e, node)
        case UnaryOpNode(operator=op, right=right):
            val = evaluate_expression(right, env)
            try:
                return _unary(op, val)
            except EvalError as e:
                raise _at(e, node)
        case AssignmentNode(name=n, value=value):
            rhs = evaluate_expression(value, env)
            try:
                env.assign(n, rhs)
            except UndefinedVariable as e:
                raise _at(e, node)
            return rhs
        case _:
            raise RuntimeError(f"Unhandled expression node type: {node}")


def execute_statement(
    stmt: ASTNode, env: Environment, output: Optional[TextIO] = None
) -> None:
    """Run a single statement for its side effects."""
    match stmt:
        case PrintStatementNode(expression=expr):
            value = evaluate_expression(expr, env)
            print(str(value), file=output)
        case ExpressionStatementNode(expression=expr):
            evaluate_expression(expr, env)
        case VariableDeclarationNode(name=name, initializer=init):
            value = NIL if init is None else evaluate_expression(init, env)
            env.declare(name, value)
        case _:
            raise RuntimeError(f"Unhandled statement node: {stmt}")


def execute_statements(
    prog: ProgramNode, env: Environment, output: Optional[TextIO] = None
) -> None:
    for s in prog.statements:
        execute_statement(s, env, output)


class Interpreter:
    """An evaluation session.

    The session owns the top-level environment, so variables declared by
    one `interpret()` call are visible to the next (this is how the REPL
    keeps state between lines). Printed values go to `output`, or to
    `sys.stdout` when it is None.
    """

    def __init__(
        self,
        environment: Optional[Environment] = None,
        output: Optional[TextIO] = None,
    ):
        self.environment = environment if environment is not None else Environment()
        self.output = output

    def interpret(self, prog: ProgramNode) -> None:
        execute_statements(prog, self.environment, self.output)

    def execute(self, stmt: ASTNode) -> None:
        execute_statement(stmt, self.environment, self.output)

    def evaluate(self, expr: ASTNode) -> Value:
        return evaluate_expression(expr, self.environment)


def evaluate(
    prog: ProgramNode, environment: Environment, output: Optional[TextIO] = None
) -> None:
    """Execute `prog` against `environment`, stopping at the first error."""
    execute_statements(prog, environment, output)
