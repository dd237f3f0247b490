"""
Parser for the Lox subset.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser with one
    token of lookahead. The cursor only moves forward; once a token is
    consumed the parser never backtracks.
- Every precedence level has its own method, from lowest to highest:
    `parse_assignment()`, `parse_equality()`, `parse_comparison()`,
    `parse_addition()`, `parse_multiplication()`, `parse_unary()` and
    `parse_primary()`.

Key points:
- Binary levels are non-chaining: each level accepts at most one operator,
    so `1 + 2 + 3` has to be written `(1 + 2) + 3`.
- Assignment is right-associative. The left-hand side is parsed as an
    ordinary expression first and only then checked to be a bare variable;
    anything else is an "Invalid assignment target".
- A unary operator applies to a whole expression: `-1 + 2` is `-(1 + 2)`.

- Statement parsing:
    - `parse_declaration()` recognizes `var name (= expr)? ;` and otherwise
        defers to `parse_statement()`, which handles `print expr ;` and
        expression statements.

Errors:
- `parse()` is fail-fast: the first mismatch raises one `ParseError`
    carrying the line of the offending token and a message naming what was
    expected and what was found.
- `parse_with_recovery()` keeps going after an error. It discards tokens
    until a statement boundary (just after `;`, or before a statement
    keyword) and collects every error.

Examples:
    - `var x = 1;`       -> VariableDeclaration(x, Number(1))
    - `x = (1 + 2) * 3;` -> ExpressionStatement(Assignment(x, ...))
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
from tokens import Token, TokenType
from ast_nodes import *
from errors import ParseError, ParseErrors


TOKEN_OPERATORS: Dict[TokenType, Operator] = {
    TokenType.PLUS: Operator.ADD,
    TokenType.MINUS: Operator.SUB,
    TokenType.STAR: Operator.MUL,
    TokenType.SLASH: Operator.DIV,
    TokenType.LESS: Operator.LT,
    TokenType.LESS_EQUAL: Operator.LE,
    TokenType.GREATER: Operator.GT,
    TokenType.GREATER_EQUAL: Operator.GE,
    TokenType.EQUAL_EQUAL: Operator.EQ,
    TokenType.BANG_EQUAL: Operator.NE,
    TokenType.BANG: Operator.NOT,
    TokenType.AND: Operator.AND,
    TokenType.OR: Operator.OR,
}

# Tokens that begin a statement; recovery resumes in front of them.
STATEMENT_KEYWORDS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenType.EOF, "", None, line))
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def at_end(self) -> bool:
        return self.current.type == TokenType.EOF

    def advance(self) -> Token:
        """Consume the current token. The EOF token is never consumed."""
        token = self.current
        if not self.at_end():
            self.pos += 1
        return token

    def check(self, *token_types: TokenType) -> bool:
        return not self.at_end() and self.current.type in token_types

    def match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def expect(self, expected_type: TokenType, message: str) -> Token:
        """Consume a token of the given type or fail with `message`."""
        if self.check(expected_type):
            return self.advance()
        raise self.error(message)

    def error(self, message: str, token: Optional[Token] = None) -> ParseError:
        token = token or self.current
        return ParseError(token.line, f"{message} at {token.describe()}")

    # Expressions

    def parse_primary(self) -> ASTNode:
        """Parse literals, variables and parenthesized expressions."""
        token = self.current

        match token.type:
            case TokenType.NUMBER:
                self.advance()
                return NumberLiteralNode(text=token.lexeme, line=token.line)

            case TokenType.STRING:
                self.advance()
                return StringLiteralNode(value=token.literal, line=token.line)

            case TokenType.TRUE:
                self.advance()
                return BoolLiteralNode(value=True, line=token.line)

            case TokenType.FALSE:
                self.advance()
                return BoolLiteralNode(value=False, line=token.line)

            case TokenType.NIL:
                self.advance()
                return NilLiteralNode(line=token.line)

            case TokenType.IDENTIFIER:
                self.advance()
                return VariableNode(name=token.lexeme, line=token.line)

            case TokenType.LPAREN:
                self.advance()
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "Expect ')' after expression")
                return GroupingNode(expression=expr, line=token.line)

            case _:
                raise self.error("Expect expression")

    def parse_unary(self) -> ASTNode:
        if self.match(TokenType.MINUS, TokenType.BANG):
            token = self.previous()
            right = self.parse_expression()
            return UnaryOpNode(
                operator=TOKEN_OPERATORS[token.type], right=right, line=token.line
            )
        return self.parse_primary()

    def parse_binary(
        self, operand: Callable[[], ASTNode], *operators: TokenType
    ) -> ASTNode:
        """Parse `operand (op operand)?` for one precedence level."""
        left = operand()
        if self.match(*operators):
            token = self.previous()
            right = operand()
            return BinaryOpNode(
                left=left,
                operator=TOKEN_OPERATORS[token.type],
                right=right,
                line=token.line,
            )
        return left

    def parse_multiplication(self) -> ASTNode:
        return self.parse_binary(self.parse_unary, TokenType.STAR, TokenType.SLASH)

    def parse_addition(self) -> ASTNode:
        return self.parse_binary(
            self.parse_multiplication, TokenType.PLUS, TokenType.MINUS
        )

    def parse_comparison(self) -> ASTNode:
        return self.parse_binary(
            self.parse_addition,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
        )

    def parse_equality(self) -> ASTNode:
        return self.parse_binary(
            self.parse_comparison, TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL
        )

    def parse_assignment(self) -> ASTNode:
        expr = self.parse_equality()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.parse_assignment()
            if not isinstance(expr, VariableNode):
                raise ParseError(equals.line, "Invalid assignment target")
            return AssignmentNode(name=expr.name, value=value, line=equals.line)
        return expr

    def parse_expression(self) -> ASTNode:
        """Parse an expression."""
        return self.parse_assignment()

    # Statements

    def parse_print_statement(self) -> PrintStatementNode:
        """Parse `print expr ;` (the keyword is already consumed)."""
        line = self.previous().line
        value = self.parse_expression()
        self.expect(TokenType.SEMICOLON, "Expect ';' after value")
        return PrintStatementNode(expression=value, line=line)

    def parse_expression_statement(self) -> ExpressionStatementNode:
        line = self.current.line
        value = self.parse_expression()
        self.expect(TokenType.SEMICOLON, "Expect ';' after expression")
        return ExpressionStatementNode(expression=value, line=line)

    def parse_statement(self) -> ASTNode:
        if self.match(TokenType.PRINT):
            return self.parse_print_statement()
        return self.parse_expression_statement()

    def parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse `var name (= expr)? ;` (the keyword is already consumed)."""
        line = self.previous().line
        name = self.expect(TokenType.IDENTIFIER, "Expect variable name")

        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.parse_expression()

        self.expect(TokenType.SEMICOLON, "Expect ';' after variable declaration")
        return VariableDeclarationNode(
            name=name.lexeme, initializer=initializer, line=line
        )

    def parse_declaration(self) -> ASTNode:
        if self.match(TokenType.VAR):
            return self.parse_variable_declaration()
        return self.parse_statement()

    # Entry points

    def parse(self) -> ProgramNode:
        """Parse a complete program, failing on the first syntax error."""
        statements: List[ASTNode] = []
        while not self.at_end():
            statements.append(self.parse_declaration())
        return ProgramNode(statements=tuple(statements), line=1)

    def synchronize(self) -> None:
        """Skip tokens up to the next statement boundary."""
        self.advance()
        while not self.at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.current.type in STATEMENT_KEYWORDS:
                return
            self.advance()

    def parse_with_recovery(self) -> Tuple[ProgramNode, List[ParseError]]:
        """Parse a program, collecting every syntax error instead of stopping."""
        statements: List[ASTNode] = []
        errors: List[ParseError] = []
        while not self.at_end():
            try:
                statements.append(self.parse_declaration())
            except ParseError as e:
                errors.append(e)
                self.synchronize()
        return ProgramNode(statements=tuple(statements), line=1), errors

    def parse_expression_only(self) -> ASTNode:
        """Parse a single expression that must span all remaining tokens."""
        expr = self.parse_expression()
        if not self.at_end():
            raise self.error("Expect end of expression")
        return expr


def parse(tokens: List[Token]) -> ProgramNode:
    """Parse tokens into a program, raising `ParseError` on the first error."""
    return Parser(tokens).parse()


def parse_all(tokens: List[Token]) -> ProgramNode:
    """Parse tokens with recovery, raising `ParseErrors` if any were found."""
    program, errors = Parser(tokens).parse_with_recovery()
    if errors:
        raise ParseErrors(errors)
    return program
