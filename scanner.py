"""
Scanner for the Lox subset.

Overview:
- This module implements a small hand-written lexical analyzer that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (e.g. `var`, `print`, `nil`, `true`), identifiers,
    number and string literals, single- and two-character operators (e.g.
    `==`, `!=`, `<=`, `>=`), punctuation, and skips whitespace and
    single-line comments starting with `//`.

Examples:
    Input:  'var x = 1.5; print x;'
    Tokens: [VAR, IDENTIFIER('x'), EQUAL, NUMBER(1.5), SEMICOLON, PRINT, ...]

Implementation notes:
- The scanner walks the text once with a `start` cursor (first character of
    the current lexeme) and a `current` cursor (next character to read).
- Two-character operators use one character of lookahead so `<=` is never
    split into `<` `=`.
- Lexical errors do not stop the scan. They are collected in `self.errors`
    and the scan continues with the next character, so a caller sees every
    bad character in the input at once.
- The token list always ends with a single EOF token carrying the final
    line number.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from tokens import Token, TokenType, KEYWORDS
from errors import ScanError, ScanFailed, UnexpectedCharacter, UnterminatedString


SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first character -> (type when followed by '=', type otherwise)
ONE_OR_TWO_CHAR_TOKENS = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


def is_identifier_start(ch: Optional[str]) -> bool:
    return ch is not None and (ch.isalpha() or ch == "_")


def is_identifier_char(ch: Optional[str]) -> bool:
    return ch is not None and (ch.isalnum() or ch == "_")


class Scanner:
    def __init__(self, text: str):
        self.text = text
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[ScanError] = []

    def is_at_end(self) -> bool:
        return self.current >= len(self.text)

    def advance(self) -> str:
        """Consume and return the next character."""
        ch = self.text[self.current]
        self.current += 1
        return ch

    def peek(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        if self.is_at_end():
            return None
        return self.text[self.current]

    def peek_next(self) -> Optional[str]:
        """Look one character past `peek()`."""
        if self.current + 1 >= len(self.text):
            return None
        return self.text[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def lexeme(self) -> str:
        return self.text[self.start : self.current]

    def add_token(self, token_type: TokenType, literal=None) -> None:
        self.tokens.append(Token(token_type, self.lexeme(), literal, self.line))

    def skip_comment(self) -> None:
        """Skip a `//` comment up to, but not including, the newline."""
        while self.peek() is not None and self.peek() != "\n":
            self.advance()

    def string(self) -> None:
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line
        while self.peek() is not None and self.peek() != '"':
            ch = self.advance()
            if ch == "\n":
                self.line += 1
            elif ch == "\\" and self.peek() is not None:
                # The escaped character never terminates the literal.
                if self.advance() == "\n":
                    self.line += 1

        if self.is_at_end():
            self.errors.append(UnterminatedString(line=start_line))
            return

        self.advance()  # closing quote
        value = self.text[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, value)

    def number(self) -> None:
        """Scan a number literal; the first digit is already consumed."""
        while is_digit(self.peek()):
            self.advance()

        # A fractional part needs at least one digit after the dot, otherwise
        # the dot is left for the next token.
        if self.peek() == "." and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        text = self.lexeme()
        try:
            value = float(text)
        except ValueError as e:
            raise AssertionError(f"Scanned malformed number literal {text!r}") from e
        self.add_token(TokenType.NUMBER, value)

    def identifier(self) -> None:
        """Scan an identifier or keyword; the first character is consumed."""
        while is_identifier_char(self.peek()):
            self.advance()
        self.add_token(KEYWORDS.get(self.lexeme(), TokenType.IDENTIFIER))

    def scan_token(self) -> None:
        ch = self.advance()

        if ch in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[ch])
            return

        if ch in ONE_OR_TWO_CHAR_TOKENS:
            long_type, short_type = ONE_OR_TWO_CHAR_TOKENS[ch]
            self.add_token(long_type if self.match("=") else short_type)
            return

        match ch:
            case "/":
                if self.match("/"):
                    self.skip_comment()
                else:
                    self.add_token(TokenType.SLASH)
            case " " | "\r" | "\t":
                pass
            case "\n":
                self.line += 1
            case '"':
                self.string()
            case _ if is_digit(ch):
                self.number()
            case _ if is_identifier_start(ch):
                self.identifier()
            case _:
                self.errors.append(UnexpectedCharacter(line=self.line, ch=ch))

    def scan_tokens(self) -> Tuple[List[Token], List[ScanError]]:
        """Scan the whole text and return `(tokens, errors)`."""
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens, self.errors


def scan(text: str) -> Tuple[List[Token], List[ScanError]]:
    """Tokenize `text`. A non-empty error list means the scan failed."""
    return Scanner(text).scan_tokens()


def scan_or_raise(text: str) -> List[Token]:
    """Tokenize `text`, raising `ScanFailed` with every error if any occurred."""
    tokens, errors = scan(text)
    if errors:
        raise ScanFailed(errors)
    return tokens
