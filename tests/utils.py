from scanner import scan_or_raise
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return scan_or_raise(text)


def parse_text(text: str):
    """Convenience: lex+parse a source text into a program AST."""
    return Parser(lex(text)).parse()


def parse_expr(text: str):
    """Lex+parse a single expression (no trailing `;`)."""
    return Parser(lex(text)).parse_expression_only()


def run_text(text: str, interpreter):
    """Parse and run `text`; return everything the interpreter printed."""
    interpreter.interpret(parse_text(text))
    return interpreter.output.getvalue()
