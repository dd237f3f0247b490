from __future__ import annotations
import argparse
import sys
from typing import Callable, List, Optional, Sequence
from scanner import scan_or_raise
from tokens import Token, TokenType
from ast_nodes import ProgramNode
from parser import Parser, parse_all
from interpreter import Interpreter
from errors import LoxError, EvalError, ParseError
from pretty_printer import PrettyPrinter
from ast_json import dump_ast
from ast_viz import write_and_render


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_DATA_ERROR = 65
EXIT_RUNTIME_ERROR = 70


def lex(text: str) -> List[Token]:
    """Tokenize input string, raising `ScanFailed` on lexical errors."""
    return scan_or_raise(text)


def parse_tokens(tokens: List[Token], recover: bool = False) -> ProgramNode:
    """Parse tokens into a program AST."""
    if recover:
        return parse_all(tokens)
    return Parser(tokens).parse()


def report(error: LoxError) -> None:
    print(str(error), file=sys.stderr)


def run_source(
    text: str,
    interpreter: Optional[Interpreter] = None,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    recover: bool = False,
) -> int:
    """Scan, parse and run one source text; return a process exit status.

    Errors from any stage are reported on stderr. Debug dumps go to stdout
    before the program runs.
    """
    interpreter = interpreter if interpreter is not None else Interpreter()
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens):
                print(f"  {i:3}: {token}")

        program = parse_tokens(tokens, recover=recover)
        if print_ast:
            print("AST:")
            print(PrettyPrinter.print_ast(program))

        if dump_ast_path:
            try:
                dump_ast(program, dump_ast_path)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=sys.stderr)

        if viz_path:
            try:
                write_and_render(program, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}", file=sys.stderr)

        interpreter.interpret(program)
    except EvalError as e:
        report(e)
        return EXIT_RUNTIME_ERROR
    except LoxError as e:
        report(e)
        return EXIT_DATA_ERROR
    return EXIT_OK


def run_file(path: str, **options) -> int:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        print(f"Failed to read file {path}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    return run_source(text, **options)


def run_line(line: str, interpreter: Interpreter) -> None:
    """Run one REPL line; a bare expression without `;` has its value printed."""
    tokens = lex(line)
    if len(tokens) > 1 and tokens[-2].type != TokenType.SEMICOLON:
        try:
            expr = Parser(tokens).parse_expression_only()
        except ParseError:
            pass  # not a bare expression; parse it as statements below
        else:
            print(str(interpreter.evaluate(expr)), file=interpreter.output)
            return
    interpreter.interpret(parse_tokens(tokens))


def interactive_mode(
    interpreter: Optional[Interpreter] = None,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run the interactive prompt; bindings persist across lines."""
    interpreter = interpreter if interpreter is not None else Interpreter()
    print("Lox interactive mode (type 'quit' to exit)")

    while True:
        try:
            text = read_line("> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break
        if not text:
            continue

        try:
            run_line(text, interpreter)
        except LoxError as e:
            report(e)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a Lox program from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to run"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # debugging output
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--recover",
        dest="recover",
        action="store_true",
        help="Report every syntax error instead of stopping at the first",
    )
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode()
        return EXIT_OK
    if args.file:
        return run_file(
            args.file,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            recover=args.recover,
        )
    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(cli())
