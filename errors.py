"""Error taxonomy for the scanner, parser and interpreter.

Each stage fails with its own kind of error:

- the scanner *collects* `ScanError` records (it never stops at the first
  bad character); a non-empty batch is raised as `ScanFailed` by callers that
  want an exception,
- the parser raises a single `ParseError` (a `SyntaxError`) at the first
  mismatch, or `ParseErrors` when panic-mode recovery is requested,
- the interpreter raises an `EvalError` (a `RuntimeError`) subclass.

All raised errors derive from `LoxError` so a driver can catch them in one
place.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional


class LoxError(Exception):
    """Base class for every error raised by the pipeline."""


# Scan errors


@dataclass(frozen=True)
class ScanError:
    line: int

    @property
    def message(self) -> str:
        return "Scan error"

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


@dataclass(frozen=True)
class UnexpectedCharacter(ScanError):
    ch: str = ""

    @property
    def message(self) -> str:
        return f"Unexpected character {self.ch!r}"


@dataclass(frozen=True)
class UnterminatedString(ScanError):
    @property
    def message(self) -> str:
        return "Unterminated string"


class ScanFailed(LoxError):
    """Raised when a scan produced one or more `ScanError`s."""

    def __init__(self, errors: List[ScanError]):
        super().__init__("\n".join(str(e) for e in errors))
        self.errors = list(errors)


# Parse errors


class ParseError(LoxError, SyntaxError):
    def __init__(self, line: int, message: str):
        super().__init__(message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class ParseErrors(LoxError):
    """Every syntax error found by a recovering parse."""

    def __init__(self, errors: List[ParseError]):
        super().__init__("\n".join(str(e) for e in errors))
        self.errors = list(errors)


# Evaluation errors


class EvalError(LoxError, RuntimeError):
    line: Optional[int] = None

    def __str__(self) -> str:
        text = super().__str__()
        if self.line:
            return f"[line {self.line}] Runtime error: {text}"
        return f"Runtime error: {text}"


class ZeroDivision(EvalError):
    def __init__(self):
        super().__init__("Division by zero")


class UnsupportedBinOp(EvalError):
    def __init__(self, left: Any, op: Any, right: Any):
        super().__init__(
            f"Unsupported operands for '{op}': {_describe(left)} and {_describe(right)}"
        )
        self.left = left
        self.op = op
        self.right = right


class UnsupportedUnaryOp(EvalError):
    def __init__(self, op: Any, value: Any):
        super().__init__(f"Unsupported operand for '{op}': {_describe(value)}")
        self.op = op
        self.value = value


class UndefinedVariable(EvalError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable '{name}'")
        self.name = name


def _describe(value: Any) -> str:
    type_name = getattr(value, "type_name", None)
    if type_name is None:
        return repr(value)
    if type_name == "string":
        return f"{type_name} \"{value}\""
    return f"{type_name} {value}"
