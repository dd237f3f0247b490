"""Runtime value types for the interpreter.

A value is one of `VNil`, `VBool`, `VNumber` or `VString`. They are frozen
dataclasses, so equality is structural and never crosses types:
`VBool(True) != VNumber(1.0)` even though `True == 1` in Python.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class VNil:
    type_name = "nil"

    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class VBool:
    value: bool
    type_name = "boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VNumber:
    value: float
    type_name = "number"

    def __str__(self) -> str:
        v = self.value
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "inf" if v > 0 else "-inf"
        if v == 0 and math.copysign(1.0, v) < 0:
            return "-0"
        if v == int(v):
            return str(int(v))
        return repr(v)


@dataclass(frozen=True)
class VString:
    value: str
    type_name = "string"

    def __str__(self) -> str:
        return self.value


Value = Union[VNil, VBool, VNumber, VString]

NIL = VNil()
TRUE = VBool(True)
FALSE = VBool(False)


def is_truthy(value: Value) -> bool:
    """`nil` and `false` are falsy; every other value is truthy."""
    match value:
        case VNil():
            return False
        case VBool(value=b):
            return b
        case _:
            return True
