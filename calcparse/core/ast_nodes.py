"""Abstract syntax tree nodes for arithmetic and comparison expressions."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from calcparse.core.errors import DivisionByZeroError, UnknownOperatorError

Value = Union[float, bool]


class Operator(str, Enum):
    """The closed set of binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LT = "<"
    GT = ">"
    EQ = "="

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @classmethod
    def is_operator(cls, symbol: object) -> bool:
        if isinstance(symbol, cls):
            return True
        return isinstance(symbol, str) and symbol in _SYMBOLS

    def __str__(self) -> str:
        return self.value


# Comparisons share the additive level; they are not chainable.
_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.LT: 1,
    Operator.GT: 1,
    Operator.EQ: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

_SYMBOLS = frozenset(op.value for op in Operator)


def format_number(value: float) -> str:
    """Render a float the way the calculator has always shown numbers.

    Integral values drop the fractional part (``10`` rather than ``10.0``),
    everything else uses the shortest round-tripping digits. Exponent form is
    used only below 1e-6 or from 1e21 up, written without zero padding
    (``1e-7``, ``1e+21``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if exp >= -6 and abs(value) < 1e21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{exp:+d}"


def format_value(value: Value) -> str:
    """Render an evaluation result: booleans as true/false, numbers as above."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return format_number(float(value))


class ASTNode:
    """Base class for AST nodes."""

    def evaluate(self) -> Value:
        raise NotImplementedError

    def print(self) -> str:
        raise NotImplementedError

    def serialize(self) -> dict[str, Any]:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def depth(self) -> int:
        raise NotImplementedError

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.serialize(), indent=indent)

    def __str__(self) -> str:
        return self.print()


@dataclass(frozen=True)
class NumberNode(ASTNode):
    """A numeric literal: 3, 4.5, .25, ..."""

    value: float

    def __init__(self, value: float):
        object.__setattr__(self, "value", float(value))

    def evaluate(self) -> float:
        return self.value

    def print(self) -> str:
        return format_number(self.value)

    def serialize(self) -> dict[str, Any]:
        return {"type": "NumberNode", "value": self.value}

    def size(self) -> int:
        return 1

    def depth(self) -> int:
        return 1


@dataclass(frozen=True)
class BinaryOperationNode(ASTNode):
    """Application of a binary operator to two subtrees: (left op right)."""

    left: ASTNode
    right: ASTNode
    operator: Operator

    def __init__(self, left: ASTNode, right: ASTNode, operator: Operator | str):
        if not Operator.is_operator(operator):
            raise UnknownOperatorError(operator)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "operator", Operator(operator))

    def evaluate(self) -> Value:
        """Evaluate both children, then apply the operator.

        Arithmetic operators coerce their operands to float, so a boolean
        produced by a comparison counts as 1.0 or 0.0. ``=`` is strict: a
        number never equals a boolean.
        """
        left = self.left.evaluate()
        right = self.right.evaluate()
        op = self.operator

        if op is Operator.ADD:
            return float(left) + float(right)
        if op is Operator.SUB:
            return float(left) - float(right)
        if op is Operator.MUL:
            return float(left) * float(right)
        if op is Operator.DIV:
            if float(right) == 0:
                raise DivisionByZeroError()
            return float(left) / float(right)
        if op is Operator.LT:
            return left < right
        if op is Operator.GT:
            return left > right
        if op is Operator.EQ:
            return type(left) is type(right) and left == right

        raise UnknownOperatorError(op)

    def print(self) -> str:
        return f"({self.left.print()} {self.operator.value} {self.right.print()})"

    def serialize(self) -> dict[str, Any]:
        return {
            "type": "BinaryOperationNode",
            "operator": self.operator.value,
            "left": self.left.serialize(),
            "right": self.right.serialize(),
        }

    def size(self) -> int:
        return 1 + self.left.size() + self.right.size()

    def depth(self) -> int:
        return 1 + max(self.left.depth(), self.right.depth())
