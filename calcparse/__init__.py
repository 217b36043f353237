"""Infix arithmetic and comparison expressions: parse, evaluate, print, serialize."""

from calcparse.core import (
    ASTNode, BinaryOperationNode, ExpressionError, NumberNode, Operator,
)
from calcparse.parser import Parser, deserialize, parse

__all__ = [
    "ASTNode", "NumberNode", "BinaryOperationNode", "Operator", "ExpressionError",
    "Parser", "parse", "deserialize",
]
