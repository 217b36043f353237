"""Error taxonomy for parsing, evaluating and deserializing expressions."""

from __future__ import annotations


class ExpressionError(ValueError):
    """Base class for every error raised by the expression pipeline."""


class InvalidParenthesesError(ExpressionError):
    def __init__(self, message: str = "Invalid or mismatched parentheses"):
        super().__init__(message)


class UnexpectedTokenError(ExpressionError):
    """A character outside the accepted alphabet was found while tokenizing."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected token '{char}' at position {position}")


class InvalidExpressionError(ExpressionError):
    """The postfix sequence did not reduce to exactly one tree."""

    def __init__(self, message: str = "Invalid expression"):
        super().__init__(message)


class InsufficientOperandsError(InvalidExpressionError):
    def __init__(self, operator: str):
        self.operator = operator
        super().__init__("Invalid expression: not enough operands for operator")


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class UnknownOperatorError(ExpressionError):
    def __init__(self, operator: object):
        self.operator = operator
        super().__init__(f"Unknown operator: {operator}")


class UnrecognizedNodeTypeError(ExpressionError):
    def __init__(self, node_type: object):
        self.node_type = node_type
        super().__init__("Unrecognized serialized node type")


class InvalidNodeValueError(ExpressionError):
    """A serialized NumberNode carried something other than a number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid NumberNode value: {value!r}")
