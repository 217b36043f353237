from calcparse.core.ast_nodes import (
    ASTNode, BinaryOperationNode, NumberNode, Operator, format_number, format_value,
)
from calcparse.core.errors import (
    DivisionByZeroError, ExpressionError, InsufficientOperandsError, InvalidExpressionError,
    InvalidNodeValueError, InvalidParenthesesError, UnexpectedTokenError, UnknownOperatorError,
    UnrecognizedNodeTypeError,
)

__all__ = [
    "ASTNode", "NumberNode", "BinaryOperationNode", "Operator", "format_number", "format_value",
    "ExpressionError", "InvalidParenthesesError", "UnexpectedTokenError", "InvalidExpressionError",
    "InsufficientOperandsError", "InvalidNodeValueError", "DivisionByZeroError",
    "UnknownOperatorError", "UnrecognizedNodeTypeError",
]
