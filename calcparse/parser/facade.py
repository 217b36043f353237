"""Parser facade: validate, tokenize, convert and build in one call.

    ast = parse("3 + 4 * (2 - 1)")
    ast.evaluate()   # 7.0
    ast.print()      # "(3 + (4 * (2 - 1)))"

Serialized trees come back through ``deserialize`` (or ``deserialize_json``
for the JSON text produced by ``ASTNode.to_json``).
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from calcparse.core.ast_nodes import ASTNode, BinaryOperationNode, NumberNode
from calcparse.core.errors import (
    InvalidNodeValueError, InvalidParenthesesError, UnrecognizedNodeTypeError,
)
from calcparse.parser.shunting_yard import to_postfix
from calcparse.parser.tokenizer import tokenize
from calcparse.parser.tree_builder import build_tree

log = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def is_valid(s: str) -> bool:
    """Check that parentheses in ``s`` are balanced. Other characters are ignored."""
    stack: list[str] = []
    for ch in s:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            if not stack:
                return False
            stack.pop()
    return not stack


def parse(expr: str) -> ASTNode:
    """Parse an infix expression into an AST.

    Raises InvalidParenthesesError, UnexpectedTokenError or an
    InvalidExpressionError (including InsufficientOperandsError) on bad input.
    """
    s = _WHITESPACE_RE.sub("", expr)
    if not is_valid(s):
        raise InvalidParenthesesError()

    tokens = tokenize(s)
    postfix = to_postfix(tokens)
    root = build_tree(postfix)
    log.debug("Parsed %r into %d tokens", expr, len(tokens))
    return root


def deserialize(serial: dict[str, Any]) -> ASTNode:
    """Rebuild an AST from its ``serialize()`` form."""
    node_type = serial.get("type") if isinstance(serial, dict) else None

    if node_type == "NumberNode":
        value = serial["value"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidNodeValueError(value)
        return NumberNode(value)

    if node_type == "BinaryOperationNode":
        left = deserialize(serial["left"])
        right = deserialize(serial["right"])
        return BinaryOperationNode(left, right, serial["operator"])

    raise UnrecognizedNodeTypeError(node_type)


def deserialize_json(text: str) -> ASTNode:
    return deserialize(json.loads(text))


class Parser:
    """Namespace exposing the pipeline as static methods."""

    is_valid = staticmethod(is_valid)
    parse = staticmethod(parse)
    deserialize = staticmethod(deserialize)
    deserialize_json = staticmethod(deserialize_json)
