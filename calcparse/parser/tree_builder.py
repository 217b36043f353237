"""Build an AST from a postfix token sequence."""

from __future__ import annotations

import logging
from typing import Sequence

from calcparse.core.ast_nodes import ASTNode, BinaryOperationNode, NumberNode
from calcparse.core.errors import InsufficientOperandsError, InvalidExpressionError
from calcparse.parser.tokenizer import Token

log = logging.getLogger(__name__)


def build_tree(postfix: Sequence[Token]) -> ASTNode:
    """Reduce ``postfix`` to a single root node.

    Each operator pops its right operand first, then its left one.
    """
    stack: list[ASTNode] = []

    for tok in postfix:
        if not isinstance(tok, str):
            stack.append(NumberNode(tok))
            continue

        if len(stack) < 2:
            raise InsufficientOperandsError(tok)
        right = stack.pop()
        left = stack.pop()
        stack.append(BinaryOperationNode(left, right, tok))

    if len(stack) != 1:
        raise InvalidExpressionError()

    root = stack[0]
    log.debug("Built tree from %d postfix tokens", len(postfix))
    return root
