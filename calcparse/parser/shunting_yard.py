"""Shunting-Yard conversion of infix tokens to postfix (RPN) order."""

from __future__ import annotations

import logging
from typing import Sequence

from calcparse.core.ast_nodes import Operator, format_number
from calcparse.core.errors import InvalidExpressionError, InvalidParenthesesError
from calcparse.parser.tokenizer import Token

log = logging.getLogger(__name__)


def _is_operator(token: Token) -> bool:
    return isinstance(token, str) and Operator.is_operator(token)


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """Reorder ``tokens`` into postfix using operator precedence.

    Operators of equal or higher precedence already on the stack are popped
    before the incoming one is pushed, which makes every operator left
    associative. Parentheses never reach the output.
    """
    output: list[Token] = []
    stack: list[str] = []

    for tok in tokens:
        if not isinstance(tok, str):
            output.append(tok)
        elif _is_operator(tok):
            prec = Operator(tok).precedence
            while stack and _is_operator(stack[-1]) and Operator(stack[-1]).precedence >= prec:
                output.append(stack.pop())
            stack.append(tok)
        elif tok == "(":
            stack.append(tok)
        elif tok == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                # Balance is checked before tokenizing; reaching here means
                # the caller skipped that check.
                raise InvalidParenthesesError()
            stack.pop()
        else:
            raise InvalidExpressionError(f"Unexpected token {tok!r} in token stream")

    while stack:
        top = stack.pop()
        if top == "(":
            raise InvalidParenthesesError()
        output.append(top)

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Postfix: %s", " ".join(_token_text(t) for t in output))
    return output


def _token_text(token: Token) -> str:
    if isinstance(token, str):
        return token
    return format_number(token)
