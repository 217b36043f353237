"""Tokenizer: whitespace-stripped expression text to number/symbol tokens."""

from __future__ import annotations

import logging
import re
from typing import Union

from calcparse.core.errors import UnexpectedTokenError

log = logging.getLogger(__name__)

Token = Union[float, str]

_NUMBER_CHARS = frozenset("0123456789.")
_SYMBOL_CHARS = frozenset("+-*/()<>=")

# Longest valid decimal prefix of a run of digits and dots.
_DECIMAL_PREFIX_RE = re.compile(r"\d+\.?\d*|\.\d+")


def parse_decimal_prefix(run: str) -> float:
    """Parse the leading valid decimal number of ``run``.

    Whatever follows the prefix is dropped: ``"1.2.3"`` gives ``1.2``. A run
    with no valid prefix at all (``"."``, ``"..5"``) gives NaN.
    """
    m = _DECIMAL_PREFIX_RE.match(run)
    if not m:
        return float("nan")
    return float(m.group())


def tokenize(s: str) -> list[Token]:
    """Split a whitespace-stripped string into numbers and one-char symbols.

    Raises UnexpectedTokenError on any other character, reporting its
    zero-based position in ``s``.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch in _NUMBER_CHARS:
            start = i
            while i < len(s) and s[i] in _NUMBER_CHARS:
                i += 1
            tokens.append(parse_decimal_prefix(s[start:i]))
        elif ch in _SYMBOL_CHARS:
            tokens.append(ch)
            i += 1
        else:
            raise UnexpectedTokenError(ch, i)

    log.debug("Tokenized %r into %d tokens", s, len(tokens))
    return tokens
