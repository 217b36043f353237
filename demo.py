#!/usr/bin/env python3
"""Demo runner: evaluate a fixed list of expressions and tabulate the results.

Usage:
    python3 demo.py
    python3 demo.py "1 + 2" "10 / 0"
"""

from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console

from calcparse.core.ast_nodes import format_value
from calcparse.core.errors import ExpressionError
from calcparse.parser.facade import parse

DEMO_EXPRESSIONS = [
    "3 + 4 * 2 / (1 - 5) + 7",
    "10 + 5",
    "(1 + 2) * 3",
    "2 * (3 + 4) - 5 / (1 + 1)",
    "1.5 * 4",
    "(2 + 3) < (4 - 1)",
    "8 > 2 * 3",
    "4 = (2 + 2)",
    "1.2.3",
]


def run_demo(expressions: Sequence[str] = DEMO_EXPRESSIONS) -> int:
    """Parse and evaluate every expression, rendering one table row each.

    Returns 0 if all expressions evaluated, 1 if any raised.
    """
    from calcparse.utils.display import display_demo_results

    console = Console()
    console.print(f"\n[bold]Evaluating {len(expressions)} expressions[/bold]\n")

    rows: list[dict[str, str]] = []
    for expr in expressions:
        try:
            ast = parse(expr)
            value = ast.evaluate()
        except ExpressionError as e:
            rows.append({"expression": expr, "result": str(e), "status": "ERROR"})
            continue
        rows.append({
            "expression": expr,
            "ast": ast.print(),
            "result": format_value(value),
            "status": "OK",
        })

    display_demo_results(rows)

    n_ok = sum(1 for r in rows if r["status"] == "OK")
    n_err = len(rows) - n_ok
    console.print(f"\n[bold]Summary:[/bold] {n_ok} OK, {n_err} ERROR")

    return 1 if n_err else 0


if __name__ == "__main__":
    sys.exit(run_demo(sys.argv[1:] or DEMO_EXPRESSIONS))
