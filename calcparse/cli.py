"""CLI interface for the expression parser.

Usage:
    calcparse eval "3 + 4 * (2 - 1)" --show-ast
    calcparse eval "(2 + 3) < (4 - 1)" --json
    calcparse repl
    calcparse deserialize tree.json
    calcparse demo
"""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from calcparse.core.errors import ExpressionError

console = Console()

BANNER = (
    "Arithmetic Expression Parser & Evaluator\n"
    "Type an expression and press Enter (e.g., 3 + 4 * (2 - 1)).\n"
    "Type 'exit' or press Ctrl+C to quit.\n"
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log each pipeline stage")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Parse and evaluate infix arithmetic and comparison expressions."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@main.command("eval")
@click.argument("expression")
@click.option("--show-ast/--no-show-ast", default=False, help="Render the tree structure")
@click.option("--json", "as_json", is_flag=True, help="Print the serialized tree as JSON")
def eval_command(expression: str, show_ast: bool, as_json: bool) -> None:
    """Parse EXPRESSION, evaluate it and print the result."""
    from calcparse.parser.facade import parse
    from calcparse.utils.display import (
        display_ast, display_error, display_result, display_serialized,
    )

    try:
        ast = parse(expression)
        value = ast.evaluate()
    except ExpressionError as e:
        display_error(str(e))
        sys.exit(1)

    display_result(value, ast)
    if show_ast:
        display_ast(ast)
    if as_json:
        display_serialized(ast)


@main.command()
def repl() -> None:
    """Read expressions line by line until 'exit' or end of input."""
    from calcparse.parser.facade import parse
    from calcparse.utils.display import display_error, display_result

    console.print(BANNER, markup=False, highlight=False)

    while True:
        try:
            line = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            break

        text = line.strip()
        if text.lower() == "exit":
            break
        if not text:
            continue

        try:
            ast = parse(text)
            value = ast.evaluate()
        except ExpressionError as e:
            display_error(str(e))
            continue

        display_result(value, ast)

    console.print("\nGoodbye!")


@main.command()
@click.argument("source", type=click.File("r"))
def deserialize(source) -> None:
    """Rebuild a tree from its serialized JSON (a file path, or - for stdin)."""
    from calcparse.parser.facade import deserialize_json
    from calcparse.utils.display import display_error, display_result

    try:
        ast = deserialize_json(source.read())
        value = ast.evaluate()
    except json.JSONDecodeError as e:
        display_error(f"Invalid JSON: {e}")
        sys.exit(1)
    except KeyError as e:
        display_error(f"Serialized node is missing field {e}")
        sys.exit(1)
    except ExpressionError as e:
        display_error(str(e))
        sys.exit(1)

    display_result(value, ast)


@main.command()
def demo() -> None:
    """Evaluate the built-in list of demo expressions."""
    from demo import run_demo

    sys.exit(run_demo())


if __name__ == "__main__":
    main()
