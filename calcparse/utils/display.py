"""Rich console display utilities for parsed expressions."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from calcparse.core.ast_nodes import ASTNode, BinaryOperationNode, Value, format_value

console = Console()


def build_ast_tree(node: ASTNode, tree: Tree | None = None) -> Tree:
    """Mirror an AST as a rich Tree, operators as branches and numbers as leaves."""
    label = _node_label(node)
    branch = Tree(label) if tree is None else tree.add(label)
    if isinstance(node, BinaryOperationNode):
        build_ast_tree(node.left, branch)
        build_ast_tree(node.right, branch)
    return branch


def _node_label(node: ASTNode) -> str:
    if isinstance(node, BinaryOperationNode):
        return f"[yellow]{node.operator.value}[/yellow]"
    return f"[cyan]{node.print()}[/cyan]"


def display_result(value: Value, ast: ASTNode) -> None:
    console.print(f"Result: {format_value(value)}")
    console.print(f"AST (print): {ast.print()}", markup=False)


def display_ast(ast: ASTNode) -> None:
    console.print(Panel(
        build_ast_tree(ast),
        title=f"AST ({ast.size()} nodes, depth {ast.depth()})",
        border_style="blue",
    ))


def display_serialized(ast: ASTNode) -> None:
    console.print(Syntax(ast.to_json(indent=2), "json"))


def display_error(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]")


def display_demo_results(rows: list[dict[str, str]]) -> None:
    """Display demo runner results as a table."""
    table = Table(title="Demo Expressions")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Expression", style="cyan")
    table.add_column("AST", style="white")
    table.add_column("Result", style="green", justify="right")
    table.add_column("Status", justify="center")

    for i, r in enumerate(rows, 1):
        status = "[green]OK[/green]" if r["status"] == "OK" else "[red]ERROR[/red]"
        table.add_row(str(i), escape(r["expression"]), r.get("ast", "-"), escape(r["result"]), status)

    console.print(table)
