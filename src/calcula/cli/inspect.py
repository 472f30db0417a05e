"""
Inspection commands: show the tokens, AST or name table behind an evaluation.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcula.core.errors import ExpressionParseError, with_source
from calcula.core.expression_lang.functions import NAMES, ConstantEntry
from calcula.core.expression_lang.parser import parse_expr
from calcula.core.expression_lang.tokenizer import Lexer, TokenKind

console = Console()


def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens of an expression."""
    lexer = Lexer(expression)

    table = Table(title="Tokens")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Value", justify="right")
    table.add_column("Span", style="dim")

    for index, tok in enumerate(lexer):
        table.add_row(
            str(index),
            escape(tok.kind.display),
            escape(tok.text(expression)),
            repr(tok.value) if tok.kind == TokenKind.NUMBER else "",
            f"{tok.start}:{tok.end}",
        )

    console.print(table)

    if lexer.error is not None:
        console.print(f"[red]Lexical error:[/red] {escape(lexer.error.message)} (column {(lexer.error.pos or 0) + 1})")
        raise typer.Exit(code=1)


def ast_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print the AST as JSON"),
) -> None:
    """Show the parsed form of an expression."""
    try:
        expr = parse_expr(expression)
        rendered = expr.model_dump_json(indent=2) if as_json else str(expr)
    except ExpressionParseError as e:
        typer.echo(f"Error: {with_source(e, expression)}", err=True)
        raise typer.Exit(code=1)
    except RecursionError:
        typer.echo("Error: Expression is nested too deeply", err=True)
        raise typer.Exit(code=1)

    typer.echo(rendered)


def functions_command() -> None:
    """List the constants and functions available in expressions."""
    table = Table(title="Names")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Description")

    for name, entry in NAMES.items():
        if isinstance(entry, ConstantEntry):
            table.add_row(name, "constant", f"{entry.description} ({entry.value!r})")
        else:
            table.add_row(name, "function", entry.description)

    console.print(table)
