"""
calcula CLI package.

- evaluate.py: eval and repl commands
- inspect.py: tokens, ast and functions commands
- utils.py: Shared utilities
"""

from __future__ import annotations

import typer

from calcula.cli.evaluate import eval_command, repl_command
from calcula.cli.inspect import ast_command, functions_command, tokens_command
from calcula.cli.utils import version_callback

app = typer.Typer(
    help="""calcula - evaluate single-line arithmetic

Commands:
  • eval, repl: evaluate expressions
  • tokens, ast, functions: look inside the tokenizer and parser
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """calcula CLI main callback for global options."""
    ctx.obj = {"log_level": log_level}


app.command(name="eval")(eval_command)
app.command(name="repl")(repl_command)
app.command(name="tokens")(tokens_command)
app.command(name="ast")(ast_command)
app.command(name="functions")(functions_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]
