"""
Evaluation commands: one-shot ``eval`` and the interactive ``repl``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import typer

from calcula.cli.utils import format_number, load_cli_config
from calcula.core.config import CalcConfig
from calcula.core.errors import ExpressionError
from calcula.core.expression_lang.calculator import (
    SENTINEL,
    CalcResult,
    calculate,
    strip_line_terminator,
)

logger = logging.getLogger(__name__)


def _report(result: CalcResult, config: CalcConfig) -> bool:
    """Print one result line. Returns False if an error was reported."""
    if result.ok:
        assert result.value is not None
        value = format_number(result.value, config.precision)
    elif config.strict:
        error = ExpressionError(result.error or "Invalid expression", result.position, result.source)
        typer.echo(f"Error: {error}", err=True)
        return False
    else:
        value = format_number(SENTINEL, config.precision)

    typer.echo(f"result of equation '{result.source}' = {value}")
    return True


def _override(config: CalcConfig, strict: bool | None, precision: int | None) -> CalcConfig:
    changes: dict[str, Any] = {}
    if strict is not None:
        changes["strict"] = strict
    if precision is not None:
        changes["precision"] = precision
    if not changes:
        return config
    return replace(config, **changes)


def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '2+3*4'"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--sentinel",
        help="Report errors instead of printing inf",
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0, help="Digits after the decimal point"
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to calcula.toml"),
) -> None:
    """Evaluate a single expression."""
    config = _override(load_cli_config(ctx, config_path), strict, precision)
    if not _report(calculate(expression), config):
        raise typer.Exit(code=1)


def repl_command(
    ctx: typer.Context,
    strict: bool | None = typer.Option(
        None,
        "--strict/--sentinel",
        help="Report errors instead of printing inf",
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to calcula.toml"),
) -> None:
    """Read expressions line by line until 'q' or end of input."""
    config = _override(load_cli_config(ctx, config_path), strict, None)

    while True:
        typer.echo(config.prompt)
        line = sys.stdin.readline()
        if not line:
            typer.echo("end of input, exiting.")
            break
        if line[0] in ("q", "Q"):
            typer.echo("calculator program exiting.")
            break

        line = strip_line_terminator(line)
        if len(line) > config.max_line_length:
            logger.info("Rejected line of %d characters", len(line))
            typer.echo(
                f"Error: line is longer than {config.max_line_length} characters",
                err=True,
            )
            continue

        _report(calculate(line), config)
