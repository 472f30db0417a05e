"""
calcula CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import math
import platform
from dataclasses import replace
from pathlib import Path

import typer

from calcula._version import get_version
from calcula.core.config import CalcConfig, load_config
from calcula.core.errors import ConfigError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcula version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("calcula").setLevel(log_level)


def load_cli_config(ctx: typer.Context, config_path: Path | None) -> CalcConfig:
    """Load configuration and set up logging, exiting with code 1 on bad config.

    A ``--log-level`` given to the top-level command wins over the
    configured level and is validated the same way.
    """
    explicit_level = (ctx.obj or {}).get("log_level")
    try:
        config = load_config(config_path)
        if explicit_level:
            config = replace(config, log_level=explicit_level.upper())
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(config.log_level)
    return config


def format_number(value: float, precision: int = 6) -> str:
    """Fixed-point formatting in the style of printf("%f")."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}f}"
