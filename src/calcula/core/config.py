"""
Configuration for the calcula shell.

Settings come from three places, later ones winning:

1. Defaults on CalcConfig
2. The [calcula] table of a calcula.toml file
3. Environment variables

Environment variables:
    CALCULA_PRECISION  - digits after the decimal point (default: 6)
    CALCULA_STRICT     - report errors instead of printing inf (default: false)
    CALCULA_MAX_LINE   - longest accepted input line (default: 2000)
    CALCULA_LOG_LEVEL  - logging level (default: WARNING)

Usage:
    from calcula.core.config import load_config

    config = load_config()             # ./calcula.toml if present
    config = load_config(Path("x.toml"))
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from calcula.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "calcula.toml"

DEFAULT_PROMPT = "please enter an equation or 'q' to quit."

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class CalcConfig:
    """Shell settings."""

    precision: int = 6  # digits after the point, like printf("%f")
    strict: bool = False  # print the error instead of the inf sentinel
    max_line_length: int = 2000
    prompt: str = DEFAULT_PROMPT
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ConfigError(f"precision must be >= 0, got {self.precision}")
        if self.max_line_length <= 0:
            raise ConfigError(f"max_line_length must be > 0, got {self.max_line_length}")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{self.log_level}'. Valid values: {', '.join(sorted(_LOG_LEVELS))}"
            )


def load_config(path: Path | None = None) -> CalcConfig:
    """Load settings from a TOML file and the environment.

    Args:
        path: Config file. When None, ./calcula.toml is used if it exists.

    Returns:
        CalcConfig with file values and environment overrides applied.

    Raises:
        ConfigError: If the file is missing, unreadable, or holds bad values.
    """
    if path is None:
        default = Path.cwd() / CONFIG_FILENAME
        config = _load_file(default) if default.exists() else CalcConfig()
    else:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        config = _load_file(path)

    return _apply_environment(config)


def _load_file(path: Path) -> CalcConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section: dict[str, Any] = data.get("calcula", {})
    logger.debug("Loaded config from %s: %s", path, section)

    return CalcConfig(
        precision=_as_int(section.get("precision", 6), "precision"),
        strict=_as_bool(section.get("strict", False), "strict"),
        max_line_length=_as_int(section.get("max_line_length", 2000), "max_line_length"),
        prompt=str(section.get("prompt", DEFAULT_PROMPT)),
        log_level=str(section.get("log_level", "WARNING")),
    )


def _apply_environment(config: CalcConfig) -> CalcConfig:
    overrides: dict[str, Any] = {}

    if (value := os.environ.get("CALCULA_PRECISION")) is not None:
        overrides["precision"] = _as_int(value, "CALCULA_PRECISION")

    if (value := os.environ.get("CALCULA_MAX_LINE")) is not None:
        overrides["max_line_length"] = _as_int(value, "CALCULA_MAX_LINE")

    if (value := os.environ.get("CALCULA_LOG_LEVEL")) is not None:
        overrides["log_level"] = value.strip().upper()

    if (value := os.environ.get("CALCULA_STRICT")) is not None:
        flag = value.lower().strip()
        if flag in _TRUE_VALUES:
            overrides["strict"] = True
        elif flag in _FALSE_VALUES:
            overrides["strict"] = False
        else:
            # Unknown value - keep the configured setting with a warning
            logger.warning(
                "Unknown CALCULA_STRICT value '%s'. Valid values: true, false. Keeping %s.",
                value,
                config.strict,
            )

    if not overrides:
        return config
    return replace(config, **overrides)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{name} must be true or false, got {value!r}")
