"""Core calcula functionality: expression IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    CalculaError,
    ConfigError,
    ErrorContext,
    ExpressionError,
    ExpressionEvalError,
    ExpressionParseError,
    ExpressionTokenError,
)

__all__ = [
    "ir",
    "CalcConfig",
    "load_config",
    "CalculaError",
    "ConfigError",
    "ErrorContext",
    "ExpressionError",
    "ExpressionEvalError",
    "ExpressionParseError",
    "ExpressionTokenError",
]
