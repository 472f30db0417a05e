"""
calcula - a recursive-descent calculator for single-line arithmetic.

Evaluates expressions such as ``sin pi/2 + [2+3]*4^2`` to a double,
with IEEE semantics for infinities and NaNs.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import CalculaError, ExpressionError
from .core.expression_lang import CalcResult, calculate, evaluate_line

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcResult",
    "CalculaError",
    "ExpressionError",
    "calculate",
    "evaluate_line",
]
