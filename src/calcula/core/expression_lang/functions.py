"""
Named constants and unary functions for the expression language.

Identifiers are resolved against the read-only ``NAMES`` table: exact,
case-sensitive matches only. Functions follow IEEE-754 semantics instead of
raising: out-of-domain arguments give NaN and logarithms of zero give -inf.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ConstantEntry:
    """A named constant."""

    value: float
    description: str = ""


@dataclass(frozen=True)
class FunctionEntry:
    """A named function of one float argument."""

    fn: Callable[[float], float]
    description: str = ""

    def __call__(self, arg: float) -> float:
        return self.fn(arg)


NameEntry = ConstantEntry | FunctionEntry


def _nan_on_domain_error(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap a math function so domain errors produce NaN."""

    @functools.wraps(fn)
    def wrapper(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return math.nan

    return wrapper


def _logarithm(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap a logarithm with the C library's pole and domain results."""

    @functools.wraps(fn)
    def wrapper(x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0:
            return math.nan
        return fn(x)

    return wrapper


def _myfunchere(x: float) -> float:
    """Reserved slot for one user-defined function. Currently the identity."""
    return x


_NAMES: dict[str, NameEntry] = {
    "pi": ConstantEntry(math.pi, "Ratio of a circle's circumference to its diameter"),
    "e": ConstantEntry(math.e, "Euler's number"),
    "sin": FunctionEntry(_nan_on_domain_error(math.sin), "Sine (radians)"),
    "cos": FunctionEntry(_nan_on_domain_error(math.cos), "Cosine (radians)"),
    "tan": FunctionEntry(_nan_on_domain_error(math.tan), "Tangent (radians)"),
    "arcsin": FunctionEntry(_nan_on_domain_error(math.asin), "Inverse sine"),
    "arccos": FunctionEntry(_nan_on_domain_error(math.acos), "Inverse cosine"),
    "arctan": FunctionEntry(math.atan, "Inverse tangent"),
    "ln": FunctionEntry(_logarithm(math.log), "Natural logarithm"),
    "log": FunctionEntry(_logarithm(math.log10), "Base-10 logarithm"),
    "lb": FunctionEntry(_logarithm(math.log2), "Base-2 logarithm"),
    "myfunchere": FunctionEntry(_myfunchere, "Placeholder, returns its argument"),
}

NAMES: Mapping[str, NameEntry] = MappingProxyType(_NAMES)


def lookup(name: str) -> NameEntry | None:
    """Resolve an identifier, or return None if it is not defined."""
    return NAMES.get(name)
