"""
Expression evaluator for the calcula expression language.

Folds an expression AST into a float. Pure evaluation, no I/O. Arithmetic
follows IEEE-754 doubles the way C does: division by zero gives an infinity
(or NaN for 0/0), overflowing powers give an infinity, and a negative base
with a fractional exponent gives NaN. Python's ZeroDivisionError,
OverflowError and math domain errors never escape.
"""

from __future__ import annotations

import math

from calcula.core.errors import ExpressionEvalError
from calcula.core.expression_lang.functions import FunctionEntry, lookup
from calcula.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Call,
    Constant,
    Expr,
    Number,
    UnaryExpr,
    UnaryOp,
)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression AST.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value, possibly inf or NaN.

    Raises:
        ExpressionEvalError: If the AST holds a node or function name the
            evaluator does not know. Parser output never does.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Number):
        return expr.value

    if isinstance(expr, Constant):
        return expr.value

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    if isinstance(expr, Call):
        return _interpret_call(expr)

    raise ExpressionEvalError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr) -> float:
    """Evaluate a binary expression, left operand first."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)

    if expr.op == BinaryOp.ADD:
        return left + right
    if expr.op == BinaryOp.SUB:
        return left - right
    if expr.op == BinaryOp.MUL:
        return left * right
    if expr.op == BinaryOp.DIV:
        return _divide(left, right)
    if expr.op == BinaryOp.POW:
        return _power(left, right)

    raise ExpressionEvalError(f"Unknown binary op: {expr.op}")


def _interpret_unary(expr: UnaryExpr) -> float:
    """Evaluate a unary expression."""
    val = _interpret(expr.operand)
    if expr.op == UnaryOp.NEG:
        return -val
    raise ExpressionEvalError(f"Unknown unary op: {expr.op}")


def _interpret_call(expr: Call) -> float:
    """Apply a function from the name table."""
    entry = lookup(expr.name)
    if not isinstance(entry, FunctionEntry):
        raise ExpressionEvalError(f"Unknown function: {expr.name}")
    return entry(_interpret(expr.arg))


def _divide(left: float, right: float) -> float:
    """IEEE division: x/0 is a signed infinity, 0/0 is NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        sign = math.copysign(1.0, left) * math.copysign(1.0, right)
        return math.copysign(math.inf, sign)
    return left / right


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def _power(base: float, exponent: float) -> float:
    """C ``pow()``: poles and overflow give infinities, domain errors NaN."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            # 0 raised to a negative power
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan
