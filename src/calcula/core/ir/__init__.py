"""
calcula Intermediate Representation (IR) types.

The expression AST produced by the parser and consumed by the evaluator.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Call,
    Constant,
    Expr,
    Number,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Call",
    "Constant",
    "Expr",
    "Number",
    "UnaryExpr",
    "UnaryOp",
]
