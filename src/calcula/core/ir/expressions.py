"""
Expression types for the calcula IR.

A small typed AST for single-line arithmetic. The parser builds it and the
evaluator folds it into a float; nothing else reads or mutates it.

Supports:
- Arithmetic: +, -, *, /, ^
- Unary negation: -x
- Named constants: pi, e
- Unary function calls: sin x, log(100), lb[8]
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEG = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal, already converted to a double."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class Constant(BaseModel):
    """A named constant such as pi or e, resolved at parse time."""

    name: str = Field(description="Constant name as written")
    value: float = Field(description="Resolved value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"-{self.operand}"


class Call(BaseModel):
    """
    Call of a unary function: name(arg).

    The argument is written either bracketed (``sin(x)``, ``sin[x]``) or
    bare (``sin x``), in which case it extends over one power expression.
    """

    name: str = Field(description="Function name")
    arg: Expr = Field(description="The single argument")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name}({self.arg})"


# ---------------------------------------------------------------------------
# Union type and forward reference resolution
# ---------------------------------------------------------------------------

Expr = Number | Constant | BinaryExpr | UnaryExpr | Call

BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
Call.model_rebuild()
