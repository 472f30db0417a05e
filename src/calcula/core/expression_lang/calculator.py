"""
Line-level entry points: evaluate one line of input.

``calculate`` returns an explicit success/failure result. ``evaluate_line``
keeps the classic calculator contract where any failure reads as +inf, so a
parse error and a genuine infinity (``1/0``) look the same to the caller.
"""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from calcula.core.errors import ExpressionError
from calcula.core.expression_lang.evaluator import evaluate
from calcula.core.expression_lang.parser import Parser
from calcula.core.expression_lang.tokenizer import Lexer

logger = logging.getLogger(__name__)

SENTINEL = math.inf


class CalcResult(BaseModel):
    """Outcome of evaluating one line."""

    source: str = Field(description="The expression, without line terminator")
    value: float | None = Field(default=None, description="Result when evaluation succeeded")
    error: str | None = Field(default=None, description="Failure message")
    position: int | None = Field(default=None, description="Offset of the failure, if known")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value, or raise the failure as an ExpressionError."""
        if self.value is None or self.error is not None:
            raise ExpressionError(self.error or "No value", self.position, self.source)
        return self.value


def strip_line_terminator(line: str) -> str:
    """Remove one trailing newline (LF or CRLF) as read from a terminal."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def evaluate_lexer(lexer: Lexer) -> float:
    """Evaluate an expression starting from a primed lexer.

    The lexer must already hold its first token. Parsing stops at the first
    token that cannot continue the expression, which is left as
    ``lexer.current``.
    """
    return evaluate(Parser(lexer).parse_expr())


def calculate(source: str) -> CalcResult:
    """Evaluate a line and report success or failure explicitly."""
    line = strip_line_terminator(source)
    lexer = Lexer(line)
    parser = Parser(lexer)
    try:
        parser.advance()
        value = evaluate(parser.parse())
    except ExpressionError as e:
        logger.info("Could not evaluate %r: %s", line, e.message)
        return CalcResult(source=line, error=e.message, position=e.pos)
    except RecursionError:
        logger.info("Could not evaluate %r: nested too deeply", line)
        return CalcResult(source=line, error="Expression is nested too deeply")

    logger.debug("Evaluated %r = %r", line, value)
    return CalcResult(source=line, value=value)


def evaluate_line(source: str) -> float:
    """Evaluate a line, returning +inf if it cannot be evaluated."""
    result = calculate(source)
    if not result.ok:
        return SENTINEL
    assert result.value is not None
    return result.value
