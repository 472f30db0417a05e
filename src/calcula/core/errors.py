"""
Error types for calcula tokenizing, parsing, evaluation and configuration.
"""

from dataclasses import dataclass
from typing import Optional


class CalculaError(Exception):
    """Base exception for all calcula errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message

    @property
    def pos(self) -> int | None:
        """Offset into the source where the error was detected."""
        if self.context is None:
            return None
        return self.context.position


class ExpressionError(CalculaError):
    """
    Raised when an expression cannot be turned into a number.

    Subclasses separate the stage that failed:
    - ExpressionTokenError: an invalid character or decimal literal
    - ExpressionParseError: tokens that do not form an expression
    - ExpressionEvalError: an AST the evaluator cannot interpret
    """

    def __init__(self, message: str, pos: int | None = None, source: str | None = None):
        context = ErrorContext(source=source, position=pos) if pos is not None else None
        super().__init__(message, context)


class ExpressionTokenError(ExpressionError):
    """Error during expression tokenization."""


class ExpressionParseError(ExpressionError):
    """Error during expression parsing."""


class ExpressionEvalError(ExpressionError):
    """Error during expression evaluation."""


class ConfigError(CalculaError):
    """
    Raised when configuration cannot be loaded.

    Examples:
    - calcula.toml is not valid TOML
    - precision is negative or not an integer
    - CALCULA_MAX_LINE is not a number
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a single-line expression.

    Attributes:
        position: Offset (0-indexed) of the offending character
        source: Optional expression text, shown with a marker under the offset
    """

    position: int
    source: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "column 5" followed by the marked source
        """
        location = f"column {self.position + 1}"
        if self.source is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the source line with an error marker."""
        if self.source is None:
            return ""
        prefix = "    | "
        marker = " " * (len(prefix) + self.position) + "^"
        return f"{prefix}{self.source}\n{marker}"


def with_source(error: ExpressionError, source: str) -> ExpressionError:
    """
    Attach source text to an error raised without it.

    Args:
        error: Error raised by the tokenizer, parser or evaluator
        source: The expression being processed

    Returns:
        A new error of the same type carrying a snippet, or ``error``
        unchanged when it has no position or already has a source.
    """
    if error.context is None or error.context.source is not None:
        return error
    return type(error)(error.message, error.context.position, source)
