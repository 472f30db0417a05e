"""
Tokenizer for the calcula expression language.

Produces tokens on demand: the parser holds a Lexer and asks for the next
token each time it consumes the current one.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from enum import StrEnum, auto

from calcula.core.errors import ExpressionTokenError


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Default for a token that has not been lexed
    INVALID = auto()

    # Identifiers and literals
    NAME = auto()
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    @property
    def display(self) -> str:
        """Human-readable name used in error messages."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[TokenKind, str] = {
    TokenKind.INVALID: "Invalid",
    TokenKind.NAME: "Name",
    TokenKind.NUMBER: "Number",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.CARET: "^",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
}

_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}

# Space, tab, newline, carriage return, bell, vertical tab. Not form feed.
_WHITESPACE = frozenset(" \t\n\r\a\v")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _LETTERS


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "start", "end")

    def __init__(
        self,
        kind: TokenKind = TokenKind.INVALID,
        value: float = 0.0,
        start: int = 0,
        end: int = 0,
    ) -> None:
        self.kind = kind
        self.value = value
        self.start = start
        self.end = end

    @property
    def length(self) -> int:
        return self.end - self.start

    def text(self, source: str) -> str:
        """Slice this token's characters out of ``source``."""
        return source[self.start : self.end]

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.value!r}, {self.start}:{self.end})"
        return f"Token({self.kind}, {self.start}:{self.end})"


class Lexer:
    """
    Cursor over a source line.

    ``current`` is the lookahead token. ``next_token()`` replaces it and
    returns True, or returns False at end of input or on a lexical error;
    ``error`` tells the two apart.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.current = Token()
        self.error: ExpressionTokenError | None = None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def next_token(self) -> bool:
        """Lex the next token into ``current``."""
        self.current = Token()
        self.error = None
        source = self.source
        n = len(source)

        while self.pos < n:
            c = source[self.pos]

            if c in _WHITESPACE:
                self.pos += 1
                continue

            if c in _SINGLE_MAP:
                self.current = Token(_SINGLE_MAP[c], start=self.pos, end=self.pos + 1)
                self.pos += 1
                return True

            if c in _DIGITS or c == ".":
                return self._lex_decimal()

            if c in _LETTERS:
                return self._lex_identifier()

            return self._fail(f"Unexpected character: {c!r}", self.pos)

        return False

    def _lex_decimal(self) -> bool:
        """Scan a run of alphanumerics and dots as a decimal literal."""
        source = self.source
        start = self.pos
        has_dot = False

        while self.pos < len(source) and (source[self.pos] in _ALNUM or source[self.pos] == "."):
            c = source[self.pos]
            bad = self.pos
            self.pos += 1
            if c in _DIGITS:
                continue
            if c == "." and not has_dot:
                has_dot = True
                continue
            if c == ".":
                return self._fail("Extra '.' in decimal literal", bad)
            return self._fail(f"Invalid decimal literal: unexpected {c!r}", bad)

        text = source[start : self.pos]
        self.current = Token(TokenKind.NUMBER, _to_float(text), start, self.pos)
        return True

    def _lex_identifier(self) -> bool:
        """Scan a run of letters as a name."""
        source = self.source
        start = self.pos
        while self.pos < len(source) and source[self.pos] in _LETTERS:
            self.pos += 1
        self.current = Token(TokenKind.NAME, start=start, end=self.pos)
        return True

    def _fail(self, message: str, pos: int) -> bool:
        self.error = ExpressionTokenError(message, pos)
        return False

    def __iter__(self) -> Iterator[Token]:
        while self.next_token():
            yield self.current


def _to_float(text: str) -> float:
    """Convert a scanned literal; a lone '.' reads as zero."""
    if text == ".":
        return 0.0
    return float(text)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        ExpressionTokenError: On the first invalid character or literal.
    """
    lexer = Lexer(source)
    tokens = list(lexer)
    if lexer.error is not None:
        raise lexer.error
    return tokens
